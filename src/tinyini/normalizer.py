# -*- encoding: utf-8 -*-
# @File   : normalizer.py
# @Time   : 2026/10/19 20:41:27
# @Author : Kariko Lin

"""Split a sniffed payload into raw lines, and turn each into a `str`.

UTF-16 lines are rebuilt code unit by code unit from byte pairs,
everything else goes through a narrow codec.
"""

import logging
from typing import Iterator

from .consts import DEFAULT_CODEC, Encoding

_logger = logging.getLogger(__name__)

# ASCII whitespace plus NUL, in either byte of a UTF-16 unit.
_BLANK_BYTES = frozenset(b' \t\n\r\x0b\x0c\x00')

_WIDE_NEWLINES = {
    Encoding.UTF16LE: b'\n\x00',
    Encoding.UTF16BE: b'\x00\n',
}


class MalformedLineError(ValueError):
    """A raw line that cannot be transcoded at all."""
    pass


def split_lines(data: bytes, encoding: Encoding) -> Iterator[bytes]:
    """Yield raw lines of `data`, without their newline."""
    if encoding not in _WIDE_NEWLINES:
        yield from data.split(b'\n')
        return

    newline = _WIDE_NEWLINES[encoding]
    start = 0
    pos = data.find(newline)
    while pos != -1:
        # an odd offset straddles two code units, like U+0Axx U+yy00
        # in little endian (`xx 0A 00 yy`).
        if pos % 2:
            pos = data.find(newline, pos + 1)
            continue
        yield data[start:pos]
        start = pos + 2
        pos = data.find(newline, start)
    if start < len(data):
        yield data[start:]


def is_blank(raw: bytes) -> bool:
    return all(i in _BLANK_BYTES for i in raw)


def _join_units(units: list[int]) -> str:
    # fold surrogate pairs, lone ones become U+FFFD.
    return ''.join(map(chr, units)).encode(
        'utf-16-le', 'surrogatepass').decode('utf-16-le', 'replace')


def transcode_wide(raw: bytes, encoding: Encoding) -> str:
    """Rebuild UTF-16 code units from byte pairs of `raw`.

    Raises:
        MalformedLineError: `raw` has an odd number of bytes.
    """
    if len(raw) % 2:
        raise MalformedLineError(
            f'{len(raw)} bytes cannot pair into {encoding.name} code units')
    if encoding is Encoding.UTF16LE:
        units = [raw[i] | (raw[i + 1] << 8) for i in range(0, len(raw), 2)]
    else:
        units = [raw[i + 1] | (raw[i] << 8) for i in range(0, len(raw), 2)]
    return _join_units(units)


def decode_narrow(raw: bytes, codec: str = DEFAULT_CODEC) -> str:
    # a stray NUL may lead the line when wide text was cut as narrow.
    if raw[:1] == b'\x00':
        raw = raw[1:]
    try:
        return raw.decode(codec)
    except UnicodeDecodeError as e:
        _logger.debug(f'{e}, decoding with replacement chars')
        return raw.decode(codec, 'replace')


def normalize(
    raw: bytes, encoding: Encoding, codec: str = DEFAULT_CODEC
) -> str:
    """Transcode one raw line and trim it.

    `codec` only matters for `Encoding.DEFAULT`; a UTF-8 BOM always
    means utf-8. Blank lines return `''` without being transcoded.
    """
    if is_blank(raw):
        return ''
    match encoding:
        case Encoding.UTF16LE | Encoding.UTF16BE:
            text = transcode_wide(raw, encoding)
        case Encoding.UTF8:
            text = decode_narrow(raw, 'utf-8')
        case _:
            text = decode_narrow(raw, codec)
    return text.strip()
