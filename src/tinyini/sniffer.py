# -*- encoding: utf-8 -*-
# @File   : sniffer.py
# @Time   : 2026/10/19 20:24:10
# @Author : Kariko Lin

"""Figure out how an INI byte stream is encoded.

A BOM, if any, decides it. Otherwise the stream is rewound untouched
and the payload is left to a codec hint, or to `chardet` as the last
resort.
"""

import codecs
import logging
from typing import BinaryIO

import chardet

from .consts import (
    BOM_WINDOW, BYTE_ORDER_MARKS, DEFAULT_CODEC, DETECT_CONFIDENCE,
    WIDE_CODECS, Encoding
)

_logger = logging.getLogger(__name__)

# lines are split and classified by these bytes on the narrow path.
_ASCII_SAMPLE = '[]=;# \t\r\n'


def sniff(stream: BinaryIO) -> Encoding:
    """Consume a leading BOM from `stream` and tell its encoding.

    At most `BOM_WINDOW` bytes are read, one at a time, and reading stops
    right after a recognized mark. If nothing matches, the stream is
    sought back to 0 so those bytes are read again as data.

    CAUTION:
        `stream` must be opened in binary mode and be seekable.
    """
    head = b''
    while len(head) < BOM_WINDOW:
        c = stream.read(1)
        if not c:
            break
        head += c
        if (encoding := BYTE_ORDER_MARKS.get(head)) is not None:
            _logger.debug(f'BOM {head.hex(" ")} found: {encoding.name}')
            return encoding
    stream.seek(0)
    return Encoding.DEFAULT


def guess_codec(data: bytes, confidence: float = DETECT_CONFIDENCE) -> str:
    """Ask `chardet` for the codec of a BOM-less payload.

    Falls back to utf-8 on an empty payload, an unconvincing guess, or
    a codec Python does not have. UTF-16 guesses are kept (see
    `consts.WIDE_CODECS`), other codecs must be ASCII-compatible.
    """
    guess = chardet.detect(data)
    if guess['encoding'] is None or guess['confidence'] < confidence:
        _logger.debug(
            f'chardet guess {guess} not trusted, using {DEFAULT_CODEC}')
        return DEFAULT_CODEC
    if (codec := usable_codec(guess['encoding'])) is None:
        _logger.debug(
            f'chardet guess {guess} not usable, using {DEFAULT_CODEC}')
        return DEFAULT_CODEC
    return codec


def usable_codec(name: str) -> str | None:
    """Normalized name of `name`, or `None` if it can't read INI lines."""
    try:
        name = codecs.lookup(name).name
    except LookupError:
        return None
    if name in WIDE_CODECS:
        return name
    try:
        if _ASCII_SAMPLE.encode(name) != _ASCII_SAMPLE.encode('ascii'):
            return None
    except (UnicodeError, LookupError):
        return None
    return name
