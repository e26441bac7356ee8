# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 21:30:18
# @Author : Kariko Lin

"""Read INI files of unknown encoding.

The pipeline runs once per file, in a single pass:

    bytes -> sniff() -> split_lines() -> normalize() -> parse_line()

Only UTF-8 and UTF-16 (either byte order) are told apart by BOM.
A BOM-less file is decoded with the codec given by caller, or with
whatever `chardet` is confident about, or utf-8.
"""

import codecs
import logging
from os import PathLike
from typing import BinaryIO

from .abstract import FileHandler
from .consts import (
    COMMENT_PREFIXES, DEFAULT_CODEC, DETECT_CONFIDENCE, WIDE_CODECS,
    Encoding
)
from .model import IniDocument
from .normalizer import MalformedLineError, normalize, split_lines
from .sniffer import guess_codec, sniff

_logger = logging.getLogger(__name__)


def parse_line(
    current: str, line: str, sections: dict[str, dict[str, str]]
) -> str:
    """Apply one normalized line to `sections`.

    Args:
        current: name of the section being filled, `''` before any.
        line: a trimmed line, see `normalizer.normalize()`.
        sections: the accumulator, mutated in place.

    Returns:
        the section name the *next* line belongs to.
    """
    if not line or line[0] in COMMENT_PREFIXES:
        return current

    if line[0] == '[':
        if line[-1] != ']':
            _logger.debug(f'unclosed section header skipped: {line}')
            return current
        name = line[1:-1].strip()
        sections.setdefault(name, {})
        # `[]` is kept, but as cursor `''` drops the pairs below it.
        return name

    if not current:
        _logger.debug(f'pair outside any section dropped: {line}')
        return current
    key, sep, val = line.partition('=')
    if not sep:
        _logger.debug(f'line without "=" skipped: {line}')
        return current
    sections[current].setdefault(key.strip(), val.strip())
    return current


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        confidence: float = DETECT_CONFIDENCE
    ) -> None:
        """
        Args:
            encoding: codec for BOM-less files. `None` to let `chardet`
                guess. A BOM always wins over it. utf-16(-le/-be) reads
                the file as BOM-less UTF-16.
            confidence: the least `chardet` confidence to trust.
        """
        super().__init__(filename)
        self._codec = encoding
        self._confidence = confidence

    @staticmethod
    def readstream(
        fp: BinaryIO,
        encoding: str | None = None,
        confidence: float = DETECT_CONFIDENCE
    ) -> IniDocument:
        """Read a binary stream from its beginning.

        Malformed lines are skipped, never raised.

        CAUTION:
            Raises `LookupError` if `encoding` is not a known codec,
            and may raise `OSError` as the stream does.
        """
        if encoding is not None:
            encoding = codecs.lookup(encoding).name

        source = sniff(fp)
        data = fp.read()
        codec = DEFAULT_CODEC
        if source is Encoding.DEFAULT:
            codec = encoding or guess_codec(data, confidence)
            source = WIDE_CODECS.get(codec, source)
            _logger.debug(f'no BOM, decoding as {codec}')

        sections: dict[str, dict[str, str]] = {}
        this_sect = ''
        for lineno, raw in enumerate(split_lines(data, source), 1):
            try:
                line = normalize(raw, source, codec)
            except MalformedLineError as e:
                _logger.debug(f'line {lineno} skipped: {e}')
                continue
            this_sect = parse_line(this_sect, line, sections)
        return IniDocument(sections)

    def read(self) -> IniDocument:
        """Read the file this `IniParser` is bound to.

        Hint:
            A missing or unreadable file is not an error, but a warning
            and an empty `IniDocument`.
        """
        try:
            with open(self._fn, 'rb') as fp:
                return self.readstream(fp, self._codec, self._confidence)
        except OSError as e:
            _logger.warning(f'INI not readable, treated as empty:\n  {e}')
            return IniDocument()

    def __str__(self) -> str:
        return "INI: " + super().__str__() + f"({self._codec})"


def read_ini(
    filename: str | PathLike[str], encoding: str | None = None
) -> IniDocument:
    """Shortcut of `IniParser(filename, encoding).read()`."""
    return IniParser(filename, encoding).read()
