# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 20:13:05
# @Author : Kariko Lin

from codecs import BOM_UTF8, BOM_UTF16_BE, BOM_UTF16_LE
from enum import Enum


class Encoding(int, Enum):
    DEFAULT = 0  # no BOM; left to the codec hint or chardet.
    UTF8 = 1
    UTF16LE = 2
    UTF16BE = 3
    # UTF-32, UTF-1, UTF-EBCDIC, SCSU, BOCU-1 and GB18030 BOMs
    # are never sniffed, so they are not listed.


# checked in order after every byte read.
BYTE_ORDER_MARKS: dict[bytes, Encoding] = {
    BOM_UTF16_LE: Encoding.UTF16LE,
    BOM_UTF16_BE: Encoding.UTF16BE,
    BOM_UTF8: Encoding.UTF8,
}

BOM_WINDOW = 4

COMMENT_PREFIXES = (';', '#')

# chardet guesses below this are not trusted.
DETECT_CONFIDENCE = 0.8
DEFAULT_CODEC = 'utf-8'

# BOM-less wide text named by a codec hint or a chardet guess.
# plain `utf-16` without BOM is read as little endian, like Python does.
WIDE_CODECS: dict[str, Encoding] = {
    'utf-16': Encoding.UTF16LE,
    'utf-16-le': Encoding.UTF16LE,
    'utf-16-be': Encoding.UTF16BE,
}
