# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 21:58:50
# @Author : Kariko Lin

import logging

from .consts import Encoding
from .model import IniSection, IniDocument
from .normalizer import MalformedLineError
from .parser import IniParser, parse_line, read_ini
from .sniffer import sniff

__all__ = [
    'Encoding', 'IniSection', 'IniDocument',
    'IniParser', 'MalformedLineError',
    'parse_line', 'read_ini', 'sniff'
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
