import pytest

from tinyini.consts import Encoding
from tinyini.normalizer import (
    MalformedLineError, is_blank, normalize, split_lines, transcode_wide
)


def test_split_narrow_lines():
    assert list(split_lines(b'[A]\r\nk=1\n', Encoding.DEFAULT)) == [
        b'[A]\r', b'k=1', b'']


def test_split_wide_lines_le():
    data = '[A]\nk=1'.encode('utf-16-le')
    assert list(split_lines(data, Encoding.UTF16LE)) == [
        '[A]'.encode('utf-16-le'), 'k=1'.encode('utf-16-le')]


def test_split_wide_lines_be():
    data = '[A]\nk=1\n'.encode('utf-16-be')
    assert list(split_lines(data, Encoding.UTF16BE)) == [
        '[A]'.encode('utf-16-be'), 'k=1'.encode('utf-16-be')]


def test_split_wide_ignores_newline_across_units():
    # U+0A41 then U+4100: `41 0A 00 41` in little endian.
    data = '\u0a41\u4100'.encode('utf-16-le')
    assert list(split_lines(data, Encoding.UTF16LE)) == [data]


def test_blank_lines_short_circuit():
    assert is_blank(b'')
    assert is_blank(b' \t\r\x00')
    assert normalize(b' \x00 \r', Encoding.UTF8) == ''
    # odd length, but blank before any pairing.
    assert normalize(b'\x00', Encoding.UTF16LE) == ''


def test_normalize_strips_only_first_null():
    assert normalize(b'\x00[A]\r', Encoding.DEFAULT) == '[A]'
    assert normalize(b'\x00\x00k=1', Encoding.UTF8) == '\x00k=1'


def test_normalize_wide_pairs():
    text = '  名称 = 值 \r'
    assert normalize(text.encode('utf-16-le'), Encoding.UTF16LE) == '名称 = 值'
    assert normalize(text.encode('utf-16-be'), Encoding.UTF16BE) == '名称 = 值'


def test_normalize_wide_surrogates():
    raw = 'k=\U0001F600'.encode('utf-16-le')
    assert normalize(raw, Encoding.UTF16LE) == 'k=\U0001F600'
    # high surrogate alone.
    assert normalize(b'k\x00\x3d\xd8', Encoding.UTF16LE) == 'k\ufffd'


def test_odd_wide_line_is_malformed():
    with pytest.raises(MalformedLineError):
        transcode_wide(b'k\x00=', Encoding.UTF16LE)
    with pytest.raises(MalformedLineError):
        normalize(b'\x00k\x00', Encoding.UTF16BE)


def test_normalize_uses_codec_for_default_only():
    raw = 'Montréal'.encode('cp1252')
    assert normalize(raw, Encoding.DEFAULT, 'cp1252') == 'Montréal'
    # a UTF-8 BOM overrides the codec.
    assert normalize('é'.encode('utf-8'), Encoding.UTF8, 'cp1252') == 'é'


def test_normalize_replaces_undecodable_bytes():
    assert normalize(b'k=\xff', Encoding.UTF8) == 'k=\ufffd'
