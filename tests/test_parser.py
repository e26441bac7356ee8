from io import BytesIO

from tinyini.parser import IniParser, parse_line


def _feed(*lines: str) -> dict[str, dict[str, str]]:
    sections: dict[str, dict[str, str]] = {}
    current = ''
    for i in lines:
        current = parse_line(current, i, sections)
    return sections


def test_comments_and_blanks_keep_cursor():
    sections = {'A': {}}
    assert parse_line('A', '', sections) == 'A'
    assert parse_line('A', '; k=1', sections) == 'A'
    assert parse_line('A', '# k=1', sections) == 'A'
    assert sections == {'A': {}}


def test_section_header_trimmed_and_reused():
    assert _feed('[ A ]', 'k=1', '[B]', '[A]', 'j=2') == {
        'A': {'k': '1', 'j': '2'}, 'B': {}}


def test_unclosed_header_keeps_previous_section():
    assert _feed('[A]', '[B', 'k=1') == {'A': {'k': '1'}}


def test_empty_header_kept_but_closes_section():
    assert _feed('[A]', '[ ]', 'k=1') == {'A': {}, '': {}}
    assert _feed('[]', 'k=1', '[]') == {'': {}}


def test_pairs_split_on_first_equal_sign():
    assert _feed('[A]', 'url = http://x?y=1', '=v', 'k=') == {
        'A': {'url': 'http://x?y=1', '': 'v', 'k': ''}}


def test_first_value_wins():
    assert _feed('[A]', 'k=1', 'k = 2', '[A]', 'k=3') == {'A': {'k': '1'}}


def test_orphans_and_lines_without_equal_sign_dropped():
    assert _feed('k=1', 'garbage', '[A]', 'garbage', 'j=2') == {
        'A': {'j': '2'}}


def test_keys_and_sections_case_sensitive():
    assert _feed('[A]', 'K=1', 'k=2', '[a]') == {
        'A': {'K': '1', 'k': '2'}, 'a': {}}


def test_readstream_skips_malformed_wide_line(caplog):
    good = '[A]\nk=1\n'.encode('utf-16-le')
    # a truncated last line: one byte short of a code unit.
    raw = b'\xff\xfe' + good + 'j=2'.encode('utf-16-le')[:-1]
    with caplog.at_level('DEBUG', logger='tinyini'):
        doc = IniParser.readstream(BytesIO(raw))
    assert doc.to_dict() == {'A': {'k': '1'}}
    assert any('line 3 skipped' in i.getMessage() for i in caplog.records)
