from pathlib import Path

import pytest

from doclinks.api.link._parsers import LinkRef, MarkdownParser, get_parser


def _parse(text: str) -> list[LinkRef]:
    return list(MarkdownParser().parse(text))


def test_parse_reports_line_and_column():
    refs = _parse("x\n\n  [a](b) [c](d)")
    assert [(r.line_number, r.column_number, r.raw_target) for r in refs] == [(3, 3, "b"), (3, 10, "d")]


def test_parse_preserves_document_order():
    refs = _parse("[one](1)\n[two](2)\ntext [three](3)")
    assert [r.alias for r in refs] == ["one", "two", "three"]
    assert [r.line_number for r in refs] == [1, 2, 3]


def test_parse_link_spanning_lines():
    refs = _parse("intro\n[multi\nline](target.md)\n[next](n)")
    assert refs[0].raw_target == "target.md"
    assert refs[0].line_number == 2
    assert refs[1].line_number == 4
    assert refs[1].column_number == 1


def test_parse_image_is_embed():
    refs = _parse("![logo](img/logo.png) [doc](doc.md)")
    assert refs[0].is_embed is True
    assert refs[0].raw_target == "img/logo.png"
    assert refs[1].is_embed is False


def test_parse_strips_whitespace():
    (ref,) = _parse("[ spaced ](  path/to  )")
    assert ref.alias == "spaced"
    assert ref.raw_target == "path/to"


def test_parse_skips_empty_text_and_reference_links():
    assert _parse("[](empty.md) [ref][label] [plain]") == []


def test_parse_target_stops_at_first_closing_paren():
    (ref,) = _parse("[wiki](https://en.wikipedia.org/wiki/Foo_(bar))")
    assert ref.raw_target == "https://en.wikipedia.org/wiki/Foo_(bar"


def test_parse_title_becomes_part_of_target():
    (ref,) = _parse('[a](page.md "Title")')
    assert ref.raw_target == 'page.md "Title"'


def test_get_parser_by_name_and_extension():
    assert isinstance(get_parser("markdown"), MarkdownParser)
    assert isinstance(get_parser(file_path=Path("README.MD")), MarkdownParser)
    assert isinstance(get_parser(file_path=Path("notes.unknown")), MarkdownParser)


def test_get_parser_invalid():
    with pytest.raises(ValueError, match="Unknown parser: invalid"):
        get_parser("invalid")
