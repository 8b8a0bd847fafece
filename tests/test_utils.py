import pytest

from mdforge.utils import (
    calc_right_whitespace_with_tabstops,
    cut_right_whitespace_with_tabstops as cut_ws,
    escape_html,
    find_indent_of,
    get_entity_from_str,
    is_punct_char,
    is_valid_entity_code,
    normalize_reference,
    replace_entity_pattern,
    rfind_and_count,
    unescape_all,
)


def test_is_valid_entity_code():
    assert is_valid_entity_code(1) is False
    assert is_valid_entity_code(32) is True
    assert is_valid_entity_code(0xD800) is False
    assert is_valid_entity_code(0xFDD0) is False
    assert is_valid_entity_code(0x1FFFF) is False
    assert is_valid_entity_code(0x0B) is False
    assert is_valid_entity_code(0x110000) is False
    assert is_valid_entity_code(0x2014) is True


def test_get_entity_from_str():
    assert get_entity_from_str("&amp;") == "&"
    assert get_entity_from_str("&xxx;") is None
    assert get_entity_from_str("&amp") is None


def test_rfind_and_count():
    assert rfind_and_count("", "b") == 0
    assert rfind_and_count("abcde", "e") == 0
    assert rfind_and_count("abcde", "b") == 3
    assert rfind_and_count("abcde", "z") == 5
    assert rfind_and_count("abcεπ", "b") == 3


@pytest.mark.parametrize(
    "line, expected",
    [
        ("a", (0, 0)),
        (" a", (1, 1)),
        ("   a", (3, 3)),
        ("    ", (4, 4)),
        ("\ta", (4, 1)),
        (" \ta", (4, 2)),
        ("  \ta", (4, 3)),
        ("   \ta", (4, 4)),
        ("    \ta", (8, 5)),
        ("\tfoo", (4, 1)),
    ],
)
def test_find_indent_of_simple(line, expected):
    assert find_indent_of(line, 0) == expected


@pytest.mark.parametrize(
    "line, pos, expected",
    [
        ("   a", 2, (1, 3)),
        ("    a", 2, (2, 4)),
        ("  \ta", 2, (2, 3)),
        ("   \ta", 2, (2, 4)),
        ("    \ta", 2, (6, 5)),
        ("     \ta", 2, (6, 6)),
    ],
)
def test_find_indent_of_with_offset(line, pos, expected):
    assert find_indent_of(line, pos) == expected


@pytest.mark.parametrize(
    "pos, expected", [(1, (7, 5)), (2, (6, 5)), (3, (4, 5)), (4, (3, 5))]
)
def test_find_indent_of_tabs(pos, expected):
    assert find_indent_of("  \t \ta", pos) == expected


def test_calc_right_whitespace():
    assert calc_right_whitespace_with_tabstops("\t\t", 6) == (2, 1)


@pytest.mark.parametrize(
    "source, indent, expected",
    [
        ("abc", -1, ""),
        ("abc", 0, ""),
        ("abc", 1, "c"),
        ("abc", 2, "bc"),
        ("abc", 3, "abc"),
        ("abc", 4, "abc"),
        ("αβγδ", 1, "δ"),
        ("αβγδ ", 3, "γδ "),
        ("\t", 1, " "),
        ("\t", 2, "  "),
        ("\t", 3, "   "),
        ("\t\t\t", 5, " \t"),
        ("\t\t\t", 7, "   \t"),
        ("\t\t\t", 4, "\t"),
        ("\t\t\t", 8, "\t\t"),
        ("\t\t", 6, "  \t"),
        ("a\t", 1, " "),
        ("a\t", 2, "  "),
        ("a\t", 3, "\t"),
        ("ab\t", 3, "b\t"),
        ("abc\t", 3, "bc\t"),
        ("a\tb\t", 2, "  "),
        ("a\tb\t", 3, "\t"),
        ("a\tb\t", 4, "b\t"),
        ("a\tb\t", 5, " b\t"),
        ("a\tb\t", 6, "  b\t"),
        ("a\tb\t", 7, "\tb\t"),
        ("a\tb\t", 8, "a\tb\t"),
        ("abc\tde\tf\tg", 3, "  g"),
        ("abc\tde\tf\tg", 4, "\tg"),
        ("abc\tde\tf\tg", 5, "f\tg"),
        ("abc\tde\tf\tg", 6, " f\tg"),
        ("abc\tde\tf\tg", 7, "\tf\tg"),
        ("abc\tde\tf\tg", 9, "de\tf\tg"),
        ("abc\tde\tf\tg", 10, "\tde\tf\tg"),
    ],
)
def test_cut_ws(source, indent, expected):
    assert cut_ws(source, indent) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("&amp;", "&"),
        ("&euro;", "€"),
        ("&#8212;", "—"),
        ("&#x2014;", "—"),
        ("&#X20;", " "),
        ("&#x3F;", "?"),
        ("&ffff;", None),
        ("&#3F;", None),
        ("&#xGG;", None),
    ],
)
def test_replace_entity_pattern(text, expected):
    assert replace_entity_pattern(text) == expected


def test_unescape_all_simple():
    assert unescape_all("&amp;") == "&"
    assert unescape_all("\\&") == "&"
    assert unescape_all("plain") == "plain"


def test_unescape_all_keeps_unknown():
    assert unescape_all("&nosuchentity; \\q") == "&nosuchentity; \\q"


def test_unescape_all_xss():
    assert unescape_all("javascript&#x3A;alert(1)") == "javascript:alert(1)"
    assert unescape_all("&#74;avascript:alert(1)") == "Javascript:alert(1)"
    assert unescape_all("&#x26;#74;avascript:alert(1)") == "&#74;avascript:alert(1)"
    assert unescape_all("\\&#74;avascript:alert(1)") == "&#74;avascript:alert(1)"
    assert (
        unescape_all(
            "&#34;&#62;&#60;script&#62;alert&#40;&#34;xss&#34;&#41;&#60;/script&#62;"
        )
        == '"><script>alert("xss")</script>'
    )


def test_escape_html():
    assert escape_html('&"') == "&amp;&quot;"
    assert escape_html("<a>") == "&lt;a&gt;"


def test_normalize_reference():
    assert normalize_reference("hello") == normalize_reference("HELLO")
    assert normalize_reference("a   b") == normalize_reference("a b")
    assert normalize_reference("  Foo \n\tbar ") == "FOO BAR"
    assert normalize_reference("\u0398\u03f4\u03b8\u03d1") == "\u0398\u0398\u0398\u0398"


@pytest.mark.parametrize(
    "ch, expected",
    [("!", True), ("—", True), ("_", True), ("a", False), (" ", False), ("1", False), ("+", False)],
)
def test_is_punct_char(ch, expected):
    assert is_punct_char(ch) is expected