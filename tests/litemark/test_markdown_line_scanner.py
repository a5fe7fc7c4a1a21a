"""
Tests for the markdown line scanner
"""
import pytest

from litemark.markdown_line_scanner import MarkdownLineScanner


def test_basic_cursor_movement():
    """Test peek and advance, including advancing past the end."""
    scanner = MarkdownLineScanner("abc")
    assert scanner.peek() == "a"
    assert scanner.peek(2) == "c"
    assert scanner.peek(3) == ""
    assert scanner.advance() == "a"
    assert scanner.position == 1
    assert scanner.advance(5) == "bc"
    assert scanner.at_end()
    assert scanner.advance() == ""


def test_position_rollback():
    """Test that a saved position can be restored."""
    scanner = MarkdownLineScanner("hello")
    saved = scanner.position
    scanner.advance(3)
    scanner.position = saved
    assert scanner.position == 0
    assert scanner.advance(5) == "hello"


def test_position_out_of_range():
    """Test that positions past the line are rejected."""
    scanner = MarkdownLineScanner("ab")
    with pytest.raises(AssertionError):
        scanner.position = 3


def test_scan_string():
    """Test matching a literal string."""
    scanner = MarkdownLineScanner("](x)")
    assert scanner.scan_string("[") is None
    assert scanner.position == 0
    assert scanner.scan_string("](") == "]("
    assert scanner.position == 2


def test_scan_characters_and_up_to():
    """Test scanning runs in and out of a character set."""
    scanner = MarkdownLineScanner("123abc*x")
    assert scanner.scan_characters("0123456789") == "123"
    assert scanner.scan_characters("0123456789") is None
    assert scanner.scan_up_to_characters("*") == "abc"
    assert scanner.scan_up_to_characters("*") is None
    assert scanner.peek() == "*"


def test_scan_run():
    """Test scanning a run of one repeated character."""
    scanner = MarkdownLineScanner("***__x")
    assert scanner.scan_run() == "***"
    assert scanner.scan_run() == "__"
    assert scanner.scan_run() == "x"
    assert scanner.scan_run() == ""


@pytest.mark.parametrize("line,level,rest", [
    ("> a", 1, "a"),
    (">> a", 2, "a"),
    ("> > > a", 3, "a"),
    (">a", 1, "a"),
])
def test_scan_quote_prefix(line, level, rest):
    """Test quote prefixes and their levels."""
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_quote_prefix() == level
    assert line[scanner.position:] == rest


def test_scan_quote_prefix_absent():
    """Test a line with no quote prefix."""
    scanner = MarkdownLineScanner(" > a")
    assert scanner.scan_quote_prefix() is None
    assert scanner.position == 0


@pytest.mark.parametrize("line,level,rest", [
    ("# a", 1, "a"),
    ("### a b", 3, "a b"),
    ("##\tx", 2, "x"),
])
def test_scan_heading(line, level, rest):
    """Test heading prefixes."""
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_heading() == level
    assert line[scanner.position:] == rest


@pytest.mark.parametrize("line", ["#a", "#", "a #"])
def test_scan_heading_absent(line):
    """Test that a hash run without following whitespace is not a heading."""
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_heading() is None
    assert scanner.position == 0


@pytest.mark.parametrize("line,expected", [
    ("---", "---"),
    ("-----", "-----"),
    ("---   ", "---"),
    ("--", None),
    ("--- a", None),
    ("- - -", None),
])
def test_scan_horizontal_rule(line, expected):
    """Test horizontal rule detection."""
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_horizontal_rule() == expected
    if expected is None:
        assert scanner.position == 0

    else:
        assert scanner.at_end()


@pytest.mark.parametrize("line,expected,rest", [
    ("- item", "- ", "item"),
    ("* item", "* ", "item"),
    ("-item", None, "-item"),
    ("+ item", None, "+ item"),
])
def test_scan_unordered_list(line, expected, rest):
    """Test unordered list markers."""
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_unordered_list() == expected
    assert line[scanner.position:] == rest


@pytest.mark.parametrize("line,expected,rest", [
    ("1. item", "1", "item"),
    ("42. item", "42", "item"),
    ("1.item", None, "1.item"),
    ("1) item", None, "1) item"),
    ("a. item", None, "a. item"),
])
def test_scan_ordered_list(line, expected, rest):
    """Test ordered list markers."""
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_ordered_list() == expected
    assert line[scanner.position:] == rest


def test_scan_bracketed_reference_link():
    """Test scanning a link reference."""
    line = "[a b](http://x.y/z) tail"
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_bracketed_reference("[") == ("a b", "http://x.y/z")
    assert line[scanner.position:] == " tail"


def test_scan_bracketed_reference_image():
    """Test scanning an image reference."""
    scanner = MarkdownLineScanner("![alt](a.png)")
    assert scanner.scan_bracketed_reference("![") == ("alt", "a.png")
    assert scanner.at_end()


def test_scan_bracketed_reference_empty_target():
    """Test that an empty target is allowed."""
    scanner = MarkdownLineScanner("[t]()")
    assert scanner.scan_bracketed_reference("[") == ("t", "")


@pytest.mark.parametrize("line,opener", [
    ("[t](u", "["),
    ("[t] (u)", "["),
    ("[](u)", "["),
    ("![](u)", "!["),
    ("!t](u)", "!["),
    ("x[t](u)", "["),
])
def test_scan_bracketed_reference_failures(line, opener):
    """Test that failed references consume nothing."""
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_bracketed_reference(opener) is None
    assert scanner.position == 0


def test_scan_inline_code():
    """Test scanning a code span."""
    line = "`a *b*` c"
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_inline_code() == "a *b*"
    assert line[scanner.position:] == " c"


@pytest.mark.parametrize("line", ["`abc", "``", "x`a`"])
def test_scan_inline_code_failures(line):
    """Test unclosed, empty and misplaced code spans."""
    scanner = MarkdownLineScanner(line)
    assert scanner.scan_inline_code() is None
    assert scanner.position == 0
