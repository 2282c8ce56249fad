"""Tests for the line scanner."""

import pytest

from rpsl_parser.scanner import LineCursor, LineKind, classify, scan_lines


def _kind(line: str) -> LineKind:
    return classify(line, 0, len(line))


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("line", ["", " ", "\t", "   \t  "])
def test_blank(line):
    assert _kind(line) is LineKind.BLANK

@pytest.mark.parametrize("line", [
    "% Note: this output has been filtered.",
    "%",
    "# local comment",
    "   % indented server message",
    "\t# indented comment",
])
def test_comment(line):
    assert _kind(line) is LineKind.COMMENT

@pytest.mark.parametrize("line", [
    "    continuation value prefixed by a space",
    "\tcontinuation value prefixed by a tab",
    "+    continuation value prefixed by a plus",
    "+",
    "+ # not a comment",
])
def test_continuation(line):
    assert _kind(line) is LineKind.CONTINUATION

@pytest.mark.parametrize("line", [
    "remarks:        Locations",
    "aut-num:",
    "ASNumber:       32934",
    "route6:         2001:db8::/32",
    ": no name",
    "no colon at all",
])
def test_attribute_start(line):
    assert _kind(line) is LineKind.ATTRIBUTE_START


# ---------------------------------------------------------------------------
# scan_lines
# ---------------------------------------------------------------------------

def test_scan_lines_offsets_and_numbers():
    text = "role: a\n  b\n\nnic-hdl: x"
    lines = list(scan_lines(text))
    assert [l.kind for l in lines] == [
        LineKind.ATTRIBUTE_START,
        LineKind.CONTINUATION,
        LineKind.BLANK,
        LineKind.ATTRIBUTE_START,
    ]
    assert [l.number for l in lines] == [1, 2, 3, 4]
    assert text[lines[0].start:lines[0].end] == "role: a"
    assert text[lines[3].start:lines[3].end] == "nic-hdl: x"
    assert lines[3].next_start == len(text)

def test_scan_lines_crlf():
    text = "role: a\r\n\r\nsource: b\r\n"
    lines = list(scan_lines(text))
    assert [l.kind for l in lines] == [
        LineKind.ATTRIBUTE_START,
        LineKind.BLANK,
        LineKind.ATTRIBUTE_START,
    ]
    assert text[lines[0].start:lines[0].end] == "role: a"

def test_scan_lines_empty_input():
    assert list(scan_lines("")) == []

def test_scan_lines_from_offset():
    text = "a: 1\nb: 2\n"
    lines = list(scan_lines(text, 5, 2))
    assert len(lines) == 1
    assert lines[0].number == 2
    assert lines[0].start == 5

def test_scan_lines_is_lazy():
    lines = scan_lines("a: 1\n" * 3)
    first = next(lines)
    assert first.number == 1


# ---------------------------------------------------------------------------
# LineCursor
# ---------------------------------------------------------------------------

def test_cursor_peek_does_not_consume():
    cursor = LineCursor("a: 1\nb: 2\n")
    assert cursor.peek() is cursor.peek()
    assert cursor.advance().number == 1
    assert cursor.peek().number == 2

def test_cursor_position_tracks_consumed_lines():
    cursor = LineCursor("a: 1\nb: 2\n")
    assert cursor.position == 0
    cursor.advance()
    assert cursor.position == 5
    assert cursor.number == 2
    cursor.advance()
    assert cursor.advance() is None
    assert cursor.peek() is None
    assert cursor.position == 10
