"""Line scanner: classifies each physical line of RPSL text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

_NON_SPACE_RE = re.compile(r"\S")

COMMENT_CHARS = "%#"
CONTINUATION_CHAR = "+"

# Attribute names: ASCII letters, digits and hyphen.
NAME_RE = re.compile(r"[A-Za-z0-9-]+")


class LineKind(Enum):
    ATTRIBUTE_START = auto()
    CONTINUATION = auto()
    COMMENT = auto()
    BLANK = auto()


@dataclass(frozen=True, slots=True)
class Line:
    """One physical line. ``[start, end)`` excludes the line terminator."""

    kind: LineKind
    number: int
    start: int
    end: int
    next_start: int

    @property
    def is_empty(self) -> bool:
        """True for a zero-length line, as opposed to one holding only whitespace."""
        return self.start == self.end


def classify(text: str, start: int, end: int) -> LineKind:
    """Classify ``text[start:end]`` by its leading characters.

    Anything that is not blank, a comment or a continuation is treated as an
    attribute start; the grammar decides whether its name is valid.
    """
    first = _NON_SPACE_RE.search(text, start, end)
    if first is None:
        return LineKind.BLANK
    if text[start] == CONTINUATION_CHAR:
        return LineKind.CONTINUATION
    if text[first.start()] in COMMENT_CHARS:
        return LineKind.COMMENT
    if first.start() > start:
        return LineKind.CONTINUATION
    return LineKind.ATTRIBUTE_START


def scan_lines(text: str, start: int = 0, number: int = 1) -> Iterator[Line]:
    """Lazily yield classified lines of ``text`` beginning at offset ``start``.

    Both ``\\n`` and ``\\r\\n`` terminate a line. A final line without a
    terminator is still yielded.
    """
    length = len(text)
    pos = start
    while pos < length:
        newline = text.find("\n", pos)
        if newline == -1:
            end = next_start = length
        else:
            end, next_start = newline, newline + 1
        if end > pos and text[end - 1] == "\r":
            end -= 1
        yield Line(classify(text, pos, end), number, pos, end, next_start)
        number += 1
        pos = next_start


class LineCursor:
    """``scan_lines`` with one line of look-ahead."""

    def __init__(self, text: str, start: int = 0, number: int = 1) -> None:
        self.text = text
        self._lines = scan_lines(text, start, number)
        self._pending: Line | None = None
        self._exhausted = False
        # Position just past the last consumed line.
        self.position = start
        self.number = number

    def peek(self) -> Line | None:
        if self._pending is None and not self._exhausted:
            self._pending = next(self._lines, None)
            if self._pending is None:
                self._exhausted = True
        return self._pending

    def advance(self) -> Line | None:
        line = self.peek()
        if line is not None:
            self._pending = None
            self.position = line.next_start
            self.number = line.number + 1
        return line
