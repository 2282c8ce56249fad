"""Attribute grammar and object assembler.

Both work on a :class:`LineCursor` and produce view values whose text is a
:class:`Span` of the cursor's buffer; nothing here copies value text.
"""

from __future__ import annotations

import re

from .errors import (
    ContinuationWithoutAttribute,
    EmptyObject,
    InvalidAttributeName,
    UnexpectedEndOfInput,
)
from .scanner import CONTINUATION_CHAR, NAME_RE, Line, LineCursor, LineKind
from .span import Span
from .view import AttributeView, MultilineView, NameView, ObjectView, SingleLineView

_NON_SPACE_RE = re.compile(r"\S")


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def trimmed_span(text: str, start: int, end: int) -> Span | None:
    """Span of ``text[start:end]`` without surrounding whitespace, or ``None``."""
    first = _NON_SPACE_RE.search(text, start, end)
    if first is None:
        return None
    start = first.start()
    while text[end - 1].isspace():
        end -= 1
    return Span(text, start, end)


def _continuation_value(text: str, line: Line) -> Span | None:
    start = line.start
    if text[start] == CONTINUATION_CHAR:
        start += 1
    return trimmed_span(text, start, line.end)


# ---------------------------------------------------------------------------
# Attribute
# ---------------------------------------------------------------------------

def parse_name(text: str, line: Line) -> tuple[NameView, int]:
    """Return the name of an attribute start line and the offset of its colon."""
    colon = text.find(":", line.start, line.end)
    if colon == -1:
        raise InvalidAttributeName(
            f"expected 'name:' but found {text[line.start:line.end]!r}",
            line=line.number,
            offset=line.start,
        )
    if colon == line.start:
        raise InvalidAttributeName(
            "attribute name is empty", line=line.number, offset=line.start
        )
    if NAME_RE.fullmatch(text, line.start, colon) is None:
        raise InvalidAttributeName(
            f"invalid attribute name {text[line.start:colon]!r}",
            line=line.number,
            offset=line.start,
        )
    return NameView(Span(text, line.start, colon)), colon


def parse_attribute(cursor: LineCursor) -> AttributeView:
    """Consume an attribute start line and its continuation lines.

    Comment lines between continuation lines are skipped. A line holding
    only whitespace continues the attribute with an absent value; only a
    truly empty line is left for the assembler to end the object on.
    """
    text = cursor.text
    line = cursor.advance()
    if line is None:
        raise UnexpectedEndOfInput("expected an attribute", line=cursor.number, offset=cursor.position)
    if line.kind is LineKind.CONTINUATION:
        raise ContinuationWithoutAttribute(
            "continuation line without a preceding attribute",
            line=line.number,
            offset=line.start,
        )

    name, colon = parse_name(text, line)
    first = trimmed_span(text, colon + 1, line.end)

    continuation: list[Span | None] | None = None
    while True:
        nxt = cursor.peek()
        if nxt is None:
            break
        if nxt.kind is LineKind.COMMENT:
            cursor.advance()
            continue
        if nxt.kind is LineKind.CONTINUATION:
            value = _continuation_value(text, nxt)
        elif nxt.kind is LineKind.BLANK and not nxt.is_empty:
            # Whitespace-only line directly after an attribute: empty continuation.
            value = None
        else:
            break
        cursor.advance()
        if continuation is None:
            continuation = [first]
        continuation.append(value)

    if continuation is None:
        return AttributeView(name, SingleLineView(first))
    return AttributeView(name, MultilineView(tuple(continuation)))


# ---------------------------------------------------------------------------
# Object
# ---------------------------------------------------------------------------

def assemble_object(cursor: LineCursor) -> ObjectView:
    """Read attributes up to a blank line (consumed) or the end of input.

    Whitespace-only lines are blank here only where they do not follow an
    attribute, e.g. at the very start of the object.
    """
    text = cursor.text
    start, number = cursor.position, cursor.number
    if cursor.peek() is None:
        raise UnexpectedEndOfInput("expected an object", line=number, offset=start)

    attributes: list[AttributeView] = []
    while True:
        line = cursor.peek()
        if line is None:
            break
        if line.kind is LineKind.BLANK:
            cursor.advance()
            break
        if line.kind is LineKind.COMMENT:
            cursor.advance()
            continue
        attributes.append(parse_attribute(cursor))

    if not attributes:
        raise EmptyObject("object has no attributes", line=number, offset=start)
    return ObjectView(tuple(attributes), Span(text, start, cursor.position))
