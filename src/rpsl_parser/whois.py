"""WHOIS response splitting: every object of a multi-object server response."""

from __future__ import annotations

import logging
import re

from .errors import ParseError, WhoisResponseError
from .grammar import assemble_object, trimmed_span
from .scanner import LineCursor, LineKind, scan_lines
from .span import Span
from .view import ObjectView

logger = logging.getLogger(__name__)

_SKIPPED = (LineKind.BLANK, LineKind.COMMENT)
_NON_SPACE_RE = re.compile(r"\S")


def split_response(text: str) -> list[ObjectView]:
    """Parse all objects in ``text``, in order.

    Blank and comment lines between objects are skipped. The first object
    that fails to parse aborts the whole call with a
    :class:`WhoisResponseError`.
    """
    cursor = LineCursor(text)
    objects: list[ObjectView] = []

    while True:
        line = cursor.peek()
        if line is None:
            break
        if line.kind in _SKIPPED:
            cursor.advance()
            continue
        try:
            objects.append(assemble_object(cursor))
        except ParseError as exc:
            raise WhoisResponseError(
                exc, object_index=len(objects), line=line.number, offset=line.start
            ) from exc

    logger.debug("split %d objects from %d characters", len(objects), len(text))
    return objects


def server_messages(text: str) -> list[Span]:
    """Text of every ``%`` line, without the ``%`` and the spaces after it.

    WHOIS servers use these lines for banners and response codes, e.g.
    ``% This query was served by the RIPE Database Query Service``.
    """
    messages: list[Span] = []
    for line in scan_lines(text):
        if line.kind is not LineKind.COMMENT:
            continue
        marker = _NON_SPACE_RE.search(text, line.start, line.end).start()
        if text[marker] != "%":
            continue
        message = trimmed_span(text, marker + 1, line.end)
        messages.append(message if message is not None else Span(text, line.end, line.end))
    return messages
