"""Canonical RPSL rendering and native traversal of owned and view objects."""

from __future__ import annotations

from typing import Any, Iterable

from .content import content_key
from .scanner import COMMENT_CHARS, CONTINUATION_CHAR

NAME_COLUMN = 16


def render_attribute(attribute: Any) -> str:
    """Render one attribute as RPSL lines, each terminated by ``\\n``.

    Values start at column 16. Continuation values that are absent, or that
    would read as a comment, use the ``+`` continuation marker.
    """
    kind, payload = content_key(attribute.value)
    if kind == "single":
        first, rest = payload, ()
    else:
        first, rest = payload[0], payload[1:]

    lines = [_start_line(f"{attribute.name}:", first)]
    lines.extend(_continuation_line(value) for value in rest)
    return "".join(line + "\n" for line in lines)


def render_object(obj: Iterable[Any]) -> str:
    return "".join(render_attribute(attribute) for attribute in obj)


def render_objects(objects: Iterable[Iterable[Any]]) -> str:
    """Render several objects separated by blank lines."""
    return "\n".join(render_object(obj) for obj in objects)


def _start_line(label: str, value: str | None) -> str:
    if value is None:
        return label
    if len(label) >= NAME_COLUMN:
        return f"{label} {value}"
    return f"{label:<{NAME_COLUMN}}{value}"


def _continuation_line(value: str | None) -> str:
    if value is None:
        return CONTINUATION_CHAR
    if value[0] in COMMENT_CHARS:
        return f"{CONTINUATION_CHAR:<{NAME_COLUMN}}{value}"
    return " " * NAME_COLUMN + value


# ---------------------------------------------------------------------------
# Native traversal
# ---------------------------------------------------------------------------

def to_native(obj: Iterable[Any]) -> list[tuple[str, Any]]:
    """Convert an object to ``[(name, value), ...]`` using built-in types.

    Single-line values become ``str | None``; multiline values become a list
    of ``str | None``.
    """
    native: list[tuple[str, Any]] = []
    for attribute in obj:
        kind, payload = content_key(attribute.value)
        value = payload if kind == "single" else list(payload)
        native.append((str(attribute.name), value))
    return native
