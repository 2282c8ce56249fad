"""Logical content of owned and view values, and equality across both forms."""

from __future__ import annotations

from typing import Any


def text_of(value: Any) -> str | None:
    """Text of an optional ``str`` or ``Span``."""
    if value is None:
        return None
    return str(value)


def content_key(item: Any) -> tuple | None:
    """Plain-tuple rendering of ``item``'s logical content.

    Returns ``None`` for objects that are not part of the RPSL data model.
    """
    content = getattr(item, "_content", None)
    if content is None:
        return None
    return content()


def same_content(left: Any, right: Any) -> bool:
    """Equality predicate shared by every owned and view class.

    Returns ``NotImplemented`` when ``right`` is not an RPSL value so that
    Python can try the reflected comparison.
    """
    right_key = content_key(right)
    if right_key is None:
        return NotImplemented
    return content_key(left) == right_key
