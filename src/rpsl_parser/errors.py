"""Error taxonomy for rpsl-parser.

Malformed input always raises a :class:`ParseError` subclass. Builder input
that cannot form a valid name or value raises a :class:`ValueError` subclass.
"""

from __future__ import annotations


class ParseError(Exception):
    """Base class for errors raised while parsing RPSL text.

    ``line`` is 1-based, ``offset`` is a character offset into the parsed
    buffer. Either may be ``None`` when the position is not known.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        offset: int | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.offset = offset
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class InvalidAttributeName(ParseError):
    """An attribute start line has an empty, malformed or missing name."""


class ContinuationWithoutAttribute(ParseError):
    """A continuation line appears before any attribute of the object."""


class EmptyObject(ParseError):
    """An object ended before a single attribute was read."""


class UnexpectedEndOfInput(ParseError):
    """Parsing started at the end of the buffer."""


class WhoisResponseError(ParseError):
    """An object embedded in a WHOIS response failed to parse.

    ``line`` and ``offset`` locate the start of the failing object;
    the inner error is kept in ``error``.
    """

    def __init__(self, error: ParseError, *, object_index: int, line: int, offset: int) -> None:
        self.error = error
        self.object_index = object_index
        super().__init__(
            f"object {object_index} starting at line {line}: {error}",
            line=line,
            offset=offset,
        )

    def _format(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Builder errors
# ---------------------------------------------------------------------------

class InvalidNameError(ValueError):
    """A builder was given a name outside the attribute name charset."""


class InvalidValueError(ValueError):
    """A builder was given a value containing control characters."""
