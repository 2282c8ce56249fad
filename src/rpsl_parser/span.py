"""Span: a (buffer, start, end) reference into parsed text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class Span:
    """A half-open range ``[start, end)`` of ``buffer``.

    Holding a span keeps the buffer alive; the referenced text is only
    materialised when ``text`` (or ``str()``) is requested.
    """

    buffer: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.buffer):
            raise ValueError(
                f"span [{self.start}, {self.end}) out of range for buffer of length {len(self.buffer)}"
            )

    @property
    def text(self) -> str:
        return self.buffer[self.start:self.end]

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Span({self.text!r}, {self.start}, {self.end})"

    def __len__(self) -> int:
        return self.end - self.start

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return len(other) == len(self) and self.buffer.startswith(other, self.start)
        if isinstance(other, Span):
            if len(other) != len(self):
                return False
            if other.buffer is self.buffer and other.start == self.start:
                return True
            return self.buffer.startswith(other.text, self.start)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)
