"""Borrowed RPSL values: every text field is a :class:`Span` of the parsed buffer.

View classes mirror the owned classes in :mod:`rpsl_parser.model` field for
field. ``to_owned()`` copies the referenced text out of the buffer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from .content import same_content, text_of
from .model import Attribute, Multiline, Name, Object, SingleLine
from .render import render_attribute, render_object, to_native
from .span import Span


@dataclass(frozen=True, eq=False)
class NameView:
    span: Span

    @property
    def text(self) -> str:
        return self.span.text

    def to_owned(self) -> Name:
        return Name(self.span.text)

    def _content(self) -> tuple:
        return ("name", self.span.text)

    def __str__(self) -> str:
        return self.span.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.span == other
        return same_content(self, other)

    def __hash__(self) -> int:
        return hash(self.span)


@dataclass(frozen=True, eq=False)
class SingleLineView:
    value: Span | None = None

    @property
    def line_count(self) -> int:
        return 1

    def with_content(self) -> list[str]:
        return [] if self.value is None else [self.value.text]

    def to_owned(self) -> SingleLine:
        return SingleLine(text_of(self.value))

    def _content(self) -> tuple:
        return ("single", text_of(self.value))

    def __eq__(self, other: object) -> bool:
        return same_content(self, other)

    def __hash__(self) -> int:
        return hash(self._content())


@dataclass(frozen=True, eq=False)
class MultilineView:
    values: tuple[Span | None, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def line_count(self) -> int:
        return len(self.values)

    def with_content(self) -> list[str]:
        return [v.text for v in self.values if v is not None]

    def to_owned(self) -> Multiline:
        return Multiline(tuple(text_of(v) for v in self.values))

    def _content(self) -> tuple:
        return ("multi", tuple(text_of(v) for v in self.values))

    def __eq__(self, other: object) -> bool:
        return same_content(self, other)

    def __hash__(self) -> int:
        return hash(self._content())


AttributeValueView = Union[SingleLineView, MultilineView]


@dataclass(frozen=True, eq=False)
class AttributeView:
    name: NameView
    value: AttributeValueView

    def to_owned(self) -> Attribute:
        return Attribute(self.name.to_owned(), self.value.to_owned())

    def _content(self) -> tuple:
        return ("attribute", self.name.text, self.value._content())

    def __str__(self) -> str:
        return render_attribute(self)

    def __eq__(self, other: object) -> bool:
        return same_content(self, other)

    def __hash__(self) -> int:
        return hash(self._content())


@dataclass(frozen=True, eq=False)
class ObjectView:
    """A parsed object referencing the buffer it was parsed from.

    ``span`` covers the object's lines, including the terminating blank line
    when there was one.
    """

    attributes: tuple[AttributeView, ...]
    span: Span

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))

    @property
    def source(self) -> str:
        return self.span.buffer

    def __getitem__(self, index: int) -> AttributeView:
        return self.attributes[index]

    def __len__(self) -> int:
        return len(self.attributes)

    def __iter__(self) -> Iterator[AttributeView]:
        return iter(self.attributes)

    def to_owned(self) -> Object:
        return Object(tuple(a.to_owned() for a in self.attributes))

    def to_native(self) -> list[tuple]:
        return to_native(self)

    def _content(self) -> tuple:
        return ("object", tuple(a._content() for a in self.attributes))

    def __str__(self) -> str:
        return render_object(self)

    def __eq__(self, other: object) -> bool:
        return same_content(self, other)

    def __hash__(self) -> int:
        return hash(self._content())
