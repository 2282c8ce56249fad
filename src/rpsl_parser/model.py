"""Owned RPSL values: independent storage, no tie to any parsed buffer."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Union

from .content import same_content
from .errors import InvalidNameError, InvalidValueError
from .render import render_attribute, render_object, to_native
from .scanner import NAME_RE

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


# ---------------------------------------------------------------------------
# Name
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Name:
    value: str

    @classmethod
    def parse(cls, text: str) -> Name:
        """Validate ``text`` against the attribute name charset."""
        if not text:
            raise InvalidNameError("attribute name is empty")
        if NAME_RE.fullmatch(text) is None:
            raise InvalidNameError(
                f"attribute name {text!r} may only contain ASCII letters, digits and '-'"
            )
        return cls(text)

    def _content(self) -> tuple:
        return ("name", self.value)

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.value == other
        return same_content(self, other)

    def __hash__(self) -> int:
        return hash(self.value)


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class SingleLine:
    value: str | None = None

    @property
    def line_count(self) -> int:
        return 1

    def with_content(self) -> list[str]:
        return [] if self.value is None else [self.value]

    def _content(self) -> tuple:
        return ("single", self.value)

    def __eq__(self, other: object) -> bool:
        return same_content(self, other)

    def __hash__(self) -> int:
        return hash(self._content())


@dataclass(frozen=True, eq=False)
class Multiline:
    """Values of an attribute spanning two or more lines, one per line."""

    values: tuple[str | None, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))
        if len(self.values) < 2:
            raise ValueError("a multiline value needs at least two lines")

    @property
    def line_count(self) -> int:
        return len(self.values)

    def with_content(self) -> list[str]:
        return [v for v in self.values if v is not None]

    def _content(self) -> tuple:
        return ("multi", self.values)

    def __eq__(self, other: object) -> bool:
        return same_content(self, other)

    def __hash__(self) -> int:
        return hash(self._content())


AttributeValue = Union[SingleLine, Multiline]

BuilderValue = Union[str, None, Sequence[Union[str, None]]]


def _coerce_value(value: str | None) -> str | None:
    if value is None:
        return None
    if _CONTROL_RE.search(value):
        raise InvalidValueError(f"attribute value {value!r} contains a control character")
    value = value.strip()
    return value or None


def attribute_value(value: BuilderValue) -> AttributeValue:
    """Build an attribute value from a string, ``None`` or a list of either.

    Values are trimmed and blank values become ``None``. A list with a
    single element gives a :class:`SingleLine`.
    """
    if value is None or isinstance(value, str):
        return SingleLine(_coerce_value(value))
    values = [_coerce_value(v) for v in value]
    if not values:
        raise InvalidValueError("an attribute needs at least one value")
    if len(values) == 1:
        return SingleLine(values[0])
    return Multiline(tuple(values))


# ---------------------------------------------------------------------------
# Attribute / Object
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Attribute:
    name: Name
    value: AttributeValue

    @classmethod
    def build(cls, name: str, value: BuilderValue) -> Attribute:
        return cls(Name.parse(name), attribute_value(value))

    def _content(self) -> tuple:
        return ("attribute", self.name.value, self.value._content())

    def __str__(self) -> str:
        return render_attribute(self)

    def __eq__(self, other: object) -> bool:
        return same_content(self, other)

    def __hash__(self) -> int:
        return hash(self._content())


@dataclass(frozen=True, eq=False)
class Object:
    """An RPSL object: attributes in input order, duplicates kept."""

    attributes: tuple[Attribute, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))
        if not self.attributes:
            raise ValueError("an object needs at least one attribute")

    @classmethod
    def build(cls, pairs: Iterable[tuple[str, BuilderValue]]) -> Object:
        return cls(tuple(Attribute.build(name, value) for name, value in pairs))

    def __getitem__(self, index: int) -> Attribute:
        return self.attributes[index]

    def __len__(self) -> int:
        return len(self.attributes)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.attributes)

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


def build_object(pairs: Iterable[tuple[str, BuilderValue]]) -> Object:
    """Build an :class:`Object` from ``(name, value_or_values)`` pairs.

    Example::

        build_object([
            ("role", "ACME Company"),
            ("address", ["Packet Street 6", "128 Series of Tubes"]),
            ("source", "RIPE"),
        ])
    """
    return Object.build(pairs)
