"""rpsl-parser: zero-copy parsing of RPSL objects and WHOIS responses."""

from .errors import (
    ContinuationWithoutAttribute,
    EmptyObject,
    InvalidAttributeName,
    InvalidNameError,
    InvalidValueError,
    ParseError,
    UnexpectedEndOfInput,
    WhoisResponseError,
)
from .model import (
    Attribute,
    Multiline,
    Name,
    Object,
    SingleLine,
    attribute_value,
    build_object,
)
from .parser import (
    parse_object,
    parse_object_owned,
    parse_whois_response,
    parse_whois_response_owned,
    to_owned,
)
from .render import render_attribute, render_object, render_objects, to_native
from .span import Span
from .view import AttributeView, MultilineView, NameView, ObjectView, SingleLineView
from .whois import server_messages

__all__ = [
    "parse_object",
    "parse_object_owned",
    "parse_whois_response",
    "parse_whois_response_owned",
    "to_owned",
    "build_object",
    "attribute_value",
    "server_messages",
    "render_attribute",
    "render_object",
    "render_objects",
    "to_native",
    "Span",
    "Name",
    "SingleLine",
    "Multiline",
    "Attribute",
    "Object",
    "NameView",
    "SingleLineView",
    "MultilineView",
    "AttributeView",
    "ObjectView",
    "ParseError",
    "InvalidAttributeName",
    "ContinuationWithoutAttribute",
    "EmptyObject",
    "UnexpectedEndOfInput",
    "WhoisResponseError",
    "InvalidNameError",
    "InvalidValueError",
]
