"""Public parsing entry points."""

from __future__ import annotations

import logging

from .grammar import assemble_object
from .model import Object
from .scanner import LineCursor
from .view import ObjectView
from .whois import split_response

logger = logging.getLogger(__name__)


def parse_object(text: str) -> ObjectView:
    """Parse exactly one RPSL object from the start of ``text``.

    The object ends at the first blank line or at the end of input; anything
    after that blank line is not inspected. Leading blank lines are not
    skipped, so text that starts with one raises :class:`EmptyObject`.
    """
    return assemble_object(LineCursor(text))


def parse_whois_response(text: str) -> list[ObjectView]:
    """Parse every object in a WHOIS server response."""
    return split_response(text)


def to_owned(view):
    """Copy a view (object, attribute, name or value) into owned storage."""
    return view.to_owned()


def parse_object_owned(text: str) -> Object:
    return parse_object(text).to_owned()


def parse_whois_response_owned(text: str) -> list[Object]:
    objects = [view.to_owned() for view in split_response(text)]
    logger.debug("copied %d objects into owned storage", len(objects))
    return objects
