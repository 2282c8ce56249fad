"""Tests for canonical rendering."""

import pytest

from rpsl_parser import build_object, parse_object, parse_whois_response
from rpsl_parser.model import Attribute
from rpsl_parser.render import render_attribute, render_object, render_objects


@pytest.mark.parametrize("attribute, expected", [
    (Attribute.build("ASNumber", "32934"), "ASNumber:       32934\n"),
    (Attribute.build("ASName", "FACEBOOK"), "ASName:         FACEBOOK\n"),
    (Attribute.build("RegDate", "2004-08-24"), "RegDate:        2004-08-24\n"),
    (
        Attribute.build("Ref", "https://rdap.arin.net/registry/autnum/32934"),
        "Ref:            https://rdap.arin.net/registry/autnum/32934\n",
    ),
])
def test_single_line(attribute, expected):
    assert render_attribute(attribute) == expected
    assert str(attribute) == expected

def test_multi_line():
    attribute = Attribute.build("remarks", [
        "AS1299 is matching RPKI validation state and reject",
        "invalid prefixes from peers and customers.",
    ])
    assert str(attribute) == (
        "remarks:        AS1299 is matching RPKI validation state and reject\n"
        "                invalid prefixes from peers and customers.\n"
    )

def test_absent_values():
    attribute = Attribute.build("remarks", [None, "", "text"])
    assert str(attribute) == "remarks:\n+\n                text\n"

def test_comment_like_continuation_uses_plus():
    attribute = Attribute.build("remarks", ["first", "% not a comment"])
    assert str(attribute) == "remarks:        first\n+               % not a comment\n"

def test_long_name_keeps_a_space():
    attribute = Attribute.build("very-long-attribute", "x")
    assert str(attribute) == "very-long-attribute: x\n"

def test_render_view():
    view = parse_object("role:ACME\naddress: a\n\tb\n")
    assert str(view) == "role:           ACME\naddress:        a\n                b\n"
    assert str(view[0]) == "role:           ACME\n"

def test_render_object_matches_str():
    obj = build_object([("role", "ACME"), ("source", "RIPE")])
    assert render_object(obj) == str(obj) == "role:           ACME\nsource:         RIPE\n"

def test_render_objects_separated_by_blank_line():
    objects = parse_whois_response("a: 1\n\n\n% x\nb: 2\n")
    assert render_objects(objects) == "a:              1\n\nb:              2\n"
