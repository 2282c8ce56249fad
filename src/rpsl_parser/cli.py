"""``rpsl-parse`` command-line front end.

Reads RPSL text from files (or stdin), parses it and prints the objects back
as canonical RPSL or as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO, Sequence

from .errors import ParseError
from .parser import parse_object, parse_object_owned, parse_whois_response, parse_whois_response_owned
from .render import render_objects, to_native

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpsl-parse",
        description="Parse RPSL objects or WHOIS responses.",
    )
    parser.add_argument(
        "files", nargs="*", metavar="FILE",
        help="input files (default: standard input)",
    )
    parser.add_argument(
        "--whois", action="store_true",
        help="treat input as a WHOIS response holding any number of objects",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="print objects as JSON lists of [name, value] pairs",
    )
    parser.add_argument(
        "--owned", action="store_true",
        help="copy parsed objects out of the input buffer before printing",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser


def parse_text(text: str, *, whois: bool, owned: bool) -> list:
    """Parse ``text`` as one object, or as a whois response when ``whois``."""
    if whois:
        return parse_whois_response_owned(text) if owned else parse_whois_response(text)
    return [parse_object_owned(text) if owned else parse_object(text)]


def format_objects(objects: list, *, as_json: bool) -> str:
    if as_json:
        return json.dumps([to_native(obj) for obj in objects], indent=2)
    return render_objects(objects)


def _read_inputs(paths: Sequence[str]) -> list[tuple[str, str]]:
    if not paths:
        return [("<stdin>", sys.stdin.read())]
    inputs = []
    for path in paths:
        with open(path, encoding="utf-8") as fh:
            inputs.append((path, fh.read()))
    return inputs


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None, dest: IO[str] | None = None) -> int:
    """Run ``rpsl-parse``; returns the process exit status.

    Objects from every input are printed together, so several files give one
    RPSL stream (objects separated by blank lines) or one JSON list.
    """
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    dest = dest or sys.stdout

    try:
        inputs = _read_inputs(args.files)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("cannot read input: %s", exc)
        return 1

    status = 0
    objects: list = []
    for name, text in inputs:
        try:
            parsed = parse_text(text, whois=args.whois, owned=args.owned)
        except ParseError as exc:
            logger.error("%s: %s", name, exc)
            status = 1
            continue
        logger.info("%s: %d object(s)", name, len(parsed))
        objects.extend(parsed)

    if objects or args.json:
        output = format_objects(objects, as_json=args.json)
        print(output.rstrip("\n"), file=dest)
    return status


if __name__ == "__main__":
    sys.exit(main())
