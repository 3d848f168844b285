"""Interface for ``python -m objectutil``.

Reads a JSON document from stdin (or ``--input``) and applies one of the
library operations to it, printing the JSON result on stdout.
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from pathlib import Path
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .config import DEFAULT_IDENTITY_KEY, get_default_log_level
from .logging import configure_logging
from .mappings import filter_keys
from .navigation import ABSENT, WrappedValue, unwrap, wrap
from .records import upsert_merge


__all__ = ["main"]

logger = logging.getLogger(__name__)


def _log_level(value: str) -> int:
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        msg = f"invalid log level: {value!r}"
        raise ArgumentTypeError(msg)
    return level


def _descend(wrapped: WrappedValue, segment: str) -> WrappedValue:
    """Step by the string key, falling back to an array index for all-digit segments."""
    child = wrapped[segment]
    if segment.isdigit() and unwrap(child) is ABSENT:
        return wrapped[int(segment)]
    return child


def _load_document(parser: ArgumentParser, source: Path | None) -> Any:
    try:
        text = source.read_text(encoding="utf-8") if source is not None else sys.stdin.read()
    except OSError as exc:
        parser.error(f"cannot read input: {exc}")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        parser.error(f"input is not valid JSON: {exc}")


def _run_get(parser: ArgumentParser, options: Namespace, document: Any) -> int:
    del parser
    wrapped = wrap(document)
    for segment in options.path:
        wrapped = _descend(wrapped, segment)
    result = unwrap(wrapped)
    if result is ABSENT:
        logger.info("path %s not found", ".".join(options.path))
        print(json.dumps(None))
        return 1
    print(json.dumps(result))
    return 0


def _run_upsert(parser: ArgumentParser, options: Namespace, document: Any) -> int:
    try:
        candidate = json.loads(options.candidate)
    except json.JSONDecodeError as exc:
        parser.error(f"candidate is not valid JSON: {exc}")
    if not isinstance(document, list):
        parser.error("upsert input must be a JSON array")
    if not isinstance(candidate, dict):
        parser.error("candidate must be a JSON object")
    print(json.dumps(upsert_merge(document, candidate, options.key)))
    return 0


def _run_filter(parser: ArgumentParser, options: Namespace, document: Any) -> int:
    if not isinstance(document, dict):
        parser.error("filter input must be a JSON object")
    keys = set(options.keys)
    if options.exclude:
        result = filter_keys(document, lambda key: key not in keys)
    else:
        result = filter_keys(document, lambda key: key in keys)
    print(json.dumps(result))
    return 0


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="objectutil", description="Apply objectutil operations to a JSON document.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument(
        "--log-level",
        type=_log_level,
        default=get_default_log_level(),
        help="console log level (default: $OBJECTUTIL_LOG_LEVEL or WARNING)",
    )
    _ = parser.add_argument("-i", "--input", type=Path, default=None, help="read JSON from FILE instead of stdin")
    subparsers = parser.add_subparsers(dest="command")

    get_parser = subparsers.add_parser("get", help="navigate a path without failing on missing keys")
    _ = get_parser.add_argument("path", nargs="+", help="path segments; all-digit segments index arrays")
    get_parser.set_defaults(handler=_run_get)

    upsert_parser = subparsers.add_parser("upsert", help="update-or-append a record in a JSON array")
    _ = upsert_parser.add_argument("candidate", help="JSON object to merge")
    _ = upsert_parser.add_argument("-k", "--key", default=DEFAULT_IDENTITY_KEY, help="identity key (default: id)")
    upsert_parser.set_defaults(handler=_run_upsert)

    filter_parser = subparsers.add_parser("filter", help="keep the given top-level keys of a JSON object")
    _ = filter_parser.add_argument("keys", nargs="+")
    _ = filter_parser.add_argument("--exclude", action="store_true", help="drop the given keys instead")
    filter_parser.set_defaults(handler=_run_filter)

    return parser


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    parser = _build_parser()
    options = parser.parse_args(args)
    _ = configure_logging(options.log_level)
    if options.command is None:
        parser.print_help()
        return 0
    document = _load_document(parser, options.input)
    return options.handler(parser, options, document)


if __name__ == "__main__":
    sys.exit(main())
