"""CLI sub-command re-emitting TLE files in canonical column layout."""

from __future__ import annotations

import argparse
import sys

from ..errors import TLEError
from ..logging import get_logger, log_context, log_failure
from ..text import dump_tle_text, iter_tle_text
from . import common

LOGGER = get_logger("cli.normalize")


def configure_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("normalize", help="Rewrite TLE sets in canonical form")
    common.add_shared_arguments(parser)
    common.add_input_argument(parser)
    parser.add_argument("--verify-checksum", action="store_true", help="Reject sets with bad checksums.")
    parser.add_argument("--no-name", action="store_true", help="Emit two-line sets (omit name lines).")
    parser.set_defaults(handler=run)


def run(ns: argparse.Namespace) -> int:
    config = common.setup(ns)
    options = common.parse_options(ns, config)
    exit_code = 0
    for path in ns.files:
        with log_context(path=path):
            try:
                for tle in iter_tle_text(common.read_input(path), **options):
                    sys.stdout.write(dump_tle_text(tle, include_name=not ns.no_name))
            except (TLEError, OSError) as exc:
                log_failure(LOGGER, "normalize_failed", exc)
                print(f"error: {path}: {exc}", file=sys.stderr)
                exit_code = 1
    sys.stdout.flush()
    return exit_code
