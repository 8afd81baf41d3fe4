"""CLI sub-command printing decoded TLE fields as JSON lines."""

from __future__ import annotations

import argparse
import json
import sys

from ..errors import TLEError
from ..logging import get_logger, log_context, log_failure
from ..text import iter_tle_text
from . import common

LOGGER = get_logger("cli.show")


def configure_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("show", help="Print every TLE field as JSON")
    common.add_shared_arguments(parser)
    common.add_input_argument(parser)
    parser.add_argument("--verify-checksum", action="store_true", help="Reject sets with bad checksums.")
    parser.add_argument("--summary", action="store_true", help="Print one-line summaries instead of JSON.")
    parser.set_defaults(handler=run)


def run(ns: argparse.Namespace) -> int:
    config = common.setup(ns)
    options = common.parse_options(ns, config)
    exit_code = 0
    for path in ns.files:
        with log_context(path=path):
            try:
                for tle in iter_tle_text(common.read_input(path), **options):
                    if ns.summary:
                        print(f"{tle.name}: {tle.summary()}")
                    else:
                        print(json.dumps(tle.as_dict(), ensure_ascii=False))
            except (TLEError, OSError) as exc:
                log_failure(LOGGER, "show_failed", exc)
                print(f"error: {path}: {exc}", file=sys.stderr)
                exit_code = 1
    return exit_code
