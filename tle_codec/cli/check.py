"""CLI sub-command validating TLE files line by line."""

from __future__ import annotations

import argparse
import sys

from ..errors import TLEError
from ..logging import get_logger, log_context, log_failure
from ..text import iter_tle_text
from . import common

LOGGER = get_logger("cli.check")


def configure_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("check", help="Validate layout and checksums of TLE files")
    common.add_shared_arguments(parser)
    common.add_input_argument(parser)
    parser.set_defaults(handler=run)


def run(ns: argparse.Namespace) -> int:
    config = common.setup(ns)
    options = common.parse_options(ns, config)
    options["verify_checksum"] = True

    exit_code = 0
    for path in ns.files:
        count = 0
        with log_context(path=path):
            try:
                for _ in iter_tle_text(common.read_input(path), **options):
                    count += 1
            except (TLEError, OSError) as exc:
                log_failure(LOGGER, "check_failed", exc, valid_sets=count)
                print(f"{path}: FAILED after {count} valid sets: {exc}", file=sys.stderr)
                exit_code = 1
                continue
        print(f"{path}: {count} sets OK")
    return exit_code
