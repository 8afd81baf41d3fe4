"""Command line interface for the tle-codec package."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import check, normalize, show


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tle-codec", description="Two-Line Element set codec")
    subparsers = parser.add_subparsers(dest="command")
    check.configure_parser(subparsers)
    show.configure_parser(subparsers)
    normalize.configure_parser(subparsers)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    if not hasattr(ns, "handler"):
        parser.print_help()
        return 1
    return ns.handler(ns)


def entrypoint() -> None:
    sys.exit(main())
