"""Common helpers for the tle-codec CLI."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import Any, Dict

from ..config import CodecConfig, load_config
from ..core.epoch import CenturyRule
from ..logging import configure_logging

LOG_LEVELS = ("CRITICAL", "DEBUG", "ERROR", "INFO", "WARNING")


def add_shared_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the options every sub-command accepts."""

    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: $TLE_CODEC_LOG_LEVEL or INFO).",
    )
    parser.add_argument(
        "--century-rule",
        default=None,
        choices=[rule.value for rule in CenturyRule],
        help="Mapping of two-digit epoch years (default: $TLE_CODEC_CENTURY_RULE or fixed-2000).",
    )


def add_input_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("files", nargs="+", help="TLE text files ('-' reads stdin).")


def setup(ns: argparse.Namespace) -> CodecConfig:
    """Resolve configuration from environment and flags, then configure logging."""

    config = load_config()
    if ns.century_rule:
        config = dataclasses.replace(config, century_rule=CenturyRule.from_string(ns.century_rule))
    if ns.log_level:
        config = dataclasses.replace(config, log_level=ns.log_level)
    configure_logging(config, force=True)
    return config


def parse_options(ns: argparse.Namespace, config: CodecConfig) -> Dict[str, Any]:
    options = config.parse_options()
    if getattr(ns, "verify_checksum", False):
        options["verify_checksum"] = True
    return options


def read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise FileNotFoundError(f"TLE file not found: {file_path}")
    return file_path.read_text(encoding="utf-8")
