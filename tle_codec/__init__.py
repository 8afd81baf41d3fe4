"""Lossless codec for NORAD Two-Line Element sets.

Parsing and formatting are exact inverses for canonical input::

    tle = parse_tle(line1, line2)
    assert format_tle(tle) == (line1, line2)
"""

from __future__ import annotations

from .config import CodecConfig, load_config
from .core import (
    TLE,
    Angle,
    AngleUnit,
    CenturyRule,
    Epoch,
    append_checksum,
    checksum_ok,
    compute_checksum,
    epoch_day,
    epoch_from_day,
    epoch_from_timestamp,
    epoch_year,
    format_decimal,
    format_decimal_rhs,
    format_tle,
    parse_decimal,
    parse_decimal_rhs,
    parse_tle,
)
from .errors import (
    ChecksumMismatch,
    InvalidEncoding,
    InvalidIdentifier,
    LineTooShort,
    MalformedInput,
    MissingField,
    TLEError,
    TypeMismatch,
    UnparseableTLE,
)
from .text import dump_tle_text, iter_tle_text, load_tle_text

__version__ = "0.1.0"

__all__ = [
    "TLE",
    "Angle",
    "AngleUnit",
    "CenturyRule",
    "Epoch",
    "CodecConfig",
    "load_config",
    "parse_tle",
    "format_tle",
    "load_tle_text",
    "iter_tle_text",
    "dump_tle_text",
    "compute_checksum",
    "checksum_ok",
    "append_checksum",
    "parse_decimal",
    "parse_decimal_rhs",
    "format_decimal",
    "format_decimal_rhs",
    "epoch_from_day",
    "epoch_from_timestamp",
    "epoch_year",
    "epoch_day",
    "TLEError",
    "MalformedInput",
    "UnparseableTLE",
    "LineTooShort",
    "ChecksumMismatch",
    "InvalidIdentifier",
    "MissingField",
    "InvalidEncoding",
    "TypeMismatch",
]
