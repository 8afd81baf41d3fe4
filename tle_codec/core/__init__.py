"""Public API for the TLE codec primitives."""

from .checksum import append_checksum, checksum_ok, compute_checksum
from .encoding import format_decimal, format_decimal_rhs, parse_decimal, parse_decimal_rhs
from .epoch import CenturyRule, Epoch, epoch_day, epoch_from_day, epoch_from_timestamp, epoch_year
from .formatter import format_tle
from .parser import parse_tle
from .types import TLE, Angle, AngleUnit

__all__ = [
    "TLE",
    "Angle",
    "AngleUnit",
    "CenturyRule",
    "Epoch",
    "parse_tle",
    "format_tle",
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
]
