"""Numeric encodings used inside TLE columns.

TLE lines carry three kinds of compact numbers:

* plain fixed point (``15.72125391``, ``-.00002182``), where the leading zero
  of a magnitude below one is conventionally dropped;
* "decimal right-hand side" values with an assumed leading decimal point and
  a one digit power-of-ten exponent (``-11606-4`` is ``-0.11606e-4``);
* bare fractions with the ``0.`` omitted (eccentricity ``0006703``).
"""

from __future__ import annotations

import math
import re
from typing import Optional

from ..errors import InvalidEncoding, MalformedInput

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$")
_DECIMAL_RHS_RE = re.compile(r"^(?P<sign>[+-]?)(?P<mantissa>\d+)(?P<exponent>[+-]\d)$")

RHS_WIDTH = 8


def parse_decimal(text: str, field: str = "value") -> float:
    """Decode a plain signed fixed-point column."""

    value = text.strip()
    if not _DECIMAL_RE.match(value):
        raise MalformedInput(f"Malformed {field} field: {text!r}")
    return float(value)


def parse_decimal_rhs(text: str, field: str = "value") -> float:
    """Decode ``[sign]ddddd[sign]d`` as ``sign * 0.ddddd * 10**exp``."""

    value = text.strip()
    match = _DECIMAL_RHS_RE.match(value)
    if match is None:
        raise MalformedInput(f"Malformed {field} field: {text!r}")
    return float(f"{match['sign']}0.{match['mantissa']}e{match['exponent']}")


def parse_fraction(text: str, digits: int = 7, field: str = "value") -> float:
    """Decode a fraction written without its leading ``0.``."""

    value = text.strip()
    if not value.isdigit() or len(value) > digits:
        raise MalformedInput(f"Malformed {field} field: {text!r}")
    return float("0." + value.rjust(digits, "0"))


def parse_int(text: str, field: str = "value") -> Optional[int]:
    """Decode an unsigned integer column; a blank column yields ``None``."""

    value = text.strip()
    if not value:
        return None
    if not value.isdigit():
        raise MalformedInput(f"Malformed {field} field: {text!r}")
    return int(value)


def format_decimal(
    value: float,
    width: int,
    places: int,
    strip_leading_zero: bool = False,
) -> str:
    """Render ``value`` right-aligned in ``width`` columns with ``places`` decimals."""

    if not math.isfinite(value):
        raise InvalidEncoding(f"Cannot encode non-finite value {value!r}")
    text = f"{value:.{places}f}"
    if strip_leading_zero:
        if text.startswith("0."):
            text = text[1:]
        elif text.startswith("-0."):
            text = "-" + text[2:]
    if len(text) > width:
        raise InvalidEncoding(f"{value!r} does not fit in {width} columns")
    return text.rjust(width)


def format_decimal_rhs(value: float, width: int = RHS_WIDTH) -> str:
    """Encode ``value`` (|value| < 1) in the assumed-decimal exponent notation."""

    digits = width - 3
    zero = "0" * digits + "-0"
    if value == 0:
        return ("-" if math.copysign(1.0, value) < 0 else " ") + zero
    magnitude = abs(value)
    if not math.isfinite(magnitude) or magnitude >= 1:
        raise InvalidEncoding(f"Cannot encode {value!r}: magnitude must be below 1")

    exp = -math.floor(math.log10(magnitude))
    mantissa = round(magnitude * 10 ** (exp + digits - 1))
    if mantissa >= 10**digits:
        mantissa = round(mantissa / 10)
        exp -= 1
    if exp < 1:
        raise InvalidEncoding(f"Cannot encode {value!r}: rounds to a magnitude of 1")

    exponent = exp - 1
    sign = "-" if value < 0 else " "
    if exponent > 9:
        # Below the smallest representable magnitude.
        return sign + zero
    return f"{sign}{mantissa:0{digits}d}-{exponent}"


def format_fraction(value: float, digits: int = 7) -> str:
    """Encode a value in [0, 1) as ``digits`` digits without ``0.``."""

    if not 0 <= value < 1:
        raise InvalidEncoding(f"Cannot encode {value!r}: must lie in [0, 1)")
    scaled = round(value * 10**digits)
    if scaled >= 10**digits:
        raise InvalidEncoding(f"Cannot encode {value!r}: rounds to 1")
    return f"{scaled:0{digits}d}"


__all__ = [
    "RHS_WIDTH",
    "parse_decimal",
    "parse_decimal_rhs",
    "parse_fraction",
    "parse_int",
    "format_decimal",
    "format_decimal_rhs",
    "format_fraction",
]
