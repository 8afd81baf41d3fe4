"""Conversion between TLE epochs (year + fractional day) and UTC instants.

An :class:`Epoch` counts whole nanoseconds since 1970-01-01T00:00:00Z.
Conversions from floats go through :class:`fractions.Fraction`, so a supplied
timestamp or fractional day survives to the nearest nanosecond, finer than
both the ``datetime`` microsecond and the 1e-8 day step of the wire field.
"""

from __future__ import annotations

import calendar
import datetime as dt
import enum
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from ..errors import MalformedInput
from .encoding import parse_decimal

SECONDS_PER_DAY = 86_400
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_DAY = SECONDS_PER_DAY * NANOS_PER_SECOND

_UNIX_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)
_UNIX_ORDINAL = _UNIX_EPOCH.toordinal()
_WIRE_DAY_STEPS = 10**8

Timestamp = Union[int, float]


class CenturyRule(str, enum.Enum):
    """How a two-digit epoch year on the wire maps to a calendar year."""

    FIXED_2000 = "fixed-2000"
    PIVOT_1957 = "pivot-1957"

    @classmethod
    def from_string(cls, value: str) -> "CenturyRule":
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Unknown century rule '{value}'") from exc


def expand_year(two_digit: int, rule: CenturyRule = CenturyRule.FIXED_2000) -> int:
    if not 0 <= two_digit <= 99:
        raise MalformedInput(f"Epoch year {two_digit} is not a two-digit year")
    if rule == CenturyRule.PIVOT_1957 and two_digit >= 57:
        return 1900 + two_digit
    return 2000 + two_digit


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def _year_start(year: int) -> int:
    return (dt.date(year, 1, 1).toordinal() - _UNIX_ORDINAL) * NANOS_PER_DAY


def as_utc(instant: dt.datetime) -> dt.datetime:
    """Normalise ``instant`` to UTC; naive datetimes are taken to be UTC already."""

    if instant.tzinfo is None:
        return instant.replace(tzinfo=dt.timezone.utc)
    return instant.astimezone(dt.timezone.utc)


@dataclass(frozen=True, order=True)
class Epoch:
    """A UTC instant with nanosecond resolution."""

    nanoseconds: int

    @classmethod
    def from_timestamp(cls, seconds: Timestamp) -> "Epoch":
        if not math.isfinite(seconds):
            raise MalformedInput(f"Epoch timestamp {seconds!r} is not finite")
        return cls(round(Fraction(seconds) * NANOS_PER_SECOND))

    @classmethod
    def from_datetime(cls, instant: dt.datetime) -> "Epoch":
        delta = as_utc(instant) - _UNIX_EPOCH
        micros = (delta.days * SECONDS_PER_DAY + delta.seconds) * 1_000_000 + delta.microseconds
        return cls(micros * 1_000)

    @classmethod
    def from_day(cls, year: int, day: float) -> "Epoch":
        """The instant ``day`` (1-based, fractional) days into ``year``."""

        if not math.isfinite(day) or day < 1:
            raise MalformedInput(f"Epoch day {day!r} must be at least 1")
        if math.floor(day) > days_in_year(year):
            raise MalformedInput(f"Epoch day {day!r} is past the end of {year}")
        return cls(_year_start(year) + round((Fraction(day) - 1) * NANOS_PER_DAY))

    @property
    def datetime(self) -> dt.datetime:
        """UTC datetime, truncated to the microsecond."""

        return _UNIX_EPOCH + dt.timedelta(microseconds=self.nanoseconds // 1_000)

    @property
    def year(self) -> int:
        return self.datetime.year

    def day_fraction(self) -> Fraction:
        """Exact 1-based fractional day of year."""

        return 1 + Fraction(self.nanoseconds - _year_start(self.year), NANOS_PER_DAY)

    @property
    def day(self) -> float:
        return float(self.day_fraction())

    @property
    def timestamp(self) -> float:
        return self.nanoseconds / NANOS_PER_SECOND

    def isoformat(self) -> str:
        return f"{self.datetime:%Y-%m-%dT%H:%M:%S}.{self.nanoseconds % NANOS_PER_SECOND:09d}+00:00"


Instant = Union[Epoch, dt.datetime]


def as_epoch(instant: Instant) -> Epoch:
    if isinstance(instant, Epoch):
        return instant
    return Epoch.from_datetime(instant)


def epoch_from_day(year: int, day: float) -> Epoch:
    return Epoch.from_day(year, day)


def epoch_from_timestamp(seconds: Timestamp) -> Epoch:
    return Epoch.from_timestamp(seconds)


def epoch_year(instant: Instant) -> int:
    return as_epoch(instant).year


def epoch_day(instant: Instant) -> float:
    """Fractional 1-based day of year of ``instant``."""

    return as_epoch(instant).day


def epoch_timestamp(instant: Instant) -> float:
    return as_epoch(instant).timestamp


def parse_epoch(
    year_text: str,
    day_text: str,
    rule: CenturyRule = CenturyRule.FIXED_2000,
) -> Epoch:
    """Decode the ``YY`` and ``DDD.DDDDDDDD`` columns of line 1."""

    year_text = year_text.strip()
    if len(year_text) != 2 or not year_text.isdigit():
        raise MalformedInput(f"Malformed epoch year field: {year_text!r}")
    day = parse_decimal(day_text, field="epoch day")
    return Epoch.from_day(expand_year(int(year_text), rule), day)


def format_epoch(instant: Instant) -> str:
    """Encode ``instant`` as the 14-column ``YYDDD.DDDDDDDD`` epoch field."""

    epoch = as_epoch(instant)
    steps = round(epoch.day_fraction() * _WIRE_DAY_STEPS)
    whole, fraction = divmod(steps, _WIRE_DAY_STEPS)
    return f"{epoch.year % 100:02d}{whole:03d}.{fraction:08d}"


__all__ = [
    "CenturyRule",
    "Epoch",
    "NANOS_PER_DAY",
    "NANOS_PER_SECOND",
    "SECONDS_PER_DAY",
    "as_epoch",
    "as_utc",
    "days_in_year",
    "expand_year",
    "epoch_from_day",
    "epoch_from_timestamp",
    "epoch_year",
    "epoch_day",
    "epoch_timestamp",
    "parse_epoch",
    "format_epoch",
]
