"""Decode a pair of TLE lines into a :class:`~tle_codec.core.types.TLE`."""

from __future__ import annotations

from typing import Optional

from ..errors import ChecksumMismatch, InvalidIdentifier, LineTooShort, MalformedInput
from ..logging import get_logger
from .checksum import compute_checksum
from .encoding import parse_decimal, parse_decimal_rhs, parse_fraction, parse_int
from .epoch import CenturyRule, parse_epoch
from .fields import LINE1_FIELDS, LINE1_MIN_LENGTH, LINE2_FIELDS, LINE2_MIN_LENGTH, extract_fields
from .types import Angle, TLE

LOGGER = get_logger("core.parser")


def _check_length(line: str, required: int) -> None:
    if len(line) < required:
        raise LineTooShort(line, required)


def _verify_checksum(line: str, line_number: int) -> None:
    found = line[68:69]
    expected = compute_checksum(line)
    if found != str(expected):
        raise ChecksumMismatch(line_number, expected, found)


def parse_tle(
    line1: str,
    line2: str,
    *,
    verify_checksum: bool = False,
    century: CenturyRule = CenturyRule.FIXED_2000,
    name: Optional[str] = None,
) -> TLE:
    """Parse the two element lines of a TLE.

    Raises :class:`~tle_codec.errors.MalformedInput` for short or garbled
    lines and :class:`~tle_codec.errors.InvalidIdentifier` when the satellite
    number is not numeric. Checksums are only enforced when
    ``verify_checksum`` is set.
    """

    line1 = line1.rstrip("\r\n")
    line2 = line2.rstrip("\r\n")
    _check_length(line1, LINE1_MIN_LENGTH)
    _check_length(line2, LINE2_MIN_LENGTH)

    f1 = extract_fields(line1, LINE1_FIELDS)
    f2 = extract_fields(line2, LINE2_FIELDS)

    if f1["line_number"] != "1" or f2["line_number"] != "2":
        raise MalformedInput("Bad TLE line prefixes")

    catnum = f1["satellite_number"]
    if not catnum.isdigit():
        raise InvalidIdentifier(f"Satellite number {catnum!r} is not numeric")
    if f2["satellite_number"] != catnum:
        raise MalformedInput("Catalog numbers differ between L1 and L2")

    if verify_checksum:
        if len(line1) < 69:
            raise LineTooShort(line1, 69)
        _verify_checksum(line1, 1)
        _verify_checksum(line2, 2)

    ephemeris = f1.get("ephemeris_type", "")
    tle = TLE(
        satellite_number=int(catnum),
        name=name,
        classification=f1["classification"] or None,
        intl_designator=f1["intl_designator"] or None,
        epoch=parse_epoch(f1["epoch_year"], f1["epoch_day"], century),
        first_derivative_mean_motion=parse_decimal(
            f1["first_derivative_mean_motion"], field="first derivative of mean motion"
        ),
        second_derivative_mean_motion=parse_decimal_rhs(
            f1["second_derivative_mean_motion"], field="second derivative of mean motion"
        ),
        bstar_drag=parse_decimal_rhs(f1["bstar_drag"], field="bstar"),
        ephemeris_type=parse_int(ephemeris, field="ephemeris type"),
        element_set_number=parse_int(f1.get("element_set_number", ""), field="element set number"),
        inclination=Angle.from_degrees(parse_decimal(f2["inclination"], field="inclination")),
        raan=Angle.from_degrees(parse_decimal(f2["raan"], field="right ascension of ascending node")),
        eccentricity=parse_fraction(f2["eccentricity"], field="eccentricity"),
        argument_of_perigee=Angle.from_degrees(
            parse_decimal(f2["argument_of_perigee"], field="argument of perigee")
        ),
        mean_anomaly=Angle.from_degrees(parse_decimal(f2["mean_anomaly"], field="mean anomaly")),
        mean_motion=parse_decimal(f2["mean_motion"], field="mean motion"),
        revolutions_at_epoch=parse_int(f2["revolutions_at_epoch"], field="revolution number"),
    )
    LOGGER.debug(
        "tle_parsed",
        extra={"satellite_number": tle.satellite_number, "epoch": tle.epoch.isoformat()},
    )
    return tle


__all__ = ["parse_tle"]
