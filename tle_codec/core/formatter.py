"""Render a :class:`~tle_codec.core.types.TLE` back into its two element lines."""

from __future__ import annotations

from typing import Optional, Tuple

from ..errors import InvalidEncoding
from ..logging import get_logger
from .checksum import append_checksum
from .encoding import format_decimal, format_decimal_rhs, format_fraction
from .epoch import format_epoch
from .types import TLE

LOGGER = get_logger("core.formatter")


def _or_zero(value: Optional[float]) -> float:
    return 0.0 if value is None else value


def _int_field(value: Optional[int], width: int) -> str:
    text = str(value or 0)
    if len(text) > width:
        raise InvalidEncoding(f"{value!r} does not fit in {width} columns")
    return text.rjust(width)


def format_line1(tle: TLE) -> str:
    body = "1 {num:05d}{cls} {desig:<8} {epoch} {ndot} {nddot} {bstar} {eph} {elset}".format(
        num=tle.satellite_number,
        cls=tle.classification or " ",
        desig=tle.intl_designator or "",
        epoch=format_epoch(tle.epoch),
        ndot=format_decimal(_or_zero(tle.first_derivative_mean_motion), 10, 8, strip_leading_zero=True),
        nddot=format_decimal_rhs(_or_zero(tle.second_derivative_mean_motion)),
        bstar=format_decimal_rhs(tle.bstar_drag),
        eph=_int_field(tle.ephemeris_type, 1),
        elset=_int_field(tle.element_set_number, 4),
    )
    return append_checksum(body)


def format_line2(tle: TLE) -> str:
    body = "2 {num:05d} {incl} {raan} {ecc} {argp} {mean_anomaly} {n}{revs}".format(
        num=tle.satellite_number,
        incl=format_decimal(tle.inclination.degrees, 8, 4),
        raan=format_decimal(tle.raan.degrees, 8, 4),
        ecc=format_fraction(tle.eccentricity),
        argp=format_decimal(tle.argument_of_perigee.degrees, 8, 4),
        mean_anomaly=format_decimal(tle.mean_anomaly.degrees, 8, 4),
        n=format_decimal(tle.mean_motion, 11, 8),
        revs=_int_field(tle.revolutions_at_epoch, 5),
    )
    return append_checksum(body)


def format_tle(tle: TLE) -> Tuple[str, str]:
    """Return ``(line1, line2)`` for ``tle``, each 69 columns with checksum.

    Raises :class:`~tle_codec.errors.InvalidEncoding` when the eccentricity
    lies outside [0, 1) or a drag term cannot be written in exponent form.
    """

    lines = (format_line1(tle), format_line2(tle))
    LOGGER.debug("tle_formatted", extra={"satellite_number": tle.satellite_number})
    return lines


__all__ = ["format_tle", "format_line1", "format_line2"]
