"""Hand decoded TLE records to the ``sgp4`` propagator.

Propagation itself is left to :mod:`sgp4`; this module only converts the
record's fields into the units :meth:`sgp4.api.Satrec.sgp4init` expects.
"""

from __future__ import annotations

import datetime as dt
import math
from fractions import Fraction

from sgp4.api import WGS72, Satrec

from .core.epoch import NANOS_PER_DAY, Epoch
from .core.types import TLE

MINUTES_PER_DAY = 1440.0
# Revolutions per day in one radian per minute.
XPDOTP = MINUTES_PER_DAY / (2.0 * math.pi)
SGP4_EPOCH = Epoch.from_datetime(dt.datetime(1949, 12, 31, tzinfo=dt.timezone.utc))


def satrec_epoch(tle: TLE) -> float:
    """Epoch as days since 1949 December 31 00:00 UTC."""

    return float(Fraction(tle.epoch.nanoseconds - SGP4_EPOCH.nanoseconds, NANOS_PER_DAY))


def to_satrec(tle: TLE, whichconst: int = WGS72, opsmode: str = "i") -> Satrec:
    sat = Satrec()
    sat.sgp4init(
        whichconst,
        opsmode,
        tle.satellite_number,
        satrec_epoch(tle),
        tle.bstar_drag,
        (tle.first_derivative_mean_motion or 0.0) / (XPDOTP * MINUTES_PER_DAY),
        (tle.second_derivative_mean_motion or 0.0) / (XPDOTP * MINUTES_PER_DAY * MINUTES_PER_DAY),
        tle.eccentricity,
        tle.argument_of_perigee.radians,
        tle.inclination.radians,
        tle.mean_anomaly.radians,
        tle.mean_motion / XPDOTP,
        tle.raan.radians,
    )
    return sat


__all__ = ["to_satrec", "satrec_epoch", "XPDOTP", "SGP4_EPOCH"]
