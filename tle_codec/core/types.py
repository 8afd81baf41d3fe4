"""Record types for parsed two-line element sets."""

from __future__ import annotations

import dataclasses
import datetime as dt
import enum
import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple

from ..errors import InvalidIdentifier, MalformedInput, MissingField, TypeMismatch
from .epoch import Epoch


class AngleUnit(str, enum.Enum):
    DEGREES = "degrees"
    RADIANS = "radians"


@dataclass(frozen=True)
class Angle:
    """An angular value tagged with the unit it was supplied in."""

    value: float
    unit: AngleUnit = AngleUnit.DEGREES

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        return cls(float(value), AngleUnit.DEGREES)

    @classmethod
    def from_radians(cls, value: float) -> "Angle":
        return cls(float(value), AngleUnit.RADIANS)

    @property
    def degrees(self) -> float:
        if self.unit == AngleUnit.DEGREES:
            return self.value
        return math.degrees(self.value)

    @property
    def radians(self) -> float:
        if self.unit == AngleUnit.RADIANS:
            return self.value
        return math.radians(self.value)


ANGLE_FIELDS = ("inclination", "raan", "argument_of_perigee", "mean_anomaly")
NUMERIC_FIELDS = ("eccentricity", "mean_motion", "bstar_drag")
MANDATORY_FIELDS = ("satellite_number", "epoch") + ANGLE_FIELDS + NUMERIC_FIELDS
CLASSIFICATIONS = frozenset({"U", "C", "S"})

_OPTIONAL_INT_LIMITS = {
    "ephemeris_type": 9,
    "element_set_number": 9999,
    "revolutions_at_epoch": 99999,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class TLE:
    """A two-line element set decoded into typed fields.

    The epoch is an :class:`~tle_codec.core.epoch.Epoch` (a datetime passed
    in is converted); ``epoch_year``, ``epoch_day`` and ``epoch_timestamp``
    are views derived from it. Angular elements are
    :class:`Angle` values. Classification, designator, mean motion
    derivatives, ephemeris type, element set number and revolution count are
    optional and only kept so that a parsed set formats back unchanged.
    """

    coordinate_type: ClassVar[str] = "TLE"

    satellite_number: int
    epoch: Epoch
    inclination: Angle
    raan: Angle
    eccentricity: float
    argument_of_perigee: Angle
    mean_anomaly: Angle
    mean_motion: float
    bstar_drag: float
    name: Optional[str] = None
    classification: Optional[str] = None
    intl_designator: Optional[str] = None
    first_derivative_mean_motion: Optional[float] = None
    second_derivative_mean_motion: Optional[float] = None
    ephemeris_type: Optional[int] = None
    element_set_number: Optional[int] = None
    revolutions_at_epoch: Optional[int] = None

    def __post_init__(self) -> None:
        for field in MANDATORY_FIELDS:
            if getattr(self, field) is None:
                raise MissingField(field)

        number = self.satellite_number
        if not isinstance(number, int) or isinstance(number, bool) or not 1 <= number <= 99999:
            raise InvalidIdentifier(f"Satellite number must be an integer 1-99999, got {number!r}")

        epoch = self.epoch
        if isinstance(epoch, dt.datetime):
            epoch = Epoch.from_datetime(epoch)
        elif not isinstance(epoch, Epoch):
            raise TypeMismatch("epoch", epoch, expected="an Epoch or datetime")
        object.__setattr__(self, "epoch", epoch)

        for field in ANGLE_FIELDS:
            value = getattr(self, field)
            if not isinstance(value, Angle):
                raise TypeMismatch(field, value)

        for field in NUMERIC_FIELDS + ("first_derivative_mean_motion", "second_derivative_mean_motion"):
            value = getattr(self, field)
            if value is not None and not _is_number(value):
                raise TypeMismatch(field, value, expected="a number")

        for field, limit in _OPTIONAL_INT_LIMITS.items():
            value = getattr(self, field)
            if value is None:
                continue
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= limit:
                raise MalformedInput(f"{field} must be an integer 0-{limit}, got {value!r}")

        if self.classification is not None and self.classification not in CLASSIFICATIONS:
            raise MalformedInput(f"Unknown classification {self.classification!r}")
        if self.intl_designator is not None and len(self.intl_designator) > 8:
            raise MalformedInput(f"International designator {self.intl_designator!r} exceeds 8 characters")

        if self.name is None:
            object.__setattr__(self, "name", f"NORAD{number:05d}")

    @classmethod
    def from_elements(cls, **params: Any) -> "TLE":
        """Build a record from keyword parameters.

        ``epoch`` may be an :class:`Epoch`, a :class:`datetime.datetime` or a
        UNIX timestamp;
        alternatively pass ``epoch_year`` (any four-digit year) together with
        the 1-based fractional ``epoch_day``.
        """

        params = dict(params)
        year = params.pop("epoch_year", None)
        day = params.pop("epoch_day", None)
        epoch = params.get("epoch")
        if epoch is None:
            if year is None or day is None:
                raise MissingField("epoch", "TLE parameter epoch (or epoch_year and epoch_day) is not defined")
            params["epoch"] = Epoch.from_day(int(year), float(day))
        elif _is_number(epoch):
            params["epoch"] = Epoch.from_timestamp(epoch)

        for field in MANDATORY_FIELDS:
            if params.get(field) is None:
                raise MissingField(field)
        return cls(**params)

    def replace(self, **changes: Any) -> "TLE":
        """Return a copy with ``changes`` applied and validated."""

        return dataclasses.replace(self, **changes)

    @property
    def epoch_year(self) -> int:
        return self.epoch.year

    @property
    def epoch_day(self) -> float:
        return self.epoch.day

    @property
    def epoch_timestamp(self) -> float:
        return self.epoch.timestamp

    @property
    def epoch_datetime(self) -> dt.datetime:
        return self.epoch.datetime

    def as_array(self) -> Tuple[Any, ...]:
        """Coordinate-array view, ordered as the elements are printed in a TLE.

        ``(type, ra, dec, epoch, bstar, inclination, raan, eccentricity,
        perigee, mean_anomaly, mean_motion)`` with the epoch as a UNIX
        timestamp and angles in radians. RA and Dec are always ``None``.
        """

        return (
            self.coordinate_type,
            None,
            None,
            self.epoch_timestamp,
            self.bstar_drag,
            self.inclination.radians,
            self.raan.radians,
            self.eccentricity,
            self.argument_of_perigee.radians,
            self.mean_anomaly.radians,
            self.mean_motion,
        )

    def as_dict(self) -> Dict[str, Any]:
        """Every field by name, JSON-serialisable (angles in degrees)."""

        return {
            "name": self.name,
            "satellite_number": self.satellite_number,
            "classification": self.classification,
            "intl_designator": self.intl_designator,
            "epoch": self.epoch.isoformat(),
            "epoch_year": self.epoch_year,
            "epoch_day": self.epoch_day,
            "first_derivative_mean_motion": self.first_derivative_mean_motion,
            "second_derivative_mean_motion": self.second_derivative_mean_motion,
            "bstar_drag": self.bstar_drag,
            "ephemeris_type": self.ephemeris_type,
            "element_set_number": self.element_set_number,
            "inclination": self.inclination.degrees,
            "raan": self.raan.degrees,
            "eccentricity": self.eccentricity,
            "argument_of_perigee": self.argument_of_perigee.degrees,
            "mean_anomaly": self.mean_anomaly.degrees,
            "mean_motion": self.mean_motion,
            "revolutions_at_epoch": self.revolutions_at_epoch,
        }

    def summary(self) -> str:
        """One-line human readable rendering, three decimals per element."""

        values = (
            self.epoch_day,
            self.bstar_drag,
            self.inclination.degrees,
            self.raan.degrees,
            self.eccentricity,
            self.argument_of_perigee.degrees,
            self.mean_anomaly.degrees,
            self.mean_motion,
        )
        return " ".join([self.coordinate_type, str(self.epoch_year)] + [f"{v:.3f}" for v in values])


__all__ = ["Angle", "AngleUnit", "TLE", "ANGLE_FIELDS", "MANDATORY_FIELDS", "CLASSIFICATIONS"]
