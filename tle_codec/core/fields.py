"""Fixed-column layout of the two TLE lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from ..errors import LineTooShort

LINE_LENGTH = 69
LINE1_MIN_LENGTH = 62
LINE2_MIN_LENGTH = 69


@dataclass(frozen=True)
class Field:
    """A named slice of a TLE line (zero-based ``offset``)."""

    name: str
    offset: int
    width: int

    @property
    def end(self) -> int:
        return self.offset + self.width

    def extract(self, line: str) -> str:
        return extract(line, self.offset, self.width)


# Columns 1-based in the NORAD documentation; offsets here are zero-based.
LINE1_FIELDS: Tuple[Field, ...] = (
    Field("line_number", 0, 1),
    Field("satellite_number", 2, 5),
    Field("classification", 7, 1),
    Field("intl_designator", 9, 8),
    Field("epoch_year", 18, 2),
    Field("epoch_day", 20, 12),
    Field("first_derivative_mean_motion", 33, 10),
    Field("second_derivative_mean_motion", 44, 8),
    Field("bstar_drag", 53, 8),
    Field("ephemeris_type", 62, 1),
    Field("element_set_number", 64, 4),
    Field("checksum", 68, 1),
)

LINE2_FIELDS: Tuple[Field, ...] = (
    Field("line_number", 0, 1),
    Field("satellite_number", 2, 5),
    Field("inclination", 8, 8),
    Field("raan", 17, 8),
    Field("eccentricity", 26, 7),
    Field("argument_of_perigee", 34, 8),
    Field("mean_anomaly", 43, 8),
    Field("mean_motion", 52, 11),
    Field("revolutions_at_epoch", 63, 5),
    Field("checksum", 68, 1),
)


def extract(line: str, offset: int, width: int) -> str:
    """Return ``line[offset:offset + width]`` stripped of surrounding blanks."""

    if len(line) < offset + width:
        raise LineTooShort(line, offset + width)
    return line[offset:offset + width].strip()


def extract_fields(line: str, fields: Iterable[Field]) -> Dict[str, str]:
    """Slice every field that fits on ``line``; shorter lines simply omit the tail."""

    values: Dict[str, str] = {}
    for field in fields:
        if len(line) < field.end:
            continue
        values[field.name] = field.extract(line)
    return values


__all__ = [
    "Field",
    "LINE1_FIELDS",
    "LINE2_FIELDS",
    "LINE_LENGTH",
    "LINE1_MIN_LENGTH",
    "LINE2_MIN_LENGTH",
    "extract",
    "extract_fields",
]
