from __future__ import annotations

import pytest

from tle_codec.core.fields import (
    LINE1_FIELDS,
    LINE2_FIELDS,
    LINE_LENGTH,
    Field,
    extract,
    extract_fields,
)
from tle_codec.errors import LineTooShort, MalformedInput

ISS_LINE1 = "1 25544U 98067A   08264.51782528 -.00002182  00000-0 -11606-4 0  2927"
ISS_LINE2 = "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537"

# 1-based inclusive columns from the NORAD two-line element documentation.
LINE1_COLUMNS = {
    "line_number": (1, 1),
    "satellite_number": (3, 7),
    "classification": (8, 8),
    "intl_designator": (10, 17),
    "epoch_year": (19, 20),
    "epoch_day": (21, 32),
    "first_derivative_mean_motion": (34, 43),
    "second_derivative_mean_motion": (45, 52),
    "bstar_drag": (54, 61),
    "ephemeris_type": (63, 63),
    "element_set_number": (65, 68),
    "checksum": (69, 69),
}
LINE2_COLUMNS = {
    "line_number": (1, 1),
    "satellite_number": (3, 7),
    "inclination": (9, 16),
    "raan": (18, 25),
    "eccentricity": (27, 33),
    "argument_of_perigee": (35, 42),
    "mean_anomaly": (44, 51),
    "mean_motion": (53, 63),
    "revolutions_at_epoch": (64, 68),
    "checksum": (69, 69),
}


def test_extract_on_short_line() -> None:
    with pytest.raises(LineTooShort) as excinfo:
        extract("1 25544U", 7, 5)
    assert excinfo.value.required == 12
    assert excinfo.value.length == 8
    assert isinstance(excinfo.value, MalformedInput)


def test_extract_at_exact_length() -> None:
    assert extract("1 25544", 2, 5) == "25544"
    with pytest.raises(LineTooShort):
        Field("satellite_number", 2, 5).extract("1 2554")


def test_extract_strips_blanks() -> None:
    assert extract("  abc   ", 0, 8) == "abc"
    assert extract(ISS_LINE1, 44, 8) == "00000-0"
    assert extract(ISS_LINE1, 0, 0) == ""


@pytest.mark.parametrize("fields, columns", [(LINE1_FIELDS, LINE1_COLUMNS), (LINE2_FIELDS, LINE2_COLUMNS)])
def test_column_maps(fields, columns) -> None:
    assert {f.name: (f.offset + 1, f.end) for f in fields} == columns
    ordered = sorted(fields, key=lambda f: f.offset)
    for left, right in zip(ordered, ordered[1:]):
        assert left.end <= right.offset, (left.name, right.name)
    assert ordered[-1].end == LINE_LENGTH


def test_extract_fields_reads_reference_lines() -> None:
    line1 = extract_fields(ISS_LINE1, LINE1_FIELDS)
    line2 = extract_fields(ISS_LINE2, LINE2_FIELDS)
    assert line1["intl_designator"] == "98067A"
    assert line1["bstar_drag"] == "-11606-4"
    assert line1["element_set_number"] == "292"
    assert line2["eccentricity"] == "0006703"
    assert line2["mean_motion"] == "15.72125391"
    assert line2["revolutions_at_epoch"] == "56353"


def test_extract_fields_omits_columns_past_line_end() -> None:
    values = extract_fields(ISS_LINE1[:62], LINE1_FIELDS)
    assert "bstar_drag" in values
    assert "ephemeris_type" not in values
    assert "checksum" not in values
