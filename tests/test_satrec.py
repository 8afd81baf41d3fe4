from __future__ import annotations

import datetime as dt

import pytest
from sgp4.api import Satrec, jday

from tle_codec.core import TLE, Angle, parse_tle
from tle_codec.satrec import satrec_epoch, to_satrec

ISS_LINE1 = "1 25544U 98067A   08264.51782528 -.00002182  00000-0 -11606-4 0  2927"
ISS_LINE2 = "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537"


def approx_tuple(values, expected, rel=1e-9, abs=1e-9):
    return all(pytest.approx(e, rel=rel, abs=abs) == v for v, e in zip(values, expected))


@pytest.fixture(scope="module")
def satellites():
    reference = Satrec.twoline2rv(ISS_LINE1, ISS_LINE2)
    decoded = to_satrec(parse_tle(ISS_LINE1, ISS_LINE2))
    return reference, decoded


def test_elements_match_twoline2rv(satellites) -> None:
    reference, decoded = satellites
    for attr in ("inclo", "nodeo", "ecco", "argpo", "mo", "no_kozai", "bstar", "ndot", "nddot"):
        assert getattr(decoded, attr) == pytest.approx(getattr(reference, attr), rel=1e-12, abs=1e-18), attr
    assert decoded.satnum == 25544


@pytest.mark.parametrize("hours", [0.0, 1.5, 24.0])
def test_propagation_matches_twoline2rv(satellites, hours: float) -> None:
    reference, decoded = satellites
    when = dt.datetime(2008, 9, 20, 12, 25, 40, tzinfo=dt.timezone.utc) + dt.timedelta(hours=hours)
    jd, fr = jday(when.year, when.month, when.day, when.hour, when.minute,
                  when.second + when.microsecond / 1_000_000)
    err_ref, r_ref, v_ref = reference.sgp4(jd, fr)
    err_dec, r_dec, v_dec = decoded.sgp4(jd, fr)
    assert err_ref == err_dec == 0
    assert approx_tuple(r_dec, r_ref, rel=0, abs=1e-4)
    assert approx_tuple(v_dec, v_ref, rel=0, abs=1e-7)


def test_satrec_epoch_counts_days_from_1949_12_31() -> None:
    tle = TLE.from_elements(
        satellite_number=5,
        epoch=dt.datetime(1950, 1, 1, 12, tzinfo=dt.timezone.utc),
        bstar_drag=0.0,
        inclination=Angle.from_degrees(34.0),
        raan=Angle.from_degrees(0.0),
        eccentricity=0.1,
        argument_of_perigee=Angle.from_degrees(0.0),
        mean_anomaly=Angle.from_degrees(0.0),
        mean_motion=10.8,
    )
    assert satrec_epoch(tle) == 1.5
