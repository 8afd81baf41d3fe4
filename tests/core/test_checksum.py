from __future__ import annotations

import pytest

from tle_codec.core import append_checksum, checksum_ok, compute_checksum

ISS_LINE1 = "1 25544U 98067A   08264.51782528 -.00002182  00000-0 -11606-4 0  2927"
ISS_LINE2 = "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537"


@pytest.mark.parametrize("line", [ISS_LINE1, ISS_LINE2])
def test_reference_lines(line: str) -> None:
    assert compute_checksum(line) == 7
    assert checksum_ok(line)
    assert checksum_ok(line + "\n")


def test_digit_sum_of_27_yields_7() -> None:
    assert compute_checksum("999") == 7
    assert compute_checksum("99-8") == 7


def test_letters_spaces_plus_and_period_are_ignored() -> None:
    assert compute_checksum("A +.9 U") == 9


def test_only_first_68_columns_count() -> None:
    assert compute_checksum("0" * 68 + "9") == 0


@pytest.mark.parametrize(
    "line",
    [
        ISS_LINE1[:-1] + "8",
        ISS_LINE1[:-1] + "X",
        ISS_LINE1[:-1],
        "",
    ],
)
def test_checksum_ok_rejects_corruption(line: str) -> None:
    assert not checksum_ok(line)


def test_append_checksum() -> None:
    line = append_checksum(ISS_LINE2[:-1])
    assert line == ISS_LINE2
