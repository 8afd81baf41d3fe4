from __future__ import annotations

import pytest

from tle_codec.config import CodecConfig, load_config
from tle_codec.core import CenturyRule


def test_defaults_from_empty_environment() -> None:
    config = load_config({})
    assert config == CodecConfig()
    assert config.verify_checksum is False
    assert config.century_rule is CenturyRule.FIXED_2000
    assert config.log_level == "INFO"


def test_values_from_environment() -> None:
    config = load_config(
        {
            "TLE_CODEC_VERIFY_CHECKSUM": "yes",
            "TLE_CODEC_CENTURY_RULE": "pivot-1957",
            "TLE_CODEC_LOG_LEVEL": "debug",
        }
    )
    assert config.verify_checksum is True
    assert config.century_rule is CenturyRule.PIVOT_1957
    assert config.log_level == "DEBUG"
    assert config.parse_options() == {"verify_checksum": True, "century": CenturyRule.PIVOT_1957}


def test_unrecognised_boolean_falls_back_to_default() -> None:
    assert load_config({"TLE_CODEC_VERIFY_CHECKSUM": "maybe"}).verify_checksum is False


def test_unknown_century_rule() -> None:
    with pytest.raises(ValueError):
        load_config({"TLE_CODEC_CENTURY_RULE": "gregorian"})


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("TLE_CODEC_VERIFY_CHECKSUM", "1")
    assert load_config().verify_checksum is True
