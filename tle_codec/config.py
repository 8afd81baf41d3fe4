"""Environment-driven configuration for tle_codec front ends."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .core.epoch import CenturyRule

__all__ = ["CodecConfig", "load_config"]

_TRUE_SET = {"1", "true", "yes", "on"}
_FALSE_SET = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CodecConfig:
    """Options applied when reading TLE text on behalf of a caller."""

    verify_checksum: bool = False
    century_rule: CenturyRule = CenturyRule.FIXED_2000
    log_level: str = "INFO"

    def parse_options(self) -> Dict[str, Any]:
        """Keyword arguments for :func:`tle_codec.core.parse_tle`."""

        return {"verify_checksum": self.verify_checksum, "century": self.century_rule}


def _to_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_SET:
        return True
    if lowered in _FALSE_SET:
        return False
    return default


def load_config(env: Optional[Mapping[str, str]] = None) -> CodecConfig:
    """Load configuration from environment variables."""

    env_map: Mapping[str, str]
    if env is None:
        env_map = os.environ
    else:
        env_map = env

    rule_raw = env_map.get("TLE_CODEC_CENTURY_RULE")
    century_rule = CenturyRule.from_string(rule_raw) if rule_raw else CenturyRule.FIXED_2000

    return CodecConfig(
        verify_checksum=_to_bool(env_map.get("TLE_CODEC_VERIFY_CHECKSUM"), default=False),
        century_rule=century_rule,
        log_level=env_map.get("TLE_CODEC_LOG_LEVEL", "INFO").upper(),
    )
