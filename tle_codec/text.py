"""Reading and writing TLE sets embedded in free-form text.

Catalogue files come as plain two-line pairs or in the three-line layout where
a name line (optionally prefixed with ``0 ``) precedes each pair.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from .core.formatter import format_tle
from .core.parser import parse_tle
from .core.types import TLE
from .errors import MalformedInput
from .logging import get_logger, log_context

LOGGER = get_logger("text")


def _clean_name(line: str) -> Optional[str]:
    if line.startswith("0 "):
        line = line[2:]
    return line.strip() or None


def iter_tle_text(text: str, **parse_options: Any) -> Iterator[TLE]:
    """Yield every TLE found in ``text``; ``parse_options`` go to :func:`parse_tle`."""

    lines = [ln.strip() for ln in text.splitlines() if ln.strip()]
    name: Optional[str] = None
    idx = 0
    while idx < len(lines):
        line = lines[idx]
        if line.startswith("1 ") and idx + 1 < len(lines) and lines[idx + 1].startswith("2 "):
            with log_context(name=name, text_line=idx + 1):
                tle = parse_tle(line, lines[idx + 1], name=name, **parse_options)
            yield tle
            name = None
            idx += 2
            continue
        if line.startswith(("1 ", "2 ")):
            raise MalformedInput(f"Unpaired TLE line: {line!r}")
        name = _clean_name(line)
        idx += 1


def load_tle_text(text: str, **parse_options: Any) -> TLE:
    """Parse the first TLE (two- or three-line layout) found in ``text``."""

    tle = next(iter_tle_text(text, **parse_options), None)
    if tle is None:
        raise MalformedInput("Could not locate TLE line pair in text")
    return tle


def dump_tle_text(tle: TLE, include_name: bool = True) -> str:
    """Render ``tle`` as text, optionally preceded by its name line."""

    line1, line2 = format_tle(tle)
    if include_name and tle.name:
        return f"{tle.name}\n{line1}\n{line2}\n"
    return f"{line1}\n{line2}\n"


__all__ = ["iter_tle_text", "load_tle_text", "dump_tle_text"]
