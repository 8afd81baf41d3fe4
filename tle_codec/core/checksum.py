"""NORAD modulo-10 line checksum."""

from __future__ import annotations

from .fields import LINE_LENGTH

_BODY_LENGTH = LINE_LENGTH - 1


def compute_checksum(line: str) -> int:
    """Checksum of the first 68 columns: digits count at face value, ``-`` as 1."""

    total = 0
    for ch in line[:_BODY_LENGTH]:
        if "0" <= ch <= "9":
            total += int(ch)
        elif ch == "-":
            total += 1
    return total % 10


def checksum_ok(line: str) -> bool:
    """Return ``True`` when ``line`` carries the checksum its body computes to."""

    line = line.rstrip("\r\n")
    if len(line) < LINE_LENGTH:
        return False
    found = line[_BODY_LENGTH]
    if not "0" <= found <= "9":
        return False
    return compute_checksum(line) == int(found)


def append_checksum(body: str) -> str:
    """Terminate a 68-column line body with its checksum digit."""

    return f"{body}{compute_checksum(body)}"


__all__ = ["compute_checksum", "checksum_ok", "append_checksum"]
