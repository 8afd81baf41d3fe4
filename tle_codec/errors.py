"""Exception hierarchy for the TLE codec."""

from __future__ import annotations

from typing import Optional


class TLEError(ValueError):
    """Base class for every error raised while decoding or encoding a TLE."""


class MalformedInput(TLEError):
    """Raw TLE text does not follow the fixed-column layout."""


UnparseableTLE = MalformedInput


class LineTooShort(MalformedInput):
    def __init__(self, line: str, required: int) -> None:
        super().__init__(f"TLE line has {len(line)} characters, need at least {required}")
        self.length = len(line)
        self.required = required


class ChecksumMismatch(MalformedInput):
    def __init__(self, line_number: int, expected: int, found: str) -> None:
        super().__init__(
            f"Checksum failed on line {line_number}: computed {expected}, found {found!r}"
        )
        self.line_number = line_number
        self.expected = expected
        self.found = found


class InvalidIdentifier(TLEError):
    """Satellite number is not a 1-99999 digit string."""


class MissingField(TLEError):
    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"TLE parameter {field} is not defined")
        self.field = field


class InvalidEncoding(TLEError):
    """A value cannot be represented in its TLE column."""


class TypeMismatch(TLEError, TypeError):
    def __init__(self, field: str, value: object, expected: str = "an Angle") -> None:
        super().__init__(
            f"TLE parameter {field} should be {expected}, got {type(value).__name__}"
        )
        self.field = field


__all__ = [
    "TLEError",
    "MalformedInput",
    "UnparseableTLE",
    "LineTooShort",
    "ChecksumMismatch",
    "InvalidIdentifier",
    "MissingField",
    "InvalidEncoding",
    "TypeMismatch",
]
