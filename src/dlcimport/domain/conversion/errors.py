"""Failure and warning types raised while converting a DLC export."""

from __future__ import annotations

from dataclasses import dataclass


class ConversionError(RuntimeError):
    """Base class for errors that abort a conversion run."""


class StructuralError(ConversionError):
    """Raised when the input does not have the shape a single run supports."""


class RowSchemaError(StructuralError):
    """Raised when a row's column count does not match the fixed export schema."""

    def __init__(self, *, line: int | None, expected: int, actual: int) -> None:
        location = f"row {line}" if line is not None else "row"
        super().__init__(f"{location} has {actual} columns, expected {expected}")
        self.line = line
        self.expected = expected
        self.actual = actual


class UnresolvedParentError(ConversionError):
    """Raised when finalization runs without any collection-header row."""


@dataclass(frozen=True, slots=True)
class MalformedRowWarning:
    """Non-fatal note that a field lacked an expected shape and was kept as-is."""

    line: int | None
    field: str
    value: str | None
    message: str

    def __str__(self) -> str:
        return f"row {self.line}: {self.field}={self.value!r}: {self.message}"
