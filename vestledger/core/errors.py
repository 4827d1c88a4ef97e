"""Error value hierarchy — no domain function raises exceptions.

Every error is a frozen dataclass value that can be pattern-matched,
logged as structured fields, and compared in tests. Base class
VestledgerError, three @final subclasses matching the three failure
policies: skip the row, treat the ledger as empty, abort the invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from vestledger.core.types import UtcDatetime


@dataclass(frozen=True, slots=True)
class VestledgerError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    timestamp: UtcDatetime
    source: str  # "module.function" that produced this error

    def to_dict(self) -> dict[str, object]:
        """Serialize to dict with stable keys (used as log fields)."""
        return {
            "message": self.message,
            "code": self.code,
            "timestamp": self.timestamp.value.isoformat(),
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class FieldViolation:
    """Describes a single field validation failure."""

    path: str  # e.g. "quantity"
    constraint: str  # e.g. "must be a non-negative integer"
    actual_value: str  # e.g. "'abc'"


@final
@dataclass(frozen=True, slots=True)
class RowParseError(VestledgerError):
    """One ledger record could not be turned into a LedgerEntry."""

    line_number: int
    raw_row: str
    fields: tuple[FieldViolation, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            **VestledgerError.to_dict(self),
            "line_number": self.line_number,
            "raw_row": self.raw_row,
            "fields": [
                {"path": f.path, "constraint": f.constraint, "actual_value": f.actual_value}
                for f in self.fields
            ],
        }


@final
@dataclass(frozen=True, slots=True)
class AccessFailure(VestledgerError):
    """The ledger source could not be read."""

    location: str
    operation: str

    def to_dict(self) -> dict[str, object]:
        return {
            **VestledgerError.to_dict(self),
            "location": self.location,
            "operation": self.operation,
        }


@final
@dataclass(frozen=True, slots=True)
class InvocationValidationError(VestledgerError):
    """A command-line input was rejected before any computation ran."""

    argument: str
    actual_value: str

    def to_dict(self) -> dict[str, object]:
        return {
            **VestledgerError.to_dict(self),
            "argument": self.argument,
            "actual_value": self.actual_value,
        }
