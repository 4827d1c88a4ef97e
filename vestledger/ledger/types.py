"""Ledger domain types: EntryKind, LedgerEntry, BalanceAggregate.

Entries are immutable and valid by construction. Aggregates are immutable
values too; the aggregator replaces them rather than mutating them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import TypeAlias, final


CompositeKey: TypeAlias = tuple[str, str]  # (employee_id, award_id)


class EntryKind(Enum):
    VEST = "VEST"
    CANCEL = "CANCEL"


@final
@dataclass(frozen=True, slots=True)
class LedgerEntry:
    """One vest or cancellation of shares for an employee+award on a date."""

    kind: EntryKind
    employee_id: str
    employee_name: str
    award_id: str
    effective_date: date
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.kind, EntryKind):
            raise TypeError(f"LedgerEntry.kind must be EntryKind, got {self.kind!r}")
        if not self.employee_id:
            raise TypeError("LedgerEntry.employee_id must be non-empty")
        if not self.award_id:
            raise TypeError("LedgerEntry.award_id must be non-empty")
        if not isinstance(self.effective_date, date) or isinstance(self.effective_date, datetime):
            raise TypeError(
                f"LedgerEntry.effective_date must be a date, got {self.effective_date!r}"
            )
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int) or self.quantity < 0:
            raise TypeError(f"LedgerEntry.quantity must be int >= 0, got {self.quantity!r}")

    @property
    def key(self) -> CompositeKey:
        return (self.employee_id, self.award_id)


@final
@dataclass(frozen=True, slots=True)
class BalanceAggregate:
    """Running vested balance for one (employee_id, award_id)."""

    employee_id: str
    employee_name: str
    award_id: str
    balance: int

    def __post_init__(self) -> None:
        if self.balance < 0:
            raise TypeError(f"BalanceAggregate.balance must be >= 0, got {self.balance}")

    @staticmethod
    def seed(entry: LedgerEntry) -> BalanceAggregate:
        """Zero-balance aggregate for the entry's key, named from the entry."""
        return BalanceAggregate(
            employee_id=entry.employee_id,
            employee_name=entry.employee_name,
            award_id=entry.award_id,
            balance=0,
        )

    @property
    def key(self) -> CompositeKey:
        return (self.employee_id, self.award_id)
