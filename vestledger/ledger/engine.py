"""Replay engine: fold a chronologically ordered entry stream into balances.

Core invariant: every balance is >= 0 after every applied entry, and the
emitted snapshot holds exactly one aggregate per (employee_id, award_id)
seen among the entries, in key order.

SnapshotAggregator is @final but NOT a dataclass — it holds mutable state
for the duration of one computation and is never shared.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from datetime import date
from typing import final

from vestledger.ledger.ordering import OrderingIndex, chronological_index, key_index
from vestledger.ledger.transition import apply_transition
from vestledger.ledger.types import BalanceAggregate, CompositeKey, LedgerEntry


def effective_quantity(entry: LedgerEntry, target_date: date) -> int:
    """The entry's quantity if it is dated on or before target_date, else 0."""
    return entry.quantity if entry.effective_date <= target_date else 0


@final
class SnapshotAggregator:
    """Running balance per composite key for one target date.

    Aggregates are stored by value: each apply() reads the current value,
    computes a replacement and writes it back to both the key table and
    the key-ordered index.
    """

    def __init__(self, target_date: date) -> None:
        self._target_date = target_date
        self._table: dict[CompositeKey, BalanceAggregate] = {}
        self._index: OrderingIndex[BalanceAggregate] = key_index()

    def apply(self, entry: LedgerEntry) -> BalanceAggregate:
        """Apply one entry and return the aggregate's new value."""
        qty = effective_quantity(entry, self._target_date)
        current = self._table.get(entry.key)
        if current is None:
            current = BalanceAggregate.seed(entry)
        updated = replace(
            current, balance=apply_transition(entry.kind, current.balance, qty),
        )
        self._table[entry.key] = updated
        self._index.insert(updated)
        return updated

    def snapshot(self) -> tuple[BalanceAggregate, ...]:
        """Aggregates in key order."""
        return self._index.to_tuple()


def order_entries(entries: Iterable[LedgerEntry]) -> tuple[LedgerEntry, ...]:
    """Entries in replay order: by date, VEST before CANCEL, then input order."""
    index = chronological_index()
    index.extend(entries)
    return index.to_tuple()


def compute_snapshot(
    ordered_entries: Iterable[LedgerEntry], target_date: date,
) -> tuple[BalanceAggregate, ...]:
    """Replay chronologically ordered entries and return the key-ordered snapshot.

    Entries dated after target_date contribute nothing but still create
    their aggregate, so an award with only future entries reports 0.
    """
    aggregator = SnapshotAggregator(target_date)
    for entry in ordered_entries:
        aggregator.apply(entry)
    return aggregator.snapshot()
