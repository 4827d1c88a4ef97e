"""Hypothesis strategies for vestledger domain types.

Strategies are composable: entries are built from ids, dates and
quantities; ledgers are built from entries.
"""

from __future__ import annotations

from datetime import date

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from vestledger.ledger.types import EntryKind, LedgerEntry

# A small pool, so generated ledgers share keys.
EMPLOYEES = ("E001", "E002", "E003", "e001", "Émile", "E010")
AWARDS = ("ISO-001", "ISO-002", "NSO-001", "iso-001")
NAMES = ("Alice Smith", "Bob Jones", "Chloé")


def employee_ids() -> SearchStrategy[str]:
    return st.sampled_from(EMPLOYEES)


def award_ids() -> SearchStrategy[str]:
    return st.sampled_from(AWARDS)


def entry_dates(
    min_value: date = date(2019, 1, 1),
    max_value: date = date(2022, 12, 31),
) -> SearchStrategy[date]:
    return st.dates(min_value=min_value, max_value=max_value)


def quantities(max_value: int = 10_000) -> SearchStrategy[int]:
    return st.integers(min_value=0, max_value=max_value)


def entry_kinds() -> SearchStrategy[EntryKind]:
    return st.sampled_from(list(EntryKind))


@st.composite
def ledger_entries(
    draw: st.DrawFn,
    kind: EntryKind | None = None,
) -> LedgerEntry:
    """Generate valid LedgerEntry instances."""
    return LedgerEntry(
        kind=kind if kind is not None else draw(entry_kinds()),
        employee_id=draw(employee_ids()),
        employee_name=draw(st.sampled_from(NAMES)),
        award_id=draw(award_ids()),
        effective_date=draw(entry_dates()),
        quantity=draw(quantities()),
    )


def entry_lists(min_size: int = 0, max_size: int = 30) -> SearchStrategy[list[LedgerEntry]]:
    return st.lists(ledger_entries(), min_size=min_size, max_size=max_size)


def entry_to_row(entry: LedgerEntry) -> str:
    """Render an entry as one ledger record."""
    return ",".join((
        entry.kind.value,
        entry.employee_id,
        entry.employee_name,
        entry.award_id,
        entry.effective_date.isoformat(),
        str(entry.quantity),
    ))
