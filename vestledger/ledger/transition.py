"""Balance transition: (kind, current balance, effective quantity) -> new balance.

Total and side-effect free. The target-date cutoff is applied by the
caller; by the time a quantity reaches here it is already effective.
"""

from __future__ import annotations

from typing import assert_never

from vestledger.ledger.types import EntryKind


def apply_transition(kind: EntryKind, current_balance: int, effective_quantity: int) -> int:
    """Return the balance after applying one entry.

    VEST adds. CANCEL subtracts only when the balance covers the whole
    quantity; an excess cancellation leaves the balance unchanged.
    """
    match kind:
        case EntryKind.VEST:
            return current_balance + effective_quantity
        case EntryKind.CANCEL:
            if current_balance >= effective_quantity:
                return current_balance - effective_quantity
            return current_balance
        case _:
            assert_never(kind)
