"""Collaborator protocols for the snapshot workflow.

The replay engine depends on these abstractions; adapters implement them.
The two never meet except in workflow/.

A ledger source reports failure as Err[AccessFailure], never as an
exception, so the workflow can apply the "empty ledger" policy uniformly.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from vestledger.core.errors import AccessFailure
from vestledger.core.result import Err, Ok
from vestledger.ledger.types import BalanceAggregate


@runtime_checkable
class LedgerSource(Protocol):
    """Supplies the raw ledger text for one run.

    Invariants:
      - fetch_raw_ledger() is the only suspension point of a run.
      - Any handle opened to produce the text is released before the
        coroutine returns, on success and on failure.
    """

    async def fetch_raw_ledger(self) -> Ok[str] | Err[AccessFailure]: ...


@runtime_checkable
class SnapshotPublisher(Protocol):
    """Receives the finished snapshot.

    Called at most once per run, and never with an empty snapshot.
    """

    def publish(self, aggregates: Sequence[BalanceAggregate]) -> None: ...
