"""In-memory implementations of the collaborator protocols.

Test doubles that let the workflow run without a filesystem or a terminal.
All classes are @final. None of them are production code.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from vestledger.core.errors import AccessFailure
from vestledger.core.result import Err, Ok
from vestledger.ledger.types import BalanceAggregate


@final
class InMemoryLedgerSource:
    """Returns fixed text, or a fixed AccessFailure."""

    def __init__(self, content: str | AccessFailure) -> None:
        self._content = content
        self._fetches = 0

    async def fetch_raw_ledger(self) -> Ok[str] | Err[AccessFailure]:
        self._fetches += 1
        if isinstance(self._content, AccessFailure):
            return Err(self._content)
        return Ok(self._content)

    def fetch_count(self) -> int:
        """Test-only helper."""
        return self._fetches


@final
class InMemorySnapshotPublisher:
    """Records every publish() call."""

    def __init__(self) -> None:
        self._published: list[tuple[BalanceAggregate, ...]] = []

    def publish(self, aggregates: Sequence[BalanceAggregate]) -> None:
        self._published.append(tuple(aggregates))

    def calls(self) -> tuple[tuple[BalanceAggregate, ...], ...]:
        """Test-only helper."""
        return tuple(self._published)

    def call_count(self) -> int:
        """Test-only helper."""
        return len(self._published)
