"""Snapshot workflow: fetch -> validate -> order -> replay -> publish.

The only await is the ledger fetch. Everything after it is a synchronous
fold owned by this call. Failure policies:

  AccessFailure  -> logged, run continues with zero entries, nothing published
  RowParseError  -> logged per row, row skipped, remaining rows processed
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import final

from vestledger.core.result import Err, Ok
from vestledger.gateway.parser import ParsedLedger, parse_ledger
from vestledger.infra.logger import get_logger
from vestledger.infra.protocols import LedgerSource, SnapshotPublisher
from vestledger.ledger.engine import compute_snapshot, order_entries
from vestledger.ledger.types import BalanceAggregate

logger = get_logger(__name__)

_EMPTY_LEDGER = ParsedLedger(entries=(), errors=(), total_rows=0)


@final
@dataclass(frozen=True, slots=True)
class SnapshotReport:
    """What one run saw and produced."""

    target_date: date
    total_rows: int
    valid_entries: int
    malformed_rows: int
    aggregates: tuple[BalanceAggregate, ...]
    published: bool
    source_available: bool


@final
class SnapshotService:
    """Computes and publishes the vested-balance snapshot for a target date."""

    def __init__(self, source: LedgerSource, publisher: SnapshotPublisher) -> None:
        self._source = source
        self._publisher = publisher

    async def run(self, target_date: date) -> SnapshotReport:
        source_available = True
        match await self._source.fetch_raw_ledger():
            case Ok(text):
                parsed = parse_ledger(text)
            case Err(failure):
                logger.error("ledger_unavailable", **failure.to_dict())
                source_available = False
                parsed = _EMPTY_LEDGER

        for error in parsed.errors:
            logger.warning("row_dropped", **error.to_dict())

        aggregates = compute_snapshot(order_entries(parsed.entries), target_date)
        logger.info(
            "snapshot_computed",
            target_date=target_date.isoformat(),
            total_rows=parsed.total_rows,
            valid_entries=len(parsed.entries),
            malformed_rows=parsed.malformed_rows,
            aggregates=len(aggregates),
        )

        published = False
        if aggregates:
            self._publisher.publish(aggregates)
            published = True
            logger.info("snapshot_published", aggregates=len(aggregates))
        else:
            logger.info("snapshot_empty", target_date=target_date.isoformat())

        return SnapshotReport(
            target_date=target_date,
            total_rows=parsed.total_rows,
            valid_entries=len(parsed.entries),
            malformed_rows=parsed.malformed_rows,
            aggregates=aggregates,
            published=published,
            source_available=source_available,
        )
