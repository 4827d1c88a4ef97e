"""File-backed ledger source and stream-backed snapshot publisher.

These are the production adapters behind the vestledger command.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO, final

from vestledger.core.errors import AccessFailure
from vestledger.core.result import Err, Ok
from vestledger.core.types import UtcDatetime
from vestledger.gateway.parser import format_aggregate
from vestledger.ledger.types import BalanceAggregate


def _access_failure(location: str, operation: str, detail: str) -> AccessFailure:
    return AccessFailure(
        message=detail,
        code="LEDGER_UNAVAILABLE",
        timestamp=UtcDatetime.now(),
        source=f"file_adapter.{operation}",
        location=location,
        operation=operation,
    )


@final
class CsvFileLedgerSource:
    """Reads a whole ledger file as text.

    The blocking read runs in a worker thread; the file handle is scoped
    to a with-block so it is closed on every exit path.
    """

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        self._path = path
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> str:
        with self._path.open("r", encoding=self._encoding, newline="") as handle:
            return handle.read()

    async def fetch_raw_ledger(self) -> Ok[str] | Err[AccessFailure]:
        try:
            text = await asyncio.to_thread(self._read)
        except OSError as e:
            return Err(_access_failure(
                str(self._path), "fetch_raw_ledger", f"cannot read ledger: {e}",
            ))
        except (UnicodeDecodeError, LookupError) as e:
            return Err(_access_failure(
                str(self._path), "fetch_raw_ledger",
                f"ledger is not valid {self._encoding}: {e}",
            ))
        return Ok(text)


@final
class StreamPublisher:
    """Writes one employee_id,employee_name,award_id,balance line per aggregate."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def publish(self, aggregates: Sequence[BalanceAggregate]) -> None:
        for aggregate in aggregates:
            self._stream.write(format_aggregate(aggregate) + "\n")
        self._stream.flush()
