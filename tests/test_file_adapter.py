"""Tests for vestledger.infra.file_adapter — CsvFileLedgerSource, StreamPublisher."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from vestledger.core.errors import AccessFailure
from vestledger.core.result import Err, Ok
from vestledger.infra.file_adapter import CsvFileLedgerSource, StreamPublisher
from vestledger.infra.protocols import LedgerSource, SnapshotPublisher
from vestledger.ledger.types import BalanceAggregate

_TEXT = "VEST,E001,Alice Smith,ISO-001,2020-01-01,1000\r\nVEST,E002,Bobby Jones,NSO-001,2020-01-02,100\n"


class TestCsvFileLedgerSource:
    def test_satisfies_protocol(self, tmp_path: Path) -> None:
        assert isinstance(CsvFileLedgerSource(tmp_path / "x.csv"), LedgerSource)

    @pytest.mark.asyncio
    async def test_reads_whole_file_unchanged(self, tmp_path: Path) -> None:
        path = tmp_path / "events.csv"
        path.write_bytes(_TEXT.encode("utf-8"))
        assert await CsvFileLedgerSource(path).fetch_raw_ledger() == Ok(_TEXT)

    @pytest.mark.asyncio
    async def test_configured_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "events.csv"
        path.write_bytes("VEST,E1,Zoë,A1,2020-01-01,1".encode("latin-1"))
        result = await CsvFileLedgerSource(path, encoding="latin-1").fetch_raw_ledger()
        assert result == Ok("VEST,E1,Zoë,A1,2020-01-01,1")

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "absent.csv"
        result = await CsvFileLedgerSource(path).fetch_raw_ledger()
        assert isinstance(result, Err)
        failure = result.error
        assert isinstance(failure, AccessFailure)
        assert failure.code == "LEDGER_UNAVAILABLE"
        assert failure.location == str(path)
        assert failure.operation == "fetch_raw_ledger"

    @pytest.mark.asyncio
    async def test_directory_is_unavailable(self, tmp_path: Path) -> None:
        assert isinstance(await CsvFileLedgerSource(tmp_path).fetch_raw_ledger(), Err)

    @pytest.mark.asyncio
    async def test_undecodable_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "events.csv"
        path.write_bytes(b"VEST,E1,\xff\xfe,A1,2020-01-01,1")
        result = await CsvFileLedgerSource(path).fetch_raw_ledger()
        assert isinstance(result, Err)
        assert "utf-8" in result.error.message

    @pytest.mark.asyncio
    async def test_unknown_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "events.csv"
        path.write_text("VEST,E1,A,A1,2020-01-01,1")
        result = await CsvFileLedgerSource(path, encoding="no-such-codec").fetch_raw_ledger()
        assert isinstance(result, Err)


class TestStreamPublisher:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(StreamPublisher(io.StringIO()), SnapshotPublisher)

    def test_one_line_per_aggregate(self) -> None:
        stream = io.StringIO()
        StreamPublisher(stream).publish((
            BalanceAggregate("E001", "Alice Smith", "ISO-001", 60),
            BalanceAggregate("E002", "Bob Jones", "ISO-002", 0),
        ))
        assert stream.getvalue() == "E001,Alice Smith,ISO-001,60\nE002,Bob Jones,ISO-002,0\n"

    def test_empty_publish_writes_nothing(self) -> None:
        stream = io.StringIO()
        StreamPublisher(stream).publish(())
        assert stream.getvalue() == ""
