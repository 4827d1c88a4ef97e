"""Gateway parser — raw ledger text to LedgerEntry values.

parse_line is the entry point for one physical line; parse_row for one
already-split record.
Both are total: every input yields Ok or Err, never an exception.
"""

from __future__ import annotations

import csv
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from datetime import date
from typing import final

from vestledger.core.errors import FieldViolation, RowParseError
from vestledger.core.result import Err, Ok, partition
from vestledger.core.types import NonEmptyStr, NonNegativeInt, UtcDatetime
from vestledger.ledger.types import BalanceAggregate, EntryKind, LedgerEntry

FIELD_NAMES: tuple[str, ...] = (
    "kind", "employee_id", "employee_name", "award_id", "effective_date", "quantity",
)


@final
@dataclass(frozen=True, slots=True)
class ParsedLedger:
    """Outcome of parsing one ledger text: valid entries plus dropped rows."""

    entries: tuple[LedgerEntry, ...]
    errors: tuple[RowParseError, ...]
    total_rows: int

    @property
    def malformed_rows(self) -> int:
        return len(self.errors)


def _row_error(
    line_number: int, raw_row: str, violations: list[FieldViolation], source: str,
) -> Err[RowParseError]:
    return Err(RowParseError(
        message=f"line {line_number}: {len(violations)} field error(s)",
        code="ROW_PARSE",
        timestamp=UtcDatetime.now(),
        source=source,
        line_number=line_number,
        raw_row=raw_row,
        fields=tuple(violations),
    ))


def _parse_kind(raw: str, violations: list[FieldViolation]) -> EntryKind | None:
    try:
        return EntryKind(raw)
    except ValueError:
        violations.append(FieldViolation(
            path="kind", constraint="must be VEST or CANCEL", actual_value=repr(raw),
        ))
        return None


def _parse_nonempty(raw: str, path: str, violations: list[FieldViolation]) -> str | None:
    match NonEmptyStr.parse(raw):
        case Ok(v):
            return v.value
        case Err(_):
            violations.append(FieldViolation(
                path=path, constraint="must be non-empty", actual_value=repr(raw),
            ))
            return None


def _parse_date(raw: str, violations: list[FieldViolation]) -> date | None:
    # fromisoformat also accepts compact and week forms; pin the shape first.
    if raw.isascii() and len(raw) == 10 and raw[4] == "-" and raw[7] == "-":
        try:
            return date.fromisoformat(raw)
        except ValueError:
            pass
    violations.append(FieldViolation(
        path="effective_date", constraint="must be a calendar date formatted YYYY-MM-DD",
        actual_value=repr(raw),
    ))
    return None


def _parse_quantity(raw: str, violations: list[FieldViolation]) -> int | None:
    match NonNegativeInt.parse(raw):
        case Ok(v):
            return v.value
        case Err(e):
            violations.append(FieldViolation(path="quantity", constraint=e, actual_value=repr(raw)))
            return None


def parse_row(
    fields: Sequence[str], line_number: int = 0, raw_row: str | None = None,
) -> Ok[LedgerEntry] | Err[RowParseError]:
    """Parse one record: kind, employee_id, employee_name, award_id, date, quantity.

    All field failures are collected into one RowParseError. raw_row is the
    text reported in that error; it defaults to the fields joined by commas.
    """
    source = "gateway.parser.parse_row"
    if raw_row is None:
        raw_row = ",".join(fields)
    if len(fields) != len(FIELD_NAMES):
        return _row_error(line_number, raw_row, [FieldViolation(
            path="row",
            constraint=f"must have exactly {len(FIELD_NAMES)} fields",
            actual_value=str(len(fields)),
        )], source)

    raw_kind, raw_employee, employee_name, raw_award, raw_date, raw_qty = (
        f.strip() for f in fields
    )
    violations: list[FieldViolation] = []

    kind = _parse_kind(raw_kind, violations)
    employee_id = _parse_nonempty(raw_employee, "employee_id", violations)
    award_id = _parse_nonempty(raw_award, "award_id", violations)
    effective_date = _parse_date(raw_date, violations)
    quantity = _parse_quantity(raw_qty, violations)

    if violations:
        return _row_error(line_number, raw_row, violations, source)

    assert kind is not None
    assert employee_id is not None
    assert award_id is not None
    assert effective_date is not None
    assert quantity is not None

    return Ok(LedgerEntry(
        kind=kind,
        employee_id=employee_id,
        employee_name=employee_name,
        award_id=award_id,
        effective_date=effective_date,
        quantity=quantity,
    ))


def split_records(text: str) -> Iterator[tuple[int, str]]:
    """Yield (line_number, line) for every non-blank line, 1-based.

    One record per physical line; no header row is assumed.
    """
    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if line.strip():
            yield line_number, line


def split_fields(line: str) -> Ok[list[str]] | Err[str]:
    """Split one line on commas. A quoted field may contain commas.

    Quoting never spans lines: an unterminated quote, stray text after a
    closing quote, or an oversized field is an error for this line only.
    """
    try:
        return Ok(next(csv.reader([line], strict=True)))
    except csv.Error as e:
        return Err(str(e))


def parse_line(line: str, line_number: int = 0) -> Ok[LedgerEntry] | Err[RowParseError]:
    """Split and parse one physical line, reporting the line as written."""
    match split_fields(line):
        case Ok(fields):
            return parse_row(fields, line_number, raw_row=line)
        case Err(reason):
            return _row_error(line_number, line, [FieldViolation(
                path="row", constraint="must be comma-separated fields", actual_value=reason,
            )], "gateway.parser.parse_line")


def parse_ledger(text: str) -> ParsedLedger:
    """Parse every record in text. Malformed rows are returned, not raised."""
    results = [parse_line(line, line_number) for line_number, line in split_records(text)]
    entries, errors = partition(results)
    return ParsedLedger(entries=entries, errors=errors, total_rows=len(results))


def format_aggregate(aggregate: BalanceAggregate) -> str:
    """One output record: employee_id,employee_name,award_id,balance."""
    return (
        f"{aggregate.employee_id},{aggregate.employee_name},"
        f"{aggregate.award_id},{aggregate.balance}"
    )
