"""Validation of the two command-line inputs: ledger name and target date.

Both validators are total and return Ok | Err[InvocationValidationError].
A failure here means the replay engine never runs.
"""

from __future__ import annotations

import re
from datetime import date
from pathlib import PurePath

from vestledger.core.errors import InvocationValidationError
from vestledger.core.result import Err, Ok
from vestledger.core.types import UtcDatetime
from vestledger.infra.config import FORBIDDEN_NAME_CHARS, VestledgerConfig

_TARGET_DATE_RE = re.compile(r"\d{4}-(0[1-9]|1[012])-(0[1-9]|[12][0-9]|3[01])", re.ASCII)


def _invocation_err(
    message: str, argument: str, actual_value: str, source: str,
) -> Err[InvocationValidationError]:
    return Err(InvocationValidationError(
        message=message,
        code="INVALID_INVOCATION",
        timestamp=UtcDatetime.now(),
        source=source,
        argument=argument,
        actual_value=actual_value,
    ))


def validate_ledger_name(
    name: str, config: VestledgerConfig,
) -> Ok[str] | Err[InvocationValidationError]:
    """Accept a bare file name with an allowed extension (case-insensitive)."""
    source = "gateway.invocation.validate_ledger_name"
    if not name or not name.strip():
        return _invocation_err("ledger name must be non-empty", "ledger", name, source)
    if any(c in FORBIDDEN_NAME_CHARS for c in name):
        return _invocation_err(
            f"{name} is not a valid file name: must not contain any of \\ / : * ? \" < > |",
            "ledger", name, source,
        )
    extension = PurePath(name).suffix.lower()
    allowed = tuple(e.lower() for e in config.allowed_extensions)
    if extension not in allowed:
        return _invocation_err(
            f"{name} has extension {extension or '(none)'!r}, expected one of {allowed}",
            "ledger", name, source,
        )
    return Ok(name)


def validate_target_date(raw: str) -> Ok[date] | Err[InvocationValidationError]:
    """Accept YYYY-MM-DD naming a real calendar date (2021-02-30 is rejected)."""
    source = "gateway.invocation.validate_target_date"
    if not _TARGET_DATE_RE.fullmatch(raw):
        return _invocation_err(
            f"{raw} is not a valid date or does not follow YYYY-MM-DD format",
            "target_date", raw, source,
        )
    try:
        return Ok(date.fromisoformat(raw))
    except ValueError as e:
        return _invocation_err(f"{raw} is not a calendar date: {e}", "target_date", raw, source)
