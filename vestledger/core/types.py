"""Core value types: UtcDatetime, NonEmptyStr, NonNegativeInt.

Refined types validate in __post_init__ (TypeError on direct misuse) and
expose a parse() that returns Ok | Err instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import final

from vestledger.core.result import Err, Ok


@final
@dataclass(frozen=True, slots=True)
class UtcDatetime:
    """Timezone-aware UTC datetime. Naive datetimes are rejected."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            raise TypeError("UtcDatetime requires timezone-aware datetime, got naive")

    @staticmethod
    def now() -> UtcDatetime:
        """Current UTC time."""
        return UtcDatetime(value=datetime.now(tz=UTC))


@final
@dataclass(frozen=True, slots=True)
class NonEmptyStr:
    """String constrained to be non-empty."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise TypeError("NonEmptyStr requires non-empty string")

    @staticmethod
    def parse(raw: str) -> Ok[NonEmptyStr] | Err[str]:
        if not raw:
            return Err("NonEmptyStr requires non-empty string")
        return Ok(NonEmptyStr(value=raw))


@final
@dataclass(frozen=True, slots=True)
class NonNegativeInt:
    """Integer constrained to be >= 0. bool is rejected."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 0:
            raise TypeError(f"NonNegativeInt requires int >= 0, got {self.value!r}")

    @staticmethod
    def parse(raw: str) -> Ok[NonNegativeInt] | Err[str]:
        """Parse a base-10 integer literal such as "100" or "+7".

        Rejects signs other than a single leading '+' (after which the
        value must still be >= 0), embedded spaces, underscores, and
        non-ASCII digits that int() would otherwise accept.
        """
        digits = raw[1:] if raw.startswith("+") else raw
        if not digits or not (digits.isascii() and digits.isdigit()):
            return Err(f"NonNegativeInt requires a base-10 integer literal >= 0, got {raw!r}")
        try:
            return Ok(NonNegativeInt(value=int(digits)))
        except ValueError as e:  # exceeds the int digit limit
            return Err(f"NonNegativeInt: {e}")
