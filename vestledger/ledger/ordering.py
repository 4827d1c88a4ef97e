"""Ordering index: a collection kept under a total order, emitted ascending.

The order comes from a sort-key function; what happens on equal keys comes
from a DuplicatePolicy. Two instantiations are used by the replay engine:

  chronological_index() — LedgerEntry by (effective_date, VEST before CANCEL),
                          equal keys retained in insertion order.
  key_index()           — BalanceAggregate by collated (employee_id, award_id),
                          one value per key, later inserts replace in place.

Backed by a sorted list maintained with bisect.
"""

from __future__ import annotations

import unicodedata
from bisect import bisect_left, insort_right
from collections.abc import Callable, Iterable
from datetime import date
from enum import Enum
from typing import Any, Generic, TypeAlias, TypeVar, final

from vestledger.ledger.types import BalanceAggregate, EntryKind, LedgerEntry


class DuplicatePolicy(Enum):
    RETAIN = "RETAIN"  # equal keys kept, stable in insertion order
    REPLACE = "REPLACE"  # equal key overwrites the stored value


T = TypeVar("T")


@final
class OrderingIndex(Generic[T]):
    """Values of type T held in ascending key order.

    Not a dataclass — holds mutable internal state. Owned by exactly one
    computation; callers receive tuples, never the backing list.
    """

    def __init__(self, key: Callable[[T], Any], policy: DuplicatePolicy) -> None:
        self._key = key
        self._policy = policy
        self._items: list[T] = []

    def insert(self, value: T) -> None:
        """Insert value at its ordered position, honouring the duplicate policy."""
        match self._policy:
            case DuplicatePolicy.RETAIN:
                # Right of any equal keys: insertion order is preserved.
                insort_right(self._items, value, key=self._key)
            case DuplicatePolicy.REPLACE:
                k = self._key(value)
                i = bisect_left(self._items, k, key=self._key)
                if i < len(self._items) and self._key(self._items[i]) == k:
                    self._items[i] = value
                else:
                    self._items.insert(i, value)

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.insert(value)

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self._items)


# ---------------------------------------------------------------------------
# Chronological order over LedgerEntry
# ---------------------------------------------------------------------------

_KIND_RANK: dict[EntryKind, int] = {
    EntryKind.VEST: 0,
    EntryKind.CANCEL: 1,
}


def chronological_key(entry: LedgerEntry) -> tuple[date, int]:
    """effective_date ascending; on the same date VEST precedes CANCEL."""
    return (entry.effective_date, _KIND_RANK[entry.kind])


def chronological_index() -> OrderingIndex[LedgerEntry]:
    return OrderingIndex(chronological_key, DuplicatePolicy.RETAIN)


# ---------------------------------------------------------------------------
# Key order over BalanceAggregate
# ---------------------------------------------------------------------------


# Variable characters in root collation order: punctuation, then symbols,
# then currency. Whitespace sorts before all of them, digits and letters after.
_VARIABLE_ORDER = (
    "_-,;:!¡?¿.…·'‘’\"“”«»()[]{}§¶@*/\\&#%‰†‡•"
    "`´˜^¯˘˙¨˚˝¸˛+±÷×<=>¬|¦~"
    "¤¢$£¥€"
)
_VARIABLE_RANK: dict[str, int] = {c: i for i, c in enumerate(_VARIABLE_ORDER)}

_WHITESPACE, _VARIABLE, _SYMBOL, _DIGIT, _LETTER = range(5)


def _primary_weight(c: str) -> tuple[int, int]:
    if c.isspace():
        return (_WHITESPACE, ord(c))
    if c in _VARIABLE_RANK:
        return (_VARIABLE, _VARIABLE_RANK[c])
    if c.isdecimal():
        return (_DIGIT, unicodedata.decimal(c))
    if c.isalpha():
        return (_LETTER, ord(c))
    return (_SYMBOL, ord(c))


CollationKey: TypeAlias = tuple[
    tuple[tuple[int, int], ...], tuple[str, ...], tuple[int, ...], str,
]


def collation_key(text: str) -> CollationKey:
    """Multi-level sort key approximating locale-aware (root) string comparison.

    Levels, compared in order:
      1. base characters, case folded, accents removed: whitespace, then
         punctuation and symbols, then digits, then letters ("E 1" < "E_1"
         < "E-1" < "E1" < "E10" < "E2")
      2. accents on each base character
      3. case, lowercase before uppercase
      4. the raw string, so distinct strings never compare equal
    """
    bases: list[str] = []
    accents: list[str] = []
    for c in unicodedata.normalize("NFD", text):
        if unicodedata.combining(c):
            if not bases:
                bases.append("")
                accents.append("")
            accents[-1] += c
        else:
            bases.append(c)
            accents.append("")
    primary = tuple(_primary_weight(f) for base in bases for f in base.casefold())
    tertiary = tuple(1 if base.isupper() else 0 for base in bases)
    return (primary, tuple(accents), tertiary, text)


def aggregate_key(aggregate: BalanceAggregate) -> tuple[CollationKey, CollationKey]:
    """employee_id ascending, then award_id ascending, both collated."""
    return (collation_key(aggregate.employee_id), collation_key(aggregate.award_id))


def key_index() -> OrderingIndex[BalanceAggregate]:
    return OrderingIndex(aggregate_key, DuplicatePolicy.REPLACE)
