"""Ok / Err — errors as values for the replay engine.

Fallible domain functions return Ok[T] or Err[E] instead of raising.
Callers pattern-match on the variant.

Free functions: unwrap (boundary and test code), partition.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, final

T = TypeVar("T")
E = TypeVar("E")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant."""

    value: T


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error variant."""

    error: E


def unwrap(result: Ok[T] | Err[Any]) -> T:
    """Extract Ok value or raise RuntimeError. Test/boundary code only."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise RuntimeError(f"unwrap on Err: {result.error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def partition(
    results: Iterable[Ok[T] | Err[E]],
) -> tuple[tuple[T, ...], tuple[E, ...]]:
    """Split results into (values, errors), each in input order.

    Unlike a short-circuiting sequence, every result is consumed: one
    failure never hides the successes that follow it.
    """
    values: list[T] = []
    errors: list[E] = []
    for r in results:
        match r:
            case Ok(v):
                values.append(v)
            case Err(e):
                errors.append(e)
    return tuple(values), tuple(errors)
