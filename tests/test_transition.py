"""Tests for vestledger.ledger.transition — apply_transition."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from vestledger.ledger.transition import apply_transition
from vestledger.ledger.types import EntryKind

_balances = st.integers(min_value=0, max_value=10**9)
_quantities = st.integers(min_value=0, max_value=10**9)


class TestVest:
    def test_adds(self) -> None:
        assert apply_transition(EntryKind.VEST, 100, 50) == 150

    def test_zero_quantity_is_identity(self) -> None:
        assert apply_transition(EntryKind.VEST, 100, 0) == 100

    @given(balance=_balances, qty=_quantities)
    def test_vest_adds_exactly(self, balance: int, qty: int) -> None:
        assert apply_transition(EntryKind.VEST, balance, qty) == balance + qty


class TestCancel:
    def test_subtracts_when_covered(self) -> None:
        assert apply_transition(EntryKind.CANCEL, 100, 40) == 60

    def test_exact_cancel_reaches_zero(self) -> None:
        assert apply_transition(EntryKind.CANCEL, 100, 100) == 0

    def test_excess_cancel_is_noop(self) -> None:
        assert apply_transition(EntryKind.CANCEL, 100, 101) == 100

    def test_cancel_on_empty_balance(self) -> None:
        assert apply_transition(EntryKind.CANCEL, 0, 999) == 0

    @given(balance=_balances, qty=_quantities)
    def test_cancel_never_negative(self, balance: int, qty: int) -> None:
        assert apply_transition(EntryKind.CANCEL, balance, qty) >= 0

    @given(balance=_balances, qty=_quantities)
    def test_cancel_all_or_nothing(self, balance: int, qty: int) -> None:
        result = apply_transition(EntryKind.CANCEL, balance, qty)
        if qty > balance:
            assert result == balance
        else:
            assert result == balance - qty


class TestVestThenCancel:
    @given(balance=_balances, vest=_quantities, cancel=_quantities)
    def test_vest_then_cancel_covers_up_to_vested(
        self, balance: int, vest: int, cancel: int,
    ) -> None:
        after_vest = apply_transition(EntryKind.VEST, balance, vest)
        after_cancel = apply_transition(EntryKind.CANCEL, after_vest, cancel)
        assert 0 <= after_cancel <= after_vest
