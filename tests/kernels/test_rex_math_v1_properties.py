"""Property tests for the REX supply kernel.

Uses Hypothesis to check the rounding direction and the closed forms over
amounts well beyond 64 bits.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from rex_pool.errors import InsufficientPaymentAmount
from rex_pool.kernels.python.rex_math_v1 import issue, retire

MAX_AMOUNT = 1 << 128

amounts = st.integers(min_value=1, max_value=MAX_AMOUNT)
ratios = st.integers(min_value=1, max_value=1 << 16)
non_positive = st.integers(min_value=-MAX_AMOUNT, max_value=0)


@st.composite
def retire_within_supply(draw):
    supply = draw(amounts)
    payment = draw(st.integers(min_value=1, max_value=supply))
    deposit = draw(amounts)
    return payment, deposit, supply


@given(payment=amounts, deposit=st.integers(min_value=0, max_value=MAX_AMOUNT), ratio=st.integers(min_value=0, max_value=1 << 16))
def test_bootstrap_issue_ignores_deposit(payment: int, deposit: int, ratio: int) -> None:
    assert issue(payment, deposit, 0, ratio) == payment * ratio


@given(payment=amounts, deposit=amounts, supply=amounts)
def test_proportional_issue_closed_form(payment: int, deposit: int, supply: int) -> None:
    minted = issue(payment, deposit, supply)
    assert minted == (deposit + payment) * supply // deposit - supply
    assert minted >= 0


@given(payment=amounts, deposit=amounts, supply=amounts)
def test_proportional_issue_never_dilutes(payment: int, deposit: int, supply: int) -> None:
    minted = issue(payment, deposit, supply)
    # Per-share backing after >= before: (d + p) / (s + m) >= d / s.
    assert (deposit + payment) * supply >= deposit * (supply + minted)


@given(args=retire_within_supply())
def test_retire_closed_form_and_bounds(args: tuple[int, int, int]) -> None:
    payment, deposit, supply = args
    redeemed = retire(payment, deposit, supply)
    assert redeemed == payment * deposit // supply
    assert 0 <= redeemed <= deposit


@settings(max_examples=300)
@given(payment=amounts, deposit=amounts, supply=amounts)
def test_issue_then_retire_returns_at_most_payment(payment: int, deposit: int, supply: int) -> None:
    minted = issue(payment, deposit, supply)
    if minted == 0:
        return
    assert retire(minted, deposit + payment, supply + minted) <= payment


@given(payment=amounts, ratio=ratios)
def test_bootstrap_issue_then_retire_is_exact(payment: int, ratio: int) -> None:
    minted = issue(payment, 0, 0, ratio)
    assert retire(minted, payment, minted) == payment


@given(payment=non_positive, deposit=st.integers(), supply=st.integers())
def test_non_positive_payment_always_rejected(payment: int, deposit: int, supply: int) -> None:
    with pytest.raises(InsufficientPaymentAmount):
        issue(payment, deposit, supply)
    with pytest.raises(InsufficientPaymentAmount):
        retire(payment, deposit, supply)
