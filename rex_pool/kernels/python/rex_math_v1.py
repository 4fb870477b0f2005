"""
REX supply math kernel (v1 semantics).

Two pure functions price pool shares against the deposit reserve:
- `issue`:  shares minted for a payment into the reserve,
- `retire`: reserve paid out for shares surrendered.

Both round down, so every rounding unit stays in the pool. Python ints are
unbounded, so `deposit * supply` style products never overflow.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...errors import (
    InsufficientDepositAmount,
    InsufficientPaymentAmount,
    InsufficientSupplyAmount,
    InvalidPoolState,
)


DEFAULT_RATIO = 10_000


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class IssueResult:
    supply_issued: int
    new_deposit: int
    new_supply: int


@dataclass(frozen=True)
class RetireResult:
    deposit_redeemed: int
    new_deposit: int
    new_supply: int


def issue(payment: int, deposit: int, supply: int, ratio: int = DEFAULT_RATIO) -> int:
    """
    Supply to mint for `payment` units added to the deposit reserve.

    Bootstrap (supply == 0):
        issued = payment * ratio

    Otherwise, holding per-share backing constant:
        issued = floor((deposit + payment) * supply / deposit) - supply

    The floor is taken on the new total supply and the old supply subtracted
    afterwards. Truncating the share delta directly can mint one unit more.
    """
    for name, v in (
        ("payment", payment),
        ("deposit", deposit),
        ("supply", supply),
        ("ratio", ratio),
    ):
        _require_int(name, v)

    if payment <= 0:
        raise InsufficientPaymentAmount(f"payment must be positive: {payment}")
    if ratio < 0:
        raise ValueError(f"ratio must be non-negative: {ratio}")
    if deposit < 0 or supply < 0:
        raise InvalidPoolState(f"pool amounts must be non-negative: ({deposit}, {supply})")

    if supply == 0:
        return payment * ratio

    if deposit == 0:
        raise InvalidPoolState(f"supply {supply} outstanding against an empty deposit")

    s0 = deposit
    s1 = s0 + payment
    r0 = supply
    r1 = (s1 * r0) // s0
    return r1 - r0


def retire(payment: int, deposit: int, supply: int) -> int:
    """
    Deposit to pay out for `payment` units of supply (floor rounding):
        redeemed = floor(payment * deposit / supply)
    """
    for name, v in (
        ("payment", payment),
        ("deposit", deposit),
        ("supply", supply),
    ):
        _require_int(name, v)

    if payment <= 0:
        raise InsufficientPaymentAmount(f"payment must be positive: {payment}")
    if deposit <= 0:
        raise InsufficientDepositAmount(f"deposit must be positive: {deposit}")
    if supply <= 0:
        raise InsufficientSupplyAmount(f"supply must be positive: {supply}")

    return (payment * deposit) // supply


def issue_supply(*, payment: int, deposit: int, supply: int, ratio: int = DEFAULT_RATIO) -> IssueResult:
    """Issue and report the resulting (deposit, supply) snapshot."""
    issued = issue(payment, deposit, supply, ratio)
    return IssueResult(
        supply_issued=issued,
        new_deposit=deposit + payment,
        new_supply=supply + issued,
    )


def retire_supply(*, payment: int, deposit: int, supply: int) -> RetireResult:
    """
    Retire and report the resulting (deposit, supply) snapshot.

    Unlike `retire`, this rejects surrendering more supply than is outstanding.
    """
    redeemed = retire(payment, deposit, supply)
    if payment > supply:
        raise InsufficientSupplyAmount(f"cannot retire more than supply: {payment} > {supply}")
    if redeemed > deposit:
        raise AssertionError("redeemed deposit exceeds reserve")

    return RetireResult(
        deposit_redeemed=redeemed,
        new_deposit=deposit - redeemed,
        new_supply=supply - payment,
    )
