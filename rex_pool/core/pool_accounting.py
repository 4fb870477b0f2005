"""
Pool accounting facade.

`PoolAccounting` binds the supply kernel to a `RexConfig` and to
`RexPoolState` snapshots. It is stateless apart from its config, so one
instance can serve any number of pools.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..kernels.python.rex_math_v1 import DEFAULT_RATIO
from ..kernels.python.rex_math_v1 import issue as _kernel_issue
from ..kernels.python.rex_math_v1 import issue_supply as _kernel_issue_supply
from ..kernels.python.rex_math_v1 import retire as _kernel_retire
from ..kernels.python.rex_math_v1 import retire_supply as _kernel_retire_supply
from ..state.pool import RexPoolState


@dataclass(frozen=True)
class RexConfig:
    """
    Runtime config for pool accounting.

    The kernel accepts `ratio == 0`; a configured pool must bootstrap at a
    positive ratio.
    """

    ratio: int = DEFAULT_RATIO

    def __post_init__(self) -> None:
        if not isinstance(self.ratio, int) or isinstance(self.ratio, bool):
            raise TypeError("ratio must be an int")
        if self.ratio <= 0:
            raise ValueError(f"ratio must be positive: {self.ratio}")


class PoolAccounting:
    """
    Issue/retire calculations for a constant-value liquidity pool.

    `issue` and `retire` take raw amounts; `issue_into` and `retire_from`
    take a snapshot and also return the next one.
    """

    def __init__(self, config: Optional[RexConfig] = None) -> None:
        self.config = config if config is not None else RexConfig()

    def issue(self, payment: int, deposit: int, supply: int, ratio: Optional[int] = None) -> int:
        """
        Supply minted for `payment`.

        `ratio` only matters while `supply == 0` and defaults to `config.ratio`.

        Raises:
            InsufficientPaymentAmount: payment <= 0
            InvalidPoolState: supply outstanding against an empty deposit
        """
        if ratio is None:
            ratio = self.config.ratio
        return _kernel_issue(payment, deposit, supply, ratio)

    def retire(self, payment: int, deposit: int, supply: int) -> int:
        """
        Deposit redeemed for `payment` units of supply.

        Raises:
            InsufficientPaymentAmount: payment <= 0
            InsufficientDepositAmount: deposit <= 0
            InsufficientSupplyAmount: supply <= 0
        """
        return _kernel_retire(payment, deposit, supply)

    def issue_into(self, state: RexPoolState, payment: int) -> Tuple[int, RexPoolState]:
        """Return (supply_issued, next_state)."""
        res = _kernel_issue_supply(
            payment=payment,
            deposit=state.deposit,
            supply=state.supply,
            ratio=self.config.ratio,
        )
        return res.supply_issued, RexPoolState(deposit=res.new_deposit, supply=res.new_supply)

    def retire_from(self, state: RexPoolState, payment: int) -> Tuple[int, RexPoolState]:
        """Return (deposit_redeemed, next_state)."""
        res = _kernel_retire_supply(payment=payment, deposit=state.deposit, supply=state.supply)
        return res.deposit_redeemed, RexPoolState(deposit=res.new_deposit, supply=res.new_supply)

    def __repr__(self) -> str:
        return f"PoolAccounting(ratio={self.config.ratio})"
