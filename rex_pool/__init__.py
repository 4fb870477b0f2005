"""`rex_pool`: integer-only accounting for REX-style liquidity pools.

Public API:
- `issue(payment, deposit, supply, ratio=10000) -> int`
- `retire(payment, deposit, supply) -> int`
- `PoolAccounting`, `RexConfig` (facade over pool snapshots)
- `step(config, state, cmd) -> RexStepResult` (pure state machine)
"""

from .core import (
    PoolAccounting,
    RexCommand,
    RexConfig,
    RexStepResult,
    init_pool_state,
    step,
    step_or_raise,
)
from .errors import (
    InsufficientDepositAmount,
    InsufficientPaymentAmount,
    InsufficientSupplyAmount,
    InvalidPoolState,
    RexError,
)
from .kernels.python.rex_math_v1 import DEFAULT_RATIO, issue, retire
from .state import RexPoolState

__all__ = [
    "DEFAULT_RATIO",
    "issue",
    "retire",
    "PoolAccounting",
    "RexConfig",
    "RexCommand",
    "RexStepResult",
    "RexPoolState",
    "init_pool_state",
    "step",
    "step_or_raise",
    "RexError",
    "InsufficientPaymentAmount",
    "InsufficientDepositAmount",
    "InsufficientSupplyAmount",
    "InvalidPoolState",
]
