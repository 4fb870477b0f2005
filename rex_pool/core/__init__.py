"""
Core pool accounting
"""

from .pool_accounting import PoolAccounting, RexConfig
from .rex import RexCommand, RexStepResult, init_pool_state, step, step_or_raise

__all__ = [
    "PoolAccounting",
    "RexConfig",
    "RexCommand",
    "RexStepResult",
    "init_pool_state",
    "step",
    "step_or_raise",
]
