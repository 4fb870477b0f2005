"""
REX pool state machine.

This is a pure state machine intended for the functional core:
- Inputs are a config, a pool snapshot and a command.
- Outputs are (next_state, effects) or an error code.

Callers own persistence and must serialize read -> step -> write per pool.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Mapping

from ..errors import RexError
from ..state.pool import RexPoolState
from .pool_accounting import PoolAccounting, RexConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RexCommand:
    tag: Literal["issue", "retire"]
    args: Mapping[str, Any]


@dataclass(frozen=True)
class RexStepResult:
    ok: bool
    state: RexPoolState | None = None
    effects: Mapping[str, Any] | None = None
    error: str | None = None
    code: str | None = None


class _StepRejected(Exception):
    def __init__(self, error: str, code: str) -> None:
        self.error = error
        self.code = code
        super().__init__(error)


def init_pool_state() -> RexPoolState:
    return RexPoolState(deposit=0, supply=0)


def _payment(args: Mapping[str, Any]) -> int:
    payment = args.get("payment")
    if not isinstance(payment, int) or isinstance(payment, bool):
        raise _StepRejected("invalid param payment", "INVALID_PARAM")
    return payment


def _apply(config: RexConfig, state: RexPoolState, cmd: RexCommand) -> RexStepResult:
    accounting = PoolAccounting(config)
    if cmd.tag == "issue":
        issued, next_state = accounting.issue_into(state, _payment(cmd.args))
        return RexStepResult(ok=True, state=next_state, effects={"supply_issued": issued})
    if cmd.tag == "retire":
        redeemed, next_state = accounting.retire_from(state, _payment(cmd.args))
        return RexStepResult(ok=True, state=next_state, effects={"deposit_redeemed": redeemed})
    raise _StepRejected(f"unknown action: {cmd.tag}", "UNKNOWN_ACTION")


def step(config: RexConfig, state: RexPoolState, cmd: RexCommand) -> RexStepResult:
    """Execute a pool command. Domain errors are returned, not raised."""
    try:
        res = _apply(config, state, cmd)
    except RexError as exc:
        logger.info("rex %s rejected (%s): %s", cmd.tag, exc.code, exc)
        return RexStepResult(ok=False, error=str(exc), code=exc.code)
    except _StepRejected as exc:
        logger.info("rex %s rejected (%s): %s", cmd.tag, exc.code, exc.error)
        return RexStepResult(ok=False, error=exc.error, code=exc.code)

    logger.debug("rex %s accepted: %r -> %r %s", cmd.tag, state, res.state, dict(res.effects or {}))
    return res


def step_or_raise(config: RexConfig, state: RexPoolState, cmd: RexCommand) -> RexStepResult:
    """Like `step`, but raises: `RexError` for domain errors, `ValueError` for malformed commands."""
    try:
        res = _apply(config, state, cmd)
    except _StepRejected as exc:
        raise ValueError(exc.error) from None

    logger.debug("rex %s accepted: %r -> %r %s", cmd.tag, state, res.state, dict(res.effects or {}))
    return res
