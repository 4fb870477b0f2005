"""
REX pool snapshot.

The pool is fully described by two amounts: the deposit reserve and the
outstanding share supply. Snapshots are immutable; every transition builds a
new one.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidPoolState


@dataclass(frozen=True)
class RexPoolState:
    """
    (deposit, supply) snapshot.

    Notes:
    - Both amounts are non-negative ints.
    - Outstanding supply needs a non-empty deposit to back it.
    - A deposit with no supply is allowed; the next issue bootstraps at `ratio`.
    """

    deposit: int
    supply: int

    def __post_init__(self) -> None:
        for name, v in (("deposit", self.deposit), ("supply", self.supply)):
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{name} must be an int")
            if v < 0:
                raise InvalidPoolState(f"{name} must be non-negative: {v}")
        if self.supply > 0 and self.deposit == 0:
            raise InvalidPoolState(f"supply {self.supply} outstanding against an empty deposit")

    @property
    def is_bootstrap(self) -> bool:
        """True while no supply has been issued."""
        return self.supply == 0

    def to_dict(self) -> dict[str, int]:
        return {"deposit": self.deposit, "supply": self.supply}

    def __repr__(self) -> str:
        return f"RexPoolState(deposit={self.deposit}, supply={self.supply})"
