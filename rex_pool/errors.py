"""Exception types for REX pool accounting.

Every error carries a stable ``code`` so that callers which prefer result
objects over exceptions (see ``rex_pool.core.rex.step``) can report it without
matching on message text.
"""

from __future__ import annotations


class RexError(ValueError):
    """Base class for pool accounting failures."""

    code = "REX_ERROR"


class InsufficientPaymentAmount(RexError):
    """Raised when the payment is not strictly positive."""

    code = "INSUFFICIENT_PAYMENT_AMOUNT"


class InsufficientDepositAmount(RexError):
    """Raised when the pool deposit cannot back a redemption."""

    code = "INSUFFICIENT_DEPOSIT_AMOUNT"


class InsufficientSupplyAmount(RexError):
    """Raised when the pool supply cannot cover a redemption."""

    code = "INSUFFICIENT_SUPPLY_AMOUNT"


class InvalidPoolState(RexError):
    """Raised for a (deposit, supply) snapshot no sequence of issue/retire can produce."""

    code = "INVALID_POOL_STATE"
