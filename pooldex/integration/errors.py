"""Errors raised by the ledger shell (in addition to the calculator's)."""

from __future__ import annotations

from ..core.pool.errors import PoolError


class InsufficientBalance(PoolError):
    """An account cannot fund the assets an operation would debit."""


class MalformedOperation(PoolError):
    """An operation record is missing fields or carries non-int amounts."""


class UnknownOperation(MalformedOperation):
    """An operation record names a kind the ledger does not know."""
