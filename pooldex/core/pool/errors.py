"""Exception types for the pool engine.

Raised by ``step_or_raise()`` and the ``Pool`` facade for callers that prefer
exceptions over ``StepResult`` inspection. Every error is a local validation
failure: nothing was applied, and resubmitting the same input fails again.
"""

from __future__ import annotations


class PoolError(ValueError):
    """Base class for every rejected pool operation."""


class NotInitialized(PoolError):
    """The pool has no reserves yet."""


class AlreadyInitialized(PoolError):
    """The pool already holds reserves."""


class InsufficientSeed(PoolError):
    """An initialization seed is not strictly positive."""


class InsufficientShares(PoolError):
    """More share units requested than are outstanding (or owned)."""


class InvalidAmount(PoolError):
    """An amount is not a positive int within the parameter domain."""


class InvariantViolation(PoolError):
    """The post-state would violate one or more pool invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")
