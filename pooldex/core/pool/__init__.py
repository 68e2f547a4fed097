"""`pool`: pure-Python constant-product pool calculator.

- deterministic, integer-only transitions (floor division throughout),
- immutable state (frozen dataclasses),
- fail-closed guards and invariant checks.

Public API:
- `initial_state() -> PoolState`
- `step(state, params) -> StepResult`
- `step_or_raise(state, params) -> StepResult` (raises on rejection)
- `Pool`: mutable facade with `initialize`, `swap_a_for_b`, `swap_b_for_a`,
  `add_liquidity`, `remove_liquidity`
"""

from .engine import MAX_AMOUNT, step, step_or_raise
from .errors import (
    AlreadyInitialized,
    InsufficientSeed,
    InsufficientShares,
    InvalidAmount,
    InvariantViolation,
    NotInitialized,
    PoolError,
)
from .pool import (
    Pool,
    quote_add_liquidity,
    quote_remove_liquidity,
    quote_swap_a_for_b,
    quote_swap_b_for_a,
    spot_price,
)
from .state import initial_state, state_from_dict, state_to_dict
from .types import Action, ActionParams, Effect, Event, PoolState, StepResult

__all__ = [
    "MAX_AMOUNT",
    "step",
    "step_or_raise",
    "initial_state",
    "state_from_dict",
    "state_to_dict",
    "Pool",
    "quote_add_liquidity",
    "quote_remove_liquidity",
    "quote_swap_a_for_b",
    "quote_swap_b_for_a",
    "spot_price",
    "Action",
    "ActionParams",
    "Effect",
    "Event",
    "PoolState",
    "StepResult",
    "PoolError",
    "NotInitialized",
    "AlreadyInitialized",
    "InsufficientSeed",
    "InsufficientShares",
    "InvalidAmount",
    "InvariantViolation",
]
