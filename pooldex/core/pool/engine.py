"""Dispatch-table engine for the pool calculator.

``step(state, params)`` is the single entry point. It:

1. Validates parameter domains (int type and amount bounds).
2. Dispatches to the correct guard / update / effect functions.
3. Checks all invariants on the post-state.
4. Returns a ``StepResult`` (accepted or rejected with reason).

Nothing is applied unless every check passes; the input state is never
modified.
"""

from __future__ import annotations

from typing import Callable, Optional

from .effects import (
    effect_add_liquidity,
    effect_initialize,
    effect_remove_liquidity,
    effect_swap_a_for_b,
    effect_swap_b_for_a,
)
from .errors import (
    AlreadyInitialized,
    InsufficientSeed,
    InsufficientShares,
    InvalidAmount,
    InvariantViolation,
    NotInitialized,
    PoolError,
)
from .guards import guard_add_liquidity, guard_initialize, guard_remove_liquidity, guard_swap
from .invariants import check_all
from .types import Action, ActionParams, Effect, PoolState, StepResult
from .updates import (
    apply_add_liquidity,
    apply_initialize,
    apply_remove_liquidity,
    apply_swap_a_for_b,
    apply_swap_b_for_a,
)

GuardFn = Callable[[PoolState, ActionParams], Optional[str]]
UpdateFn = Callable[[PoolState, ActionParams], PoolState]
EffectFn = Callable[[PoolState, PoolState, ActionParams], Effect]

_DISPATCH: dict[Action, tuple[GuardFn, UpdateFn, EffectFn]] = {
    Action.INITIALIZE: (
        guard_initialize, apply_initialize, effect_initialize,
    ),
    Action.SWAP_A_FOR_B: (
        guard_swap, apply_swap_a_for_b, effect_swap_a_for_b,
    ),
    Action.SWAP_B_FOR_A: (
        guard_swap, apply_swap_b_for_a, effect_swap_b_for_a,
    ),
    Action.ADD_LIQUIDITY: (
        guard_add_liquidity, apply_add_liquidity, effect_add_liquidity,
    ),
    Action.REMOVE_LIQUIDITY: (
        guard_remove_liquidity, apply_remove_liquidity, effect_remove_liquidity,
    ),
}

# -- Parameter domain bounds -------------------------------------------------

MAX_AMOUNT: int = 10**30

# Per-action bounds: list of (field_name, min_val). The upper bound is the
# caller's `max_amount`. A `None` minimum leaves the sign to the guard
# (initialize reports non-positive seeds as `insufficient_seed`).
_PARAM_BOUNDS: dict[Action, list[tuple[str, Optional[int]]]] = {
    Action.INITIALIZE: [
        ("amount_a", None),
        ("amount_b", None),
    ],
    Action.SWAP_A_FOR_B: [
        ("amount_in", 1),
    ],
    Action.SWAP_B_FOR_A: [
        ("amount_in", 1),
    ],
    Action.ADD_LIQUIDITY: [
        ("amount_a", 1),
    ],
    Action.REMOVE_LIQUIDITY: [
        ("share_units", 1),
    ],
}

_REJECTION_ERRORS: dict[str, type[PoolError]] = {
    "not_initialized": NotInitialized,
    "already_initialized": AlreadyInitialized,
    "insufficient_seed": InsufficientSeed,
    "insufficient_shares": InsufficientShares,
    "dust_deposit": InvalidAmount,
}


def _validate_params(params: ActionParams, max_amount: int) -> str | None:
    """Check parameter domain bounds. Returns rejection reason or None."""
    for field, lo in _PARAM_BOUNDS.get(params.action, []):
        val = getattr(params, field)
        if not isinstance(val, int) or isinstance(val, bool):
            return f"invalid_amount:{field}"
        if lo is not None and val < lo:
            return f"invalid_amount:{field}"
        if val > max_amount:
            return f"invalid_amount:{field}"
    return None


def step(state: PoolState, params: ActionParams, *, max_amount: int = MAX_AMOUNT) -> StepResult:
    """Execute one action against the given state.

    Returns ``StepResult`` with ``accepted=True`` on success,
    or ``accepted=False`` with a ``rejection`` reason string.
    """
    entry = _DISPATCH.get(params.action)
    if entry is None:
        return StepResult(accepted=False, rejection=f"unknown_action:{params.action}")

    domain_err = _validate_params(params, max_amount)
    if domain_err is not None:
        return StepResult(accepted=False, rejection=domain_err)

    guard_fn, update_fn, effect_fn = entry

    reason = guard_fn(state, params)
    if reason is not None:
        return StepResult(accepted=False, rejection=reason)

    new_state = update_fn(state, params)

    violations = check_all(new_state)
    if violations:
        return StepResult(
            accepted=False,
            rejection=f"invariant:{','.join(violations)}",
        )

    effect = effect_fn(state, new_state, params)
    return StepResult(accepted=True, state=new_state, effect=effect)


def error_for_rejection(reason: str) -> PoolError:
    """Map a rejection code to the typed error ``step_or_raise`` raises."""
    if reason.startswith("invalid_amount:"):
        return InvalidAmount(reason)
    if reason.startswith("invariant:"):
        return InvariantViolation(reason.removeprefix("invariant:").split(","))
    error_cls = _REJECTION_ERRORS.get(reason, PoolError)
    return error_cls(reason)


def step_or_raise(state: PoolState, params: ActionParams, *, max_amount: int = MAX_AMOUNT) -> StepResult:
    """Like ``step()`` but raises on rejection instead of returning a result.

    Raises:
        InvalidAmount: Parameter outside its domain, or a dust deposit.
        NotInitialized / AlreadyInitialized / InsufficientSeed /
        InsufficientShares: Guard condition not satisfied.
        InvariantViolation: Post-state violates one or more invariants.
    """
    result = step(state, params, max_amount=max_amount)
    if result.accepted:
        return result
    raise error_for_rejection(result.rejection or "")
