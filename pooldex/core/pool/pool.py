"""Mutable facade over the pure engine.

``Pool`` holds one ``PoolState`` and exposes the five operations as methods.
Each method runs ``step_or_raise`` against the current state and swaps in
the new state only when the step was accepted, so a failed call leaves the
pool exactly as it was.

The quote helpers answer "what would happen" without producing a new state.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Optional, Tuple

from .engine import MAX_AMOUNT, step_or_raise
from .errors import NotInitialized
from .state import initial_state
from .types import Action, ActionParams, Effect, PoolState


def quote_swap_a_for_b(state: PoolState, amount_in: int, *, max_amount: int = MAX_AMOUNT) -> int:
    params = ActionParams(action=Action.SWAP_A_FOR_B, amount_in=amount_in)
    return step_or_raise(state, params, max_amount=max_amount).effect.amount_out


def quote_swap_b_for_a(state: PoolState, amount_in: int, *, max_amount: int = MAX_AMOUNT) -> int:
    params = ActionParams(action=Action.SWAP_B_FOR_A, amount_in=amount_in)
    return step_or_raise(state, params, max_amount=max_amount).effect.amount_out


def quote_add_liquidity(state: PoolState, amount_a: int, *, max_amount: int = MAX_AMOUNT) -> Tuple[int, int]:
    """Return ``(amount_b, shares_minted)`` for a deposit of ``amount_a``."""
    params = ActionParams(action=Action.ADD_LIQUIDITY, amount_a=amount_a)
    effect = step_or_raise(state, params, max_amount=max_amount).effect
    return effect.amount_b, effect.shares_minted


def quote_remove_liquidity(state: PoolState, share_units: int, *, max_amount: int = MAX_AMOUNT) -> Tuple[int, int]:
    """Return ``(out_a, out_b)`` for burning ``share_units``."""
    params = ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=share_units)
    effect = step_or_raise(state, params, max_amount=max_amount).effect
    return effect.amount_a, effect.amount_b


def spot_price(state: PoolState) -> Fraction:
    """Marginal price of A in units of B (``reserve_b / reserve_a``), exact."""
    if state.reserve_a <= 0 or state.reserve_b <= 0:
        raise NotInitialized("not_initialized")
    return Fraction(state.reserve_b, state.reserve_a)


class Pool:
    """A single constant-product pool with atomic, all-or-nothing updates."""

    def __init__(self, state: Optional[PoolState] = None, *, max_amount: int = MAX_AMOUNT) -> None:
        self._state = initial_state() if state is None else state
        self._max_amount = max_amount

    @property
    def state(self) -> PoolState:
        return self._state

    @property
    def reserve_a(self) -> int:
        return self._state.reserve_a

    @property
    def reserve_b(self) -> int:
        return self._state.reserve_b

    @property
    def total_shares(self) -> int:
        return self._state.total_shares

    @property
    def invariant(self) -> int:
        return self._state.invariant

    def apply(self, params: ActionParams) -> Effect:
        """Run one action; on success replace the state and return its effect."""
        result = step_or_raise(self._state, params, max_amount=self._max_amount)
        self._state = result.state
        return result.effect

    def initialize(self, seed_a: int, seed_b: int) -> None:
        self.apply(ActionParams(action=Action.INITIALIZE, amount_a=seed_a, amount_b=seed_b))

    def swap_a_for_b(self, amount_in: int) -> int:
        return self.apply(ActionParams(action=Action.SWAP_A_FOR_B, amount_in=amount_in)).amount_out

    def swap_b_for_a(self, amount_in: int) -> int:
        return self.apply(ActionParams(action=Action.SWAP_B_FOR_A, amount_in=amount_in)).amount_out

    def add_liquidity(self, amount_a: int) -> Tuple[int, int]:
        """Deposit ``amount_a`` plus its matching B. Returns ``(amount_b, shares_minted)``."""
        effect = self.apply(ActionParams(action=Action.ADD_LIQUIDITY, amount_a=amount_a))
        return effect.amount_b, effect.shares_minted

    def remove_liquidity(self, share_units: int) -> Tuple[int, int]:
        """Burn ``share_units``. Returns ``(out_a, out_b)``."""
        effect = self.apply(ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=share_units))
        return effect.amount_a, effect.amount_b

    def __repr__(self) -> str:
        s = self._state
        return f"Pool(reserves=({s.reserve_a}, {s.reserve_b}), total_shares={s.total_shares})"
