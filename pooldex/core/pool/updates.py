"""State transition functions for the pool engine.

One pure function per action. Each returns a new `PoolState`; updates
evaluate against the PRE-state and replace every field at once via
`dataclasses.replace()`.
"""

from __future__ import annotations

from dataclasses import replace

from ...kernels.python.cpmm_swap import swap_exact_in
from ...kernels.python.share_math import burn_shares, mint_shares
from .types import ActionParams, PoolState


def apply_initialize(state: PoolState, params: ActionParams) -> PoolState:
    return replace(state, reserve_a=params.amount_a, reserve_b=params.amount_b)


def apply_swap_a_for_b(state: PoolState, params: ActionParams) -> PoolState:
    res = swap_exact_in(
        reserve_in=state.reserve_a,
        reserve_out=state.reserve_b,
        amount_in=params.amount_in,
    )
    return replace(state, reserve_a=res.new_reserve_in, reserve_b=res.new_reserve_out)


def apply_swap_b_for_a(state: PoolState, params: ActionParams) -> PoolState:
    res = swap_exact_in(
        reserve_in=state.reserve_b,
        reserve_out=state.reserve_a,
        amount_in=params.amount_in,
    )
    return replace(state, reserve_a=res.new_reserve_out, reserve_b=res.new_reserve_in)


def apply_add_liquidity(state: PoolState, params: ActionParams) -> PoolState:
    res = mint_shares(
        amount_a=params.amount_a,
        reserve_a=state.reserve_a,
        reserve_b=state.reserve_b,
        total_shares=state.total_shares,
    )
    return replace(
        state,
        reserve_a=res.new_reserve_a,
        reserve_b=res.new_reserve_b,
        total_shares=res.new_total_shares,
    )


def apply_remove_liquidity(state: PoolState, params: ActionParams) -> PoolState:
    res = burn_shares(
        share_units=params.share_units,
        reserve_a=state.reserve_a,
        reserve_b=state.reserve_b,
        total_shares=state.total_shares,
    )
    return replace(
        state,
        reserve_a=res.new_reserve_a,
        reserve_b=res.new_reserve_b,
        total_shares=res.new_total_shares,
    )
