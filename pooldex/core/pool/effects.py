"""Effect functions for the pool engine.

One pure function per action. Each derives the ``Effect`` from the PRE- and
POST-state, so reported amounts are exactly the reserve deltas that were
applied.
"""

from __future__ import annotations

from .types import ActionParams, Effect, Event, PoolState


def effect_initialize(pre: PoolState, post: PoolState, params: ActionParams) -> Effect:
    return Effect(
        event=Event.POOL_INITIALIZED,
        amount_a=post.reserve_a,
        amount_b=post.reserve_b,
        k_before=pre.invariant,
        k_after=post.invariant,
    )


def effect_swap_a_for_b(pre: PoolState, post: PoolState, params: ActionParams) -> Effect:
    return Effect(
        event=Event.SWAPPED_A_FOR_B,
        amount_in=post.reserve_a - pre.reserve_a,
        amount_out=pre.reserve_b - post.reserve_b,
        k_before=pre.invariant,
        k_after=post.invariant,
    )


def effect_swap_b_for_a(pre: PoolState, post: PoolState, params: ActionParams) -> Effect:
    return Effect(
        event=Event.SWAPPED_B_FOR_A,
        amount_in=post.reserve_b - pre.reserve_b,
        amount_out=pre.reserve_a - post.reserve_a,
        k_before=pre.invariant,
        k_after=post.invariant,
    )


def effect_add_liquidity(pre: PoolState, post: PoolState, params: ActionParams) -> Effect:
    # First deposit also mints seed shares for the reserves already present.
    seed = pre.reserve_a if pre.total_shares == 0 else 0
    return Effect(
        event=Event.LIQUIDITY_ADDED,
        amount_a=post.reserve_a - pre.reserve_a,
        amount_b=post.reserve_b - pre.reserve_b,
        shares_minted=post.total_shares - pre.total_shares - seed,
        seed_shares=seed,
        k_before=pre.invariant,
        k_after=post.invariant,
    )


def effect_remove_liquidity(pre: PoolState, post: PoolState, params: ActionParams) -> Effect:
    return Effect(
        event=Event.LIQUIDITY_REMOVED,
        amount_a=pre.reserve_a - post.reserve_a,
        amount_b=pre.reserve_b - post.reserve_b,
        shares_burned=pre.total_shares - post.total_shares,
        k_before=pre.invariant,
        k_after=post.invariant,
    )
