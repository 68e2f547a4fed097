"""Guard functions for the pool engine.

One pure function per action. Each evaluates the PRE-state and returns
``None`` when the action may proceed, otherwise a rejection code.

Rejection codes:
- ``already_initialized`` / ``insufficient_seed`` (initialize)
- ``not_initialized`` (swaps, add_liquidity)
- ``dust_deposit`` (add_liquidity that would mint nothing or need no asset B)
- ``insufficient_shares`` (remove_liquidity)
"""

from __future__ import annotations

from typing import Optional

from ...kernels.python.share_math import mint_shares
from .types import ActionParams, PoolState


def _has_both_reserves(state: PoolState) -> bool:
    return state.reserve_a > 0 and state.reserve_b > 0


def guard_initialize(state: PoolState, params: ActionParams) -> Optional[str]:
    if state.has_reserves:
        return "already_initialized"
    if params.amount_a <= 0 or params.amount_b <= 0:
        return "insufficient_seed"
    return None


def guard_swap(state: PoolState, params: ActionParams) -> Optional[str]:
    if not _has_both_reserves(state):
        return "not_initialized"
    return None


def guard_add_liquidity(state: PoolState, params: ActionParams) -> Optional[str]:
    if not _has_both_reserves(state):
        return "not_initialized"
    res = mint_shares(
        amount_a=params.amount_a,
        reserve_a=state.reserve_a,
        reserve_b=state.reserve_b,
        total_shares=state.total_shares,
    )
    if res.amount_b <= 0 or res.shares_minted <= 0:
        return "dust_deposit"
    return None


def guard_remove_liquidity(state: PoolState, params: ActionParams) -> Optional[str]:
    if params.share_units > state.total_shares:
        return "insufficient_shares"
    return None
