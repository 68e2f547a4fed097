"""Invariant checkers for the pool engine.

Each function returns True when the invariant holds, and `check_all()`
returns the list of violated invariant IDs (empty = all pass). The engine
runs them on every post-state before accepting a step.
"""

from __future__ import annotations

from typing import Callable

from .types import PoolState


def inv_reserves_nonneg(s: PoolState) -> bool:
    return s.reserve_a >= 0 and s.reserve_b >= 0


def inv_shares_nonneg(s: PoolState) -> bool:
    return s.total_shares >= 0


def inv_reserves_paired(s: PoolState) -> bool:
    # Either the pool is empty or neither side is drained.
    return (s.reserve_a == 0) == (s.reserve_b == 0)


def inv_shares_need_reserves(s: PoolState) -> bool:
    if s.total_shares == 0:
        return True
    return s.reserve_a > 0 and s.reserve_b > 0


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

INVARIANT_REGISTRY: dict[str, Callable[[PoolState], bool]] = {
    "inv_reserves_nonneg": inv_reserves_nonneg,
    "inv_shares_nonneg": inv_shares_nonneg,
    "inv_reserves_paired": inv_reserves_paired,
    "inv_shares_need_reserves": inv_shares_need_reserves,
}


def check_all(state: PoolState) -> list[str]:
    """Return list of violated invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(state)
    ]
