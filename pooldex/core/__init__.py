"""
Core pool algorithms
"""

from .pool import (
    Pool,
    PoolState,
    initial_state,
    step,
    step_or_raise,
)

__all__ = [
    "Pool",
    "PoolState",
    "initial_state",
    "step",
    "step_or_raise",
]
