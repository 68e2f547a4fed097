"""Data types for the `pool` engine.

All types are frozen dataclasses (immutable).

Units/conventions:
- every amount is a non-negative integer count of the asset's smallest unit,
- `invariant` is derived (`reserve_a * reserve_b`) and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Action(Enum):
    """One member per pool operation."""
    INITIALIZE = "initialize"
    SWAP_A_FOR_B = "swap_a_for_b"
    SWAP_B_FOR_A = "swap_b_for_a"
    ADD_LIQUIDITY = "add_liquidity"
    REMOVE_LIQUIDITY = "remove_liquidity"


@unique
class Event(Enum):
    """One member per effect event type."""
    POOL_INITIALIZED = "PoolInitialized"
    SWAPPED_A_FOR_B = "SwappedAForB"
    SWAPPED_B_FOR_A = "SwappedBForA"
    LIQUIDITY_ADDED = "LiquidityAdded"
    LIQUIDITY_REMOVED = "LiquidityRemoved"


@dataclass(frozen=True)
class PoolState:
    """Reserves of a two-asset constant-product pool plus aggregate shares."""

    reserve_a: int = 0
    reserve_b: int = 0
    total_shares: int = 0

    @property
    def invariant(self) -> int:
        return self.reserve_a * self.reserve_b

    @property
    def has_reserves(self) -> bool:
        return self.reserve_a != 0 or self.reserve_b != 0


@dataclass(frozen=True)
class ActionParams:
    """Parameters for an action. Unused fields default to 0."""

    action: Action
    amount_a: int = 0       # initialize (seed A) / add_liquidity
    amount_b: int = 0       # initialize (seed B)
    amount_in: int = 0      # swap_a_for_b / swap_b_for_a
    share_units: int = 0    # remove_liquidity


@dataclass(frozen=True)
class Effect:
    """Observables emitted after a successful step.

    `amount_a` / `amount_b` are the asset amounts that entered (initialize,
    add_liquidity) or left (remove_liquidity) the pool.
    """

    event: Event
    amount_in: int = 0
    amount_out: int = 0
    amount_a: int = 0
    amount_b: int = 0
    shares_minted: int = 0
    seed_shares: int = 0
    shares_burned: int = 0
    k_before: int = 0
    k_after: int = 0


@dataclass(frozen=True)
class StepResult:
    """Result of a single engine step."""

    accepted: bool
    state: PoolState | None = None
    effect: Effect | None = None
    rejection: str | None = None
