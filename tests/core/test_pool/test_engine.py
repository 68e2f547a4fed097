"""Tests for pooldex/core/pool/engine.py: dispatch table + step function."""

from dataclasses import replace

import pytest

from pooldex.core.pool import (
    Action,
    ActionParams,
    AlreadyInitialized,
    Event,
    InsufficientSeed,
    InsufficientShares,
    InvalidAmount,
    InvariantViolation,
    NotInitialized,
    PoolError,
    PoolState,
    initial_state,
    step,
    step_or_raise,
)


def _init(seed_a: int, seed_b: int) -> PoolState:
    r = step(initial_state(), ActionParams(action=Action.INITIALIZE, amount_a=seed_a, amount_b=seed_b))
    assert r.accepted
    return r.state


def _seeded_with_shares() -> PoolState:
    """initialize(500, 2000) then a first deposit of 100 A."""
    r = step(_init(500, 2000), ActionParams(action=Action.ADD_LIQUIDITY, amount_a=100))
    assert r.accepted
    return r.state


# ---------------------------------------------------------------------------
# initialize
# ---------------------------------------------------------------------------

class TestInitialize:
    def test_basic(self):
        r = step(initial_state(), ActionParams(action=Action.INITIALIZE, amount_a=1000, amount_b=1000))
        assert r.accepted
        assert r.state == PoolState(reserve_a=1000, reserve_b=1000, total_shares=0)
        assert r.state.invariant == 1_000_000
        assert r.effect.event == Event.POOL_INITIALIZED
        assert (r.effect.amount_a, r.effect.amount_b) == (1000, 1000)

    def test_twice_rejected(self):
        s = _init(1000, 1000)
        r = step(s, ActionParams(action=Action.INITIALIZE, amount_a=1, amount_b=1))
        assert not r.accepted
        assert r.rejection == "already_initialized"

    def test_already_initialized_wins_over_bad_seed(self):
        s = _init(1000, 1000)
        r = step(s, ActionParams(action=Action.INITIALIZE, amount_a=0, amount_b=0))
        assert r.rejection == "already_initialized"

    @pytest.mark.parametrize("seed_a,seed_b", [(0, 5), (5, 0), (-1, 5), (0, 0)])
    def test_non_positive_seed_rejected(self, seed_a, seed_b):
        r = step(initial_state(), ActionParams(action=Action.INITIALIZE, amount_a=seed_a, amount_b=seed_b))
        assert not r.accepted
        assert r.rejection == "insufficient_seed"


# ---------------------------------------------------------------------------
# swaps
# ---------------------------------------------------------------------------

class TestSwapAForB:
    def test_worked_example(self):
        r = step(_init(1000, 1000), ActionParams(action=Action.SWAP_A_FOR_B, amount_in=100))
        assert r.accepted
        assert r.state.reserve_a == 1100
        assert r.state.reserve_b == 909
        assert r.effect.amount_out == 91
        assert r.effect.amount_in == 100
        assert r.effect.event == Event.SWAPPED_A_FOR_B

    def test_invariant_may_drift_down_by_rounding(self):
        r = step(_init(1000, 1000), ActionParams(action=Action.SWAP_A_FOR_B, amount_in=100))
        assert r.effect.k_before == 1_000_000
        assert r.effect.k_after == 999_900
        assert r.state.invariant == r.effect.k_after

    def test_uninitialized_rejected(self):
        r = step(initial_state(), ActionParams(action=Action.SWAP_A_FOR_B, amount_in=100))
        assert r.rejection == "not_initialized"

    def test_drain_rejected_as_invariant_violation(self):
        s = _init(1, 1)
        r = step(s, ActionParams(action=Action.SWAP_A_FOR_B, amount_in=5))
        assert not r.accepted
        assert r.rejection == "invariant:inv_reserves_paired"

    @pytest.mark.parametrize("amount", [0, -3, True, 1.5, "10"])
    def test_bad_amount_rejected(self, amount):
        r = step(_init(1000, 1000), ActionParams(action=Action.SWAP_A_FOR_B, amount_in=amount))
        assert r.rejection == "invalid_amount:amount_in"


class TestSwapBForA:
    def test_symmetric_to_a_for_b(self):
        r = step(_init(1000, 1000), ActionParams(action=Action.SWAP_B_FOR_A, amount_in=100))
        assert r.accepted
        assert (r.state.reserve_a, r.state.reserve_b) == (909, 1100)
        assert r.effect.amount_out == 91
        assert r.effect.event == Event.SWAPPED_B_FOR_A

    def test_total_shares_untouched(self):
        s = _seeded_with_shares()
        r = step(s, ActionParams(action=Action.SWAP_B_FOR_A, amount_in=50))
        assert r.accepted
        assert r.state.total_shares == s.total_shares


# ---------------------------------------------------------------------------
# liquidity
# ---------------------------------------------------------------------------

class TestAddLiquidity:
    def test_matching_amount_b(self):
        r = step(_init(500, 2000), ActionParams(action=Action.ADD_LIQUIDITY, amount_a=100))
        assert r.accepted
        assert r.effect.amount_b == 400
        assert (r.state.reserve_a, r.state.reserve_b) == (600, 2400)

    def test_first_deposit_bootstrap(self):
        r = step(_init(500, 2000), ActionParams(action=Action.ADD_LIQUIDITY, amount_a=100))
        assert r.effect.shares_minted == 100
        assert r.effect.seed_shares == 500
        assert r.state.total_shares == 600

    def test_later_deposit(self):
        r = step(_seeded_with_shares(), ActionParams(action=Action.ADD_LIQUIDITY, amount_a=60))
        assert r.accepted
        assert r.effect.amount_b == 240
        assert r.effect.shares_minted == 60
        assert r.effect.seed_shares == 0
        assert r.state.total_shares == 660

    def test_uninitialized_rejected(self):
        r = step(initial_state(), ActionParams(action=Action.ADD_LIQUIDITY, amount_a=100))
        assert r.rejection == "not_initialized"

    def test_dust_deposit_rejected(self):
        r = step(_init(1000, 1), ActionParams(action=Action.ADD_LIQUIDITY, amount_a=1))
        assert r.rejection == "dust_deposit"


class TestRemoveLiquidity:
    def test_returns_proportional_slice(self):
        r = step(_seeded_with_shares(), ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=100))
        assert r.accepted
        assert (r.effect.amount_a, r.effect.amount_b) == (100, 400)
        assert r.effect.shares_burned == 100
        assert r.state == PoolState(reserve_a=500, reserve_b=2000, total_shares=500)

    def test_burning_everything_empties_pool(self):
        s = _seeded_with_shares()
        r = step(s, ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=s.total_shares))
        assert r.accepted
        assert r.state == initial_state()

    def test_more_than_total_rejected(self):
        s = _seeded_with_shares()
        r = step(s, ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=601))
        assert not r.accepted
        assert r.rejection == "insufficient_shares"

    def test_without_shares_rejected(self):
        r = step(_init(500, 2000), ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=1))
        assert r.rejection == "insufficient_shares"

    def test_zero_units_rejected(self):
        r = step(_seeded_with_shares(), ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=0))
        assert r.rejection == "invalid_amount:share_units"


# ---------------------------------------------------------------------------
# domain bounds + dispatch
# ---------------------------------------------------------------------------

class TestDomain:
    def test_max_amount_enforced(self):
        s = _init(1000, 1000)
        r = step(s, ActionParams(action=Action.SWAP_A_FOR_B, amount_in=101), max_amount=100)
        assert r.rejection == "invalid_amount:amount_in"
        r = step(s, ActionParams(action=Action.SWAP_A_FOR_B, amount_in=100), max_amount=100)
        assert r.accepted

    def test_oversized_seed_rejected(self):
        r = step(
            initial_state(),
            ActionParams(action=Action.INITIALIZE, amount_a=11, amount_b=1),
            max_amount=10,
        )
        assert r.rejection == "invalid_amount:amount_a"

    def test_unknown_action(self):
        r = step(initial_state(), ActionParams(action="bogus"))  # type: ignore[arg-type]
        assert not r.accepted
        assert r.rejection.startswith("unknown_action:")

    def test_rejection_leaves_input_state_alone(self):
        s = _seeded_with_shares()
        before = replace(s)
        step(s, ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=10_000))
        assert s == before


# ---------------------------------------------------------------------------
# step_or_raise
# ---------------------------------------------------------------------------

class TestStepOrRaise:
    def test_accepts(self):
        r = step_or_raise(_init(1000, 1000), ActionParams(action=Action.SWAP_A_FOR_B, amount_in=100))
        assert r.accepted

    @pytest.mark.parametrize(
        "state_fn,params,exc",
        [
            (initial_state, ActionParams(action=Action.SWAP_A_FOR_B, amount_in=1), NotInitialized),
            (lambda: _init(1, 1), ActionParams(action=Action.INITIALIZE, amount_a=1, amount_b=1), AlreadyInitialized),
            (initial_state, ActionParams(action=Action.INITIALIZE, amount_a=0, amount_b=1), InsufficientSeed),
            (_seeded_with_shares, ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=601), InsufficientShares),
            (lambda: _init(1, 1), ActionParams(action=Action.SWAP_A_FOR_B, amount_in=0), InvalidAmount),
            (lambda: _init(1000, 1), ActionParams(action=Action.ADD_LIQUIDITY, amount_a=1), InvalidAmount),
        ],
    )
    def test_typed_errors(self, state_fn, params, exc):
        with pytest.raises(exc):
            step_or_raise(state_fn(), params)

    def test_invariant_violation_lists_ids(self):
        with pytest.raises(InvariantViolation) as info:
            step_or_raise(_init(1, 1), ActionParams(action=Action.SWAP_A_FOR_B, amount_in=5))
        assert info.value.violations == ["inv_reserves_paired"]

    def test_every_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            step_or_raise(initial_state(), ActionParams(action=Action.SWAP_B_FOR_A, amount_in=1))
        assert issubclass(InvariantViolation, PoolError)
