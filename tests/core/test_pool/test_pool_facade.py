"""Tests for pooldex/core/pool/pool.py: mutable facade and quotes."""

from fractions import Fraction

import pytest

from pooldex.core.pool import (
    AlreadyInitialized,
    InsufficientShares,
    InvariantViolation,
    NotInitialized,
    Pool,
    PoolState,
    quote_add_liquidity,
    quote_remove_liquidity,
    quote_swap_a_for_b,
    quote_swap_b_for_a,
    spot_price,
)


def test_worked_swap_example():
    pool = Pool()
    pool.initialize(1000, 1000)
    assert pool.swap_a_for_b(100) == 91
    assert pool.reserve_a == 1100
    assert pool.reserve_b == 909
    assert pool.invariant == 1100 * 909


def test_worked_liquidity_example():
    pool = Pool()
    pool.initialize(500, 2000)
    amount_b, minted = pool.add_liquidity(100)
    assert amount_b == 400
    assert minted == 100
    assert pool.total_shares == 600
    assert pool.remove_liquidity(100) == (100, 400)
    assert (pool.reserve_a, pool.reserve_b, pool.total_shares) == (500, 2000, 500)


def test_failed_call_keeps_state():
    pool = Pool()
    pool.initialize(500, 2000)
    pool.add_liquidity(100)
    before = pool.state
    with pytest.raises(InsufficientShares):
        pool.remove_liquidity(601)
    assert pool.state is before


def test_drain_attempt_keeps_state():
    pool = Pool(PoolState(reserve_a=1, reserve_b=1))
    with pytest.raises(InvariantViolation):
        pool.swap_a_for_b(5)
    assert (pool.reserve_a, pool.reserve_b) == (1, 1)


def test_initialize_twice():
    pool = Pool()
    pool.initialize(1, 1)
    with pytest.raises(AlreadyInitialized):
        pool.initialize(1, 1)


def test_max_amount_applies_to_facade():
    pool = Pool(PoolState(reserve_a=1000, reserve_b=1000), max_amount=50)
    with pytest.raises(ValueError):
        pool.swap_b_for_a(51)


def test_quotes_do_not_change_state():
    s = PoolState(reserve_a=1000, reserve_b=1000)
    assert quote_swap_a_for_b(s, 100) == 91
    assert quote_swap_b_for_a(s, 100) == 91
    assert s == PoolState(reserve_a=1000, reserve_b=1000)


def test_liquidity_quotes():
    s = PoolState(reserve_a=600, reserve_b=2400, total_shares=600)
    assert quote_add_liquidity(s, 60) == (240, 60)
    assert quote_remove_liquidity(s, 100) == (100, 400)


def test_spot_price_is_exact():
    assert spot_price(PoolState(reserve_a=500, reserve_b=2000)) == Fraction(4)
    assert spot_price(PoolState(reserve_a=3, reserve_b=1)) == Fraction(1, 3)


def test_spot_price_uninitialized():
    with pytest.raises(NotInitialized):
        spot_price(PoolState())
