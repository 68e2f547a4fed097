from __future__ import annotations

import pytest

from pooldex.kernels.python.share_math import burn_shares, matching_amount, mint_shares


def test_matching_amount_floors() -> None:
    assert matching_amount(amount_a=100, reserve_a=500, reserve_b=2000) == 400
    # 7 * 10 / 3 = 23.33...
    assert matching_amount(amount_a=7, reserve_a=3, reserve_b=10) == 23


def test_first_deposit_mints_seed_shares_alongside() -> None:
    res = mint_shares(amount_a=100, reserve_a=500, reserve_b=2000, total_shares=0)
    assert res.amount_b == 400
    assert res.shares_minted == 100
    assert res.seed_shares == 500
    assert res.new_total_shares == 600
    assert (res.new_reserve_a, res.new_reserve_b) == (600, 2400)


def test_later_deposit_is_proportional_to_total_shares() -> None:
    res = mint_shares(amount_a=60, reserve_a=600, reserve_b=2400, total_shares=600)
    assert res.amount_b == 240
    assert res.shares_minted == 60
    assert res.seed_shares == 0
    assert res.new_total_shares == 660


def test_dust_deposit_is_reported_not_rejected() -> None:
    res = mint_shares(amount_a=1, reserve_a=1000, reserve_b=1, total_shares=1000)
    assert res.amount_b == 0
    assert res.shares_minted == 1


def test_burn_shares_floors_both_sides() -> None:
    res = burn_shares(share_units=100, reserve_a=600, reserve_b=2401, total_shares=600)
    assert res.out_a == 100
    # 2401 * 100 / 600 = 400.16...
    assert res.out_b == 400
    assert (res.new_reserve_a, res.new_reserve_b, res.new_total_shares) == (500, 2001, 500)


def test_burn_shares_rejects_more_than_supply() -> None:
    with pytest.raises(ValueError, match="total_shares"):
        burn_shares(share_units=601, reserve_a=600, reserve_b=2400, total_shares=600)


def test_mint_shares_rejects_empty_pool() -> None:
    with pytest.raises(ValueError, match="empty pool"):
        mint_shares(amount_a=1, reserve_a=0, reserve_b=0, total_shares=0)
