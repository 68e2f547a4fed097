"""
Liquidity share kernel.

Written as a small set of pure functions with explicit floor rounding:

    amount_b = floor(amount_a * reserve_b / reserve_a)
    minted   = floor(amount_a * total_shares / reserve_a)        (total_shares > 0)
    out_a    = floor(reserve_a * share_units / total_shares)
    out_b    = floor(reserve_b * share_units / total_shares)

First deposit (total_shares == 0): the reserves already in the pool are valued
at one share unit per unit of asset A. The depositor receives `amount_a`
shares and `reserve_a` seed shares are minted alongside, so the share base
stays proportional to reserve A.
"""

from __future__ import annotations

from dataclasses import dataclass


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class MintSharesResult:
    amount_a: int
    amount_b: int
    shares_minted: int
    seed_shares: int
    new_reserve_a: int
    new_reserve_b: int
    new_total_shares: int


@dataclass(frozen=True)
class BurnSharesResult:
    share_units: int
    out_a: int
    out_b: int
    new_reserve_a: int
    new_reserve_b: int
    new_total_shares: int


def matching_amount(*, amount_a: int, reserve_a: int, reserve_b: int) -> int:
    """Asset-B amount that keeps the pool ratio for an `amount_a` deposit (floor)."""
    for name, v in (("amount_a", amount_a), ("reserve_a", reserve_a), ("reserve_b", reserve_b)):
        _require_int(name, v)
    if reserve_a <= 0 or reserve_b < 0:
        raise ValueError("reserve_a must be positive and reserve_b non-negative")
    if amount_a <= 0:
        raise ValueError("amount_a must be positive")
    return (amount_a * reserve_b) // reserve_a


def mint_shares(*, amount_a: int, reserve_a: int, reserve_b: int, total_shares: int) -> MintSharesResult:
    """
    Ratio-preserving deposit of `amount_a` plus its matching asset-B amount.

    Zero outputs (dust deposits) are returned as computed; the caller decides
    whether they are acceptable.
    """
    for name, v in (
        ("amount_a", amount_a),
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
        ("total_shares", total_shares),
    ):
        _require_int(name, v)

    if reserve_a <= 0 or reserve_b <= 0:
        raise ValueError("cannot deposit into an empty pool")
    if total_shares < 0:
        raise ValueError("total_shares must be non-negative")
    if amount_a <= 0:
        raise ValueError("amount_a must be positive")

    amount_b = matching_amount(amount_a=amount_a, reserve_a=reserve_a, reserve_b=reserve_b)

    if total_shares == 0:
        seed_shares = reserve_a
        minted = amount_a
    else:
        seed_shares = 0
        minted = (amount_a * total_shares) // reserve_a

    return MintSharesResult(
        amount_a=amount_a,
        amount_b=amount_b,
        shares_minted=minted,
        seed_shares=seed_shares,
        new_reserve_a=reserve_a + amount_a,
        new_reserve_b=reserve_b + amount_b,
        new_total_shares=total_shares + seed_shares + minted,
    )


def burn_shares(*, share_units: int, reserve_a: int, reserve_b: int, total_shares: int) -> BurnSharesResult:
    """Burn share units for the proportional slice of both reserves (floor rounding)."""
    for name, v in (
        ("share_units", share_units),
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
        ("total_shares", total_shares),
    ):
        _require_int(name, v)

    if share_units <= 0:
        raise ValueError("share_units must be positive")
    if reserve_a < 0 or reserve_b < 0:
        raise ValueError("reserves must be non-negative")
    if total_shares <= 0:
        raise ValueError("total_shares must be positive")
    if share_units > total_shares:
        raise ValueError("cannot burn more than total_shares")

    out_a = (reserve_a * share_units) // total_shares
    out_b = (reserve_b * share_units) // total_shares

    return BurnSharesResult(
        share_units=share_units,
        out_a=out_a,
        out_b=out_b,
        new_reserve_a=reserve_a - out_a,
        new_reserve_b=reserve_b - out_b,
        new_total_shares=total_shares - share_units,
    )
