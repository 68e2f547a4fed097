"""
Constant-product swap kernel.

Pricing follows the invariant directly rather than the usual
`reserve_out * amount_in / (reserve_in + amount_in)` quote:

    k = reserve_in * reserve_out
    new_reserve_in = reserve_in + amount_in
    new_reserve_out = floor(k / new_reserve_in)
    amount_out = reserve_out - new_reserve_out

There is no fee. Because `new_reserve_out` is floored, `k_after` may end up
slightly below `k_before` (by less than `new_reserve_in`).

The kernel only computes. Whether a result is acceptable (for example a trade
that would empty the output reserve) is decided by the engine's invariant
checks on the post-state.
"""

from __future__ import annotations

from dataclasses import dataclass


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class SwapResult:
    amount_in: int
    amount_out: int
    new_reserve_in: int
    new_reserve_out: int
    k_before: int
    k_after: int

    @property
    def drains_output(self) -> bool:
        return self.new_reserve_out <= 0


def swap_exact_in(*, reserve_in: int, reserve_out: int, amount_in: int) -> SwapResult:
    """
    Exact-in swap quote + post-state.

    Raises ValueError on invalid inputs (empty reserve, non-positive amount).
    """
    for name, v in (
        ("reserve_in", reserve_in),
        ("reserve_out", reserve_out),
        ("amount_in", amount_in),
    ):
        _require_int(name, v)

    if reserve_in < 0 or reserve_out < 0:
        raise ValueError("reserves must be non-negative")
    if reserve_in == 0 or reserve_out == 0:
        raise ValueError("cannot swap against an empty reserve")
    if amount_in <= 0:
        raise ValueError("amount_in must be positive")

    k_before = reserve_in * reserve_out
    new_reserve_in = reserve_in + amount_in
    new_reserve_out = k_before // new_reserve_in
    amount_out = reserve_out - new_reserve_out

    return SwapResult(
        amount_in=amount_in,
        amount_out=amount_out,
        new_reserve_in=new_reserve_in,
        new_reserve_out=new_reserve_out,
        k_before=k_before,
        k_after=new_reserve_in * new_reserve_out,
    )
