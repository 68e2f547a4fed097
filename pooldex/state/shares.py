"""
Per-account share bookkeeping for a single pool.

The pool calculator only tracks aggregate `total_shares`; which account owns
which slice lives here.
"""

from __future__ import annotations

from typing import Dict

from .balances import AccountId, Amount


class ShareLedger:
    """
    Share balance table mapping account -> share_units.

    Notes:
    - Share balances are always non-negative.
    - Zero balances are omitted to keep the table sparse.
    """

    def __init__(self) -> None:
        self._balances: Dict[AccountId, Amount] = {}

    def get(self, account: AccountId) -> Amount:
        """Get share balance for `account`. Returns 0 if not found."""
        return self._balances.get(account, 0)

    def set(self, account: AccountId, amount: Amount) -> None:
        if amount < 0:
            raise ValueError(f"Share balance cannot be negative: {amount}")
        if amount == 0:
            self._balances.pop(account, None)
        else:
            self._balances[account] = amount

    def add(self, account: AccountId, delta: int) -> None:
        """Add delta to a share balance (delta may be negative)."""
        current = self.get(account)
        new_balance = current + delta
        if new_balance < 0:
            raise ValueError(
                f"Insufficient share balance: {current} + {delta} = {new_balance} < 0"
            )
        self.set(account, new_balance)

    def subtract(self, account: AccountId, delta: Amount) -> None:
        """Subtract a non-negative amount from a share balance."""
        if delta < 0:
            raise ValueError(f"Delta must be non-negative: {delta}")
        self.add(account, -delta)

    def total(self) -> Amount:
        return sum(self._balances.values())

    def get_all_balances(self) -> Dict[AccountId, Amount]:
        return dict(self._balances)

    def __repr__(self) -> str:
        return f"ShareLedger({len(self._balances)} entries)"
