"""
Account-side state for the pool ledger.
"""

from .balances import BalanceTable
from .shares import ShareLedger

__all__ = [
    "BalanceTable",
    "ShareLedger",
]
