"""
Imperative shell around the pool calculator: configuration, logging, the
sequential ledger and the scenario replay CLI.
"""

from .config import LedgerConfig
from .errors import InsufficientBalance, MalformedOperation, UnknownOperation
from .ledger import PoolLedger

__all__ = [
    "LedgerConfig",
    "PoolLedger",
    "InsufficientBalance",
    "MalformedOperation",
    "UnknownOperation",
]
