"""
pooldex: integer constant-product pool calculator and its ledger shell.
"""

from .core.pool import Pool, PoolError, PoolState

__version__ = "0.1.0"

__all__ = ["Pool", "PoolError", "PoolState", "__version__"]
