"""
Deterministic state root for a single-pool ledger.

The root is the sha256 of the canonical JSON of a tagged document holding
the pool, every non-zero balance and every non-zero share position. Entries
are sorted, so insertion order never changes the root.
"""

from __future__ import annotations

from .balances import BalanceTable
from .canonical import canonical_json_bytes, sha256_hex
from .shares import ShareLedger


STATE_ROOT_DOMAIN = "pooldex:state_root:v1"


def compute_state_root(
    *,
    asset_a: str,
    asset_b: str,
    reserve_a: int,
    reserve_b: int,
    total_shares: int,
    balances: BalanceTable,
    shares: ShareLedger,
) -> str:
    """Return the 0x-prefixed sha256 root of the ledger state."""
    if not isinstance(balances, BalanceTable):
        raise TypeError("balances must be a BalanceTable")
    if not isinstance(shares, ShareLedger):
        raise TypeError("shares must be a ShareLedger")

    document = {
        "domain": STATE_ROOT_DOMAIN,
        "pool": [asset_a, asset_b, reserve_a, reserve_b, total_shares],
        "balances": [
            [account, asset, amount]
            for (account, asset), amount in sorted(balances.get_all_balances().items())
        ],
        "shares": [[account, units] for account, units in sorted(shares.get_all_balances().items())],
    }
    return sha256_hex(canonical_json_bytes(document))
