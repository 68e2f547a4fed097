"""
Sequential transaction processor for a single pool.

This is the imperative shell around the pure calculator:
- checks that the acting account can fund the operation,
- runs the calculator step (nothing is applied if it rejects),
- moves asset balances and share units to match the step's effect,
- logs one event per processed operation.

Operations are processed strictly one at a time, in call order.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..core.pool import (
    Action,
    ActionParams,
    Effect,
    InsufficientShares,
    InvalidAmount,
    Pool,
    PoolError,
    quote_add_liquidity,
    state_from_dict,
    state_to_dict,
)
from ..state.balances import AccountId, Amount, AssetId, BalanceTable
from ..state.shares import ShareLedger
from ..state.state_root import compute_state_root
from .config import LedgerConfig
from .errors import InsufficientBalance, MalformedOperation, UnknownOperation
from .logging_config import get_logger

logger = get_logger(__name__)

# kind -> required int fields (besides `account`)
OPERATION_FIELDS: Dict[str, tuple[str, ...]] = {
    "mint": ("amount",),
    "initialize": ("amount_a", "amount_b"),
    "swap_a_for_b": ("amount_in",),
    "swap_b_for_a": ("amount_in",),
    "add_liquidity": ("amount_a",),
    "remove_liquidity": ("share_units",),
}


def _snapshot_amount(entry: Mapping[str, Any], field: str) -> int:
    value = entry[field]
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"snapshot {field!r} must be int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"snapshot {field!r} must be non-negative, got {value}")
    return value


class PoolLedger:
    """
    Ledger state for one pool: the pool itself, account balances of both
    assets, and the per-account share ledger.
    """

    def __init__(
        self,
        *,
        asset_a: AssetId = "A",
        asset_b: AssetId = "B",
        config: Optional[LedgerConfig] = None,
        pool: Optional[Pool] = None,
        balances: Optional[BalanceTable] = None,
        shares: Optional[ShareLedger] = None,
        seed_owner: Optional[AccountId] = None,
    ) -> None:
        if not asset_a or not asset_b or asset_a == asset_b:
            raise ValueError(f"pool assets must be two distinct non-empty ids: ({asset_a!r}, {asset_b!r})")
        self.config = config or LedgerConfig()
        self.asset_a = asset_a
        self.asset_b = asset_b
        self.pool = pool or Pool(max_amount=self.config.max_amount)
        self.balances = balances or BalanceTable()
        self.shares = shares or ShareLedger()
        # Account that provided the initial reserves; receives the seed shares.
        self.seed_owner = seed_owner

    # -- funding helpers -----------------------------------------------------

    def _require_balance(self, account: AccountId, asset: AssetId, amount: Amount) -> None:
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise InvalidAmount(f"invalid_amount: {asset} amount must be int, got {type(amount).__name__}")
        if not self.config.require_funds:
            return
        have = self.balances.get(account, asset)
        if have < amount:
            raise InsufficientBalance(
                f"{account} holds {have} {asset}, needs {amount}"
            )

    def _debit(self, account: AccountId, asset: AssetId, amount: Amount) -> None:
        if self.config.require_funds and amount:
            self.balances.subtract(account, asset, amount)

    def _credit(self, account: AccountId, asset: AssetId, amount: Amount) -> None:
        if self.config.require_funds and amount:
            self.balances.add(account, asset, amount)

    def _log_applied(self, kind: str, account: AccountId, effect: Effect) -> None:
        logger.info(
            "operation_applied",
            kind=kind,
            account=account,
            amount_in=effect.amount_in,
            amount_out=effect.amount_out,
            amount_a=effect.amount_a,
            amount_b=effect.amount_b,
            shares_minted=effect.shares_minted,
            shares_burned=effect.shares_burned,
            reserve_a=self.pool.reserve_a,
            reserve_b=self.pool.reserve_b,
            k_after=effect.k_after,
        )

    def _log_rejected(self, kind: str, account: AccountId, exc: PoolError) -> None:
        logger.warning(
            "operation_rejected",
            kind=kind,
            account=account,
            error=type(exc).__name__,
            reason=str(exc),
        )

    # -- operations ------------------------------------------------------------

    def mint(self, account: AccountId, asset: AssetId, amount: Amount) -> None:
        """Credit an account out of thin air (test fixtures, scenario setup)."""
        if asset not in (self.asset_a, self.asset_b):
            raise MalformedOperation(f"asset {asset!r} is not traded by this pool")
        if not isinstance(amount, int) or isinstance(amount, bool) or amount <= 0:
            raise MalformedOperation(f"mint amount must be a positive int: {amount!r}")
        self.balances.add(account, asset, amount)
        logger.debug("balance_minted", account=account, asset=asset, amount=amount)

    def initialize(self, account: AccountId, seed_a: Amount, seed_b: Amount) -> None:
        kind = Action.INITIALIZE.value
        try:
            self._require_balance(account, self.asset_a, seed_a)
            self._require_balance(account, self.asset_b, seed_b)
            effect = self.pool.apply(ActionParams(action=Action.INITIALIZE, amount_a=seed_a, amount_b=seed_b))
        except PoolError as exc:
            self._log_rejected(kind, account, exc)
            raise
        self._debit(account, self.asset_a, effect.amount_a)
        self._debit(account, self.asset_b, effect.amount_b)
        self.seed_owner = account
        self._log_applied(kind, account, effect)

    def _swap(self, action: Action, account: AccountId, amount_in: Amount) -> Amount:
        if action == Action.SWAP_A_FOR_B:
            asset_in, asset_out = self.asset_a, self.asset_b
        else:
            asset_in, asset_out = self.asset_b, self.asset_a
        try:
            self._require_balance(account, asset_in, amount_in)
            effect = self.pool.apply(ActionParams(action=action, amount_in=amount_in))
        except PoolError as exc:
            self._log_rejected(action.value, account, exc)
            raise
        self._debit(account, asset_in, effect.amount_in)
        self._credit(account, asset_out, effect.amount_out)
        self._log_applied(action.value, account, effect)
        return effect.amount_out

    def swap_a_for_b(self, account: AccountId, amount_in: Amount) -> Amount:
        return self._swap(Action.SWAP_A_FOR_B, account, amount_in)

    def swap_b_for_a(self, account: AccountId, amount_in: Amount) -> Amount:
        return self._swap(Action.SWAP_B_FOR_A, account, amount_in)

    def add_liquidity(self, account: AccountId, amount_a: Amount) -> tuple[Amount, Amount]:
        """Deposit `amount_a` and its matching B. Returns ``(amount_b, shares_minted)``."""
        kind = Action.ADD_LIQUIDITY.value
        try:
            amount_b, _ = quote_add_liquidity(self.pool.state, amount_a, max_amount=self.config.max_amount)
            self._require_balance(account, self.asset_a, amount_a)
            self._require_balance(account, self.asset_b, amount_b)
            effect = self.pool.apply(ActionParams(action=Action.ADD_LIQUIDITY, amount_a=amount_a))
        except PoolError as exc:
            self._log_rejected(kind, account, exc)
            raise
        self._debit(account, self.asset_a, effect.amount_a)
        self._debit(account, self.asset_b, effect.amount_b)
        if effect.seed_shares:
            self.shares.add(self.seed_owner or self.config.seed_account, effect.seed_shares)
        self.shares.add(account, effect.shares_minted)
        self._log_applied(kind, account, effect)
        return effect.amount_b, effect.shares_minted

    def remove_liquidity(self, account: AccountId, share_units: Amount) -> tuple[Amount, Amount]:
        """Burn `share_units` owned by `account`. Returns ``(out_a, out_b)``."""
        kind = Action.REMOVE_LIQUIDITY.value
        try:
            owned = self.shares.get(account)
            if isinstance(share_units, int) and share_units > owned:
                raise InsufficientShares(f"{account} owns {owned} share units, burning {share_units}")
            effect = self.pool.apply(ActionParams(action=Action.REMOVE_LIQUIDITY, share_units=share_units))
        except PoolError as exc:
            self._log_rejected(kind, account, exc)
            raise
        self.shares.subtract(account, effect.shares_burned)
        self._credit(account, self.asset_a, effect.amount_a)
        self._credit(account, self.asset_b, effect.amount_b)
        if self.pool.total_shares == 0 and not self.pool.state.has_reserves:
            self.seed_owner = None
        self._log_applied(kind, account, effect)
        return effect.amount_a, effect.amount_b

    # -- generic dispatch --------------------------------------------------------

    def apply_operation(self, op: Mapping[str, Any]) -> Any:
        """
        Apply one operation record, e.g.
        ``{"kind": "swap_a_for_b", "account": "alice", "amount_in": 100}``.
        """
        if not isinstance(op, Mapping):
            raise MalformedOperation(f"operation must be a mapping, got {type(op).__name__}")
        kind = op.get("kind")
        if kind not in OPERATION_FIELDS:
            raise UnknownOperation(f"unknown operation kind: {kind!r}")
        account = op.get("account")
        if not isinstance(account, str) or not account:
            raise MalformedOperation(f"{kind}: account must be a non-empty string")
        values = []
        for field in OPERATION_FIELDS[kind]:
            if field not in op:
                raise MalformedOperation(f"{kind}: missing field {field!r}")
            value = op[field]
            if not isinstance(value, int) or isinstance(value, bool):
                raise MalformedOperation(f"{kind}: field {field!r} must be an int, got {type(value).__name__}")
            values.append(value)

        if kind == "mint":
            asset = op.get("asset")
            if not isinstance(asset, str):
                raise MalformedOperation("mint: missing field 'asset'")
            return self.mint(account, asset, values[0])
        handler = getattr(self, kind)
        return handler(account, *values)

    # -- snapshots ---------------------------------------------------------------

    def state_root(self) -> str:
        s = self.pool.state
        return compute_state_root(
            asset_a=self.asset_a,
            asset_b=self.asset_b,
            reserve_a=s.reserve_a,
            reserve_b=s.reserve_b,
            total_shares=s.total_shares,
            balances=self.balances,
            shares=self.shares,
        )

    def snapshot(self) -> Dict[str, Any]:
        """Plain-dict view of the ledger (JSON-serializable, deterministic order)."""
        pool = state_to_dict(self.pool.state)
        pool.update(asset_a=self.asset_a, asset_b=self.asset_b)
        return {
            "pool": pool,
            "seed_owner": self.seed_owner,
            "balances": [
                {"account": account, "asset": asset, "amount": amount}
                for (account, asset), amount in sorted(self.balances.get_all_balances().items())
            ],
            "shares": [
                {"account": account, "share_units": units}
                for account, units in sorted(self.shares.get_all_balances().items())
            ],
            "state_root": self.state_root(),
        }

    @classmethod
    def from_snapshot(cls, obj: Mapping[str, Any], *, config: Optional[LedgerConfig] = None) -> "PoolLedger":
        """Rebuild a ledger from `snapshot()` output. The state root is re-checked."""
        config = config or LedgerConfig()
        pool_obj = obj["pool"]
        balances = BalanceTable()
        for entry in obj.get("balances", []):
            balances.set(entry["account"], entry["asset"], _snapshot_amount(entry, "amount"))
        shares = ShareLedger()
        for entry in obj.get("shares", []):
            shares.set(entry["account"], _snapshot_amount(entry, "share_units"))
        ledger = cls(
            asset_a=pool_obj["asset_a"],
            asset_b=pool_obj["asset_b"],
            config=config,
            pool=Pool(state_from_dict(pool_obj), max_amount=config.max_amount),
            balances=balances,
            shares=shares,
            seed_owner=obj.get("seed_owner"),
        )
        if shares.total() != ledger.pool.total_shares:
            raise ValueError(
                f"share ledger total {shares.total()} != pool total_shares {ledger.pool.total_shares}"
            )
        expected_root = obj.get("state_root")
        if expected_root is not None and expected_root != ledger.state_root():
            raise ValueError("state_root mismatch")
        return ledger

    def __repr__(self) -> str:
        return f"PoolLedger({self.asset_a}/{self.asset_b}, {self.pool!r}, {self.balances!r}, {self.shares!r})"
