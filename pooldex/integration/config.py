"""
Runtime configuration for the ledger shell.

Values come from keyword arguments or, via `LedgerConfig.from_env()`, from
`POOLDEX_*` environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..core.pool.engine import MAX_AMOUNT

DEFAULT_SEED_ACCOUNT = "__seed__"


def _bool_env(env: Mapping[str, str], name: str, *, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return bool(default)
    v = raw.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _int_env(env: Mapping[str, str], name: str, *, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        value = int(raw.strip().replace("_", ""), 10)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class LedgerConfig:
    # Account that receives the seed shares minted at the first deposit when
    # the account that initialized the pool is not known (e.g. after a restore
    # from a snapshot that predates the first deposit).
    seed_account: str = DEFAULT_SEED_ACCOUNT

    # Upper bound for every operation amount.
    max_amount: int = MAX_AMOUNT

    # If False, asset balances are not debited/credited; only the pool and the
    # share ledger move.
    require_funds: bool = True

    log_json: bool = False
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not isinstance(self.seed_account, str) or not self.seed_account:
            raise ValueError("seed_account must be a non-empty string")
        if not isinstance(self.max_amount, int) or isinstance(self.max_amount, bool) or self.max_amount <= 0:
            raise ValueError("max_amount must be a positive int")
        if self.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported log_level: {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LedgerConfig":
        env = os.environ if environ is None else environ
        return cls(
            seed_account=(env.get("POOLDEX_SEED_ACCOUNT") or "").strip() or DEFAULT_SEED_ACCOUNT,
            max_amount=_int_env(env, "POOLDEX_MAX_AMOUNT", default=MAX_AMOUNT),
            require_funds=_bool_env(env, "POOLDEX_REQUIRE_FUNDS", default=True),
            log_json=_bool_env(env, "POOLDEX_LOG_JSON", default=False),
            log_level=(env.get("POOLDEX_LOG_LEVEL") or "INFO").strip().upper(),
        )
