"""
Replay a scenario file through a fresh `PoolLedger`.

Scenario format (YAML or JSON):

    pool: {asset_a: "A", asset_b: "B"}
    mint: [["alice", "A", 10000], ["alice", "B", 10000]]
    operations:
      - {kind: initialize, account: alice, amount_a: 1000, amount_b: 1000}
      - {kind: swap_a_for_b, account: alice, amount_in: 100}

Exit codes: 0 ok, 1 an operation was rejected, 2 malformed input.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml

from ..core.pool import PoolError
from ..state.canonical import canonical_json_bytes
from .config import LedgerConfig
from .errors import MalformedOperation
from .ledger import PoolLedger
from .logging_config import configure_logging


def load_scenario(path: Path) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        obj = json.loads(text)
    else:
        obj = yaml.safe_load(text)
    if not isinstance(obj, dict):
        raise MalformedOperation(f"scenario must be a mapping: {path}")
    return obj


def build_ledger(scenario: Mapping[str, Any], *, config: LedgerConfig) -> PoolLedger:
    pool_cfg = scenario.get("pool") or {}
    if not isinstance(pool_cfg, dict):
        raise MalformedOperation("scenario.pool must be a mapping")
    ledger = PoolLedger(
        asset_a=str(pool_cfg.get("asset_a", "A")),
        asset_b=str(pool_cfg.get("asset_b", "B")),
        config=config,
    )
    mint = scenario.get("mint") or []
    if not isinstance(mint, list):
        raise MalformedOperation("scenario.mint must be a list")
    for index, entry in enumerate(mint):
        if not isinstance(entry, (list, tuple)) or len(entry) != 3:
            raise MalformedOperation(f"mint[{index}] must be [account, asset, amount]")
        account, asset, amount = entry
        ledger.apply_operation({"kind": "mint", "account": account, "asset": asset, "amount": amount})
    return ledger


def run_scenario(scenario: Mapping[str, Any], *, config: LedgerConfig) -> PoolLedger:
    """Apply every operation in order. Raises on the first rejection."""
    ledger = build_ledger(scenario, config=config)
    operations = scenario.get("operations") or []
    if not isinstance(operations, list):
        raise MalformedOperation("scenario.operations must be a list")
    for op in operations:
        ledger.apply_operation(op)
    return ledger


def _print_summary(ledger: PoolLedger) -> None:
    snap = ledger.snapshot()
    pool = snap["pool"]
    print(
        f"[pooldex] pool {pool['asset_a']}/{pool['asset_b']}: "
        f"reserve_a={pool['reserve_a']} reserve_b={pool['reserve_b']} "
        f"total_shares={pool['total_shares']} k={ledger.pool.invariant}"
    )
    for entry in snap["balances"]:
        print(f"[pooldex] balance {entry['account']} {entry['asset']}={entry['amount']}")
    for entry in snap["shares"]:
        print(f"[pooldex] shares {entry['account']}={entry['share_units']}")
    for asset, reserve in ((ledger.asset_a, pool["reserve_a"]), (ledger.asset_b, pool["reserve_b"])):
        held = ledger.balances.total_for_asset(asset)
        print(f"[pooldex] supply {asset}: accounts={held} reserve={reserve} total={held + reserve}")
    print(f"[pooldex] state_root={snap['state_root']}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="pooldex-replay", description=__doc__.split("\n\n")[0])
    parser.add_argument("scenario", type=Path, help="YAML or JSON scenario file")
    parser.add_argument("--json", action="store_true", help="print the final snapshot as canonical JSON")
    parser.add_argument("--log-json", action="store_true", help="emit JSON log lines on stderr")
    args = parser.parse_args(argv)

    try:
        config = LedgerConfig.from_env()
    except ValueError as exc:
        print(f"[pooldex] FAIL: {exc}", file=sys.stderr)
        return 2
    configure_logging(level=config.log_level, json_output=config.log_json or args.log_json)

    try:
        scenario = load_scenario(args.scenario)
        ledger = run_scenario(scenario, config=config)
    except (OSError, json.JSONDecodeError, yaml.YAMLError, MalformedOperation) as exc:
        print(f"[pooldex] FAIL: {exc}", file=sys.stderr)
        return 2
    except PoolError as exc:
        print(f"[pooldex] FAIL: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(canonical_json_bytes(ledger.snapshot()).decode("utf-8"))
    else:
        _print_summary(ledger)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
