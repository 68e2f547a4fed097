"""
Canonical JSON for ledger snapshots.

`snapshot()` output, the replay CLI's `--json` output and the state root
preimage all go through `canonical_json_bytes`, so two equal ledgers always
produce the same bytes.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any


def _check_value(value: Any, path: str) -> None:
    # Snapshots only carry ints, strings, None, lists and str-keyed dicts.
    if isinstance(value, float):
        raise TypeError(f"floats are not allowed in canonical encoding (at {path})")
    if isinstance(value, str):
        if any(0xD800 <= ord(ch) <= 0xDFFF for ch in value):
            raise TypeError(f"surrogate code points are not allowed in canonical encoding (at {path})")
    elif isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"dict keys must be str for canonical encoding (at {path})")
            _check_value(key, path)
            _check_value(item, f"{path}.{key}")
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _check_value(item, f"{path}[{index}]")


def canonical_json_bytes(value: Any) -> bytes:
    """UTF-8 JSON with sorted keys and no whitespace. Floats are rejected."""
    _check_value(value, "$")
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    return "0x" + hashlib.sha256(data).hexdigest()
