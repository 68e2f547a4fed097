"""State construction and serialization for the pool engine.

Round-trip property (tested): `state_from_dict(state_to_dict(s)) == s`.
"""

from __future__ import annotations

from typing import Any, Mapping

from .types import PoolState

STATE_VAR_NAMES: tuple[str, ...] = tuple(PoolState.__dataclass_fields__)


def initial_state() -> PoolState:
    """Return the uninitialized pool (no reserves, no shares)."""
    return PoolState()


def state_to_dict(state: PoolState) -> dict[str, int]:
    """Serialize a PoolState to a plain dict."""
    return {name: getattr(state, name) for name in STATE_VAR_NAMES}


def state_from_dict(d: Mapping[str, Any]) -> PoolState:
    """Deserialize a dict to a PoolState. Raises KeyError on missing fields."""
    kwargs: dict[str, int] = {}
    for name in STATE_VAR_NAMES:
        val = d[name]
        if not isinstance(val, int) or isinstance(val, bool):
            raise TypeError(f"state var {name!r} must be int, got {type(val).__name__}")
        if val < 0:
            raise ValueError(f"state var {name!r} must be non-negative, got {val}")
        kwargs[name] = int(val)
    return PoolState(**kwargs)
