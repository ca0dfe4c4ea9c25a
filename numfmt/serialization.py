"""Explicit JSON serialization for big integers and decimals.

JSON consumers on the UI side cannot hold integers past 2**53 exactly,
so on-chain amounts travel as decimal strings.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from numfmt.numbers import to_plain_string


def to_json(value: int) -> str:
    """Return the JSON-safe string form of an integer amount."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    return str(value)


def json_default(obj: Any) -> str:
    """``default=`` hook for :func:`json.dumps`."""
    if isinstance(obj, Decimal) and obj.is_finite():
        return to_plain_string(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(payload: Any, **kwargs: Any) -> str:
    """Serialize ``payload`` to JSON, writing decimals as plain strings."""
    return json.dumps(payload, default=json_default, **kwargs)


__all__ = ["dumps", "json_default", "to_json"]
