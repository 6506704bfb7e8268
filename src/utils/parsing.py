"""Pure parsing and conversion helpers for loosely-typed venue payloads."""

from __future__ import annotations

import json
import math
from typing import Any, Optional


def parse_json_list(value: Any) -> list[Any]:
    """Lenient decode: anything that is not a list (or a JSON list) becomes ``[]``."""
    decoded = decode_json_list(value)
    return decoded if decoded is not None else []


def decode_json_list(value: Any) -> Optional[list[Any]]:
    """Strict decode of a list that may arrive JSON-encoded.

    Returns ``None`` when ``value`` is absent, malformed, or decodes to
    something other than a list, so callers can tell failure from emptiness.
    """
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            return None
        return decoded if isinstance(decoded, list) else None
    return None


def _to_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def to_finite_float(value: Any) -> Optional[float]:
    """``float(value)`` if it is a finite number, else ``None``. Booleans are rejected."""
    if isinstance(value, bool):
        return None
    result = _to_float(value, default=math.nan)
    return result if math.isfinite(result) else None


def _optional_str(value: Any) -> Optional[str]:
    """Keep non-empty strings, map everything else to ``None``."""
    if isinstance(value, str) and value:
        return value
    return None


def _optional_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None
