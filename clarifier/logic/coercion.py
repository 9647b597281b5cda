"""Coercion helpers for loosely typed wire values.

Both helpers follow explicit tables rather than Python's own str()/bool()
so decoded output does not depend on interpreter truthiness rules:

coerce_text
    - str            -> as-is
    - None           -> "null"
    - bool           -> "true" / "false"
    - integral float -> integer form ("1.0" style values become "1")
    - list / tuple   -> items coerced and joined with ","; None items and
                        repeated (cyclic) lists contribute ""
    - anything else  -> str(value)

coerce_flag
    - None, False, 0, 0.0, NaN, "" -> False
    - everything else              -> True (including "0", "no", [] and {})
"""

from __future__ import annotations

import math
from typing import Any, List, Set


def is_sequence(value: Any) -> bool:
    """Return True for ordered sequences as the wire format means them.

    Only lists and tuples qualify; strings, bytes and mappings do not.
    """
    return isinstance(value, (list, tuple))


def coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return str(value)
    if is_sequence(value):
        return _join(value, set())
    return str(value)


def _join(items: Any, seen: Set[int]) -> str:
    if id(items) in seen:
        return ""
    seen = seen | {id(items)}
    parts: List[str] = []
    for item in items:
        if item is None:
            parts.append("")
        elif is_sequence(item):
            parts.append(_join(item, seen))
        else:
            parts.append(coerce_text(item))
    return ",".join(parts)


def coerce_flag(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return False
        return value != 0
    return True


__all__ = ["is_sequence", "coerce_text", "coerce_flag"]
