from __future__ import annotations

import math
from typing import Any, Callable

from .records import read_field, same_identity
from .types import Key

Comparator = Callable[[Any, Any], int]


def to_number(value: Any) -> float:
    """Coerce ``value`` to a number the way a JavaScript ``Number()`` call does."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            return math.nan
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def _greater(a: Any, b: Any) -> bool:
    try:
        return bool(a > b)
    except TypeError:
        # unordered pair (e.g. str and None): treated like a NaN comparison
        return False


def sort_by(key: Key, asc: bool = True, numeric: bool = False) -> Comparator:
    """
    Build a ``cmp``-style comparison function for sorting records by ``key``.

    Use with ``functools.cmp_to_key``. With ``numeric`` both values are
    coerced to numbers first; otherwise they are compared as-is (no locale
    collation). Values that cannot be ordered sort as "less than" in the
    requested direction.
    """
    def compare(a: Any, b: Any) -> int:
        a_val = read_field(a, key)
        b_val = read_field(b, key)
        if numeric:
            a_val = to_number(a_val)
            b_val = to_number(b_val)
        if same_identity(a_val, b_val):
            return 0
        if _greater(a_val, b_val):
            return 1 if asc else -1
        return -1 if asc else 1

    return compare
