"""
GBLN Type Selection

Chooses the smallest integer kind or string capacity able to hold a raw
value when no explicit type is given. Only the encode path uses these;
decoded nodes keep whatever tag they arrived with.
"""

from __future__ import annotations

from .errors import IntegerOutOfRangeError, StringTooLongError
from .types import (
    GType,
    INT_RANGES,
    MAX_STRING_CHARS,
    SIGNED_KINDS,
    STRING_CAPACITIES,
    UNSIGNED_KINDS,
)


def select_integer(value: int) -> GType:
    """
    Pick the minimal integer kind for value.

    Unsigned kinds are tried first, so any non-negative value up to
    u64's maximum is unsigned. Negative values fall through to the signed
    kinds.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if value >= 0:
        for kind in UNSIGNED_KINDS:
            if value <= INT_RANGES[kind][1]:
                return kind

    for kind in SIGNED_KINDS:
        lo, hi = INT_RANGES[kind]
        if lo <= value <= hi:
            return kind

    raise IntegerOutOfRangeError(value)


def select_string_capacity(text: str) -> int:
    """Pick the minimal capacity tag for text, counted in characters, not bytes."""
    n = len(text)
    for capacity in STRING_CAPACITIES:
        if n <= capacity:
            return capacity
    raise StringTooLongError(n, MAX_STRING_CHARS)
