"""
GBLN Value Conversion

Bidirectional mapping between Python values and GValue trees.

Host mapping:
- None       <-> null
- bool       <-> bool
- int        <-> smallest fitting u8..u64, else i8..i64 (any integer kind decodes to int)
- float      <-> f64 (f32 nodes decode to float; floats never encode as f32)
- str        <-> str with the smallest capacity >= character count
- Mapping    <-> object, member order preserved, keys stringified
- list/tuple <-> array (arrays decode to list)

Both directions recurse at most MAX_DEPTH containers deep.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, List
import logging

from .errors import (
    ExtractionError,
    NestingTooDeepError,
    UnknownVariantError,
    UnsupportedTypeError,
)
from .selection import select_integer, select_string_capacity
from .types import GValue, GType, MapEntry

logger = logging.getLogger(__name__)

# Deepest container nesting either direction will traverse
MAX_DEPTH = 256


# ============================================================
# Encode (Python -> GValue)
# ============================================================

def encode(value: Any) -> GValue:
    """
    Convert a Python value to a fresh GValue tree.

    Integer kinds and string capacities are chosen minimally. If any
    element fails to encode the whole call fails; no partial tree is
    returned.
    """
    result = _encode(value, 0)
    logger.debug("encoded %s as %s", type(value).__name__, result.type.value)
    return result


def _encode(data: Any, depth: int) -> GValue:
    if data is None:
        return GValue.null()
    # bool subclasses int, so it must be matched first
    elif isinstance(data, bool):
        return GValue.bool_(data)
    elif isinstance(data, int):
        n = int(data)
        return GValue.int_(select_integer(n), n)
    elif isinstance(data, float):
        return GValue.f64(data)
    elif isinstance(data, str):
        return GValue.str_(data, select_string_capacity(data))
    elif isinstance(data, Mapping):
        if depth >= MAX_DEPTH:
            raise NestingTooDeepError(MAX_DEPTH)
        entries: List[MapEntry] = []
        for k, v in data.items():
            entries.append(MapEntry(str(k), _encode(v, depth + 1)))
        return GValue.object_(*entries)
    elif isinstance(data, (list, tuple)):
        if depth >= MAX_DEPTH:
            raise NestingTooDeepError(MAX_DEPTH)
        items: List[GValue] = []
        for item in data:
            items.append(_encode(item, depth + 1))
        return GValue.array_(*items)

    raise UnsupportedTypeError(type(data).__name__)


# ============================================================
# Decode (GValue -> Python)
# ============================================================

def decode(value: GValue) -> Any:
    """
    Convert a GValue tree to plain Python values.

    Tags are trusted as given: a u64 holding 3 decodes to 3 and is not
    re-minimized.
    """
    result = _decode(value, 0)
    logger.debug("decoded %s node", value.type.value)
    return result


def _decode(v: GValue, depth: int) -> Any:
    t = v.type
    if not isinstance(t, GType):
        raise UnknownVariantError(t)

    if t == GType.NULL:
        return None
    elif t == GType.BOOL:
        b = v.as_bool()
        if not isinstance(b, bool):
            raise ExtractionError(t)
        return b
    elif t.is_integer:
        n = v.as_int()
        if isinstance(n, bool) or not isinstance(n, int):
            raise ExtractionError(t)
        return n
    elif t.is_float:
        f = v.as_float()
        if not isinstance(f, float):
            raise ExtractionError(t)
        return f
    elif t == GType.STR:
        s = v.as_str()
        if not isinstance(s, str):
            raise ExtractionError(t)
        return s
    elif t == GType.OBJECT:
        if depth >= MAX_DEPTH:
            raise NestingTooDeepError(MAX_DEPTH)
        entries = v.as_object()
        if entries is None:
            raise ExtractionError(t)
        out: Dict[str, Any] = {}
        for e in entries:
            out[e.key] = _decode(e.value, depth + 1)
        return out
    elif t == GType.ARRAY:
        if depth >= MAX_DEPTH:
            raise NestingTooDeepError(MAX_DEPTH)
        items = v.as_array()
        if items is None:
            raise ExtractionError(t)
        result = []
        for item in items:
            result.append(_decode(item, depth + 1))
        return result

    # GType members not handled above
    raise UnknownVariantError(t)
