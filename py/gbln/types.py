"""
GBLN Core Types

GValue is the tagged value container for GBLN data. The set of kinds is
closed: null, bool, eight integer widths, two float widths, bounded strings,
objects and arrays.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union
import math
import struct

from .errors import DuplicateKeyError, UnknownVariantError, ValidationError


class GType(Enum):
    """GBLN value kinds. Values are the type-tag vocabulary."""
    NULL = "null"
    BOOL = "bool"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"
    STR = "str"
    OBJECT = "object"
    ARRAY = "array"

    @property
    def is_integer(self) -> bool:
        return self in INT_RANGES

    @property
    def is_float(self) -> bool:
        return self in FLOAT_KINDS

    @property
    def is_container(self) -> bool:
        return self in (GType.OBJECT, GType.ARRAY)


# ============================================================
# Capacity Vocabulary
# ============================================================

UNSIGNED_KINDS = (GType.U8, GType.U16, GType.U32, GType.U64)
SIGNED_KINDS = (GType.I8, GType.I16, GType.I32, GType.I64)
INTEGER_KINDS = SIGNED_KINDS + UNSIGNED_KINDS
FLOAT_KINDS = (GType.F32, GType.F64)

# Inclusive bounds per integer kind
INT_RANGES: Dict[GType, Tuple[int, int]] = {
    GType.I8: (-(2**7), 2**7 - 1),
    GType.I16: (-(2**15), 2**15 - 1),
    GType.I32: (-(2**31), 2**31 - 1),
    GType.I64: (-(2**63), 2**63 - 1),
    GType.U8: (0, 2**8 - 1),
    GType.U16: (0, 2**16 - 1),
    GType.U32: (0, 2**32 - 1),
    GType.U64: (0, 2**64 - 1),
}

STRING_CAPACITIES = (2, 4, 8, 16, 32, 64, 128, 256, 512, 1024)
MAX_STRING_CHARS = STRING_CAPACITIES[-1]


@dataclass(frozen=True)
class MapEntry:
    """Key-value pair of an object."""
    key: str
    value: "GValue"


class GValue:
    """
    Tagged value container for GBLN data.

    Nodes are built through the static constructors, which enforce the
    payload domain of each kind, and are not mutated afterwards.
    """

    __slots__ = (
        '_type', '_bool', '_int', '_float', '_str', '_capacity',
        '_object', '_array'
    )

    def __init__(self, gtype: GType):
        self._type = gtype
        self._bool: Optional[bool] = None
        self._int: Optional[int] = None
        self._float: Optional[float] = None
        self._str: Optional[str] = None
        self._capacity: Optional[int] = None
        self._object: Optional[List[MapEntry]] = None
        self._array: Optional[List[GValue]] = None

    @property
    def type(self) -> GType:
        return self._type

    # ============================================================
    # Constructors
    # ============================================================

    @staticmethod
    def null() -> "GValue":
        return GValue(GType.NULL)

    @staticmethod
    def bool_(v: bool) -> "GValue":
        if not isinstance(v, bool):
            raise ValidationError("bool", f"expected a bool, got {type(v).__name__}")
        gv = GValue(GType.BOOL)
        gv._bool = v
        return gv

    @staticmethod
    def int_(kind: GType, v: int) -> "GValue":
        """Integer node of an explicit kind. The kind need not be minimal."""
        if not kind.is_integer:
            raise ValueError(f"not an integer kind: {kind}")
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValidationError(kind.value, f"expected an integer, got {type(v).__name__}")
        lo, hi = INT_RANGES[kind]
        if not lo <= v <= hi:
            raise ValidationError(kind.value, f"{v} outside [{lo}, {hi}]")
        gv = GValue(kind)
        gv._int = v
        return gv

    @staticmethod
    def i8(v: int) -> "GValue":
        return GValue.int_(GType.I8, v)

    @staticmethod
    def i16(v: int) -> "GValue":
        return GValue.int_(GType.I16, v)

    @staticmethod
    def i32(v: int) -> "GValue":
        return GValue.int_(GType.I32, v)

    @staticmethod
    def i64(v: int) -> "GValue":
        return GValue.int_(GType.I64, v)

    @staticmethod
    def u8(v: int) -> "GValue":
        return GValue.int_(GType.U8, v)

    @staticmethod
    def u16(v: int) -> "GValue":
        return GValue.int_(GType.U16, v)

    @staticmethod
    def u32(v: int) -> "GValue":
        return GValue.int_(GType.U32, v)

    @staticmethod
    def u64(v: int) -> "GValue":
        return GValue.int_(GType.U64, v)

    @staticmethod
    def float_(kind: GType, v: float) -> "GValue":
        """
        Float node of an explicit kind.

        f32 payloads are rounded to single precision so the node holds
        exactly what a 32-bit float can represent.
        """
        if not kind.is_float:
            raise ValueError(f"not a float kind: {kind}")
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValidationError(kind.value, f"expected a number, got {type(v).__name__}")
        try:
            f = float(v)
        except OverflowError:
            raise ValidationError(kind.value, f"{v} outside double precision range")
        if kind == GType.F32 and math.isfinite(f):
            try:
                f = struct.unpack("<f", struct.pack("<f", f))[0]
            except OverflowError:
                raise ValidationError(kind.value, f"{v} outside single precision range")
        gv = GValue(kind)
        gv._float = f
        return gv

    @staticmethod
    def f32(v: float) -> "GValue":
        return GValue.float_(GType.F32, v)

    @staticmethod
    def f64(v: float) -> "GValue":
        return GValue.float_(GType.F64, v)

    @staticmethod
    def str_(text: str, capacity: int) -> "GValue":
        """String node with a declared capacity in characters."""
        if not isinstance(text, str):
            raise ValidationError("str", f"expected text, got {type(text).__name__}")
        if capacity not in STRING_CAPACITIES:
            raise ValidationError("capacity", f"{capacity} is not one of {STRING_CAPACITIES}")
        if len(text) > capacity:
            raise ValidationError(f"s{capacity}", f"{len(text)} characters exceed capacity")
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValidationError("str", f"text is not valid UTF-8: {e.reason}")
        gv = GValue(GType.STR)
        gv._str = text
        gv._capacity = capacity
        return gv

    @staticmethod
    def object_(*entries: MapEntry) -> "GValue":
        """Object node; entry order is kept and keys must be unique."""
        gv = GValue(GType.OBJECT)
        gv._object = []
        seen = set()
        for e in entries:
            if e.key in seen:
                raise DuplicateKeyError(e.key)
            seen.add(e.key)
            gv._object.append(e)
        return gv

    @staticmethod
    def array_(*values: "GValue") -> "GValue":
        gv = GValue(GType.ARRAY)
        gv._array = list(values)
        return gv

    # ============================================================
    # Accessors
    # ============================================================

    def is_null(self) -> bool:
        return self._type == GType.NULL

    def as_bool(self) -> bool:
        if self._type != GType.BOOL:
            raise TypeError("not a bool")
        return self._bool  # type: ignore

    def as_int(self) -> int:
        if not self._type.is_integer:
            raise TypeError("not an integer")
        return self._int  # type: ignore

    def as_float(self) -> float:
        if not self._type.is_float:
            raise TypeError("not a float")
        return self._float  # type: ignore

    def as_number(self) -> Union[int, float]:
        """Get numeric value (works for any integer or float kind)."""
        if self._type.is_integer:
            return self._int  # type: ignore
        if self._type.is_float:
            return self._float  # type: ignore
        raise TypeError("not a number")

    def as_str(self) -> str:
        if self._type != GType.STR:
            raise TypeError("not a str")
        return self._str  # type: ignore

    @property
    def capacity(self) -> int:
        if self._type != GType.STR:
            raise TypeError("not a str")
        return self._capacity  # type: ignore

    def as_object(self) -> List[MapEntry]:
        """Members in order. The list is a copy; the node itself is unchanged."""
        if self._type != GType.OBJECT:
            raise TypeError("not an object")
        return list(self._object)  # type: ignore

    def as_array(self) -> List["GValue"]:
        """Elements in order, as a copy."""
        if self._type != GType.ARRAY:
            raise TypeError("not an array")
        return list(self._array)  # type: ignore

    @property
    def tag(self) -> Optional[str]:
        """Type tag as written in GBLN text (u8, s64, b, n). None for containers."""
        t = self._type
        if t == GType.NULL:
            return "n"
        if t == GType.BOOL:
            return "b"
        if t == GType.STR:
            return f"s{self._capacity}"
        if t.is_container:
            return None
        return t.value

    def get(self, key: str) -> Optional["GValue"]:
        """Get object member by key."""
        if self._type != GType.OBJECT:
            return None
        for e in self._object:  # type: ignore
            if e.key == key:
                return e.value
        return None

    def keys(self) -> List[str]:
        return [e.key for e in self.as_object()]

    def index(self, i: int) -> "GValue":
        """Get element from array by index."""
        if self._type != GType.ARRAY:
            raise TypeError("not an array")
        if i < 0 or i >= len(self._array):  # type: ignore
            raise IndexError("index out of bounds")
        return self._array[i]  # type: ignore

    def __len__(self) -> int:
        """Number of array elements or object members."""
        if self._type == GType.ARRAY:
            return len(self._array)  # type: ignore
        if self._type == GType.OBJECT:
            return len(self._object)  # type: ignore
        return 0

    # ============================================================
    # Comparison / Copy
    # ============================================================

    def __eq__(self, other: object) -> bool:
        """Kind and content equality. Object member order is significant."""
        if not isinstance(other, GValue):
            return NotImplemented
        if self._type != other._type:
            return False
        t = self._type
        if t == GType.NULL:
            return True
        if t == GType.BOOL:
            return self._bool == other._bool
        if t.is_integer:
            return self._int == other._int
        if t.is_float:
            return self._float == other._float
        if t == GType.STR:
            return self._str == other._str and self._capacity == other._capacity
        if t == GType.OBJECT:
            return self._object == other._object
        if t == GType.ARRAY:
            return self._array == other._array
        raise UnknownVariantError(t)

    __hash__ = None  # type: ignore

    def clone(self) -> "GValue":
        """Create a deep copy of this value."""
        t = self._type
        if t == GType.NULL:
            return GValue.null()
        elif t == GType.BOOL:
            return GValue.bool_(self._bool)  # type: ignore
        elif t.is_integer:
            return GValue.int_(t, self._int)  # type: ignore
        elif t.is_float:
            return GValue.float_(t, self._float)  # type: ignore
        elif t == GType.STR:
            return GValue.str_(self._str, self._capacity)  # type: ignore
        elif t == GType.OBJECT:
            return GValue.object_(*[MapEntry(e.key, e.value.clone()) for e in self._object])  # type: ignore
        elif t == GType.ARRAY:
            return GValue.array_(*[v.clone() for v in self._array])  # type: ignore
        raise UnknownVariantError(t)

    def __repr__(self) -> str:
        t = self._type
        if t == GType.NULL:
            return "GValue.null()"
        elif t == GType.BOOL:
            return f"GValue.bool_({self._bool})"
        elif t.is_integer:
            return f"GValue.{t.value}({self._int})"
        elif t.is_float:
            return f"GValue.{t.value}({self._float})"
        elif t == GType.STR:
            return f"GValue.str_({self._str!r}, {self._capacity})"
        elif t == GType.OBJECT:
            return f"GValue.object_({', '.join(e.key for e in self._object)})"  # type: ignore
        elif t == GType.ARRAY:
            return f"GValue.array_({', '.join(repr(v) for v in self._array)})"  # type: ignore
        return f"GValue({t})"


def equivalent(a: GValue, b: GValue) -> bool:
    """Structural equality that ignores object member order."""
    if a.type != b.type:
        return False
    if a.type == GType.OBJECT:
        if len(a) != len(b):
            return False
        for e in a.as_object():
            other = b.get(e.key)
            if other is None or not equivalent(e.value, other):
                return False
        return True
    if a.type == GType.ARRAY:
        if len(a) != len(b):
            return False
        return all(equivalent(x, y) for x, y in zip(a.as_array(), b.as_array()))
    return a == b


# ============================================================
# Helper Functions
# ============================================================

def field(key: str, value: GValue) -> MapEntry:
    """Create an entry for object construction."""
    return MapEntry(key, value)


# Shorthand constructors
class G:
    """Shorthand constructors for GValue."""

    @staticmethod
    def null() -> GValue:
        return GValue.null()

    @staticmethod
    def bool(v: bool) -> GValue:
        return GValue.bool_(v)

    @staticmethod
    def int(kind: GType, v: int) -> GValue:
        return GValue.int_(kind, v)

    @staticmethod
    def float(kind: GType, v: float) -> GValue:
        return GValue.float_(kind, v)

    @staticmethod
    def str(text: str, capacity: int) -> GValue:
        return GValue.str_(text, capacity)

    @staticmethod
    def object(*entries: MapEntry) -> GValue:
        return GValue.object_(*entries)

    @staticmethod
    def array(*values: GValue) -> GValue:
        return GValue.array_(*values)


g = G()
