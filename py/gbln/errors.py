"""
GBLN Errors

Every failure raised by the package derives from GblnError, so callers can
catch the whole family with a single except clause.

Encode-path failures (IntegerOutOfRangeError, StringTooLongError,
UnsupportedTypeError, DuplicateKeyError) share the SerialiseError umbrella.
"""

from __future__ import annotations
from typing import Any


class GblnError(Exception):
    """Base class for all GBLN errors."""


class ParseError(GblnError):
    """Raised by a parser engine when GBLN text is malformed."""


class ValidationError(GblnError):
    """A configuration field or node payload lies outside its domain."""

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class ExtractionError(ValidationError):
    """A node claims a kind but its payload cannot be read as that kind."""

    def __init__(self, kind: Any, reason: str = ""):
        name = getattr(kind, "value", kind)
        super().__init__("value", reason or f"failed to extract {name}")
        self.kind = kind


class SerialiseError(GblnError):
    """Encoding a host value into a GValue tree failed."""


class IntegerOutOfRangeError(SerialiseError):
    def __init__(self, value: int):
        super().__init__(f"integer out of range: {value}")
        self.value = value


class StringTooLongError(SerialiseError):
    def __init__(self, length: int, limit: int = 1024):
        super().__init__(f"string too long: {length} characters (max {limit})")
        self.length = length
        self.limit = limit


class UnsupportedTypeError(SerialiseError):
    def __init__(self, type_name: str):
        super().__init__(f"unsupported type: {type_name}")
        self.type_name = type_name


class DuplicateKeyError(SerialiseError):
    def __init__(self, key: str):
        super().__init__(f"duplicate key: {key!r}")
        self.key = key


class NestingTooDeepError(GblnError):
    """The value tree nests deeper than the traversal limit."""

    def __init__(self, limit: int):
        super().__init__(f"nesting exceeds maximum depth of {limit}")
        self.limit = limit


class UnknownVariantError(GblnError):
    """A node kind outside the closed set of GBLN kinds."""

    def __init__(self, kind: Any):
        super().__init__(f"unknown type: {kind}")
        self.kind = kind


class GblnIOError(GblnError):
    """Stream or compression boundary failure."""
