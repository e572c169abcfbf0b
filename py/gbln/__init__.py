"""
GBLN - Goblin Bounded Lean Notation

Type-safe, bounded serialisation for Python values. Every integer carries
its width and signedness and every string its character capacity; when a
Python value is encoded the smallest fitting type is chosen automatically.

Example:
    >>> import gbln
    >>>
    >>> # Python -> tagged tree
    >>> v = gbln.encode({"user": {"id": 12345, "name": "Alice"}})
    >>> v.get("user").get("id").tag
    'u16'
    >>> v.get("user").get("name").tag
    's8'
    >>>
    >>> # Tagged tree -> Python
    >>> gbln.decode(v)
    {'user': {'id': 12345, 'name': 'Alice'}}
    >>>
    >>> # Build values programmatically
    >>> from gbln import g, field, GType
    >>> port = g.object(field("port", g.int(GType.U32, 8080)))
    >>> gbln.decode(port)
    {'port': 8080}
"""

import logging

__version__ = "0.9.0"

# Core types
from .types import (
    GValue,
    GType,
    MapEntry,
    equivalent,
    field,
    g,
    G,
    INTEGER_KINDS,
    FLOAT_KINDS,
    STRING_CAPACITIES,
    MAX_STRING_CHARS,
)

# Errors
from .errors import (
    GblnError,
    ParseError,
    ValidationError,
    ExtractionError,
    SerialiseError,
    IntegerOutOfRangeError,
    StringTooLongError,
    UnsupportedTypeError,
    DuplicateKeyError,
    NestingTooDeepError,
    UnknownVariantError,
    GblnIOError,
)

# Type selection / conversion
from .selection import select_integer, select_string_capacity
from .convert import encode, decode, MAX_DEPTH

# Configuration
from .config import Config, io_default, source_default

# Engine boundary / persistence
from .engine import Parser, Printer, parse, to_string, to_string_pretty
from .io import read_io, write_io

logging.getLogger(__name__).addHandler(logging.NullHandler())


def version() -> str:
    """Return the package version string."""
    return __version__


__all__ = [
    # Version
    "__version__",
    "version",
    # Core types
    "GValue",
    "GType",
    "MapEntry",
    "equivalent",
    "field",
    "g",
    "G",
    "INTEGER_KINDS",
    "FLOAT_KINDS",
    "STRING_CAPACITIES",
    "MAX_STRING_CHARS",
    # Errors
    "GblnError",
    "ParseError",
    "ValidationError",
    "ExtractionError",
    "SerialiseError",
    "IntegerOutOfRangeError",
    "StringTooLongError",
    "UnsupportedTypeError",
    "DuplicateKeyError",
    "NestingTooDeepError",
    "UnknownVariantError",
    "GblnIOError",
    # Selection / conversion
    "select_integer",
    "select_string_capacity",
    "encode",
    "decode",
    "MAX_DEPTH",
    # Configuration
    "Config",
    "io_default",
    "source_default",
    # Engine boundary
    "Parser",
    "Printer",
    "parse",
    "to_string",
    "to_string_pretty",
    "read_io",
    "write_io",
]
