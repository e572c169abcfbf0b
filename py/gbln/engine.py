"""
GBLN Engine Boundary

The GBLN grammar and printer live outside this package. They are reached
through two small protocols, and the helpers here glue them to the value
converter.

Example:
    >>> data = gbln.parse('user{id<u32>(12345)name<s64>(Alice)}', parser)
    >>> data["user"]["id"]
    12345
    >>> gbln.to_string({"id": 42}, printer)
    '{id<u8>(42)}'
"""

from __future__ import annotations
from typing import Any, Protocol
import logging

from .convert import decode, encode
from .errors import ParseError, SerialiseError
from .types import GValue

logger = logging.getLogger(__name__)


class Parser(Protocol):
    """Turns GBLN text into a tagged GValue tree, raising ParseError on bad input."""

    def parse(self, text: str) -> GValue:
        ...


class Printer(Protocol):
    """Formats a GValue tree as GBLN text."""

    def print_value(self, value: GValue, *, mini: bool, indent: int,
                    strip_comments: bool) -> str:
        ...


def parse(text: str, parser: Parser) -> Any:
    """Parse GBLN text and decode it to Python values."""
    if not isinstance(text, str):
        raise TypeError("input must be a str")
    tree = parser.parse(text)
    if not isinstance(tree, GValue):
        raise ParseError(f"parser returned {type(tree).__name__}, not a GValue")
    return decode(tree)


def print_tree(tree: GValue, printer: Printer, *, mini: bool = True, indent: int = 2,
               strip_comments: bool = True) -> str:
    """Print an already-built tree, checking the printer's result."""
    text = printer.print_value(tree, mini=mini, indent=indent,
                               strip_comments=strip_comments)
    if not isinstance(text, str):
        raise SerialiseError("printer returned no text")
    logger.debug("printed %s tree (%d chars, mini=%s)", tree.type.value, len(text), mini)
    return text


def to_string(value: Any, printer: Printer, mini: bool = True) -> str:
    """Encode a Python value with minimal types and print it."""
    return print_tree(encode(value), printer, mini=mini)


def to_string_pretty(value: Any, printer: Printer, indent: int = 2) -> str:
    """Encode a Python value and print it human-formatted."""
    if isinstance(indent, bool) or not isinstance(indent, int) or indent <= 0:
        raise ValueError("indent must be positive")
    return print_tree(encode(value), printer, mini=False, indent=indent,
                      strip_comments=False)
