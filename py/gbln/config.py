"""
GBLN I/O Configuration

Settings handed to the printer and to the persistence layer: output format,
compression and presentation.
"""

from __future__ import annotations
from dataclasses import dataclass, replace as dataclass_replace
from typing import Any
import logging

from .errors import ValidationError

logger = logging.getLogger(__name__)

MIN_COMPRESSION_LEVEL = 0
MAX_COMPRESSION_LEVEL = 9
RECOMMENDED_MAX_INDENT = 8


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass
class Config:
    """
    Options for printing and persisting GBLN data.

    mini_mode:         compact output instead of human formatting
    compress:          apply XZ compression when persisting
    compression_level: XZ preset, 0-9
    indent:            spaces per nesting level when not in mini mode
    strip_comments:    drop source comments on output

    Validated on construction; call validate() again after changing fields.
    """
    mini_mode: bool = True
    compress: bool = True
    compression_level: int = 6
    indent: int = 2
    strip_comments: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ValidationError for the first invalid field, in declaration order."""
        if not isinstance(self.mini_mode, bool):
            raise ValidationError(
                "mini_mode", f"must be boolean, got {type(self.mini_mode).__name__}")

        if not isinstance(self.compress, bool):
            raise ValidationError(
                "compress", f"must be boolean, got {type(self.compress).__name__}")

        if not (_is_int(self.compression_level)
                and MIN_COMPRESSION_LEVEL <= self.compression_level <= MAX_COMPRESSION_LEVEL):
            raise ValidationError(
                "compression_level",
                f"must be {MIN_COMPRESSION_LEVEL}-{MAX_COMPRESSION_LEVEL}, got {self.compression_level!r}")

        if not (_is_int(self.indent) and self.indent > 0):
            raise ValidationError(
                "indent", f"must be positive integer, got {self.indent!r}")
        if self.indent > RECOMMENDED_MAX_INDENT:
            logger.warning("indent %d exceeds recommended maximum of %d",
                           self.indent, RECOMMENDED_MAX_INDENT)

        if not isinstance(self.strip_comments, bool):
            raise ValidationError(
                "strip_comments", f"must be boolean, got {type(self.strip_comments).__name__}")

    def replace(self, **changes: Any) -> "Config":
        """Return a validated copy with the given fields changed."""
        return dataclass_replace(self, **changes)


def io_default() -> Config:
    """Compact, XZ-compressed (level 6), comments stripped. For .io.gbln.xz data."""
    return Config(mini_mode=True, compress=True, compression_level=6,
                  indent=2, strip_comments=True)


def source_default() -> Config:
    """Pretty, uncompressed, comments kept. For hand-edited .gbln sources."""
    return Config(mini_mode=False, compress=False, compression_level=0,
                  indent=2, strip_comments=False)
