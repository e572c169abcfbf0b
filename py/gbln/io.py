"""
GBLN I/O Payloads

Builds and reads the byte payloads of the .io.gbln.xz format: GBLN text,
UTF-8 encoded, optionally XZ (LZMA2) compressed. Where the bytes go is up
to the caller.
"""

from __future__ import annotations
from typing import Any, Optional
import logging
import lzma

from .config import Config, io_default
from .convert import encode
from .engine import Parser, Printer, parse, print_tree
from .errors import GblnIOError

logger = logging.getLogger(__name__)

XZ_MAGIC = b"\xfd7zXZ\x00"


def write_io(value: Any, printer: Printer, config: Optional[Config] = None) -> bytes:
    """
    Serialise a Python value to an I/O payload.

    config defaults to io_default(). Presentation fields go to the printer;
    compress/compression_level select the XZ transform.
    """
    if value is None:
        raise ValueError("value cannot be None")
    if config is None:
        config = io_default()
    if not isinstance(config, Config):
        raise TypeError("config must be a gbln.Config")
    config.validate()

    text = print_tree(encode(value), printer, mini=config.mini_mode,
                      indent=config.indent, strip_comments=config.strip_comments)
    try:
        payload = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise GblnIOError(f"printed text is not valid UTF-8: {e}") from e

    if not config.compress:
        logger.debug("wrote %d byte uncompressed payload", len(payload))
        return payload

    try:
        data = lzma.compress(payload, format=lzma.FORMAT_XZ,
                             preset=config.compression_level)
    except lzma.LZMAError as e:
        raise GblnIOError(f"failed to compress payload: {e}") from e
    logger.debug("compressed %d bytes to %d (level %d)",
                 len(payload), len(data), config.compression_level)
    return data


def read_io(data: bytes, parser: Parser) -> Any:
    """Read an I/O payload, decompressing it if it carries the XZ header."""
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("data must be bytes")

    raw = bytes(data)
    if raw.startswith(XZ_MAGIC):
        try:
            raw = lzma.decompress(raw, format=lzma.FORMAT_XZ)
        except lzma.LZMAError as e:
            raise GblnIOError(f"failed to decompress payload: {e}") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise GblnIOError(f"payload is not valid UTF-8: {e}") from e

    logger.debug("read %d byte payload", len(raw))
    return parse(text, parser)
