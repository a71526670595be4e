"""Text encoding detection for BIM files.

Tabular model files saved by Visual Studio and SSDT are frequently UTF-16 LE,
with or without a byte-order mark; others are UTF-8 with an optional BOM.
"""

from __future__ import annotations

import codecs
import logging

logger = logging.getLogger(__name__)


def _looks_like_utf16le(data: bytes) -> bool:
    """Heuristic for BOM-less UTF-16 LE holding mostly ASCII-range text."""
    if len(data) < 4 or data[1] != 0x00 or data[3] != 0x00:
        return False
    if data[0] != 0x00:
        return True
    # A leading NUL alone is weak evidence; require more zero bytes.
    return len(data) > 10 and data[2] == 0x00 and data[4] == 0x00


def detect_encoding(data: bytes) -> tuple[str, int]:
    """Return ``(codec_name, bom_length)`` for *data*.

    Byte-order marks win over the UTF-16 heuristic; UTF-8 is the fallback.
    """
    if data.startswith(codecs.BOM_UTF8):
        return "utf-8", len(codecs.BOM_UTF8)
    if data.startswith(codecs.BOM_UTF16_LE):
        return "utf-16-le", len(codecs.BOM_UTF16_LE)
    if data.startswith(codecs.BOM_UTF16_BE):
        return "utf-16-be", len(codecs.BOM_UTF16_BE)
    if _looks_like_utf16le(data):
        return "utf-16-le", 0
    return "utf-8", 0


def decode_bytes(data: bytes) -> str:
    """Decode raw BIM bytes to text. Never raises; undecodable bytes become U+FFFD."""
    encoding, bom_length = detect_encoding(data)
    logger.debug("Decoding %d bytes as %s (bom=%d)", len(data), encoding, bom_length)
    return data[bom_length:].decode(encoding, errors="replace")
