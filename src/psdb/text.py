"""
Conversions between raw bytes, UTF-8 text and hex strings.
"""

import binascii
from typing import Optional


def decode(data: Optional[bytes]) -> str:
    """
    UTF-8 decode ``data``. ``None`` and empty input both give ``''``.
    Invalid sequences are replaced with U+FFFD rather than raising.
    """
    if not data:
        return ""
    return bytes(data).decode("utf-8", errors="replace")


def encode(text: Optional[str]) -> bytes:
    if not text:
        return b""
    return text.encode("utf-8")


def to_hex(data: bytes) -> str:
    """Render ``data`` as ``0x``-prefixed lowercase hex, e.g. ``b'\\x00'`` -> ``'0x00'``."""
    return "0x" + binascii.hexlify(bytes(data)).decode("ascii")


def from_hex(text: str) -> bytes:
    """Inverse of :func:`to_hex`; the ``0x`` prefix is optional and case is ignored."""
    if text[:2].lower() == "0x":
        text = text[2:]
    try:
        return binascii.unhexlify(text)
    except binascii.Error as e:
        raise ValueError(f"Invalid hex string: {text!r}") from e
