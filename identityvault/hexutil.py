"""Hex string helpers shared by every codec."""

import re

HEX_PREFIX = "0x"

_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")


def strip_hex_prefix(value: str) -> str:
    """Drop a leading 0x/0X if present."""
    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def add_hex_prefix(value: str) -> str:
    return HEX_PREFIX + strip_hex_prefix(value)


def is_hex(value: str) -> bool:
    """True for an even-length string of hex digits (prefix already stripped)."""
    return len(value) % 2 == 0 and bool(_HEX_RE.match(value))


def decode_hex(value: str) -> bytes:
    """
    Decode a hex string with optional 0x prefix.

    Raises:
        TypeError: If value is not a str
        ValueError: If value is not valid hex
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected hex string, got {type(value).__name__}")
    body = strip_hex_prefix(value)
    if not is_hex(body):
        raise ValueError("Not a valid hex string")
    return bytes.fromhex(body)


def encode_hex(data: bytes, prefix: bool = True) -> str:
    """Lowercase hex, with 0x unless prefix is False."""
    return (HEX_PREFIX if prefix else "") + data.hex()
