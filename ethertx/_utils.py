import base64
import re

from eth_typing import HexStr
from eth_utils import decode_hex, remove_0x_prefix

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


def strip_leading_zeros(data: bytes) -> bytes:
    """
    Returns ``data`` without its leading zero bytes.
    A bytestring consisting only of zeros is reduced to an empty one.
    """
    return data.lstrip(b"\x00")


def hex_to_int(hex_str: str) -> int:
    """
    Parses a hex-encoded non-negative integer, with or without the ``0x`` prefix.
    Unlike ``int(x, 16)``, does not accept whitespace, signs or underscores.
    """
    if not isinstance(hex_str, str):
        raise TypeError(f"Expected a hex string, got {type(hex_str).__name__}")
    digits = remove_0x_prefix(HexStr(hex_str))
    if _HEX_DIGITS.fullmatch(digits) is None:
        raise ValueError(f"Not a hex-encoded integer: {hex_str!r}")
    return int(digits, 16)


def int_to_hex(value: int) -> str:
    """Renders a non-negative integer as a minimal ``0x``-prefixed lowercase hex string."""
    if not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Cannot hex-encode a negative integer, got {value}")
    return hex(value)


def base64_to_bytes(encoded: str) -> bytes:
    """Decodes a standard (RFC 4648) base64 string, rejecting any non-alphabet characters."""
    if not isinstance(encoded, str):
        raise TypeError(f"Expected a base64 string, got {type(encoded).__name__}")
    # `b64decode` raises `binascii.Error`, which is a subclass of `ValueError`
    return base64.b64decode(encoded, validate=True)


def bytes_to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode()


def address_bytes(address: str) -> bytes:
    """
    Returns the bytes that represent ``address`` in an RLP payload.

    The ``0x`` prefix is dropped; the remainder is hex-decoded if possible,
    and taken as UTF-8 text otherwise. The address is not validated.
    """
    unprefixed = remove_0x_prefix(HexStr(address))
    try:
        return decode_hex(unprefixed)
    except ValueError:
        return unprefixed.encode()
