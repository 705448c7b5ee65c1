import pytest
from ethereum_rpc import Amount
from rlp.exceptions import DecodingError

from ethertx import Bytes, Empty, UInt, decode_items, encode_items, rlp_item


def test_rlp_item():
    assert rlp_item(None) == Empty()
    assert rlp_item(0) == UInt(0)
    assert rlp_item(2**300) == UInt(2**300)
    assert rlp_item(Amount.gwei(1)) == UInt(10**9)
    assert rlp_item(b"\x01") == Bytes(b"\x01")

    with pytest.raises(TypeError, match="Cannot represent a value of type str as an RLP item"):
        rlp_item("0x01")  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="Cannot represent a value of type bool as an RLP item"):
        rlp_item(True)  # type: ignore[arg-type]


def test_serialize():
    assert Empty().serialize() == b""
    # Zero has the same representation as an empty string
    assert UInt(0).serialize() == b""
    assert UInt(1).serialize() == b"\x01"
    assert UInt(0x0100).serialize() == b"\x01\x00"
    assert Bytes(b"\x00\x01").serialize() == b"\x00\x01"


def test_encode_items():
    assert encode_items([]) == bytes.fromhex("c0")
    assert encode_items([Empty(), UInt(0), Bytes(b"")]) == bytes.fromhex("c3808080")
    # Single bytes below 0x80 are their own encoding
    assert encode_items([UInt(0x7F), Bytes(b"\x80")]) == bytes.fromhex("c37f8180")
    assert encode_items([UInt(0x0400)]) == bytes.fromhex("c3820400")

    # Long strings and lists use the extended length prefix
    long_bytes = b"\xaa" * 56
    assert encode_items([Bytes(long_bytes)]) == bytes.fromhex("f83ab838") + long_bytes


def test_encode_items_failure():
    # Negative integers cannot be encoded, and the whole list is rejected
    assert encode_items([UInt(1), UInt(-1)]) is None
    assert encode_items([Bytes("abc")]) is None  # type: ignore[arg-type]


def test_decode_items():
    items = [Empty(), UInt(1024), Bytes(b"abc")]
    encoded = encode_items(items)
    assert encoded is not None
    assert decode_items(encoded) == [b"", b"\x04\x00", b"abc"]

    # Not a list
    with pytest.raises(DecodingError, match="Expected a flat RLP list"):
        decode_items(bytes.fromhex("80"))

    # A nested list
    with pytest.raises(DecodingError, match="Expected a flat RLP list"):
        decode_items(bytes.fromhex("c2c180"))
