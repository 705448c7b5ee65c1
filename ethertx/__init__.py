"""Canonical encoding and hashing of legacy Ethereum transactions."""

from ._rlp import Bytes, Empty, RLPItem, UInt, decode_items, encode_items, rlp_item
from ._serialization import JSON, structure, unstructure
from ._transaction import SignedTransaction, Transaction
from ._utils import strip_leading_zeros

__all__ = [
    "JSON",
    "Bytes",
    "Empty",
    "RLPItem",
    "SignedTransaction",
    "Transaction",
    "UInt",
    "decode_items",
    "encode_items",
    "rlp_item",
    "strip_leading_zeros",
    "structure",
    "unstructure",
]
