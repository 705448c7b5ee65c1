import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import rlp
from ethereum_rpc import Amount
from rlp.exceptions import DecodingError, RLPException
from rlp.sedes import big_endian_int, binary

logger = logging.getLogger(__name__)


class RLPItem(ABC):
    """A single element of a flat RLP list."""

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Returns the bytestring this item is represented by in an RLP list.
        Raises ``rlp.exceptions.SerializationError`` if the item cannot be represented.
        """


@dataclass(frozen=True)
class Empty(RLPItem):
    """An absent value; encoded as an empty string."""

    def serialize(self) -> bytes:
        return b""


@dataclass(frozen=True)
class UInt(RLPItem):
    """An unsigned integer of arbitrary size, encoded big-endian with no leading zeros."""

    value: int

    def serialize(self) -> bytes:
        return big_endian_int.serialize(self.value)


@dataclass(frozen=True)
class Bytes(RLPItem):
    """A raw bytestring."""

    value: bytes

    def serialize(self) -> bytes:
        return binary.serialize(self.value)


def rlp_item(value: None | int | Amount | bytes) -> RLPItem:
    """Wraps a plain value in the corresponding :py:class:`RLPItem`."""
    if value is None:
        return Empty()
    if isinstance(value, Amount):
        return UInt(value.as_wei())
    # `bool` is an `int` subclass, but it is not a quantity
    if isinstance(value, int) and not isinstance(value, bool):
        return UInt(value)
    if isinstance(value, bytes):
        return Bytes(value)
    raise TypeError(f"Cannot represent a value of type {type(value).__name__} as an RLP item")


def encode_items(items: Iterable[RLPItem]) -> None | bytes:
    """
    Encodes ``items`` as a flat RLP list.
    Returns ``None`` if any of the items cannot be encoded;
    the list is never encoded partially.
    """
    items = list(items)
    try:
        return rlp.encode([item.serialize() for item in items])
    except (RLPException, TypeError) as exc:
        logger.debug("Failed to RLP-encode %r: %s", items, exc)
        return None


def decode_items(data: bytes) -> list[bytes]:
    """Decodes a flat RLP list into the bytestrings of its elements."""
    decoded: Any = rlp.decode(data)
    if not isinstance(decoded, list) or not all(isinstance(elem, bytes) for elem in decoded):
        raise DecodingError("Expected a flat RLP list", data)
    return decoded
