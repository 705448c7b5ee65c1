import logging
from dataclasses import dataclass, field, replace
from typing import Any

from ethereum_rpc import Amount, TxHash, keccak

from ._rlp import Bytes, RLPItem, encode_items, rlp_item
from ._utils import address_bytes, strip_leading_zeros

logger = logging.getLogger(__name__)


def _hash(raw: None | bytes) -> None | TxHash:
    if raw is None:
        return None
    return TxHash(keccak(raw))


@dataclass(frozen=True)
class Transaction:
    """
    An unsigned legacy transaction.

    All the quantities except ``to`` are optional; an absent value
    is encoded as an empty RLP string, same as zero.
    """

    to: str
    """
    Transaction recipient, a hex-encoded address (``0x``-prefixed or not).
    Not validated; it is the caller's responsibility to provide a correct address.
    """

    from_: None | str = None
    """Transaction sender. Informational, not a part of the encoded transaction."""

    value: None | Amount = None
    """Associated funds."""

    data: bytes = b""
    """The data sent along with the transaction. ``None`` is normalized to an empty bytestring."""

    nonce: None | int = None
    """Sender's transaction count; see :py:meth:`with_nonce`."""

    gas_price: None | Amount = None
    """Gas price."""

    gas_limit: None | int = None
    """Maximum gas this transaction is allowed to use."""

    chain_id: None | int = None
    """Occupies the ``v`` slot of the encoding until the transaction is signed."""

    gas: None | int = field(default=None, kw_only=True)
    """
    Duplicates ``gas_limit`` under the name some RPC providers use.
    Only filled in by JSON deserialization and carried back on serialization, never encoded.
    The constructors leave it unset; it can only be passed by keyword.
    """

    def __post_init__(self) -> None:
        for name in ("value", "gas_price"):
            amount = getattr(self, name)
            if amount is not None and not isinstance(amount, Amount):
                raise TypeError(f"`{name}` must be an Amount, got {type(amount).__name__}")
        if self.data is None:
            # The dataclass is frozen, so the normalization has to go around `__setattr__`
            object.__setattr__(self, "data", b"")

    @classmethod
    def contract_call(
        cls,
        from_: None | str,
        to: str,
        data: bytes,
        gas_price: Amount,
        gas_limit: int,
    ) -> "Transaction":
        """
        Creates a transaction calling a contract method without sending funds.
        The nonce is expected to be set later with :py:meth:`with_nonce`.
        """
        return cls(
            to=to,
            from_=from_,
            value=Amount(0),
            data=data,
            gas_price=gas_price,
            gas_limit=gas_limit,
        )

    @classmethod
    def read_call(cls, to: str, data: bytes) -> "Transaction":
        """
        Creates a transaction for a read-only call (e.g. ``eth_call``),
        with all the payment-related values set to zero.
        """
        return cls(to=to, value=Amount(0), data=data, gas_price=Amount(0), gas_limit=0)

    def with_nonce(self, nonce: int) -> "Transaction":
        """Returns a copy of this transaction with the nonce replaced."""
        return replace(self, nonce=nonce)

    def _encode(self, v: Any, r: Any, s: Any) -> None | bytes:
        try:
            items: list[RLPItem] = [
                rlp_item(self.nonce),
                rlp_item(self.gas_price),
                rlp_item(self.gas_limit),
                Bytes(address_bytes(self.to)),
                rlp_item(self.value),
                rlp_item(self.data),
                rlp_item(v),
                rlp_item(r),
                rlp_item(s),
            ]
        except TypeError as exc:
            logger.debug("Cannot encode %r: %s", self, exc)
            return None
        return encode_items(items)

    @property
    def raw(self) -> None | bytes:
        """
        The RLP-encoded transaction, with the chain ID and two zeros in place of the signature.
        This is the payload that is hashed and signed.
        ``None`` if some of the values cannot be encoded.
        """
        return self._encode(self.chain_id, 0, 0)

    @property
    def hash(self) -> None | TxHash:
        """Keccak hash of :py:attr:`raw`, or ``None`` if it cannot be encoded."""
        return _hash(self.raw)


@dataclass(frozen=True)
class SignedTransaction:
    """A transaction along with its signature."""

    transaction: Transaction
    """The signed transaction."""

    v: int
    """Recovery identifier."""

    r: bytes
    """Signature's ``r`` component, with leading zeros removed."""

    s: bytes
    """Signature's ``s`` component, with leading zeros removed."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", strip_leading_zeros(self.r))
        object.__setattr__(self, "s", strip_leading_zeros(self.s))

    @property
    def raw(self) -> None | bytes:
        """
        The RLP-encoded signed transaction, ready to be broadcast.
        ``None`` if some of the values cannot be encoded.
        """
        return self.transaction._encode(self.v, self.r, self.s)  # noqa: SLF001

    @property
    def hash(self) -> None | TxHash:
        """Keccak hash of :py:attr:`raw` (that is, the transaction hash on the chain)."""
        return _hash(self.raw)
