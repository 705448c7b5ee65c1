"""JSON representation of transactions."""

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType, NoneType
from typing import Any, TypeVar, cast

from compages import (
    StructureDictIntoDataclass,
    Structurer,
    StructuringError,
    UnstructureDataclassToDict,
    Unstructurer,
    UnstructuringError,
    simple_structure,
    simple_typechecked_unstructure,
    structure_into_none,
    structure_into_str,
    unstructure_as_none,
    unstructure_as_str,
)
from ethereum_rpc import Amount

from ._transaction import Transaction
from ._utils import base64_to_bytes, bytes_to_base64, hex_to_int, int_to_hex

logger = logging.getLogger(__name__)

JSON = None | bool | int | float | str | Sequence["JSON"] | Mapping[str, "JSON"]
"""Values serializable to JSON."""


# Optional fields of `Transaction` that are present in its JSON representation,
# along with the types they are (un)structured as.
# `chain_id` is only used in encoding and is not a part of the JSON object.
_OPTIONAL_TX_FIELDS: dict[str, type] = dict(
    from_=str,
    data=bytes,
    value=Amount,
    gas_price=Amount,
    gas_limit=int,
    gas=int,
    nonce=int,
)


def _to_camel_case(name: str, _metadata: MappingProxyType[Any, Any]) -> str:
    if name.endswith("_"):
        name = name[:-1]
    parts = name.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


_TX_FIELD_KEYS = {name: _to_camel_case(name, MappingProxyType({})) for name in _OPTIONAL_TX_FIELDS}


@simple_structure
def _structure_into_int(val: Any) -> int:
    try:
        return hex_to_int(val)
    except (TypeError, ValueError) as exc:
        raise StructuringError(str(exc)) from exc


def _structure_into_amount(
    _structurer: Structurer, structure_into: type[Amount], val: Any
) -> Amount:
    try:
        return structure_into(hex_to_int(val))
    except (TypeError, ValueError) as exc:
        raise StructuringError(str(exc)) from exc


@simple_structure
def _structure_into_bytes(val: Any) -> bytes:
    try:
        return base64_to_bytes(val)
    except (TypeError, ValueError) as exc:
        raise StructuringError(str(exc)) from exc


def _structure_into_transaction(
    structurer: Structurer, structure_into: type[Transaction], val: Any
) -> Transaction:
    if not isinstance(val, Mapping):
        raise StructuringError(f"Can only structure a mapping into {structure_into.__name__}")
    to = val.get("to")
    if not isinstance(to, str):
        raise StructuringError("The required field `to` must be a string")

    # Every optional field is decoded independently;
    # a value that fails to decode is treated as absent.
    fields: dict[str, Any] = {}
    for name, field_type in _OPTIONAL_TX_FIELDS.items():
        key = _TX_FIELD_KEYS[name]
        if val.get(key) is None:
            continue
        try:
            fields[name] = structurer.structure_into(field_type, val[key])
        except StructuringError as exc:
            logger.debug("Dropping the `%s` field of a transaction: %s", key, exc)

    return structure_into(to=to, **fields)


@simple_typechecked_unstructure
def _unstructure_int_to_hex(obj: int) -> str:
    return int_to_hex(obj)


@simple_typechecked_unstructure
def _unstructure_amount(obj: Amount) -> str:
    return int_to_hex(obj.as_wei())


@simple_typechecked_unstructure
def _unstructure_bytes_to_base64(obj: bytes) -> str:
    return bytes_to_base64(obj)


def _unstructure_transaction(
    unstructurer: Unstructurer, _unstructure_as: type[Transaction], obj: Transaction
) -> JSON:
    json: dict[str, JSON] = {"to": unstructurer.unstructure_as(str, obj.to)}

    # Every optional field is encoded independently;
    # a value that fails to encode is left out.
    for name, field_type in _OPTIONAL_TX_FIELDS.items():
        value = getattr(obj, name)
        if value is None:
            continue
        key = _TX_FIELD_KEYS[name]
        try:
            json[key] = unstructurer.unstructure_as(field_type, value)
        except (UnstructuringError, TypeError, ValueError) as exc:
            logger.debug("Omitting the `%s` field of a transaction: %s", key, exc)

    return json


STRUCTURER = Structurer(
    {
        Transaction: _structure_into_transaction,
        Amount: _structure_into_amount,
        int: _structure_into_int,
        str: structure_into_str,
        bytes: _structure_into_bytes,
        NoneType: structure_into_none,
    },
    [StructureDictIntoDataclass(_to_camel_case)],
)

UNSTRUCTURER = Unstructurer(
    {
        Transaction: _unstructure_transaction,
        Amount: _unstructure_amount,
        int: _unstructure_int_to_hex,
        bytes: _unstructure_bytes_to_base64,
        str: unstructure_as_str,
        NoneType: unstructure_as_none,
    },
    [UnstructureDataclassToDict(_to_camel_case)],
)


_T = TypeVar("_T")


def structure(structure_into: type[_T], obj: JSON) -> _T:
    """Structures incoming JSON data."""
    return STRUCTURER.structure_into(structure_into, obj)


def unstructure(obj: Any, unstructure_as: Any = None) -> JSON:
    """Unstructures data into JSON-serializable values."""
    # The result is `JSON` by virtue of the hooks we defined
    return cast(JSON, UNSTRUCTURER.unstructure_as(unstructure_as or type(obj), obj))
