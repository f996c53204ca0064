"""
Circuit Input Encoding.

Turns any composition of circuit data types into the plain structure that
Noir's witness executor (and Prover.toml writers) consume:

    FieldElement     -> "0x..." hex string
    BoundedInteger   -> decimal string ("-5" for negative signed values)
    Bool             -> bool
    Str              -> str
    FixedSizeArray   -> list of encoded elements
    BoundedVec       -> {"storage": [all max_len slots], "len": int}
    Mapping[str, _]  -> dict with the same keys, in the same order

Dispatch goes through the ``data_kind`` tag each data type carries. The
encoder table is checked against DataKind when this module is imported, so
adding a kind without an encoder fails immediately.

Example:
    >>> to_circuit_inputs({"x": U8(1), "y": FieldElement(255)})
    {'x': '1', 'y': '0xff'}
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Union
import logging

from ..common.errors import UnsupportedValueType
from ..common.kinds import DataKind

logger = logging.getLogger(__name__)

InputValue = Union[str, bool, int, List["InputValue"], Dict[str, "InputValue"]]


def kind_of(value: Any) -> DataKind:
    """
    Classify a value as one of the circuit data types.

    Raises:
        UnsupportedValueType: For anything outside the closed set, including
                              raw Python ints, strings and lists
    """
    kind = getattr(type(value), "data_kind", None)
    if isinstance(kind, DataKind):
        return kind
    if isinstance(value, Mapping):
        return DataKind.STRUCT
    raise UnsupportedValueType(
        f"Invalid value type: {'None' if value is None else type(value).__name__}"
    )


def _encode_struct(value: Mapping) -> Dict[str, InputValue]:
    result = {}
    for key, item in value.items():
        if not isinstance(key, str):
            raise UnsupportedValueType(f"Struct keys must be strings, got {key!r}")
        result[key] = to_input_value(item)
    return result


_ENCODERS: Dict[DataKind, Callable[[Any], InputValue]] = {
    DataKind.FIELD: lambda v: v.to_hex(),
    DataKind.INTEGER: lambda v: v.to_string(),
    DataKind.BOOL: lambda v: v.value(),
    DataKind.STR: lambda v: v.value(),
    DataKind.ARRAY: lambda v: [to_input_value(item) for item in v.to_list()],
    DataKind.BOUNDED_VEC: lambda v: {
        "storage": [to_input_value(item) for item in v.storage()],
        "len": v.len(),
    },
    DataKind.STRUCT: _encode_struct,
}

_missing = set(DataKind) - set(_ENCODERS)
if _missing:
    raise RuntimeError(f"No circuit input encoder for {sorted(k.value for k in _missing)}")


def to_input_value(value: Any) -> InputValue:
    """Encode a single circuit value (recursively for containers)."""
    return _ENCODERS[kind_of(value)](value)


def to_circuit_inputs(value: Mapping) -> Dict[str, InputValue]:
    """
    Encode the top-level struct of circuit inputs.

    Args:
        value: Mapping from circuit parameter name to a circuit value

    Raises:
        UnsupportedValueType: If value is not a mapping, or anything inside
                              it is not a circuit data type
    """
    if not isinstance(value, Mapping):
        raise UnsupportedValueType(
            f"Circuit inputs must be a mapping, got {type(value).__name__}"
        )
    encoded = _encode_struct(value)
    logger.debug("Encoded circuit inputs: %s", ", ".join(encoded) or "<empty>")
    return encoded
