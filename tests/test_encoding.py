import logging
from types import MappingProxyType

import pytest

from noir_helpers.common.errors import UnsupportedValueType
from noir_helpers.common.field import FieldElement
from noir_helpers.common.kinds import DataKind
from noir_helpers.common.params import BN254_MODULUS as P
from noir_helpers.data_types import (
    Bool,
    BoundedVec,
    FixedSizeArray,
    I8,
    Str,
    U8,
    U64,
)
from noir_helpers.encoding import kind_of, to_circuit_inputs, to_input_value


class TestScalars:
    def test_field_is_hex(self):
        assert to_input_value(FieldElement(255)) == "0xff"
        assert to_input_value(FieldElement(-1)) == hex(P - 1)

    def test_integer_is_decimal(self):
        assert to_input_value(U64(2**64 - 1)) == "18446744073709551615"
        assert to_input_value(I8(-5)) == "-5"

    def test_bool_and_str_pass_through(self):
        assert to_input_value(Bool(False)) is False
        assert to_input_value(Str("abc")) == "abc"


class TestKindOf:
    def test_tagged_types(self):
        assert kind_of(FieldElement(1)) is DataKind.FIELD
        assert kind_of(U8(1)) is DataKind.INTEGER
        assert kind_of(Bool(True)) is DataKind.BOOL
        assert kind_of(Str("")) is DataKind.STR
        assert kind_of(FixedSizeArray(0, [])) is DataKind.ARRAY
        assert kind_of(BoundedVec(0, lambda: U8(0))) is DataKind.BOUNDED_VEC
        assert kind_of({}) is DataKind.STRUCT
        assert kind_of(MappingProxyType({})) is DataKind.STRUCT

    @pytest.mark.parametrize("value", [5, None, [1], "x", True, 1.5, (U8(1),)])
    def test_raw_python_values_rejected(self, value):
        with pytest.raises(UnsupportedValueType, match="Invalid value type"):
            to_input_value(value)

    def test_other_field_class_is_tagged(self, tiny_field):
        assert kind_of(tiny_field(3)) is DataKind.FIELD


class TestStructs:
    def test_nested(self):
        vec = BoundedVec(3, lambda: FieldElement(0))
        vec.push(FieldElement(16))
        inputs = {
            "a": FieldElement(1),
            "b": {
                "c": U8(2),
                "d": FixedSizeArray(2, [Bool(True), Bool(False)]),
            },
            "e": vec,
            "f": Str("hi"),
        }
        assert to_circuit_inputs(inputs) == {
            "a": "0x1",
            "b": {"c": "2", "d": [True, False]},
            "e": {"storage": ["0x10", "0x0", "0x0"], "len": 1},
            "f": "hi",
        }

    def test_key_order_preserved(self):
        inputs = {"z": U8(1), "a": U8(2), "m": U8(3)}
        assert list(to_circuit_inputs(inputs)) == ["z", "a", "m"]

    def test_empty(self):
        assert to_circuit_inputs({}) == {}

    def test_input_not_mutated(self):
        arr = FixedSizeArray(2, [U8(1), U8(2)])
        inputs = {"arr": arr}
        to_circuit_inputs(inputs)
        assert inputs == {"arr": arr}
        assert arr.to_list() == [U8(1), U8(2)]

    def test_array_of_structs(self):
        arr = FixedSizeArray(2, [{"x": U8(1)}, {"x": U8(2)}])
        assert to_input_value(arr) == [{"x": "1"}, {"x": "2"}]

    def test_non_string_key(self):
        with pytest.raises(UnsupportedValueType):
            to_circuit_inputs({"outer": {1: U8(1)}})

    def test_unsupported_leaf_in_container(self):
        with pytest.raises(UnsupportedValueType):
            to_circuit_inputs({"arr": FixedSizeArray(2, [U8(1), 2])})

    def test_top_level_must_be_mapping(self):
        with pytest.raises(UnsupportedValueType):
            to_circuit_inputs([U8(1)])

    def test_debug_log(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="noir_helpers.encoding.core"):
            to_circuit_inputs({"x": U8(1), "y": U8(2)})
        assert "x, y" in caplog.text


def test_every_kind_has_an_encoder():
    from noir_helpers.encoding.core import _ENCODERS
    assert set(_ENCODERS) == set(DataKind)
