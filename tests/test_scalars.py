import pytest

from noir_helpers.common.errors import InvalidInput
from noir_helpers.data_types.integer import U8
from noir_helpers.data_types.scalars import Bool, Str


class TestBool:
    def test_value(self):
        assert Bool(True).value() is True
        assert Bool(False).to_circuit_inputs() is False

    def test_eq(self):
        assert Bool(True).eq(Bool(True))
        assert not Bool(True).eq(Bool(False))
        assert Bool(False) == Bool(False)

    def test_not(self):
        assert Bool(True).not_().value() is False
        assert not Bool(False).not_().not_()

    def test_rejects_non_bool(self):
        with pytest.raises(InvalidInput):
            Bool(1)


class TestStr:
    def test_value(self):
        s = Str("hello")
        assert s.value() == "hello"
        assert s.to_circuit_inputs() == "hello"
        assert len(s) == 5
        assert str(s) == "hello"

    def test_eq(self):
        assert Str("a").eq(Str("a"))
        assert not Str("a").eq(Str("b"))

    def test_as_bytes_is_utf8(self):
        assert Str("héllo").as_bytes() == [U8(104), U8(195), U8(169), U8(108), U8(108), U8(111)]
        assert all(b.int_type is U8 for b in Str("abc").as_bytes())
        assert Str("").as_bytes() == []

    def test_rejects_non_str(self):
        with pytest.raises(InvalidInput):
            Str(5)
