import pytest

from noir_helpers.common.errors import IndexOutOfBounds, LengthMismatch
from noir_helpers.common.field import FieldElement
from noir_helpers.data_types.array import FixedSizeArray
from noir_helpers.data_types.integer import U8


@pytest.fixture
def arr():
    return FixedSizeArray(3, [U8(1), U8(2), U8(3)])


class TestConstruction:
    def test_length_mismatch(self):
        with pytest.raises(LengthMismatch, match="expected 3, got 2"):
            FixedSizeArray(3, [U8(1), U8(2)])

    def test_items_are_copied(self):
        items = [U8(1), U8(2)]
        arr = FixedSizeArray(2, items)
        items.append(U8(3))
        items[0] = U8(9)
        assert arr.len() == 2
        assert arr.get(0) == U8(1)

    def test_empty(self):
        arr = FixedSizeArray(0, [])
        assert len(arr) == 0
        assert arr.to_circuit_inputs() == []


class TestAccess:
    def test_get_set(self, arr):
        arr.set(1, U8(20))
        assert arr.get(1) == U8(20)
        assert arr.length == 3

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_out_of_bounds(self, arr, index):
        with pytest.raises(IndexOutOfBounds):
            arr.get(index)

    def test_set_out_of_bounds(self, arr):
        with pytest.raises(IndexOutOfBounds):
            arr.set(3, U8(0))
        with pytest.raises(IndexError):
            arr.set(-1, U8(0))

    def test_at_negative(self, arr):
        assert arr.at(-1) == U8(3)
        assert arr.at(-3) == U8(1)
        with pytest.raises(IndexOutOfBounds):
            arr.at(-4)

    def test_python_indexing(self, arr):
        assert arr[0] == U8(1)
        assert arr[-1] == U8(3)
        arr[-1] = U8(30)
        assert arr.get(2) == U8(30)


class TestTraversal:
    def test_for_each_in_order(self, arr):
        seen = []
        arr.for_each(lambda item, i: seen.append((i, item.value)))
        assert seen == [(0, 1), (1, 2), (2, 3)]

    def test_map(self, arr):
        assert arr.map(lambda item, i: item.value * 10 + i) == [10, 21, 32]

    def test_iter_and_to_list(self, arr):
        assert [x.value for x in arr] == [1, 2, 3]
        copy = arr.to_list()
        copy.clear()
        assert arr.len() == 3

    def test_equality(self, arr):
        assert arr == FixedSizeArray(3, [U8(1), U8(2), U8(3)])
        assert arr != FixedSizeArray(3, [U8(1), U8(2), U8(4)])


def test_circuit_inputs():
    nested = FixedSizeArray(2, [
        FixedSizeArray(2, [FieldElement(1), FieldElement(255)]),
        FixedSizeArray(2, [FieldElement(0), FieldElement(16)]),
    ])
    assert nested.to_circuit_inputs() == [["0x1", "0xff"], ["0x0", "0x10"]]
