"""
Fixed-Size Arrays (Noir ``[T; N]``).

The length is fixed when the array is built and never changes; every slot
is always a valid element. Elements may be replaced in place with set().
"""

from __future__ import annotations
from typing import Callable, ClassVar, Generic, Iterator, List, Sequence, TypeVar

from ..common.errors import IndexOutOfBounds, LengthMismatch
from ..common.kinds import DataKind
from ..encoding.core import to_input_value

T = TypeVar("T")
U = TypeVar("U")


class FixedSizeArray(Generic[T]):
    """
    An array with a fixed number of elements.

    Attributes:
        length: Number of slots, fixed at construction

    Example:
        >>> arr = FixedSizeArray(3, [U8(1), U8(2), U8(3)])
        >>> arr.at(-1)
        U8<3>
        >>> arr.to_circuit_inputs()
        ['1', '2', '3']
    """
    data_kind: ClassVar[DataKind] = DataKind.ARRAY

    def __init__(self, length: int, items: Sequence[T]):
        if length != len(items):
            raise LengthMismatch(length, len(items))
        self._length = length
        self._items: List[T] = list(items)

    @property
    def length(self) -> int:
        return self._length

    def len(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"FixedSizeArray({self._length}, {self._items!r})"

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedSizeArray):
            return NotImplemented
        return self._items == other._items

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._length:
            raise IndexOutOfBounds(index, self._length)

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def at(self, index: int) -> T:
        """Like get(), but negative indices count from the end."""
        adjusted = self._length + index if index < 0 else index
        return self.get(adjusted)

    def set(self, index: int, item: T) -> None:
        self._check_index(index)
        self._items[index] = item

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __setitem__(self, index: int, item: T) -> None:
        self.set(self._length + index if index < 0 else index, item)

    def for_each(self, callback: Callable[[T, int], None]) -> None:
        """Call callback(item, index) for every slot, in index order."""
        for i, item in enumerate(self._items):
            callback(item, i)

    def map(self, callback: Callable[[T, int], U]) -> List[U]:
        """Return [callback(item, index) for every slot]."""
        return [callback(item, i) for i, item in enumerate(self._items)]

    def to_list(self) -> List[T]:
        """Shallow copy of the elements."""
        return list(self._items)

    def to_circuit_inputs(self) -> list:
        return to_input_value(self)
