"""
Bounded Vectors (Noir ``BoundedVec<T, MaxLen>``).

A BoundedVec has a fixed capacity and a variable length. Its backing storage
always holds ``max_size`` elements: slots past the current length contain
default values made by a factory. Noir reads the whole storage array plus
the length, so the circuit input form keeps every slot:

    {"storage": [slot_0, ..., slot_{max_size-1}], "len": length}

Every mutating method validates before it changes anything, so a failed
call leaves the vector exactly as it was.
"""

from __future__ import annotations
from typing import Callable, ClassVar, Generic, Iterator, List, Sequence, TypeVar
import logging

from ..common.errors import (
    ContainerEmpty,
    ContainerFull,
    ContainerOverflow,
    IndexOutOfBounds,
)
from ..common.kinds import DataKind
from ..encoding.core import to_input_value

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BoundedVec(Generic[T]):
    """
    A resizable vector with a hard upper bound on its length.

    Args:
        max_size: Capacity of the vector (>= 0)
        default_factory: Called once per slot to fill the storage, so no two
                         slots share an object

    Example:
        >>> vec = BoundedVec(3, lambda: U8(0))
        >>> vec.push(U8(7))
        >>> vec.to_circuit_inputs()
        {'storage': ['7', '0', '0'], 'len': 1}
    """
    data_kind: ClassVar[DataKind] = DataKind.BOUNDED_VEC

    def __init__(self, max_size: int, default_factory: Callable[[], T]):
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self._max_size = max_size
        self._default_factory = default_factory
        self._items: List[T] = [default_factory() for _ in range(max_size)]
        self._length = 0

    def len(self) -> int:
        """Number of logical elements."""
        return self._length

    def max_len(self) -> int:
        """Capacity."""
        return self._max_size

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return (f"BoundedVec(len={self._length}, max_len={self._max_size}, "
                f"items={self.to_list()!r})")

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def is_empty(self) -> bool:
        return self._length == 0

    def is_full(self) -> bool:
        return self._length == self._max_size

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._length:
            raise IndexOutOfBounds(index, self._length)

    def get(self, index: int) -> T:
        """Element at index, checked against the current length."""
        self._check_index(index)
        return self._items[index]

    def at(self, index: int) -> T:
        """Like get(), but -1 is the last logical element."""
        adjusted = self._length + index if index < 0 else index
        return self.get(adjusted)

    def set(self, index: int, item: T) -> None:
        self._check_index(index)
        self._items[index] = item

    def push(self, item: T) -> None:
        """
        Append an element.

        Raises:
            ContainerFull: If the vector is at capacity
        """
        if self.is_full():
            raise ContainerFull(f"Vector is full (max_len={self._max_size})")
        self._items[self._length] = item
        self._length += 1

    def pop(self) -> T:
        """
        Remove and return the last logical element.

        The freed storage slot is reset to a fresh default, so popped
        values never reach the circuit input.

        Raises:
            ContainerEmpty: If the vector is empty
        """
        if self.is_empty():
            raise ContainerEmpty("Vector is empty")
        self._length -= 1
        item = self._items[self._length]
        self._items[self._length] = self._default_factory()
        return item

    def extend_from_array(self, items: Sequence[T]) -> None:
        """
        Append all items, or none of them.

        Raises:
            ContainerOverflow: If the items do not all fit
        """
        items = list(items)
        if self._length + len(items) > self._max_size:
            logger.debug("Rejected extend of %d items: len=%d, max_len=%d",
                         len(items), self._length, self._max_size)
            raise ContainerOverflow(
                f"Vector overflow: {self._length} + {len(items)} exceeds max_len {self._max_size}"
            )
        for item in items:
            self.push(item)

    def extend_from_vec(self, other: BoundedVec[T]) -> None:
        """Append the logical elements of another BoundedVec."""
        self.extend_from_array(other.to_list())

    def to_list(self) -> List[T]:
        """Logical elements only (the first len() slots)."""
        return self._items[:self._length]

    def storage(self) -> List[T]:
        """All max_len() slots, including default-filled ones."""
        return list(self._items)

    def to_circuit_inputs(self) -> dict:
        return to_input_value(self)
