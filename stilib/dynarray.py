"""A growable array with explicit capacity management and element deleters."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from stilib.utility import Finder

__all__ = ["DynArray"]

T = TypeVar("T")

Deleter = Callable[[Any], None]
Comparator = Callable[[Any, Any], bool]


class DynArray(Generic[T]):
    """Dynamic array that doubles its capacity when full.

    An optional deleter is called on every element that leaves the array
    through pop_back, erase, erase_if or destroy.
    """

    __slots__ = ("_items", "_capacity", "_deleter")

    def __init__(self, initial_capacity: int = 0, deleter: Optional[Deleter] = None) -> None:
        self._items: list[T] = []
        self._capacity = 0
        self._deleter = deleter
        self.reserve(initial_capacity)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"DynArray({self._items!r}, capacity={self._capacity})"

    def _position(self, index: int) -> int:
        position = operator.index(index)
        size = len(self._items)
        if position < 0:
            position += size
        if not 0 <= position < size:
            raise IndexError(f"index {index} out of range for size {size}")
        return position

    def __getitem__(self, index: int) -> T:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._position(index)] = value

    @property
    def capacity(self) -> int:
        """Number of elements the array can hold before it must grow."""
        return self._capacity

    def reserve(self, new_capacity: int) -> None:
        """Grow the capacity to new_capacity; smaller requests are ignored."""
        new_capacity = operator.index(new_capacity)
        if new_capacity < 0:
            raise ValueError("capacity cannot be negative")
        if new_capacity < self._capacity:
            return
        self._capacity = new_capacity

    def destroy(self) -> None:
        """Run the deleter on every element and reset the array to empty."""
        deleter = self._deleter
        items = self._items
        self._items = []
        self._capacity = 0
        self._deleter = None
        if deleter is not None:
            for item in items:
                deleter(item)

    def push(self, element: T) -> None:
        """Append an element, doubling the capacity when it is exhausted."""
        if len(self._items) >= self._capacity:
            self.reserve(self._capacity * 2 if self._capacity else 1)
        self._items.append(element)

    def back(self) -> T:
        """Return the last element."""
        if not self._items:
            raise IndexError("back of an empty array")
        return self._items[-1]

    def pop_back(self) -> None:
        """Remove the last element, passing it to the deleter."""
        if not self._items:
            raise IndexError("pop from an empty array")
        if self._deleter is not None:
            self._deleter(self._items[-1])
        self._items.pop()

    def erase(self, index: int) -> None:
        """Remove the element at index, keeping the order of the rest."""
        position = self._position(index)
        if position == len(self._items) - 1:
            self.pop_back()
            return
        if self._deleter is not None:
            self._deleter(self._items[position])
        del self._items[position]

    def find(self, element: Any, cmp: Optional[Comparator] = None) -> Finder:
        """Find the first item for which cmp(element, item) holds."""
        compare = cmp if cmp is not None else operator.eq
        for position, item in enumerate(self._items):
            if compare(element, item):
                return Finder(is_found=True, index=position)
        return Finder()

    def erase_if(self, element: Any, cmp: Optional[Comparator] = None) -> None:
        """Erase every item for which cmp(element, item) holds."""
        compare = cmp if cmp is not None else operator.eq
        kept: list[T] = []
        for item in self._items:
            if compare(element, item):
                if self._deleter is not None:
                    self._deleter(item)
            else:
                kept.append(item)
        self._items = kept

    def for_each(self, func: Callable[[T, Any], None], ctx: Any = None) -> None:
        """Call func(item, ctx) for each item in order."""
        for item in list(self._items):
            func(item, ctx)

    def swap(self, index_a: int, index_b: int) -> None:
        """Exchange the elements at two positions."""
        a = self._position(index_a)
        b = self._position(index_b)
        if a != b:
            self._items[a], self._items[b] = self._items[b], self._items[a]

    def batch_push(self, data: Iterable[T], offset: int = 0) -> None:
        """Write data starting at offset, growing the size but never the capacity.

        Positions between the old end and offset that were never written hold None.
        """
        values = list(data)
        offset = operator.index(offset)
        end = offset + len(values)
        if offset < 0 or end > self._capacity:
            raise IndexError("batch copy out of bounds")
        new_size = max(len(self._items), end)
        if offset >= new_size:
            raise IndexError(f"offset {offset} out of range for size {new_size}")
        if end > len(self._items):
            self._items.extend([None] * (end - len(self._items)))  # type: ignore[list-item]
        self._items[offset:end] = values