"""A growable array that tracks its own capacity."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Vector(Generic[T]):
    """Sequence with explicit capacity that doubles when full."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        self._capacity = 0
        values = list(items)
        self.reserve(len(values))
        for value in values:
            self.push_back(value)

    def capacity(self) -> int:
        """Return how many elements fit before the storage grows."""
        return self._capacity

    def reserve(self, n: int) -> None:
        """Grow the capacity to at least ``n``; never shrinks."""
        if n > self._capacity:
            self._capacity = n

    def insert(self, index: int, value: T) -> int:
        """Insert ``value`` before ``index`` and return its position."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert position {index} out of range")
        if len(self._items) == self._capacity:
            self.reserve(2 if self._capacity == 0 else 2 * self._capacity)
        self._items.insert(index, value)
        return index

    def push_back(self, value: T) -> None:
        self.insert(len(self._items), value)

    def push_front(self, value: T) -> None:
        self.insert(0, value)

    def erase(self, index: int) -> None:
        """Remove the element at ``index``."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"erase position {index} out of range")
        del self._items[index]

    def pop_back(self) -> None:
        if not self._items:
            raise IndexError("pop_back from empty vector")
        self._items.pop()

    def pop_front(self) -> None:
        if not self._items:
            raise IndexError("pop_front from empty vector")
        self.erase(0)

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of empty vector")
        return self._items[0]

    def back(self) -> T:
        if not self._items:
            raise IndexError("back of empty vector")
        return self._items[-1]

    def __getitem__(self, index: int) -> T:
        return self._items[operator.index(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[operator.index(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"