"""Doubly linked circular list with a sentinel node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class LinkedList(Generic[T]):
    """Sequence with constant-time insertion and removal at both ends."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head = _Node()
        self._size = 0
        for item in items:
            self.push_back(item)

    def _link_before(self, node: _Node, value: T) -> None:
        new = _Node(value)
        prev = node.prev
        prev.next = new
        new.prev = prev
        new.next = node
        node.prev = new
        self._size += 1

    def _unlink(self, node: _Node) -> T:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.value

    def _node_at(self, index: int) -> _Node:
        """Return the node at ``index``; ``index == len`` gives the sentinel."""
        if index <= self._size // 2:
            node = self._head.next
            for _ in range(index):
                node = node.next
        else:
            node = self._head
            for _ in range(self._size - index):
                node = node.prev
        return node

    def push_back(self, value: T) -> None:
        self._link_before(self._head, value)

    def push_front(self, value: T) -> None:
        self._link_before(self._head.next, value)

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if not self._size:
            raise IndexError("pop_back from empty list")
        return self._unlink(self._head.prev)

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if not self._size:
            raise IndexError("pop_front from empty list")
        return self._unlink(self._head.next)

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` before position ``index`` (0..len)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert position {index} out of range")
        self._link_before(self._node_at(index), value)

    def erase(self, index: int) -> T:
        """Remove and return the element at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"erase position {index} out of range")
        return self._unlink(self._node_at(index))

    def clear(self) -> None:
        self._head.next = self._head.prev = self._head
        self._size = 0

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not self._head:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._head.prev
        while node is not self._head:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"