"""Stack, queue and heap-based priority queue adaptors."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from classicds.rbtree import greater
from classicds.vector import Vector

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out container."""

    def __init__(self) -> None:
        self._items: Vector[T] = Vector()

    def push(self, value: T) -> None:
        self._items.push_back(value)

    def pop(self) -> T:
        """Remove and return the top element."""
        if not len(self._items):
            raise IndexError("pop from empty stack")
        value = self._items.back()
        self._items.pop_back()
        return value

    def top(self) -> T:
        if not len(self._items):
            raise IndexError("top of empty stack")
        return self._items.back()

    def __len__(self) -> int:
        return len(self._items)


class Queue(Generic[T]):
    """First-in, first-out container."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the front element."""
        if not self._items:
            raise IndexError("pop from empty queue")
        return self._items.popleft()

    def front(self) -> T:
        if not self._items:
            raise IndexError("front of empty queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)


class PriorityQueue(Generic[T]):
    """Binary heap; ``compare(parent, child)`` true means they swap.

    With the default ``greater`` the smallest element is on top.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        compare: Callable[[T, T], bool] = greater,
    ) -> None:
        self._compare = compare
        self._heap: list[T] = list(items)
        for parent in range((len(self._heap) - 2) // 2, -1, -1):
            self._sift_down(parent)

    def _sift_up(self, child: int) -> None:
        heap = self._heap
        while child > 0:
            parent = (child - 1) // 2
            if not self._compare(heap[parent], heap[child]):
                break
            heap[parent], heap[child] = heap[child], heap[parent]
            child = parent

    def _sift_down(self, parent: int) -> None:
        heap = self._heap
        size = len(heap)
        child = 2 * parent + 1
        while child < size:
            if child + 1 < size and self._compare(heap[child], heap[child + 1]):
                child += 1
            if not self._compare(heap[parent], heap[child]):
                break
            heap[parent], heap[child] = heap[child], heap[parent]
            parent = child
            child = 2 * parent + 1

    def push(self, value: T) -> None:
        self._heap.append(value)
        self._sift_up(len(self._heap) - 1)

    def pop(self) -> T:
        """Remove and return the top element."""
        heap = self._heap
        if not heap:
            raise IndexError("pop from empty priority queue")
        heap[0], heap[-1] = heap[-1], heap[0]
        value = heap.pop()
        if heap:
            self._sift_down(0)
        return value

    def top(self) -> T:
        if not self._heap:
            raise IndexError("top of empty priority queue")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)


class TwoStackQueue(Generic[T]):
    """FIFO queue built from an inbound and an outbound stack."""

    def __init__(self) -> None:
        self._inbound: Stack[T] = Stack()
        self._outbound: Stack[T] = Stack()

    def push(self, value: T) -> None:
        self._inbound.push(value)

    def peek(self) -> T:
        """Return the oldest element without removing it."""
        if not len(self._outbound):
            while len(self._inbound):
                self._outbound.push(self._inbound.pop())
        if not len(self._outbound):
            raise IndexError("peek at empty queue")
        return self._outbound.top()

    def pop(self) -> T:
        """Remove and return the oldest element."""
        value = self.peek()
        self._outbound.pop()
        return value

    def __len__(self) -> int:
        return len(self._inbound) + len(self._outbound)