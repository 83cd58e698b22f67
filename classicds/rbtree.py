"""Red-black tree with ordered set and map front ends."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from operator import itemgetter
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def less(a: Any, b: Any) -> bool:
    """Ascending order: True when ``a`` sorts before ``b``."""
    return a < b


def greater(a: Any, b: Any) -> bool:
    """Descending order: True when ``a`` is larger than ``b``."""
    return a > b


class Color(enum.Enum):
    BLACK = 0
    RED = 1


class _Node:
    __slots__ = ("value", "parent", "left", "right", "color")

    def __init__(self, value: Any, color: Color = Color.RED) -> None:
        self.value = value
        self.parent: _Node | None = None
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.color = color


def _copy_subtree(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    clone = _Node(node.value, node.color)
    clone.left = _copy_subtree(node.left)
    clone.right = _copy_subtree(node.right)
    if clone.left is not None:
        clone.left.parent = clone
    if clone.right is not None:
        clone.right.parent = clone
    return clone


def _subtree_height(node: _Node | None) -> int:
    if node is None:
        return 0
    return 1 + max(_subtree_height(node.left), _subtree_height(node.right))


class RedBlackTree(Generic[K, V]):
    """Balanced binary search tree of values ordered by ``compare`` on their keys.

    With no ``key_of`` a value is its own key. Values with equal keys are
    stored once; iteration is in key order.
    """

    def __init__(
        self,
        key_of: Callable[[V], K] | None = None,
        compare: Callable[[K, K], bool] = less,
    ) -> None:
        self._key_of = key_of
        self._compare = compare
        self._root: _Node | None = None
        self._size = 0

    def _key(self, value: V) -> K:
        if self._key_of is None:
            return value  # type: ignore[return-value]
        return self._key_of(value)

    def insert(self, value: V) -> tuple[V, bool]:
        """Add ``value``; return the stored value and whether it was new."""
        key = self._key(value)
        if self._root is None:
            self._root = _Node(value, Color.BLACK)
            self._size = 1
            return value, True

        parent: _Node | None = None
        cur: _Node | None = self._root
        while cur is not None:
            current_key = self._key(cur.value)
            if self._compare(key, current_key):
                parent, cur = cur, cur.left
            elif self._compare(current_key, key):
                parent, cur = cur, cur.right
            else:
                return cur.value, False

        assert parent is not None
        node = _Node(value)
        node.parent = parent
        if self._compare(key, self._key(parent.value)):
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._fix_after_insert(node)
        return value, True

    def _fix_after_insert(self, cur: _Node) -> None:
        parent = cur.parent
        while parent is not None and parent.color is Color.RED:
            grand = parent.parent
            assert grand is not None  # a red node is never the root
            if parent is grand.left:
                uncle = grand.right
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    cur = grand
                    parent = cur.parent
                    continue
                if cur is parent.left:
                    self._rotate_right(grand)
                    parent.color = Color.BLACK
                else:
                    self._rotate_left(parent)
                    self._rotate_right(grand)
                    cur.color = Color.BLACK
                grand.color = Color.RED
                break
            uncle = grand.left
            if uncle is not None and uncle.color is Color.RED:
                parent.color = uncle.color = Color.BLACK
                grand.color = Color.RED
                cur = grand
                parent = cur.parent
                continue
            if cur is parent.right:
                self._rotate_left(grand)
                parent.color = Color.BLACK
            else:
                self._rotate_right(parent)
                self._rotate_left(grand)
                cur.color = Color.BLACK
            grand.color = Color.RED
            break
        assert self._root is not None
        self._root.color = Color.BLACK

    def _replace_child(self, parent: _Node | None, old: _Node, new: _Node) -> None:
        new.parent = parent
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node: _Node) -> None:
        right = node.right
        assert right is not None
        node.right = right.left
        if right.left is not None:
            right.left.parent = node
        parent = node.parent
        right.left = node
        node.parent = right
        self._replace_child(parent, node, right)

    def _rotate_right(self, node: _Node) -> None:
        left = node.left
        assert left is not None
        node.left = left.right
        if left.right is not None:
            left.right.parent = node
        parent = node.parent
        left.right = node
        node.parent = left
        self._replace_child(parent, node, left)

    def _find_node(self, key: K) -> _Node | None:
        cur = self._root
        while cur is not None:
            current_key = self._key(cur.value)
            if self._compare(key, current_key):
                cur = cur.left
            elif self._compare(current_key, key):
                cur = cur.right
            else:
                return cur
        return None

    def find(self, key: K) -> V | None:
        """Return the stored value with ``key``, or None if absent."""
        node = self._find_node(key)
        return None if node is None else node.value

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return _subtree_height(self._root)

    def copy(self) -> RedBlackTree[K, V]:
        """Return an independent tree with the same shape and colours."""
        clone: RedBlackTree[K, V] = RedBlackTree(self._key_of, self._compare)
        clone._root = _copy_subtree(self._root)
        clone._size = self._size
        return clone

    def __iter__(self) -> Iterator[V]:
        node = self._root
        while node is not None and node.left is not None:
            node = node.left
        while node is not None:
            yield node.value
            if node.right is not None:
                node = node.right
                while node.left is not None:
                    node = node.left
            else:
                parent = node.parent
                while parent is not None and node is parent.right:
                    node, parent = parent, parent.parent
                node = parent

    def __len__(self) -> int:
        return self._size


class TreeSet(Generic[K]):
    """Ordered collection of unique keys."""

    def __init__(self, compare: Callable[[K, K], bool] = less) -> None:
        self._tree: RedBlackTree[K, K] = RedBlackTree(None, compare)

    def insert(self, key: K) -> bool:
        """Add ``key``; return False if it was already present."""
        return self._tree.insert(key)[1]

    def find(self, key: K) -> K | None:
        """Return the stored key equal to ``key``, or None."""
        return self._tree.find(key)

    def __contains__(self, key: object) -> bool:
        return self._tree._find_node(key) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return iter(self._tree)

    def __len__(self) -> int:
        return len(self._tree)


class TreeMap(Generic[K, V]):
    """Ordered key/value mapping; iteration yields keys in order."""

    def __init__(self, compare: Callable[[K, K], bool] = less) -> None:
        self._tree: RedBlackTree[K, list[Any]] = RedBlackTree(itemgetter(0), compare)

    def insert(self, key: K, value: V) -> bool:
        """Add a pair; return False and keep the old value if ``key`` exists."""
        return self._tree.insert([key, value])[1]

    def find(self, key: K) -> V | None:
        """Return the value stored for ``key``, or None if absent."""
        entry = self._tree.find(key)
        return None if entry is None else entry[1]

    def __getitem__(self, key: K) -> V:
        entry = self._tree.find(key)
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __setitem__(self, key: K, value: V) -> None:
        entry, inserted = self._tree.insert([key, value])
        if not inserted:
            entry[1] = value

    def __contains__(self, key: object) -> bool:
        return self._tree._find_node(key) is not None  # type: ignore[arg-type]

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs in key order."""
        for key, value in self._tree:
            yield key, value

    def __iter__(self) -> Iterator[K]:
        for key, _ in self._tree:
            yield key

    def __len__(self) -> int:
        return len(self._tree)