"""Separate-chaining hash table with map and set front ends."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from operator import itemgetter
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

_MASK = (1 << 64) - 1
_INITIAL_BUCKETS = 10
_MISSING: Any = object()


def default_hash(key: Any) -> int:
    """Hash a key by converting it to an unsigned 64-bit integer."""
    return int(key) & _MASK


def string_hash(text: str) -> int:
    """Polynomial hash over the UTF-8 bytes of ``text`` with base 131."""
    result = 0
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        result = (result * 131 + signed) & _MASK
    return result


def _auto_hash(key: Any) -> int:
    return string_hash(key) if isinstance(key, str) else default_hash(key)


class HashTable(Generic[K, V]):
    """Hash table storing values whose keys are extracted by ``key_of``.

    With no ``key_of`` a value is its own key. New entries go to the head of
    their bucket; the bucket array starts at ten slots and doubles when the
    element count reaches the bucket count.
    """

    def __init__(
        self,
        key_of: Callable[[V], K] | None = None,
        hash_func: Callable[[K], int] | None = None,
    ) -> None:
        self._key_of = key_of
        self._hash = hash_func if hash_func is not None else _auto_hash
        self._buckets: list[list[V]] = [[] for _ in range(_INITIAL_BUCKETS)]
        self._count = 0

    def _key(self, value: V) -> K:
        if self._key_of is None:
            return value  # type: ignore[return-value]
        return self._key_of(value)

    def _bucket_for(self, key: K) -> list[V]:
        return self._buckets[self._hash(key) % len(self._buckets)]

    def _lookup(self, key: K) -> V:
        for value in self._bucket_for(key):
            if self._key(value) == key:
                return value
        return _MISSING

    def find(self, key: K) -> V | None:
        """Return the stored value with ``key``, or None if absent."""
        value = self._lookup(key)
        return None if value is _MISSING else value

    def _rehash(self, size: int) -> None:
        buckets: list[list[V]] = [[] for _ in range(size)]
        for bucket in self._buckets:
            for value in bucket:
                buckets[self._hash(self._key(value)) % size].insert(0, value)
        self._buckets = buckets

    def insert(self, value: V) -> bool:
        """Add ``value``; return False if its key is already present."""
        key = self._key(value)
        if self._lookup(key) is not _MISSING:
            return False
        if self._count == len(self._buckets):
            self._rehash(2 * len(self._buckets))
        self._bucket_for(key).insert(0, value)
        self._count += 1
        return True

    def erase(self, key: K) -> bool:
        """Remove the value with ``key``; return False if absent."""
        bucket = self._bucket_for(key)
        for position, value in enumerate(bucket):
            if self._key(value) == key:
                del bucket[position]
                self._count -= 1
                return True
        return False

    def bucket_count(self) -> int:
        """Return the number of buckets currently allocated."""
        return len(self._buckets)

    def __iter__(self) -> Iterator[V]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return self._count


class HashMap(Generic[K, V]):
    """Unordered key/value mapping; iteration yields ``(key, value)`` pairs."""

    def __init__(self, hash_func: Callable[[K], int] | None = None) -> None:
        self._table: HashTable[K, tuple[K, V]] = HashTable(itemgetter(0), hash_func)

    def insert(self, key: K, value: V) -> bool:
        """Add a pair; return False and keep the old value if ``key`` exists."""
        return self._table.insert((key, value))

    def erase(self, key: K) -> bool:
        return self._table.erase(key)

    def find(self, key: K) -> V | None:
        """Return the value stored for ``key``, or None if absent."""
        entry = self._table.find(key)
        return None if entry is None else entry[1]

    def __contains__(self, key: Hashable) -> bool:
        return self._table._lookup(key) is not _MISSING  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[tuple[K, V]]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)


class HashSet(Generic[K]):
    """Unordered collection of unique keys."""

    def __init__(self, hash_func: Callable[[K], int] | None = None) -> None:
        self._table: HashTable[K, K] = HashTable(None, hash_func)

    def insert(self, key: K) -> bool:
        return self._table.insert(key)

    def erase(self, key: K) -> bool:
        return self._table.erase(key)

    def __contains__(self, key: Hashable) -> bool:
        return self._table._lookup(key) is not _MISSING  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)