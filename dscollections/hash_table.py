"""Open-addressing hash table with pluggable probe function and prime capacities."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterator, Optional

BASE_PRIME = 53
UP_LOAD_RATIO = 0.7
DOWN_LOAD_RATIO = 0.1
FACTOR_UP = 2.0
FACTOR_DOWN = 0.5

_HASH_PRIME_A = 151
_HASH_PRIME_B = 163

HashFunc = Callable[[Any, int, int], int]


def is_prime(x: int) -> bool:
    """Return whether ``x`` is prime; undefined (ValueError) below 2."""
    if x < 2:
        raise ValueError("primality is undefined below 2")
    if x < 4:
        return True
    if x % 2 == 0:
        return False
    i = 3
    while i * i <= x:
        if x % i == 0:
            return False
        i += 2
    return True


def next_prime(x: int) -> int:
    """Return the smallest prime that is at least ``x``."""
    x = max(x, 2)
    while not is_prime(x):
        x += 1
    return x


def _base_hash(key: Any, prime: int, buckets: int) -> int:
    if isinstance(key, str):
        key = key.encode("utf-8")
    if isinstance(key, (bytes, bytearray)):
        h = 0
        for byte in key:
            h = (h * prime + byte) % buckets
        return h
    return (hash(key) * prime) % buckets


def default_hash(key: Any, capacity: int, attempt: int) -> int:
    """Double-hashing probe: the slot for ``key`` on its ``attempt``-th try."""
    first = _base_hash(key, _HASH_PRIME_A, capacity)
    second = _base_hash(key, _HASH_PRIME_B, capacity)
    step = 1 + second % max(capacity - 1, 1)
    return (first + attempt * step) % capacity


class _Deleted:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<deleted>"


_DELETED = _Deleted()


class HashTable:
    """Hash table resolving collisions by probing with ``hash_func``.

    ``hash_func(key, capacity, attempt)`` returns a slot index; ``key_equal``
    decides whether two keys are the same.
    """

    def __init__(
        self,
        hash_func: HashFunc = default_hash,
        key_equal: Callable[[Any, Any], bool] = operator.eq,
    ) -> None:
        self._hash = hash_func
        self._equal = key_equal
        self._slots: list[Any] = [None] * BASE_PRIME
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of slots."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def _probe(self, key: Any) -> Iterator[int]:
        capacity = len(self._slots)
        for attempt in range(capacity):
            yield self._hash(key, capacity, attempt)

    def _find(self, key: Any) -> Optional[int]:
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot is not _DELETED and self._equal(slot[0], key):
                return index
        return None

    def __contains__(self, key: Any) -> bool:
        return self._find(key) is not None

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        if self._size / len(self._slots) >= UP_LOAD_RATIO:
            self._resize(FACTOR_UP)
        first_deleted: Optional[int] = None
        target: Optional[int] = None
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                target = index
                break
            if slot is _DELETED:
                if first_deleted is None:
                    first_deleted = index
            elif self._equal(slot[0], key):
                self._slots[index] = (slot[0], value)
                return
        if first_deleted is not None:
            target = first_deleted
        if target is None:
            raise RuntimeError("no free slot found for key")
        self._slots[target] = (key, value)
        self._size += 1

    def remove(self, key: Any) -> Any:
        """Remove ``key`` and return its value; KeyError if absent."""
        index = self._find(key)
        if index is None:
            raise KeyError(key)
        value = self._slots[index][1]
        self._slots[index] = _DELETED
        self._size -= 1
        if self._size / len(self._slots) < DOWN_LOAD_RATIO:
            self._resize(FACTOR_DOWN)
        return value

    def search(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None if absent."""
        index = self._find(key)
        return None if index is None else self._slots[index][1]

    def items(self) -> Iterator[tuple[Any, Any]]:
        """Yield live ``(key, value)`` pairs in slot order."""
        for slot in self._slots:
            if slot is not None and slot is not _DELETED:
                yield slot

    def _resize(self, factor: float) -> None:
        target = int(len(self._slots) * factor)
        if target < BASE_PRIME:
            target = BASE_PRIME
        new_capacity = next_prime(target)
        if new_capacity == len(self._slots):
            return
        old = list(self.items())
        self._slots = [None] * new_capacity
        self._size = 0
        for key, value in old:
            for index in self._probe(key):
                if self._slots[index] is None:
                    self._slots[index] = (key, value)
                    self._size += 1
                    break
            else:
                raise RuntimeError("rehash could not place key")