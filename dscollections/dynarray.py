"""A growable array with explicit capacity and per-element copy/release hooks."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


def _identity(value: Any) -> Any:
    return value


class DynArray(Generic[T]):
    """Contiguous array that copies values in and releases them on removal.

    ``copy`` builds the stored element from a given value and may raise to
    signal failure; ``release`` is called for every element that leaves the
    array (deleted, overwritten or cleared).
    """

    def __init__(
        self,
        capacity: int = 1,
        copy: Optional[Callable[[T], T]] = None,
        release: Optional[Callable[[T], None]] = None,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[T] = []
        self._copy: Callable[[T], T] = copy if copy is not None else _identity
        self._release = release

    @property
    def capacity(self) -> int:
        """Number of elements the array can hold without growing."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynArray({self._items!r}, capacity={self._capacity})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index)
        if self._release is not None:
            self._release(self._items[index])
        try:
            self._items[index] = self._copy(value)
        except Exception:
            self._items[index] = None  # type: ignore[assignment]
            raise

    def _grow(self, new_size: int) -> None:
        if new_size > self._capacity:
            new_capacity = max(self._capacity, 1)
            while new_capacity < new_size:
                new_capacity *= 2
            self._capacity = new_capacity

    def insert(self, index: int, items: Iterable[T]) -> None:
        """Insert copies of ``items`` before position ``index``.

        If a copy fails, the copies already made are released, the array is
        shrunk to fit and the error propagates; the contents are unchanged.
        """
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        source = list(items)
        self._grow(len(self._items) + len(source))
        made: list[T] = []
        try:
            for value in source:
                made.append(self._copy(value))
        except Exception:
            if self._release is not None:
                for element in reversed(made):
                    self._release(element)
            self.shrink_to_fit()
            raise
        self._items[index:index] = made

    def push_back(self, item: T) -> None:
        """Append a copy of ``item``."""
        self.insert(len(self._items), (item,))

    def delete(self, begin: int, end: int) -> None:
        """Release and remove the elements in ``[begin, end)``."""
        if not 0 <= begin <= end <= len(self._items):
            raise IndexError(f"range [{begin}, {end}) out of range")
        if self._release is not None:
            for element in self._items[begin:end]:
                self._release(element)
        del self._items[begin:end]

    def pop_back(self) -> None:
        """Remove the last element; does nothing on an empty array."""
        if self._items:
            self.delete(len(self._items) - 1, len(self._items))

    def reserve(self, new_capacity: int) -> None:
        """Raise the capacity to at least ``new_capacity``."""
        if new_capacity > self._capacity:
            self._capacity = new_capacity

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the current length."""
        self._capacity = len(self._items)

    def clear(self) -> None:
        """Release and remove every element."""
        self.delete(0, len(self._items))

    def resize(self, new_size: int, default: T = None) -> None:  # type: ignore[assignment]
        """Truncate, or extend with copies of ``default``, to ``new_size``.

        If a copy fails while extending, the elements added so far are kept
        and the error propagates.
        """
        if new_size < 0:
            raise ValueError("size must not be negative")
        current = len(self._items)
        if new_size < current:
            self.delete(new_size, current)
        elif new_size > current:
            self.reserve(new_size)
            for _ in range(new_size - current):
                self._items.append(self._copy(default))

    def front(self) -> Optional[T]:
        """First element, or None when empty."""
        return self._items[0] if self._items else None

    def back(self) -> Optional[T]:
        """Last element, or None when empty."""
        return self._items[-1] if self._items else None