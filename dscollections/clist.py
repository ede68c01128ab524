"""Intrusive circular doubly linked list built around a sentinel item."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class CListItem(Generic[T]):
    """A hook that links ``value`` into a :class:`CList`.

    A fresh item points to itself in both directions. An item that has been
    removed from a list has ``next`` and ``prev`` set to None.
    """

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T = None) -> None:  # type: ignore[assignment]
        self.value = value
        self.prev: Optional[CListItem[T]] = self
        self.next: Optional[CListItem[T]] = self

    def __repr__(self) -> str:
        return f"CListItem({self.value!r})"


class CList(Generic[T]):
    """Circular list of :class:`CListItem` hooks closed by a sentinel."""

    def __init__(self) -> None:
        self._sentinel: CListItem[T] = CListItem(None)
        self._size = 0

    @property
    def sentinel(self) -> CListItem[T]:
        """The sentinel item; its ``next`` is the first item, ``prev`` the last."""
        return self._sentinel

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[CListItem[T]]:
        """Yield items front to back; the current item may be removed safely."""
        item = self._sentinel.next
        while item is not self._sentinel:
            following = item.next
            yield item
            item = following

    def __reversed__(self) -> Iterator[CListItem[T]]:
        """Yield items back to front; the current item may be removed safely."""
        item = self._sentinel.prev
        while item is not self._sentinel:
            preceding = item.prev
            yield item
            item = preceding

    def __repr__(self) -> str:
        return f"CList([{', '.join(repr(item.value) for item in self)}])"

    @staticmethod
    def _check_position(pos: CListItem[T]) -> None:
        if pos.next is None or pos.prev is None:
            raise ValueError("position is not linked into a list")

    def _check_free(self, item: CListItem[T]) -> None:
        if item is self._sentinel:
            raise ValueError("cannot insert the sentinel")
        if item.next is not None and item.next is not item:
            raise ValueError("item is already linked into a list")

    def insert_before(self, pos: CListItem[T], item: CListItem[T]) -> None:
        """Link ``item`` immediately before ``pos``."""
        self._check_position(pos)
        self._check_free(item)
        item.next = pos
        item.prev = pos.prev
        pos.prev.next = item
        pos.prev = item
        self._size += 1

    def insert_after(self, pos: CListItem[T], item: CListItem[T]) -> None:
        """Link ``item`` immediately after ``pos``."""
        self._check_position(pos)
        self._check_free(item)
        item.prev = pos
        item.next = pos.next
        pos.next.prev = item
        pos.next = item
        self._size += 1

    def push_front(self, item: CListItem[T]) -> None:
        """Link ``item`` at the front."""
        self.insert_after(self._sentinel, item)

    def push_back(self, item: CListItem[T]) -> None:
        """Link ``item`` at the back."""
        self.insert_before(self._sentinel, item)

    def remove(self, item: CListItem[T]) -> None:
        """Unlink ``item``; its ``next`` and ``prev`` become None."""
        if item is self._sentinel:
            raise ValueError("cannot remove the sentinel")
        if item.next is None or item.prev is None or item.next is item:
            raise ValueError("item is not linked into a list")
        item.prev.next = item.next
        item.next.prev = item.prev
        item.next = None
        item.prev = None
        self._size -= 1

    def pop_front(self) -> Optional[CListItem[T]]:
        """Unlink and return the first item, or None when empty."""
        if not self._size:
            return None
        item = self._sentinel.next
        self.remove(item)
        return item

    def pop_back(self) -> Optional[CListItem[T]]:
        """Unlink and return the last item, or None when empty."""
        if not self._size:
            return None
        item = self._sentinel.prev
        self.remove(item)
        return item

    def find(self, predicate: Callable[[Any], bool]) -> Optional[CListItem[T]]:
        """First item, searching forward, whose value satisfies ``predicate``."""
        return next((item for item in self if predicate(item.value)), None)

    def rfind(self, predicate: Callable[[Any], bool]) -> Optional[CListItem[T]]:
        """First item, searching backward, whose value satisfies ``predicate``."""
        return next((item for item in reversed(self) if predicate(item.value)), None)