"""Singly linked list with a sentinel head node."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional


class SListNode:
    """A node of an :class:`SList`; ``next`` is None at the end."""

    __slots__ = ("data", "next", "_owner")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: Optional[SListNode] = None
        self._owner: Optional[SList] = None

    def __repr__(self) -> str:
        return f"SListNode({self.data!r})"


class SList:
    """Singly linked list; insertion and removal happen after a given node."""

    def __init__(self) -> None:
        self._sentinel = SListNode(None)
        self._sentinel._owner = self
        self._size = 0

    @property
    def sentinel(self) -> SListNode:
        """The head sentinel; its ``next`` is the first real node."""
        return self._sentinel

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not None:
            following = node.next
            yield node.data
            node = following

    def __repr__(self) -> str:
        return f"SList({list(self)!r})"

    def _check_member(self, node: SListNode) -> None:
        if node._owner is not self:
            raise ValueError("node does not belong to this list")

    def insert_after(self, node: SListNode, data: Any) -> SListNode:
        """Insert ``data`` right after ``node`` and return the new node."""
        self._check_member(node)
        new_node = SListNode(data)
        new_node._owner = self
        new_node.next = node.next
        node.next = new_node
        self._size += 1
        return new_node

    def push_front(self, data: Any) -> SListNode:
        """Insert ``data`` at the front and return its node."""
        return self.insert_after(self._sentinel, data)

    def remove_after(self, node: SListNode) -> Any:
        """Unlink the node following ``node`` and return its data."""
        self._check_member(node)
        victim = node.next
        if victim is None:
            raise IndexError("no node follows the given node")
        node.next = victim.next
        victim.next = None
        victim._owner = None
        self._size -= 1
        return victim.data

    def pop_front(self) -> Any:
        """Remove the first node and return its data; IndexError if empty."""
        if not self._size:
            raise IndexError("pop from empty list")
        return self.remove_after(self._sentinel)

    def clear(self, release: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node front to back, passing each datum to ``release``."""
        while self._size:
            data = self.pop_front()
            if release is not None:
                release(data)