"""Doubly linked list that owns its nodes and stores arbitrary data."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional


class DListNode:
    """A node of a :class:`DList`; ``prev``/``next`` are None at the ends."""

    __slots__ = ("data", "prev", "next", "_owner")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: Optional[DListNode] = None
        self.next: Optional[DListNode] = None
        self._owner: Optional[DList] = None

    def __repr__(self) -> str:
        return f"DListNode({self.data!r})"


class DList:
    """Doubly linked list with constant-time insertion and removal at any node."""

    def __init__(self) -> None:
        self._head: Optional[DListNode] = None
        self._tail: Optional[DListNode] = None
        self._size = 0

    @property
    def head(self) -> Optional[DListNode]:
        """First node, or None when empty."""
        return self._head

    @property
    def tail(self) -> Optional[DListNode]:
        """Last node, or None when empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            following = node.next
            yield node.data
            node = following

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            preceding = node.prev
            yield node.data
            node = preceding

    def __repr__(self) -> str:
        return f"DList({list(self)!r})"

    def _check_member(self, node: DListNode) -> None:
        if node._owner is not self:
            raise ValueError("node does not belong to this list")

    def insert_between(
        self,
        prev_node: Optional[DListNode],
        next_node: Optional[DListNode],
        data: Any,
    ) -> DListNode:
        """Insert ``data`` between two adjacent nodes and return its node.

        None stands for the front (as ``prev_node``) or the back (as
        ``next_node``) of the list.
        """
        if prev_node is not None:
            self._check_member(prev_node)
        if next_node is not None:
            self._check_member(next_node)
        actual_next = self._head if prev_node is None else prev_node.next
        if actual_next is not next_node:
            raise ValueError("nodes are not adjacent")
        node = DListNode(data)
        node._owner = self
        node.prev = prev_node
        node.next = next_node
        if prev_node is None:
            self._head = node
        else:
            prev_node.next = node
        if next_node is None:
            self._tail = node
        else:
            next_node.prev = node
        self._size += 1
        return node

    def push_front(self, data: Any) -> DListNode:
        """Insert ``data`` at the front and return its node."""
        return self.insert_between(None, self._head, data)

    def push_back(self, data: Any) -> DListNode:
        """Insert ``data`` at the back and return its node."""
        return self.insert_between(self._tail, None, data)

    def remove(self, node: DListNode) -> Any:
        """Unlink ``node`` and return its data."""
        self._check_member(node)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = None
        node.next = None
        node._owner = None
        self._size -= 1
        return node.data

    def remove_front(self) -> Any:
        """Remove the first node and return its data; IndexError if empty."""
        if self._head is None:
            raise IndexError("remove from empty list")
        return self.remove(self._head)

    def remove_back(self) -> Any:
        """Remove the last node and return its data; IndexError if empty."""
        if self._tail is None:
            raise IndexError("remove from empty list")
        return self.remove(self._tail)

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        node = self._head
        while node is not None:
            following = node.next
            node.next, node.prev = node.prev, node.next
            node = following
        self._head, self._tail = self._tail, self._head

    def clear(self, release: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node front to back, passing each datum to ``release``."""
        while self._head is not None:
            data = self.remove_front()
            if release is not None:
                release(data)