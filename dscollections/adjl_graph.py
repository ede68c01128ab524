"""Unweighted directed graph stored as adjacency lists."""

from __future__ import annotations

import operator
from collections import deque
from typing import Any, Callable, Deque, Iterator, Optional

from dscollections.clist import CList, CListItem

_UNSEEN = 0
_DISCOVERED = 1
_FINISHED = 2


class Vertex:
    """A vertex handle holding user ``data`` and its outgoing arcs.

    ``flag`` is free for traversal bookkeeping; the built-in traversals
    reset it to 0, set it to 1 when a vertex is discovered and to 2 once
    its neighbours have been examined.
    """

    __slots__ = ("data", "flag", "_indegree", "_outdegree", "_arcs", "_hook", "_owner")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.flag = _UNSEEN
        self._indegree = 0
        self._outdegree = 0
        # Newest arc first, as in a prepended singly linked list.
        self._arcs: Deque[Vertex] = deque()
        self._hook: CListItem[Vertex] = CListItem(self)
        self._owner: Optional[AdjlGraph] = None

    @property
    def indegree(self) -> int:
        """Number of arcs ending at this vertex."""
        return self._indegree

    @property
    def outdegree(self) -> int:
        """Number of arcs leaving this vertex."""
        return self._outdegree

    def __repr__(self) -> str:
        return f"Vertex({self.data!r})"


class AdjlGraph:
    """Directed graph whose vertices keep lists of their successors.

    ``key_equal(key, data)`` decides whether a vertex's data matches a
    search key.
    """

    def __init__(self, key_equal: Callable[[Any, Any], bool] = operator.eq) -> None:
        self._key_equal = key_equal
        self._vertices: CList[Vertex] = CList()
        self._edge_count = 0

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Any]:
        """Yield the data of every vertex in insertion order."""
        for item in self._vertices:
            yield item.value.data

    def __repr__(self) -> str:
        return f"AdjlGraph(vertices={len(self)}, edges={self._edge_count})"

    @property
    def edge_count(self) -> int:
        """Number of arcs in the graph."""
        return self._edge_count

    def _vertex_objects(self) -> Iterator[Vertex]:
        for item in self._vertices:
            yield item.value

    def _check_member(self, vertex: Vertex) -> None:
        if vertex._owner is not self:
            raise ValueError("vertex does not belong to this graph")

    def add_vertex(self, data: Any) -> Vertex:
        """Add a vertex holding ``data`` and return its handle."""
        if data is None:
            raise ValueError("vertex data must not be None")
        vertex = Vertex(data)
        vertex._owner = self
        self._vertices.push_back(vertex._hook)
        return vertex

    def remove_vertex(self, vertex: Vertex) -> Any:
        """Remove an unconnected vertex and return its data.

        Raises ValueError while the vertex still has incoming or outgoing arcs.
        """
        self._check_member(vertex)
        if vertex._indegree or vertex._outdegree:
            raise ValueError("vertex is still connected (degrees not zero)")
        self._vertices.remove(vertex._hook)
        vertex._hook = CListItem(vertex)
        vertex._owner = None
        return vertex.data

    def add_arc(self, src: Vertex, dest: Vertex) -> None:
        """Add an arc from ``src`` to ``dest``; parallel arcs are allowed."""
        self._check_member(src)
        self._check_member(dest)
        src._arcs.appendleft(dest)
        src._outdegree += 1
        dest._indegree += 1
        self._edge_count += 1

    def remove_arc(self, src: Vertex, dest: Vertex) -> None:
        """Remove one arc from ``src`` to ``dest``; ValueError if there is none."""
        self._check_member(src)
        self._check_member(dest)
        for index, target in enumerate(src._arcs):
            if target is dest:
                del src._arcs[index]
                src._outdegree -= 1
                dest._indegree -= 1
                self._edge_count -= 1
                return
        raise ValueError("no arc between the given vertices")

    def search(self, key: Any) -> Optional[Vertex]:
        """First vertex, in insertion order, whose data matches ``key``."""
        if key is None:
            raise ValueError("search key must not be None")
        for vertex in self._vertex_objects():
            if self._key_equal(key, vertex.data):
                return vertex
        return None

    def successors(self, vertex: Vertex) -> Iterator[Any]:
        """Yield the data of each arc's destination, newest arc first."""
        self._check_member(vertex)
        for dest in list(vertex._arcs):
            yield dest.data

    def predecessors(self, vertex: Vertex) -> Iterator[Any]:
        """Yield the data of the source of each arc ending at ``vertex``.

        This scans the whole graph; a source with several arcs to ``vertex``
        is yielded once per arc.
        """
        self._check_member(vertex)
        for scanner in self._vertex_objects():
            for dest in list(scanner._arcs):
                if dest is vertex:
                    yield scanner.data

    def _start(self, start_key: Any) -> Optional[Vertex]:
        if not len(self._vertices):
            return None
        for vertex in self._vertex_objects():
            vertex.flag = _UNSEEN
        return self.search(start_key)

    def bfs(self, start_key: Any) -> Iterator[Any]:
        """Yield vertex data breadth-first from the vertex matching ``start_key``."""
        start = self._start(start_key)
        if start is None:
            return
        pending: Deque[Vertex] = deque([start])
        start.flag = _DISCOVERED
        while pending:
            vertex = pending.popleft()
            yield vertex.data
            for dest in vertex._arcs:
                if dest.flag == _UNSEEN:
                    dest.flag = _DISCOVERED
                    pending.append(dest)
            vertex.flag = _FINISHED

    def dfs(self, start_key: Any) -> Iterator[Any]:
        """Yield vertex data depth-first (stack order) from the vertex matching ``start_key``."""
        start = self._start(start_key)
        if start is None:
            return
        pending: list[Vertex] = [start]
        start.flag = _DISCOVERED
        while pending:
            vertex = pending.pop()
            yield vertex.data
            for dest in vertex._arcs:
                if dest.flag == _UNSEEN:
                    dest.flag = _DISCOVERED
                    pending.append(dest)
            vertex.flag = _FINISHED

    def clear(self, release: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every vertex and arc, passing each vertex's data to ``release``."""
        while self._vertices:
            item = self._vertices.pop_front()
            vertex = item.value
            vertex._arcs.clear()
            vertex._indegree = 0
            vertex._outdegree = 0
            vertex._hook = CListItem(vertex)
            vertex._owner = None
            if release is not None:
                release(vertex.data)
        self._edge_count = 0