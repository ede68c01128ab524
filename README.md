# dscollections

A small library of classic data structures written in plain Python.

## What is in it

- `dscollections.dynarray.DynArray` is a growable array with an explicit
  `capacity` property. The capacity doubles when an insertion needs more room.
  It also has `reserve` and `shrink_to_fit`. The optional `copy` and `release`
  hooks run when elements are stored and when they are dropped. Methods:
  `insert`, `push_back`, `delete`, `pop_back`, `clear`, `resize`, `front`,
  `back`, and indexing with `[]`, which raises `IndexError` when the index is
  out of range.
- `dscollections.hash_table.HashTable` is an open-addressing hash table.
  - Its probe function is pluggable. The default is `default_hash`, which uses
    double hashing.
  - It starts with 53 slots. It grows when the load reaches 0.7 and shrinks
    when the load drops below 0.1, always to a prime `capacity` (see
    `is_prime` and `next_prime`).
  - Methods:
    - `insert` replaces the value of an existing key.
    - `search` returns `None` for an absent key.
    - `remove` raises `KeyError` for an absent key.
    - `items` yields the stored pairs.
    - `in` tests whether a key is present.
- `dscollections.clist.CList` and `CListItem` form a circular doubly linked
  list of intrusive items closed by a `sentinel`.
  - It can be iterated in both directions.
  - Insertion methods: `insert_before`, `insert_after`, `push_front`,
    `push_back`.
  - Removal methods: `remove`, `pop_front`, `pop_back`.
  - Search methods: `find` and `rfind`, which take a predicate.
- `dscollections.dlist.DList` and `DListNode` form a doubly linked list with
  `head` and `tail` properties.
  - Insertion methods: `insert_between`, `push_front`, `push_back`. They
    return the new node.
  - Removal methods: `remove`, `remove_front`, `remove_back`.
  - `reverse` reverses the list in place.
  - `clear` takes an optional `release` callback.
- `dscollections.slist.SList` and `SListNode` form a singly linked list with a
  sentinel head. Methods: `insert_after`, `push_front`, `remove_after`,
  `pop_front` and `clear`.
- `dscollections.adjl_graph.AdjlGraph` and `Vertex` form a directed,
  unweighted graph stored as adjacency lists.
  - Vertex and arc methods: `add_vertex`, `remove_vertex` (only for vertices
    with no arcs), `add_arc`, `remove_arc`, `search`.
  - Neighbour iteration: `successors` and `predecessors`.
  - Traversal: `bfs` and `dfs` are generators that yield vertex data.
  - Counts: `len()` gives the vertex count and the `edge_count` property gives
    the arc count.
  - Each `Vertex` exposes `data`, `indegree`, `outdegree` and a free `flag`.

Failures are reported with exceptions such as `IndexError`, `KeyError` and
`ValueError`, not with status codes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from dscollections.dynarray import DynArray
from dscollections.hash_table import HashTable
from dscollections.adjl_graph import AdjlGraph

arr = DynArray(4)
for n in range(10):
    arr.push_back(n)
print(len(arr), arr.capacity)   # 10 16

table = HashTable()
table.insert("apple", 1)
print(table.search("apple"), "apple" in table)   # 1 True

graph = AdjlGraph()
for name in "abc":
    graph.add_vertex(name)
a, b, c = (graph.search(k) for k in "abc")
graph.add_arc(a, b)
graph.add_arc(a, c)
print(list(graph.bfs("a")))   # ['a', 'c', 'b']  (newest arc is visited first)
```

## What it does not do

The package holds in-memory containers only. It offers no stacks, queues,
heaps or trees. It has no command-line tool. It does not persist anything to
storage.