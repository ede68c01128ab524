"""Classic data structures: dynamic array, hash table, linked lists and an adjacency-list graph."""

__version__ = "0.1.0"
__all__ = ["dynarray", "hash_table", "clist", "dlist", "slist", "adjl_graph"]