"""Classic collection types: a chained hash set, a singly linked list and a byte-keyed trie."""

__version__ = "1.0.0"
__all__ = ["hashset", "slist", "trie"]