"""A trie: fast mapping of byte-string keys to values."""

from __future__ import annotations

from typing import Any, Optional, Union

Key = Union[str, bytes, bytearray, memoryview]


class _TrieNode:
    __slots__ = ("data", "use_count", "children")

    def __init__(self) -> None:
        self.data: Any = None
        self.use_count = 0
        self.children: dict[int, _TrieNode] = {}


def _text_key(key: Key) -> bytes:
    """Return the bytes of a text key, ending at its first NUL character."""
    raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


def _binary_key(key: Key) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


class Trie:
    """Maps keys to values by walking one node per key byte.

    Text keys (``insert``, ``lookup``, ``remove``) are strings or bytes that
    end at their first NUL character; strings are encoded as UTF-8. Binary
    keys (the ``*_binary`` methods) are used in full, NUL bytes included.
    A text key and a binary key with the same bytes name the same entry.
    ``None`` stands for "no value" and cannot be stored.
    """

    def __init__(self) -> None:
        self._root: Optional[_TrieNode] = None

    def _find_end(self, key: bytes) -> Optional[_TrieNode]:
        node = self._root
        for byte in key:
            if node is None:
                return None
            node = node.children.get(byte)
        return node

    def _insert(self, key: bytes, value: Any) -> bool:
        if value is None:
            return False

        node = self._find_end(key)
        if node is not None and node.data is not None:
            node.data = value
            return True

        if self._root is None:
            self._root = _TrieNode()
        node = self._root
        node.use_count += 1
        for byte in key:
            child = node.children.get(byte)
            if child is None:
                child = _TrieNode()
                node.children[byte] = child
            child.use_count += 1
            node = child
        node.data = value
        return True

    def _lookup(self, key: bytes) -> Any:
        node = self._find_end(key)
        return None if node is None else node.data

    def _remove(self, key: bytes) -> bool:
        node = self._find_end(key)
        if node is None or node.data is None:
            return False
        node.data = None

        parent: Optional[_TrieNode] = None
        node = self._root
        assert node is not None
        path = iter(key)
        link: Optional[int] = None
        while True:
            node.use_count -= 1
            if node.use_count <= 0:
                # Every node below this one has a use count no larger, so
                # unlinking here drops the whole remaining path.
                if parent is None:
                    self._root = None
                else:
                    assert link is not None
                    del parent.children[link]
                break
            link = next(path, None)
            if link is None:
                break
            parent, node = node, node.children[link]
        return True

    def insert(self, key: Key, value: Any) -> bool:
        """Map the text ``key`` to ``value``, replacing any existing value.

        Returns False if ``value`` is None, which cannot be stored.
        """
        return self._insert(_text_key(key), value)

    def insert_binary(self, key: Key, value: Any) -> bool:
        """Map the binary ``key`` to ``value``, replacing any existing value.

        Returns False if ``value`` is None, which cannot be stored.
        """
        return self._insert(_binary_key(key), value)

    def lookup(self, key: Key) -> Any:
        """Return the value for the text ``key``, or None if absent."""
        return self._lookup(_text_key(key))

    def lookup_binary(self, key: Key) -> Any:
        """Return the value for the binary ``key``, or None if absent."""
        return self._lookup(_binary_key(key))

    def remove(self, key: Key) -> bool:
        """Remove the text ``key``; return False if it was not present."""
        return self._remove(_text_key(key))

    def remove_binary(self, key: Key) -> bool:
        """Remove the binary ``key``; return False if it was not present."""
        return self._remove(_binary_key(key))

    def __len__(self) -> int:
        return 0 if self._root is None else self._root.use_count

    def clear(self) -> None:
        """Remove every entry."""
        self._root = None