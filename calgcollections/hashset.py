"""An unordered set of values stored in a chained hash table."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

HashFunc = Callable[[Any], int]
EqualFunc = Callable[[Any, Any], Any]
FreeFunc = Callable[[Any], None]

# Good hash table primes: each roughly double the previous one and as far
# as possible from the nearest powers of two.
_PRIMES = (
    193, 389, 769, 1543, 3079, 6151, 12289, 24593, 49157, 98317,
    196613, 393241, 786433, 1572869, 3145739, 6291469,
    12582917, 25165843, 50331653, 100663319, 201326611,
    402653189, 805306457, 1610612741,
)


class HashSet:
    """A set of values, each held at most once.

    Values are located with ``hash_func`` and compared with ``equal_func``;
    ``free_func``, when given, is called on every value that leaves the set
    through :meth:`remove` or :meth:`clear`.
    """

    def __init__(
        self,
        hash_func: Optional[HashFunc] = None,
        equal_func: Optional[EqualFunc] = None,
        free_func: Optional[FreeFunc] = None,
    ) -> None:
        self.hash_func: HashFunc = hash_func if hash_func is not None else hash
        self.equal_func: EqualFunc = (
            equal_func if equal_func is not None else operator.eq
        )
        self.free_func = free_func
        self._entries = 0
        self._prime_index = 0
        self._table: list[list[Any]] = self._new_table()

    def _new_table(self) -> list[list[Any]]:
        if self._prime_index < len(_PRIMES):
            size = _PRIMES[self._prime_index]
        else:
            size = self._entries * 10
        return [[] for _ in range(size)]

    def _chain(self, value: Any) -> list[Any]:
        return self._table[self.hash_func(value) % len(self._table)]

    def _enlarge(self) -> None:
        old_table = self._table
        self._prime_index += 1
        self._table = self._new_table()
        for chain in old_table:
            for value in chain:
                self._chain(value).insert(0, value)

    def add(self, value: Any) -> bool:
        """Add ``value``; return False if an equal value is already present."""
        if (self._entries * 3) // len(self._table) > 0:
            self._enlarge()
        chain = self._chain(value)
        if any(self.equal_func(value, existing) for existing in chain):
            return False
        chain.insert(0, value)
        self._entries += 1
        return True

    def remove(self, value: Any) -> bool:
        """Remove the value equal to ``value``; return False if none was found."""
        chain = self._chain(value)
        for position, existing in enumerate(chain):
            if self.equal_func(value, existing):
                del chain[position]
                self._entries -= 1
                if self.free_func is not None:
                    self.free_func(existing)
                return True
        return False

    def __contains__(self, value: Any) -> bool:
        return any(self.equal_func(value, existing) for existing in self._chain(value))

    def __len__(self) -> int:
        return self._entries

    def __iter__(self) -> Iterator[Any]:
        for chain in self._table:
            yield from chain

    def to_list(self) -> list[Any]:
        """Return all values in iteration order."""
        return list(self)

    def union(self, other: "HashSet") -> "HashSet":
        """Return a new set holding the values of this set and ``other``."""
        result = HashSet(self.hash_func, self.equal_func)
        for value in self:
            result.add(value)
        for value in other:
            if value not in result:
                result.add(value)
        return result

    def intersection(self, other: "HashSet") -> "HashSet":
        """Return a new set holding the values present in both sets.

        The new set hashes with this set's hash function and compares with
        ``other``'s equality function.
        """
        result = HashSet(self.hash_func, other.equal_func)
        for value in self:
            if value in other:
                result.add(value)
        return result

    def clear(self) -> None:
        """Remove every value, passing each to ``free_func`` if one is set."""
        old_table = self._table
        self._entries = 0
        self._prime_index = 0
        self._table = self._new_table()
        if self.free_func is not None:
            for chain in old_table:
                for value in chain:
                    self.free_func(value)

    @classmethod
    def from_iterable(
        cls,
        values: Iterable[Any],
        hash_func: Optional[HashFunc] = None,
        equal_func: Optional[EqualFunc] = None,
    ) -> "HashSet":
        """Build a set holding ``values``."""
        result = cls(hash_func, equal_func)
        for value in values:
            result.add(value)
        return result