"""A singly-linked list whose entries link in one direction only."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

CompareFunc = Callable[[Any, Any], int]
EqualFunc = Callable[[Any, Any], Any]


def _natural_compare(value1: Any, value2: Any) -> int:
    return (value1 > value2) - (value1 < value2)


class SListEntry:
    """One entry of an :class:`SList`: a value and a link to the next entry."""

    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: Optional["SListEntry"] = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:
        return f"SListEntry({self.data!r})"


class SList:
    """A singly-linked list of values."""

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[SListEntry] = None
        if values is not None:
            tail: Optional[SListEntry] = None
            for value in values:
                entry = SListEntry(value)
                if tail is None:
                    self._head = entry
                else:
                    tail.next = entry
                tail = entry

    @property
    def head(self) -> Optional[SListEntry]:
        """The first entry, or None if the list is empty."""
        return self._head

    def _entries(self) -> Iterator[SListEntry]:
        entry = self._head
        while entry is not None:
            yield entry
            entry = entry.next

    def prepend(self, data: Any) -> SListEntry:
        """Add ``data`` at the start of the list and return its entry."""
        entry = SListEntry(data, self._head)
        self._head = entry
        return entry

    def append(self, data: Any) -> SListEntry:
        """Add ``data`` at the end of the list and return its entry."""
        entry = SListEntry(data)
        if self._head is None:
            self._head = entry
        else:
            last = self._head
            while last.next is not None:
                last = last.next
            last.next = entry
        return entry

    def entry_at(self, n: int) -> Optional[SListEntry]:
        """Return the entry at index ``n``, or None if out of range."""
        if n < 0:
            return None
        for index, entry in enumerate(self._entries()):
            if index == n:
                return entry
        return None

    def __getitem__(self, n: int) -> Any:
        entry = self.entry_at(n)
        if entry is None:
            raise IndexError("list index out of range")
        return entry.data

    def __len__(self) -> int:
        return sum(1 for _ in self._entries())

    def __iter__(self) -> Iterator[Any]:
        for entry in self._entries():
            yield entry.data

    def __repr__(self) -> str:
        return f"SList({self.to_list()!r})"

    def to_list(self) -> list[Any]:
        """Return the values of the list in order."""
        return list(self)

    def remove_entry(self, entry: Optional[SListEntry]) -> bool:
        """Unlink ``entry``; return False if it is not in the list."""
        if self._head is None or entry is None:
            return False
        if self._head is entry:
            self._head = entry.next
            return True
        for previous in self._entries():
            if previous.next is entry:
                previous.next = entry.next
                return True
        return False

    def remove_data(self, equal_func: EqualFunc, data: Any) -> int:
        """Remove every entry whose value matches ``data``; return the count."""
        removed = 0
        previous: Optional[SListEntry] = None
        entry = self._head
        while entry is not None:
            following = entry.next
            if equal_func(entry.data, data):
                if previous is None:
                    self._head = following
                else:
                    previous.next = following
                removed += 1
            else:
                previous = entry
            entry = following
        return removed

    def sort(self, compare_func: Optional[CompareFunc] = None) -> None:
        """Sort the list in place with ``compare_func`` (negative, zero, positive).

        Quicksort taking the first entry as pivot; entries are relinked,
        not copied.
        """
        compare = compare_func if compare_func is not None else _natural_compare
        ordered: list[SListEntry] = []
        # Work items are either a list of entries to sort or a single pivot.
        stack: list[Any] = [list(self._entries())]
        while stack:
            item = stack.pop()
            if isinstance(item, SListEntry):
                ordered.append(item)
                continue
            if len(item) < 2:
                ordered.extend(item)
                continue
            pivot, rest = item[0], item[1:]
            less: list[SListEntry] = []
            more: list[SListEntry] = []
            for entry in rest:
                target = less if compare(entry.data, pivot.data) < 0 else more
                target.insert(0, entry)
            stack.append(more)
            stack.append(pivot)
            stack.append(less)
        self._head = None
        for entry in reversed(ordered):
            entry.next = self._head
            self._head = entry

    def find_data(self, equal_func: EqualFunc, data: Any) -> Optional[SListEntry]:
        """Return the first entry whose value matches ``data``, or None."""
        for entry in self._entries():
            if equal_func(entry.data, data):
                return entry
        return None

    def iterator(self) -> "SListIterator":
        """Return an iterator that can remove the value it last returned."""
        return SListIterator(self)

    def clear(self) -> None:
        """Remove every entry."""
        self._head = None


class SListIterator:
    """Iterates over an :class:`SList`, allowing removal of the current value."""

    def __init__(self, slist: SList) -> None:
        self._list = slist
        # The entry whose ``next`` link leads to the current position;
        # None stands for the list's head link.
        self._previous: Optional[SListEntry] = None
        self._current: Optional[SListEntry] = None

    def _link(self) -> Optional[SListEntry]:
        if self._previous is None:
            return self._list._head
        return self._previous.next

    def _set_link(self, entry: Optional[SListEntry]) -> None:
        if self._previous is None:
            self._list._head = entry
        else:
            self._previous.next = entry

    def _current_is_live(self) -> bool:
        return self._current is not None and self._current is self._link()

    def __iter__(self) -> "SListIterator":
        return self

    def __next__(self) -> Any:
        if not self._current_is_live():
            self._current = self._link()
        else:
            assert self._current is not None
            self._previous = self._current
            self._current = self._current.next
        if self._current is None:
            raise StopIteration
        return self._current.data

    def has_more(self) -> bool:
        """Return True if another value remains to be read."""
        if not self._current_is_live():
            return self._link() is not None
        assert self._current is not None
        return self._current.next is not None

    def remove(self) -> None:
        """Remove the value last returned; does nothing if there is none."""
        if self._current_is_live():
            assert self._current is not None
            self._set_link(self._current.next)
            self._current = None