# calgcollections

Three classic collection types with plain Python interfaces.

- `HashSet` (`calgcollections.hashset`): a set that locates and compares
  values with the hash and equality functions you give it. Its table grows
  as it fills up.
- `SList` (`calgcollections.slist`): a singly linked list. Its
  `SListIterator` can remove the entry it is on while it walks the list.
- `Trie` (`calgcollections.trie`): maps text keys or raw byte keys to
  values.

The package is a library only; it has no command-line program.

## Installation

```
pip install calgcollections
```

To run the tests as well:

```
pip install "calgcollections[test]"
pytest
```

## HashSet

```python
from calgcollections.hashset import HashSet

words = HashSet(hash, lambda a, b: a == b, None)
words.add("apple")        # True
words.add("apple")        # False, already present
"apple" in words          # True
len(words)                # 1

other = HashSet.from_iterable(["pear", "apple"])
both = words.union(other)          # apple, pear
common = words.intersection(other) # apple
words.remove("apple")     # True
words.remove("apple")     # False, not present
```

All three constructor arguments are optional. Without a hash function the
built-in `hash` is used; without an equality function, `==`. The third
argument, `free_func`, is called on each value that leaves the set through
`remove` or `clear`.

Iteration order follows the internal hash table, not insertion order.
`to_list()` returns the values in that order. `intersection` builds a set
that hashes with this set's hash function and compares with the other
set's equality function.

## SList

```python
from calgcollections.slist import SList

items = SList([3, 1, 2])
items.prepend(0)
items.append(5)
items.sort(lambda a, b: (a > b) - (a < b))
items.to_list()           # [0, 1, 2, 3, 5]
items[2]                  # 2

it = items.iterator()
for value in it:
    if value % 2:
        it.remove()       # removes the entry just returned
items.to_list()           # [0, 2]
```

- `prepend` and `append` return the new `SListEntry`, which has `data` and
  `next` attributes. `head` is the first entry, or `None`.
- `entry_at(n)` returns the entry at index `n`, or `None` when out of
  range; `items[n]` returns its value and raises `IndexError` instead.
- `find_data(equal_func, data)` returns the first matching entry or `None`;
  `remove_data(equal_func, data)` removes every match and returns how many
  were removed. You decide what "equal" means for each call.
- `remove_entry(entry)` unlinks an entry and returns `False` if it is not
  in the list.
- `sort()` without a comparison function uses the values' natural order.
  The comparison function returns a negative number, zero or a positive
  number.
- `SListIterator` also offers `has_more()`; `remove()` does nothing if
  there is no current value or it was already removed.

## Trie

```python
from calgcollections.trie import Trie

trie = Trie()
trie.insert("hello", "world")
trie.lookup("hello")      # "world"
trie.insert_binary(b"abc\x00\xff", 42)
trie.lookup_binary(b"abc\x00\xff")  # 42
trie.remove("hello")      # True
len(trie)                 # 1
```

Text keys (`insert`, `lookup`, `remove`) may be `str` or bytes; strings are
encoded as UTF-8 and the key ends at its first NUL character. Binary keys
(`insert_binary`, `lookup_binary`, `remove_binary`) are used in full, NUL
bytes included. A text key and a binary key with the same bytes name the
same entry.

Inserting a key that is already present replaces its value. Inserting
`None` as a value is refused and returns `False`. A lookup of a key that
is not in the trie returns `None`. `clear()` removes every entry.