# rdestl

Classic data structures and algorithms in plain Python, with no dependencies
outside the standard library. Each container keeps the growth, probing,
balancing and ordering rules of its design, which makes them useful for
studying those rules or for code that depends on them.

## Installation

```
pip install .
```

## Modules

| Module | Contents |
| --- | --- |
| `rdestl.hashing` | `int_hash` (Robert Jenkins 32-bit integer hash), `string_hash` (31-bit hash of a `str` or `bytes`) |
| `rdestl.sorting` | `insertion_sort`, `quick_sort`, `heap_sort`, `is_sorted`, `RadixSorter` |
| `rdestl.strings` | `strcompare` |
| `rdestl.textstream` | `StringStream`, a whitespace-separated word reader |
| `rdestl.hash_map` | `HashMap`, open addressing with triangular probing, tombstones and a 7/8 load factor |
| `rdestl.rb_tree` | `RBTree`, `Node`, `Color` |
| `rdestl.tree_map` | `TreeMap` and `TreeSet`, both built on `RBTree` |
| `rdestl.vector` | `Vector`, a dynamic array that tracks its capacity |
| `rdestl.stack` | `Stack`, a LIFO stack on top of `Vector` |
| `rdestl.sorted_vector` | `SortedVector`, a map kept as a sorted list of `(key, value)` pairs |
| `rdestl.slist` | `SList`, a singly linked list |

## Notes on behaviour

- **Sorting.** `insertion_sort`, `quick_sort` and `heap_sort` sort a mutable
  sequence in place; each takes an optional "less than" predicate
  (`operator.lt` by default). `is_sorted` checks any iterable.
  `RadixSorter().sort(data, key=None, signed=False)` is a stable sort by the
  low 32 bits of an integer key; with `signed=True` the key is read as two's
  complement, so negative keys come first.
- **`strcompare(first, second, length=None)`** returns -1, 0 or 1. Without
  `length` each sequence stops at its first NUL (`"\0"` or `0`); with it,
  exactly `length` elements are compared.
- **`StringStream`** splits on space, tab, carriage return and newline.
  `read_int`, `read_float` and `read_bool` take the longest numeric prefix of
  the next word (zero if there is none); `read_str` returns the word itself.
  Reading past the end raises `EOFError`. `good()`, `eof()` and `bool(stream)`
  tell whether text remains; `reset(text)` starts over.
- **`HashMap`** starts with no buckets, grows to 64 and then doubles whenever
  non-empty buckets reach 7/8 of the table. `erase` leaves a tombstone that
  still counts in `nonempty_bucket_count()` until the next growth. Iteration
  follows bucket order. `insert(key, value)` returns `(stored value, inserted)`
  and never overwrites; `m[key] = value` does. `get_or_default` stores the
  default when the key is missing. Keys that are `str`, `bytes` or `bytearray`
  use `string_hash`, anything else `int_hash`, unless a `hash_func` is given.
- **`RBTree`** holds unique values ordered by `key(value)`; inserting an
  existing key returns the existing node unchanged. `first_node`/`next_node`
  walk in order, `traverse(func)` calls `func(node, left, depth)` in
  pre-order, and `validate()` raises `ValueError` if a red-black invariant is
  broken.
- **`TreeMap`** iterates keys in ascending order; `items()` yields pairs.
  **`TreeSet.insert`** returns whether the value was new; `erase` raises
  `KeyError` for a missing value.
- **`Vector`** capacity starts at 0, becomes 16 on the first growth and then
  doubles. `clear` and truncation keep capacity; `shrink_to_fit` and
  `set_capacity` change it. Indexing out of range raises `IndexError`;
  negative indices are not accepted. `index_of` returns `NPOS` (-1) when the
  item is absent.
- **`SortedVector`** uses binary search (`lower_bound`, `upper_bound`);
  `insert` returns `(stored pair, inserted)` and never overwrites.
- **`SList.insert_after(index, value)`** inserts after position `index`;
  `-1` means before the first element.

## Example

```python
from rdestl.hash_map import HashMap
from rdestl.tree_map import TreeMap
from rdestl.sorting import quick_sort
from rdestl.textstream import StringStream

counts = HashMap()
counts["apples"] = 3
counts.insert("pears", 5)
assert "pears" in counts
assert len(counts) == 2

tree = TreeMap([(3, "c"), (1, "a"), (2, "b")])
assert list(tree) == [1, 2, 3]

data = [5, 2, 9, 1]
quick_sort(data)
assert data == [1, 2, 5, 9]

stream = StringStream("42 3.5 hello")
assert stream.read_int() == 42
assert stream.read_float() == 3.5
assert stream.read_str() == "hello"
```

## What it does not do

This is a library only: it has no command-line tool, and the containers are
in-memory structures with no persistence or thread safety.

## Running the tests

```
pip install ".[test]"
pytest
```