"""Ordered map and set built on a red-black tree."""

from collections.abc import Mapping
from dataclasses import dataclass
from operator import attrgetter
from typing import Any

from .rb_tree import RBTree


@dataclass(slots=True)
class _Entry:
    key: Any
    value: Any


class TreeMap:
    """Map with keys kept in ascending order."""

    def __init__(self, items=None):
        self._tree = RBTree(key=attrgetter("key"))
        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for key, value in pairs:
                self.insert(key, value)

    def __getitem__(self, key):
        node = self._tree.find(key)
        if node is None:
            raise KeyError(key)
        return node.value.value

    def __setitem__(self, key, value):
        node = self._tree.find(key)
        if node is None:
            self._tree.insert(_Entry(key, value))
        else:
            node.value.value = value

    def __contains__(self, key):
        return self._tree.find(key) is not None

    def insert(self, key, value):
        """Insert ``key`` unless present; return the stored (key, value) pair."""
        entry = self._tree.insert(_Entry(key, value)).value
        return entry.key, entry.value

    def find(self, key):
        """Return the (key, value) pair stored for ``key``, or None."""
        node = self._tree.find(key)
        if node is None:
            return None
        return node.value.key, node.value.value

    def erase(self, key):
        """Remove ``key``; return the number of entries removed (0 or 1)."""
        return self._tree.erase(key)

    def clear(self):
        """Remove every entry."""
        self._tree.clear()

    def swap(self, other):
        """Exchange the contents of this map and ``other``."""
        self._tree.swap(other._tree)

    def __len__(self):
        return len(self._tree)

    def __iter__(self):
        return (entry.key for entry in self._tree)

    def items(self):
        """Yield (key, value) pairs in key order."""
        return ((entry.key, entry.value) for entry in self._tree)


class TreeSet:
    """Set with values kept in ascending order."""

    def __init__(self, items=None):
        self._tree = RBTree()
        for value in items or ():
            self.insert(value)

    def insert(self, value):
        """Add ``value``; return True if it was not present before."""
        before = len(self._tree)
        self._tree.insert(value)
        return len(self._tree) != before

    def __contains__(self, value):
        return self._tree.find(value) is not None

    def find(self, value):
        """Return the stored value equal to ``value``, or None."""
        node = self._tree.find(value)
        return None if node is None else node.value

    def erase(self, value):
        """Remove ``value``; raise KeyError if it is not present."""
        if not self._tree.erase(value):
            raise KeyError(value)

    def __len__(self):
        return len(self._tree)

    def __iter__(self):
        return iter(self._tree)