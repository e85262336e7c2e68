"""Map stored as a sorted array of (key, value) pairs."""

import operator

from .sorting import quick_sort


class SortedVector:
    """Ordered map backed by a list kept sorted by ``compare``.

    ``compare(a, b)`` is a "less than" predicate on keys. Lookups use
    binary search; insertion shifts later elements.
    """

    def __init__(self, items=None, compare=None):
        self._less = compare if compare is not None else operator.lt
        self._data = list(items) if items is not None else []
        less = self._less
        quick_sort(self._data, lambda a, b: less(a[0], b[0]))

    def lower_bound(self, key):
        """Return the first index whose key is not less than ``key``."""
        low, high = 0, len(self._data)
        while low < high:
            mid = (low + high) // 2
            if self._less(self._data[mid][0], key):
                low = mid + 1
            else:
                high = mid
        return low

    def upper_bound(self, key):
        """Return the first index whose key is greater than ``key``."""
        low, high = 0, len(self._data)
        while low < high:
            mid = (low + high) // 2
            if self._less(key, self._data[mid][0]):
                high = mid
            else:
                low = mid + 1
        return low

    def insert(self, key, value):
        """Insert ``key`` unless present; return (stored pair, inserted)."""
        index = self.lower_bound(key)
        if index == len(self._data) or self._less(key, self._data[index][0]):
            pair = (key, value)
            self._data.insert(index, pair)
            return pair, True
        return self._data[index], False

    def find(self, key):
        """Return the (key, value) pair stored for ``key``, or None."""
        index = self.lower_bound(key)
        if index == len(self._data) or self._less(key, self._data[index][0]):
            return None
        return self._data[index]

    def erase(self, key):
        """Remove ``key``; return the number of entries removed (0 or 1)."""
        index = self.lower_bound(key)
        if index == len(self._data) or self._less(key, self._data[index][0]):
            return 0
        del self._data[index]
        return 1

    def clear(self):
        """Remove every entry."""
        self._data.clear()

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)