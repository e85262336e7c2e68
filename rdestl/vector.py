"""Growable array with explicit capacity management."""

NPOS = -1


class Vector:
    """Sequence that tracks a capacity the way a dynamic array does.

    Capacity starts at zero, becomes ``INITIAL_CAPACITY`` on the first
    growth and doubles after that. Clearing or shrinking never releases
    capacity; ``shrink_to_fit`` and ``set_capacity`` do.
    """

    INITIAL_CAPACITY = 16

    def __init__(self, items=None):
        self._items = list(items) if items is not None else []
        self._capacity = 0
        if self._items:
            self._capacity = self._new_capacity(len(self._items))

    # -- internals -------------------------------------------------------

    def _new_capacity(self, min_capacity):
        current = self._capacity
        if min_capacity > current * 2:
            return min_capacity
        return self.INITIAL_CAPACITY if current == 0 else current * 2

    def _grow(self):
        self._capacity = self.INITIAL_CAPACITY if self._capacity == 0 else self._capacity * 2

    def _check_index(self, index):
        if not 0 <= index < len(self._items):
            raise IndexError(f"vector index {index} out of range")

    def _check_position(self, index):
        if not 0 <= index <= len(self._items):
            raise IndexError(f"vector position {index} out of range")

    # -- sequence protocol -----------------------------------------------

    def __getitem__(self, index):
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index, value):
        self._check_index(index)
        self._items[index] = value

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"Vector({self._items!r})"

    # -- capacity --------------------------------------------------------

    def capacity(self):
        """Return the number of elements storable without growing."""
        return self._capacity

    def reserve(self, capacity):
        """Raise the capacity to at least ``capacity``."""
        if capacity > self._capacity:
            self._capacity = capacity

    def shrink_to_fit(self):
        """Reduce the capacity to the current size."""
        self._capacity = len(self._items)

    def set_capacity(self, capacity):
        """Set the capacity exactly, dropping elements beyond it."""
        del self._items[capacity:]
        self._capacity = capacity

    # -- modification ----------------------------------------------------

    def push_back(self, value):
        """Append ``value``."""
        if len(self._items) == self._capacity:
            self._grow()
        self._items.append(value)

    def pop_back(self):
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from an empty vector")
        return self._items.pop()

    def front(self):
        """Return the first element."""
        if not self._items:
            raise IndexError("front of an empty vector")
        return self._items[0]

    def back(self):
        """Return the last element."""
        if not self._items:
            raise IndexError("back of an empty vector")
        return self._items[-1]

    def insert(self, index, value):
        """Insert ``value`` before position ``index``; return ``index``."""
        self._check_position(index)
        if len(self._items) == self._capacity:
            self._grow()
        self._items.insert(index, value)
        return index

    def insert_n(self, index, count, value):
        """Insert ``count`` copies of ``value`` before position ``index``."""
        self._check_position(index)
        if count < 0:
            raise ValueError("count must not be negative")
        new_size = len(self._items) + count
        if new_size > self._capacity:
            self._capacity = self._new_capacity(new_size)
        self._items[index:index] = [value] * count

    def erase(self, index):
        """Remove the element at ``index``; return ``index``."""
        self._check_index(index)
        del self._items[index]
        return index

    def erase_range(self, first, last):
        """Remove elements in ``[first, last)``; return the index after the gap.

        If ``last <= first`` nothing is removed and the size is returned.
        """
        self._check_position(first)
        self._check_position(last)
        if last <= first:
            return len(self._items)
        del self._items[first:last]
        return first

    def erase_unordered(self, index):
        """Remove the element at ``index`` by moving the last element into its place."""
        self._check_index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last

    def resize(self, size, value=None):
        """Grow with copies of ``value`` or truncate to ``size`` elements."""
        current = len(self._items)
        if size > current:
            self.insert_n(current, size - current, value)
        else:
            del self._items[size:]

    def clear(self):
        """Remove every element, keeping the capacity."""
        self._items.clear()

    def index_of(self, item, start=0):
        """Return the first index at or after ``start`` holding ``item``, else ``NPOS``."""
        for index in range(start, len(self._items)):
            if self._items[index] == item:
                return index
        return NPOS