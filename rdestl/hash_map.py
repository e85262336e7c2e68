"""Open-addressing hash map with triangular probing and tombstones."""

from .hashing import int_hash, string_hash

_UNUSED = 0xFFFFFFFF
_DELETED = 0xFFFFFFFE
_HASH_MASK = 0xFFFFFFFD


def _default_hash(key):
    if isinstance(key, (str, bytes, bytearray)):
        return string_hash(key)
    return int_hash(key)


def _place(hashes, keys, values, mask, h, key, value):
    """Put an entry into the first unused bucket of its probe sequence."""
    i = h & mask
    probes = 0
    while hashes[i] != _UNUSED:
        probes += 1
        i = (i + probes) & mask
    hashes[i] = h
    keys[i] = key
    values[i] = value


class HashMap:
    """Hash map with a 7/8 load factor and power-of-two bucket counts.

    Erased entries leave tombstones that still count as non-empty buckets
    until the table is grown. Iteration runs in bucket order.
    """

    INITIAL_CAPACITY = 64

    def __init__(self, initial_bucket_count=None, hash_func=None):
        self._hash_func = hash_func if hash_func is not None else _default_hash
        self._hashes = []
        self._keys = []
        self._values = []
        self._size = 0
        self._used = 0
        if initial_bucket_count is not None:
            self.reserve(initial_bucket_count)

    # -- internals -------------------------------------------------------

    def _hash(self, key):
        return self._hash_func(key) & _HASH_MASK

    def _needs_growth(self):
        return self._used * 8 >= len(self._hashes) * 7

    def _matches(self, i, h, key):
        return self._hashes[i] == h and self._keys[i] == key

    def _find_for_insert(self, key):
        """Return (bucket, hash): the key's bucket or the bucket to insert into."""
        h = self._hash(key)
        capacity = len(self._hashes)
        if capacity == 0:
            return None, h
        mask = capacity - 1
        i = h & mask
        if self._matches(i, h, key):
            return i, h
        free = i if self._hashes[i] == _DELETED else None
        probes = 1
        while self._hashes[i] != _UNUSED:
            i = (i + probes) & mask
            if self._matches(i, h, key):
                return i, h
            if self._hashes[i] == _DELETED and free is None:
                free = i
            probes += 1
        return (free if free is not None else i), h

    def _lookup(self, key):
        capacity = len(self._hashes)
        if capacity == 0:
            return None
        h = self._hash(key)
        mask = capacity - 1
        i = h & mask
        if self._matches(i, h, key):
            return i
        probes = 1
        while self._hashes[i] != _UNUSED:
            i = (i + probes) & mask
            if self._matches(i, h, key):
                return i
            probes += 1
        return None

    def _occupied(self, i):
        return self._hashes[i] < _DELETED

    def _emplace_at(self, i, h, key, value):
        if self._occupied(i):
            return self._values[i], False
        if self._hashes[i] == _UNUSED:
            self._used += 1
        self._hashes[i] = h
        self._keys[i] = key
        self._values[i] = value
        self._size += 1
        return value, True

    def _insert_missing(self, key, value, i, h):
        if i is None or self._needs_growth():
            return self.insert(key, value)
        return self._emplace_at(i, h, key, value)

    def _entries(self):
        return (
            (h, k, v)
            for h, k, v in zip(self._hashes, self._keys, self._values)
            if h < _DELETED
        )

    def _rebuilt(self, capacity):
        hashes = [_UNUSED] * capacity
        keys = [None] * capacity
        values = [None] * capacity
        mask = capacity - 1
        for h, k, v in self._entries():
            _place(hashes, keys, values, mask, h, k, v)
        return hashes, keys, values

    def _grow(self, new_capacity=None):
        if new_capacity is None:
            current = len(self._hashes)
            new_capacity = self.INITIAL_CAPACITY if current == 0 else current * 2
        self._hashes, self._keys, self._values = self._rebuilt(new_capacity)
        self._used = self._size

    # -- public interface ------------------------------------------------

    def __getitem__(self, key):
        i = self._lookup(key)
        if i is None:
            raise KeyError(key)
        return self._values[i]

    def __setitem__(self, key, value):
        i, h = self._find_for_insert(key)
        if i is not None and self._occupied(i):
            self._values[i] = value
            return
        self._insert_missing(key, value, i, h)

    def __contains__(self, key):
        return self._lookup(key) is not None

    def __len__(self):
        return self._size

    def __iter__(self):
        return (k for _, k, _ in self._entries())

    def insert(self, key, value):
        """Insert ``key`` unless present; return (stored value, inserted)."""
        if self._needs_growth():
            self._grow()
        i, h = self._find_for_insert(key)
        return self._emplace_at(i, h, key, value)

    def get_or_default(self, key, default=None):
        """Return the value for ``key``, first storing ``default`` if it is missing."""
        i, h = self._find_for_insert(key)
        if i is not None and self._occupied(i):
            return self._values[i]
        value, _ = self._insert_missing(key, default, i, h)
        return value

    def erase(self, key):
        """Remove ``key``; return the number of entries removed (0 or 1)."""
        i = self._lookup(key)
        if i is None:
            return 0
        self._hashes[i] = _DELETED
        self._keys[i] = None
        self._values[i] = None
        self._size -= 1
        return 1

    def find(self, key):
        """Return the (key, value) pair stored for ``key``, or None."""
        i = self._lookup(key)
        if i is None:
            return None
        return self._keys[i], self._values[i]

    def items(self):
        """Yield (key, value) pairs in bucket order."""
        return ((k, v) for _, k, v in self._entries())

    def clear(self):
        """Remove every entry, keeping the bucket count."""
        capacity = len(self._hashes)
        self._hashes = [_UNUSED] * capacity
        self._keys = [None] * capacity
        self._values = [None] * capacity
        self._size = 0
        self._used = 0

    def reserve(self, min_size):
        """Grow the table to at least ``min_size`` buckets (a power of two)."""
        capacity = len(self._hashes)
        new_capacity = self.INITIAL_CAPACITY if capacity == 0 else capacity
        while new_capacity < min_size:
            new_capacity *= 2
        if new_capacity > capacity:
            self._grow(new_capacity)

    def bucket_count(self):
        """Return the number of buckets."""
        return len(self._hashes)

    def nonempty_bucket_count(self):
        """Return the number of buckets holding an entry or a tombstone."""
        return self._used

    def copy(self):
        """Return an independent map with the same entries and bucket count."""
        other = HashMap(hash_func=self._hash_func)
        capacity = len(self._hashes)
        if capacity:
            other._hashes, other._keys, other._values = self._rebuilt(capacity)
        other._size = self._size
        other._used = self._used
        return other

    def swap(self, other):
        """Exchange the contents of this map and ``other``."""
        if other is self:
            return
        for name in ("_hash_func", "_hashes", "_keys", "_values", "_size", "_used"):
            mine, theirs = getattr(self, name), getattr(other, name)
            setattr(self, name, theirs)
            setattr(other, name, mine)