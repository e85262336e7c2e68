"""In-place sorting algorithms driven by a "less than" predicate."""

import operator
from itertools import pairwise


def _less(pred):
    return operator.lt if pred is None else pred


def insertion_sort(data, pred=None):
    """Sort a mutable sequence in place by insertion; the sort is stable."""
    pred = _less(pred)
    for i in range(len(data)):
        item = data[i]
        j = i
        while j > 0 and pred(item, data[j - 1]):
            data[j] = data[j - 1]
            j -= 1
        data[j] = item


def quick_sort(data, pred=None):
    """Sort a mutable sequence in place with quicksort (middle pivot)."""
    pred = _less(pred)
    if len(data) < 2:
        return
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        while True:
            i, j = low, high
            pivot = data[(low + high) >> 1]
            while True:
                while pred(data[i], pivot):
                    i += 1
                while pred(pivot, data[j]):
                    j -= 1
                if j >= i:
                    if i != j:
                        data[i], data[j] = data[j], data[i]
                    i += 1
                    j -= 1
                if i > j:
                    break
            if low < j:
                pending.append((low, j))
            if i < high:
                low = i
            else:
                break


def _down_heap(data, k, n, pred):
    # k is a 1-based heap position; n the heap size.
    item = data[k - 1]
    while k <= n // 2:
        child = 2 * k
        if child < n and pred(data[child - 1], data[child]):
            child += 1
        if pred(item, data[child - 1]):
            data[k - 1] = data[child - 1]
            k = child
        else:
            break
    data[k - 1] = item


def heap_sort(data, pred=None):
    """Sort a mutable sequence in place with heapsort."""
    pred = _less(pred)
    n = len(data)
    for k in range(n // 2, 0, -1):
        _down_heap(data, k, n, pred)
    while n >= 1:
        data[0], data[n - 1] = data[n - 1], data[0]
        n -= 1
        _down_heap(data, 1, n, pred)


def is_sorted(iterable, pred=None):
    """Return True if no element is ``pred``-less than the one before it."""
    pred = _less(pred)
    return not any(pred(current, previous) for previous, current in pairwise(iterable))


def _identity(item):
    return item


def _as_signed32(value):
    return value - 0x100000000 if value & 0x80000000 else value


class RadixSorter:
    """Least-significant-byte radix sorter for 32-bit integer keys."""

    HISTOGRAM_SIZE = 256

    def sort(self, data, key=None, signed=False):
        """Sort a mutable sequence in place by a 32-bit integer key.

        ``key`` maps an element to an integer (the element itself by
        default); only its low 32 bits count. With ``signed`` the key is
        read as a two's-complement value, so negative keys sort first.
        The sort is stable.
        """
        if not data:
            return
        key = _identity if key is None else key
        keys = [int(key(item)) & 0xFFFFFFFF for item in data]
        ordering = [_as_signed32(k) for k in keys] if signed else keys
        if all(a <= b for a, b in pairwise(ordering)):
            return

        entries = list(zip(keys, data))
        upper_half_empty = all(k >> 16 == 0 for k in keys)
        passes = 2 if not signed and upper_half_empty else 4
        for index in range(passes):
            shift = 8 * index
            buckets = [[] for _ in range(self.HISTOGRAM_SIZE)]
            for entry in entries:
                buckets[(entry[0] >> shift) & 0xFF].append(entry)
            if signed and index == 3:
                half = self.HISTOGRAM_SIZE // 2
                buckets = buckets[half:] + buckets[:half]
            entries = [entry for bucket in buckets for entry in bucket]
        data[:] = [item for _, item in entries]