import operator
import random

import pytest

from rdestl.sorting import (
    RadixSorter,
    heap_sort,
    insertion_sort,
    is_sorted,
    quick_sort,
)


def _random_list(seed, size, low=-1000, high=1000):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


@pytest.mark.parametrize("size", [0, 1, 2, 3, 10, 257])
def test_insertion_sort_matches_builtin(size):
    data = _random_list(size, size)
    expected = sorted(data)
    insertion_sort(data)
    assert data == expected


@pytest.mark.parametrize("size", [0, 1, 2, 3, 10, 257])
def test_quick_sort_matches_builtin(size):
    data = _random_list(size, size)
    expected = sorted(data)
    quick_sort(data)
    assert data == expected


@pytest.mark.parametrize("size", [0, 1, 2, 3, 10, 257])
def test_heap_sort_matches_builtin(size):
    data = _random_list(size, size)
    expected = sorted(data)
    heap_sort(data)
    assert data == expected


def test_sorts_with_greater_predicate_give_descending():
    expected = sorted(_random_list(7, 100), reverse=True)
    first = _random_list(7, 100)
    second = _random_list(7, 100)
    third = _random_list(7, 100)
    insertion_sort(first, operator.gt)
    quick_sort(second, operator.gt)
    heap_sort(third, operator.gt)
    assert first == expected
    assert second == expected
    assert third == expected


def test_sorts_handle_duplicates_and_sorted_input():
    original = [3] * 20 + list(range(20))
    expected = sorted(original)

    first = list(original)
    insertion_sort(first)
    assert first == expected
    insertion_sort(first)
    assert first == expected

    second = list(original)
    quick_sort(second)
    assert second == expected
    quick_sort(second)
    assert second == expected

    third = list(original)
    heap_sort(third)
    assert third == expected
    heap_sort(third)
    assert third == expected


def test_insertion_sort_is_stable():
    data = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    insertion_sort(data, lambda x, y: x[0] < y[0])
    assert data == [(1, "b"), (1, "d"), (2, "a"), (2, "c")]


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1])
    assert is_sorted([1, 1, 2, 3])
    assert not is_sorted([1, 3, 2])
    assert is_sorted([3, 2, 1], operator.gt)
    assert is_sorted(iter([1, 2, 3]))


def test_radix_sort_unsigned_matches_builtin():
    data = _random_list(11, 500, 0, 2**32 - 1)
    expected = sorted(data)
    RadixSorter().sort(data)
    assert data == expected


def test_radix_sort_small_keys():
    data = _random_list(12, 300, 0, 65535)
    expected = sorted(data)
    RadixSorter().sort(data)
    assert data == expected


def test_radix_sort_signed_keys():
    data = _random_list(13, 400, -(2**31), 2**31 - 1) + [0, -1]
    expected = sorted(data)
    RadixSorter().sort(data, signed=True)
    assert data == expected


def test_radix_sort_with_key_is_stable():
    data = [("x", 3), ("y", 1), ("z", 3), ("w", 2), ("v", 1)]
    RadixSorter().sort(data, key=lambda item: item[1])
    assert data == [("y", 1), ("v", 1), ("w", 2), ("x", 3), ("z", 3)]


def test_radix_sort_empty_and_sorted_are_unchanged():
    sorter = RadixSorter()
    empty = []
    sorter.sort(empty)
    assert empty == []
    data = [1, 2, 2, 5, 9]
    sorter.sort(data)
    assert data == [1, 2, 2, 5, 9]