import random

import pytest

from parallab.sorting import (
    bubble_sort,
    merge,
    merge_sort,
    odd_even_sort,
    parallel_bubble_sort,
    parallel_merge_sort,
    parallel_odd_even_sort,
)

INPUTS = [
    [],
    [1],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 1, 4, 0],
    [-3, 10, -7, 0, 2, 2],
    list(range(20, 0, -1)),
]


@pytest.mark.parametrize("values", INPUTS)
def test_sorts_match_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert odd_even_sort(values) == expected
    assert merge_sort(values) == expected
    assert parallel_bubble_sort(values, 3) == expected
    assert parallel_odd_even_sort(values, 4) == expected
    assert parallel_merge_sort(values, 2, 2) == expected


def test_input_is_not_modified():
    original = [3, 1, 2, 9, 0]
    snapshot = list(original)
    expected = sorted(snapshot)
    assert bubble_sort(original) == expected
    assert original == snapshot
    assert odd_even_sort(original) == expected
    assert original == snapshot
    assert merge_sort(original) == expected
    assert original == snapshot
    assert parallel_bubble_sort(original, 3) == expected
    assert original == snapshot
    assert parallel_odd_even_sort(original, 4) == expected
    assert original == snapshot
    assert parallel_merge_sort(original, 2, 2) == expected
    assert original == snapshot


def test_random_data():
    rng = random.Random(7)
    data = [rng.randrange(100) for _ in range(300)]
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert odd_even_sort(data) == expected
    assert merge_sort(data) == expected
    assert parallel_bubble_sort(data, 3) == expected
    assert parallel_odd_even_sort(data, 4) == expected
    assert parallel_merge_sort(data, 2, 2) == expected


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert odd_even_sort(words) == expected
    assert merge_sort(words) == expected
    assert parallel_bubble_sort(words, 3) == expected
    assert parallel_odd_even_sort(words, 4) == expected
    assert parallel_merge_sort(words, 2, 2) == expected


def test_parallel_merge_sort_default_cutoff_splits_large_input():
    rng = random.Random(11)
    data = [rng.randrange(-500, 500) for _ in range(2500)]
    assert parallel_merge_sort(data, 4) == sorted(data)


def test_parallel_sorts_with_more_threads_than_items():
    data = [2, 1]
    assert parallel_odd_even_sort(data, 8) == sorted(data)
    assert parallel_bubble_sort(data, 8) == sorted(data)
    assert parallel_merge_sort(data, 8, 0) == sorted(data)


def test_merge_in_place_leaves_outside_untouched():
    values = [9, 1, 3, 5, 2, 4, 6, 0]
    merge(values, 1, 3, 6)
    assert values == [9] + sorted([1, 3, 5, 2, 4, 6]) + [0]


def test_merge_with_empty_right_run():
    values = [1, 2, 3]
    merge(values, 0, 2, 2)
    assert values == [1, 2, 3]


@pytest.mark.parametrize("bounds", [(2, 1, 3), (0, 1, 8), (-1, 0, 1), (1, 3, 2)])
def test_merge_rejects_bad_bounds(bounds):
    with pytest.raises(ValueError):
        merge([1, 2, 3, 4], *bounds)


@pytest.mark.parametrize(
    "sorter", [parallel_bubble_sort, parallel_odd_even_sort, parallel_merge_sort]
)
def test_parallel_sorts_reject_zero_threads(sorter):
    with pytest.raises(ValueError):
        sorter([3, 2, 1], 0)