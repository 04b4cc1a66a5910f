"""Bubble, odd-even transposition and merge sorts, sequential and thread-parallel."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any

from parallab.graph import _chunks, _resolve_threads

DEFAULT_CUTOFF = 1000


def _compare_exchange(data: list[Any], indices: Iterable[int]) -> bool:
    """Swap each out-of-order pair ``(j, j + 1)``; report whether anything moved."""
    swapped = False
    for j in indices:
        if data[j] > data[j + 1]:
            data[j], data[j + 1] = data[j + 1], data[j]
            swapped = True
    return swapped


def _parallel_phase(pool: ThreadPoolExecutor, data: list[Any], first: int, workers: int) -> bool:
    """Run one odd or even phase with its disjoint pairs shared among workers."""
    pairs = range(first, len(data) - 1, 2)
    spans = (pairs[span.start:span.stop] for span in _chunks(len(pairs), workers))
    return any(list(pool.map(partial(_compare_exchange, data), spans)))


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by classic bubble sort."""
    data = list(values)
    n = len(data)
    for done in range(n - 1):
        _compare_exchange(data, range(n - done - 1))
    return data


def parallel_bubble_sort(values: Iterable[Any], threads: int | None = None) -> list[Any]:
    """Return a new sorted list; each pass is split into disjoint pairs run across threads."""
    data = list(values)
    workers = _resolve_threads(threads)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        swapped = True
        while swapped:
            swapped = False
            for first in (0, 1):
                swapped |= _parallel_phase(pool, data, first, workers)
    return data


def odd_even_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by odd-even transposition (n alternating phases)."""
    data = list(values)
    n = len(data)
    for phase in range(n):
        _compare_exchange(data, range(phase % 2, n - 1, 2))
    return data


def parallel_odd_even_sort(values: Iterable[Any], threads: int | None = None) -> list[Any]:
    """Odd-even transposition sort with each phase's pairs spread over threads."""
    data = list(values)
    workers = _resolve_threads(threads)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for phase in range(len(data)):
            _parallel_phase(pool, data, phase % 2, workers)
    return data


def merge(values: list[Any], left: int, mid: int, right: int) -> None:
    """Merge the sorted runs ``values[left:mid+1]`` and ``values[mid+1:right+1]`` in place."""
    if not (0 <= left <= mid <= right < len(values)):
        raise ValueError(f"invalid merge bounds {left}, {mid}, {right}")
    merged = list(heapq.merge(values[left:mid + 1], values[mid + 1:right + 1]))
    values[left:right + 1] = merged


def _merge_sort_range(data: list[Any], left: int, right: int) -> None:
    if left < right:
        mid = (left + right) // 2
        _merge_sort_range(data, left, mid)
        _merge_sort_range(data, mid + 1, right)
        merge(data, left, mid, right)


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted by top-down merge sort."""
    data = list(values)
    _merge_sort_range(data, 0, len(data) - 1)
    return data


def _leaves(left: int, right: int, cutoff: int) -> Iterator[tuple[int, int]]:
    """Yield the ranges small enough to be sorted sequentially."""
    if left < right and right - left > cutoff:
        mid = (left + right) // 2
        yield from _leaves(left, mid, cutoff)
        yield from _leaves(mid + 1, right, cutoff)
    else:
        yield left, right


def _merge_tree(data: list[Any], left: int, right: int, cutoff: int) -> None:
    if left < right and right - left > cutoff:
        mid = (left + right) // 2
        _merge_tree(data, left, mid, cutoff)
        _merge_tree(data, mid + 1, right, cutoff)
        merge(data, left, mid, right)


def parallel_merge_sort(
    values: Iterable[Any], threads: int | None = None, cutoff: int = DEFAULT_CUTOFF
) -> list[Any]:
    """Merge sort whose ranges of at most ``cutoff`` span are sorted concurrently."""
    data = list(values)
    workers = _resolve_threads(threads)
    if len(data) < 2:
        return data
    leaves = list(_leaves(0, len(data) - 1, cutoff))
    pieces: Sequence[list[Any]] = [data[left:right + 1] for left, right in leaves]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for (left, right), chunk in zip(leaves, pool.map(merge_sort, pieces)):
            data[left:right + 1] = chunk
    _merge_tree(data, 0, len(data) - 1, cutoff)
    return data