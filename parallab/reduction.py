"""Sum, extremes and averages of integer sequences, sequential and thread-parallel."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor

from parallab.graph import _chunks, _resolve_threads


def _require(values: Iterable[int]) -> list[int]:
    data = list(values)
    if not data:
        raise ValueError("sequence is empty")
    return data


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _parallel_reduce(
    data: list[int], threads: int | None, reducer: Callable[[Iterable[int]], int]
) -> int:
    workers = _resolve_threads(threads)
    parts = [data[span.start:span.stop] for span in _chunks(len(data), workers)]
    parts = [part for part in parts if part]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return reducer(pool.map(reducer, parts))


def total(values: Iterable[int]) -> int:
    """Sum of the values; 0 for an empty sequence."""
    return sum(values)


def maximum(values: Iterable[int]) -> int:
    """Largest value; raises ValueError when empty."""
    return max(_require(values))


def minimum(values: Iterable[int]) -> int:
    """Smallest value; raises ValueError when empty."""
    return min(_require(values))


def average(values: Iterable[int]) -> float:
    """Arithmetic mean as a float; raises ValueError when empty."""
    data = _require(values)
    return sum(data) / len(data)


def integer_average(values: Iterable[int]) -> int:
    """Mean truncated toward zero; raises ValueError when empty."""
    data = _require(values)
    return _truncating_div(sum(data), len(data))


def parallel_total(values: Iterable[int], threads: int | None = None) -> int:
    """Sum computed from partial sums on worker threads."""
    return _parallel_reduce(list(values), threads, sum)


def parallel_maximum(values: Iterable[int], threads: int | None = None) -> int:
    """Largest value from per-thread partial maxima."""
    return _parallel_reduce(_require(values), threads, max)


def parallel_minimum(values: Iterable[int], threads: int | None = None) -> int:
    """Smallest value from per-thread partial minima."""
    return _parallel_reduce(_require(values), threads, min)


def parallel_average(values: Iterable[int], threads: int | None = None) -> float:
    """Float mean from a parallel sum."""
    data = _require(values)
    return parallel_total(data, threads) / len(data)


def parallel_integer_average(values: Iterable[int], threads: int | None = None) -> int:
    """Mean truncated toward zero from a parallel sum."""
    data = _require(values)
    return _truncating_div(parallel_total(data, threads), len(data))