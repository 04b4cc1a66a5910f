"""Command-line front ends for the sorting routines."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO

from parallab.sorting import (
    merge_sort,
    odd_even_sort,
    parallel_bubble_sort,
    parallel_merge_sort,
    parallel_odd_even_sort,
)
from parallab.timing import bench_traverse

THREADS = 16


def random_array(n: int, rand_max: int, seed: int | None = None) -> list[int]:
    """Return ``n`` random integers in ``[0, rand_max)``."""
    if n < 0:
        raise ValueError("array length must not be negative")
    if rand_max <= 0:
        raise ValueError("maximum random value must be positive")
    rng = random.Random(seed)
    return [rng.randrange(rand_max) for _ in range(n)]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], what: str) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise ValueError(f"missing {what}") from None
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _row(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


def interactive_main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from standard input and print them sorted by both parallel sorts."""
    parser = argparse.ArgumentParser(description="Sort numbers read from standard input.")
    parser.add_argument("--threads", type=int, default=None, help="worker threads")
    args = parser.parse_args(argv)
    if args.threads is not None and args.threads < 1:
        parser.error("--threads must be at least 1")

    tokens = _tokens(sys.stdin)
    try:
        _prompt("Enter number of elements: ")
        n = _read_int(tokens, "number of elements")
        if n < 0:
            raise ValueError("number of elements must not be negative")
        print("Enter elements:")
        values = [_read_int(tokens, "element") for _ in range(n)]
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Array after Parallel Bubble Sort:")
    print(_row(parallel_bubble_sort(values, args.threads)))
    print("Array after Parallel Merge Sort:")
    print(_row(parallel_merge_sort(values, args.threads)))
    return 0


def _sort_bench(
    argv: Sequence[str] | None,
    name: str,
    sequential: Callable[[list[int]], list[int]],
    parallel: Callable[[list[int], int], list[int]],
) -> int:
    parser = argparse.ArgumentParser(description=f"Benchmark {name}.")
    parser.add_argument("length", nargs="?", type=int, help="array length")
    parser.add_argument("rand_max", nargs="?", type=int, help="maximum random value")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--threads", type=int, default=THREADS, help="worker threads")
    args = parser.parse_args(argv)
    if args.threads < 1:
        parser.error("--threads must be at least 1")

    try:
        if args.rand_max is None:
            print("Specify array length and maximum random value")
            tokens = _tokens(sys.stdin)
            _prompt("Enter array length: ")
            n = _read_int(tokens, "array length")
            _prompt("Enter maximum random value: ")
            rand_max = _read_int(tokens, "maximum random value")
        else:
            n, rand_max = args.length, args.rand_max
        values = random_array(n, rand_max, args.seed)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Generated random array of length {n} with elements between 0 and {rand_max}\n")
    print(f"Sequential {name}: {bench_traverse(lambda: sequential(values))}ms")
    print("Sorted array is ready =>")
    print("\n")
    elapsed = bench_traverse(lambda: parallel(values, args.threads))
    print(f"Parallel ({args.threads}) {name}: {elapsed}ms")
    return 0


def bubble_main(argv: Sequence[str] | None = None) -> int:
    """Time sequential against parallel odd-even bubble sort on random data."""
    return _sort_bench(argv, "Bubble sort", odd_even_sort, parallel_odd_even_sort)


def merge_main(argv: Sequence[str] | None = None) -> int:
    """Time sequential against parallel merge sort on random data."""
    return _sort_bench(
        argv, "merge sort", merge_sort, lambda values, threads: parallel_merge_sort(values, threads)
    )


if __name__ == "__main__":
    sys.exit(interactive_main())