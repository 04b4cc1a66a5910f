"""Command-line front ends for the reductions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import TextIO, TypeVar

from parallab.reduction import (
    integer_average,
    maximum,
    minimum,
    parallel_average,
    parallel_integer_average,
    parallel_maximum,
    parallel_minimum,
    parallel_total,
    total,
)
from parallab.sort_cli import random_array
from parallab.timing import bench_traverse

THREADS = 16
T = TypeVar("T")


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


def _timed(fn: Callable[[], T]) -> tuple[T, str]:
    results: list[T] = []
    elapsed = bench_traverse(lambda: results.append(fn()))
    return results[0], elapsed


def main(argv: Sequence[str] | None = None) -> int:
    """Read numbers from standard input and print their parallel reductions."""
    parser = argparse.ArgumentParser(description="Reduce numbers read from standard input.")
    parser.add_argument("--threads", type=int, default=None, help="worker threads")
    args = parser.parse_args(argv)
    if args.threads is not None and args.threads < 1:
        parser.error("--threads must be at least 1")

    tokens = _tokens(sys.stdin)
    try:
        _prompt("Enter number of elements: ")
        n = _read_int(tokens, "number of elements")
        if n < 1:
            raise ValueError("number of elements must be positive")
        print("Enter elements:")
        values = [_read_int(tokens, "element") for _ in range(n)]
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("\nResults after Parallel Reduction:")
    print(f"Sum: {parallel_total(values, args.threads)}")
    print(f"Max: {parallel_maximum(values, args.threads)}")
    print(f"Min: {parallel_minimum(values, args.threads)}")
    print(f"Average: {parallel_average(values, args.threads):g}")
    return 0


def bench_main(argv: Sequence[str] | None = None) -> int:
    """Time sequential against parallel reductions on a random array."""
    parser = argparse.ArgumentParser(description="Benchmark reductions on random data.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--threads", type=int, default=THREADS, help="worker threads")
    args = parser.parse_args(argv)
    if args.threads < 1:
        parser.error("--threads must be at least 1")

    tokens = _tokens(sys.stdin)
    try:
        _prompt("Enter array length: ")
        n = _read_int(tokens, "array length")
        _prompt("Enter maximum random value: ")
        rand_max = _read_int(tokens, "maximum random value")
        if n < 1:
            raise ValueError("array length must be positive")
        values = random_array(n, rand_max, args.seed)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Generated random array of length {n} with elements between 0 to {rand_max}\n")
    operations = (
        ("Min", minimum, parallel_minimum),
        ("Max", maximum, parallel_maximum),
        ("Sum", total, parallel_total),
        ("Average", integer_average, parallel_integer_average),
    )
    blocks = []
    for label, sequential, parallel in operations:
        seq_value, seq_time = _timed(lambda: sequential(values))
        par_value, par_time = _timed(lambda: parallel(values, args.threads))
        blocks.append(
            f"Sequential {label}: {seq_value} ({seq_time}ms)\n"
            f"Parallel ({args.threads}) {label}: {par_value} ({par_time}ms)"
        )
    print("\n\n".join(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())