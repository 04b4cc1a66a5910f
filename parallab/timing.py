"""Wall-clock timing of a single call."""

from __future__ import annotations

import time
from collections.abc import Callable


def bench_traverse(traverse_fn: Callable[[], object]) -> str:
    """Run ``traverse_fn`` once and return the elapsed whole milliseconds as text."""
    start = time.perf_counter()
    traverse_fn()
    elapsed = time.perf_counter() - start
    return str(int(elapsed * 1000))