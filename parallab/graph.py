"""Adjacency-matrix graph with sequential and thread-parallel traversals."""

from __future__ import annotations

import os
import threading
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

UNSET = -1


def _resolve_threads(threads: int | None) -> int:
    if threads is None:
        return os.cpu_count() or 1
    if threads < 1:
        raise ValueError("threads must be at least 1")
    return threads


def _chunks(count: int, parts: int) -> Iterator[range]:
    """Split ``range(count)`` into contiguous, nearly equal spans."""
    parts = max(1, min(parts, count))
    base, extra = divmod(count, parts)
    start = 0
    for index in range(parts):
        stop = start + base + (1 if index < extra else 0)
        yield range(start, stop)
        start = stop


def _parse_row(line: str) -> list[int]:
    row = []
    for token in line.split():
        try:
            row.append(int(token))
        except ValueError:
            break
    return row


@dataclass
class Graph:
    """A weighted graph stored as an adjacency matrix; weight > 0 means an edge."""

    adj_matrix: list[list[int]] = field(default_factory=list)
    task_threshold: int = 60
    max_depth_rdfs: int = 10000

    def __len__(self) -> int:
        return len(self.adj_matrix)

    def edge_exists(self, n1: int, n2: int) -> bool:
        return self.adj_matrix[n1][n2] > 0

    def size(self) -> int:
        return len(self.adj_matrix)

    def _prepare(self, src: int, visited: list[bool] | None) -> list[bool]:
        if not 0 <= src < self.size():
            raise IndexError(f"node {src} is not in the graph")
        if visited is None:
            return [False] * self.size()
        if len(visited) < self.size():
            raise ValueError("visited must have an entry for every node")
        return visited

    def _unvisited_neighbours(
        self, node: int, span: range, visited: Sequence[bool]
    ) -> list[int]:
        return [n for n in span if self.edge_exists(node, n) and not visited[n]]

    def dfs(self, src: int, visited: list[bool] | None = None) -> list[int]:
        """Iterative depth-first traversal; marks ``visited`` and returns the visit order."""
        visited = self._prepare(src, visited)
        order: list[int] = []
        stack = [src]
        while stack:
            node = stack.pop()
            if visited[node]:
                continue
            visited[node] = True
            order.append(node)
            stack.extend(self._unvisited_neighbours(node, range(self.size()), visited))
        return order

    def pdfs(
        self, src: int, visited: list[bool] | None = None, threads: int | None = None
    ) -> list[int]:
        """Depth-first traversal scanning each node's row across worker threads."""
        visited = self._prepare(src, visited)
        workers = _resolve_threads(threads)
        spans = list(_chunks(self.size(), workers))
        order: list[int] = []
        stack = [src]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            while stack:
                node = stack.pop()
                if visited[node]:
                    continue
                visited[node] = True
                order.append(node)
                found = pool.map(
                    lambda span, node=node: self._unvisited_neighbours(node, span, visited),
                    spans,
                )
                for private_stack in found:
                    stack.extend(private_stack)
        return order

    def pdfs_with_locks(
        self, src: int, visited: list[bool] | None = None, threads: int | None = None
    ) -> list[int]:
        """Parallel depth-first traversal guarding each visited flag with its own lock."""
        visited = self._prepare(src, visited)
        workers = _resolve_threads(threads)
        spans = list(_chunks(self.size(), workers))
        locks = [threading.Lock() for _ in range(self.size())]

        def is_visited(node: int) -> bool:
            with locks[node]:
                return visited[node]

        def scan(node: int, span: range) -> list[int]:
            return [
                n for n in span if self.edge_exists(node, n) and not is_visited(n)
            ]

        order: list[int] = []
        stack = [src]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            while stack:
                node = stack.pop()
                if is_visited(node):
                    continue
                with locks[node]:
                    visited[node] = True
                order.append(node)
                for private_stack in pool.map(lambda span, node=node: scan(node, span), spans):
                    stack.extend(private_stack)
        return order

    def dijkstra(self, src: int) -> tuple[list[int], list[int]]:
        """Shortest paths by repeated relaxation; returns (came_from, cost_so_far), -1 if unreached."""
        self._prepare(src, None)
        came_from = [UNSET] * self.size()
        cost_so_far = [UNSET] * self.size()
        came_from[src] = src
        cost_so_far[src] = 0
        queue = [src]
        while queue:
            current = queue.pop()
            for nxt in range(self.size()):
                if not self.edge_exists(current, nxt):
                    continue
                new_cost = cost_so_far[current] + self.adj_matrix[current][nxt]
                if cost_so_far[nxt] == UNSET or new_cost < cost_so_far[nxt]:
                    cost_so_far[nxt] = new_cost
                    queue.append(nxt)
                    came_from[nxt] = current
        return came_from, cost_so_far

    def parallel_dijkstra(
        self, src: int, threads: int | None = None
    ) -> tuple[list[int], list[int]]:
        """Like :meth:`dijkstra`, relaxing each node's edges across worker threads."""
        self._prepare(src, None)
        workers = _resolve_threads(threads)
        spans = list(_chunks(self.size(), workers))
        came_from = [UNSET] * self.size()
        cost_so_far = [UNSET] * self.size()
        came_from[src] = src
        cost_so_far[src] = 0
        locks = [threading.Lock() for _ in range(self.size())]
        queue_lock = threading.Lock()
        queue = [src]

        def relax(current: int, span: range) -> None:
            for nxt in span:
                if not self.edge_exists(current, nxt):
                    continue
                with locks[current]:
                    base = cost_so_far[current]
                new_cost = base + self.adj_matrix[current][nxt]
                with locks[nxt]:
                    improved = cost_so_far[nxt] == UNSET or new_cost < cost_so_far[nxt]
                    if improved:
                        cost_so_far[nxt] = new_cost
                        came_from[nxt] = current
                if improved:
                    with queue_lock:
                        queue.append(nxt)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            while queue:
                current = queue.pop()
                list(pool.map(lambda span, current=current: relax(current, span), spans))
        return came_from, cost_so_far

    def reconstruct_path(self, src: int, dst: int, origins: Sequence[int]) -> list[int]:
        """Follow ``origins`` back from ``dst`` to ``src`` and return the path in order."""
        path: list[int] = []
        current = dst
        while current != src:
            if not 0 <= current < len(origins) or len(path) >= len(origins):
                raise ValueError(f"no path from {src} to {dst}")
            path.append(current)
            current = origins[current]
        path.append(src)
        path.reverse()
        return path


def import_from_file(path: str | os.PathLike[str]) -> Graph:
    """Read a whitespace-separated adjacency matrix, one row per line."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ValueError("Input file does not exist or is not readable.") from exc
    return Graph([_parse_row(line) for line in text.splitlines()])