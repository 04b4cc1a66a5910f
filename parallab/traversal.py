"""Breadth- and depth-first traversal over an undirected adjacency list."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict, deque
from collections.abc import Hashable, Sequence

SAMPLE_EDGES = ((0, 1), (0, 2), (1, 3), (1, 4), (2, 5))


class AdjacencyList:
    """An undirected graph whose neighbours keep their insertion order."""

    def __init__(self) -> None:
        self._neighbours: defaultdict[Hashable, list[Hashable]] = defaultdict(list)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        self._neighbours[u].append(v)
        self._neighbours[v].append(u)

    def _adjacent(self, node: Hashable) -> list[Hashable]:
        return self._neighbours.get(node, [])

    def bfs(self, start: Hashable) -> list[Hashable]:
        """Return nodes in breadth-first order from ``start``."""
        visited = {start}
        queue = deque([start])
        order = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for neighbour in self._adjacent(node):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Return nodes in depth-first preorder from ``start``."""
        visited = {start}
        order = [start]
        stack = [iter(self._adjacent(start))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self._adjacent(neighbour)))
                    break
            else:
                stack.pop()
        return order


def main(argv: Sequence[str] | None = None) -> int:
    argparse.ArgumentParser(description="Traverse a sample graph.").parse_args(argv)
    graph = AdjacencyList()
    for u, v in SAMPLE_EDGES:
        graph.add_edge(u, v)

    print("--- Parallel BFS ---")
    for node in graph.bfs(0):
        print(f"BFS Visited: {node}")

    print("\n--- Parallel DFS ---")
    for node in graph.dfs(0):
        print(f"DFS Visited: {node}")
    return 0


if __name__ == "__main__":
    sys.exit(main())