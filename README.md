# parallab

Classic algorithms, each in a sequential form and a thread-parallel form,
with command-line tools that run and time them:

- **Graphs** – breadth-first and depth-first traversal over an undirected
  adjacency list, and an adjacency-matrix `Graph` with iterative DFS, a
  parallel DFS, a lock-based parallel DFS, a single-source shortest-path
  search by repeated relaxation (sequential and parallel) and path
  reconstruction.
- **Sorting** – bubble sort, odd-even transposition sort and merge sort,
  each with a parallel variant. All sorts return a new list.
- **Reductions** – sum, minimum, maximum and average of integer sequences,
  sequential and parallel.

The parallel variants spread their work over a
`concurrent.futures.ThreadPoolExecutor`. Where a `threads` argument is
`None`, the number of CPUs is used; fewer than one thread raises
`ValueError`. No third-party packages are needed.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `parallab-traversal` | Builds a small sample graph and prints the order in which BFS and DFS visit its nodes from node 0. |
| `parallab-graph-bench [PATH]` | Reads an adjacency matrix (by default from `input.txt`) and times sequential DFS and shortest-path search, then the parallel versions with 1, 2, 4, 8, 16 and 32 threads. |
| `parallab-sort [--threads N]` | Asks for a count and the elements on standard input, then prints them after the parallel bubble sort and the parallel merge sort. |
| `parallab-bubble-bench [LENGTH RAND_MAX] [--seed S] [--threads N]` | Times sequential and parallel odd-even bubble sort on a random array (16 threads by default). |
| `parallab-merge-bench [LENGTH RAND_MAX] [--seed S] [--threads N]` | Times sequential and parallel merge sort on a random array (16 threads by default). |
| `parallab-reduce [--threads N]` | Asks for a count and the elements, then prints their sum, maximum, minimum and average. |
| `parallab-reduce-bench [--seed S] [--threads N]` | Asks for an array length and a maximum random value, then prints and times sequential and parallel min, max, sum and (truncated) average. |

The two sorting benchmarks take the array length and the maximum random
value as arguments; without them they ask for both on standard input:

```
parallab-bubble-bench 50 20
parallab-merge-bench 50 20 --seed 1 --threads 4
```

Random arrays hold integers in `[0, RAND_MAX)`; `--seed` makes them
repeatable. Malformed or missing input is reported on standard error and the
command exits with status 1.

### Graph input format

The input file for `parallab-graph-bench` holds one row of the adjacency
matrix per line, values separated by whitespace. A value greater than zero
is an edge, and its value is the edge weight:

```
0 1 4 0
1 0 2 5
4 2 0 1
0 5 1 0
```

A file that cannot be read is reported as an error.

## Library use

```python
from parallab.graph import Graph, import_from_file
from parallab.reduction import total, maximum, minimum, average
from parallab.sorting import parallel_merge_sort
from parallab.traversal import AdjacencyList

graph = Graph([[0, 1, 4], [1, 0, 2], [4, 2, 0]])
origins, costs = graph.dijkstra(0)          # unreached nodes get -1
print(costs)                                # [0, 1, 3]
print(graph.reconstruct_path(0, 2, origins))  # [0, 1, 2]
print(graph.dfs(0), graph.pdfs(0, threads=2))

tree = AdjacencyList()
for u, v in [(0, 1), (0, 2), (1, 3)]:
    tree.add_edge(u, v)
print(tree.bfs(0), tree.dfs(0))

values = [4, 8, 15, 16, 23, 42]
print(total(values), maximum(values), minimum(values), average(values))
print(parallel_merge_sort([5, 3, 9, 1], threads=2))
```

The modules:

- `parallab.graph` – `Graph` (`edge_exists`, `size`, `dfs`, `pdfs`,
  `pdfs_with_locks`, `dijkstra`, `parallel_dijkstra`, `reconstruct_path`)
  and `import_from_file`. The traversals return the visit order and mark an
  optional `visited` list in place.
- `parallab.traversal` – `AdjacencyList` with `add_edge`, `bfs` and `dfs`.
- `parallab.sorting` – `bubble_sort`, `parallel_bubble_sort`,
  `odd_even_sort`, `parallel_odd_even_sort`, `merge` (in place, on two
  adjacent sorted runs), `merge_sort` and `parallel_merge_sort` (ranges up
  to `cutoff`, 1000 by default, are sorted concurrently).
- `parallab.reduction` – `total`, `maximum`, `minimum`, `average`,
  `integer_average` (truncated toward zero) and their `parallel_`
  counterparts. All but `total` raise `ValueError` on an empty sequence.
- `parallab.timing` – `bench_traverse`, which runs a callable once and
  returns the elapsed whole milliseconds as a string.

## Limits

The parallel variants use threads, so on an interpreter with a global lock
they show the structure of the parallel algorithms rather than a speed-up;
the benchmark timings reflect that.