[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "parallab"
version = "0.1.0"
description = "Graph traversal, sorting and reduction routines in sequential and thread-parallel forms, with small benchmark commands"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "bfs",
    "dfs",
    "dijkstra",
    "sorting",
    "merge sort",
    "bubble sort",
    "odd-even sort",
    "reduction",
    "parallel",
    "threads",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parallab-graph-bench = "parallab.graph_bench:main"
parallab-traversal = "parallab.traversal:main"
parallab-sort = "parallab.sort_cli:interactive_main"
parallab-bubble-bench = "parallab.sort_cli:bubble_main"
parallab-merge-bench = "parallab.sort_cli:merge_main"
parallab-reduce = "parallab.reduction_cli:main"
parallab-reduce-bench = "parallab.reduction_cli:bench_main"

[tool.setuptools.packages.find]
include = ["parallab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
