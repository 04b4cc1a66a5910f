import io
import re

from parallab.graph import Graph
from parallab.graph_bench import THREAD_COUNTS, full_bench, main

TIMING_LINE = re.compile(r"^(Sequential|Parallel) iterative (DFS|BFS): \d+ms$")


def _sample_graph():
    return Graph([[0, 1, 0], [1, 0, 2], [0, 2, 0]])


def test_full_bench_report_structure():
    out = io.StringIO()
    full_bench(_sample_graph(), out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Number of nodes: 3"
    assert lines[2] == "\tExecution 1"
    timing = [line for line in lines if line.endswith("ms")]
    assert len(timing) == 2 + 2 * len(THREAD_COUNTS)
    assert all(TIMING_LINE.match(line) for line in timing)


def test_full_bench_lists_every_thread_count():
    out = io.StringIO()
    full_bench(_sample_graph(), out)
    using = [line for line in out.getvalue().splitlines() if line.startswith("Using")]
    assert using == [f"Using {n} threads..." for n in THREAD_COUNTS]


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("0 1\n1 0\n")
    assert main([str(path)]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Number of nodes: 2\n")
    assert captured.err == ""


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 0
    captured = capsys.readouterr()
    assert "Error: Input file does not exist or is not readable." in captured.err
    assert captured.out == ""