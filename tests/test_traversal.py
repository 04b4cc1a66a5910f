import pytest

from parallab.traversal import SAMPLE_EDGES, AdjacencyList, main


@pytest.fixture
def sample():
    graph = AdjacencyList()
    for u, v in SAMPLE_EDGES:
        graph.add_edge(u, v)
    return graph


def test_bfs_sample_order(sample):
    assert sample.bfs(0) == [0, 1, 2, 3, 4, 5]


def test_dfs_sample_order(sample):
    assert sample.dfs(0) == [0, 1, 3, 4, 2, 5]


def test_traversals_visit_each_node_once(sample):
    for order in (sample.bfs(3), sample.dfs(3)):
        assert len(order) == len(set(order))
        assert set(order) == {0, 1, 2, 3, 4, 5}
        assert order[0] == 3


def test_disconnected_component_not_reached(sample):
    sample.add_edge(10, 11)
    assert 10 not in sample.bfs(0)
    assert sample.dfs(10) == [10, 11]


def test_isolated_start():
    graph = AdjacencyList()
    assert graph.bfs(7) == [7]
    assert graph.dfs(7) == [7]


def test_deep_chain_does_not_recurse():
    graph = AdjacencyList()
    for node in range(5000):
        graph.add_edge(node, node + 1)
    assert graph.dfs(0) == list(range(5001))


def test_main_prints_both_traversals(sample, capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "--- Parallel BFS ---"
    split = lines.index("--- Parallel DFS ---")
    bfs_nodes = [int(line.split(": ")[1]) for line in lines[1:split] if line]
    dfs_nodes = [int(line.split(": ")[1]) for line in lines[split + 1:]]
    assert bfs_nodes == sample.bfs(0)
    assert dfs_nodes == sample.dfs(0)
    assert lines[split - 1] == ""