import io

from algolab.dfs import DirectedGraph, main


def _example_graph():
    graph = DirectedGraph()
    for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        graph.add_edge(v, w)
    return graph


def test_worked_example_order():
    assert _example_graph().dfs(2) == [2, 0, 1, 3]


def test_start_comes_first_and_no_repeats():
    order = _example_graph().dfs(0)
    assert order[0] == 0
    assert len(order) == len(set(order))


def test_isolated_start_visits_only_itself():
    assert _example_graph().dfs(7) == [7]


def test_edges_are_directed():
    graph = DirectedGraph()
    graph.add_edge(1, 2)
    assert graph.dfs(2) == [2]
    assert graph.dfs(1) == [1, 2]


def test_unreachable_vertex_not_visited():
    graph = DirectedGraph()
    graph.add_edge(0, 1)
    graph.add_edge(2, 0)
    assert 2 not in graph.dfs(0)


def test_follows_depth_before_breadth():
    graph = DirectedGraph()
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    order = graph.dfs(0)
    assert order.index(3) < order.index(2)


def test_repeated_traversals_agree():
    graph = _example_graph()
    first = graph.dfs(2)
    second = graph.dfs(2)
    assert first == [2, 0, 1, 3]
    assert second == [2, 0, 1, 3]


def test_long_chain_does_not_recurse_too_deep():
    graph = DirectedGraph()
    length = 5000
    for v in range(length):
        graph.add_edge(v, v + 1)
    order = graph.dfs(0)
    assert order == list(range(length + 1))


def test_main_worked_example(monkeypatch, capsys):
    stdin = io.StringIO("6\n0 1\n0 2\n1 2\n2 0\n2 3\n3 3\n2\n")
    monkeypatch.setattr("sys.stdin", stdin)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Following is Depth First Traversal (starting from vertex 2):" in out
    assert out.rstrip().endswith("2 0 1 3")


def test_main_truncated_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 1\n"))
    assert main([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err