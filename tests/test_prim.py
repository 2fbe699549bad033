import io

import pytest

from algolab.prim import format_mst, main, prim_mst

EXAMPLE = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def test_worked_example():
    assert prim_mst(EXAMPLE) == [None, 0, 1, 0, 1]


def test_tree_uses_existing_edges_and_reaches_root():
    parent = prim_mst(EXAMPLE)
    for vertex, p in enumerate(parent):
        if p is None:
            assert vertex == 0
            continue
        assert EXAMPLE[vertex][p] != 0
        seen = {vertex}
        while p is not None:
            assert p not in seen
            seen.add(p)
            p = parent[p]


def test_format_example():
    text = format_mst(prim_mst(EXAMPLE), EXAMPLE)
    lines = text.splitlines()
    assert lines[0] == "Edge \tWeight"
    assert lines[1] == "0 - 1 \t2 "
    assert len(lines) == 5


def test_single_vertex():
    assert prim_mst([[0]]) == [None]


def test_empty_graph():
    assert prim_mst([]) == []


def test_disconnected_graph_rejected():
    graph = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    with pytest.raises(ValueError):
        prim_mst(graph)


def test_non_square_rejected():
    with pytest.raises(ValueError):
        prim_mst([[0, 1]])


def test_main_output(monkeypatch, capsys):
    rows = "\n".join(" ".join(str(w) for w in row) for row in EXAMPLE)
    monkeypatch.setattr("sys.stdin", io.StringIO(f"5\n{rows}\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Minimum Spanning Tree using Prim's Algorithm:" in out
    assert out.endswith(format_mst(prim_mst(EXAMPLE), EXAMPLE))