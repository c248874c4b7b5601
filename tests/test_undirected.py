import io
from itertools import combinations

import pytest

from labsuite.undirected import Graph, main


def _graph(vertices, edges):
    graph = Graph(vertices)
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


def test_render_format():
    graph = _graph(3, [(0, 1), (0, 2)])
    assert graph.render() == "Vertex 0: 1 2\nVertex 1: 0\nVertex 2: 0"


def test_add_edge_is_symmetric():
    graph = _graph(4, [(2, 1)])
    assert graph.edges == {(1, 2)}
    assert graph.is_reachable(1, 2) and graph.is_reachable(2, 1)


def test_remove_edge():
    graph = _graph(3, [(0, 1), (1, 2)])
    graph.remove_edge(1, 0)
    assert graph.edges == {(1, 2)}


def test_union_holds_edges_of_both():
    first = _graph(3, [(0, 1), (1, 2)])
    second = _graph(5, [(3, 4), (0, 1)])
    combined = first.union(second)
    assert combined.vertices == 5
    assert combined.edges == first.edges | second.edges
    assert (first | second).edges == combined.edges


def test_intersection_holds_common_edges():
    first = _graph(4, [(0, 1), (1, 2), (2, 3)])
    second = _graph(6, [(1, 2), (2, 3), (4, 5)])
    common = first.intersection(second)
    assert common.vertices == 6
    assert common.edges == first.edges & second.edges
    assert (first & second).edges == common.edges


def test_complement_partitions_pairs():
    graph = _graph(5, [(0, 1), (1, 3), (2, 4)])
    other = graph.complement()
    assert other.edges.isdisjoint(graph.edges)
    assert other.edges | graph.edges == set(combinations(range(5), 2))


def test_complement_twice_restores_graph():
    graph = _graph(4, [(0, 3), (1, 2)])
    assert (~~graph).edges == graph.edges


def test_reachability():
    graph = _graph(6, [(0, 1), (1, 2), (3, 4)])
    assert graph.is_reachable(0, 2) is True
    assert graph.is_reachable(2, 0) is True
    assert graph.is_reachable(0, 4) is False
    assert graph.is_reachable(5, 5) is True
    assert graph.is_reachable(0, 5) is False


def test_vertex_out_of_range():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)
    with pytest.raises(IndexError):
        graph.is_reachable(-1, 0)


def test_main_session(monkeypatch, capsys):
    commands = "Graph 3 1 0 1 isReachable 0 1 isReachable 0 2 complement printGraph end"
    monkeypatch.setattr("sys.stdin", io.StringIO(commands))
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Yes", "No", "Vertex 0: 2", "Vertex 1: 2", "Vertex 2: 0 1"]


def test_main_union_matches_library(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Graph 2 0 union Graph 3 1 1 2 printGraph end"))
    main([])
    expected = _graph(2, []).union(_graph(3, [(1, 2)])).render()
    assert capsys.readouterr().out == expected + "\n"


def test_main_graph_command_keeps_earlier_edges(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Graph 2 1 0 1 Graph 3 1 1 2 printGraph end"))
    main([])
    expected = _graph(3, [(0, 1), (1, 2)]).render()
    assert capsys.readouterr().out == expected + "\n"