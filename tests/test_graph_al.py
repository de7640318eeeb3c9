import math

import pytest

from gridnav.graph_al import AdjacencyListGraph, State, extract_path


def _sample_graph():
    g = AdjacencyListGraph(6)
    g.add_directed_edge(0, 1, 4)
    g.add_directed_edge(0, 2, 1)
    g.add_directed_edge(2, 1, 2)
    g.add_directed_edge(1, 3, 5)
    g.add_directed_edge(2, 3, 8)
    g.add_directed_edge(3, 4, 3)
    return g


def test_edges_weights_and_degree():
    g = _sample_graph()
    assert g.has_edge(0, 1)
    assert not g.has_edge(1, 0)
    assert g.edge_weight(2, 3) == 8
    assert g.edge_weight(4, 0) == 0
    assert g.degree(0) == 2
    assert g.degree(5) == 0


def test_duplicate_edge_keeps_first_weight():
    g = AdjacencyListGraph(3)
    g.add_directed_edge(0, 1, 7)
    g.add_directed_edge(0, 1, 9)
    assert g.edge_weight(0, 1) == 7
    assert g.degree(0) == 1


def test_default_weight_is_one():
    g = AdjacencyListGraph(2)
    g.add_directed_edge(0, 1)
    assert g.edge_weight(0, 1) == 1


def test_out_of_range_queries():
    g = AdjacencyListGraph(2)
    assert g.edge_weight(5, 0) == 0
    assert not g.has_edge(5, 0)
    with pytest.raises(IndexError):
        g.add_directed_edge(0, 2)
    with pytest.raises(IndexError):
        g.degree(3)


def test_remove_edges():
    g = AdjacencyListGraph(3)
    g.add_undirected_edge(0, 1, 2)
    g.remove_directed_edge(0, 1)
    assert not g.has_edge(0, 1)
    assert g.has_edge(1, 0)
    g.remove_undirected_edge(0, 1)
    assert not g.has_edge(1, 0)
    assert g.degree(1) == 0


def test_loops_and_undirected():
    g = AdjacencyListGraph(3)
    g.add_undirected_edge(0, 1, 3)
    assert g.is_undirected()
    assert not g.has_loops()
    g.add_directed_edge(2, 2)
    assert g.has_loops()
    assert not g.is_undirected()


def test_asymmetric_weights_not_undirected():
    g = AdjacencyListGraph(2)
    g.add_directed_edge(0, 1, 1)
    g.add_directed_edge(1, 0, 2)
    assert not g.is_undirected()


def test_neighbors_newest_first():
    g = AdjacencyListGraph(4)
    g.add_directed_edge(0, 1)
    g.add_directed_edge(0, 3)
    g.add_directed_edge(0, 2)
    assert list(g.neighbors(0)) == [2, 3, 1]


def test_bfs_invariants():
    g = _sample_graph()
    state, distance, predecessor = g.bfs(0)
    assert distance[0] == 0
    assert predecessor[0] == -1
    for v in (1, 2, 3, 4):
        assert state[v] is State.FINISHED
        assert g.has_edge(predecessor[v], v)
        assert distance[v] == distance[predecessor[v]] + 1
    assert state[5] is State.UNVISITED
    assert predecessor[5] == -1


def test_bfs_bad_source():
    g = AdjacencyListGraph(3)
    with pytest.raises(ValueError):
        g.bfs(3)
    with pytest.raises(ValueError):
        g.bfs(-1)


def test_dfs_times_are_a_parenthesis_structure():
    g = _sample_graph()
    discovered, finished, predecessor = g.dfs()
    times = sorted(discovered + finished)
    assert times == list(range(1, 2 * g.n + 1))
    for u in range(g.n):
        assert discovered[u] < finished[u]
        p = predecessor[u]
        if p != -1:
            assert g.has_edge(p, u)
            assert discovered[p] < discovered[u] < finished[u] < finished[p]


def test_dijkstra_matches_bellman_ford():
    g = _sample_graph()
    d1, p1 = g.dijkstra(0)
    d2, _ = g.bellman_ford(0)
    assert d1 == d2
    assert d1[0] == 0
    assert math.isinf(d1[5])
    for v in range(1, 5):
        assert d1[v] == d1[p1[v]] + g.edge_weight(p1[v], v)


def test_dijkstra_prefers_cheaper_route():
    g = _sample_graph()
    distance, predecessor = g.dijkstra(0)
    assert extract_path(1, predecessor) == [0, 2, 1]
    assert distance[1] == g.edge_weight(0, 2) + g.edge_weight(2, 1)


def test_bellman_ford_negative_edge():
    g = AdjacencyListGraph(3)
    g.add_directed_edge(0, 1, 5)
    g.add_directed_edge(0, 2, 2)
    g.add_directed_edge(1, 2, -4)
    distance, predecessor = g.bellman_ford(0)
    assert distance[2] == 1
    assert predecessor[2] == 1


def test_bellman_ford_negative_cycle():
    g = AdjacencyListGraph(3)
    g.add_directed_edge(0, 1, 1)
    g.add_directed_edge(1, 2, -3)
    g.add_directed_edge(2, 1, 1)
    with pytest.raises(ValueError):
        g.bellman_ford(0)


def test_extract_path_runs_from_source():
    g = _sample_graph()
    _, predecessor = g.dijkstra(0)
    path = extract_path(4, predecessor)
    assert path[0] == 0
    assert path[-1] == 4
    assert all(g.has_edge(a, b) for a, b in zip(path, path[1:]))


def test_extract_path_of_source_alone():
    assert extract_path(0, [-1, 0]) == [0]


def test_display(capsys):
    g = AdjacencyListGraph(2)
    g.add_directed_edge(0, 1, 2.5)
    g.display()
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "0: (v: 1, w: 2.5) "
    assert out.splitlines()[1] == "1: "