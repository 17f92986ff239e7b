from collections import defaultdict

import pytest

from aclib.shortest_path import dijkstra_one_to_many, dijkstra_one_to_one


def _undirected(edges):
    neighbors = defaultdict(list)
    for u, v, w in edges:
        neighbors[u].append((v, w))
        neighbors[v].append((u, w))
    return dict(neighbors)


def _directed(edges):
    neighbors = defaultdict(list)
    for u, v, w in edges:
        neighbors[u].append((v, w))
    return dict(neighbors)


UNIT_EDGES = [(0, 1, 1), (1, 2, 1), (2, 0, 1), (0, 3, 1), (3, 4, 1), (4, 0, 1)]


def test_one_to_one_unweighted_undirected():
    g = _undirected(UNIT_EDGES)
    assert dijkstra_one_to_one(g, 1, 3, lambda c, w: c + w) == 2
    assert dijkstra_one_to_one(g, 1, 4, lambda c, w: c + w) == 2
    assert dijkstra_one_to_one(g, 3, 4, lambda c, w: c + w) == 1
    assert dijkstra_one_to_one(g, 1, 5, lambda c, w: c + w) is None
    assert dijkstra_one_to_one(g, 5, 1, lambda c, w: c + w) is None


def test_one_to_one_unweighted_directed():
    g = _directed([(0, 1, 1), (1, 2, 1), (0, 2, 1), (0, 3, 1), (3, 4, 1), (0, 4, 1)])
    assert dijkstra_one_to_one(g, 1, 3) is None
    assert dijkstra_one_to_one(g, 0, 4) == 1
    assert dijkstra_one_to_one(g, 3, 4) == 1
    assert dijkstra_one_to_one(g, 1, 5) is None
    assert dijkstra_one_to_one(g, 5, 1) is None


def test_one_to_one_weighted_undirected():
    g = _undirected([(0, 1, 1), (1, 2, 3), (2, 0, 2), (0, 3, 1), (3, 4, 7), (4, 0, 2)])
    assert dijkstra_one_to_one(g, 1, 3) == 2
    assert dijkstra_one_to_one(g, 1, 4) == 3
    assert dijkstra_one_to_one(g, 3, 4) == 3
    assert dijkstra_one_to_one(g, 1, 5) is None
    assert dijkstra_one_to_one(g, 5, 1) is None


def test_one_to_one_weighted_directed():
    g = _directed([(0, 1, 1), (1, 2, 3), (0, 2, 5), (0, 3, 3), (3, 4, 7), (0, 4, 4)])
    assert dijkstra_one_to_one(g, 1, 3) is None
    assert dijkstra_one_to_one(g, 0, 4) == 4
    assert dijkstra_one_to_one(g, 0, 2) == 4
    assert dijkstra_one_to_one(g, 3, 4) == 7
    assert dijkstra_one_to_one(g, 1, 5) is None
    assert dijkstra_one_to_one(g, 5, 1) is None


def test_one_to_one_custom_cost():
    g = _undirected(UNIT_EDGES)
    assert dijkstra_one_to_one(g, 1, 3, lambda c, w: c + 2 * w) == 4


def test_one_to_many_unweighted_undirected():
    g = _undirected(UNIT_EDGES)
    assert dijkstra_one_to_many(g, 1, 3, lambda c, w: c + w) == {3: 2}
    assert dijkstra_one_to_many(g, 1, None, lambda c, w: c + w) == {
        0: 1, 1: 0, 2: 1, 3: 2, 4: 2,
    }
    assert dijkstra_one_to_many(g, 3, 4, lambda c, w: c + w)[4] == 1
    assert dijkstra_one_to_many(g, 1, 5, lambda c, w: c + w) == {
        0: 1, 1: 0, 2: 1, 3: 2, 4: 2,
    }


def test_one_to_many_default_goal_and_cost():
    g = _undirected(UNIT_EDGES)
    assert dijkstra_one_to_many(g, 0) == {0: 0, 1: 1, 2: 1, 3: 1, 4: 1}


def test_one_to_many_missing_start_raises():
    g = _undirected(UNIT_EDGES)
    with pytest.raises(KeyError):
        dijkstra_one_to_many(g, 5, 1, lambda c, w: c + w)