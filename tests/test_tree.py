import pytest

from aclib.euler_tour import undirected_neighbors
from aclib.tree import diameter_of_tree


def test_tree_diameter():
    neighbors = undirected_neighbors(5, [(0, 1), (2, 0), (0, 3), (3, 4)])
    assert diameter_of_tree(neighbors) == 3


def test_path_diameter():
    neighbors = undirected_neighbors(6, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)])
    assert diameter_of_tree(neighbors) == 5


def test_empty_tree():
    with pytest.raises(ValueError):
        diameter_of_tree({})


def test_one_node_tree():
    assert diameter_of_tree({0: set()}) == 0