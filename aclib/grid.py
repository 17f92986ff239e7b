"""Build a graph from a grid map of roads and walls."""

from __future__ import annotations

from typing import Sequence

from aclib.adjacency import AdjacencyList

ROAD = "."
WALL = "#"


def field_to_directed_grid(
    shape: tuple[int, int], field: Sequence[Sequence[str]]
) -> tuple[AdjacencyList, dict[tuple[int, int], int]]:
    """Directed graph of unit-weight moves between adjacent road cells.

    ``field`` holds ``'.'`` for road and ``'#'`` for wall. Returns the graph and a
    map from ``(row, column)`` to node number, numbered in row-major order.
    Raises ValueError on any other character.
    """
    h, w = shape
    nodes: dict[tuple[int, int], int] = {}
    for i, row in enumerate(field):
        for j, cell in enumerate(row):
            if cell == ROAD:
                nodes[i, j] = len(nodes)
            elif cell != WALL:
                raise ValueError(f"unexpected cell {cell!r} at ({i}, {j})")
    edges = []
    for (i, j), node in nodes.items():
        steps = []
        if i > 0:
            steps.append((i - 1, j))
        if i < h - 1:
            steps.append((i + 1, j))
        if j > 0:
            steps.append((i, j - 1))
        if j < w - 1:
            steps.append((i, j + 1))
        for ni, nj in steps:
            if field[ni][nj] != WALL:
                edges.append((node, nodes[ni, nj], 1))
    return AdjacencyList.weighted_directed(len(nodes), edges), nodes