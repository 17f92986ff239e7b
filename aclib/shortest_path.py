"""Dijkstra shortest paths over neighbour lists with a configurable cost step."""

from __future__ import annotations

import heapq
import operator
from typing import Callable, Hashable, Mapping, Sequence

Neighbors = Mapping[Hashable, Sequence[tuple[Hashable, object]]]


def _search(
    neighbors: Neighbors,
    start: Hashable,
    goal: Hashable | None,
    next_cost: Callable | None,
) -> tuple[dict, bool]:
    """Run Dijkstra from ``start``; stop early at ``goal``.

    Returns the cost table and whether ``goal`` was reached. When reached, the
    table holds only the goal and its cost.
    """
    step = operator.add if next_cost is None else next_cost
    costs: dict = {start: 0}
    heap = [(0, start)]
    while heap:
        cost, node = heapq.heappop(heap)
        if goal is not None and node == goal:
            return {node: cost}, True
        if node in costs and cost > costs[node]:
            continue
        for nei, weight in neighbors.get(node, ()):
            candidate = step(cost, weight)
            if nei not in costs or candidate < costs[nei]:
                heapq.heappush(heap, (candidate, nei))
                costs[nei] = candidate
    return costs, False


def dijkstra_one_to_one(
    neighbors: Neighbors,
    start: Hashable,
    end: Hashable,
    next_cost: Callable | None = None,
):
    """Least cost from ``start`` to ``end``, or None if ``end`` cannot be reached.

    ``neighbors`` maps a node to ``(neighbour, weight)`` pairs; ``next_cost(cost, weight)``
    gives the cost after an edge and defaults to ``cost + weight``.
    """
    costs, reached = _search(neighbors, start, end, next_cost)
    return costs[end] if reached else None


def dijkstra_one_to_many(
    neighbors: Neighbors,
    start: Hashable,
    goal: Hashable | None = None,
    next_cost: Callable | None = None,
) -> dict:
    """Least costs from ``start``.

    When ``goal`` is reached the result is ``{goal: cost}``; otherwise (including
    ``goal`` None or absent) it maps every reachable node to its cost.
    Raises KeyError when ``start`` has no entry in ``neighbors``.
    """
    if start not in neighbors:
        raise KeyError(f"start node {start!r} must have outgoing edges")
    costs, _ = _search(neighbors, start, goal, next_cost)
    return costs