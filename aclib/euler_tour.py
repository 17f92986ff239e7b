"""Euler tour of a graph: entry and exit times of a depth-first search."""

from __future__ import annotations

from typing import Iterable, Mapping


def undirected_neighbors(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, set[int]]:
    """Neighbour sets of nodes ``0..n`` for the undirected ``edges``."""
    neighbors: dict[int, set[int]] = {i: set() for i in range(n)}
    for u, v in edges:
        if u not in neighbors or v not in neighbors:
            raise KeyError(f"edge ({u}, {v}) refers to an unknown node")
        neighbors[u].add(v)
        neighbors[v].add(u)
    return neighbors


def euler_tour(outgoings: Mapping[int, Iterable[int]], start: int) -> tuple[list[int], list[int]]:
    """Visit and leave times of every node in a depth-first search from ``start``.

    Each step to a new node and each return advances the clock by one.
    Nodes never reached keep time 0.
    """
    size = len(outgoings)
    visit = [0] * size
    leave = [0] * size
    visited = [False] * size
    time = 0
    visited[start] = True
    stack = [(start, iter(outgoings[start]))]
    while stack:
        node, pending = stack[-1]
        for following in pending:
            if not visited[following]:
                time += 1
                visited[following] = True
                visit[following] = time
                stack.append((following, iter(outgoings[following])))
                break
        else:
            time += 1
            leave[node] = time
            stack.pop()
    return visit, leave