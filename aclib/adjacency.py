"""Adjacency-list graphs with breadth/depth-first search and shortest paths."""

from __future__ import annotations

import heapq
from collections import deque
from itertools import count
from typing import Iterable


class AdjacencyList:
    """A directed or undirected graph on integer nodes, optionally with edge weights."""

    def __init__(
        self,
        neighbors: dict[int, set[int]],
        weights: dict[tuple[int, int], object] | None = None,
        directed: bool = False,
    ) -> None:
        self._neighbors = neighbors
        self._weights = weights
        self.directed = directed

    @property
    def weighted(self) -> bool:
        return self._weights is not None

    @staticmethod
    def _empty(n: int) -> dict[int, set[int]]:
        return {u: set() for u in range(n)}

    @staticmethod
    def _link(neighbors: dict[int, set[int]], u: int, v: int) -> None:
        if u not in neighbors:
            raise KeyError(f"unexpected node: {u}")
        if v not in neighbors:
            raise KeyError(f"unexpected node: {v}")
        neighbors[u].add(v)

    @classmethod
    def unweighted_undirected(cls, n: int, edges: Iterable[tuple[int, int]]) -> AdjacencyList:
        """Graph on nodes ``0..n`` where each ``(u, v)`` joins both ways."""
        neighbors = cls._empty(n)
        for u, v in edges:
            cls._link(neighbors, u, v)
            cls._link(neighbors, v, u)
        return cls(neighbors, None, directed=False)

    @classmethod
    def unweighted_directed(cls, n: int, edges: Iterable[tuple[int, int]]) -> AdjacencyList:
        """Graph on nodes ``0..n`` where each ``(u, v)`` goes from ``u`` to ``v``."""
        neighbors = cls._empty(n)
        for u, v in edges:
            cls._link(neighbors, u, v)
        return cls(neighbors, None, directed=True)

    @classmethod
    def weighted_undirected(
        cls, n: int, edges: Iterable[tuple[int, int, object]]
    ) -> AdjacencyList:
        """Graph on nodes ``0..n`` where each ``(u, v, w)`` joins both ways with weight ``w``."""
        neighbors = cls._empty(n)
        weights: dict[tuple[int, int], object] = {}
        for u, v, w in edges:
            cls._link(neighbors, u, v)
            cls._link(neighbors, v, u)
            weights[u, v] = w
            weights[v, u] = w
        return cls(neighbors, weights, directed=False)

    @classmethod
    def weighted_directed(
        cls, n: int, edges: Iterable[tuple[int, int, object]]
    ) -> AdjacencyList:
        """Graph on nodes ``0..n`` where each ``(u, v, w)`` goes from ``u`` to ``v``."""
        neighbors = cls._empty(n)
        weights: dict[tuple[int, int], object] = {}
        for u, v, w in edges:
            cls._link(neighbors, u, v)
            weights[u, v] = w
        return cls(neighbors, weights, directed=True)

    def neighbors(self, node: int) -> set[int]:
        """Nodes reachable from ``node`` by one edge."""
        return self._neighbors[node]

    def weight(self, u: int, v: int):
        """Weight of the edge from ``u`` to ``v``."""
        if self._weights is None:
            raise TypeError("graph has no edge weights")
        return self._weights[u, v]

    def __len__(self) -> int:
        return len(self._neighbors)

    def __getitem__(self, key):
        """``graph[node]`` gives neighbours; ``graph[u, v]`` gives an edge weight."""
        if isinstance(key, tuple):
            return self.weight(*key)
        return self.neighbors(key)

    def add_node(self) -> int:
        """Add a node numbered by the current node count and return its number."""
        index = len(self._neighbors)
        self._neighbors[index] = set()
        return index

    def remove_node(self, node: int) -> set[int] | None:
        """Remove ``node`` and return its neighbours, or None if it was absent.

        Other node numbers are left unchanged.
        """
        return self._neighbors.pop(node, None)

    def bfs(self, start: int) -> list[int]:
        """Nodes in breadth-first order from ``start``."""
        queue = deque([start])
        touched = {start}
        order: list[int] = []
        while queue:
            node = queue.popleft()
            for nei in self.neighbors(node):
                if nei not in touched:
                    touched.add(nei)
                    queue.append(nei)
            order.append(node)
        return order

    def dfs(self, start: int) -> list[int]:
        """Nodes in depth-first preorder from ``start``."""
        visited = {start}
        order = [start]
        stack = [iter(self.neighbors(start))]
        while stack:
            for nei in stack[-1]:
                if nei not in visited:
                    visited.add(nei)
                    order.append(nei)
                    stack.append(iter(self.neighbors(nei)))
                    break
            else:
                stack.pop()
        return order

    def dijkstra(self, start: int, goal: int) -> tuple[object | None, list[int]]:
        """Shortest distance from ``start`` to ``goal`` and the route taken.

        Unweighted graphs count hops. Returns ``(None, [])`` when ``goal`` is
        unreachable or ``start`` is not a node.
        """
        if start >= len(self):
            return None, []
        distance: dict[int, object] = {start: 0}
        prev: dict[int, int] = {}
        tie = count()
        heap = [(0, next(tie), start)]
        while heap:
            cost, _, current = heapq.heappop(heap)
            if current == goal:
                route = [goal]
                while route[-1] in prev:
                    route.append(prev[route[-1]])
                if route[-1] != start:
                    route.append(start)
                route.reverse()
                return cost, route
            if cost > distance[current]:
                continue
            for nei in self.neighbors(current):
                step = 1 if self._weights is None else self._weights[current, nei]
                next_dist = distance[current] + step
                if nei not in distance or next_dist < distance[nei]:
                    distance[nei] = next_dist
                    prev[nei] = current
                    heapq.heappush(heap, (next_dist, next(tie), nei))
        return None, []