"""Bipartiteness test with a union-find over doubled vertices."""

from __future__ import annotations

from typing import Iterable


class _UnionFind:
    def __init__(self, size: int) -> None:
        self.parent = list(range(size))
        self.rank = [0] * size

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, a: int, b: int) -> None:
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1


def is_bipartite(n: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether the undirected graph on nodes ``0..n`` with ``edges`` is bipartite."""
    uf = _UnionFind(2 * n)
    for u, v in edges:
        uf.union(u, n + v)
        uf.union(n + u, v)
    return all(uf.find(v) != uf.find(v + n) for v in range(n))