"""Tree measurements."""

from __future__ import annotations

from collections import deque
from typing import Hashable, Iterable, Mapping


def _depths(neighbors: Mapping[Hashable, Iterable[Hashable]], root: Hashable) -> dict:
    depths = {root: 0}
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for nei in neighbors[node]:
            if nei not in depths:
                depths[nei] = depths[node] + 1
                queue.append(nei)
    return depths


def diameter_of_tree(neighbors: Mapping[Hashable, Iterable[Hashable]]) -> int:
    """Number of edges on the longest path of the tree given by its neighbour sets.

    Raises ValueError for a tree without nodes.
    """
    if not neighbors:
        raise ValueError("empty graph is invalid")
    root = next(iter(neighbors))
    first = _depths(neighbors, root)
    leaf = max(first, key=first.__getitem__)
    return max(_depths(neighbors, leaf).values())