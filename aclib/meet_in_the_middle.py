"""0/1 knapsack by enumerating both halves of the items."""

from __future__ import annotations

from bisect import bisect_right
from itertools import accumulate
from typing import Sequence


def _half_table(c: int, w: Sequence[int], v: Sequence[int]) -> list[tuple[int, int]]:
    """Sorted ``(weight, best value at exactly that weight)`` over subsets within ``c``."""
    subsets = [(0, 0)]
    for wi, vi in zip(w, v):
        subsets += [(sw + wi, sv + vi) for sw, sv in subsets]
    best: dict[int, int] = {}
    for weight, value in subsets:
        if weight > c:
            continue
        if weight not in best or value > best[weight]:
            best[weight] = value
    return sorted(best.items())


def knapsack_half_enumerate(n: int, c: int, w: Sequence[int], v: Sequence[int]) -> int:
    """Best total value of items ``0..n`` within capacity ``c``; 0 if nothing fits."""
    half = n // 2
    first = _half_table(c, w[:half], v[:half])
    second = _half_table(c, w[half:n], v[half:n])
    second_weights = [weight for weight, _ in second]
    second_best = list(accumulate((value for _, value in second), max))
    result = 0
    for weight, value in first:
        position = bisect_right(second_weights, c - weight)
        if position:
            result = max(result, value + second_best[position - 1])
    return result