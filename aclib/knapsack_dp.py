"""Dynamic-programming solutions of the 0/1 knapsack problem."""

from __future__ import annotations

from typing import Sequence


def knapsack_dp_value(n: int, c: int, w: Sequence[int], v: Sequence[int]) -> list[list[int | None]]:
    """Table of least total weight per exact total value.

    ``table[i][j]`` is the least weight of a choice among items ``0..=i`` whose
    values add up to ``j``, or None when no such choice exists.
    """
    if n < 1:
        raise ValueError("at least one item is required")
    sum_v = sum(v)
    table: list[list[int | None]] = [[None] * (sum_v + 1) for _ in range(n)]
    table[0][0] = 0
    table[0][v[0]] = w[0]
    for i in range(1, n):
        previous, row = table[i - 1], table[i]
        row[0] = 0
        for j in range(1, sum_v + 1):
            if v[i] <= j:
                taken = previous[j - v[i]]
                skipped = previous[j]
                if taken is None:
                    row[j] = skipped
                elif skipped is None:
                    row[j] = w[i] + taken
                else:
                    row[j] = min(skipped, w[i] + taken)
            else:
                row[j] = previous[j]
    return table


def knapsack_dp_value_solve(n: int, c: int, w: Sequence[int], v: Sequence[int]) -> int:
    """Best total value within capacity ``c``, using the value-indexed table."""
    table = knapsack_dp_value(n, c, w, v)
    last = table[n - 1]
    best = 0
    for j in range(sum(v)):
        weight = last[j]
        if weight is not None and weight <= c:
            best = j
    return best


def knapsack_dp_weight(n: int, c: int, w: Sequence[int], v: Sequence[int]) -> list[list[int]]:
    """Table of best total value per weight budget.

    ``table[i][j]`` is the largest value of a choice among the first ``i`` items
    whose weight is at most ``j``.
    """
    table = [[0] * (c + 1) for _ in range(n + 1)]
    for i in range(n):
        current, following = table[i], table[i + 1]
        for j in range(c + 1):
            if j >= w[i]:
                following[j] = max(current[j], current[j - w[i]] + v[i])
            else:
                following[j] = current[j]
    return table


def dp_weight_with_backtrack(n: int, c: int, w: Sequence[int], v: Sequence[int]) -> list[int]:
    """Indices of the items taken in an optimal choice, from the last item backwards."""
    table = knapsack_dp_weight(n, c, w, v)
    taken: list[int] = []
    value, weight = table[len(v)][c], c
    for i in reversed(range(len(v))):
        if value <= 0:
            break
        if value == table[i][weight]:
            continue
        taken.append(i)
        value -= v[i]
        weight -= w[i]
    return taken