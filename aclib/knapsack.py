"""0/1 knapsack solver that picks a method by problem size."""

from __future__ import annotations

from typing import Sequence

from aclib.knapsack_dp import knapsack_dp_value_solve, knapsack_dp_weight
from aclib.meet_in_the_middle import knapsack_half_enumerate

_HALF_ENUMERATE_LIMIT = 40
_WORD_LIMIT = 2**64


def knapsack(n: int, c: int, w: Sequence[int], v: Sequence[int]) -> int:
    """Best total value of items ``0..n`` with weights ``w`` and values ``v`` within capacity ``c``.

    Few items are solved by enumerating halves; otherwise a table over weights
    is used when ``n * c`` fits a machine word, else a table over values.
    """
    if n <= _HALF_ENUMERATE_LIMIT:
        return knapsack_half_enumerate(n, c, w, v)
    if n * c < _WORD_LIMIT:
        return knapsack_dp_weight(n, c, w, v)[n][c]
    return knapsack_dp_value_solve(n, c, w, v)