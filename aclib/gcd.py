"""GCD and LCM of many integers by pairwise halving."""

from __future__ import annotations

import math
from typing import Callable, Sequence


def _reduce_pairwise(values: Sequence[int], combine: Callable[[int, int], int], empty: int) -> int:
    current = list(values)
    if not current:
        return empty
    while len(current) > 1:
        reduced = [combine(a, b) for a, b in zip(current[0::2], current[1::2])]
        if len(current) % 2:
            reduced.append(current[-1])
        current = reduced
    return current[0]


def gcd_recursive(values: Sequence[int]) -> int:
    """GCD of all values; 0 for an empty sequence."""
    return _reduce_pairwise(values, math.gcd, 0)


def lcm_recursive(values: Sequence[int]) -> int:
    """LCM of all values; 1 for an empty sequence."""
    return _reduce_pairwise(values, math.lcm, 1)