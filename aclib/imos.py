"""Imos method: accumulate interval additions, then query point totals."""

from __future__ import annotations

from itertools import accumulate
from typing import Sequence


class Imos1D:
    """Totals at each time for a set of ``(start, end, value)`` half-open intervals."""

    def __init__(self, data: Sequence[tuple[int, int, object]], size: int | None = None) -> None:
        if size is None:
            length = 1 + max((end for _, end, _ in data), default=0)
        else:
            length = size + 1
        diff = [0] * length
        for start, end, value in data:
            diff[start] += value
            diff[end] -= value
        self.values = list(accumulate(diff))

    def sum_timing(self, t: int):
        """Total of all intervals covering time ``t``."""
        return self.values[t]