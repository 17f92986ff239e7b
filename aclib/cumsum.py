"""One-dimensional cumulative sums with O(1) interval queries."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable


class CumSum:
    """Prefix sums over a sequence; ``prefix_sums[i]`` is the sum of the first ``i`` items."""

    def __init__(self, data: Iterable) -> None:
        self.prefix_sums = list(accumulate(data, initial=0))

    def __len__(self) -> int:
        return len(self.prefix_sums) - 1

    def indices(self, start: int | None = None, stop: int | None = None) -> tuple[int, int]:
        """Turn a half-open range ``[start, stop)`` into prefix-sum indices.

        ``None`` means unbounded; ``stop`` is clamped to the data length.
        """
        last = len(self.prefix_sums) - 1
        left = 0 if start is None else start
        right = last if stop is None else min(stop, last)
        if left < 0 or right < 0:
            raise IndexError("range bounds must not be negative")
        if left > last:
            raise IndexError(f"start {left} is out of range for length {last}")
        return left, right

    def interval_sum(self, start: int | None = None, stop: int | None = None):
        """Sum of the items in the half-open range ``[start, stop)``."""
        left, right = self.indices(start, stop)
        return self.prefix_sums[right] - self.prefix_sums[left]