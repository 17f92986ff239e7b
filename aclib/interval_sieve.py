"""Segmented sieve of primes over an interval."""

from __future__ import annotations

import math


class IntervalSieve:
    """Primality table for ``[low, high]`` plus a smallest-prime table up to sqrt(high)."""

    def __init__(self, low: int, high: int) -> None:
        if low < 0 or high < low:
            raise ValueError("expected 0 <= low <= high")
        self.low = low
        self.high = high
        cap = math.isqrt(high) + 1
        self.base = list(range(cap + 1))
        self.interval = [True] * (high - low + 1)
        for i in range(2, cap + 1):
            if self.base[i] != i:
                continue
            for j in range(2 * i, cap + 1, i):
                self.base[j] = min(self.base[j], i)
            start = (low + i - 1) // i * i
            if start == i:
                start = 2 * i
            for q in range(start, high + 1, i):
                self.interval[q - low] = False

    def is_prime(self, n: int) -> bool:
        """Whether ``n`` is prime, for ``n`` in the interval or the base table."""
        if self.low <= n <= self.high:
            return self.interval[n - self.low]
        if 0 <= n < len(self.base):
            return n > 1 and self.base[n] == n
        raise ValueError(f"{n} is outside the sieved ranges")

    def primes(self) -> list[int]:
        """Primes found in ``[low, high]``."""
        return [n for n in range(self.low, self.high + 1) if self.is_prime(n)]