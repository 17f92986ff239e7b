"""Divisor enumeration in O(sqrt(n))."""

from __future__ import annotations

from itertools import count, groupby, takewhile


def divisors_pair(n: int) -> list[tuple[int, int]]:
    """Pairs ``(d, n // d)`` with ``d * d <= n``, in increasing ``d``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    candidates = takewhile(lambda i: i * i <= n, count(1))
    return [(i, n // i) for i in candidates if n % i == 0]


def divisors(n: int) -> list[int]:
    """All divisors of ``n`` in increasing order."""
    pairs = divisors_pair(n)
    ordered = [small for small, _ in pairs] + [large for _, large in reversed(pairs)]
    return [value for value, _ in groupby(ordered)]