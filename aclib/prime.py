"""Prime enumeration and trial-division factorization."""

from __future__ import annotations

from collections import Counter
from itertools import count, takewhile


def fast_primes(n: int) -> list[int]:
    """All primes up to and including ``n``, by a linear sieve."""
    primes: list[int] = []
    is_prime = [True] * (n + 1)
    min_primes = [0] * (n + 1)
    for i in range(n + 1):
        if i < 2:
            is_prime[i] = False
        if is_prime[i]:
            primes.append(i)
            min_primes[i] = i
        for p in primes:
            if i * p > n or p > min_primes[i]:
                break
            is_prime[i * p] = False
            min_primes[i * p] = p
    return primes


def factorization(n: int) -> dict[int, int]:
    """Prime factors of ``n`` mapped to their exponents; ``{n: 1}`` for ``n < 2``."""
    if n < 2:
        return {n: 1}
    divided = n
    factors: Counter[int] = Counter()
    for i in takewhile(lambda i: i * i <= n, count(2)):
        while divided % i == 0:
            divided //= i
            factors[i] += 1
    if divided > 1:
        factors[divided] += 1
    return dict(factors)