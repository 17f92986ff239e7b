"""Sieve of Eratosthenes with smallest-prime-factor table."""

from __future__ import annotations

from collections import Counter


class SieveOfEratosthenes:
    """``min_primes[i]`` is the smallest prime dividing ``i`` (``i`` itself for 0 and 1)."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        min_primes = list(range(n + 1))
        i = 2
        while i * i <= n:
            if min_primes[i] == i:
                for multiple in range(2 * i, n + 1, i):
                    min_primes[multiple] = min(min_primes[multiple], i)
            i += 1
        self.min_primes = min_primes

    def is_prime(self, num: int) -> bool:
        """Whether ``num`` is prime."""
        return num > 1 and num == self.min_primes[num]

    def sieve(self) -> list[bool]:
        """Primality flag for every number from 0 to n."""
        return [self.is_prime(x) for x in range(len(self.min_primes))]

    def primes(self) -> list[int]:
        """All primes from 0 to n."""
        return [x for x in range(len(self.min_primes)) if self.is_prime(x)]

    def factorization(self, n: int) -> dict[int, int]:
        """Prime factors of ``n`` mapped to exponents; ``{n: 1}`` for 0 and 1."""
        divided = n
        factors: Counter[int] = Counter()
        while not factors or divided > 1:
            prime = self.min_primes[divided]
            factors[prime] += 1
            divided //= max(prime, 1)
        return dict(factors)

    def all_factorization(self) -> list[dict[int, int]]:
        """Factorization of every number from 0 to n; empty for 0 and 1."""
        size = len(self.min_primes)
        divided = list(range(size))
        factors: list[dict[int, int]] = [{} for _ in range(size)]
        for p in self.primes():
            for i in range(p, size, p):
                exponent = 0
                while divided[i] % p == 0:
                    divided[i] //= p
                    exponent += 1
                if exponent:
                    factors[i][p] = factors[i].get(p, 0) + exponent
        return factors

    def euler_phi(self, n: int) -> int:
        """Count of integers in ``1..=n`` coprime to ``n``."""
        if n < 2:
            return n
        numerator = denominator = 1
        for p in self.factorization(n):
            numerator *= p - 1
            denominator *= p
        return n * numerator // denominator