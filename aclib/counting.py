"""Factorials, permutations and combinations modulo a prime."""

from __future__ import annotations


class Counting:
    """Precomputed factorial tables for counting modulo a prime ``p`` larger than ``max_n``."""

    def __init__(self, max_n: int, p: int) -> None:
        if max_n < 0:
            raise ValueError("max_n must be non-negative")
        self.p = p
        self.max_n = max_n
        inverses = [1, 1]
        factorials = [1, 1]
        factorial_inverses = [1, 1]
        for i in range(2, max_n + 1):
            inverses.append(p - inverses[p % i] * (p // i) % p)
            factorials.append(factorials[-1] % p * i % p)
            factorial_inverses.append(factorial_inverses[-1] * inverses[i] % p)
        self._factorials = factorials[: max_n + 1]
        self._factorial_inverses = factorial_inverses[: max_n + 1]

    def _check(self, n: int) -> None:
        if not 0 <= n <= self.max_n:
            raise IndexError(f"{n} is outside the prepared range 0..={self.max_n}")

    def factorial(self, n: int) -> int:
        """``n!`` mod p."""
        self._check(n)
        return self._factorials[n]

    def permutation(self, n: int, k: int) -> int:
        """``nPk`` mod p; 0 when ``n < k``."""
        if n < k:
            return 0
        self._check(n)
        self._check(n - k)
        return self._factorials[n] * self._factorial_inverses[n - k] % self.p

    def combination(self, n: int, k: int) -> int:
        """``nCk`` mod p; 0 when ``n < k``."""
        if n < k:
            return 0
        self._check(n)
        self._check(k)
        self._check(n - k)
        inverse = self._factorial_inverses[k] * self._factorial_inverses[n - k] % self.p
        return self._factorials[n] * inverse % self.p

    def combination_with_repetition(self, n: int, k: int) -> int:
        """``nHk`` mod p, that is ``(n + k - 1)Ck``."""
        if n + k < 1:
            raise ValueError("n + k must be at least 1")
        return self.combination(n + k - 1, k)