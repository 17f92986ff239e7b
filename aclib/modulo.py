"""Modular exponentiation, extended Euclid and modular inverses."""

from __future__ import annotations


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Quotient rounded toward zero and the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def mod_pow(a: int, b: int, modulo: int) -> int:
    """``a ** b % modulo``; ``b == 0`` always gives 1."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if b == 0:
        return 1
    return pow(a, b, modulo)


def ex_euclid(a: int, b: int) -> tuple[tuple[int, int], int]:
    """``((x, y), g)`` with ``a * x + b * y == g``, where ``g`` is gcd(a, b)."""
    if a == 0:
        return (0, 1), b
    quotient, remainder = _trunc_divmod(b, a)
    (x, y), gcd = ex_euclid(remainder, a)
    return (y - quotient * x, x), gcd


def inverse_mod_mul(a: int, modulo: int) -> int | None:
    """Multiplicative inverse of ``a`` modulo ``modulo``, or None if it does not exist."""
    if modulo == 1:
        return None
    _, reduced = _trunc_divmod(a, modulo)
    (inverse, _), gcd = ex_euclid(reduced, modulo)
    if gcd != 1:
        return None
    return _trunc_divmod(inverse + modulo, modulo)[1]