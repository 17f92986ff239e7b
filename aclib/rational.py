"""Fractions of integers with arithmetic that reduces its results."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering


def _tdiv(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


@total_ordering
@dataclass(frozen=True, eq=False)
class Rational:
    """A fraction ``numerator / denominator``, kept as given until an operation reduces it."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ZeroDivisionError("denominator must not be zero")

    def irreducible(self) -> Rational:
        """The same value with numerator and denominator divided by their gcd."""
        gcd = math.gcd(self.numerator, self.denominator)
        return Rational(_tdiv(self.numerator, gcd), _tdiv(self.denominator, gcd))

    def common(self, other: Rational) -> tuple[Rational, Rational]:
        """Both values rewritten over one shared denominator."""
        gcd = math.gcd(self.numerator, self.denominator)
        denominator = _tdiv(self.denominator, gcd) * other.denominator
        self_numerator = _tdiv(denominator, self.denominator) * self.numerator
        other_numerator = _tdiv(denominator, other.denominator) * other.numerator
        return Rational(self_numerator, denominator), Rational(other_numerator, denominator)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        a, b = self.irreducible(), other.irreducible()
        return (a.numerator, a.denominator) == (b.numerator, b.denominator)

    def __hash__(self) -> int:
        reduced = self.irreducible()
        return hash((reduced.numerator, reduced.denominator))

    def __lt__(self, other: Rational) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        a, b = self.common(other)
        return a.numerator < b.numerator

    def __add__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        a, b = self.common(other)
        return Rational(a.numerator + b.numerator, a.denominator).irreducible()

    def __sub__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        a, b = self.common(other)
        return Rational(a.numerator - b.numerator, a.denominator).irreducible()

    def __mul__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        a, b = self.common(other)
        return Rational(a.numerator * b.numerator, a.denominator * b.denominator).irreducible()

    def __truediv__(self, other: Rational) -> Rational:
        if not isinstance(other, Rational):
            return NotImplemented
        a, b = self.common(other)
        return Rational(a.numerator * b.denominator, a.denominator * b.numerator).irreducible()

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"