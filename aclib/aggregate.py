"""Variadic aggregates: maximum, minimum, total, product and mean."""

from __future__ import annotations

import math


def maximum(first, *args):
    """Largest of one or more values."""
    return max((first, *args))


def minimum(first, *args):
    """Smallest of one or more values."""
    return min((first, *args))


def total(*args):
    """Sum of the values, 0 when there are none."""
    return sum(args, 0)


def product(*args):
    """Product of the values, 1 when there are none."""
    return math.prod(args)


def mean(*args) -> float:
    """Arithmetic mean as a float, 0.0 when there are no values."""
    if not args:
        return 0.0
    return sum(args, 0) / len(args)