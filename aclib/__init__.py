"""Algorithms and data structures: prefix sums, number theory, sorting, knapsack and graphs."""

__version__ = "0.1.0"