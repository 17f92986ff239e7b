"""Stable counting sort and radix sort over integer keys."""

from __future__ import annotations

from operator import index
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")


def counting_sorted_with(data: Sequence[T], key: Callable[[T], int]) -> list[T]:
    """Items of ``data`` stably sorted by the integer ``key``."""
    if not data:
        return []
    keys = [key(item) for item in data]
    low = min(keys)
    buckets: list[list[T]] = [[] for _ in range(max(keys) - low + 1)]
    for item, k in zip(data, keys):
        buckets[k - low].append(item)
    return [item for bucket in buckets for item in bucket]


def counting_sorted(data: Sequence[int]) -> list[int]:
    """Integers of ``data`` in ascending order, by counting sort."""
    return counting_sorted_with(data, index)


def radix_sorted_with(data: Sequence[T], key: Callable[[T], int]) -> list[T]:
    """Items of ``data`` stably sorted by the non-negative integer ``key``, base 16."""
    if not data:
        return []
    radix = 16
    keyed = [(key(item), item) for item in data]
    if any(k < 0 for k, _ in keyed):
        raise ValueError("radix sort keys must be non-negative")
    max_digits = max(len(format(k, "x")) for k, _ in keyed)
    for digit in range(max_digits):
        buckets: list[list[tuple[int, T]]] = [[] for _ in range(radix)]
        for entry in keyed:
            buckets[entry[0] // radix**digit % radix].append(entry)
        keyed = [entry for bucket in buckets for entry in bucket]
    return [item for _, item in keyed]


def radix_sorted(data: Sequence[int]) -> list[int]:
    """Integers of ``data`` in ascending order, by radix sort."""
    return radix_sorted_with(data, index)