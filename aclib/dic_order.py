"""Permutations in lexicographic (dictionary) order."""

from __future__ import annotations

import operator
from collections import Counter
from itertools import accumulate
from typing import Hashable, MutableSequence, Sequence


def _count_with_head(head: Hashable, counts: Counter, factorial: list[int]) -> int:
    """Number of distinct arrangements of ``counts`` that begin with ``head``."""
    length = sum(counts.values())
    if length < 2:
        return 0
    divider = 1
    for item, n in counts.items():
        divider *= factorial[n - (item == head)]
    return factorial[length - 1] // divider


def kth_dic_order(candidate: Sequence, k: int) -> list:
    """The ``k``-th (1-based; 0 acts as 1) distinct arrangement of ``candidate`` in sorted order.

    Raises ValueError when ``k`` exceeds the number of arrangements.
    """
    counts = Counter(candidate)
    factorial = list(accumulate(range(1, len(candidate) + 1), operator.mul, initial=1))
    result = []
    while k > 1:
        heads = sorted(item for item, n in counts.items() if n > 0)
        cumulative = 0
        for head in heads:
            count = _count_with_head(head, counts, factorial)
            if cumulative < k <= cumulative + count:
                counts[head] -= 1
                result.append(head)
                k -= cumulative
                break
            cumulative += count
        else:
            raise ValueError(f"possible permutations {cumulative} < k ({k})")
    result.extend(item for item in sorted(counts) for _ in range(counts[item]))
    return result


def next_permutation(seq: MutableSequence) -> bool:
    """Rearrange ``seq`` in place into its next permutation; False if it was the last."""
    pivot = next(
        (i for i in reversed(range(len(seq) - 1)) if seq[i] < seq[i + 1]),
        None,
    )
    if pivot is None:
        return False
    swap = next(j for j in reversed(range(len(seq))) if seq[pivot] < seq[j])
    seq[pivot], seq[swap] = seq[swap], seq[pivot]
    seq[pivot + 1:] = seq[pivot + 1:][::-1]
    return True