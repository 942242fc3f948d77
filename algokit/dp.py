"""Dynamic programming: value-indexed knapsack and longest increasing subsequence."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Iterable

__all__ = ["knapsack_max_value", "lis_length_quadratic", "lis_length"]


def knapsack_max_value(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Best total value of ``(weight, value)`` items fitting within ``capacity``.

    Tracks the lightest weight reaching each total value, which stays
    small when weights are huge but values are modest.
    """
    items = list(items)
    if any(weight < 0 or value < 0 for weight, value in items):
        raise ValueError("weights and values must be non-negative")
    total = sum(value for _, value in items)
    lightest = [0] + [math.inf] * total
    for weight, value in items:
        for reached in range(total, value - 1, -1):
            candidate = lightest[reached - value] + weight
            if candidate < lightest[reached]:
                lightest[reached] = candidate
    return max(
        (reached for reached, weight in enumerate(lightest) if weight <= capacity),
        default=0,
    )


def lis_length_quadratic(values: Iterable) -> int:
    """Length of the longest strictly increasing subsequence, in O(n^2)."""
    values = list(values)
    ending_at: list[int] = []
    for i, current in enumerate(values):
        longest_before = max(
            (length for length, earlier in zip(ending_at, values[:i]) if earlier < current),
            default=0,
        )
        ending_at.append(longest_before + 1)
    return max(ending_at, default=0)


def lis_length(values: Iterable) -> int:
    """Length of the longest strictly increasing subsequence, in O(n log n)."""
    tails: list = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)