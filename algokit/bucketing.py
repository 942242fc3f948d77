"""Nearby almost-duplicate detection by value bucketing."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["contains_nearby_almost_duplicate"]


def contains_nearby_almost_duplicate(nums: Sequence[int], k: int, t: int) -> bool:
    """Whether two indices at most ``k`` apart hold values at most ``t`` apart.

    Values go into buckets of width ``t + 1``; only the last ``k`` values
    are kept, so a match is either in the same bucket or a neighbouring one.
    """
    if t < 0 or len(nums) < 2 or k < 1:
        return False
    width = t + 1
    buckets: dict[int, int] = {}
    for i, value in enumerate(nums):
        bucket = value // width
        if bucket in buckets:
            return True
        buckets[bucket] = value
        for neighbour in (bucket - 1, bucket + 1):
            if neighbour in buckets and abs(buckets[neighbour] - value) <= t:
                return True
        if i >= k:
            buckets.pop(nums[i - k] // width, None)
    return False