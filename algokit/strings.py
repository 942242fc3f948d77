"""Suffix arrays, repeated substrings and longest common subsequences."""

from __future__ import annotations

from itertools import pairwise

__all__ = [
    "suffix_array",
    "longest_repeated_substring_length",
    "lcs_length",
    "longest_common_subsequence",
]


def suffix_array(text: str) -> list[int]:
    """Return the start positions of the suffixes of ``text`` in sorted order.

    Uses prefix doubling: suffixes are ranked by their first ``2 * step``
    characters, and a shorter suffix sorts before a longer one sharing
    its prefix.
    """
    size = len(text)
    if size == 0:
        return []
    rank = [ord(ch) for ch in text]
    order = list(range(size))
    step = 1
    while True:
        keys = [
            (current, rank[i + step] if i + step < size else -1)
            for i, current in enumerate(rank)
        ]
        order.sort(key=keys.__getitem__)
        new_rank = [0] * size
        for previous, current in pairwise(order):
            new_rank[current] = new_rank[previous] + (keys[previous] != keys[current])
        rank = new_rank
        if rank[order[-1]] == size - 1 or step >= size:
            return order
        step *= 2


def _common_prefix_length(text: str, first: int, second: int) -> int:
    length = 0
    for a, b in zip(text[first:], text[second:]):
        if a != b:
            break
        length += 1
    return length


def longest_repeated_substring_length(text: str) -> int:
    """Length of the longest substring occurring at least twice in ``text``."""
    order = suffix_array(text)
    return max(
        (_common_prefix_length(text, a, b) for a, b in pairwise(order)),
        default=0,
    )


def _lcs_table(first: str, second: str) -> list[list[int]]:
    table = [[0] * (len(second) + 1)]
    for ch in first:
        above = table[-1]
        row = [0]
        for j, other in enumerate(second, start=1):
            if ch == other:
                row.append(above[j - 1] + 1)
            else:
                row.append(max(above[j], row[j - 1]))
        table.append(row)
    return table


def lcs_length(first: str, second: str) -> int:
    """Length of the longest common subsequence of two strings."""
    return _lcs_table(first, second)[-1][-1]


def longest_common_subsequence(first: str, second: str) -> str:
    """Return one longest common subsequence of two strings."""
    table = _lcs_table(first, second)
    i, j = len(first), len(second)
    picked: list[str] = []
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i][j] == table[i - 1][j]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))