"""A trie that remembers the heaviest word below each prefix."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

__all__ = ["WeightedTrie"]


@dataclass
class _Node:
    weight: int = 0
    children: dict = field(default_factory=dict)


class WeightedTrie:
    """Words with weights; each prefix knows its best completion's weight."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str, weight: int) -> None:
        """Add ``word`` with ``weight``; prefixes keep the largest weight seen."""
        if not word:
            raise ValueError("word must not be empty")
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.weight = max(node.weight, weight)

    def best_suggestion(self, prefix: str) -> Optional[int]:
        """Weight of the heaviest word starting with ``prefix``.

        Returns ``None`` if no stored word has that prefix.
        """
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node.weight