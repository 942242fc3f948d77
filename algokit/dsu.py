"""Disjoint-set union with path compression."""

from __future__ import annotations

from collections.abc import Hashable

__all__ = ["DisjointSet"]


class DisjointSet:
    """A forest of disjoint sets over hashable items."""

    def __init__(self) -> None:
        self._parent: dict = {}

    def __contains__(self, item: Hashable) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def make_set(self, item: Hashable) -> None:
        """Add ``item`` as a singleton set if it is not known yet."""
        self._parent.setdefault(item, item)

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding ``item``.

        Raises ``KeyError`` for an unknown item.
        """
        parent = self._parent
        root = item
        while parent[root] != root:
            root = parent[root]
        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``; return whether they were apart."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        """Whether ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)