"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["BinarySearchTree"]


@dataclass
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self, values: Iterable = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        self._size += 1
        new = _Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __iter__(self) -> Iterator:
        """Yield values in sorted (in-order) order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def breadth_first(self) -> Iterator:
        """Yield values level by level, left to right."""
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.value
            queue.extend(child for child in (node.left, node.right) if child is not None)

    def _extreme(self, side: str) -> Any:
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while getattr(node, side) is not None:
            node = getattr(node, side)
        return node.value

    def minimum(self) -> Any:
        """Smallest value; raises ``ValueError`` on an empty tree."""
        return self._extreme("left")

    def maximum(self) -> Any:
        """Largest value; raises ``ValueError`` on an empty tree."""
        return self._extreme("right")

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        height = -1
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            level = [c for n in level for c in (n.left, n.right) if c is not None]
        return height