"""Breadth-first search, topological sorting and cycle detection."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field

__all__ = [
    "CycleError",
    "BfsResult",
    "undirected_adjacency",
    "bfs",
    "count_at_distance",
    "topological_sort",
    "has_cycle",
    "grid_has_cycle",
]

Adjacency = Mapping[Hashable, Iterable[Hashable]]


class CycleError(ValueError):
    """Raised when a directed graph that must be acyclic has a cycle."""

    def __init__(self, node: Hashable) -> None:
        super().__init__(f"graph has a cycle through {node!r}")
        self.node = node


@dataclass
class BfsResult:
    """Visit order, distances from the source and BFS-tree parents."""

    order: list = field(default_factory=list)
    distance: dict = field(default_factory=dict)
    parent: dict = field(default_factory=dict)


def undirected_adjacency(edges: Iterable[tuple[Hashable, Hashable]]) -> dict:
    """Build an adjacency mapping in which every edge runs both ways."""
    adjacency: defaultdict = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return dict(adjacency)


def bfs(adjacency: Adjacency, source: Hashable) -> BfsResult:
    """Breadth-first search from ``source``."""
    result = BfsResult(distance={source: 0}, parent={source: None})
    queue = deque([source])
    while queue:
        node = queue.popleft()
        result.order.append(node)
        for neighbour in adjacency.get(node, ()):
            if neighbour not in result.distance:
                result.distance[neighbour] = result.distance[node] + 1
                result.parent[neighbour] = node
                queue.append(neighbour)
    return result


def count_at_distance(adjacency: Adjacency, source: Hashable, distance: int) -> int:
    """Count nodes other than ``source`` lying exactly ``distance`` edges away."""
    reached = bfs(adjacency, source).distance
    return sum(1 for node, d in reached.items() if node != source and d == distance)


def _nodes(adjacency: Adjacency) -> list:
    seen = dict.fromkeys(adjacency)
    for targets in adjacency.values():
        seen.update(dict.fromkeys(targets))
    return list(seen)


def topological_sort(adjacency: Adjacency) -> list:
    """Order the nodes so that every edge ``u -> v`` has ``u`` before ``v``.

    Raises :class:`CycleError` if the graph is not acyclic.
    """
    active, done = 1, 2
    state: dict = {}
    finished: list = []
    for start in _nodes(adjacency):
        if start in state:
            continue
        state[start] = active
        stack = [(start, iter(adjacency.get(start, ())))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                status = state.get(nxt)
                if status is None:
                    state[nxt] = active
                    stack.append((nxt, iter(adjacency.get(nxt, ()))))
                    break
                if status == active:
                    raise CycleError(nxt)
            else:
                stack.pop()
                state[node] = done
                finished.append(node)
    finished.reverse()
    return finished


def has_cycle(adjacency: Adjacency) -> bool:
    """Whether a directed graph contains a cycle."""
    try:
        topological_sort(adjacency)
    except CycleError:
        return True
    return False


_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def grid_has_cycle(grid: Sequence[Sequence]) -> bool:
    """Whether equal, side-adjacent cells of ``grid`` form a cycle.

    Each connected region of equal cells is a graph; a cycle exists when
    a region has at least as many adjacencies as cells.
    """
    rows = [list(row) for row in grid]
    if not rows:
        return False
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    height = len(rows)

    def neighbours(i: int, j: int):
        for di, dj in _STEPS:
            ni, nj = i + di, j + dj
            if 0 <= ni < height and 0 <= nj < width and rows[ni][nj] == rows[i][j]:
                yield ni, nj

    seen: set[tuple[int, int]] = set()
    for i, row in enumerate(rows):
        for j, _ in enumerate(row):
            if (i, j) in seen:
                continue
            seen.add((i, j))
            queue = deque([(i, j)])
            cells = 0
            ends = 0
            while queue:
                cell = queue.popleft()
                cells += 1
                for nxt in neighbours(*cell):
                    ends += 1
                    if nxt not in seen:
                        seen.add(nxt)
                        queue.append(nxt)
            if ends // 2 >= cells:
                return True
    return False