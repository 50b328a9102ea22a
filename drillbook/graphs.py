"""Undirected graphs stored as adjacency lists, with breadth- and depth-first traversal."""

from collections import deque
from collections.abc import Hashable, Iterable
from typing import Any


class Graph:
    """An undirected graph whose adjacency lists keep the newest neighbour first."""

    def __init__(self, vertices: Iterable[Hashable] = ()) -> None:
        self._adjacency: dict[Any, list[Any]] = {vertex: [] for vertex in vertices}

    def add_edge(self, a: Hashable, b: Hashable) -> None:
        """Connect ``a`` and ``b``; each becomes the first neighbour listed for the other."""
        self._adjacency.setdefault(a, []).insert(0, b)
        self._adjacency.setdefault(b, []).insert(0, a)

    def neighbors(self, vertex: Hashable) -> list[Any]:
        """Return the neighbours of ``vertex``, most recently connected first."""
        try:
            return list(self._adjacency[vertex])
        except KeyError:
            raise KeyError(f"unknown vertex {vertex!r}") from None

    def _require(self, vertex: Hashable) -> None:
        if vertex not in self._adjacency:
            raise KeyError(f"unknown vertex {vertex!r}")

    def bfs(self, start: Hashable) -> list[Any]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._require(start)
        visited = {start}
        queue = deque([start])
        order = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: Hashable) -> list[Any]:
        """Return the vertices reachable from ``start`` in stack-driven depth-first order.

        A vertex is marked as seen when it is pushed, so each vertex appears once.
        """
        self._require(start)
        visited = {start}
        stack = [start]
        order = []
        while stack:
            current = stack.pop()
            order.append(current)
            for neighbour in self._adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)