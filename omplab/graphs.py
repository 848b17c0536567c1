"""Undirected graphs as adjacency lists, with breadth-first and depth-first traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Graph = list[list[int]]


def _check_vertex(vertex: int, n: int, what: str) -> None:
    if not 0 <= vertex < n:
        raise ValueError(f"{what} {vertex} is outside the range 0..{n - 1}")


def build_graph(n: int, edges: Iterable[tuple[int, int]]) -> Graph:
    """Build an undirected adjacency list with ``n`` vertices from ``(u, v)`` pairs."""
    if n < 0:
        raise ValueError("number of vertices must not be negative")
    graph: Graph = [[] for _ in range(n)]
    for u, v in edges:
        _check_vertex(u, n, "vertex")
        _check_vertex(v, n, "vertex")
        graph[u].append(v)
        graph[v].append(u)
    return graph


def bfs_levels(graph: Sequence[Sequence[int]], start: int) -> Iterator[list[int]]:
    """Yield the vertices reachable from ``start`` one breadth-first level at a time."""
    _check_vertex(start, len(graph), "start vertex")
    visited = {start}
    level = [start]
    while level:
        yield level
        next_level = []
        for u in level:
            for v in graph[u]:
                if v not in visited:
                    visited.add(v)
                    next_level.append(v)
        level = next_level


def bfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the breadth-first visiting order from ``start``."""
    _check_vertex(start, len(graph), "start vertex")
    visited = {start}
    queue = deque([start])
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph[u]:
            if v not in visited:
                visited.add(v)
                queue.append(v)
    return order


def dfs(graph: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the depth-first visiting order from ``start``.

    Vertices are marked when pushed; neighbours are pushed so that the
    first-listed neighbour is explored first.
    """
    _check_vertex(start, len(graph), "start vertex")
    visited = {start}
    stack = [start]
    order = []
    while stack:
        u = stack.pop()
        order.append(u)
        fresh = [v for v in graph[u] if v not in visited]
        visited.update(fresh)
        stack.extend(reversed(fresh))
    return order