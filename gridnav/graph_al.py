"""Weighted directed graph stored as adjacency lists."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterator
from enum import Enum

from gridnav.priority_queue import PriorityQueue


class State(Enum):
    """Visitation state of a vertex during a graph search."""

    UNVISITED = "unvisited"
    VISITED = "visited"
    FINISHED = "finished"


class AdjacencyListGraph:
    """A graph of ``n`` vertices with weighted directed edges.

    Each vertex keeps its outgoing edges; the most recently added edge is
    visited first when iterating over neighbours.
    """

    def __init__(self, n: int = 10) -> None:
        if n < 0:
            raise ValueError(f"number of vertices must not be negative, got {n}")
        self.n = n
        self._adj: list[dict[int, float]] = [{} for _ in range(n)]

    def _check(self, u: int) -> None:
        if not 0 <= u < self.n:
            raise IndexError(f"vertex {u} is not in the graph")

    def __len__(self) -> int:
        return self.n

    def degree(self, u: int) -> int:
        """Return the number of edges leaving vertex u."""
        self._check(u)
        return len(self._adj[u])

    def edge_weight(self, u: int, v: int) -> float:
        """Return the weight of edge (u, v), or 0 when there is no such edge."""
        if not 0 <= u < self.n:
            return 0
        return self._adj[u].get(v, 0)

    def has_edge(self, u: int, v: int) -> bool:
        return 0 <= u < self.n and v in self._adj[u]

    def add_directed_edge(self, u: int, v: int, w: float = 1) -> None:
        """Add edge (u, v) with weight w unless that edge already exists."""
        self._check(u)
        self._check(v)
        self._adj[u].setdefault(v, w)

    def add_undirected_edge(self, u: int, v: int, w: float = 1) -> None:
        self.add_directed_edge(u, v, w)
        self.add_directed_edge(v, u, w)

    def remove_directed_edge(self, u: int, v: int) -> None:
        """Remove edge (u, v) if present."""
        self._check(u)
        self._adj[u].pop(v, None)

    def remove_undirected_edge(self, u: int, v: int) -> None:
        self.remove_directed_edge(u, v)
        self.remove_directed_edge(v, u)

    def has_loops(self) -> bool:
        return any(u in edges for u, edges in enumerate(self._adj))

    def is_undirected(self) -> bool:
        """True when every edge has a reverse of equal weight and no loops exist."""
        for u, edges in enumerate(self._adj):
            for v, w in edges.items():
                if self.edge_weight(v, u) != w:
                    return False
        return not self.has_loops()

    def neighbors(self, u: int) -> Iterator[int]:
        """Yield the targets of u's edges, newest edge first."""
        self._check(u)
        yield from reversed(list(self._adj[u]))

    def bfs(self, src: int) -> tuple[list[State], list[float], list[int]]:
        """Breadth-first search from src.

        Returns (state, distance, predecessor). Unreached vertices keep
        distance 0 and predecessor -1.
        """
        if not 0 <= src < self.n:
            raise ValueError(f"Bad source: {src}")
        state = [State.UNVISITED] * self.n
        distance = [0.0] * self.n
        predecessor = [-1] * self.n
        state[src] = State.VISITED
        pending = deque([src])
        while pending:
            u = pending.popleft()
            for v in sorted(self._adj[u]):
                if state[v] is State.UNVISITED:
                    state[v] = State.VISITED
                    distance[v] = distance[u] + 1
                    predecessor[v] = u
                    pending.append(v)
            state[u] = State.FINISHED
        return state, distance, predecessor

    def dfs(self) -> tuple[list[int], list[int], list[int]]:
        """Depth-first search over all vertices.

        Returns (discovered, finished, predecessor) where times start at 1 and
        search-tree roots have predecessor -1.
        """
        state = [State.UNVISITED] * self.n
        discovered = [0] * self.n
        finished = [0] * self.n
        predecessor = [-1] * self.n
        time = 0
        for root in range(self.n):
            if state[root] is not State.UNVISITED:
                continue
            state[root] = State.VISITED
            time += 1
            discovered[root] = time
            stack = [(root, self.neighbors(root))]
            while stack:
                u, pending = stack[-1]
                for v in pending:
                    if state[v] is State.UNVISITED:
                        predecessor[v] = u
                        state[v] = State.VISITED
                        time += 1
                        discovered[v] = time
                        stack.append((v, self.neighbors(v)))
                        break
                else:
                    stack.pop()
                    state[u] = State.FINISHED
                    time += 1
                    finished[u] = time
        return discovered, finished, predecessor

    def _single_source(self, src: int) -> tuple[list[float], list[int]]:
        self._check(src)
        distance = [math.inf] * self.n
        predecessor = [-1] * self.n
        distance[src] = 0.0
        return distance, predecessor

    def bellman_ford(self, src: int) -> tuple[list[float], list[int]]:
        """Shortest paths from src allowing negative weights.

        Returns (distance, predecessor); unreachable vertices have distance inf.
        Raises ValueError when a negative-weight cycle is reachable.
        """
        distance, predecessor = self._single_source(src)
        for _ in range(self.n - 1):
            for u, edges in enumerate(self._adj):
                for v, w in edges.items():
                    if distance[v] > distance[u] + w:
                        distance[v] = distance[u] + w
                        predecessor[v] = u
        for u, edges in enumerate(self._adj):
            for v, w in edges.items():
                if distance[v] > distance[u] + w:
                    raise ValueError("graph contains a negative-weight cycle")
        return distance, predecessor

    def dijkstra(self, src: int) -> tuple[list[float], list[int]]:
        """Shortest paths from src for non-negative weights.

        Returns (distance, predecessor); unreachable vertices have distance inf.
        """
        distance, predecessor = self._single_source(src)
        queue = PriorityQueue(self.n)
        for u in range(self.n):
            queue.push(u, distance[u])
        done: set[int] = set()
        while not queue.is_empty():
            u = queue.pop().index
            done.add(u)
            for v in self.neighbors(u):
                candidate = distance[u] + self._adj[u][v]
                if distance[v] > candidate:
                    distance[v] = candidate
                    predecessor[v] = u
                    if v not in done:
                        queue.decrease_key(v, candidate)
        return distance, predecessor

    def display(self) -> None:
        """Print each vertex followed by its edges."""
        for u in range(self.n):
            edges = "".join(
                f"(v: {v}, w: {self._adj[u][v]:g}) " for v in self.neighbors(u)
            )
            print(f"{u}: {edges}")
        print()


def extract_path(dest: int, predecessor: list[int]) -> list[int]:
    """Follow predecessors back from dest and return the path from its root."""
    path: list[int] = []
    while dest != -1:
        path.append(dest)
        dest = predecessor[dest]
    path.reverse()
    return path