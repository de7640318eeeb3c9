"""Weighted directed graph stored as an adjacency matrix."""

from __future__ import annotations

import math
import random
from collections import deque
from collections.abc import Iterator

from gridnav.graph_al import State
from gridnav.matrix import Matrix
from gridnav.priority_queue import PriorityQueue


class AdjacencyMatrixGraph:
    """A graph of ``vertices`` vertices whose edge weights live in a square matrix.

    A weight of 0 means there is no edge. Neighbours are visited in ascending order.
    """

    def __init__(self, vertices: int = 10) -> None:
        if vertices < 0:
            raise ValueError(f"number of vertices must not be negative, got {vertices}")
        self.vertices = vertices
        self._weights: list[list[float]] = [[0.0] * vertices for _ in range(vertices)]

    def __len__(self) -> int:
        return self.vertices

    def _check(self, u: int) -> None:
        if not 0 <= u < self.vertices:
            raise IndexError(f"vertex {u} is not in the graph")

    def degree(self, u: int) -> int:
        """Return the number of edges leaving vertex u."""
        self._check(u)
        return sum(1 for w in self._weights[u] if w != 0)

    def edge_weight(self, u: int, v: int) -> float:
        """Return the weight of edge (u, v), 0 when absent."""
        self._check(u)
        self._check(v)
        return self._weights[u][v]

    def has_edge(self, u: int, v: int) -> bool:
        return self.edge_weight(u, v) != 0

    def add_directed_edge(self, u: int, v: int, w: float = 1) -> None:
        """Set the weight of edge (u, v), replacing any previous weight."""
        self._check(u)
        self._check(v)
        self._weights[u][v] = w

    def add_undirected_edge(self, u: int, v: int, w: float = 1) -> None:
        self.add_directed_edge(u, v, w)
        self.add_directed_edge(v, u, w)

    def remove_directed_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._weights[u][v] = 0.0

    def remove_undirected_edge(self, u: int, v: int) -> None:
        self.remove_directed_edge(u, v)
        self.remove_directed_edge(v, u)

    def has_loops(self) -> bool:
        return any(self._weights[u][u] != 0 for u in range(self.vertices))

    def is_undirected(self) -> bool:
        """True when every edge has a reverse of equal weight and no loops exist."""
        for u in range(self.vertices):
            for v in range(u + 1, self.vertices):
                if self._weights[u][v] != self._weights[v][u]:
                    return False
        return not self.has_loops()

    def neighbors(self, u: int) -> Iterator[int]:
        """Yield the targets of u's edges in ascending order."""
        self._check(u)
        row = self._weights[u]
        for v in range(self.vertices):
            if row[v] != 0:
                yield v

    def bfs(self, src: int) -> tuple[list[State], list[int], list[int]]:
        """Breadth-first search from src.

        Returns (state, distance, predecessor) with distances counted in edges.
        Unreached vertices keep distance 0 and predecessor -1.
        """
        if not 0 <= src < self.vertices:
            raise ValueError(f"Bad source: {src}")
        state = [State.UNVISITED] * self.vertices
        distance = [0] * self.vertices
        predecessor = [-1] * self.vertices
        state[src] = State.VISITED
        pending = deque([src])
        while pending:
            u = pending.popleft()
            for v in self.neighbors(u):
                if state[v] is State.UNVISITED:
                    state[v] = State.VISITED
                    distance[v] = distance[u] + 1
                    predecessor[v] = u
                    pending.append(v)
            state[u] = State.FINISHED
        return state, distance, predecessor

    def dfs(self) -> tuple[list[int], list[int], list[int]]:
        """Depth-first search over all vertices.

        Returns (discovered, finished, predecessor); times start at 1 and
        search-tree roots have predecessor -1.
        """
        n = self.vertices
        state = [State.UNVISITED] * n
        discovered = [0] * n
        finished = [0] * n
        predecessor = [-1] * n
        time = 0
        for root in range(n):
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
        distance = [math.inf] * self.vertices
        predecessor = [-1] * self.vertices
        distance[src] = 0.0
        return distance, predecessor

    def bellman_ford(self, src: int) -> tuple[list[float], list[int]]:
        """Shortest paths from src allowing negative weights.

        Returns (distance, predecessor); unreachable vertices have distance inf.
        Raises ValueError when a negative-weight cycle is reachable.
        """
        distance, predecessor = self._single_source(src)
        for _ in range(self.vertices - 1):
            for u in range(self.vertices):
                for v in self.neighbors(u):
                    candidate = distance[u] + self._weights[u][v]
                    if distance[v] > candidate:
                        distance[v] = candidate
                        predecessor[v] = u
        for u in range(self.vertices):
            for v in self.neighbors(u):
                if distance[v] > distance[u] + self._weights[u][v]:
                    raise ValueError("graph contains a negative-weight cycle")
        return distance, predecessor

    def dijkstra(self, src: int) -> tuple[list[float], list[int]]:
        """Shortest paths from src for non-negative weights.

        Returns (distance, predecessor); unreachable vertices have distance inf.
        """
        distance, predecessor = self._single_source(src)
        queue = PriorityQueue(self.vertices)
        for u in range(self.vertices):
            queue.push(u, distance[u])
        done: set[int] = set()
        while not queue.is_empty():
            u = queue.pop().index
            done.add(u)
            for v in self.neighbors(u):
                candidate = distance[u] + self._weights[u][v]
                if distance[v] > candidate:
                    distance[v] = candidate
                    predecessor[v] = u
                    if v not in done:
                        queue.decrease_key(v, candidate)
        return distance, predecessor

    def floyd_warshall(self) -> tuple[Matrix, Matrix]:
        """All-pairs shortest paths.

        Returns (distance, predecessor) matrices; missing paths have distance
        inf and predecessor -1.
        """
        n = self.vertices
        distance = [
            [0.0 if i == j else (self._weights[i][j] or math.inf) for j in range(n)]
            for i in range(n)
        ]
        predecessor = [
            [-1 if i == j or self._weights[i][j] == 0 else i for j in range(n)]
            for i in range(n)
        ]
        for k in range(n):
            next_distance = [[0.0] * n for _ in range(n)]
            next_predecessor = [[-1] * n for _ in range(n)]
            for i in range(n):
                for j in range(n):
                    best = min(distance[i][j], distance[i][k] + distance[k][j])
                    next_distance[i][j] = best
                    if best == distance[i][j]:
                        next_predecessor[i][j] = predecessor[i][j]
                    else:
                        next_predecessor[i][j] = predecessor[k][j]
            distance, predecessor = next_distance, next_predecessor
        return _to_matrix(distance, n), _to_matrix(predecessor, n)

    def dijkstra_all_pairs(self) -> tuple[Matrix, Matrix]:
        """All-pairs shortest paths by running Dijkstra from every vertex."""
        n = self.vertices
        distance_out = Matrix(n, n)
        predecessor_out = Matrix(n, n)
        for i in range(n):
            distance, predecessor = self.dijkstra(i)
            for j in range(n):
                distance_out[i, j] = distance[j]
                predecessor_out[i, j] = predecessor[j]
        return distance_out, predecessor_out

    def transitive_closure(self) -> Matrix:
        """Return a matrix holding 1 where j is reachable from i (or i == j), else 0."""
        n = self.vertices
        reach = [[i == j or self._weights[i][j] != 0 for j in range(n)] for i in range(n)]
        for k in range(n):
            reach = [
                [reach[i][j] or (reach[i][k] and reach[k][j]) for j in range(n)]
                for i in range(n)
            ]
        return _to_matrix([[1 if cell else 0 for cell in row] for row in reach], n)

    def is_acyclic(self, u: int) -> bool:
        """Treat the graph as undirected and report whether no cycle closes back at u.

        Self-loops and the edge back to a vertex's search parent are ignored.
        """
        self._check(u)
        n = self.vertices
        visited = [False] * n
        back = [-1] * n
        predecessor = [-1] * n
        visited[u] = True
        stack = [(u, -1, self.neighbors(u))]
        while stack:
            x, parent, pending = stack[-1]
            for v in pending:
                if v == x or v == parent:
                    continue
                if not visited[v]:
                    predecessor[v] = x
                    visited[v] = True
                    stack.append((v, x, self.neighbors(v)))
                    break
                back[v] = x
            else:
                stack.pop()
        return not any(b == u and p != u for b, p in zip(back, predecessor))

    def mst_kruskal(self) -> AdjacencyMatrixGraph:
        """Return a minimum spanning forest of the undirected graph.

        Edges are read from the upper triangle; only positive weights take part.
        """
        n = self.vertices
        tree = AdjacencyMatrixGraph(n)
        candidates = Matrix(n, n)
        for i in range(n):
            for j in range(i + 1, n):
                candidates[i, j] = self._weights[i][j]
        while True:
            weight, i, j = candidates.pop_min()
            if weight == math.inf:
                break
            tree.add_undirected_edge(i, j, weight)
            if not tree.is_acyclic(i):
                tree.remove_undirected_edge(i, j)
        return tree

    def make_random_graph(self, n: int, p: float, rng: random.Random | None = None) -> None:
        """Replace the graph with n vertices, each ordered pair joined with probability p."""
        if n < 0:
            raise ValueError(f"number of vertices must not be negative, got {n}")
        rng = rng if rng is not None else random.Random()
        self.vertices = n
        self._weights = [
            [1.0 if rng.random() <= p else 0.0 for _ in range(n)] for _ in range(n)
        ]

    def display(self) -> None:
        """Print the adjacency matrix with row and column labels."""
        print(" : " + "".join(f"{v}\t" for v in range(self.vertices)))
        for u, row in enumerate(self._weights):
            print(f"{u}: " + "".join(f"{w:g}\t" for w in row))
        print()

    def display_directed(self) -> None:
        """Print every directed edge with its weight."""
        print("List of directed edges:")
        for u in range(self.vertices):
            for v in self.neighbors(u):
                print(f"({u}, {v}) Weight: {self._weights[u][v]:g}")

    def display_undirected(self) -> None:
        """Print every edge of the upper triangle with its weight."""
        print("List of undirected edges:")
        for u in range(self.vertices):
            for v in self.neighbors(u):
                if v > u:
                    print(f"({u}, {v}) Weight: {self._weights[u][v]:g}")


def _to_matrix(rows: list[list], n: int) -> Matrix:
    result = Matrix(n, n)
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            result[i, j] = value
    return result


def format_all_pairs_path(predecessor: Matrix, i: int, j: int) -> str:
    """Describe the shortest path from i to j using an all-pairs predecessor matrix."""
    if i == j:
        return str(i)
    previous = int(predecessor[i, j])
    if previous == -1:
        return f"No path from {i} to {j}."
    return f"{format_all_pairs_path(predecessor, i, previous)}, {j}"