"""Tile map and the navigation graph built from it."""

from __future__ import annotations

from gridnav.fifo import Queue
from gridnav.graph_al import AdjacencyListGraph

# Each tile has four nodes, one per facing: 4 * tile + direction.
_NORTH, _WEST, _EAST, _SOUTH = 0, 1, 2, 3

_LEFT_TURN = 8
_RIGHT_TURN = 4
_FORWARD = 2
_BACKWARD = 4


class GameMap:
    """A grid of tile characters.

    'i' impassable, 'p' passable, 'g' goal, 's' player start, 'e' enemy start.
    """

    def __init__(self, rows: int = 10, cols: int = 10) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"invalid map size {rows} x {cols}")
        self.rows = rows
        self.cols = cols
        self.matrix = [["p"] * cols for _ in range(rows)]
        self.nav = AdjacencyListGraph(rows * cols * 4)
        self.player_start = -1
        self.goal = -1
        self.enemy_starts = Queue(rows * cols)

    def _locate(self, index: int) -> tuple[int, int]:
        if not 0 <= index < self.rows * self.cols:
            raise IndexError(f"tile {index} is outside the map")
        return divmod(index, self.cols)

    def tile(self, index: int) -> str:
        """Return the character of the tile at a flattened index."""
        row, col = self._locate(index)
        return self.matrix[row][col]

    def set_tile(self, index: int, state: str) -> None:
        row, col = self._locate(index)
        self.matrix[row][col] = state

    def build_nav(self) -> None:
        """Link direction nodes of passable tiles with turn and move edges."""
        nav = self.nav
        cols = self.cols
        total = self.rows * cols
        for i in range(total):
            if self.tile(i) == "i":
                continue
            base = 4 * i
            nav.add_directed_edge(base + _NORTH, base + _WEST, _LEFT_TURN)
            nav.add_directed_edge(base + _WEST, base + _SOUTH, _LEFT_TURN)
            nav.add_directed_edge(base + _SOUTH, base + _EAST, _LEFT_TURN)
            nav.add_directed_edge(base + _EAST, base + _NORTH, _LEFT_TURN)
            nav.add_directed_edge(base + _NORTH, base + _EAST, _RIGHT_TURN)
            nav.add_directed_edge(base + _EAST, base + _SOUTH, _RIGHT_TURN)
            nav.add_directed_edge(base + _SOUTH, base + _WEST, _RIGHT_TURN)
            nav.add_directed_edge(base + _WEST, base + _NORTH, _RIGHT_TURN)

            if i % cols + 1 < cols and self.tile(i + 1) != "i":
                right = 4 * (i + 1)
                nav.add_directed_edge(right + _WEST, base + _WEST, _FORWARD)
                nav.add_directed_edge(base + _WEST, right + _WEST, _BACKWARD)
                nav.add_directed_edge(base + _EAST, right + _EAST, _FORWARD)
                nav.add_directed_edge(right + _EAST, base + _EAST, _BACKWARD)

            if i + cols < total and self.tile(i + cols) != "i":
                below = 4 * (i + cols)
                nav.add_directed_edge(below + _NORTH, base + _NORTH, _FORWARD)
                nav.add_directed_edge(base + _NORTH, below + _NORTH, _BACKWARD)
                nav.add_directed_edge(base + _SOUTH, below + _SOUTH, _FORWARD)
                nav.add_directed_edge(below + _SOUTH, base + _SOUTH, _BACKWARD)