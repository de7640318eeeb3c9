"""Agents that move between direction nodes of the navigation graph."""

from __future__ import annotations

from dataclasses import dataclass

_FACING = "^<>v"


@dataclass
class Agent:
    """A player or hostile agent located at a graph node.

    A node index is ``4 * tile + direction`` with directions north, west, east, south.
    """

    player: bool = False
    pos: int = -1

    def char_rep(self) -> str:
        """Return the symbol for the direction the agent faces, or 'o' when unplaced."""
        remainder = abs(self.pos) % 4
        if self.pos < 0 and remainder:
            return "o"
        return _FACING[remainder]

    def move(self, new_pos: int) -> None:
        self.pos = new_pos