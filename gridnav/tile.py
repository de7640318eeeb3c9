"""A 3x3 text block used to draw one map square."""

from __future__ import annotations

import sys

_SIZE = 3


class Tile:
    """A map square drawn as nine characters.

    States: 'p' passable, 'i' impassable, 'o' occupied, 'g' goal.
    """

    def __init__(self) -> None:
        self.state = "p"
        self.cells = ["_"] * (_SIZE * _SIZE)

    def update(self, state: str) -> None:
        """Redraw the tile for the given state; unknown states draw as passable."""
        self.state = state
        fill = "#" if state == "i" else "_"
        self.cells = [fill] * (_SIZE * _SIZE)
        if state == "g":
            self.cells[len(self.cells) // 2] = "X"

    def render(self) -> str:
        """Return the tile as three lines of space-separated characters."""
        return "\n".join(
            " ".join(self.cells[row * _SIZE:(row + 1) * _SIZE]) for row in range(_SIZE)
        )

    def display(self) -> str:
        """Write the tile followed by a blank line to stdout and return that text."""
        text = self.render() + "\n\n"
        sys.stdout.write(text)
        return text