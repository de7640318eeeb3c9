"""A turn-based chase across a tile map: the player heads for the goal while enemies pursue."""

from __future__ import annotations

import math
import re
import sys
from collections import deque
from collections.abc import Callable
from os import PathLike
from typing import TextIO

from gridnav.agent import Agent
from gridnav.game_map import GameMap
from gridnav.graph_al import extract_path

ALGORITHMS = ("dijkstra", "bfs")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of text, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _in_tile(pos: int, tile: int) -> bool:
    return 4 * tile <= pos <= 4 * tile + 3


def _describe_move(old_pos: int, new_pos: int, cols: int) -> list[str]:
    """Describe a single step of the player agent as turn and movement messages."""
    diff = new_pos - old_pos
    new_dir = new_pos % 4
    old_dir = old_pos % 4
    messages = [
        f"Difference In Position: {diff}. Old Direction: {old_dir}. New Direction: {new_dir}."
    ]
    change = old_dir - new_dir
    if change == -2:
        messages.append(
            "Player agent turns right from north to east."
            if new_dir == 2
            else "Player agent turns left from west to south."
        )
    elif change == -1:
        messages.append(
            "Player agent turns right from east to south."
            if new_dir == 3
            else "Player agent turns left from north to west."
        )
    elif change == 2:
        messages.append(
            "Player agent turns right from south to west."
            if new_dir == 1
            else "Player agent turns left from east to north."
        )
    elif change == 1:
        messages.append(
            "Player agent turns right from west to north."
            if new_dir == 0
            else "Player agent turns left from south to east."
        )

    if diff == 4:
        messages.append(
            "Player agent moves forward to the east."
            if old_dir == 2
            else "Player agent moves backward to the east."
        )
    elif diff == 4 * cols:
        messages.append(
            "Player agent moves forward to the south."
            if old_dir == 3
            else "Player agent moves backward to the south."
        )
    elif diff == -4:
        messages.append(
            "Player agent moves forward to the west."
            if old_dir == 1
            else "Player agent moves backward to the west."
        )
    elif diff == -4 * cols:
        messages.append(
            "Player agent moves forward to the north."
            if old_dir == 0
            else "Player agent moves backward to the north."
        )
    return messages


class Game:
    """A game on one map, with a player agent and any number of enemies."""

    def __init__(
        self,
        map_path: str | PathLike[str] | None = None,
        algorithm: str = "dijkstra",
    ) -> None:
        if algorithm not in ALGORITHMS:
            raise ValueError(f"unknown pathfinding algorithm {algorithm!r}")
        self.algorithm = algorithm
        self.map: GameMap | None = None
        self.character = Agent()
        self.enemies: list[Agent] = []
        if map_path is not None:
            self.load_map(map_path)

    @property
    def _game_map(self) -> GameMap:
        if self.map is None:
            raise RuntimeError("no map has been loaded")
        return self.map

    def load_map(self, path: str | PathLike[str]) -> None:
        """Load a map file and build its navigation graph.

        The file holds the row count, the column count and the player's starting
        direction on its first three lines, followed by one line per map row.
        A file that cannot be opened yields a default empty map.
        """
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                lines = handle.read().splitlines()
        except OSError:
            self.map = GameMap()
            self.map.build_nav()
            self.enemies = []
            return

        print("File successfully opened. Loading map and locating points of interest...")
        if len(lines) < 3:
            raise ValueError(f"map file {path} needs at least three lines")

        rows = _leading_int(lines[0])
        cols = _leading_int(lines[1])
        direction = _leading_int(lines[2]) % 4
        game_map = GameMap(rows, cols)
        player_found = goal_found = False

        for row in range(rows):
            text = lines[3 + row] if 3 + row < len(lines) else ""
            for col, char in enumerate(text[:cols]):
                tile = row * cols + col
                if char == "s":
                    print(f"Player agent start found at tile {tile}")
                    game_map.player_start = tile * 4 + direction
                    player_found = True
                elif char == "g":
                    print(f"Goal found at tile {tile}")
                    game_map.goal = tile
                    goal_found = True
                elif char == "e":
                    print(f"Enemy found at tile {tile}")
                    game_map.enemy_starts.enqueue(tile * 4)
                game_map.matrix[row][col] = char

        self.enemies = []
        if not player_found:
            print("[ERROR] Player agent start not found!")
        if not goal_found:
            print("[ERROR] Goal not found!")

        self.map = game_map
        game_map.build_nav()

    def add_player(self) -> None:
        """Place a player agent at the map's start node."""
        player = Agent(player=True)
        player.move(self._game_map.player_start)
        self.character = player

    def add_enemy(self) -> None:
        """Place an enemy at the next unused enemy start, if any remain."""
        starts = self._game_map.enemy_starts
        if not starts.is_empty():
            enemy = Agent(player=False)
            enemy.move(starts.dequeue())
            self.enemies.append(enemy)

    def _centre_symbol(self, tile: int, char: str) -> str:
        if _in_tile(self.character.pos, tile):
            return self.character.char_rep()
        if tile == self._game_map.goal:
            return "x"
        if any(_in_tile(enemy.pos, tile) for enemy in self.enemies):
            return "o"
        return "#" if char == "i" else "-"

    def render(self) -> str:
        """Draw the map with every tile as a 3x3 block."""
        game_map = self._game_map
        out: list[str] = []
        for i, row in enumerate(game_map.matrix):
            for sub_row in range(3):
                for k, char in enumerate(row):
                    tile = i * game_map.cols + k
                    for sub_col in range(3):
                        if sub_row == 1 and sub_col == 1:
                            symbol = self._centre_symbol(tile, char)
                        else:
                            symbol = "#" if char == "i" else "-"
                        out.append(f"{symbol} ")
                    out.append("  ")
                out.append("\n")
            out.append("\n")
        return "".join(out)

    def render_compact(self) -> str:
        """Draw the map with one symbol per tile."""
        game_map = self._game_map
        out: list[str] = []
        for i, row in enumerate(game_map.matrix):
            for j, char in enumerate(row):
                tile = i * game_map.cols + j
                if char == "i":
                    symbol = "#"
                elif _in_tile(self.character.pos, tile):
                    symbol = self.character.char_rep()
                elif tile == game_map.goal:
                    symbol = "x"
                elif any(_in_tile(enemy.pos, tile) for enemy in self.enemies):
                    symbol = "o"
                else:
                    symbol = " "
                out.append(f"{symbol} ")
            out.append("\n")
        return "".join(out)

    def display_nav(self) -> None:
        """Print the navigation graph of the current map."""
        self._game_map.nav.display()

    @staticmethod
    def _nearest_node(distance: list[float], dest_tile: int) -> int:
        return min(range(4 * dest_tile, 4 * dest_tile + 4), key=distance.__getitem__)

    def path_dijkstra(self, src: int, dest_tile: int) -> list[int]:
        """Cheapest node path from src to whichever side of dest_tile is nearest.

        Returns an empty list when there is no goal or it cannot be reached.
        """
        if dest_tile == -1:
            return []
        distance, predecessor = self._game_map.nav.dijkstra(src)
        nearest = self._nearest_node(distance, dest_tile)
        if distance[nearest] == math.inf:
            return []
        return extract_path(nearest, predecessor)

    def path_bfs(self, src: int, dest_tile: int) -> list[int]:
        """Node path with fewest edges from src to the nearest side of dest_tile.

        Returns an empty list when there is no goal or the chosen side has distance 0.
        """
        if dest_tile == -1:
            return []
        _, distance, predecessor = self._game_map.nav.bfs(src)
        nearest = self._nearest_node(distance, dest_tile)
        if distance[nearest] == 0:
            return []
        return extract_path(nearest, predecessor)

    def _find_path(self, src: int, dest_tile: int) -> list[int]:
        if self.algorithm == "bfs":
            return self.path_bfs(src, dest_tile)
        return self.path_dijkstra(src, dest_tile)

    def play(
        self,
        input_fn: Callable[[], object] | None = None,
        out: TextIO | None = None,
    ) -> bool:
        """Run the game turn by turn, waiting on input_fn between turns.

        Returns True when an enemy caught the player.
        """
        wait = input_fn if input_fn is not None else input
        out = out if out is not None else sys.stdout
        game_map = self._game_map

        def say(text: str) -> None:
            print(text, file=out)

        def pause() -> None:
            try:
                wait()
            except EOFError:
                pass

        caught = False

        say("Attempting to add player...")
        if game_map.player_start != -1:
            self.add_player()
            say("Character successfully added.")
        else:
            say("[ERROR] Failed to add player. No valid player start found.")

        say("Attempting to build path to goal...")
        path: deque[int] = deque()
        if self.character.pos != -1:
            path = deque(self._find_path(self.character.pos, game_map.goal))
            say("Successfully built path to goal.")
            if path:
                self.character.move(path.popleft())
        else:
            say("[ERROR] Failed to build path to goal. No character found.")

        say("Attempting to add enemies...")
        max_enemies = len(game_map.enemy_starts)
        say(f"Maximum number of enemies: {max_enemies}")
        for _ in range(max_enemies):
            self.add_enemy()
        say(f"Number of enemies after adding: {len(self.enemies)}")

        out.write(self.render_compact())

        while path and not caught:
            pause()
            for enemy in self.enemies:
                enemy_path = deque(self._find_path(enemy.pos, self.character.pos // 4))
                # The first node of a path is the enemy's own position, so it moves twice.
                for _ in range(2):
                    if enemy_path:
                        enemy.move(enemy_path.popleft())
                if enemy.pos // 4 == self.character.pos // 4:
                    caught = True

            if path and not caught:
                new_pos = path.popleft()
                for message in _describe_move(self.character.pos, new_pos, game_map.cols):
                    say(message)
                self.character.move(new_pos)

            out.write(self.render_compact())

        if caught:
            say("Game over! Player agent was caught. Press enter to exit.")
        else:
            say("Game over! Press enter to exit.")
        pause()
        return caught