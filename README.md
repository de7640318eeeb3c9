# gridnav

A small turn-based grid game that plays itself. A player agent walks from its
start tile to a goal along the cheapest route, and enemy agents move towards
the player every turn. If an enemy reaches the player's tile, the game ends
with the player caught.

Every tile has four navigation nodes, one per facing direction
(`4 * tile + direction`, with 0 north, 1 west, 2 east, 3 south). Turning
left costs 8, turning right 4, moving forwards 2 and moving backwards 4.
Routes therefore take facing into account.

The package also contains the data structures the game uses and a few it
does not: a bounded FIFO queue, a binary-heap priority queue, a dense matrix,
an adjacency-list graph, an adjacency-matrix graph, a growable integer array
with several sorting algorithms, and a 3x3 text tile.

No third-party packages are needed.

## Installing

```
pip install .
```

## Playing

```
gridnav [MAPS_DIR] [--algorithm {dijkstra,bfs}]
```

`MAPS_DIR` defaults to `maps` in the current directory. The command lists the
entries of that directory whose names do not start with a dot, sorted by
name and numbered from 0, and asks for a number. An invalid choice prints
`Invalid map selection.` and exits with status 1.

Once a map is chosen, the game prints the board, then waits for Enter before
each turn. In each turn the enemies move first (each takes up to two steps
along its own shortest path to the player), then the player takes one step
along its route, and the turns and moves it makes are described. The board
is drawn one symbol per tile:

| symbol        | meaning                                   |
|---------------|-------------------------------------------|
| `#`           | impassable tile                           |
| `^ < > v`     | player, facing north, west, east, south   |
| `x`           | goal                                      |
| `o`           | enemy                                     |
| blank         | passable tile                             |

`--algorithm dijkstra` (the default) uses weighted shortest paths;
`--algorithm bfs` uses paths with the fewest edges.

### Map format

A map is a plain text file. The first three lines give the number of rows,
the number of columns and the player's starting direction (taken modulo 4).
The rows of the grid follow, one character per tile:

| char | meaning           |
|------|-------------------|
| `i`  | impassable        |
| `p`  | passable          |
| `s`  | player start      |
| `g`  | goal              |
| `e`  | enemy start       |

```
3
4
2
sppp
piip
eppg
```

A file with fewer than three lines raises `ValueError`. A file that cannot be
opened gives an empty 10 x 10 map of passable tiles.

## Using the library

```python
from gridnav.game import Game

game = Game("maps/small.txt", algorithm="dijkstra")
route = game.path_dijkstra(game.map.player_start, game.map.goal)
print(game.render_compact())
caught = game.play(input_fn=lambda: None)
```

`Game.play` takes the function it waits on between turns and a text stream
to write to, and returns `True` when the player was caught. `Game.render`
draws the board with each tile as a 3x3 block.

```python
from gridnav.graph_al import AdjacencyListGraph, extract_path

graph = AdjacencyListGraph(4)
graph.add_directed_edge(0, 1, 2.0)
graph.add_directed_edge(1, 3, 1.0)
distance, predecessor = graph.dijkstra(0)
print(extract_path(3, predecessor))  # [0, 1, 3]
```

Modules:

- `gridnav.game` – `Game`: map loading, rendering, path finding and the game loop.
- `gridnav.game_map` – `GameMap`: the tile grid and its navigation graph (`build_nav`).
- `gridnav.agent` – `Agent`: a player or enemy at a navigation node.
- `gridnav.graph_al` – `AdjacencyListGraph` (BFS, DFS, Bellman–Ford, Dijkstra), `State`, `extract_path`.
- `gridnav.graph_am` – `AdjacencyMatrixGraph` (also Floyd–Warshall, all-pairs Dijkstra,
  transitive closure, Kruskal minimum spanning forest, random graphs) and `format_all_pairs_path`.
- `gridnav.fifo` – `Queue`, `QueueFullError`, `QueueEmptyError`.
- `gridnav.priority_queue` – `PriorityQueue`, `QueueElement`.
- `gridnav.matrix` – `Matrix` with `+`, `-`, `*`, `pop_min` and `identity`.
- `gridnav.dynarray` – `DynamicArray` with insertion, selection, bubble, quick and merge sort,
  linear and binary search.
- `gridnav.tile` – `Tile`, a 3x3 text block for one map square.

## What it does not do

The player is not steered by the user: its route is computed once at the
start and followed step by step, and Enter only advances the turn. There is
no graphical display, no saving of games and no map editor; maps are written
by hand as text files.

## Running the tests

```
pip install .[test]
pytest
```