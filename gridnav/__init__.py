"""Self-playing grid chase game with direction-aware pathfinding, and the queue, heap, matrix, graph and array structures it uses."""

__version__ = "0.1.0"