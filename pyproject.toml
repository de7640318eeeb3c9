[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridnav"
version = "0.1.0"
description = "Turn-based grid chase game with direction-aware navigation graphs, plus the queue, heap, matrix, graph and array structures it uses"
requires-python = ">=3.10"
dependencies = []
keywords = ["pathfinding", "dijkstra", "bfs", "graph", "grid", "game", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridnav = "gridnav.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gridnav"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
