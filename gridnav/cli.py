"""Command line entry point: choose a map and play it."""

from __future__ import annotations

import argparse
from pathlib import Path

from gridnav.game import ALGORITHMS, Game


def list_maps(directory: str | Path) -> list[Path]:
    """Return the non-hidden entries of a maps directory, sorted by name."""
    return sorted(
        (entry for entry in Path(directory).iterdir() if not entry.name.startswith(".")),
        key=lambda entry: entry.name,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gridnav", description="Watch an agent navigate a tile map while enemies pursue it."
    )
    parser.add_argument("maps_dir", nargs="?", default="maps", help="directory holding map files")
    parser.add_argument("--algorithm", choices=ALGORITHMS, default="dijkstra")
    args = parser.parse_args(argv)

    print(f"Current working directory is {Path.cwd()}")
    try:
        maps = list_maps(args.maps_dir)
    except OSError as exc:
        print(f"Cannot read maps directory {args.maps_dir}: {exc}")
        return 1

    print("Available maps:")
    for number, entry in enumerate(maps):
        print(f'{number}: "{entry.name}"')

    try:
        choice = int(input("Please enter the number next to the map you would like to use: ").strip())
    except (EOFError, ValueError):
        choice = -1

    if not 0 <= choice < len(maps):
        print("Invalid map selection.")
        return 1

    Game(maps[choice], args.algorithm).play()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())