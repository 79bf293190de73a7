#!/usr/bin/env python3
"""
Render a generated dungeon as ASCII art for debugging.

Usage:
    python tools/render_dungeon_ascii.py                   # fixed two-room map
    python tools/render_dungeon_ascii.py --random --seed 7 # random rooms and tunnels
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path so we can import labyrinth
sys.path.insert(0, str(Path(__file__).parent.parent))

from labyrinth.dungeon_gen import (
    MAP_HEIGHT,
    MAP_WIDTH,
    MAX_ROOMS,
    GeneratedLevel,
    generate_dungeon,
    generate_random_dungeon,
    reference_request,
)
from labyrinth.errors import DungeonError
from labyrinth.pathfinding import flood_fill, grid_walkability
from labyrinth.render import render_ascii
from labyrinth.tiles import Tile
from labyrinth.world import Actor


def log(message: str) -> None:
    """Log to stderr so stdout only carries the map."""
    print(message, file=sys.stderr)


def build_level(args: argparse.Namespace) -> GeneratedLevel:
    if args.random:
        return generate_random_dungeon(
            width=args.width,
            height=args.height,
            max_rooms=args.max_rooms,
            seed=args.seed,
        )
    return generate_dungeon(reference_request())


def main() -> None:
    parser = argparse.ArgumentParser(description="Render dungeon as ASCII art")
    parser.add_argument("--random", action="store_true", help="Generate a random layout")
    parser.add_argument("--width", type=int, default=MAP_WIDTH, help="Grid width (random only)")
    parser.add_argument("--height", type=int, default=MAP_HEIGHT, help="Grid height (random only)")
    parser.add_argument("--max-rooms", type=int, default=MAX_ROOMS, help="Room placement attempts")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible generation")
    args = parser.parse_args()

    try:
        level = build_level(args)
    except DungeonError as e:
        log(f"Error: {e}")
        sys.exit(1)

    actors = [Actor(*level.spawn)] if level.spawn is not None else []
    print(render_ascii(level.grid, actors))

    # Print some debug info
    log("\n--- Debug Info ---")
    log(f"Map size: {level.grid.width}x{level.grid.height} tiles")
    log(f"Spawn: {level.spawn}")
    if level.spawn is not None:
        reachable = flood_fill(*level.spawn, grid_walkability(level.grid))
        log(f"Floor reachable from spawn: {len(reachable)}/{level.grid.count(Tile.FLOOR)} tiles")
    log(f"Rooms generated: {len(level.rooms)}")
    if level.seed is not None:
        log(f"Seed: {level.seed}")


if __name__ == "__main__":
    main()
