#!/usr/bin/env python3
"""
Render a dungeon to an image file for visual inspection.

Useful for:
- Checking room and tunnel layouts
- Verifying wall/floor shading
- Seeing what the player can see from the spawn point

Usage:
    python tools/render_dungeon_image.py                      # fixed two-room map
    python tools/render_dungeon_image.py --random --seed 42   # reproducible random dungeon
    python tools/render_dungeon_image.py --fov                # light what the player sees
    python tools/render_dungeon_image.py --output my.png      # custom output path
"""

import argparse
import cv2
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from labyrinth.dungeon_gen import generate_dungeon, generate_random_dungeon, reference_request
from labyrinth.errors import DungeonError
from labyrinth.render import TILE_SIZE, draw_actors, render_image, shade_level, shade_tiles
from labyrinth.world import FOV_RADIUS, Level


def log(message: str) -> None:
    print(message, file=sys.stderr)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Render a dungeon to an image file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Generate a random layout instead of the fixed two-room map",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducible dungeons",
    )
    parser.add_argument(
        "--fov",
        action="store_true",
        help="Shade by what the player can see from the spawn point",
    )
    parser.add_argument(
        "--radius",
        type=int,
        default=FOV_RADIUS,
        help=f"Field of view radius, 0 for unlimited (default: {FOV_RADIUS})",
    )
    parser.add_argument(
        "--tile-size",
        type=int,
        default=TILE_SIZE,
        help=f"Pixels per tile (default: {TILE_SIZE})",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default="dungeon_render.png",
        help="Output image path (default: dungeon_render.png)",
    )

    args = parser.parse_args()

    try:
        if args.random:
            log(f"Generating random dungeon (seed {args.seed})...")
            generated = generate_random_dungeon(seed=args.seed)
        else:
            log("Generating fixed two-room dungeon...")
            generated = generate_dungeon(reference_request())
        level = Level(generated, fov_radius=args.radius)
    except DungeonError as e:
        log(f"Error: {e}")
        sys.exit(1)

    grid = level.grid
    log(f"Dungeon size: {grid.width}x{grid.height} tiles")

    colors = shade_level(level) if args.fov else shade_tiles(grid)
    image = render_image(colors, args.tile_size)
    draw_actors(image, level.actors, args.tile_size)
    log(f"Player at tile ({level.player.x}, {level.player.y})")

    output_path = Path(args.output)
    cv2.imwrite(str(output_path), image)
    log(f"Saved to: {output_path.absolute()}")

    log(f"\nRooms ({len(level.rooms)}):")
    for room_id, room in enumerate(level.rooms):
        log(f"  Room {room_id}: ({room.x1}, {room.y1})-({room.x2}, {room.y2}), centre {room.center()}")


if __name__ == "__main__":
    main()
