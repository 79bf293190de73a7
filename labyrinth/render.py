"""
Turning a grid into something to look at.

Colours are RGB tuples; render_image() converts to BGR because that's what
OpenCV writes.
"""

from typing import Iterable, List, Optional, Tuple

import cv2
import numpy as np

from .grid import Grid
from .tiles import TILE_TO_ASCII, Tile
from .world import Actor, Level

# Type Definition
Image = np.ndarray
Color = Tuple[int, int, int]

TILE_SIZE: int = 8

COLOR_DARK_WALL: Color = (0, 0, 100)
COLOR_DARK_GROUND: Color = (50, 50, 150)
COLOR_LIGHT_WALL: Color = (130, 110, 50)
COLOR_LIGHT_GROUND: Color = (200, 180, 50)
COLOR_UNEXPLORED: Color = (0, 0, 0)


def shade_tiles(
    grid: Grid,
    visible: Optional[np.ndarray] = None,
    explored: Optional[np.ndarray] = None,
) -> Image:
    """
    Pick a background colour for every tile.

    Walls are the tiles that block sight. Without visibility information
    every tile gets its dark colour. With it, visible tiles are lit, explored
    ones stay dark and the rest are black.

    Returns:
        (height, width, 3) uint8 RGB array
    """
    walls = ~grid.transparency()
    colors: Image = np.empty((grid.height, grid.width, 3), dtype=np.uint8)
    colors[walls] = COLOR_DARK_WALL
    colors[~walls] = COLOR_DARK_GROUND

    if visible is None:
        return colors

    if explored is not None:
        colors[~(explored | visible)] = COLOR_UNEXPLORED
    colors[visible & walls] = COLOR_LIGHT_WALL
    colors[visible & ~walls] = COLOR_LIGHT_GROUND
    return colors


def shade_level(level: Level) -> Image:
    return shade_tiles(level.grid, level.visible, level.explored)


def render_ascii(grid: Grid, actors: Iterable[Actor] = ()) -> str:
    """Draw the grid as text, one row per line, with actors drawn on top."""
    rows: List[List[str]] = [
        [TILE_TO_ASCII[Tile(int(value))] for value in row] for row in grid.tiles
    ]
    for actor in actors:
        if grid.in_bounds(actor.x, actor.y):
            rows[actor.y][actor.x] = actor.char
    return "\n".join("".join(row) for row in rows)


def render_image(colors: Image, tile_size: int = TILE_SIZE) -> Image:
    """Scale per-tile colours up to tile_size pixel squares, as BGR."""
    height, width = colors.shape[:2]
    scaled = cv2.resize(
        colors,
        (width * tile_size, height * tile_size),
        interpolation=cv2.INTER_NEAREST,
    )
    return cv2.cvtColor(scaled, cv2.COLOR_RGB2BGR)


def draw_actors(image: Image, actors: Iterable[Actor], tile_size: int = TILE_SIZE) -> None:
    """Fill each actor's tile with its colour (BGR image, drawn in place)."""
    for actor in actors:
        r, g, b = actor.color
        top_left = (actor.x * tile_size, actor.y * tile_size)
        bottom_right = (top_left[0] + tile_size - 1, top_left[1] + tile_size - 1)
        cv2.rectangle(image, top_left, bottom_right, (b, g, r), thickness=-1)
