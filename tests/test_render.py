"""Tests for ASCII and image rendering."""

import numpy as np
import pytest

from labyrinth.dungeon_gen import GeneratedLevel, make_map
from labyrinth.grid import Grid
from labyrinth.render import (
    COLOR_DARK_GROUND,
    COLOR_DARK_WALL,
    COLOR_LIGHT_GROUND,
    COLOR_LIGHT_WALL,
    COLOR_UNEXPLORED,
    draw_actors,
    render_ascii,
    render_image,
    shade_level,
    shade_tiles,
)
from labyrinth.world import Actor, Level


ROOM = [
    "#####",
    "#...#",
    "#####",
]


class TestRenderAscii:
    def test_round_trips_the_map(self):
        grid = Grid.from_ascii(ROOM)
        assert render_ascii(grid) == "\n".join(ROOM)

    def test_actors_drawn_on_top(self):
        grid = Grid.from_ascii(ROOM)
        text = render_ascii(grid, [Actor(2, 1), Actor(3, 1, char="o")])
        assert text.splitlines()[1] == "#.@o#"

    def test_off_grid_actor_is_ignored(self):
        grid = Grid.from_ascii(ROOM)
        assert render_ascii(grid, [Actor(10, 10)]) == "\n".join(ROOM)

    def test_reference_map_dimensions(self):
        lines = render_ascii(make_map()).splitlines()
        assert len(lines) == 50
        assert all(len(line) == 80 for line in lines)
        assert lines[23][25:56] == "." * 31


class TestShadeTiles:
    def test_dark_colours_without_visibility(self):
        colors = shade_tiles(Grid.from_ascii(ROOM))
        assert colors.shape == (3, 5, 3)
        assert colors.dtype == np.uint8
        assert tuple(colors[0, 0]) == COLOR_DARK_WALL
        assert tuple(colors[1, 1]) == COLOR_DARK_GROUND

    def test_visible_tiles_are_lit(self):
        grid = Grid.from_ascii(ROOM)
        visible = np.zeros((3, 5), dtype=bool)
        visible[1, 1] = True
        visible[0, 1] = True
        explored = visible.copy()
        explored[1, 3] = True

        colors = shade_tiles(grid, visible, explored)

        assert tuple(colors[1, 1]) == COLOR_LIGHT_GROUND
        assert tuple(colors[0, 1]) == COLOR_LIGHT_WALL
        # Explored but not visible stays dark
        assert tuple(colors[1, 3]) == COLOR_DARK_GROUND
        # Never seen is black
        assert tuple(colors[1, 2]) == COLOR_UNEXPLORED
        assert tuple(colors[2, 4]) == COLOR_UNEXPLORED

    def test_shade_level_uses_level_masks(self):
        level = Level(GeneratedLevel(grid=Grid.from_ascii(ROOM), spawn=(1, 1)))
        colors = shade_level(level)
        assert tuple(colors[1, 1]) == COLOR_LIGHT_GROUND
        assert tuple(colors[1, 3]) == COLOR_LIGHT_GROUND


class TestRenderImage:
    def test_scales_each_tile(self):
        colors = shade_tiles(Grid.from_ascii(ROOM))
        image = render_image(colors, tile_size=4)
        assert image.shape == (12, 20, 3)
        # Every pixel in a tile has the tile's colour
        assert (image[4:8, 4:8] == image[4, 4]).all()

    def test_output_is_bgr(self):
        colors = shade_tiles(Grid.from_ascii(ROOM))
        image = render_image(colors, tile_size=2)
        assert tuple(image[0, 0]) == tuple(reversed(COLOR_DARK_WALL))
        assert tuple(image[2, 2]) == tuple(reversed(COLOR_DARK_GROUND))

    def test_draw_actors_fills_their_tile(self):
        colors = shade_tiles(Grid.from_ascii(ROOM))
        image = render_image(colors, tile_size=4)
        draw_actors(image, [Actor(2, 1, color=(255, 0, 0))], tile_size=4)

        assert tuple(image[4, 8]) == (0, 0, 255)
        assert tuple(image[7, 11]) == (0, 0, 255)
        # Neighbouring tile untouched
        assert tuple(image[4, 12]) == tuple(reversed(COLOR_DARK_GROUND))
