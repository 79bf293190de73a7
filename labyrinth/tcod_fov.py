"""Visibility oracle backed by python-tcod's field-of-view algorithms."""

from typing import Set, Tuple

import numpy as np
import tcod.constants
import tcod.map

from .grid import Grid

FOV_ALGO: int = tcod.constants.FOV_BASIC
FOV_LIGHT_WALLS: bool = True


class TcodFovOracle:
    """
    Runs tcod.map.compute_fov over the grid's transparency array.

    The array is indexed [y, x], so the point of view is passed to tcod as
    (y, x) and the result is converted back to (x, y) pairs.
    """

    def __init__(self, algorithm: int = FOV_ALGO, light_walls: bool = FOV_LIGHT_WALLS) -> None:
        self.algorithm = algorithm
        self.light_walls = light_walls

    def compute_visibility(
        self, grid: Grid, origin_x: int, origin_y: int, radius: int
    ) -> Set[Tuple[int, int]]:
        grid.check_bounds(origin_x, origin_y)
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")

        visible = tcod.map.compute_fov(
            grid.transparency(),
            (origin_y, origin_x),
            radius=radius,
            light_walls=self.light_walls,
            algorithm=self.algorithm,
        )
        ys, xs = np.nonzero(visible)
        return {(int(x), int(y)) for x, y in zip(xs, ys)}
