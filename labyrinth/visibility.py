"""
Field-of-view oracles.

The grid only answers "does this cell block sight". Working out which cells
can be seen from a point is delegated to a VisibilityOracle so the sweep
algorithm can be swapped without touching the grid or the generator.
"""

from typing import List, Protocol, Set, Tuple

from .grid import Grid

Coord = Tuple[int, int]


class VisibilityOracle(Protocol):
    def compute_visibility(
        self, grid: Grid, origin_x: int, origin_y: int, radius: int
    ) -> Set[Coord]:
        """
        Return the set of (x, y) cells visible from the origin.

        radius == 0 means unlimited. The origin is always visible, and a
        sight-blocking cell that stops a ray is itself visible.

        Raises:
            OutOfBoundsError: if the origin is outside the grid
            ValueError: if radius is negative
        """
        ...


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> List[Coord]:
    """Cells on the line from (x0, y0) to (x1, y1), both ends included."""
    points: List[Coord] = []

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    x, y = x0, y0
    while True:
        points.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy

    return points


def has_line_of_sight(grid: Grid, x0: int, y0: int, x1: int, y1: int) -> bool:
    """
    True if nothing between (x0, y0) and (x1, y1) blocks sight.

    Neither end is checked, so an opaque target is still "seen".
    """
    line = bresenham_line(x0, y0, x1, y1)
    for x, y in line[1:-1]:
        if grid.is_sight_blocking(x, y):
            return False
    return True


class LineOfSightOracle:
    """Casts a Bresenham ray to every cell within the radius."""

    def compute_visibility(
        self, grid: Grid, origin_x: int, origin_y: int, radius: int
    ) -> Set[Coord]:
        grid.check_bounds(origin_x, origin_y)
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")

        if radius == 0:
            min_x, max_x = 0, grid.width - 1
            min_y, max_y = 0, grid.height - 1
        else:
            min_x, max_x = max(0, origin_x - radius), min(grid.width - 1, origin_x + radius)
            min_y, max_y = max(0, origin_y - radius), min(grid.height - 1, origin_y + radius)

        visible: Set[Coord] = {(origin_x, origin_y)}
        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                dx, dy = x - origin_x, y - origin_y
                if radius and dx * dx + dy * dy > radius * radius:
                    continue
                if has_line_of_sight(grid, origin_x, origin_y, x, y):
                    visible.add((x, y))
        return visible
