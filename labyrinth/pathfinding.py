"""
Reachability over a dungeon grid.

Coordinates are (x, y) tile positions. Walkability is supplied as a callback
so callers can layer extra rules (occupied tiles, doors) over the grid.
"""

from collections import deque
from typing import Callable, Deque, Set, Tuple

from .grid import Grid

# 4-directional neighbours: (delta_x, delta_y)
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


def grid_walkability(grid: Grid) -> Callable[[int, int], bool]:
    """Walkability callback for a grid: in bounds and not blocked."""

    def is_walkable(x: int, y: int) -> bool:
        return grid.in_bounds(x, y) and not grid.is_blocked(x, y)

    return is_walkable


def flood_fill(
    start_x: int,
    start_y: int,
    is_walkable_tile: Callable[[int, int], bool],
) -> Set[Tuple[int, int]]:
    """Return every tile reachable from (start_x, start_y), the start included."""
    start = (start_x, start_y)
    if not is_walkable_tile(*start):
        return set()

    visited: Set[Tuple[int, int]] = {start}
    queue: Deque[Tuple[int, int]] = deque([start])

    while queue:
        x, y = queue.popleft()
        for dx, dy in DIRECTIONS:
            neighbour = (x + dx, y + dy)
            if neighbour not in visited and is_walkable_tile(*neighbour):
                visited.add(neighbour)
                queue.append(neighbour)

    return visited
