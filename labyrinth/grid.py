"""
Tile grid backing collision and sight checks.

The grid stores one tile value per cell in a numpy array of shape
(height, width), so cell (x, y) lives at tiles[y, x]. Every accessor takes
(x, y) and validates it; negative coordinates are rejected rather than
wrapping around to the far edge the way numpy indexing would.
"""

from typing import Iterable, List, Tuple

import numpy as np

from .errors import InvalidGeometryError, OutOfBoundsError
from .tiles import BLOCKED, BLOCKS_SIGHT, TILE_DTYPE, Tile


class Grid:
    def __init__(self, width: int, height: int, fill: Tile = Tile.WALL) -> None:
        if width <= 0 or height <= 0:
            raise InvalidGeometryError(
                f"Grid must have positive dimensions, got {width}x{height}"
            )
        self.width: int = width
        self.height: int = height
        self._set_tiles(np.full((height, width), fill, dtype=TILE_DTYPE))

    def _set_tiles(self, data: np.ndarray) -> None:
        # tiles is a view, so once the owning array is read-only the view
        # can never be made writable again
        self._tiles: np.ndarray = data
        self.tiles: np.ndarray = data.view()

    @classmethod
    def from_ascii(cls, lines: Iterable[str]) -> "Grid":
        """
        Build a grid from rows of text: '#' is a wall, anything else is floor.

        All rows must have the same length.
        """
        rows: List[str] = list(lines)
        if not rows or not rows[0]:
            raise InvalidGeometryError("ASCII grid must have at least one cell")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidGeometryError("ASCII grid rows must all be the same length")

        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char != "#":
                    grid.tiles[y, x] = Tile.FLOOR
        return grid

    @property
    def shape(self) -> Tuple[int, int]:
        """(width, height) of the grid."""
        return (self.width, self.height)

    @property
    def frozen(self) -> bool:
        return not self.tiles.flags.writeable

    def freeze(self) -> "Grid":
        """Make the grid read-only for good. Further writes raise ValueError."""
        self._tiles.flags.writeable = False
        self.tiles.flags.writeable = False
        return self

    def copy(self) -> "Grid":
        """Return a writable copy of this grid."""
        clone = Grid.__new__(Grid)
        clone.width = self.width
        clone.height = self.height
        clone._set_tiles(self._tiles.copy())
        return clone

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def check_bounds(self, x: int, y: int) -> None:
        """Raise OutOfBoundsError unless (x, y) lies inside the grid."""
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def tile_at(self, x: int, y: int) -> Tile:
        self.check_bounds(x, y)
        return Tile(int(self.tiles[y, x]))

    def is_blocked(self, x: int, y: int) -> bool:
        """True if an actor cannot stand on (x, y)."""
        self.check_bounds(x, y)
        return bool(BLOCKED[self.tiles[y, x]])

    def is_sight_blocking(self, x: int, y: int) -> bool:
        """True if (x, y) stops a sight or light ray."""
        self.check_bounds(x, y)
        return bool(BLOCKS_SIGHT[self.tiles[y, x]])

    def blocked_mask(self) -> np.ndarray:
        """Boolean (height, width) array, True where movement is blocked."""
        return BLOCKED[self.tiles]

    def transparency(self) -> np.ndarray:
        """Boolean (height, width) array, True where sight passes through."""
        return ~BLOCKS_SIGHT[self.tiles]

    def fill(self, x1: int, y1: int, x2: int, y2: int, tile: Tile) -> None:
        """
        Set every cell with x1 <= x < x2 and y1 <= y < y2 to tile.

        Both corners of the half-open box must be inside the grid (x2 and y2
        may equal width and height). An empty box is a no-op.
        """
        if x2 <= x1 or y2 <= y1:
            return
        self.check_bounds(x1, y1)
        self.check_bounds(x2 - 1, y2 - 1)
        self.tiles[y1:y2, x1:x2] = tile

    def count(self, tile: Tile) -> int:
        """Number of cells holding the given tile kind."""
        return int(np.count_nonzero(self.tiles == tile))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.tiles, other.tiles)

    def __repr__(self) -> str:
        state = "frozen" if self.frozen else "writable"
        return f"Grid({self.width}x{self.height}, {state})"


def is_blocked(grid: Grid, x: int, y: int) -> bool:
    """Return the blocked flag of the tile at (x, y). Raises OutOfBoundsError."""
    return grid.is_blocked(x, y)


def is_sight_blocking(grid: Grid, x: int, y: int) -> bool:
    """Return the blocks-sight flag of the tile at (x, y). Raises OutOfBoundsError."""
    return grid.is_sight_blocking(x, y)
