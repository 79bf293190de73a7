"""Errors raised by grid queries and dungeon generation."""


class DungeonError(Exception):
    """Base class for labyrinth errors."""


class OutOfBoundsError(DungeonError, IndexError):
    """A query or write targeted a coordinate outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"({x}, {y}) is outside the {width}x{height} grid"
        )
        self.x = x
        self.y = y


class InvalidGeometryError(DungeonError, ValueError):
    """A room, tunnel, grid size or spawn point is not usable."""
