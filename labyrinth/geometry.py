"""Room and tunnel shapes used while carving a dungeon."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Tuple

from .errors import InvalidGeometryError

# A tile coordinate, (x, y)
Point = Tuple[int, int]


@dataclass(frozen=True)
class Rect:
    """
    A rectangular room, described by its corners.

    The corner cells (x1, y1) and (x2, y2) are part of the room's wall ring;
    only cells strictly inside on the x1/y1 side, x1 < x < x2 and
    y1 < y < y2, are carved.
    """

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> "Rect":
        """Build a room from its top-left origin and its size."""
        if w <= 0 or h <= 0:
            raise InvalidGeometryError(
                f"Room at ({x}, {y}) must have positive size, got {w}x{h}"
            )
        return cls(x1=x, y1=y, x2=x + w, y2=y + h)

    @property
    def width(self) -> int:
        return self.x2 - self.x1

    @property
    def height(self) -> int:
        return self.y2 - self.y1

    def center(self) -> Point:
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: "Rect") -> bool:
        """True if this room overlaps or touches the other one."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def has_interior(self) -> bool:
        """False for rooms one tile wide or tall, which carve nothing."""
        return self.width >= 2 and self.height >= 2

    def interior_cells(self) -> Iterator[Point]:
        for x in range(self.x1 + 1, self.x2):
            for y in range(self.y1 + 1, self.y2):
                yield (x, y)

    def corners(self) -> Tuple[Point, Point]:
        return ((self.x1, self.y1), (self.x2, self.y2))


class Orientation(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()


@dataclass(frozen=True)
class Tunnel:
    """
    A one-tile-wide straight corridor.

    start and end are positions along the tunnel's axis (x for horizontal
    tunnels, y for vertical ones), in either order; fixed is the other
    coordinate. Both ends are carved.
    """

    orientation: Orientation
    start: int
    end: int
    fixed: int

    @classmethod
    def horizontal(cls, x1: int, x2: int, y: int) -> "Tunnel":
        return cls(Orientation.HORIZONTAL, start=x1, end=x2, fixed=y)

    @classmethod
    def vertical(cls, y1: int, y2: int, x: int) -> "Tunnel":
        return cls(Orientation.VERTICAL, start=y1, end=y2, fixed=x)

    def _point(self, along: int) -> Point:
        if self.orientation is Orientation.HORIZONTAL:
            return (along, self.fixed)
        return (self.fixed, along)

    def endpoints(self) -> Tuple[Point, Point]:
        return (self._point(self.start), self._point(self.end))

    def cells(self) -> Iterator[Point]:
        low, high = min(self.start, self.end), max(self.start, self.end)
        for along in range(low, high + 1):
            yield self._point(along)

    def __len__(self) -> int:
        return abs(self.end - self.start) + 1
