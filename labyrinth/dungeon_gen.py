"""
Dungeon Generation Algorithm
============================

We carve a dungeon out of solid rock.

1. Start with a grid where every tile is a wall
2. Carve each room: every tile strictly inside the room's rectangle becomes
   floor, leaving a one-tile wall ring around it
3. Carve each tunnel: a straight one-tile-wide line of floor, both ends included
4. Pick a spawn point on the floor (the requested one, or the centre of the
   first room)
5. Freeze the grid so nothing can change it for the rest of the level

Carving only ever turns walls into floor, so rooms and tunnels can be carved
in any order and may overlap freely.

All geometry is checked against the grid before anything is carved. A room or
tunnel that pokes outside the grid is a configuration error, not something
to clip.

For random dungeons, plan_random_layout() drops rooms at random positions,
throws away rooms that would overlap an earlier one, and joins each new room
to the previous one with an L-shaped pair of tunnels between their centres.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import InvalidGeometryError
from .geometry import Point, Rect, Tunnel, Orientation
from .grid import Grid
from .tiles import Tile

MAP_WIDTH: int = 80
MAP_HEIGHT: int = 50

# Random layout parameters
ROOM_MAX_SIZE: int = 10
ROOM_MIN_SIZE: int = 6
MAX_ROOMS: int = 30

# The fixed two-room layout
REFERENCE_ROOMS: Tuple[Rect, ...] = (
    Rect.from_size(20, 15, 10, 15),
    Rect.from_size(50, 15, 10, 15),
)
REFERENCE_TUNNELS: Tuple[Tunnel, ...] = (Tunnel.horizontal(25, 55, 23),)
REFERENCE_SPAWN: Point = (25, 23)


def _outside(point: Point, width: int, height: int) -> bool:
    x, y = point
    return not (0 <= x < width and 0 <= y < height)


def validate_room(room: Rect, width: int, height: int) -> None:
    """Raise InvalidGeometryError unless both corners of room are on the grid."""
    if room.width <= 0 or room.height <= 0:
        raise InvalidGeometryError(
            f"Room {room} must have positive size, got {room.width}x{room.height}"
        )
    for corner in room.corners():
        if _outside(corner, width, height):
            raise InvalidGeometryError(
                f"Room {room} corner {corner} is outside the {width}x{height} grid"
            )


def validate_tunnel(tunnel: Tunnel, width: int, height: int) -> None:
    """Raise InvalidGeometryError unless both ends of tunnel are on the grid."""
    for end in tunnel.endpoints():
        if _outside(end, width, height):
            raise InvalidGeometryError(
                f"Tunnel {tunnel} end {end} is outside the {width}x{height} grid"
            )


def create_room(room: Rect, grid: Grid) -> None:
    """Carve the inside of room into floor, keeping its one-tile wall ring."""
    validate_room(room, grid.width, grid.height)
    grid.fill(room.x1 + 1, room.y1 + 1, room.x2, room.y2, Tile.empty())


def carve_tunnel(tunnel: Tunnel, grid: Grid) -> None:
    """Carve every cell of tunnel, both ends included, into floor."""
    validate_tunnel(tunnel, grid.width, grid.height)
    low, high = min(tunnel.start, tunnel.end), max(tunnel.start, tunnel.end)
    if tunnel.orientation is Orientation.HORIZONTAL:
        grid.fill(low, tunnel.fixed, high + 1, tunnel.fixed + 1, Tile.empty())
    else:
        grid.fill(tunnel.fixed, low, tunnel.fixed + 1, high + 1, Tile.empty())


def create_h_tunnel(x1: int, x2: int, y: int, grid: Grid) -> None:
    carve_tunnel(Tunnel.horizontal(x1, x2, y), grid)


def create_v_tunnel(y1: int, y2: int, x: int, grid: Grid) -> None:
    carve_tunnel(Tunnel.vertical(y1, y2, x), grid)


@dataclass(frozen=True)
class GenerationRequest:
    """
    Everything needed to carve one dungeon level.

    Rooms are carved first, in order, then tunnels. spawn, if given, must end
    up on a floor tile. seed records where a randomly planned layout came
    from; it is copied onto the generated level.
    """

    width: int = MAP_WIDTH
    height: int = MAP_HEIGHT
    rooms: Tuple[Rect, ...] = ()
    tunnels: Tuple[Tunnel, ...] = ()
    spawn: Optional[Point] = None
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        # Accept any iterable for rooms and tunnels but store tuples
        object.__setattr__(self, "rooms", tuple(self.rooms))
        object.__setattr__(self, "tunnels", tuple(self.tunnels))
        if self.spawn is not None:
            object.__setattr__(self, "spawn", tuple(self.spawn))

    def validate(self) -> None:
        """Check the whole request. Raises InvalidGeometryError on the first problem."""
        if self.width <= 0 or self.height <= 0:
            raise InvalidGeometryError(
                f"Grid must have positive dimensions, got {self.width}x{self.height}"
            )
        for room in self.rooms:
            validate_room(room, self.width, self.height)
        for tunnel in self.tunnels:
            validate_tunnel(tunnel, self.width, self.height)
        if self.spawn is not None and _outside(self.spawn, self.width, self.height):
            raise InvalidGeometryError(
                f"Spawn {self.spawn} is outside the {self.width}x{self.height} grid"
            )


@dataclass(frozen=True, eq=False)
class GeneratedLevel:
    """
    A finished, frozen grid plus where to put the player.

    Compared and hashed by identity; compare .grid to compare layouts.
    """

    grid: Grid
    spawn: Optional[Point]
    rooms: Tuple[Rect, ...] = ()
    seed: Optional[int] = None


def _choose_spawn(request: GenerationRequest, grid: Grid) -> Optional[Point]:
    """
    The requested spawn, which must be floor, or else a carved cell: the
    centre of the first room that has an interior, or the start of the
    first tunnel.
    """
    if request.spawn is not None:
        if grid.is_blocked(*request.spawn):
            raise InvalidGeometryError(f"Spawn {request.spawn} is not on a floor tile")
        return request.spawn

    # Rooms one tile wide or tall carve nothing, so their centre is still wall
    for room in request.rooms:
        if room.has_interior():
            return room.center()
    if request.tunnels:
        return request.tunnels[0].endpoints()[0]
    return None


def generate_dungeon(request: GenerationRequest) -> GeneratedLevel:
    """
    Carve the rooms and tunnels of request into a fresh grid.

    The request is validated before the grid is allocated, so a bad request
    never yields a partially carved grid.

    Returns:
        GeneratedLevel with a frozen grid and the spawn point (None only when
        the request carves nothing and names no spawn).

    Raises:
        InvalidGeometryError: if any room, tunnel or the spawn is unusable.
    """
    request.validate()

    grid = Grid(request.width, request.height, fill=Tile.wall())
    for room in request.rooms:
        create_room(room, grid)
    for tunnel in request.tunnels:
        carve_tunnel(tunnel, grid)

    spawn = _choose_spawn(request, grid)
    grid.freeze()

    return GeneratedLevel(
        grid=grid, spawn=spawn, rooms=request.rooms, seed=request.seed
    )


def reference_request() -> GenerationRequest:
    """Two rooms side by side joined by one horizontal tunnel."""
    return GenerationRequest(
        width=MAP_WIDTH,
        height=MAP_HEIGHT,
        rooms=REFERENCE_ROOMS,
        tunnels=REFERENCE_TUNNELS,
        spawn=REFERENCE_SPAWN,
    )


def make_map() -> Grid:
    """Generate the fixed two-room map."""
    return generate_dungeon(reference_request()).grid


def connect_rooms(
    previous: Rect, new: Rect, rng: random.Random
) -> Tuple[Tunnel, Tunnel]:
    """
    Join two rooms with an L-shaped pair of tunnels between their centres.

    A coin flip decides whether the horizontal leg runs along the previous
    room's row or the new room's row. Both legs share the corner cell.
    """
    prev_x, prev_y = previous.center()
    new_x, new_y = new.center()

    if rng.random() < 0.5:
        # first move horizontally, then vertically
        return (
            Tunnel.horizontal(prev_x, new_x, prev_y),
            Tunnel.vertical(prev_y, new_y, new_x),
        )
    # first move vertically, then horizontally
    return (
        Tunnel.vertical(prev_y, new_y, prev_x),
        Tunnel.horizontal(prev_x, new_x, new_y),
    )


def plan_random_layout(
    width: int = MAP_WIDTH,
    height: int = MAP_HEIGHT,
    max_rooms: int = MAX_ROOMS,
    room_min_size: int = ROOM_MIN_SIZE,
    room_max_size: int = ROOM_MAX_SIZE,
    seed: Optional[int] = None,
) -> GenerationRequest:
    """
    Plan a random dungeon and return it as a GenerationRequest.

    Parameters:
        width, height: Grid dimensions
        max_rooms: Number of placement attempts; overlapping rooms are dropped,
                   so the dungeon may end up with fewer rooms
        room_min_size, room_max_size: Inclusive range for room width and height
        seed: Seed for the layout's own random.Random; the same seed always
              yields the same plan

    Raises:
        InvalidGeometryError: if the size parameters can't produce a room
        that fits on the grid.
    """
    if room_min_size < 2:
        raise InvalidGeometryError(
            f"room_min_size must be at least 2, got {room_min_size}"
        )
    if room_max_size < room_min_size:
        raise InvalidGeometryError(
            f"room_max_size ({room_max_size}) is smaller than room_min_size ({room_min_size})"
        )
    if max_rooms < 0:
        raise InvalidGeometryError(f"max_rooms must not be negative, got {max_rooms}")
    # The far corner of a room must stay on the grid
    if room_max_size > width - 1 or room_max_size > height - 1:
        raise InvalidGeometryError(
            f"Rooms up to {room_max_size} tiles do not fit on a {width}x{height} grid"
        )

    rng = random.Random(seed)
    rooms: List[Rect] = []
    tunnels: List[Tunnel] = []

    for _ in range(max_rooms):
        w = rng.randint(room_min_size, room_max_size)
        h = rng.randint(room_min_size, room_max_size)
        x = rng.randint(0, width - w - 1)
        y = rng.randint(0, height - h - 1)
        new_room = Rect.from_size(x, y, w, h)

        if any(new_room.intersects(other) for other in rooms):
            continue

        if rooms:
            tunnels.extend(connect_rooms(rooms[-1], new_room, rng))
        rooms.append(new_room)

    return GenerationRequest(
        width=width,
        height=height,
        rooms=tuple(rooms),
        tunnels=tuple(tunnels),
        spawn=rooms[0].center() if rooms else None,
        seed=seed,
    )


def generate_random_dungeon(
    width: int = MAP_WIDTH,
    height: int = MAP_HEIGHT,
    max_rooms: int = MAX_ROOMS,
    room_min_size: int = ROOM_MIN_SIZE,
    room_max_size: int = ROOM_MAX_SIZE,
    seed: Optional[int] = None,
) -> GeneratedLevel:
    """Plan a random layout and carve it. See plan_random_layout()."""
    return generate_dungeon(
        plan_random_layout(
            width=width,
            height=height,
            max_rooms=max_rooms,
            room_min_size=room_min_size,
            room_max_size=room_max_size,
            seed=seed,
        )
    )
