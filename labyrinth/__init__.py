"""Rooms-and-tunnels dungeon generation and the tile grid behind it."""

from labyrinth.errors import DungeonError, InvalidGeometryError, OutOfBoundsError
from labyrinth.tiles import Tile
from labyrinth.grid import Grid, is_blocked, is_sight_blocking
from labyrinth.geometry import Orientation, Point, Rect, Tunnel
from labyrinth.dungeon_gen import (
    MAP_HEIGHT,
    MAP_WIDTH,
    GeneratedLevel,
    GenerationRequest,
    carve_tunnel,
    create_h_tunnel,
    create_room,
    create_v_tunnel,
    generate_dungeon,
    generate_random_dungeon,
    make_map,
    plan_random_layout,
    reference_request,
)
from labyrinth.pathfinding import flood_fill, grid_walkability
from labyrinth.visibility import LineOfSightOracle, VisibilityOracle
from labyrinth.world import Actor, Level
