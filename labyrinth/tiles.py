from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


class Tile(IntEnum):
    """
    Tile kinds stored in a Grid.

    A tile's passability and sight-blocking flags are properties of its kind,
    looked up in BLOCKED and BLOCKS_SIGHT, so a grid can only ever hold the
    canonical flag combinations listed in TILE_FLAGS.
    """

    WALL = 0
    FLOOR = 1

    @classmethod
    def empty(cls) -> "Tile":
        """The carved, walkable, see-through tile."""
        return cls.FLOOR

    @classmethod
    def wall(cls) -> "Tile":
        """The solid tile every grid starts out filled with."""
        return cls.WALL

    @property
    def blocked(self) -> bool:
        return bool(BLOCKED[self])

    @property
    def blocks_sight(self) -> bool:
        return bool(BLOCKS_SIGHT[self])


# (blocked, blocks_sight) for each tile kind
TILE_FLAGS: Dict[Tile, Tuple[bool, bool]] = {
    Tile.WALL: (True, True),
    Tile.FLOOR: (False, False),
}

# Lookup tables indexed by tile value, so a whole tile array can be
# converted with BLOCKED[tiles].
BLOCKED = np.array([TILE_FLAGS[t][0] for t in Tile], dtype=bool)
BLOCKS_SIGHT = np.array([TILE_FLAGS[t][1] for t in Tile], dtype=bool)

TILE_DTYPE = np.uint8

# Characters used by Grid.from_ascii and the ASCII renderer
TILE_TO_ASCII: Dict[Tile, str] = {
    Tile.WALL: "#",
    Tile.FLOOR: ".",
}
