from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .dungeon_gen import GeneratedLevel, GenerationRequest, generate_dungeon
from .errors import InvalidGeometryError
from .grid import Grid
from .visibility import LineOfSightOracle, VisibilityOracle

FOV_RADIUS: int = 10

Color = Tuple[int, int, int]


@dataclass
class Actor:
    """
    Something drawn as a single character on the grid: the player, a monster,
    an item.
    """

    x: int
    y: int
    char: str = "@"
    color: Color = (255, 255, 255)

    def move_by(self, dx: int, dy: int, grid: Grid) -> bool:
        """
        Step by (dx, dy) unless the target is off the grid or blocked.

        Returns True if the actor moved.
        """
        target_x = self.x + dx
        target_y = self.y + dy
        # Off-grid targets are never queried, just refused
        if not grid.in_bounds(target_x, target_y):
            return False
        if grid.is_blocked(target_x, target_y):
            return False
        self.x = target_x
        self.y = target_y
        return True


class Level:
    """
    One playable dungeon level.

    The level is the single owner of its grid. The grid is frozen, so the
    renderer and movement code can share it freely; what the player has seen
    is tracked here in separate arrays rather than on the tiles.
    """

    def __init__(
        self,
        generated: GeneratedLevel,
        oracle: Optional[VisibilityOracle] = None,
        fov_radius: int = FOV_RADIUS,
    ) -> None:
        if generated.spawn is None:
            raise InvalidGeometryError("Cannot build a level without a spawn point")

        self.grid: Grid = generated.grid
        if not self.grid.frozen:
            self.grid.freeze()

        self.rooms = generated.rooms
        self.seed: Optional[int] = generated.seed

        spawn_x, spawn_y = generated.spawn
        self.player: Actor = Actor(spawn_x, spawn_y)
        self.actors: List[Actor] = [self.player]

        self.oracle: VisibilityOracle = oracle if oracle is not None else LineOfSightOracle()
        self.fov_radius: int = fov_radius

        shape = (self.grid.height, self.grid.width)
        self.visible: np.ndarray = np.zeros(shape, dtype=bool)
        self.explored: np.ndarray = np.zeros(shape, dtype=bool)

        self.recompute_fov()

    @classmethod
    def from_request(
        cls,
        request: GenerationRequest,
        oracle: Optional[VisibilityOracle] = None,
        fov_radius: int = FOV_RADIUS,
    ) -> "Level":
        return cls(generate_dungeon(request), oracle=oracle, fov_radius=fov_radius)

    def add_actor(self, actor: Actor) -> None:
        """Place another actor on the level. It must stand on a floor tile."""
        if self.grid.is_blocked(actor.x, actor.y):
            raise InvalidGeometryError(
                f"Actor at ({actor.x}, {actor.y}) would stand inside a wall"
            )
        self.actors.append(actor)

    def move_player(self, dx: int, dy: int) -> bool:
        """Move the player and, if it moved, update what it can see."""
        moved = self.player.move_by(dx, dy, self.grid)
        if moved:
            self.recompute_fov()
        return moved

    def recompute_fov(self) -> None:
        cells = self.oracle.compute_visibility(
            self.grid, self.player.x, self.player.y, self.fov_radius
        )
        self.visible[:] = False
        if cells:
            xs, ys = zip(*cells)
            self.visible[list(ys), list(xs)] = True
        self.explored |= self.visible

    def is_visible(self, x: int, y: int) -> bool:
        self.grid.check_bounds(x, y)
        return bool(self.visible[y, x])

    def is_explored(self, x: int, y: int) -> bool:
        self.grid.check_bounds(x, y)
        return bool(self.explored[y, x])
