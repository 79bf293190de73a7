"""Tests for randomly planned dungeons."""

import random

import pytest

from labyrinth.dungeon_gen import (
    connect_rooms,
    generate_random_dungeon,
    plan_random_layout,
)
from labyrinth.errors import InvalidGeometryError
from labyrinth.geometry import Orientation, Rect
from labyrinth.pathfinding import flood_fill, grid_walkability
from labyrinth.tiles import Tile


SEEDS = [0, 1, 7, 42, 2024]


class TestPlanRandomLayout:
    """Tests for plan_random_layout()."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_same_seed_same_plan(self, seed):
        assert plan_random_layout(seed=seed) == plan_random_layout(seed=seed)

    def test_different_seeds_differ(self):
        plans = {plan_random_layout(seed=seed).rooms for seed in SEEDS}
        assert len(plans) > 1

    @pytest.mark.parametrize("seed", SEEDS)
    def test_rooms_fit_and_do_not_overlap(self, seed):
        plan = plan_random_layout(seed=seed)

        assert plan.rooms
        for room in plan.rooms:
            assert 0 <= room.x1 and room.x2 <= plan.width - 1
            assert 0 <= room.y1 and room.y2 <= plan.height - 1
            assert 6 <= room.width <= 10
            assert 6 <= room.height <= 10
        for a, b in zip(plan.rooms, plan.rooms[1:]):
            assert not a.intersects(b)
        for i, a in enumerate(plan.rooms):
            for b in plan.rooms[i + 1:]:
                assert not a.intersects(b)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_two_tunnels_per_extra_room(self, seed):
        plan = plan_random_layout(seed=seed)
        assert len(plan.tunnels) == 2 * (len(plan.rooms) - 1)

    def test_seed_is_recorded(self):
        assert plan_random_layout(seed=99).seed == 99

    def test_zero_attempts_gives_empty_plan(self):
        plan = plan_random_layout(max_rooms=0, seed=1)
        assert plan.rooms == ()
        assert plan.tunnels == ()
        assert plan.spawn is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"room_min_size": 1},
            {"room_min_size": 8, "room_max_size": 6},
            {"max_rooms": -1},
            {"width": 10, "height": 50, "room_max_size": 10},
            {"width": 80, "height": 10, "room_max_size": 10},
        ],
    )
    def test_bad_parameters_rejected(self, kwargs):
        with pytest.raises(InvalidGeometryError):
            plan_random_layout(seed=3, **kwargs)

    def test_smallest_grid_that_fits(self):
        """A room of room_max_size fits when the grid is one tile larger."""
        plan = plan_random_layout(
            width=5, height=5, max_rooms=3, room_min_size=4, room_max_size=4, seed=5
        )
        assert plan.rooms == (Rect(0, 0, 4, 4),)


class TestConnectRooms:
    """Tests for the L-shaped tunnels between room centres."""

    def test_legs_meet_at_a_corner(self):
        a = Rect.from_size(2, 2, 6, 6)
        b = Rect.from_size(20, 12, 6, 6)
        rng = random.Random(0)

        for _ in range(10):
            first, second = connect_rooms(a, b, rng)
            assert {first.orientation, second.orientation} == {
                Orientation.HORIZONTAL,
                Orientation.VERTICAL,
            }
            assert set(first.cells()) & set(second.cells())
            assert a.center() in set(first.cells())
            assert b.center() in set(second.cells())

    def test_both_bends_happen(self):
        a = Rect.from_size(2, 2, 6, 6)
        b = Rect.from_size(20, 12, 6, 6)
        rng = random.Random(1)

        firsts = {connect_rooms(a, b, rng)[0].orientation for _ in range(50)}
        assert firsts == {Orientation.HORIZONTAL, Orientation.VERTICAL}


class TestGenerateRandomDungeon:
    """Tests for the carved random dungeon."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_every_room_reachable_from_spawn(self, seed):
        level = generate_random_dungeon(seed=seed)
        reachable = flood_fill(*level.spawn, grid_walkability(level.grid))

        for room in level.rooms:
            assert room.center() in reachable

    @pytest.mark.parametrize("seed", SEEDS)
    def test_spawn_is_first_room_centre(self, seed):
        level = generate_random_dungeon(seed=seed)
        assert level.spawn == level.rooms[0].center()
        assert level.grid.tile_at(*level.spawn) is Tile.FLOOR

    @pytest.mark.parametrize("seed", SEEDS)
    def test_outer_border_stays_wall(self, seed):
        """Rooms never reach the last row or column, so the frame is solid."""
        grid = generate_random_dungeon(seed=seed).grid
        for x in range(grid.width):
            assert grid.tile_at(x, grid.height - 1) is Tile.WALL
        for y in range(grid.height):
            assert grid.tile_at(grid.width - 1, y) is Tile.WALL

    def test_same_seed_same_grid(self):
        assert generate_random_dungeon(seed=11).grid == generate_random_dungeon(seed=11).grid
