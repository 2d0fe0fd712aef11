import math

import pytest

from cubcaster.config import M_PI_2, TILE_SIZE, Key, Vector
from cubcaster.player import Player, side_direction

ROWS = [
    "111111",
    "100001",
    "100001",
    "100001",
    "111111",
]


@pytest.fixture
def grid():
    return [list(row) for row in ROWS]


def test_side_direction_rotates_quarter_turn():
    side = side_direction(Vector(3.0, 4.0))
    assert (side.x, side.y) == (-4.0, 3.0)


def test_from_spawn_places_on_tile_corner():
    player = Player.from_spawn(2, 3, "N")
    assert player.position.x == 2 * TILE_SIZE
    assert player.position.y == 3 * TILE_SIZE
    assert player.angle == M_PI_2
    assert (player.array_x, player.array_y) == (2, 3)


def test_from_spawn_north_front_points_up():
    player = Player.from_spawn(2, 3, "N")
    assert player.front.x == pytest.approx(0.0, abs=1e-9)
    assert player.front.y == pytest.approx(-20.0)


@pytest.mark.parametrize("direction, angle", [("W", math.pi), ("E", 2 * math.pi)])
def test_from_spawn_angles(direction, angle):
    assert Player.from_spawn(1, 1, direction).angle == angle


def test_from_spawn_rejects_unknown_direction():
    with pytest.raises(ValueError):
        Player.from_spawn(1, 1, "X")


def test_turn_left_then_right_restores_angle():
    player = Player.from_spawn(2, 2, "N")
    start = player.angle
    player.turn_left()
    player.turn_right()
    assert player.angle == pytest.approx(start)


def test_turn_left_wraps_to_zero():
    player = Player.from_spawn(2, 2, "E")
    player.turn_left()
    assert player.angle == 0.0


def test_turn_right_wraps_to_full_turn():
    player = Player.from_spawn(2, 2, "N")
    player.angle = 0.05
    player.turn_right()
    assert player.angle == 2 * math.pi


def test_turning_keeps_front_length():
    player = Player.from_spawn(2, 2, "N")
    for _ in range(7):
        player.turn_right()
        assert math.hypot(player.front.x, player.front.y) == pytest.approx(20.0)


def test_forward_moves_along_front(grid):
    player = Player.from_spawn(2, 3, "N")
    start_y = player.position.y
    player.move_straight(grid, Key.W)
    assert player.position.y == pytest.approx(start_y + player.front.y)
    assert player.position.x == pytest.approx(2 * TILE_SIZE)


def test_forward_then_backward_returns(grid):
    player = Player.from_spawn(2, 3, "N")
    player.move_straight(grid, Key.W)
    player.move_straight(grid, Key.S)
    assert player.position.x == pytest.approx(2 * TILE_SIZE)
    assert player.position.y == pytest.approx(3 * TILE_SIZE)


def test_forward_blocked_by_wall(grid):
    player = Player.from_spawn(2, 1, "N")
    player.move_straight(grid, Key.W)
    assert (player.position.x, player.position.y) == (2 * TILE_SIZE, 1 * TILE_SIZE)


def test_other_key_does_not_move(grid):
    player = Player.from_spawn(2, 2, "N")
    player.move_straight(grid, Key.E)
    player.strafe(grid, Key.E)
    assert (player.position.x, player.position.y) == (2 * TILE_SIZE, 2 * TILE_SIZE)


def test_strafe_right_then_left_returns(grid):
    player = Player.from_spawn(2, 2, "N")
    player.strafe(grid, Key.D)
    assert player.position.x == pytest.approx(2 * TILE_SIZE + player.side.x)
    player.strafe(grid, Key.A)
    assert player.position.x == pytest.approx(2 * TILE_SIZE)
    assert player.position.y == pytest.approx(2 * TILE_SIZE)


def test_strafe_left_blocked_by_wall(grid):
    player = Player.from_spawn(1, 2, "N")
    player.strafe(grid, Key.A)
    assert player.position.x == 1 * TILE_SIZE
    assert player.position.y == pytest.approx(2 * TILE_SIZE)


def test_no_movement_off_grid(grid):
    player = Player.from_spawn(2, 2, "N")
    player.position.x = -100.0
    player.move_straight(grid, Key.W)
    player.strafe(grid, Key.D)
    assert player.position.x == -100.0
    assert player.position.y == 2 * TILE_SIZE