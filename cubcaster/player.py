"""The player: spawn placement, turning and collision-checked movement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from .config import M_PI_2, M_PI_3, TILE_SIZE, Key, Point, Vector

_FRONT_LENGTH = 20
_REACH = 20
_TURN_STEP = 0.1
_TWO_PI = 2 * math.pi

_SPAWN_ANGLES = {
    "N": M_PI_2,
    "S": M_PI_3,
    "W": math.pi,
    "E": _TWO_PI,
}

GridLike = Sequence[Sequence[str]]


def side_direction(front: Vector) -> Vector:
    """The front vector turned a quarter turn: the strafing direction."""
    return Vector(-front.y, front.x)


def _tile(value: float) -> int:
    """Grid index of a world coordinate, truncated toward zero."""
    return int(value / TILE_SIZE)


def _offset(component: float) -> int:
    return -_REACH if component < 0 else _REACH


def _is_floor(grid: GridLike, row: int, column: int) -> bool:
    if row < 0 or column < 0 or row >= len(grid):
        return False
    cells = grid[row]
    return column < len(cells) and cells[column] == "0"


@dataclass
class Player:
    """Position, heading and grid cell of the player."""

    position: Point
    angle: float
    direction: str = "N"
    front: Vector = field(default_factory=lambda: Vector(0.0, 0.0))
    side: Vector = field(default_factory=lambda: Vector(0.0, 0.0))
    array_x: int = 0
    array_y: int = 0

    @classmethod
    def from_spawn(cls, x: int, y: int, direction: str) -> Player:
        """Place a player at grid cell (x, y) facing N, S, W or E."""
        try:
            angle = _SPAWN_ANGLES[direction]
        except KeyError:
            raise ValueError(f"unknown spawn direction {direction!r}") from None
        player = cls(
            position=Point(float(x * TILE_SIZE), float(y * TILE_SIZE), 0),
            angle=angle,
            direction=direction,
            array_x=x,
            array_y=y,
        )
        player.update_front()
        return player

    def update_front(self) -> None:
        """Recompute the front vector from the heading angle."""
        self.front = Vector(
            math.cos(self.angle) * _FRONT_LENGTH,
            -(math.sin(self.angle) * _FRONT_LENGTH),
        )

    def turn_left(self) -> None:
        """Rotate the heading counter-clockwise by one step."""
        self.angle += _TURN_STEP
        if self.angle > _TWO_PI:
            self.angle = 0.0
        self.update_front()

    def turn_right(self) -> None:
        """Rotate the heading clockwise by one step."""
        self.angle -= _TURN_STEP
        if self.angle < 0:
            self.angle = _TWO_PI
        self.update_front()

    def _locate(self) -> bool:
        """Refresh the grid cell; False if the position is off the grid."""
        self.array_x = int(int(self.position.x) / TILE_SIZE)
        self.array_y = int(int(self.position.y) / TILE_SIZE)
        return self.array_x >= 0 and self.array_y >= 0

    def _step(self, grid: GridLike, column: int, row: int, sign: int, vector: Vector) -> None:
        if _is_floor(grid, self.array_y, column):
            self.position.x += sign * vector.x
        if _is_floor(grid, row, self.array_x):
            self.position.y += sign * vector.y

    def move_straight(self, grid: GridLike, key: int) -> None:
        """Walk forward (W) or backward (S), axis by axis, avoiding walls."""
        if not self._locate():
            return
        off_x = _offset(self.front.x)
        off_y = _offset(self.front.y)
        if key == Key.W:
            column = _tile(self.position.x + off_x)
            row = _tile(self.position.y + off_y)
            if _is_floor(grid, row, column):
                self._step(grid, column, row, 1, self.front)
        elif key == Key.S:
            column = _tile(self.position.x - off_x)
            row = _tile(self.position.y - off_y)
            self._step(grid, column, row, -1, self.front)

    def strafe(self, grid: GridLike, key: int) -> None:
        """Step sideways to the left (A) or right (D), avoiding walls."""
        if not self._locate():
            return
        self.side = side_direction(self.front)
        off_x = _offset(self.side.x)
        off_y = _offset(self.side.y)
        if key == Key.A:
            column = _tile(self.position.x - off_x)
            row = _tile(self.position.y - off_y)
            self._step(grid, column, row, -1, self.side)
        elif key == Key.D:
            column = _tile(self.position.x + off_x)
            row = _tile(self.position.y + off_y)
            self._step(grid, column, row, 1, self.side)