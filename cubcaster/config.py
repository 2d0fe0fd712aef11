"""Shared constants, key codes, directions and small geometry types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

TILE_SIZE = 64
WIN_WIDTH = 1280
WIN_HEIGHT = 900
TEXTURE_PIXELS = TILE_SIZE * TILE_SIZE

M_PI_2 = math.pi / 2
M_PI_3 = 4.71238898038  # 3 * pi / 2
FOV = 1.0471975512  # pi / 3
DEGINRAD = 0.0174533
MOVE_SPEED = 1.5

ON_KEYDOWN = 2
ON_DESTROY = 17


class CubError(Exception):
    """A scene, map or texture that cannot be used."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class Key(IntEnum):
    """Key codes the game reacts to (X11 keysyms)."""

    ESC = 65307
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363
    NUM_0 = 65438
    NUM_1 = 65436
    NUM_2 = 65433
    NUM_3 = 65435
    NUM_4 = 65430
    NUM_5 = 65437
    NUM_6 = 65432
    NUM_7 = 65429
    NUM_8 = 65431
    NUM_9 = 65434
    NUM_PERIOD = 65439
    NUM_SLASH = 65455
    NUM_ASTERISK = 65450
    NUM_MINUS = 65453
    NUM_PLUS = 65451
    NUM_ENTER = 65421
    W = 119
    A = 97
    S = 115
    D = 100
    E = 101


class Direction(IntEnum):
    """The face of a wall a ray has hit."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


@dataclass
class Point:
    """A position on screen or in the world, with a colour."""

    x: float
    y: float
    color: int = 0


@dataclass
class Vector:
    """A two-dimensional direction."""

    x: float
    y: float


def deg_to_rad(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (math.pi / 180)