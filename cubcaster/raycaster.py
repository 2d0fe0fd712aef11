"""Grid ray casting: wall intersections, hit faces and ray fan angles."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .config import FOV, M_PI_2, M_PI_3, TILE_SIZE, WIN_WIDTH, Direction

TWO_PI = 2 * math.pi
NO_HIT = 10000000.0
_EDGE = 0.0001


@dataclass(frozen=True)
class RayHit:
    """Where one ray met a wall.

    ``hit`` is 1 when a horizontal grid line was hit first and -1 when a
    vertical one was.
    """

    angle: float
    x: float
    y: float
    dist_h: float
    dist_v: float
    hit: int

    @property
    def dist(self) -> float:
        """Distance to the nearer of the two intersections."""
        return self.dist_h if self.dist_h < self.dist_v else self.dist_v


def get_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def cast_length(width: int, height: int) -> int:
    """Maximum number of grid steps a ray takes before giving up."""
    far = max(width, height)
    return max(30, far * 2)


def _cell(value: float, limit: int) -> int:
    """Map a world coordinate to a grid index, clamped to [0, limit - 1]."""
    if math.isnan(value):
        index = 0
    elif math.isinf(value):
        index = limit - 1 if value > 0 else 0
    else:
        index = int(int(value) / TILE_SIZE)
    if index >= limit:
        index = limit - 1
    return max(index, 0)


def _march(
    grid: Sequence[Sequence[str]],
    width: int,
    height: int,
    px: float,
    py: float,
    start: tuple[float, float, float, float],
    steps: int,
) -> tuple[float, float, float]:
    """Step along the grid until a wall; return (x, y, distance)."""
    x, y, step_x, step_y = start
    for _ in range(steps):
        row = grid[_cell(y, height)]
        column = _cell(x, width)
        if column < len(row) and row[column] == "1":
            return x, y, get_distance(px, py, x, y)
        x += step_x
        y += step_y
    return x, y, NO_HIT


def _horizontal_start(
    px: float, py: float, angle: float, arc_tan: float
) -> tuple[float, float, float, float]:
    base = int(int(py) / TILE_SIZE) * TILE_SIZE
    if angle < math.pi:
        y = base - _EDGE
        step_y = -float(TILE_SIZE)
    elif angle > math.pi:
        y = float(base + TILE_SIZE)
        step_y = float(TILE_SIZE)
    else:
        return px, py, 0.0, 0.0
    x = (py - y) * arc_tan + px
    return x, y, -step_y * arc_tan, step_y


def _vertical_start(
    px: float, py: float, angle: float, tangent: float
) -> tuple[float, float, float, float]:
    base = int(int(px) / TILE_SIZE) * TILE_SIZE
    if M_PI_2 < angle < M_PI_3:
        x = base - _EDGE
        step_x = -float(TILE_SIZE)
    elif angle < M_PI_2 or angle > M_PI_3:
        x = float(base + TILE_SIZE)
        step_x = float(TILE_SIZE)
    else:
        return px, py, 0.0, 0.0
    y = (px - x) * tangent + py
    return x, y, step_x, -step_x * tangent


def cast_ray(
    grid: Sequence[Sequence[str]],
    width: int,
    height: int,
    px: float,
    py: float,
    angle: float,
) -> RayHit:
    """Cast one ray from (px, py) and return the nearest wall hit."""
    steps = cast_length(width, height)
    tangent = math.tan(angle)
    arc_tan = 1 / tangent if tangent else math.copysign(math.inf, tangent)
    h_x, h_y, dist_h = _march(
        grid, width, height, px, py, _horizontal_start(px, py, angle, arc_tan), steps
    )
    v_x, v_y, dist_v = _march(
        grid, width, height, px, py, _vertical_start(px, py, angle, tangent), steps
    )
    if dist_h < dist_v:
        return RayHit(angle, h_x, h_y, dist_h, dist_v, 1)
    return RayHit(angle, v_x, v_y, dist_h, dist_v, -1)


def wall_direction(hit: RayHit) -> Direction:
    """The face of the wall the ray hit."""
    if hit.hit == 1:
        return Direction.SOUTH if hit.angle > math.pi else Direction.NORTH
    if M_PI_2 < hit.angle < M_PI_3:
        return Direction.WEST
    return Direction.EAST


def _tile_offset(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return int(math.fmod(int(value), TILE_SIZE))


def texture_column(hit: RayHit) -> float:
    """Column of the wall texture to sample for this hit."""
    direction = wall_direction(hit)
    if hit.hit == 1:
        x = _tile_offset(hit.x)
        if direction == Direction.SOUTH:
            return float(TILE_SIZE - x - 1)
    else:
        x = _tile_offset(hit.y)
        if direction == Direction.WEST:
            return float(TILE_SIZE - x - 1)
    return float(x)


def fix_fisheye(player_angle: float, ray_angle: float) -> float:
    """Angle between the view direction and the ray, within [0, 2*pi]."""
    angle = player_angle - ray_angle
    if angle < 0:
        return angle + TWO_PI
    if angle > TWO_PI:
        return angle - TWO_PI
    return angle


def _normalise(angle: float) -> float:
    if angle < 0:
        angle += TWO_PI
    if angle > TWO_PI:
        angle -= TWO_PI
    return angle


def ray_angles(player_angle: float) -> list[float]:
    """Angles of the rays cast for each screen column, left to right."""
    angles = [_normalise(player_angle - FOV / 2)]
    angles.extend(
        _normalise(player_angle + FOV / 2 - FOV * i / WIN_WIDTH)
        for i in range(WIN_WIDTH - 1)
    )
    return angles