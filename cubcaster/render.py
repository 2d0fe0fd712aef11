"""Frame buffer, texture loading and drawing of the three-dimensional view."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from .config import TEXTURE_PIXELS, TILE_SIZE, WIN_HEIGHT, WIN_WIDTH, CubError, Direction, Point
from .raycaster import RayHit, cast_ray, fix_fisheye, ray_angles, texture_column, wall_direction

Textures = Mapping[Direction, Sequence[int]]

_MIN_DISTANCE = 1e-6


def set_color(buffer: bytearray, offset: int, endian: int, color: int, alpha: int) -> None:
    """Write one 4-byte pixel at offset in the given byte order."""
    red = (color >> 16) & 0xFF
    green = (color >> 8) & 0xFF
    blue = color & 0xFF
    if endian == 1:
        buffer[offset:offset + 4] = bytes((alpha & 0xFF, red, green, blue))
    elif endian == 0:
        buffer[offset:offset + 4] = bytes((blue, green, red, alpha & 0xFF))


@dataclass
class Frame:
    """A 32-bit image to draw a view into."""

    width: int = WIN_WIDTH
    height: int = WIN_HEIGHT
    endian: int = 0
    buffer: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.buffer = bytearray(self.width * self.height * 4)

    def put_pixel(self, point: Point) -> None:
        """Set one pixel; points outside the frame are ignored."""
        if (
            point.x >= self.width
            or point.y >= self.height
            or point.x < 0
            or point.y < 0
        ):
            return
        offset = int(point.y) * self.width * 4 + int(point.x) * 4
        set_color(self.buffer, offset, self.endian, point.color, 0)

    def clear(self) -> None:
        """Reset every pixel to zero."""
        self.buffer[:] = bytes(len(self.buffer))

    def pixel(self, x: int, y: int) -> int:
        """Return the 0xRRGGBB colour stored at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        offset = (y * self.width + x) * 4
        b = self.buffer[offset:offset + 4]
        if self.endian == 1:
            return (b[1] << 16) | (b[2] << 8) | b[3]
        return (b[2] << 16) | (b[1] << 8) | b[0]


def load_texture(path: str | Path) -> list[int]:
    """Load a wall texture into TILE_SIZE * TILE_SIZE packed colours."""
    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
            width, height = rgb.size
            raw = rgb.tobytes()
    except (OSError, ValueError) as exc:
        raise CubError("Loading of .xpm image") from exc
    limit = width * height
    texels = [0] * TEXTURE_PIXELS
    for i in range(TILE_SIZE):
        for j in range(TILE_SIZE):
            pos = width * i + j
            if pos >= limit:
                raise CubError("Loading of .xpm image")
            if pos < TEXTURE_PIXELS:
                red, green, blue = raw[3 * pos:3 * pos + 3]
                texels[pos] = (red << 16) | (green << 8) | blue
    return texels


def _texel(texels: Sequence[int], ty: float, tx: float) -> int:
    pos = int(int(ty) * TILE_SIZE + tx)
    if pos > TILE_SIZE * TILE_SIZE:
        pos = TILE_SIZE * TILE_SIZE - 1
    pos = min(max(pos, 0), len(texels) - 1)
    return texels[pos]


def draw_column(
    frame: Frame,
    hit: RayHit,
    player_angle: float,
    textures: Textures,
    ceiling: int,
    floor: int,
    column: int,
) -> None:
    """Draw ceiling, textured wall slice and floor of one screen column."""
    if column < 0 or column >= frame.width:
        return
    visible = min(WIN_HEIGHT, frame.height)
    dist = max(hit.dist * math.cos(fix_fisheye(player_angle, hit.angle)), _MIN_DISTANCE)
    height = (TILE_SIZE * WIN_HEIGHT) / dist
    start = WIN_HEIGHT // 2 - height / 2
    end = WIN_HEIGHT // 2 + height / 2

    top = max(math.ceil(start), 0)
    for row in range(min(top, visible)):
        frame.put_pixel(Point(column, row, ceiling))

    first = top - 1
    y_step = TILE_SIZE / height
    y_offset = 1.0
    wall_height = height
    if height > WIN_HEIGHT:
        y_offset = (height - WIN_HEIGHT) / 2
        wall_height = WIN_HEIGHT
    ty = y_offset * y_step
    tx = texture_column(hit)
    texels = textures[wall_direction(hit)]
    for counter in range(math.ceil(wall_height)):
        row = first + counter
        if row >= visible:
            break
        frame.put_pixel(Point(column, row, _texel(texels, ty, tx)))
        ty += y_step

    for row in range(max(int(end - 2) + 1, 0), visible):
        frame.put_pixel(Point(column, row, floor))


def render_scene(
    frame: Frame,
    grid: Sequence[Sequence[str]],
    width: int,
    height: int,
    px: float,
    py: float,
    player_angle: float,
    textures: Textures,
    ceiling: int,
    floor: int,
) -> None:
    """Clear the frame and draw the view from (px, py) at player_angle."""
    frame.clear()
    for column, angle in enumerate(ray_angles(player_angle)):
        if column >= frame.width:
            break
        hit = cast_ray(grid, width, height, px, py, angle)
        draw_column(frame, hit, player_angle, textures, ceiling, floor, column)