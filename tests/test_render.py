import math

import pytest
from PIL import Image

from cubcaster.config import TILE_SIZE, WIN_HEIGHT, CubError, Direction, Point
from cubcaster.raycaster import NO_HIT, RayHit
from cubcaster.render import Frame, draw_column, load_texture, render_scene, set_color

CEILING = 0x336699
FLOOR = 0x996633
COLORS = {
    Direction.NORTH: 0x111111,
    Direction.SOUTH: 0x222222,
    Direction.EAST: 0x333333,
    Direction.WEST: 0x444444,
}
TEXTURES = {d: [c] * (TILE_SIZE * TILE_SIZE) for d, c in COLORS.items()}
ROOM = ["11111", "10001", "10001", "10001", "11111"]
CENTRE = 2 * TILE_SIZE + TILE_SIZE / 2


def test_set_color_little_endian():
    buf = bytearray(8)
    set_color(buf, 4, 0, 0x123456, 0)
    assert bytes(buf) == bytes([0, 0, 0, 0, 0x56, 0x34, 0x12, 0])


def test_set_color_big_endian():
    buf = bytearray(4)
    set_color(buf, 0, 1, 0x123456, 7)
    assert bytes(buf) == bytes([7, 0x12, 0x34, 0x56])


def test_set_color_unknown_endian_writes_nothing():
    buf = bytearray(4)
    set_color(buf, 0, 2, 0x123456, 0)
    assert bytes(buf) == bytes(4)


@pytest.mark.parametrize("endian", [0, 1])
def test_frame_round_trip(endian):
    frame = Frame(width=10, height=10, endian=endian)
    frame.put_pixel(Point(3, 7, 0xABCDEF))
    assert frame.pixel(3, 7) == 0xABCDEF
    assert frame.pixel(7, 3) == 0


def test_frame_ignores_out_of_bounds():
    frame = Frame(width=4, height=4)
    for point in (Point(4, 0, 1), Point(0, 4, 1), Point(-1, 0, 1), Point(0, -0.5, 1)):
        frame.put_pixel(point)
    assert bytes(frame.buffer) == bytes(4 * 4 * 4)


def test_frame_clear():
    frame = Frame(width=4, height=4)
    frame.put_pixel(Point(1, 1, 0xFFFFFF))
    frame.clear()
    assert frame.pixel(1, 1) == 0
    assert len(frame.buffer) == 4 * 4 * 4


def test_frame_pixel_outside_raises():
    with pytest.raises(IndexError):
        Frame(width=2, height=2).pixel(2, 0)


def test_draw_column_ceiling_wall_floor():
    frame = Frame(width=1)
    hit = RayHit(math.pi / 2, 100.0, 63.9999, 640.0, NO_HIT, 1)
    draw_column(frame, hit, math.pi / 2, TEXTURES, CEILING, FLOOR, 0)
    assert frame.pixel(0, 0) == CEILING
    assert frame.pixel(0, WIN_HEIGHT // 2) == COLORS[Direction.NORTH]
    assert frame.pixel(0, WIN_HEIGHT - 1) == FLOOR


def test_draw_column_close_wall_fills_view():
    frame = Frame(width=1)
    hit = RayHit(0.01, 256.0, 150.0, NO_HIT, 10.0, -1)
    draw_column(frame, hit, 0.01, TEXTURES, CEILING, FLOOR, 0)
    assert frame.pixel(0, 0) == COLORS[Direction.EAST]
    assert frame.pixel(0, WIN_HEIGHT // 2) == COLORS[Direction.EAST]


def test_draw_column_outside_frame_is_ignored():
    frame = Frame(width=1)
    hit = RayHit(math.pi / 2, 100.0, 63.9999, 640.0, NO_HIT, 1)
    draw_column(frame, hit, math.pi / 2, TEXTURES, CEILING, FLOOR, 5)
    assert bytes(frame.buffer) == bytes(len(frame.buffer))


def test_render_scene_draws_every_column():
    frame = Frame(width=3)
    grid = [list(row) for row in ROOM]
    render_scene(frame, grid, 5, 5, CENTRE, CENTRE, math.pi / 2, TEXTURES, CEILING, FLOOR)
    for column in range(3):
        assert frame.pixel(column, 0) == CEILING
        assert frame.pixel(column, WIN_HEIGHT // 2) == COLORS[Direction.NORTH]
        assert frame.pixel(column, WIN_HEIGHT - 1) == FLOOR


def test_load_texture_reads_pixels(tmp_path):
    path = tmp_path / "wall.png"
    image = Image.new("RGB", (TILE_SIZE, TILE_SIZE))
    image.putpixel((5, 3), (1, 2, 3))
    image.save(path)
    texels = load_texture(path)
    assert len(texels) == TILE_SIZE * TILE_SIZE
    assert texels[3 * TILE_SIZE + 5] == 0x010203
    assert texels[0] == 0


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(CubError):
        load_texture(tmp_path / "absent.xpm")


def test_load_texture_too_small(tmp_path):
    path = tmp_path / "small.png"
    Image.new("RGB", (8, 8)).save(path)
    with pytest.raises(CubError):
        load_texture(path)