"""Reading and validating a .cub scene description."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .config import CubError
from .mapcheck import (
    Grid,
    check_wall_map,
    find_spawn,
    map_dimensions,
    pad_map,
    replace_threes,
)

_WALL_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}
_COLOR_KEYS = {"F": "floor", "C": "ceiling"}


@dataclass
class Textures:
    """Wall texture paths and the floor and ceiling colours of a scene."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: int | None = None
    ceiling: int | None = None

    def is_complete(self) -> bool:
        """Return True once all four walls and both colours are set."""
        return None not in (
            self.north,
            self.south,
            self.west,
            self.east,
            self.floor,
            self.ceiling,
        )


@dataclass
class Scene:
    """A fully validated scene: textures, padded map grid and spawn point."""

    textures: Textures
    grid: Grid = field(repr=False)
    width: int
    height: int
    spawn_x: int
    spawn_y: int
    direction: str


def count_commas(string: str) -> bool:
    """Return True if the string holds exactly two commas."""
    return string.count(",") == 2


def is_blank(line: str) -> bool:
    """Return True if the line is empty or made only of spaces."""
    return line.count(" ") == len(line)


def rgb_to_hex(red: int, green: int, blue: int) -> int:
    """Pack three 0-255 components into a 0xRRGGBB integer."""
    for component in (red, green, blue):
        if component < 0 or component > 255:
            raise CubError("Not RGB.")
    return (red << 16) | (green << 8) | blue


def parse_rgb(text: str) -> int:
    """Parse 'R,G,B' into a packed colour."""
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise CubError("Not RGB")
    try:
        red, green, blue = (int(part) for part in parts)
    except ValueError:
        raise CubError("Not RGB.") from None
    return rgb_to_hex(red, green, blue)


def _match_key(direction: str, keys: Iterable[str]) -> str | None:
    """Find the key of which the identifier is a non-empty prefix."""
    for key in keys:
        if key.startswith(direction):
            return key
    return None


def _set_wall(textures: Textures, attribute: str, path: str) -> None:
    if len(path) < 4 or path[-4:-1] != ".xp":
        raise CubError("Texture path is not valid.")
    if getattr(textures, attribute) is not None:
        raise CubError("Texture path is not valid.")
    setattr(textures, attribute, path.strip("\n"))


def _set_color(textures: Textures, attribute: str, text: str) -> None:
    if getattr(textures, attribute) is not None:
        raise CubError("Wrong input")
    setattr(textures, attribute, parse_rgb(text))


def _apply_element(textures: Textures, line: str) -> None:
    """Apply one trimmed identifier line to the textures."""
    if is_blank(line):
        return
    is_color = line.startswith(("F ", "C "))
    parts = [part for part in line.split(" ") if part]
    if len(parts) != 2:
        if is_color:
            raise CubError("Wrong RGB. Example : F 0,255,255")
        raise CubError("Texture path is not valid.")
    direction, value = parts
    if is_color and not count_commas(value):
        raise CubError("Wrong RGB.")
    wall = _match_key(direction, _WALL_KEYS)
    if wall is not None:
        _set_wall(textures, _WALL_KEYS[wall], value)
        return
    color = _match_key(direction, _COLOR_KEYS)
    if color is not None:
        _set_color(textures, _COLOR_KEYS[color], value)


def _is_empty_line(line: str) -> bool:
    return line == "" or line[0] == "\n"


def _collect_map_rows(start: str | None, rest: Iterator[str]) -> list[str]:
    while start is not None and _is_empty_line(start):
        start = next(rest, None)
    if start is None:
        raise CubError("Map parsing error")
    text = start + "".join("1\n" if _is_empty_line(line) else line for line in rest)
    rows = [row for row in text.split("\n") if row]
    if not rows:
        raise CubError("Map parsing error")
    return rows


def parse_scene_lines(lines: Iterable[str]) -> Scene:
    """Parse the lines of a scene, newlines kept, into a validated Scene."""
    it = iter(lines)
    textures = Textures()
    line = next(it, None)
    while line is not None and not textures.is_complete():
        while line is not None and _is_empty_line(line):
            line = next(it, None)
        if line is None:
            break
        _apply_element(textures, line.strip("\n").strip(" "))
        line = next(it, None)
    if not textures.is_complete():
        raise CubError("Missing textures.")

    rows = _collect_map_rows(line, it)
    grid: Grid = [list(row) for row in rows]
    spawn_x, spawn_y, direction = find_spawn(grid)
    check_wall_map(grid, spawn_x, spawn_y)
    replace_threes(grid)
    width, height = map_dimensions(grid)
    return Scene(
        textures=textures,
        grid=pad_map(grid, width),
        width=width,
        height=height,
        spawn_x=spawn_x,
        spawn_y=spawn_y,
        direction=direction,
    )


def load_scene(path: str | Path) -> Scene:
    """Read and validate the scene file at path."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            return parse_scene_lines(handle)
    except OSError:
        raise CubError("Can't open file.") from None


def check_arguments(argv: Sequence[str]) -> str:
    """Check the command-line arguments (program name excluded).

    Exactly one argument, naming a .cub file, is required; it is returned.
    """
    if len(argv) != 1:
        raise CubError("Wrong number of arguments")
    path = argv[0]
    if path[-4:] != ".cub":
        raise CubError("Map is not .cub")
    return path