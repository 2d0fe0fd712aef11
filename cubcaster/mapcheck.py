"""Validation and normalisation of the map grid of a scene."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .config import CubError

INVALID = 0
TILE = 1
BLANK = 2
SPAWN = 3

SPAWN_CHARS = "NSWE"

Grid = list[list[str]]


def check_char(c: str) -> int:
    """Classify a map character: TILE, BLANK, SPAWN or INVALID."""
    if c in ("0", "1"):
        return TILE
    if c == " ":
        return BLANK
    if len(c) == 1 and c in SPAWN_CHARS:
        return SPAWN
    return INVALID


def find_spawn(grid: Grid) -> tuple[int, int, str]:
    """Check every character and locate the single spawn point.

    Blanks are marked '2' and the spawn cell becomes '0', in place.
    Returns (column, row, direction letter).
    """
    spawns: list[tuple[int, int, str]] = []
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            kind = check_char(c)
            if kind == INVALID:
                raise CubError("Wrong char in map.")
            if kind == BLANK:
                row[x] = "2"
            elif kind == SPAWN:
                spawns.append((x, y, c))
                row[x] = "0"
    if len(spawns) != 1:
        raise CubError("More than one spawn.")
    return spawns[-1]


def check_wall_map(grid: Grid, x: int, y: int) -> None:
    """Flood-fill from (x, y), raising if the reachable area is not closed.

    Every reachable floor cell is marked '3' in place.
    """
    height = len(grid)
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        row = grid[cy]
        if cx > len(row) - 1 or row[cx] == "2":
            raise CubError("Map not closed.")
        if row[cx] in ("3", "1"):
            continue
        if cy == 0 or cx == 0 or cy == height - 1 or cx == len(row) - 1:
            raise CubError("Map not closed.")
        row[cx] = "3"
        stack.extend(((cx - 1, cy), (cx, cy - 1), (cx, cy + 1), (cx + 1, cy)))


def replace_threes(grid: Grid) -> None:
    """Turn the flood-fill marks back into floor cells, in place."""
    for row in grid:
        for x, c in enumerate(row):
            if c == "3":
                row[x] = "0"


def map_dimensions(rows: Sequence[Sequence[str]]) -> tuple[int, int]:
    """Return (width, height): the longest row and the number of rows."""
    width = max((len(row) for row in rows), default=0)
    return width, len(rows)


def pad_map(rows: Iterable[Sequence[str]], width: int) -> Grid:
    """Copy the rows into a rectangular grid, padding with spaces."""
    grid: Grid = []
    for row in rows:
        cells = list(row)
        if len(cells) > width:
            raise ValueError(f"row of length {len(cells)} exceeds width {width}")
        cells.extend(" " * (width - len(cells)))
        grid.append(cells)
    return grid