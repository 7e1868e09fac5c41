"""Checks that a map grid is a playable level."""

from __future__ import annotations

from collections import Counter, deque
from itertools import zip_longest
from typing import Sequence

from solong.mapfile import MapError

TILE_SIZE = 64
VALID_TILES = frozenset("PEC01")

Grid = Sequence[str]


def map_pixel_size(grid: Grid) -> tuple[int, int]:
    """Width and height of the map in pixels, from the first row's length and the row count."""
    if not grid:
        raise MapError("Map is empty.")
    return len(grid[0]) * TILE_SIZE, len(grid) * TILE_SIZE


def is_rectangular(grid: Grid) -> bool:
    """True if the map has rows and all rows are as long as the first."""
    if not grid:
        return False
    width = len(grid[0])
    return all(len(row) == width for row in grid)


def is_closed(grid: Grid) -> bool:
    """True if the top and bottom rows and both side columns are all walls."""
    if not grid:
        return False
    edges = zip_longest(grid[0], grid[-1], fillvalue="")
    if any(top != "1" or bottom != "1" for top, bottom in edges):
        return False
    return all(row and row[0] == "1" and row[-1] == "1" for row in grid[1:])


def count_tiles(grid: Grid) -> Counter[str]:
    """Number of each tile character in the map."""
    return Counter(ch for row in grid for ch in row)


def has_valid_pce(grid: Grid) -> bool:
    """True for exactly one player, exactly one exit and at least one collectible."""
    counts = count_tiles(grid)
    return counts["P"] == 1 and counts["E"] == 1 and counts["C"] > 0


def has_only_valid_tiles(grid: Grid) -> bool:
    """True if every tile is one of P, E, C, 0 and 1."""
    return set(count_tiles(grid)) <= VALID_TILES


def _find(grid: Grid, tile: str) -> tuple[int, int] | None:
    return next(
        ((y, x) for y, row in enumerate(grid) for x, ch in enumerate(row) if ch == tile),
        None,
    )


def is_winnable(grid: Grid) -> bool:
    """True if the player can collect every item and then reach the exit.

    The exit can be stepped onto but not walked through.
    """
    start = _find(grid, "P")
    if start is None or _find(grid, "E") is None:
        return False
    seen = {start}
    queue = deque([start])
    while queue:
        y, x = queue.popleft()
        if grid[y][x] == "E":
            continue
        for ny, nx in ((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)):
            if (ny, nx) in seen or not 0 <= ny < len(grid) or not 0 <= nx < len(grid[ny]):
                continue
            if grid[ny][nx] == "1":
                continue
            seen.add((ny, nx))
            queue.append((ny, nx))
    return all(
        (y, x) in seen
        for y, row in enumerate(grid)
        for x, ch in enumerate(row)
        if ch in ("C", "E")
    )


def check_map(grid: Grid, screen_size: tuple[int, int] | None = None) -> None:
    """Raise MapError describing the first problem found, or return if the map is playable."""
    if not grid:
        raise MapError("Map is not rectangle.")
    if screen_size is not None:
        width, height = map_pixel_size(grid)
        screen_width, screen_height = screen_size
        if width > screen_width or height > screen_height:
            raise MapError("Map is too big for the screen.")
    if not is_rectangular(grid):
        raise MapError("Map is not rectangle.")
    if not is_closed(grid):
        raise MapError("Map is not closed.")
    if not has_valid_pce(grid):
        raise MapError("PCE not valid.")
    if not has_only_valid_tiles(grid):
        raise MapError("Invalid map. Only P, C, E, 1, 0 allowed.")
    if not is_winnable(grid):
        raise MapError("The map is not winable")