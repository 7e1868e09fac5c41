"""Game state and player movement on a validated map."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from solong.mapfile import MapError

WIN_BANNER = "========================================"


class Direction(Enum):
    """A step of the player on the grid, as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MoveResult(Enum):
    """What a move attempt did."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    IGNORED = "ignored"


class Game:
    """A level in play: the tiles, the player, the remaining collectibles and the move count."""

    def __init__(self, grid: Sequence[str]) -> None:
        self._tiles = [list(row) for row in grid]
        start = next(
            (
                (x, y)
                for y, row in enumerate(self._tiles)
                for x, ch in enumerate(row)
                if ch == "P"
            ),
            None,
        )
        if start is None:
            raise MapError("Map has no player.")
        self._x, self._y = start
        self._collectibles = sum(row.count("C") for row in self._tiles)
        self._moves = 0
        self._finished = False
        self._facing = Direction.DOWN

    @property
    def grid(self) -> tuple[str, ...]:
        """The current tiles, one string per row."""
        return tuple("".join(row) for row in self._tiles)

    @property
    def position(self) -> tuple[int, int]:
        """The player's (x, y) tile position."""
        return self._x, self._y

    @property
    def collectibles(self) -> int:
        """Collectibles still on the map."""
        return self._collectibles

    @property
    def moves(self) -> int:
        """Number of successful steps taken."""
        return self._moves

    @property
    def finished(self) -> bool:
        """True once the player has reached the open exit."""
        return self._finished

    @property
    def facing(self) -> Direction:
        """The direction the player last tried to move in."""
        return self._facing

    @property
    def exit_open(self) -> bool:
        """True when every collectible has been picked up."""
        return self._collectibles == 0

    def _tile_at(self, x: int, y: int) -> str | None:
        if 0 <= y < len(self._tiles) and 0 <= x < len(self._tiles[y]):
            return self._tiles[y][x]
        return None

    def move(self, direction: Direction) -> MoveResult:
        """Try to step the player one tile in direction."""
        if self._finished:
            return MoveResult.IGNORED
        self._facing = direction
        x, y = self._x + direction.dx, self._y + direction.dy
        tile = self._tile_at(x, y)
        if tile == "E" and self.exit_open:
            self._tiles[self._y][self._x] = "0"
            self._x, self._y = x, y
            self._finished = True
            return MoveResult.WON
        if tile in (None, "1", "E"):
            return MoveResult.BLOCKED
        if tile == "C":
            self._collectibles -= 1
        self._tiles[y][x] = "P"
        self._tiles[self._y][self._x] = "0"
        self._x, self._y = x, y
        self._moves += 1
        return MoveResult.MOVED

    def win_message(self) -> str:
        """The banner shown when the game is won."""
        return (
            f"\n{WIN_BANNER}\n"
            f"   You finish the game with {self._moves} moves   "
            f"\n{WIN_BANNER}\n"
        )