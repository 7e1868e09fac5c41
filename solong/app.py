"""The playable window and the command that starts it."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from solong.game import Direction, Game, MoveResult  # noqa: E402
from solong.mapfile import MapError, read_map  # noqa: E402
from solong.printf import printf, put_str  # noqa: E402
from solong.validation import TILE_SIZE, check_map, map_pixel_size  # noqa: E402

_KEYS = {
    pygame.K_a: Direction.LEFT,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_UP: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_DOWN: Direction.DOWN,
}

_PLAYER_TEXTURES = {
    Direction.UP: "B_Player.xpm",
    Direction.DOWN: "F_Player.xpm",
    Direction.LEFT: "L_Player.xpm",
    Direction.RIGHT: "R_Player.xpm",
}

_TILE_TEXTURES = {
    "1": "Wall.xpm",
    "0": "Floor.xpm",
    "C": "Coin.xpm",
}

_EXIT_CLOSED = "Barrel_Empty.xpm"
_EXIT_OPEN = "Barrel_Full.xpm"
_DRAWN_TILES = frozenset("10CPE")


def has_ber_extension(path: str | None) -> bool:
    """True if path ends in '.ber'."""
    return bool(path) and str(path).endswith(".ber")


def direction_for_key(key: int) -> Direction | None:
    """The move bound to a key (WASD or arrows), or None."""
    return _KEYS.get(key)


def tile_rects(grid: Sequence[str]) -> list[tuple[str, tuple[int, int]]]:
    """Each drawable tile with the pixel position of its top-left corner."""
    return [
        (tile, (x * TILE_SIZE, y * TILE_SIZE))
        for y, row in enumerate(grid)
        for x, tile in enumerate(row)
        if tile in _DRAWN_TILES
    ]


def _load_textures(directory: Path) -> dict[str, pygame.Surface]:
    names = {*_TILE_TEXTURES.values(), *_PLAYER_TEXTURES.values(), _EXIT_CLOSED, _EXIT_OPEN}
    textures = {}
    for name in names:
        path = directory / name
        try:
            textures[name] = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError) as exc:
            raise OSError(f"cannot load texture {path}: {exc}") from exc
    return textures


def _draw(screen: pygame.Surface, game: Game, textures: dict[str, pygame.Surface]) -> None:
    for tile, corner in tile_rects(game.grid):
        if tile == "P":
            name = _PLAYER_TEXTURES[game.facing]
        elif tile == "E":
            name = _EXIT_OPEN if game.exit_open else _EXIT_CLOSED
        else:
            name = _TILE_TEXTURES[tile]
        screen.blit(textures[name], corner)
    pygame.display.flip()


def run(game: Game, textures_dir: str | os.PathLike[str] = "textures") -> int:
    """Open the game window and play until the player wins, quits or closes it."""
    pygame.init()
    try:
        screen = pygame.display.set_mode(map_pixel_size(game.grid))
        pygame.display.set_caption("so_long")
        textures = _load_textures(Path(textures_dir))
        _draw(screen, game, textures)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                printf("You din't finish the game :(\n")
                return 0
            direction = direction_for_key(event.key)
            if direction is None:
                continue
            result = game.move(direction)
            if result is MoveResult.WON:
                put_str(game.win_message())
                return 0
            if result is MoveResult.MOVED:
                printf("%d\n", game.moves)
                _draw(screen, game, textures)
    finally:
        pygame.quit()


def _screen_size() -> tuple[int, int] | None:
    try:
        pygame.display.init()
        sizes = pygame.display.get_desktop_sizes()
    except pygame.error:
        return None
    if not sizes or sizes[0][0] <= 0 or sizes[0][1] <= 0:
        return None
    return tuple(sizes[0])


def _error(message: str) -> int:
    printf("Error\n%s\n", message)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        printf("Bad syntax:\n./so_long ./maps/<map>.ber.\n")
        return 0
    path = args[0]
    try:
        grid = read_map(path)
    except MapError as exc:
        if not isinstance(exc.__cause__, OSError):
            return _error(str(exc))
        grid = []
    if not has_ber_extension(path):
        return _error("Invalid map.")
    try:
        check_map(grid, _screen_size())
    except MapError as exc:
        return _error(str(exc))
    return run(Game(grid))