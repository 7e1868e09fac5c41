# solong

A small top-down puzzle game played on a grid of tiles. Walk the player
around the map, pick up every coin, and then step onto the exit barrel.
After each successful step, the number of moves so far is printed. When
you reach the open exit, a banner with the total number of moves is
printed and the game ends.

## Installing

```
pip install .
```

This installs `pygame`, which draws the window. To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
solong path/to/map.ber
```

The command takes exactly one argument, the path to a map file whose
name ends in `.ber`. With no argument or with more than one, it prints a
usage message and exits.

Controls:

- `W` / `Up`: move up
- `S` / `Down`: move down
- `A` / `Left`: move left
- `D` / `Right`: move right
- `Esc`: quit, with a message that the game was not finished
- closing the window: quit

Walls block the player. The exit also blocks the player until every
coin has been collected. After that, stepping onto the exit wins the
game.

### Textures

The window is drawn from image files in a `textures` directory, which is
looked up relative to the current working directory:

- `Floor.xpm`, `Wall.xpm`, `Coin.xpm`
- `Barrel_Empty.xpm` (the closed exit) and `Barrel_Full.xpm` (the open exit)
- `F_Player.xpm`, `B_Player.xpm`, `L_Player.xpm`, `R_Player.xpm` (the
  player facing down, up, left and right)

Every tile is 64×64 pixels. The package does not ship any of these
images, so you have to supply them yourself. If a texture cannot be
loaded, `run` raises `OSError`.

## Map format

A map is plain text with one row per line, made from these characters:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | coin         |
| `E`  | exit         |

Example:

```
1111111
1P0C0E1
1111111
```

A map is rejected when any of the following holds. The program prints
`Error` followed by the reason and exits with status 1.

- the file name does not end in `.ber`;
- it contains an empty line;
- it is larger than the screen at 64 pixels per tile;
- its rows are not all the same length;
- it is not enclosed by walls;
- it does not have exactly one `P`, exactly one `E` and at least one `C`;
- it contains any other character;
- some coin or the exit cannot be reached from the start.

## Using it as a library

The map checks and the game rules work without a window:

```python
from solong.mapfile import parse_map
from solong.validation import check_map
from solong.game import Game, Direction, MoveResult

grid = parse_map("1111111\n1P0C0E1\n1111111\n")
check_map(grid, (1920, 1080))      # raises MapError on a bad map
game = Game(grid)
assert game.move(Direction.RIGHT) is MoveResult.MOVED
print(game.position, game.moves, game.collectibles)
```

### Modules

- `solong.mapfile`: `read_map(path)` and `parse_map(text)` return the
  rows of a map. Both raise `MapError` for an empty line, and
  `read_map` also raises it for a file that cannot be opened.
- `solong.validation`: `check_map(grid, screen_size=None)` raises
  `MapError` with the first problem it finds. The separate checks are
  also available: `is_rectangular`, `is_closed`, `has_valid_pce`,
  `has_only_valid_tiles`, `is_winnable`, `count_tiles` and
  `map_pixel_size`.
- `solong.game`: `Game` holds a level in play. `Game.move(direction)`
  returns a `MoveResult` (`MOVED`, `BLOCKED`, `WON` or `IGNORED` once
  the game is finished). The game state is exposed through `grid`,
  `position`, `collectibles`, `moves`, `finished`, `facing` and
  `exit_open`. `win_message()` gives the final banner.
- `solong.app`: `main(argv=None)` is the `solong` command and
  `run(game, textures_dir="textures")` opens the window. The helpers
  `has_ber_extension`, `direction_for_key` and `tile_rects` are also
  here.

The package also contains small general-purpose helpers that the game
is built on:

- `solong.chars`: ASCII classification and case conversion, plus
  `atoi` and `itoa` for 32-bit integers.
- `solong.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove` and `memset`, working on `bytes` and `bytearray`.
- `solong.strutils`: C-style string routines such as `split`, `strchr`,
  `strcmp`, `strlcpy`, `strlcat`, `substr` and `strtrim`. Positions are
  returned as indices, or `None` when nothing is found.
- `solong.linkedlist`: a singly linked `LinkedList` of `Node`s.
- `solong.linereader`: `LineReader` reads a text or binary stream one
  line at a time through a fixed-size buffer.
- `solong.printf`: `format_string` and `printf` support `%c %s %p %d %i
  %u %x %X`. `put_char`, `put_str`, `put_endl` and `put_nbr` are also
  provided.