import pytest

from solong.game import Direction, Game, MoveResult
from solong.mapfile import MapError

LEVEL = ["11111", "1PCE1", "11111"]


def _count(game, tile):
    return sum(row.count(tile) for row in game.grid)


def test_initial_state_reflects_grid():
    game = Game(LEVEL)
    assert game.position == (LEVEL[1].index("P"), 1)
    assert game.collectibles == sum(row.count("C") for row in LEVEL)
    assert game.moves == 0
    assert game.finished is False
    assert game.facing is Direction.DOWN
    assert game.grid == tuple(LEVEL)


def test_grid_without_player_is_rejected():
    with pytest.raises(MapError):
        Game(["111", "1C1", "111"])


def test_direction_components():
    assert (Direction.LEFT.dx, Direction.LEFT.dy) == (-1, 0)
    assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)
    game = Game(["11111", "10001", "100P1", "11111"])
    assert game.move(Direction.LEFT) is MoveResult.MOVED
    assert game.position == (2, 2)
    assert game.move(Direction.UP) is MoveResult.MOVED
    assert game.position == (2, 1)


def test_wall_blocks_and_turns_player():
    game = Game(LEVEL)
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.position == (1, 1)
    assert game.moves == 0
    assert game.facing is Direction.UP
    assert game.grid == tuple(LEVEL)


def test_closed_exit_blocks():
    grid = ["11111", "1EPC1", "11111"]
    game = Game(grid)
    assert game.move(Direction.LEFT) is MoveResult.BLOCKED
    assert game.grid == tuple(grid)
    assert game.finished is False


def test_collect_then_win():
    game = Game(LEVEL)
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.collectibles == 0
    assert game.exit_open
    assert game.moves == 1
    x, y = game.position
    assert game.grid[y][x] == "P"
    assert game.grid[y][x - 1] == "0"

    assert game.move(Direction.RIGHT) is MoveResult.WON
    assert game.finished
    assert game.moves == 1
    assert _count(game, "P") == 0
    assert _count(game, "E") == 1


def test_moves_after_win_are_ignored():
    game = Game(LEVEL)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    before = game.grid
    assert game.move(Direction.LEFT) is MoveResult.IGNORED
    assert game.grid == before


def test_floor_move_leaves_floor_behind():
    game = Game(["1111", "1P01", "1111"])
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.move(Direction.LEFT) is MoveResult.MOVED
    assert game.grid == ("1111", "1P01", "1111")
    assert game.moves == 2


@pytest.mark.parametrize(
    "steps",
    [
        [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP],
        [Direction.DOWN, Direction.DOWN, Direction.RIGHT, Direction.RIGHT],
        [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.RIGHT],
    ],
)
def test_exactly_one_player_and_collectible_count_consistent(steps):
    grid = ["111111", "1P0C01", "10C001", "1000E1", "111111"]
    game = Game(grid)
    for step in steps:
        game.move(step)
        assert _count(game, "P") == 1
        assert _count(game, "C") == game.collectibles
        x, y = game.position
        assert game.grid[y][x] == "P"


def test_win_message_reports_moves():
    game = Game(LEVEL)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    message = game.win_message()
    assert "You finish the game with 1 moves" in message
    assert message.startswith("\n=")
    assert message.endswith("=\n")