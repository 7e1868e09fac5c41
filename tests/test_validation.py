import pytest

from solong.mapfile import MapError
from solong.validation import (
    TILE_SIZE,
    check_map,
    count_tiles,
    has_only_valid_tiles,
    has_valid_pce,
    is_closed,
    is_rectangular,
    is_winnable,
    map_pixel_size,
)

VALID = ["11111", "1PCE1", "11111"]
BIG_SCREEN = (10_000, 10_000)


def test_pixel_size_uses_tile_size():
    assert map_pixel_size(VALID) == (5 * TILE_SIZE, 3 * TILE_SIZE)


def test_pixel_size_of_empty_map_raises():
    with pytest.raises(MapError):
        map_pixel_size([])


def test_rectangular():
    assert is_rectangular(VALID)
    assert not is_rectangular(["1111", "111"])
    assert not is_rectangular([])


def test_closed():
    assert is_closed(VALID)
    assert not is_closed(["11111", "1PCE0", "11111"])
    assert not is_closed(["11011", "1PCE1", "11111"])
    assert not is_closed(["11111", "1PCE1", "11101"])


def test_counts_and_pce():
    counts = count_tiles(VALID)
    assert counts["P"] == 1 and counts["C"] == 1 and counts["E"] == 1
    assert sum(counts.values()) == sum(len(row) for row in VALID)
    assert has_valid_pce(VALID)
    assert not has_valid_pce(["111111", "1PPCE1", "111111"])
    assert not has_valid_pce(["11111", "1P0E1", "11111"])
    assert not has_valid_pce(["111111", "1PCEE1", "111111"])


def test_only_valid_tiles():
    assert has_only_valid_tiles(VALID)
    assert not has_only_valid_tiles(["111111", "1PCEX1", "111111"])


def test_winnable():
    assert is_winnable(VALID)
    assert is_winnable(["1111111", "1P0C011", "10111E1", "1000001", "1111111"])


def test_collectible_behind_exit_is_not_winnable():
    assert not is_winnable(["111111", "1PEC01", "111111"])


def test_walled_off_is_not_winnable():
    assert not is_winnable(["111111", "1P1CE1", "111111"])


def test_winnable_needs_player_and_exit():
    assert not is_winnable(["11111", "10C01", "11111"])


def test_check_map_accepts_valid():
    assert check_map(VALID, BIG_SCREEN) is None
    assert check_map(VALID) is None


@pytest.mark.parametrize(
    "grid, message",
    [
        ([], "Map is not rectangle."),
        (["1111", "111"], "Map is not rectangle."),
        (["11111", "1PCE0", "11111"], "Map is not closed."),
        (["11111", "1P0E1", "11111"], "PCE not valid."),
        (["111111", "1PCEX1", "111111"], "Invalid map. Only P, C, E, 1, 0 allowed."),
        (["111111", "1PEC01", "111111"], "The map is not winable"),
    ],
)
def test_check_map_errors(grid, message):
    with pytest.raises(MapError) as info:
        check_map(grid, BIG_SCREEN)
    assert str(info.value) == message


def test_check_map_too_big_for_screen():
    width, height = map_pixel_size(VALID)
    with pytest.raises(MapError, match="too big"):
        check_map(VALID, (width - 1, height))
    assert check_map(VALID, (width, height)) is None