import numpy as np
import pytest

from terrain_astar.common.exceptions import ConfigurationError
from terrain_astar.core.map_data import MapData, Terrain, REFERENCE_MAP_ROWS
from terrain_astar.core.position import Position


def test_only_forest_is_walkable():
    assert Terrain.FOREST.walkable
    assert not Terrain.WATER.walkable
    assert not Terrain.MOUNTAIN.walkable


def test_from_symbol_accepts_emoji_and_ascii():
    assert Terrain.from_symbol("🌊") is Terrain.WATER
    assert Terrain.from_symbol("~") is Terrain.WATER
    assert Terrain.from_symbol("^") is Terrain.MOUNTAIN
    assert Terrain.from_symbol(".") is Terrain.FOREST
    with pytest.raises(ConfigurationError):
        Terrain.from_symbol("x")


def test_reference_map_shape(ref_map):
    assert ref_map.height == 8
    assert all(ref_map.width(y) == 8 for y in range(8))
    assert ref_map[Position(0, 0)] is Terrain.WATER
    assert ref_map[Position(4, 2)] is Terrain.MOUNTAIN
    assert ref_map[Position(1, 2)] is Terrain.FOREST


def test_from_strings_ignores_whitespace():
    emoji = MapData.from_strings(REFERENCE_MAP_ROWS)
    ascii_rows = [" ".join(row) for row in ["~.......", "~.......", "....^...", "..^^^^..",
                                             "..^^..~~", ".......~", "~.......", "~......."]]
    assert MapData.from_strings(ascii_rows) == emoji


def test_in_bounds_with_irregular_rows():
    m = MapData.from_strings(["...", ".", "..."])
    assert m.in_bounds(Position(2, 0))
    assert not m.in_bounds(Position(1, 1))
    assert m.in_bounds(Position(0, 1))
    assert not m.in_bounds(Position(-1, 0))
    assert not m.in_bounds(Position(0, -1))
    assert not m.in_bounds(Position(0, 3))


def test_walkable_requires_in_bounds(ref_map):
    assert ref_map.walkable(Position(1, 2))
    assert not ref_map.walkable(Position(0, 0))
    with pytest.raises(IndexError):
        ref_map.walkable(Position(-1, 0))
    with pytest.raises(IndexError):
        ref_map.walkable(Position(8, 0))


def test_from_array_uses_terrain_codes():
    m = MapData.from_array(np.array([[0, 1], [2, 0]]))
    assert m.rows == ((Terrain.FOREST, Terrain.MOUNTAIN), (Terrain.WATER, Terrain.FOREST))


@pytest.mark.parametrize("array", [
    np.zeros(4, dtype=np.int32),
    np.zeros((2, 2), dtype=np.float32),
    np.array([[0, 5]]),
])
def test_from_array_rejects_invalid_input(array):
    with pytest.raises(ConfigurationError):
        MapData.from_array(array)


def test_to_obstacle_grid(ref_map):
    grid = ref_map.to_obstacle_grid()
    assert grid.shape == (8, 8)
    assert grid.dtype == np.uint8
    assert grid[0, 0] == 1
    assert grid[3, 2] == 1
    assert grid[2, 1] == 0
    assert int(grid.sum()) == 14


def test_to_obstacle_grid_rejects_ragged_rows():
    with pytest.raises(ValueError):
        MapData.from_strings(["..", "."]).to_obstacle_grid()


def test_is_rectangular(ref_map):
    assert ref_map.is_rectangular
    assert not MapData.from_strings(["..", "."]).is_rectangular
