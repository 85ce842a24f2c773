#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地形栅格模型

地图由若干行地形格子组成，行宽可以不一致。
只有森林可以通行，水域和山地都视为障碍。
"""

from enum import Enum
from typing import Dict, Iterable, Tuple

import numpy as np

from ..common.constants import (
    TERRAIN_CODE_FOREST,
    TERRAIN_CODE_MOUNTAIN,
    TERRAIN_CODE_WATER,
)
from ..common.exceptions import ConfigurationError
from .position import Position


class Terrain(Enum):
    """地形类型，值为显示用符号"""
    WATER = "🌊"
    MOUNTAIN = "🗻"
    FOREST = "🌲"

    @property
    def walkable(self) -> bool:
        return self is Terrain.FOREST

    @property
    def ascii(self) -> str:
        return _TERRAIN_TO_ASCII[self]

    @property
    def code(self) -> int:
        return _TERRAIN_TO_CODE[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Terrain":
        """
        由符号解析地形（支持 emoji 和 ASCII）

        Raises:
            ConfigurationError: 未知符号
        """
        terrain = _SYMBOL_TO_TERRAIN.get(symbol)
        if terrain is None:
            raise ConfigurationError(f"未知地形符号: {symbol!r}")
        return terrain

    @classmethod
    def from_code(cls, code: int) -> "Terrain":
        terrain = _CODE_TO_TERRAIN.get(int(code))
        if terrain is None:
            raise ConfigurationError(f"未知地形编码: {code}")
        return terrain


_TERRAIN_TO_ASCII: Dict[Terrain, str] = {
    Terrain.WATER: "~",
    Terrain.MOUNTAIN: "^",
    Terrain.FOREST: ".",
}

_TERRAIN_TO_CODE: Dict[Terrain, int] = {
    Terrain.FOREST: TERRAIN_CODE_FOREST,
    Terrain.MOUNTAIN: TERRAIN_CODE_MOUNTAIN,
    Terrain.WATER: TERRAIN_CODE_WATER,
}

_CODE_TO_TERRAIN: Dict[int, Terrain] = {v: k for k, v in _TERRAIN_TO_CODE.items()}

_SYMBOL_TO_TERRAIN: Dict[str, Terrain] = {t.value: t for t in Terrain}
_SYMBOL_TO_TERRAIN.update({v: k for k, v in _TERRAIN_TO_ASCII.items()})


# 参考地图（8x8）
REFERENCE_MAP_ROWS: Tuple[str, ...] = (
    "🌊🌲🌲🌲🌲🌲🌲🌲",
    "🌊🌲🌲🌲🌲🌲🌲🌲",
    "🌲🌲🌲🌲🗻🌲🌲🌲",
    "🌲🌲🗻🗻🗻🗻🌲🌲",
    "🌲🌲🗻🗻🌲🌲🌊🌊",
    "🌲🌲🌲🌲🌲🌲🌲🌊",
    "🌊🌲🌲🌲🌲🌲🌲🌲",
    "🌊🌲🌲🌲🌲🌲🌲🌲",
)


class MapData:
    """
    地形栅格（只读）

    rows[y][x] 为 (x, y) 处的地形。搜索期间不会被修改，
    可以在多次搜索之间共享。
    """

    def __init__(self, rows: Iterable[Iterable[Terrain]]):
        self._rows: Tuple[Tuple[Terrain, ...], ...] = tuple(tuple(row) for row in rows)

    @classmethod
    def from_strings(cls, rows: Iterable[str]) -> "MapData":
        """
        由符号字符串构建地图，忽略空白字符

        Args:
            rows: 每行一个字符串，例如 "🌊🌲🗻" 或 "~.^"

        Raises:
            ConfigurationError: 含未知符号
        """
        return cls(
            [Terrain.from_symbol(ch) for ch in line if not ch.isspace()]
            for line in rows
        )

    @classmethod
    def from_array(cls, array: np.ndarray) -> "MapData":
        """
        由地形编码数组构建地图（0=森林，1=山地，2=水域）

        Args:
            array: HxW 整数数组

        Raises:
            ConfigurationError: 维度或编码无效
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ConfigurationError(f"地形数组必须是二维的: shape={array.shape}")
        if not np.issubdtype(array.dtype, np.integer) and array.dtype != np.bool_:
            raise ConfigurationError(f"地形数组必须是整数类型: dtype={array.dtype}")
        return cls([Terrain.from_code(v) for v in row] for row in array.tolist())

    @property
    def rows(self) -> Tuple[Tuple[Terrain, ...], ...]:
        return self._rows

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def is_rectangular(self) -> bool:
        """所有行宽度一致"""
        return len({len(row) for row in self._rows}) <= 1

    def width(self, y: int) -> int:
        """第 y 行的宽度"""
        return len(self._rows[y])

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.y < len(self._rows) and 0 <= pos.x < len(self._rows[pos.y])

    def __getitem__(self, pos: Position) -> Terrain:
        if not self.in_bounds(pos):
            raise IndexError(f"位置不在地图上: {pos}")
        return self._rows[pos.y][pos.x]

    def walkable(self, pos: Position) -> bool:
        """
        是否可通行

        调用方需先用 in_bounds 检查，越界时抛出 IndexError
        """
        return self[pos].walkable

    def to_obstacle_grid(self) -> np.ndarray:
        """
        转换为 0/1 障碍栅格（0=可通行，1=障碍）

        Raises:
            ValueError: 行宽不一致
        """
        widths = {len(row) for row in self._rows}
        if len(widths) > 1:
            raise ValueError(f"行宽不一致，无法转换为栅格: widths={sorted(widths)}")
        grid = np.zeros((self.height, widths.pop() if widths else 0), dtype=np.uint8)
        for y, row in enumerate(self._rows):
            for x, terrain in enumerate(row):
                if not terrain.walkable:
                    grid[y, x] = 1
        return grid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapData):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        widths = sorted({len(row) for row in self._rows})
        return f"MapData(height={self.height}, widths={widths})"


def reference_map() -> MapData:
    return MapData.from_strings(REFERENCE_MAP_ROWS)
