#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格坐标
"""

from dataclasses import dataclass

from ..common.constants import MAX_Y


@dataclass(frozen=True)
class Position:
    """不可变的二维整数坐标 (x, y)"""
    x: int
    y: int

    @property
    def index(self) -> int:
        """缓存键：x + y * MAX_Y，地图高度小于 MAX_Y 时唯一"""
        return self.x + self.y * MAX_Y

    def translate(self, dx: int = 0, dy: int = 0) -> "Position":
        """返回平移后的新坐标（不做边界检查）"""
        return Position(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def manhattan(a: Position, b: Position) -> int:
    """曼哈顿距离"""
    return abs(a.x - b.x) + abs(a.y - b.y)
