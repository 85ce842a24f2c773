#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地图渲染：把路径逐步画成文本帧
"""

from typing import List, Sequence

from ..common.constants import (
    FRAME_SEPARATOR,
    MARK_CURRENT,
    MARK_CURRENT_ASCII,
    MARK_END,
    MARK_END_ASCII,
    MARK_START,
    MARK_START_ASCII,
)
from ..core.map_data import MapData
from ..core.position import Position


class MapRenderer:
    """
    文本渲染器

    每一帧中起点、当前位置、终点分别用标记替换，优先级为 起点 > 当前 > 终点。
    """

    def __init__(self, ascii_mode: bool = False):
        self.ascii_mode_ = ascii_mode
        if ascii_mode:
            self.marks_ = (MARK_START_ASCII, MARK_CURRENT_ASCII, MARK_END_ASCII)
        else:
            self.marks_ = (MARK_START, MARK_CURRENT, MARK_END)

    def RenderFrame(self, map_data: MapData, start: Position, end: Position, current: Position) -> str:
        mark_start, mark_current, mark_end = self.marks_
        lines = []
        for y, row in enumerate(map_data.rows):
            cells = []
            for x, terrain in enumerate(row):
                pos = Position(x, y)
                if pos == start:
                    cells.append(mark_start)
                elif pos == current:
                    cells.append(mark_current)
                elif pos == end:
                    cells.append(mark_end)
                else:
                    cells.append(terrain.ascii if self.ascii_mode_ else terrain.value)
            lines.append("".join(cells))
        return "\n".join([FRAME_SEPARATOR, *lines, FRAME_SEPARATOR])

    def RenderPath(
        self,
        map_data: MapData,
        start: Position,
        end: Position,
        path: Sequence[Position],
    ) -> List[str]:
        """
        逐步渲染路径

        Args:
            path: 终点到起点顺序的路径（Find 的返回值）

        Returns:
            从起点到终点，每个位置一帧
        """
        return [self.RenderFrame(map_data, start, end, pos) for pos in reversed(path)]
