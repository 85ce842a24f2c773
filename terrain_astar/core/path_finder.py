#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：在地形栅格上实现 A* 寻路

- 四方向移动，单步代价为 1
- 曼哈顿距离启发
- 节点第一次被打开时的代价和父节点即为最终结果（不做松弛）
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from loguru import logger

from ..common.constants import DIRECTIONS_4WAY, MAX_Y, STEP_COST
from ..common.exceptions import (
    BlockedEndpointError,
    DegenerateEndpointsError,
    FailureReason,
    InvalidGridError,
    InvalidInputError,
    NoPathFoundError,
    OutOfBoundsError,
)
from .map_data import MapData
from .node_cache import HeuristicFunc, NodeCache
from .open_list import OpenList
from .position import Position, manhattan
from .search_node import SearchNode


class SearchState(Enum):
    """搜索状态：IDLE -> RUNNING -> {SUCCEEDED, FAILED, NO_PATH}"""
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    NO_PATH = "no_path"


@dataclass
class FindResult:
    ok: bool
    state: SearchState
    path: List[Position] = field(default_factory=list)  # 终点在前
    reason: Optional[FailureReason] = None
    message: str = ""
    nodes_expanded: int = 0


class AStarPathFinder:
    """
    A* 寻路器

    每次 Find 都会新建节点缓存和开放列表，地图只读，
    因此同一张 MapData 可以被多个寻路器同时使用。

    示例:
        ```python
        finder = AStarPathFinder()
        path = finder.Find(map_data, Position(1, 2), Position(6, 6))
        ```
    """

    def __init__(self, heuristic: HeuristicFunc = manhattan):
        self.heuristic_ = heuristic
        self.state_ = SearchState.IDLE
        self.nodes_expanded_ = 0

        # 单次搜索的状态
        self.map_data_: Optional[MapData] = None
        self.cache_: Optional[NodeCache] = None
        self.open_list_: Optional[OpenList] = None

    @property
    def state(self) -> SearchState:
        return self.state_

    @property
    def nodes_expanded(self) -> int:
        return self.nodes_expanded_

    def Find(self, map_data: MapData, start: Position, end: Position) -> List[Position]:
        """
        寻找从 start 到 end 的路径

        Args:
            map_data: 地形栅格
            start: 起点
            end: 终点

        Returns:
            路径坐标列表，顺序为终点到起点；开放列表耗尽时返回空列表

        Raises:
            InvalidGridError: 地图高度或任一行宽度不小于 MAX_Y
            DegenerateEndpointsError: 起点与终点相同
            OutOfBoundsError: 起点或终点不在地图上
            BlockedEndpointError: 起点或终点不可通行
        """
        self.state_ = SearchState.IDLE
        self.nodes_expanded_ = 0

        try:
            self._Validate(map_data, start, end)
        except InvalidInputError as e:
            self.state_ = SearchState.FAILED
            logger.warning(f"[A*] 输入无效({e.reason.value}): {e}")
            raise

        self.map_data_ = map_data
        self.cache_ = NodeCache(end, self.heuristic_)
        self.open_list_ = OpenList()

        logger.debug(f"[A*] 开始搜索: height={map_data.height}, start={start}, end={end}")

        node = self._OpenNode(start, 0, None)
        self.state_ = SearchState.RUNNING

        while True:
            self.open_list_.Remove(node)
            node.close()
            self.nodes_expanded_ += 1
            self._OpenAround(node)

            next_node = self.open_list_.PickMinimum()
            if next_node is None:
                self.state_ = SearchState.NO_PATH
                logger.warning(
                    f"[A*] 无法找到从起点到终点的路径: start={start}, end={end}, "
                    f"探索节点数={self.nodes_expanded_}"
                )
                return []

            node = next_node
            if node.position == end:
                self.state_ = SearchState.SUCCEEDED
                path = self.cache_.TracePath(node)
                logger.info(f"[A*] 路径规划成功: 路径长度={len(path)}, 探索节点数={self.nodes_expanded_}")
                return path

    def Plan(self, map_data: MapData, start: Position, end: Position) -> FindResult:
        """
        寻路并返回结果对象，输入无效和无路径都不会抛出异常

        Returns:
            FindResult
        """
        try:
            path = self.Find(map_data, start, end)
        except InvalidInputError as e:
            return FindResult(ok=False, state=self.state_, reason=e.reason, message=str(e))

        if not path:
            return FindResult(
                ok=False,
                state=self.state_,
                reason=FailureReason.NO_PATH_FOUND,
                message=f"无法从 {start} 到达 {end}",
                nodes_expanded=self.nodes_expanded_,
            )
        return FindResult(ok=True, state=self.state_, path=path, message="ok", nodes_expanded=self.nodes_expanded_)

    @staticmethod
    def _Validate(map_data: MapData, start: Position, end: Position) -> None:
        if map_data.height >= MAX_Y:
            raise InvalidGridError(f"地图过大: height={map_data.height}, 上限={MAX_Y - 1}")

        widest = max((len(row) for row in map_data.rows), default=0)
        if widest >= MAX_Y:
            raise InvalidGridError(f"地图过宽: width={widest}, 上限={MAX_Y - 1}")

        if start == end:
            raise DegenerateEndpointsError(f"起点和终点相同: {start}")

        for name, pos in (("起点", start), ("终点", end)):
            if not map_data.in_bounds(pos):
                raise OutOfBoundsError(f"{name}不在地图上: {pos}")

        for name, pos in (("起点", start), ("终点", end)):
            if not map_data.walkable(pos):
                raise BlockedEndpointError(f"{name}不可通行: {pos} ({map_data[pos].name})")

    def _OpenNode(self, position: Position, cost: int, parent: Optional[SearchNode]) -> Optional[SearchNode]:
        """
        尝试打开 position 处的节点，成功时加入开放列表

        Returns:
            打开的节点；越界、不可通行或已打开过时返回 None
        """
        if not self.map_data_.in_bounds(position):
            return None
        if not self.map_data_.walkable(position):
            return None

        node = self.cache_.GetOrCreate(position)
        if not node.open(cost, parent.handle if parent is not None else None):
            return None

        self.open_list_.Insert(node)
        return node

    def _OpenAround(self, parent: SearchNode) -> None:
        cost = parent.cost + STEP_COST
        for dx, dy in DIRECTIONS_4WAY:
            self._OpenNode(parent.position.translate(dx, dy), cost, parent)


def find_path(
    map_data: MapData,
    start: Position,
    end: Position,
    raise_on_no_path: bool = False,
) -> List[Position]:
    """
    便捷函数：用新的寻路器做一次搜索

    Args:
        raise_on_no_path: 为 True 时无路径抛出 NoPathFoundError，否则返回空列表

    Returns:
        路径坐标列表，顺序为终点到起点
    """
    path = AStarPathFinder().Find(map_data, start, end)
    if not path and raise_on_no_path:
        raise NoPathFoundError(f"无法从 {start} 到达 {end}")
    return path
