#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
搜索节点：单次搜索中每个坐标的记账信息
"""

from enum import Enum
from typing import Optional

from .position import Position


class NodeStatus(Enum):
    """节点状态，只会按 UNVISITED -> OPEN -> CLOSED 单向变化"""
    UNVISITED = 0
    OPEN = 1
    CLOSED = 2


class SearchNode:
    """
    搜索节点

    节点由 NodeCache 持有，parent 为父节点在缓存中的句柄（整数），
    起点的 parent 为 None。
    """

    __slots__ = ("handle", "position", "status", "cost", "heuristic", "parent")

    def __init__(self, handle: int, position: Position, heuristic: int):
        self.handle = handle
        self.position = position
        self.status = NodeStatus.UNVISITED
        self.cost = 0
        self.heuristic = heuristic
        self.parent: Optional[int] = None

    @property
    def score(self) -> int:
        return self.cost + self.heuristic

    def open(self, cost: int, parent: Optional[int]) -> bool:
        """
        打开节点

        只有 UNVISITED 状态的节点能被打开；已打开或已关闭的节点保持不变，
        即第一次发现时的代价和父节点是最终结果（不做松弛）。

        Args:
            cost: 从起点到此节点的代价
            parent: 父节点句柄

        Returns:
            是否打开成功
        """
        if self.status is not NodeStatus.UNVISITED:
            return False
        self.status = NodeStatus.OPEN
        self.cost = cost
        self.parent = parent
        return True

    def close(self) -> None:
        self.status = NodeStatus.CLOSED

    def __repr__(self) -> str:
        return (
            f"SearchNode(position={self.position}, status={self.status.name}, "
            f"cost={self.cost}, heuristic={self.heuristic}, parent={self.parent})"
        )
