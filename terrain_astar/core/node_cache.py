#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
节点缓存

以数组存放节点、以整数句柄互相引用，保证同一坐标在一次搜索中只有一个节点。
"""

from typing import Callable, Dict, List

from .position import Position, manhattan
from .search_node import SearchNode

HeuristicFunc = Callable[[Position, Position], int]


class NodeCache:
    """按坐标索引懒创建节点，只增不删，生命周期为一次搜索"""

    def __init__(self, goal: Position, heuristic: HeuristicFunc = manhattan):
        self.goal_ = goal
        self.heuristic_ = heuristic
        self.nodes_: List[SearchNode] = []
        self.handles_: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self.nodes_)

    def __contains__(self, position: Position) -> bool:
        return position.index in self.handles_

    def __getitem__(self, handle: int) -> SearchNode:
        return self.nodes_[handle]

    def GetOrCreate(self, position: Position) -> SearchNode:
        """
        获取坐标对应的节点，不存在时创建

        新节点：cost=0，heuristic=到终点的启发距离，status=UNVISITED，parent=None
        """
        handle = self.handles_.get(position.index)
        if handle is not None:
            return self.nodes_[handle]

        handle = len(self.nodes_)
        node = SearchNode(handle, position, self.heuristic_(position, self.goal_))
        self.nodes_.append(node)
        self.handles_[position.index] = handle
        return node

    def TracePath(self, node: SearchNode) -> List[Position]:
        """
        沿父节点回溯路径

        Returns:
            从 node 到起点的坐标列表（终点在前）
        """
        path = [node.position]
        while node.parent is not None:
            node = self.nodes_[node.parent]
            path.append(node.position)
        return path
