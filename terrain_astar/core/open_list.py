#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
开放列表：已发现但尚未展开的节点
"""

from typing import Dict, Iterator, Optional

from .search_node import SearchNode


class OpenList:
    """
    开放列表

    按插入顺序保存节点引用（节点归 NodeCache 所有）。
    PickMinimum 线性扫描，选择规则：
      1. score 最小
      2. score 相同时 cost 最小
      3. 两者都相同时取先插入的
    """

    def __init__(self):
        self.nodes_: Dict[int, SearchNode] = {}

    def __len__(self) -> int:
        return len(self.nodes_)

    def __bool__(self) -> bool:
        return bool(self.nodes_)

    def __contains__(self, node: SearchNode) -> bool:
        return node.position.index in self.nodes_

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self.nodes_.values())

    def Insert(self, node: SearchNode) -> None:
        key = node.position.index
        if key in self.nodes_:
            raise ValueError(f"节点已在开放列表中: {node.position}")
        self.nodes_[key] = node

    def Remove(self, node: SearchNode) -> None:
        """
        移除节点

        Raises:
            KeyError: 节点不在开放列表中
        """
        del self.nodes_[node.position.index]

    def PickMinimum(self) -> Optional[SearchNode]:
        """
        选出下一个要展开的节点（不移除）

        Returns:
            最优节点，列表为空时返回 None
        """
        result: Optional[SearchNode] = None
        min_score = 0
        min_cost = 0
        for node in self.nodes_.values():
            score = node.score
            if result is None or score < min_score or (score == min_score and node.cost < min_cost):
                min_score = score
                min_cost = node.cost
                result = node
        return result
