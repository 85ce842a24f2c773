#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
terrain_astar 主包
在地形栅格上做 A* 寻路（曼哈顿启发，四方向移动）
"""

__version__ = "0.1.0"

from .core.position import Position, manhattan
from .core.map_data import MapData, Terrain
from .core.path_finder import AStarPathFinder, FindResult, SearchState, find_path
from .common.exceptions import (
    PathFindingError,
    InvalidInputError,
    InvalidGridError,
    DegenerateEndpointsError,
    OutOfBoundsError,
    BlockedEndpointError,
    NoPathFoundError,
    ConfigurationError,
    FailureReason,
)

__all__ = [
    'Position',
    'manhattan',
    'MapData',
    'Terrain',
    'AStarPathFinder',
    'FindResult',
    'SearchState',
    'find_path',
    'PathFindingError',
    'InvalidInputError',
    'InvalidGridError',
    'DegenerateEndpointsError',
    'OutOfBoundsError',
    'BlockedEndpointError',
    'NoPathFoundError',
    'ConfigurationError',
    'FailureReason',
]
