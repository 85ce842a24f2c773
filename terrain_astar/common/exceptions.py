#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义寻路模块的专用异常
"""

from enum import Enum


class FailureReason(Enum):
    """寻路失败原因"""
    INVALID_GRID = "invalid_grid"
    DEGENERATE_ENDPOINTS = "degenerate_endpoints"
    OUT_OF_BOUNDS = "out_of_bounds"
    BLOCKED = "blocked"
    NO_PATH_FOUND = "no_path_found"


class PathFindingError(Exception):
    """寻路模块基础异常类"""
    pass


class InvalidInputError(PathFindingError):
    """输入无效异常（搜索开始前检测）"""
    reason: FailureReason

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidGridError(InvalidInputError):
    """地图高度超过索引步长"""
    reason = FailureReason.INVALID_GRID


class DegenerateEndpointsError(InvalidInputError):
    """起点与终点相同"""
    reason = FailureReason.DEGENERATE_ENDPOINTS


class OutOfBoundsError(InvalidInputError):
    """起点或终点不在地图上"""
    reason = FailureReason.OUT_OF_BOUNDS


class BlockedEndpointError(InvalidInputError):
    """起点或终点不可通行"""
    reason = FailureReason.BLOCKED


class NoPathFoundError(PathFindingError):
    """开放列表耗尽仍未到达终点"""
    reason = FailureReason.NO_PATH_FOUND


class ConfigurationError(PathFindingError):
    """配置错误异常"""
    pass
