#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    AStarConfig,
    MapConfig,
    SearchConfig,
    RenderConfig,
    LoggingConfig,
)
from .loader import load_config, build_map

__all__ = [
    'AStarConfig',
    'MapConfig',
    'SearchConfig',
    'RenderConfig',
    'LoggingConfig',
    'load_config',
    'build_map',
]
