#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理寻路相关的魔法数字
"""

# =============================
# 索引相关常量
# =============================

# 行步长：Position.index = x + y * MAX_Y，地图高度必须小于该值
MAX_Y: int = 1000

# =============================
# 搜索相关常量
# =============================

# 单步移动代价（无加权地形）
STEP_COST: int = 1

# 四方向邻居，顺序为 西、北、东、南（影响同分节点的选择顺序）
DIRECTIONS_4WAY = [(-1, 0), (0, -1), (1, 0), (0, 1)]

# =============================
# 地形编码（numpy 栅格，0=可通行，非0=障碍）
# =============================

TERRAIN_CODE_FOREST: int = 0
TERRAIN_CODE_MOUNTAIN: int = 1
TERRAIN_CODE_WATER: int = 2

# =============================
# 渲染相关常量
# =============================

MARK_START: str = "🚩"
MARK_CURRENT: str = "🏃"
MARK_END: str = "🏁"

MARK_START_ASCII: str = "S"
MARK_CURRENT_ASCII: str = "@"
MARK_END_ASCII: str = "G"

FRAME_SEPARATOR: str = "=================="

# =============================
# 其他常量
# =============================

DEFAULT_CONFIG_PATH: str = "config/astar_config.yaml"
DEFAULT_LOG_LEVEL: str = "INFO"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
