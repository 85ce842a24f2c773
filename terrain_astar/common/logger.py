#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日志工具
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from .constants import DEFAULT_LOG_LEVEL


def SetupLogger(log_dir: Optional[Union[str, Path]] = None, level: str = DEFAULT_LOG_LEVEL):
    """
    配置控制台（及可选文件）日志输出

    Args:
        log_dir: 日志目录，None 时只输出到控制台
        level: 日志级别

    Returns:
        配置好的 logger
    """
    # 移除默认 handler
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        level=level,
        colorize=True
    )

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            str(log_path / "terrain_astar_{time:YYYY-MM-DD}.log"),
            rotation="00:00",
            retention="7 days",
            level=level,
            encoding="utf-8",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
        )
        logger.info(f"日志初始化完成，保存到: {log_path}")

    return logger
