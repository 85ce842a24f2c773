#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行入口：读取配置，寻路并逐步打印路径
"""

import argparse
from typing import List, Optional, Tuple

from loguru import logger
from pydantic import ValidationError
import yaml

from .common.constants import DEFAULT_CONFIG_PATH, LOG_LEVELS
from .common.exceptions import ConfigurationError, InvalidInputError
from .common.logger import SetupLogger
from .config.loader import build_map, load_config
from .core.path_finder import AStarPathFinder
from .core.position import Position
from .render.map_renderer import MapRenderer

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_INVALID = 2


def _ParseCoord(text: str) -> Tuple[int, int]:
    """解析 "x,y" 形式的坐标"""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"坐标格式应为 x,y: {text}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"坐标必须是整数: {text}") from e


def BuildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terrain A* path finder")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH,
                        help=f"配置文件路径（默认 {DEFAULT_CONFIG_PATH}）")
    parser.add_argument("--start", type=_ParseCoord, default=None, help="起点 x,y（覆盖配置，负数坐标写成 --start=-1,0）")
    parser.add_argument("--end", type=_ParseCoord, default=None, help="终点 x,y（覆盖配置，负数坐标写成 --end=-1,0）")
    parser.add_argument("--no-render", action="store_true", help="不输出逐步渲染")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
                        help="日志级别（覆盖配置）")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = BuildParser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, ValidationError, yaml.YAMLError) as e:
        logger.error(f"配置加载失败: {e}")
        return EXIT_INVALID

    try:
        SetupLogger(config.logging.log_dir, args.log_level or config.logging.level)
    except OSError as e:
        logger.error(f"日志目录创建失败: {config.logging.log_dir}: {e}")
        return EXIT_INVALID

    try:
        map_data = build_map(config.map)
    except ConfigurationError as e:
        logger.error(f"地图构建失败: {e}")
        return EXIT_INVALID

    start = Position(*(args.start or config.search.start))
    end = Position(*(args.end or config.search.end))

    finder = AStarPathFinder()
    try:
        path = finder.Find(map_data, start, end)
    except InvalidInputError as e:
        logger.error(f"输入无效: {e}")
        return EXIT_INVALID

    if not path:
        print(f"没有从 {start} 到 {end} 的路径")
        return EXIT_NO_PATH

    if config.render.enabled and not args.no_render:
        renderer = MapRenderer(ascii_mode=config.render.ascii)
        for frame in renderer.RenderPath(map_data, start, end, path):
            print(frame)

    print(" -> ".join(str(p) for p in reversed(path)))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
