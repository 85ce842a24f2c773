#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从YAML文件加载配置并使用Pydantic验证。
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np
import yaml
from loguru import logger
from pydantic import ValidationError

from ..common.exceptions import ConfigurationError
from ..core.map_data import MapData
from .models import AStarConfig, MapConfig


def load_config(config_path: Union[str, Path], base_dir: Optional[Path] = None) -> AStarConfig:
    """
    从YAML文件加载配置

    Args:
        config_path: 配置文件路径
        base_dir: 用于解析相对路径的目录，默认为配置文件所在目录

    Returns:
        验证后的AStarConfig对象

    Raises:
        FileNotFoundError: 配置文件不存在
        yaml.YAMLError: YAML格式错误
        ValueError: 配置文件为空
        ValidationError: 配置验证失败
    """
    config_path = Path(config_path)
    base_dir = Path(base_dir).resolve() if base_dir is not None else config_path.resolve().parent

    if not config_path.exists():
        error_msg = f"配置文件不存在: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"YAML格式错误: {e}")
        raise

    if raw_config is None:
        error_msg = f"配置文件为空: {config_path}"
        logger.error(error_msg)
        raise ValueError(error_msg)

    if isinstance(raw_config, dict):
        _apply_relative_paths(raw_config, base_dir)

    try:
        config = AStarConfig.model_validate(raw_config)
    except ValidationError as e:
        logger.error(f"配置验证失败: {config_path}")
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise

    logger.info(f"配置加载成功: {config_path}")
    return config


def build_map(map_config: MapConfig) -> MapData:
    """
    根据地图配置构建 MapData

    Raises:
        ConfigurationError: 地图文件不存在或内容无效
    """
    if map_config.rows is not None:
        map_data = MapData.from_strings(map_config.rows)
    else:
        npy_path = Path(map_config.npy_path)
        if not npy_path.exists():
            raise ConfigurationError(f"地图文件不存在: {npy_path}")
        try:
            array = np.load(npy_path, allow_pickle=False)
        except ValueError as e:
            raise ConfigurationError(f"无法读取地图文件: {npy_path}: {e}") from e
        map_data = MapData.from_array(array)

    logger.debug(f"地图构建完成: {map_data!r}")
    if map_data.is_rectangular:
        obstacles = map_data.to_obstacle_grid()
        logger.debug(f"障碍格数: {int(obstacles.sum())}/{obstacles.size}")
    return map_data


def _resolve_path(value: Optional[str], base_dir: Path) -> Optional[str]:
    """解析相对路径为绝对路径"""
    if value is None:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path.resolve())


def _apply_relative_paths(raw_config: Dict[str, Any], base_dir: Path) -> None:
    """将配置中的相对路径字段转换为绝对路径"""
    map_cfg = raw_config.get('map')
    if isinstance(map_cfg, dict) and map_cfg.get('npy_path'):
        map_cfg['npy_path'] = _resolve_path(map_cfg['npy_path'], base_dir)

    logging_cfg = raw_config.get('logging')
    if isinstance(logging_cfg, dict) and logging_cfg.get('log_dir'):
        logging_cfg['log_dir'] = _resolve_path(logging_cfg['log_dir'], base_dir)
