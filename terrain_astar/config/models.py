#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路配置模型

使用Pydantic定义类型安全的配置模型。
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from ..common.constants import DEFAULT_LOG_LEVEL, LOG_LEVELS


class MapConfig(BaseModel):
    """地图配置：rows 与 npy_path 二选一"""
    rows: Optional[List[str]] = Field(None, description="地形符号行（emoji 或 ASCII）")
    npy_path: Optional[str] = Field(None, description="地形编码数组文件路径 (.npy)")

    @model_validator(mode='after')
    def validate_source(self) -> 'MapConfig':
        """验证地图来源唯一"""
        if (self.rows is None) == (self.npy_path is None):
            raise ValueError("map.rows 和 map.npy_path 必须且只能设置一个")
        return self

    @field_validator('rows')
    @classmethod
    def validate_rows(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is not None and len(v) == 0:
            raise ValueError("map.rows 不能为空")
        return v


class SearchConfig(BaseModel):
    """起点/终点配置"""
    start: Tuple[int, int] = Field(..., description="起点 (x, y)")
    end: Tuple[int, int] = Field(..., description="终点 (x, y)")

    @field_validator('start', 'end')
    @classmethod
    def validate_coord(cls, v: Tuple[int, int]) -> Tuple[int, int]:
        """验证坐标非负"""
        x, y = v
        if x < 0 or y < 0:
            raise ValueError(f"坐标必须非负: {v}")
        return v


class RenderConfig(BaseModel):
    """渲染配置"""
    enabled: bool = Field(True, description="是否输出逐步渲染")
    ascii: bool = Field(False, description="使用 ASCII 符号代替 emoji")


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field(DEFAULT_LOG_LEVEL, description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录，为空时只输出到控制台")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"未知日志级别: {v}")
        return level


class AStarConfig(BaseModel):
    """根配置"""
    map: MapConfig
    search: SearchConfig
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
