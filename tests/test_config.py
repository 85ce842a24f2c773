#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载测试
"""

from pathlib import Path

import numpy as np
import pytest
import yaml
from pydantic import ValidationError

from terrain_astar.common.exceptions import ConfigurationError
from terrain_astar.config import AStarConfig, MapConfig, build_map, load_config
from terrain_astar.core.map_data import MapData, Terrain, reference_map
from terrain_astar.core.position import Position

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "astar_config.yaml"


def _write(path: Path, data) -> Path:
    path.write_text(yaml.safe_dump(data, allow_unicode=True), encoding="utf-8")
    return path


def test_repo_config_matches_reference_map():
    config = load_config(REPO_CONFIG)
    assert build_map(config.map) == reference_map()
    assert config.search.start == (1, 2)
    assert config.search.end == (6, 6)
    assert config.render.enabled
    assert config.logging.level == "INFO"


def test_defaults_for_optional_sections(tmp_path):
    path = _write(tmp_path / "cfg.yaml", {
        "map": {"rows": ["..", ".."]},
        "search": {"start": [0, 0], "end": [1, 1]},
    })
    config = load_config(path)
    assert config.render.enabled is True
    assert config.render.ascii is False
    assert config.logging.log_dir is None


def test_relative_paths_resolved_against_config_dir(tmp_path):
    np.save(tmp_path / "terrain.npy", np.array([[0, 1], [0, 0]], dtype=np.int8))
    path = _write(tmp_path / "cfg.yaml", {
        "map": {"npy_path": "terrain.npy"},
        "search": {"start": [0, 0], "end": [1, 1]},
        "logging": {"level": "debug", "log_dir": "logs"},
    })
    config = load_config(path)
    assert Path(config.map.npy_path) == (tmp_path / "terrain.npy").resolve()
    assert Path(config.logging.log_dir) == (tmp_path / "logs").resolve()
    assert config.logging.level == "DEBUG"

    m = build_map(config.map)
    assert m.rows == ((Terrain.FOREST, Terrain.MOUNTAIN), (Terrain.FOREST, Terrain.FOREST))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("map: [unclosed", encoding="utf-8")
    with pytest.raises(yaml.YAMLError):
        load_config(path)


@pytest.mark.parametrize("data", [
    {"map": {"rows": ["."]}, "search": {"start": [0, 0]}},
    {"map": {"rows": ["."], "npy_path": "x.npy"}, "search": {"start": [0, 0], "end": [0, 0]}},
    {"map": {}, "search": {"start": [0, 0], "end": [0, 0]}},
    {"map": {"rows": []}, "search": {"start": [0, 0], "end": [0, 0]}},
    {"map": {"rows": ["."]}, "search": {"start": [-1, 0], "end": [0, 0]}},
    {"map": {"rows": ["."]}, "search": {"start": [0, 0], "end": [0, 0]}, "logging": {"level": "LOUD"}},
])
def test_validation_errors(tmp_path, data):
    path = _write(tmp_path / "cfg.yaml", data)
    with pytest.raises(ValidationError):
        load_config(path)


def test_build_map_unknown_symbol():
    with pytest.raises(ConfigurationError):
        build_map(MapConfig(rows=["..x"]))


def test_build_map_missing_npy(tmp_path):
    with pytest.raises(ConfigurationError):
        build_map(MapConfig(npy_path=str(tmp_path / "missing.npy")))


def test_model_accepts_direct_construction():
    config = AStarConfig(map={"rows": ["~.."]}, search={"start": (1, 0), "end": (2, 0)})
    assert Position(*config.search.start) == Position(1, 0)
    assert isinstance(build_map(config.map), MapData)


def test_build_map_logs_obstacle_count(log_messages):
    build_map(MapConfig(rows=[".^", "~."]))
    assert any("障碍格数: 2/4" in r["message"] for r in log_messages)


def test_build_map_ragged_rows_skip_obstacle_count(log_messages):
    m = build_map(MapConfig(rows=["..", "."]))
    assert not m.is_rectangular
    assert not any("障碍格数" in r["message"] for r in log_messages)
