import pytest
from loguru import logger

from terrain_astar.core.map_data import MapData, reference_map


@pytest.fixture
def ref_map() -> MapData:
    return reference_map()


@pytest.fixture
def wall_map() -> MapData:
    # 中间一整列山地把地图分成左右两半
    return MapData.from_strings([
        "..^..",
        "..^..",
        "..^..",
    ])


@pytest.fixture
def log_messages():
    """收集 loguru 输出，便于断言日志内容"""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
