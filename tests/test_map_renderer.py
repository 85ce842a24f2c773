from terrain_astar.common.constants import FRAME_SEPARATOR, MARK_CURRENT, MARK_END, MARK_START
from terrain_astar.core.map_data import MapData
from terrain_astar.core.path_finder import find_path
from terrain_astar.core.position import Position
from terrain_astar.render.map_renderer import MapRenderer


def test_ascii_frame():
    m = MapData.from_strings(["..~", ".^."])
    frame = MapRenderer(ascii_mode=True).RenderFrame(m, Position(0, 0), Position(2, 1), Position(1, 0))
    assert frame == "\n".join([FRAME_SEPARATOR, "S@~", ".^G", FRAME_SEPARATOR])


def test_emoji_frame_keeps_terrain_symbols():
    m = MapData.from_strings(["🌊🌲🌲"])
    frame = MapRenderer().RenderFrame(m, Position(1, 0), Position(2, 0), Position(1, 0))
    assert frame.splitlines()[1] == "🌊" + MARK_START + MARK_END


def test_render_path_one_frame_per_step(ref_map):
    start, end = Position(1, 2), Position(6, 6)
    path = find_path(ref_map, start, end)
    frames = MapRenderer().RenderPath(ref_map, start, end, path)

    assert len(frames) == len(path)
    # 第一帧当前位置就是起点，只显示起点标记
    assert MARK_START in frames[0]
    assert MARK_CURRENT not in frames[0]
    assert MARK_END in frames[0]
    # 最后一帧到达终点，当前位置覆盖终点标记
    assert MARK_CURRENT in frames[-1]
    assert MARK_END not in frames[-1]


def test_render_path_follows_start_to_end_order():
    m = MapData.from_strings(["...."])
    start, end = Position(0, 0), Position(3, 0)
    frames = MapRenderer(ascii_mode=True).RenderPath(m, start, end, find_path(m, start, end))
    rows = [f.splitlines()[1] for f in frames]
    assert rows == ["S..G", "S@.G", "S.@G", "S..@"]
