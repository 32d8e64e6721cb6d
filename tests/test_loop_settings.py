from frame_timing.loop_settings import (
    DEFAULT_RENDER_FPS,
    DEFAULT_UPDATES_PER_SECOND,
    read_render_fps,
    read_updates_per_second,
)


def test_read_updates_per_second_returns_default_when_env_missing() -> None:
    assert read_updates_per_second({}) == DEFAULT_UPDATES_PER_SECOND == 120


def test_read_updates_per_second_accepts_value_in_valid_range() -> None:
    assert read_updates_per_second({"FRAME_TIMING_UPS": "1"}) == 1
    assert read_updates_per_second({"FRAME_TIMING_UPS": " 240 "}) == 240
    assert read_updates_per_second({"FRAME_TIMING_UPS": "1000"}) == 1000


def test_read_updates_per_second_rejects_out_of_range_or_invalid_values() -> None:
    invalid_inputs = ["0", "1001", "-5", "abc", "60.5", "", "   "]
    for raw in invalid_inputs:
        assert read_updates_per_second({"FRAME_TIMING_UPS": raw}) == DEFAULT_UPDATES_PER_SECOND


def test_read_render_fps_bounds() -> None:
    assert read_render_fps({}) == DEFAULT_RENDER_FPS
    assert read_render_fps({"FRAME_TIMING_FPS": "144"}) == 144
    assert read_render_fps({"FRAME_TIMING_FPS": "241"}) == DEFAULT_RENDER_FPS
    assert read_render_fps({"FRAME_TIMING_FPS": "fast"}) == DEFAULT_RENDER_FPS
