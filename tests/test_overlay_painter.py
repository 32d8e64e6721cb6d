import dataclasses

import numpy as np

from frame_timing.overlay_painter import paint_overlay
from frame_timing.simulation import TimingSimulation
from frame_timing.system import TickTiming


def _red_mask(image: np.ndarray) -> np.ndarray:
    return (image[:, :, 2] == 255) & (image[:, :, 1] == 0) & (image[:, :, 0] == 0)


def test_paint_overlay_returns_bgr_frame() -> None:
    image = paint_overlay(TimingSimulation().snapshot())
    assert image.shape == (240, 240, 3)
    assert image.dtype == np.uint8
    # 文字与表盘已绘制
    assert image.any()


def test_paint_overlay_draws_delta_graph_in_bottom_band() -> None:
    sim = TimingSimulation()
    for i, delta in enumerate([0.008, 0.02, 0.009, 0.008]):
        sim.on_update(
            TickTiming(
                fixed_time_step=1 / 120,
                delta=delta,
                updates=i + 1,
                renders=i,
                now=(i + 1) / 120,
                started_at=0.0,
            )
        )
    image = paint_overlay(sim.snapshot())
    red = _red_mask(image)
    assert red[180:].any()
    assert not red[:179].any()


def test_paint_overlay_reuses_canvas_and_clears_it() -> None:
    canvas = np.full((240, 240, 3), 200, dtype=np.uint8)
    snap = TimingSimulation().snapshot()
    image = paint_overlay(snap, canvas)
    assert image is canvas
    # 右下角远离文字/表盘/曲线，应被清成黑色
    assert (image[200:230, 200:230] == 0).all()


def test_needle_follows_angle() -> None:
    base = TimingSimulation().snapshot()
    up = paint_overlay(dataclasses.replace(base, angle_degrees=0.0))
    right = paint_overlay(dataclasses.replace(base, angle_degrees=90.0))
    # 指针中段：正上方 (x=120, y=55)，正右方 (x=145, y=80)
    assert up[55, 120].any()
    assert not right[55, 120].any()
    assert right[80, 145].any()
