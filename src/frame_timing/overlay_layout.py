"""叠加层布局纯函数：便于单测覆盖，不依赖 OpenCV。"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from frame_timing.simulation import TimingSnapshot

OVERLAY_WIDTH = 240
OVERLAY_HEIGHT = 240
GRAPH_HEIGHT = 60
DIAL_RADIUS = 50
# 文字与图表、表盘之间的留白（像素）
LABEL_MARGIN = 4

Point = tuple[int, int]


@dataclass(frozen=True)
class Label:
    """一段文字及其锚点；anchor 形如 "left_top" / "right_bottom"。"""

    text: str
    x: int
    y: int
    anchor: str


def dial_center(width: int = OVERLAY_WIDTH, height: int = OVERLAY_HEIGHT) -> Point:
    return (width // 2, height // 2 - 40)


def needle_endpoint(center: Point, radius: int, degrees: float) -> Point:
    """0° 指向正上方，屏幕坐标系下顺时针旋转。"""
    rad = math.radians(degrees)
    cx, cy = center
    return (cx + int(round(radius * math.sin(rad))), cy - int(round(radius * math.cos(rad))))


def graph_points(
    history: Sequence[float],
    highest: float,
    width: int = OVERLAY_WIDTH,
    height: int = OVERLAY_HEIGHT,
    graph_height: int = GRAPH_HEIGHT,
) -> np.ndarray:
    """把 delta 历史映射为折线点 (N, 2)，纵向按历史最大值归一化。

    highest 为 0 时（尚无样本）返回贴底的水平线，避免除零。
    """
    values = np.asarray(history, dtype=np.float64)
    if values.size == 0:
        return np.zeros((0, 2), dtype=np.int32)
    step = max(1, width // values.size)
    xs = np.arange(values.size, dtype=np.int32) * step
    if highest > 0:
        ratios = np.clip(values / highest, 0.0, 1.0)
    else:
        ratios = np.zeros_like(values)
    # 基线取最后一行像素，保证空曲线也可见
    ys = (height - 1) - (ratios * graph_height).astype(np.int32)
    return np.stack((xs, ys), axis=1).astype(np.int32)


def overlay_labels(
    snapshot: TimingSnapshot,
    width: int = OVERLAY_WIDTH,
    height: int = OVERLAY_HEIGHT,
    graph_height: int = GRAPH_HEIGHT,
) -> list[Label]:
    graph_top = height - graph_height
    cx, cy = dial_center(width, height)
    info_x = cx + DIAL_RADIUS + LABEL_MARGIN
    return [
        Label(f"Ticks: {snapshot.tick_count:<6}", 1, 1, "left_top"),
        Label(f"Draws: {snapshot.render_count:<6}", 1, 10, "left_top"),
        Label(f"Secs: {snapshot.elapsed_seconds:>5.2f}", width - 1, 1, "right_top"),
        Label(f"Highest: {snapshot.highest_delta:.4f}", 1, graph_top - LABEL_MARGIN, "left_bottom"),
        Label(f"Delta: {snapshot.last_delta:.4f}", width - 1, graph_top - LABEL_MARGIN, "right_bottom"),
        Label(f"{snapshot.degree_budget:.4f}", info_x, cy - 1, "left_bottom"),
        Label(f"{int(snapshot.angle_degrees):>3} deg", info_x, cy + 1, "left_top"),
    ]
