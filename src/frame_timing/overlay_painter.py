"""用 OpenCV 把计时快照画成 BGR 图像。"""

from __future__ import annotations

from typing import Optional

import cv2
import numpy as np

from frame_timing.overlay_layout import (
    DIAL_RADIUS,
    GRAPH_HEIGHT,
    OVERLAY_HEIGHT,
    OVERLAY_WIDTH,
    Label,
    dial_center,
    graph_points,
    needle_endpoint,
    overlay_labels,
)
from frame_timing.simulation import TimingSnapshot

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (80, 80, 80)
LIGHT_GRAY = (192, 192, 192)
RED = (0, 0, 255)

FONT = cv2.FONT_HERSHEY_PLAIN
FONT_SCALE = 0.7
FONT_THICKNESS = 1


def paint_overlay(
    snapshot: TimingSnapshot,
    canvas: Optional[np.ndarray] = None,
    width: int = OVERLAY_WIDTH,
    height: int = OVERLAY_HEIGHT,
) -> np.ndarray:
    """绘制表盘、指针、文字和 delta 折线，返回 (height, width, 3) uint8 图像。"""
    if canvas is None:
        canvas = np.zeros((height, width, 3), dtype=np.uint8)
    else:
        canvas[:] = BLACK

    for label in overlay_labels(snapshot, width, height):
        _draw_label(canvas, label)

    center = dial_center(width, height)
    cv2.circle(canvas, center, DIAL_RADIUS, DARK_GRAY, 1, cv2.LINE_AA)
    tip = needle_endpoint(center, DIAL_RADIUS, snapshot.angle_degrees)
    cv2.line(canvas, center, tip, LIGHT_GRAY, 1, cv2.LINE_AA)

    points = graph_points(snapshot.delta_history, snapshot.highest_delta, width, height, GRAPH_HEIGHT)
    if len(points) >= 2:
        cv2.polylines(canvas, [points.reshape(-1, 1, 2)], False, RED, 1)
    return canvas


def _draw_label(canvas: np.ndarray, label: Label) -> None:
    (text_w, text_h), baseline = cv2.getTextSize(label.text, FONT, FONT_SCALE, FONT_THICKNESS)
    horizontal, vertical = label.anchor.split("_")
    x = label.x - text_w if horizontal == "right" else label.x
    # putText 的原点是文字基线左端
    y = label.y + text_h if vertical == "top" else label.y - baseline
    cv2.putText(canvas, label.text, (x, y), FONT, FONT_SCALE, WHITE, FONT_THICKNESS, cv2.LINE_AA)
