"""OpenCV 窗口渲染后端。"""

from __future__ import annotations

from typing import Optional

import cv2
import numpy as np

from frame_timing.overlay_painter import paint_overlay
from frame_timing.renderers.base import BaseRenderer
from frame_timing.simulation import TimingSnapshot
from frame_timing.window_prefs import WindowPreferences

CLOSE_KEYS = {27, ord("q")}


class OpenCVWindowRenderer(BaseRenderer):
    """在 cv2 窗口中显示叠加层；Esc/q 或关闭窗口即请求结束。"""

    def __init__(self, title: str = "Timing Test", prefs: WindowPreferences | None = None) -> None:
        self.title = title
        self._canvas: Optional[np.ndarray] = None
        self._closed = False
        self._destroyed = False
        # 最近一次观测到的窗口位置，供退出时写回偏好
        self.last_position: tuple[int, int] | None = None
        cv2.namedWindow(self.title, cv2.WINDOW_AUTOSIZE)
        if prefs is not None and prefs.has_position:
            cv2.moveWindow(self.title, prefs.x, prefs.y)

    @property
    def should_close(self) -> bool:
        return self._closed

    def render(self, snapshot: TimingSnapshot) -> None:
        if self._closed:
            return
        self._canvas = paint_overlay(snapshot, self._canvas)
        cv2.imshow(self.title, self._canvas)
        key = cv2.waitKey(1) & 0xFF
        if cv2.getWindowProperty(self.title, cv2.WND_PROP_VISIBLE) < 1:
            self._closed = True
            self._destroyed = True
            return
        x, y, _, _ = cv2.getWindowImageRect(self.title)
        self.last_position = (x, y)
        if key in CLOSE_KEYS:
            self._closed = True

    def close(self) -> None:
        self._closed = True
        if not self._destroyed:
            cv2.destroyWindow(self.title)
            self._destroyed = True
