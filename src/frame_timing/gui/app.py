"""Tk 窗口版计时叠加层。"""

from __future__ import annotations

import logging
import tkinter as tk
from typing import Optional

import cv2
import numpy as np

from frame_timing.overlay_layout import OVERLAY_HEIGHT, OVERLAY_WIDTH
from frame_timing.overlay_painter import paint_overlay
from frame_timing.renderers.base import BaseRenderer
from frame_timing.runtime_helpers import frame_interval_ms, restore_on_screen
from frame_timing.scheduler import FixedStepScheduler
from frame_timing.simulation import TimingSimulation, TimingSnapshot
from frame_timing.window_prefs import WindowPreferences, WindowPreferencesStore

logger = logging.getLogger(__name__)


class _CanvasRenderer(BaseRenderer):
    """把叠加层画到 Tk Canvas 上。"""

    def __init__(self, canvas: tk.Canvas) -> None:
        self.canvas = canvas
        self._frame: Optional[np.ndarray] = None
        self._photo: Optional[tk.PhotoImage] = None
        self._image_id: Optional[int] = None

    def render(self, snapshot: TimingSnapshot) -> None:
        self._frame = paint_overlay(snapshot, self._frame)
        photo = _bgr_to_photoimage(self._frame)
        # 必须保留引用，否则 PhotoImage 会被回收
        self._photo = photo
        if self._image_id is None:
            self._image_id = self.canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        else:
            self.canvas.itemconfigure(self._image_id, image=photo)


class TimingOverlayApp:
    """固定更新 + Tk after() 渲染循环。"""

    def __init__(
        self,
        prefs: WindowPreferences,
        prefs_store: WindowPreferencesStore | None = None,
        updates_per_second: float = 120.0,
        fps: float = 60.0,
        title: str = "Timing Test",
    ) -> None:
        self.prefs_store = prefs_store
        self.target_fps = max(1.0, fps)

        self.root = tk.Tk()
        self.root.title(title)
        self.root.resizable(False, False)
        restored = restore_on_screen(
            prefs,
            screen_width=self.root.winfo_screenwidth(),
            screen_height=self.root.winfo_screenheight(),
            window_width=OVERLAY_WIDTH,
            window_height=OVERLAY_HEIGHT,
        )
        self.prefs = restored
        self.root.geometry(restored.to_geometry(OVERLAY_WIDTH, OVERLAY_HEIGHT))

        self.canvas = tk.Canvas(
            self.root,
            width=OVERLAY_WIDTH,
            height=OVERLAY_HEIGHT,
            highlightthickness=0,
            background="black",
        )
        self.canvas.pack()

        self.simulation = TimingSimulation()
        self.scheduler = FixedStepScheduler(self.simulation, updates_per_second)
        self.renderer = _CanvasRenderer(self.canvas)
        self._is_closing = False

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.root.bind("<Escape>", lambda _: self._on_close())

    def run(self) -> None:
        logger.info("启动 Tk 叠加层: ups=%.0f, fps=%.0f", 1.0 / self.scheduler.fixed_time_step, self.target_fps)
        self._tick_frame()
        self.root.mainloop()

    def _tick_frame(self) -> None:
        if self._is_closing:
            return
        self.scheduler.step_frame()
        self.scheduler.render(self.renderer)
        self.root.after(frame_interval_ms(self.target_fps), self._tick_frame)

    def _on_close(self) -> None:
        if self._is_closing:
            return
        self._is_closing = True
        self._persist_prefs()
        logger.info(
            "关闭 Tk 叠加层: updates=%d, renders=%d",
            self.scheduler.updates,
            self.scheduler.renders,
        )
        self.root.destroy()

    def _persist_prefs(self) -> None:
        if self.prefs_store is None:
            return
        self.prefs = WindowPreferences(
            x=self.root.winfo_x(),
            y=self.root.winfo_y(),
            renderer=self.prefs.renderer,
        )
        try:
            self.prefs_store.save(self.prefs)
        except OSError as exc:
            logger.error("保存窗口偏好失败: %s", exc)


def _bgr_to_photoimage(frame: np.ndarray) -> tk.PhotoImage:
    """将 OpenCV BGR 帧转为 Tk PhotoImage（PPM 内存格式）。"""
    rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
    h, w = rgb.shape[:2]
    header = f"P6\n{w} {h}\n255\n".encode("ascii")
    data = header + rgb.tobytes()
    return tk.PhotoImage(data=data, format="PPM")


def run_timing_overlay(
    prefs_path: str = "config/window_prefs.yaml",
    updates_per_second: float = 120.0,
    fps: float = 60.0,
) -> None:
    store = WindowPreferencesStore(prefs_path)
    app = TimingOverlayApp(
        prefs=store.load(),
        prefs_store=store,
        updates_per_second=updates_per_second,
        fps=fps,
    )
    app.run()
