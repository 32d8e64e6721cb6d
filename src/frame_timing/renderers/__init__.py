"""渲染后端集合与工厂函数。"""

from __future__ import annotations

import logging

from frame_timing.renderers.base import BaseRenderer
from frame_timing.renderers.console_renderer import ConsoleRenderer
from frame_timing.window_prefs import WindowPreferences

logger = logging.getLogger(__name__)

SUPPORTED_RENDERER_BACKENDS = ("auto", "opencv", "console")


def create_renderer(
    backend: str = "auto",
    *,
    title: str = "Timing Test",
    prefs: WindowPreferences | None = None,
) -> BaseRenderer:
    """按 backend 创建渲染端：auto / opencv / console。"""
    normalized = backend.strip().lower()

    if normalized == "console":
        return ConsoleRenderer()

    if normalized in {"auto", "opencv"}:
        try:
            from frame_timing.renderers.opencv_renderer import OpenCVWindowRenderer

            return OpenCVWindowRenderer(title=title, prefs=prefs)
        except Exception as exc:
            if normalized == "opencv":
                raise RuntimeError("OpenCV 窗口初始化失败") from exc
            logger.warning("无法打开 OpenCV 窗口，改用控制台输出: %s", exc)
            return ConsoleRenderer()

    raise ValueError(f"未知 renderer backend: {backend}")


__all__ = ["BaseRenderer", "ConsoleRenderer", "SUPPORTED_RENDERER_BACKENDS", "create_renderer"]
