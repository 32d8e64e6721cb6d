"""GUI 运行态纯函数：便于单测覆盖。"""

from __future__ import annotations

from frame_timing.window_prefs import WindowPreferences


def frame_interval_ms(fps: float) -> int:
    """把渲染帧率换算成 Tk after() 间隔，至少 1ms。"""
    return max(1, int(1000 / max(1.0, fps)))


def restore_on_screen(
    prefs: WindowPreferences,
    *,
    screen_width: int,
    screen_height: int,
    window_width: int,
    window_height: int,
) -> WindowPreferences:
    """保存的位置若已不在当前屏幕内（如拔掉副屏），丢弃位置交给系统摆放。"""
    if not prefs.has_position:
        return prefs
    assert prefs.x is not None and prefs.y is not None
    fits_x = 0 <= prefs.x <= max(0, screen_width - window_width)
    fits_y = 0 <= prefs.y <= max(0, screen_height - window_height)
    if fits_x and fits_y:
        return prefs
    return WindowPreferences(renderer=prefs.renderer)
