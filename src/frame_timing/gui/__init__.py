"""GUI 模块。"""

from __future__ import annotations

from typing import Any


def run_timing_overlay(*args: Any, **kwargs: Any) -> None:
    from frame_timing.gui.app import run_timing_overlay as _run_timing_overlay

    _run_timing_overlay(*args, **kwargs)

__all__ = ["run_timing_overlay"]
