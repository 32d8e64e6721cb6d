"""桌面 GUI 入口（无需命令行参数）。"""

from __future__ import annotations

from frame_timing.cli import setup_logging
from frame_timing.gui.app import run_timing_overlay
from frame_timing.loop_settings import read_render_fps, read_updates_per_second


def main() -> None:
    setup_logging("INFO")
    run_timing_overlay(
        prefs_path="config/window_prefs.yaml",
        updates_per_second=float(read_updates_per_second()),
        fps=float(read_render_fps()),
    )


if __name__ == "__main__":
    main()
