"""命令行入口。"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from frame_timing.loop_settings import read_render_fps, read_updates_per_second
from frame_timing.window_prefs import SUPPORTED_RENDERERS, WindowPreferences

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="帧计时诊断叠加层")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="在 OpenCV 窗口或控制台中运行计时循环")
    _add_loop_arguments(run)
    run.add_argument(
        "--renderer",
        default=None,
        choices=sorted(SUPPORTED_RENDERERS),
        help="渲染后端；未指定时使用窗口偏好中的设置",
    )
    run.add_argument("--max-frames", type=int, default=None, help="最多渲染帧数（默认不限）")

    gui = sub.add_parser("gui", help="启动 Tk 窗口叠加层")
    _add_loop_arguments(gui)
    return parser


def _add_loop_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--ups",
        type=float,
        default=None,
        help="固定更新频率（次/秒）；默认读取 FRAME_TIMING_UPS，缺省 120",
    )
    parser.add_argument(
        "--fps",
        type=float,
        default=None,
        help="渲染帧率上限；默认读取 FRAME_TIMING_FPS，缺省 60",
    )
    parser.add_argument("--prefs", default="config/window_prefs.yaml", help="窗口偏好 YAML 路径")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="日志级别",
    )


def resolve_loop_rates(args: argparse.Namespace) -> tuple[float, float]:
    """命令行参数优先，其次环境变量，最后默认值。"""
    ups = args.ups if args.ups is not None else float(read_updates_per_second())
    fps = args.fps if args.fps is not None else float(read_render_fps())
    if ups <= 0:
        raise ValueError("--ups 必须大于 0")
    if fps <= 0:
        raise ValueError("--fps 必须大于 0")
    return ups, fps


def resolve_renderer_backend(args: argparse.Namespace, prefs: WindowPreferences) -> str:
    return args.renderer or prefs.renderer


def setup_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def run_loop(args: argparse.Namespace) -> None:
    # 按需导入，避免在仅查看 --help 时要求完整三方依赖。
    from frame_timing.frame_clock import FrameClock
    from frame_timing.host import TimingHost
    from frame_timing.renderers import create_renderer
    from frame_timing.scheduler import FixedStepScheduler
    from frame_timing.simulation import TimingSimulation
    from frame_timing.window_prefs import WindowPreferencesStore

    ups, fps = resolve_loop_rates(args)
    store = WindowPreferencesStore(args.prefs)
    prefs = store.load()
    renderer = create_renderer(resolve_renderer_backend(args, prefs), prefs=prefs)

    scheduler = FixedStepScheduler(TimingSimulation(), ups)
    host = TimingHost(scheduler, renderer, FrameClock(fps=fps))
    host.run(max_frames=args.max_frames)

    last_position = getattr(renderer, "last_position", None)
    if last_position is not None:
        x, y = last_position
        store.save(WindowPreferences(x=x, y=y, renderer=prefs.renderer))


def run_gui(args: argparse.Namespace) -> None:
    from frame_timing.gui import run_timing_overlay

    ups, fps = resolve_loop_rates(args)
    run_timing_overlay(prefs_path=args.prefs, updates_per_second=ups, fps=fps)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.command == "run":
            run_loop(args)
        elif args.command == "gui":
            run_gui(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
