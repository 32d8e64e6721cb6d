"""控制台渲染：以定期打印摘要代替窗口。"""

from __future__ import annotations

from frame_timing.renderers.base import BaseRenderer
from frame_timing.simulation import TimingSnapshot


class ConsoleRenderer(BaseRenderer):
    def __init__(self, every: int = 60) -> None:
        if every <= 0:
            raise ValueError("every 必须大于 0")
        self.every = every
        self._calls = 0

    def render(self, snapshot: TimingSnapshot) -> None:
        self._calls += 1
        if self._calls % self.every != 0:
            return
        print(format_summary(snapshot))


def format_summary(snapshot: TimingSnapshot) -> str:
    return (
        f"ticks={snapshot.tick_count} draws={snapshot.render_count} "
        f"secs={snapshot.elapsed_seconds:.2f} angle={int(snapshot.angle_degrees)} "
        f"delta={snapshot.last_delta:.4f} highest={snapshot.highest_delta:.4f}"
    )
