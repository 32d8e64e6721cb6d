"""固定更新步长调度器：把真实时间切成定长 tick 交给 System。"""

from __future__ import annotations

import logging
import time
from typing import Callable

from frame_timing.loop_settings import DEFAULT_UPDATES_PER_SECOND
from frame_timing.renderers.base import BaseRenderer
from frame_timing.system import System, TickTiming

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPDATES_PER_FRAME = 8


class FixedStepScheduler:
    """每帧测量 delta，累计后按固定步长驱动 update，随后可渲染一次。"""

    def __init__(
        self,
        system: System,
        updates_per_second: float = DEFAULT_UPDATES_PER_SECOND,
        *,
        time_source: Callable[[], float] = time.monotonic,
        max_updates_per_frame: int = DEFAULT_MAX_UPDATES_PER_FRAME,
    ) -> None:
        if updates_per_second <= 0:
            raise ValueError("updates_per_second 必须大于 0")
        if max_updates_per_frame <= 0:
            raise ValueError("max_updates_per_frame 必须大于 0")
        self.system = system
        self.fixed_time_step = 1.0 / float(updates_per_second)
        self.max_updates_per_frame = int(max_updates_per_frame)
        self._time_source = time_source
        self.started_at = time_source()
        self._last_frame_at: float | None = None
        self.accumulated_time = 0.0
        self.delta = 0.0
        self.updates = 0
        self.renders = 0

    def step_frame(self) -> int:
        """推进一帧，返回本帧执行的 update 次数。"""
        now = self._time_source()
        if self._last_frame_at is None:
            self.delta = 0.0
        else:
            self.delta = max(0.0, now - self._last_frame_at)
        self._last_frame_at = now
        self.accumulated_time += self.delta

        ran = 0
        while self.accumulated_time >= self.fixed_time_step:
            if ran >= self.max_updates_per_frame:
                dropped = int(self.accumulated_time // self.fixed_time_step)
                logger.debug("单帧 update 达到上限 %d，丢弃积压 %d 步", ran, dropped)
                self.accumulated_time %= self.fixed_time_step
                break
            self.accumulated_time -= self.fixed_time_step
            self.updates += 1
            self.system.update(
                TickTiming(
                    fixed_time_step=self.fixed_time_step,
                    delta=self.delta,
                    updates=self.updates,
                    renders=self.renders,
                    now=now,
                    started_at=self.started_at,
                    accumulated_time=self.accumulated_time,
                )
            )
            ran += 1
        return ran

    def render(self, renderer: BaseRenderer) -> None:
        self.renders += 1
        renderer.render(self.system.snapshot())
