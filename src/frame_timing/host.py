"""无界面宿主循环：调度 → 渲染 → 节拍。"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from frame_timing.frame_clock import FrameClock
from frame_timing.renderers.base import BaseRenderer
from frame_timing.scheduler import FixedStepScheduler

logger = logging.getLogger(__name__)


@dataclass
class TimingHost:
    scheduler: FixedStepScheduler
    renderer: BaseRenderer
    clock: FrameClock

    def run(self, max_frames: Optional[int] = None) -> int:
        """持续运行直到渲染端请求关闭或达到帧数上限，返回已渲染帧数。"""
        logger.info(
            "启动计时循环: ups=%.0f, fps=%.0f, renderer=%s",
            1.0 / self.scheduler.fixed_time_step,
            self.clock.fps,
            type(self.renderer).__name__,
        )
        frames = 0
        try:
            while not self.renderer.should_close:
                self.scheduler.step_frame()
                self.scheduler.render(self.renderer)

                frames += 1
                if max_frames is not None and frames >= max_frames:
                    break

                self.clock.tick()
        finally:
            self.renderer.close()
        logger.info(
            "计时循环结束: frames=%d, updates=%d", frames, self.scheduler.updates
        )
        return frames
