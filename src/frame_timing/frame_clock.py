"""渲染节拍时钟。"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class FrameClock:
    """以固定 FPS 控制渲染循环节奏。"""

    fps: float = 60.0
    time_source: Callable[[], float] = field(default=time.monotonic, repr=False)
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError("fps 必须大于 0")
        self._interval = 1.0 / self.fps
        self._next_tick = self.time_source()

    @property
    def interval(self) -> float:
        return self._interval

    def tick(self) -> None:
        """等待直到下一帧时间点；落后时不累积欠账。"""
        now = self.time_source()
        if now < self._next_tick:
            self.sleep(self._next_tick - now)
        self._next_tick = max(self._next_tick + self._interval, self.time_source())
