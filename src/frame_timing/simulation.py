"""帧计时诊断的核心状态：角度累加 + delta 历史 + 计数镜像。"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from frame_timing.degree_accumulator import DegreeAccumulator
from frame_timing.delta_history import HISTORY_SIZE, DeltaHistory
from frame_timing.system import System, TickTiming


@dataclass(frozen=True)
class TimingSnapshot:
    """供渲染端读取的不可变状态视图。"""

    tick_count: int
    render_count: int
    elapsed_seconds: float
    highest_delta: float
    last_delta: float
    angle_degrees: float
    degree_budget: float
    delta_history: np.ndarray


class TimingSimulation(System):
    """每个固定 tick 记录 delta 并推进参考指针。"""

    def __init__(self, history_size: int = HISTORY_SIZE) -> None:
        self.history = DeltaHistory(history_size)
        self.accumulator = DegreeAccumulator()
        self.elapsed_seconds = 0.0
        self.tick_count = 0
        self.render_count = 0

    @property
    def last_delta(self) -> float:
        return self.history.last

    @property
    def highest_delta(self) -> float:
        return self.history.highest

    @property
    def angle_degrees(self) -> float:
        return self.accumulator.angle_degrees

    @property
    def degree_budget(self) -> float:
        return self.accumulator.degree_budget

    def on_update(self, timing: TickTiming) -> None:
        self.history.record(timing.delta)
        self.tick_count = timing.updates
        self.render_count = timing.renders
        self.elapsed_seconds = timing.now - timing.started_at
        self.accumulator.advance(timing.fixed_time_step)

    def update(self, timing: TickTiming) -> None:
        self.on_update(timing)

    def snapshot(self) -> TimingSnapshot:
        return TimingSnapshot(
            tick_count=self.tick_count,
            render_count=self.render_count,
            elapsed_seconds=self.elapsed_seconds,
            highest_delta=self.highest_delta,
            last_delta=self.last_delta,
            angle_degrees=self.angle_degrees,
            degree_budget=self.degree_budget,
            delta_history=self.history.values(),
        )
