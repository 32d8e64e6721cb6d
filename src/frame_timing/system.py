"""宿主调度器与被调度系统之间的接口。"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TickTiming:
    """一次固定更新的计时快照（时间单位均为秒）。"""

    fixed_time_step: float
    delta: float
    updates: int
    renders: int
    now: float
    started_at: float
    accumulated_time: float = 0.0


class System(ABC):
    """固定更新 + 可变渲染循环中的被调度对象。"""

    @abstractmethod
    def update(self, timing: TickTiming) -> None:
        """每个固定更新 tick 调用一次。"""

    @abstractmethod
    def snapshot(self) -> Any:
        """每次渲染调用一次，返回只读状态视图。"""
