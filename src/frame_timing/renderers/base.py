"""渲染端抽象。"""

from __future__ import annotations

from abc import ABC, abstractmethod

from frame_timing.simulation import TimingSnapshot


class BaseRenderer(ABC):
    @abstractmethod
    def render(self, snapshot: TimingSnapshot) -> None:
        """绘制一帧；快照只读。"""

    @property
    def should_close(self) -> bool:
        """渲染端是否请求结束循环（默认从不）。"""
        return False

    def close(self) -> None:
        """释放资源（默认空实现）。"""
