"""最近 delta 的定长环形缓冲 + 历史最大值。"""

from __future__ import annotations

import numpy as np

HISTORY_SIZE = 120


class DeltaHistory:
    """定长 FIFO：新样本覆盖最旧槽位，长度恒定。

    highest 是整个生命周期内的最大值，样本滚出窗口后也不会回落。
    """

    def __init__(self, capacity: int = HISTORY_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity 必须大于 0")
        self._samples = np.zeros(capacity, dtype=np.float64)
        # 下一次写入位置，同时也是最旧样本的位置
        self._head = 0
        self.highest = 0.0
        self.last = 0.0

    @property
    def capacity(self) -> int:
        return int(self._samples.shape[0])

    def __len__(self) -> int:
        return self.capacity

    def record(self, delta: float) -> None:
        """写入一个样本并淘汰最旧样本。"""
        self._samples[self._head] = delta
        self._head = (self._head + 1) % self.capacity
        self.highest = max(self.highest, delta)
        self.last = delta

    def values(self) -> np.ndarray:
        """按时间从旧到新返回只读副本。"""
        ordered = np.concatenate((self._samples[self._head :], self._samples[: self._head]))
        ordered.setflags(write=False)
        return ordered

    def window_max(self) -> float:
        """当前窗口内的最大值（与 highest 不同，会随样本滚出而回落）。"""
        return float(self._samples.max())
