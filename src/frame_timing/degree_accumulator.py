"""参考指针的角度累加器：按真实时间每 DEGREE_PERIOD 秒前进 1 度。"""

from __future__ import annotations

from dataclasses import dataclass

DEGREE_PERIOD = 0.0027778
FULL_TURN_DEGREES = 360.0
# 浮点残差容忍度：预算落在 0 附近即视为耗尽
CARRY_TOLERANCE = 1e-9


@dataclass
class DegreeAccumulator:
    """把固定步长累计成整度前进，与更新频率无关。"""

    angle_degrees: float = 0.0
    degree_budget: float = DEGREE_PERIOD

    def advance(self, fixed_step: float) -> int:
        """消耗一个固定步长，返回本次前进的度数（可能为 0 或多度）。"""
        self.degree_budget -= fixed_step
        advanced = 0
        while self.degree_budget < CARRY_TOLERANCE:
            self.degree_budget += DEGREE_PERIOD
            self.angle_degrees += 1.0
            if self.angle_degrees >= FULL_TURN_DEGREES:
                self.angle_degrees = 0.0
            advanced += 1
        return advanced
