"""
Step forward interpolation methods
"""
import math
from typing import List

from .base import Interpolator


class StepForwardContinuousInterpolator(Interpolator):
    """Step Forward (continuous) interpolation

    Forward rates are piecewise constant (step function) between pillar points,
    each segment carrying the forward of the pillar on its right.  Beyond the
    last pillar the final forward is held constant.
    """

    def __init__(self, pillars: List[float], discount_factors: List[float]):
        super().__init__(pillars, discount_factors)

        self.forward_rates = [
            math.log(self.values[i] / self.values[i + 1])
            / (self.pillars[i + 1] - self.pillars[i])
            for i in range(len(self.pillars) - 1)
        ]

    def interpolate(self, t: float) -> float:
        """Interpolate discount factor at time t using step forward rates."""
        if t <= self.pillars[0]:
            # flat forward back to the first pillar
            return float(self.values[0] * math.exp(self.forward_rates[0] * (self.pillars[0] - t)))

        i = self._segment(t)
        return float(self.values[i] * math.exp(-self.forward_rates[i] * (t - self.pillars[i])))
