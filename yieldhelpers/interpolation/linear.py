"""
Linear interpolation methods for discount curves.
"""
import math
from typing import List

import numpy as np

from .base import Interpolator


class LinearDiscountFactorInterpolator(Interpolator):
    """Linear interpolation on discount factors.

    Fast but does not preserve forward rate smoothness; flat beyond the
    last pillar.
    """

    def interpolate(self, t: float) -> float:
        if t <= self.pillars[0]:
            return float(self.values[0])
        if t >= self.pillars[-1]:
            return float(self.values[-1])

        i = self._segment(t)
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        df1, df2 = self.values[i], self.values[i + 1]

        weight = (t - t1) / (t2 - t1)
        return float(df1 + weight * (df2 - df1))


class LogLinearDiscountInterpolator(Interpolator):
    """Linear interpolation on log discount factors.

    Equivalent to piecewise-flat instantaneous forwards between pillars;
    the last forward is extended beyond the final pillar.
    """

    def __init__(self, pillars: List[float], discount_factors: List[float]):
        super().__init__(pillars, discount_factors)
        if np.any(self.values <= 0.0):
            raise ValueError("Discount factors must be positive for log-linear interpolation")
        self.log_dfs = np.log(self.values)

    def interpolate(self, t: float) -> float:
        return math.exp(self._interpolate_log_df(t))

    def _interpolate_log_df(self, t: float) -> float:
        i = self._segment(t)
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        log_df1, log_df2 = self.log_dfs[i], self.log_dfs[i + 1]

        weight = (t - t1) / (t2 - t1)
        return float(log_df1 + weight * (log_df2 - log_df1))
