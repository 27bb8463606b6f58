"""
Base classes for curve interpolation methods.
"""
from abc import ABC, abstractmethod
from typing import List

import numpy as np


class Interpolator(ABC):
    """Base class for curve interpolation methods.

    Pillars are curve times in years; values are discount factors unless the
    concrete class says otherwise.
    """

    def __init__(self, pillars: List[float], values: List[float]):
        if len(pillars) != len(values):
            raise ValueError("Pillars and values must have same length")
        if len(pillars) < 2:
            raise ValueError("Need at least 2 points for interpolation")

        order = np.argsort(pillars, kind="stable")
        self.pillars = np.asarray(pillars, dtype=float)[order]
        self.values = np.asarray(values, dtype=float)[order]

        if np.any(np.diff(self.pillars) <= 0.0):
            raise ValueError("Duplicate pillar times not allowed")

    @abstractmethod
    def interpolate(self, t: float) -> float:
        """Interpolate value at time t."""

    def interpolate_many(self, times: List[float]) -> List[float]:
        """Interpolate values at multiple times."""
        return [self.interpolate(t) for t in times]

    def _segment(self, t: float) -> int:
        """Index ``i`` such that ``pillars[i] <= t < pillars[i + 1]``."""
        i = int(np.searchsorted(self.pillars, t, side="right")) - 1
        return min(max(i, 0), len(self.pillars) - 2)
