"""
Base yield term structure.
"""

import math
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Union

from yieldhelpers.conventions.daycount import DayCountConvention, resolve_day_count
from yieldhelpers.conventions.types import Compounding, Frequency
from yieldhelpers.market.observable import Observable

from .helpers import df_to_rate

DateOrTime = Union[date, datetime, float]


class YieldTermStructure(Observable, ABC):
    """Discount curve anchored at a reference date.

    Dates are converted to curve times with the curve's own day count;
    pricing code should always pass dates so that this mapping stays internal.
    """

    def __init__(
        self,
        reference_date: date,
        day_counter: Union[str, DayCountConvention] = "ACT/365F",
        name: str = "",
    ):
        super().__init__()
        if isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        self._reference_date = reference_date
        self._day_counter = resolve_day_count(day_counter)
        self.name = name

    @property
    def reference_date(self) -> date:
        return self._reference_date

    @property
    def day_counter(self) -> DayCountConvention:
        return self._day_counter

    def time_from_reference(self, dt: DateOrTime) -> float:
        """Convert a date (or pass through a time) to the curve time basis."""
        if isinstance(dt, (int, float)):
            return float(dt)
        if isinstance(dt, datetime):
            dt = dt.date()
        return self._day_counter.year_fraction(self._reference_date, dt)

    def discount(self, dt: DateOrTime) -> float:
        """Discount factor from the reference date to ``dt``."""
        return self._discount_impl(self.time_from_reference(dt))

    @abstractmethod
    def _discount_impl(self, t: float) -> float:
        """Discount factor at curve time ``t``."""

    def zero_rate(
        self,
        dt: DateOrTime,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL,
    ) -> float:
        """Zero rate to ``dt`` on the curve time basis."""
        t = self.time_from_reference(dt)
        if t <= 0:
            # instantaneous rate over the first day
            t = 1.0 / 365.0
        return df_to_rate(self._discount_impl(t), t, compounding, frequency)

    def forward_rate(
        self,
        start: Union[date, datetime],
        end: Union[date, datetime],
        day_counter: Union[str, DayCountConvention, None] = None,
    ) -> float:
        """Simply compounded forward rate between two dates."""
        dcc = self._day_counter if day_counter is None else resolve_day_count(day_counter)
        alpha = dcc.year_fraction(start, end)
        if alpha <= 0:
            raise ValueError(f"Forward period must be positive: {start} -> {end}")
        return (self.discount(start) / self.discount(end) - 1.0) / alpha

    def instantaneous_forward(self, dt: DateOrTime, dt_step: float = 1e-4) -> float:
        """Continuously compounded instantaneous forward at ``dt``."""
        t1 = max(self.time_from_reference(dt) - dt_step / 2.0, 0.0)
        t2 = t1 + dt_step
        return math.log(self._discount_impl(t1) / self._discount_impl(t2)) / dt_step

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name})"
            if self.name
            else self.__class__.__name__
        )
