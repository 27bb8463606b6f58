"""
Core data structures for schedule generation.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import List

from yieldhelpers.conventions.types import Period


@dataclass
class SchedulePeriod:
    """Represents a single accrual period in a payment schedule."""

    accrual_start: date
    accrual_end: date
    payment_date: date
    is_stub: bool = False

    @property
    def accrual_days(self) -> int:
        """Number of calendar days in accrual period."""
        return (self.accrual_end - self.accrual_start).days


@dataclass
class Schedule:
    """Adjusted schedule dates plus the periods they delimit."""

    dates: List[date]
    tenor: Period
    periods: List[SchedulePeriod] = field(default_factory=list)

    @property
    def start_date(self) -> date:
        return self.dates[0]

    @property
    def end_date(self) -> date:
        return self.dates[-1]

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self):
        return iter(self.periods)
