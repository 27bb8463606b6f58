# Re-export schedule components
from yieldhelpers.conventions.types import BusinessDayAdjustment, DateGeneration

from .adjustments import (
    add_months,
    add_period,
    adjust_date,
    get_month_end,
    is_end_of_month,
)
from .core import Schedule, SchedulePeriod
from .generator import ScheduleGenerator, make_schedule
