"""Market conventions: periods, business-day rules, calendars and day counts."""

from .calendars import (
    NYSE,
    TARGET,
    UNITED_KINGDOM,
    UNITED_STATES,
    Calendar,
    get_calendar,
)
from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
    get_day_count_convention,
    resolve_day_count,
)
from .types import (
    ZERO_PERIOD,
    BusinessDayAdjustment,
    Compounding,
    DateGeneration,
    Frequency,
    Period,
    TimeUnit,
)

__all__ = [
    "ACT_360",
    "ACT_365F",
    "ACT_ACT",
    "THIRTY_360E",
    "THIRTY_360U",
    "DayCountConvention",
    "get_day_count_convention",
    "resolve_day_count",
    "Calendar",
    "get_calendar",
    "TARGET",
    "UNITED_STATES",
    "NYSE",
    "UNITED_KINGDOM",
    "BusinessDayAdjustment",
    "Compounding",
    "DateGeneration",
    "Frequency",
    "Period",
    "TimeUnit",
    "ZERO_PERIOD",
]
