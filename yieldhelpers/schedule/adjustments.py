"""
Unadjusted month arithmetic and business-day adjustment for schedules.
"""

import calendar as _calendar
from datetime import date, datetime, timedelta
from typing import Union

from yieldhelpers.conventions.calendars import Calendar
from yieldhelpers.conventions.types import BusinessDayAdjustment, Period, TimeUnit

DateLike = Union[date, datetime]


def _as_date(dt: DateLike) -> date:
    return dt.date() if isinstance(dt, datetime) else dt


def adjust_date(dt: DateLike, adjustment: BusinessDayAdjustment, calendar: Calendar) -> date:
    """Roll ``dt`` onto ``calendar`` unless the rule is NO_ADJUSTMENT."""
    dt = _as_date(dt)
    if adjustment == BusinessDayAdjustment.NO_ADJUSTMENT:
        return dt
    return calendar.adjust(dt, adjustment)


def get_month_end(year: int, month: int) -> date:
    return date(year, month, _calendar.monthrange(year, month)[1])


def is_end_of_month(dt: DateLike) -> bool:
    """Last calendar day of the month; see ``Calendar.is_end_of_month`` for business days."""
    dt = _as_date(dt)
    return dt.day == _calendar.monthrange(dt.year, dt.month)[1]


def add_months(dt: DateLike, months: int, end_of_month: bool = False) -> date:
    """Shift by whole months, clipping to the month end.

    With ``end_of_month`` a month-end start stays on month ends, so
    28 Feb 2023 + 1M is 31 Mar 2023 rather than 28 Mar 2023.
    """
    dt = _as_date(dt)
    year, month = divmod(dt.year * 12 + dt.month - 1 + months, 12)
    month += 1
    last_day = _calendar.monthrange(year, month)[1]
    if end_of_month and is_end_of_month(dt):
        return date(year, month, last_day)
    return date(year, month, min(dt.day, last_day))


def add_period(dt: DateLike, period: Period, end_of_month: bool = False) -> date:
    """Unadjusted calendar arithmetic: ``dt + period``."""
    dt = _as_date(dt)
    if period.unit in (TimeUnit.DAYS, TimeUnit.WEEKS):
        return dt + timedelta(days=period.days())
    return add_months(dt, period.months(), end_of_month)
