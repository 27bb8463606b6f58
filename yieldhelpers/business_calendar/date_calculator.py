"""
Spot lag handling, tenor arithmetic and futures (IMM/ASX) date rules.
"""

from datetime import date, datetime, timedelta
from typing import Union

from yieldhelpers.conventions.calendars import Calendar, get_calendar
from yieldhelpers.conventions.types import BusinessDayAdjustment, Period, TimeUnit

_WEDNESDAY = 2
_FRIDAY = 4


def apply_spot_lag(
    trade_date: Union[date, datetime], spot_lag_days: int, calendar: Calendar
) -> date:
    """Apply spot lag to get settlement/value date."""
    if isinstance(trade_date, datetime):
        trade_date = trade_date.date()

    return calendar.add_business_days(trade_date, spot_lag_days)


def get_spot_date(
    trade_date: Union[date, datetime], calendar: Calendar = None, spot_lag: int = 2
) -> date:
    """Get spot date from trade date (default: 2 business days + TARGET calendar)."""
    if calendar is None:
        calendar = get_calendar("TARGET")
    return apply_spot_lag(calendar.adjust(trade_date), spot_lag, calendar)


def add_tenor(
    start_date: Union[date, datetime],
    tenor: Union[Period, str],
    calendar: Calendar = None,
    business_day_adjustment: BusinessDayAdjustment = BusinessDayAdjustment.MODIFIED_FOLLOWING,
    end_of_month_rule: bool = False,
) -> date:
    """Add a tenor using market conventions (default: TARGET + Modified Following)."""
    if calendar is None:
        calendar = get_calendar("TARGET")
    return calendar.advance(start_date, tenor, business_day_adjustment, end_of_month_rule)


def tenor_to_months(tenor: str) -> int:
    """Convert tenor string (e.g., '3M', '2Y') to number of months."""
    return Period.parse(tenor).months()


def tenor_to_days(tenor: str) -> int:
    """Convert tenor string to number of days for short tenors."""
    return Period.parse(tenor).days()


def is_overnight_tenor(tenor: Period) -> bool:
    """True for a one-day tenor (ON and TN instruments)."""
    return tenor.unit == TimeUnit.DAYS and tenor.length == 1


def _nth_weekday(year: int, month: int, weekday: int, nth: int) -> date:
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return first + timedelta(days=offset + 7 * (nth - 1))


def is_imm_date(dt: Union[date, datetime], main_cycle: bool = False) -> bool:
    """IMM dates are third Wednesdays (of Mar/Jun/Sep/Dec for the main cycle)."""
    if isinstance(dt, datetime):
        dt = dt.date()
    if main_cycle and dt.month not in (3, 6, 9, 12):
        return False
    return dt == _nth_weekday(dt.year, dt.month, _WEDNESDAY, 3)


def is_asx_date(dt: Union[date, datetime], main_cycle: bool = False) -> bool:
    """ASX dates are second Fridays (of Mar/Jun/Sep/Dec for the main cycle)."""
    if isinstance(dt, datetime):
        dt = dt.date()
    if main_cycle and dt.month not in (3, 6, 9, 12):
        return False
    return dt == _nth_weekday(dt.year, dt.month, _FRIDAY, 2)


def next_imm_date(dt: Union[date, datetime], main_cycle: bool = True) -> date:
    """First IMM date strictly after ``dt``."""
    if isinstance(dt, datetime):
        dt = dt.date()
    year, month = dt.year, dt.month
    while True:
        if not main_cycle or month in (3, 6, 9, 12):
            candidate = _nth_weekday(year, month, _WEDNESDAY, 3)
            if candidate > dt:
                return candidate
        month += 1
        if month > 12:
            month, year = 1, year + 1


def next_wednesday(dt: Union[date, datetime]) -> date:
    """First Wednesday strictly after ``dt``."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return dt + timedelta(days=(_WEDNESDAY - dt.weekday()) % 7 or 7)


def previous_wednesday(dt: Union[date, datetime]) -> date:
    """Latest Wednesday on or before ``dt``."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return dt - timedelta(days=(dt.weekday() - _WEDNESDAY) % 7)


def next_asx_date(dt: Union[date, datetime], main_cycle: bool = True) -> date:
    """First ASX date strictly after ``dt``."""
    if isinstance(dt, datetime):
        dt = dt.date()
    year, month = dt.year, dt.month
    while True:
        if not main_cycle or month in (3, 6, 9, 12):
            candidate = _nth_weekday(year, month, _FRIDAY, 2)
            if candidate > dt:
                return candidate
        month += 1
        if month > 12:
            month, year = 1, year + 1
