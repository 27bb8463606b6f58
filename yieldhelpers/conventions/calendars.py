"""
QuantLib-backed calendar implementations.

Holiday rules come from QuantLib; the wrapper works on ``datetime.date`` and
the enums of :mod:`yieldhelpers.conventions.types`.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from .types import BusinessDayAdjustment, Period, TimeUnit


def to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    return ql.Date(dt.day, dt.month, dt.year)


def to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Base calendar class for QuantLib-backed business day calculations."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    @property
    def ql_calendar(self) -> ql.Calendar:
        return self._ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(to_ql_date(dt))

    def is_end_of_month(self, dt: Union[date, datetime]) -> bool:
        """True if ``dt`` is the last business day of its month."""
        return self._ql_calendar.isEndOfMonth(to_ql_date(dt))

    def end_of_month(self, dt: Union[date, datetime]) -> date:
        """Last business day of the month containing ``dt``."""
        return to_py_date(self._ql_calendar.endOfMonth(to_ql_date(dt)))

    def adjust(
        self,
        dt: Union[date, datetime],
        convention: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
    ) -> date:
        """Roll ``dt`` onto a business day using ``convention``."""
        return to_py_date(
            self._ql_calendar.adjust(to_ql_date(dt), convention.to_ql())
        )

    def advance(
        self,
        dt: Union[date, datetime],
        period: Union[Period, str],
        convention: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
        end_of_month: bool = False,
    ) -> date:
        """Advance ``dt`` by ``period``.

        Day periods count business days; week, month and year periods move
        the calendar date and then adjust it with ``convention``.
        """
        period = Period.coerce(period)
        result = self._ql_calendar.advance(
            to_ql_date(dt), period.to_ql(), convention.to_ql(), end_of_month
        )
        return to_py_date(result)

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        return self.advance(start_date, Period(days, TimeUnit.DAYS))

    def join(self, *others: "Calendar") -> "Calendar":
        """Calendar whose holidays are the union of this and ``others``."""
        calendars = (self,) + others
        joint = self._ql_calendar
        for other in others:
            joint = ql.JointCalendar(joint, other.ql_calendar)
        return Calendar("+".join(c.name for c in calendars), joint)

    def __eq__(self, other) -> bool:
        return isinstance(other, Calendar) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Calendar({self.name!r})"


# EUR money market and swaps
TARGET = Calendar("TARGET", ql.TARGET())
# USD settlement (Federal Reserve holidays)
UNITED_STATES = Calendar("USNY", ql.UnitedStates(ql.UnitedStates.Settlement))
# BMA/SIFMA fixings
NYSE = Calendar("NYSE", ql.UnitedStates(ql.UnitedStates.NYSE))
# London settlement, USD Libor fixings
UNITED_KINGDOM = Calendar("UK", ql.UnitedKingdom())

CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,
    "USNY": UNITED_STATES,
    "US": UNITED_STATES,
    "NYSE": NYSE,
    "UK": UNITED_KINGDOM,
    "GBLO": UNITED_KINGDOM,
}


def get_calendar(name: str) -> Calendar:
    """Get a calendar by name (``"TARGET"``, ``"USNY"``, ``"UK"``, ...)."""
    key = name.upper()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
