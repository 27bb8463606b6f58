"""
Bond Market Association (SIFMA) municipal swap index.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, Optional

from yieldhelpers.business_calendar.date_calculator import next_wednesday, previous_wednesday
from yieldhelpers.conventions.calendars import NYSE
from yieldhelpers.conventions.daycount import ACT_ACT
from yieldhelpers.conventions.types import BusinessDayAdjustment, DateGeneration, Period, TimeUnit
from yieldhelpers.market.handles import Handle
from yieldhelpers.schedule.generator import ScheduleGenerator

from .ibor import IborIndex


class BMAIndex(IborIndex):
    """Weekly index fixed on Wednesdays on the NYSE calendar.

    A fixing is valid on a Wednesday, or on the first business day after a
    Wednesday holiday; it applies from the next business day until the value
    date of the following fixing.
    """

    def __init__(self, forwarding_term_structure: Optional[Handle] = None):
        super().__init__(
            "BMA",
            Period(1, TimeUnit.WEEKS),
            1,
            "USD",
            NYSE,
            BusinessDayAdjustment.FOLLOWING,
            False,
            ACT_ACT,
            forwarding_term_structure,
        )

    @property
    def name(self) -> str:
        return "BMA"

    def is_valid_fixing_date(self, fixing_date: date) -> bool:
        if not self.fixing_calendar.is_business_day(fixing_date):
            return False
        d = previous_wednesday(fixing_date)
        while d < fixing_date:
            if self.fixing_calendar.is_business_day(d):
                return False
            d += timedelta(days=1)
        return True

    def maturity_date(self, value_date: date) -> date:
        fixing = self.fixing_calendar.advance(value_date, Period(-1, TimeUnit.DAYS))
        following = previous_wednesday(fixing + timedelta(days=7))
        return self.fixing_calendar.advance(following, Period(1, TimeUnit.DAYS))

    def fixing_schedule(self, start: date, end: date) -> List[date]:
        """Weekly fixing dates covering ``[start, end]``."""
        first = previous_wednesday(start)
        last = next_wednesday(end)
        generator = ScheduleGenerator(
            self.fixing_calendar,
            convention=BusinessDayAdjustment.FOLLOWING,
        )
        schedule = generator.generate_schedule(
            first, last, Period(1, TimeUnit.WEEKS), DateGeneration.FORWARD
        )
        return schedule.dates

    def clone(self, forwarding_term_structure: Handle) -> "BMAIndex":
        return BMAIndex(forwarding_term_structure)
