"""
IBOR indexes and their date rules.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from yieldhelpers.conventions.calendars import TARGET, UNITED_KINGDOM, UNITED_STATES, Calendar
from yieldhelpers.conventions.daycount import ACT_360, DayCountConvention, resolve_day_count
from yieldhelpers.conventions.types import BusinessDayAdjustment, Period, TimeUnit
from yieldhelpers.market.handles import Handle


class IborIndex:
    """Term rate index fixed on ``fixing_days`` before its value date.

    The index is read-only apart from its forwarding curve, which is held by
    handle so that a rate helper can point a clone at its trial curve.
    """

    def __init__(
        self,
        family_name: str,
        tenor: Union[Period, str],
        fixing_days: int,
        currency: str,
        fixing_calendar: Calendar,
        convention: BusinessDayAdjustment,
        end_of_month: bool,
        day_counter: Union[str, DayCountConvention],
        forwarding_term_structure: Optional[Handle] = None,
    ):
        if fixing_days < 0:
            raise ValueError(f"Negative fixing days: {fixing_days}")
        self.family_name = family_name
        self.tenor = Period.coerce(tenor)
        self.fixing_days = fixing_days
        self.currency = currency
        self.fixing_calendar = fixing_calendar
        self.business_day_convention = convention
        self.end_of_month = end_of_month
        self.day_counter = resolve_day_count(day_counter)
        self.forwarding_term_structure = (
            forwarding_term_structure if forwarding_term_structure is not None else Handle()
        )

    @property
    def name(self) -> str:
        return f"{self.family_name}{self.tenor} {self.day_counter}"

    def has_forwarding_curve(self) -> bool:
        return not self.forwarding_term_structure.empty()

    def value_date(self, fixing_date: date) -> date:
        return self.fixing_calendar.advance(
            fixing_date, Period(self.fixing_days, TimeUnit.DAYS)
        )

    def fixing_date(self, value_date: date) -> date:
        return self.fixing_calendar.advance(
            value_date, Period(-self.fixing_days, TimeUnit.DAYS)
        )

    def maturity_date(self, value_date: date) -> date:
        return self.fixing_calendar.advance(
            value_date, self.tenor, self.business_day_convention, self.end_of_month
        )

    def is_valid_fixing_date(self, fixing_date: date) -> bool:
        return self.fixing_calendar.is_business_day(fixing_date)

    def forecast_fixing(self, fixing_date: date) -> float:
        """Forward rate for the deposit starting on the fixing's value date."""
        start = self.value_date(fixing_date)
        return self.forecast_fixing_for_period(start, self.maturity_date(start))

    def forecast_fixing_for_period(self, start: date, end: date) -> float:
        """Simple forward rate between ``start`` and ``end`` off the forwarding curve."""
        curve = self.forwarding_term_structure.current_link()
        alpha = self.day_counter.year_fraction(start, end)
        if alpha <= 0:
            raise ValueError(f"{self.name}: empty forecast period {start} -> {end}")
        return (curve.discount(start) / curve.discount(end) - 1.0) / alpha

    def clone(self, forwarding_term_structure: Handle) -> "IborIndex":
        """Same index forecasting off a different curve."""
        return IborIndex(
            self.family_name,
            self.tenor,
            self.fixing_days,
            self.currency,
            self.fixing_calendar,
            self.business_day_convention,
            self.end_of_month,
            self.day_counter,
            forwarding_term_structure,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"


def _money_market_rules(tenor: Period):
    """Convention and end-of-month flag for a money-market tenor."""
    if tenor.unit in (TimeUnit.DAYS, TimeUnit.WEEKS):
        return BusinessDayAdjustment.FOLLOWING, False
    return BusinessDayAdjustment.MODIFIED_FOLLOWING, True


def euribor(tenor: Union[Period, str], forwarding_term_structure: Optional[Handle] = None) -> IborIndex:
    """EUR Euribor: T+2 on TARGET, ACT/360."""
    tenor = Period.coerce(tenor)
    convention, eom = _money_market_rules(tenor)
    return IborIndex(
        "Euribor", tenor, 2, "EUR", TARGET, convention, eom, ACT_360,
        forwarding_term_structure,
    )


def usd_libor(tenor: Union[Period, str], forwarding_term_structure: Optional[Handle] = None) -> IborIndex:
    """USD Libor: T+2 on the joint London/New York calendar, ACT/360."""
    tenor = Period.coerce(tenor)
    convention, eom = _money_market_rules(tenor)
    return IborIndex(
        "USDLibor", tenor, 2, "USD", UNITED_KINGDOM.join(UNITED_STATES),
        convention, eom, ACT_360, forwarding_term_structure,
    )
