"""
Swap-rate indexes: a fixed-leg convention on top of an IBOR index.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from yieldhelpers.conventions.calendars import TARGET, Calendar
from yieldhelpers.conventions.daycount import THIRTY_360E, DayCountConvention, resolve_day_count
from yieldhelpers.conventions.types import BusinessDayAdjustment, Period, TimeUnit
from yieldhelpers.market.handles import Handle
from yieldhelpers.schedule.generator import make_schedule

from .ibor import IborIndex, euribor


class SwapIndex:
    """Par swap rate index for a given tenor."""

    def __init__(
        self,
        family_name: str,
        tenor: Union[Period, str],
        settlement_days: int,
        currency: str,
        fixing_calendar: Calendar,
        fixed_leg_tenor: Union[Period, str],
        fixed_leg_convention: BusinessDayAdjustment,
        fixed_leg_day_counter: Union[str, DayCountConvention],
        ibor_index: IborIndex,
        discounting_term_structure: Optional[Handle] = None,
    ):
        self.family_name = family_name
        self.tenor = Period.coerce(tenor)
        self.settlement_days = settlement_days
        self.currency = currency
        self.fixing_calendar = fixing_calendar
        self.fixed_leg_tenor = Period.coerce(fixed_leg_tenor)
        self.fixed_leg_convention = fixed_leg_convention
        self.fixed_leg_day_counter = resolve_day_count(fixed_leg_day_counter)
        self.ibor_index = ibor_index
        self.discounting_term_structure = (
            discounting_term_structure if discounting_term_structure is not None else Handle()
        )

    @property
    def name(self) -> str:
        return f"{self.family_name}{self.tenor} {self.fixed_leg_day_counter}"

    @property
    def fixing_days(self) -> int:
        return self.settlement_days

    @property
    def forwarding_term_structure(self) -> Handle:
        return self.ibor_index.forwarding_term_structure

    def exogenous_discount(self) -> bool:
        return not self.discounting_term_structure.empty()

    def value_date(self, fixing_date: date) -> date:
        return self.fixing_calendar.advance(
            fixing_date, Period(self.settlement_days, TimeUnit.DAYS)
        )

    def maturity_date(self, value_date: date) -> date:
        return self.fixing_calendar.advance(
            value_date, self.tenor, self.fixed_leg_convention
        )

    def underlying_swap(self, fixing_date: date, fixed_rate: float = 0.0):
        """Unit-nominal payer swap starting on the value date of ``fixing_date``."""
        from yieldhelpers.instruments.swap import VanillaSwap

        start = self.value_date(fixing_date)
        end = self.fixing_calendar.advance(
            start, self.tenor, BusinessDayAdjustment.NO_ADJUSTMENT
        )
        fixed_schedule = make_schedule(
            start, end, self.fixed_leg_tenor, self.fixing_calendar,
            convention=self.fixed_leg_convention,
            termination_convention=self.fixed_leg_convention,
        )
        float_schedule = make_schedule(
            start, end, self.ibor_index.tenor, self.ibor_index.fixing_calendar,
            convention=self.ibor_index.business_day_convention,
            termination_convention=self.ibor_index.business_day_convention,
            end_of_month=self.ibor_index.end_of_month,
        )
        return VanillaSwap(
            fixed_schedule, fixed_rate, self.fixed_leg_day_counter,
            float_schedule, self.ibor_index,
        )

    def forecast_fixing(self, fixing_date: date) -> float:
        """Par rate of the underlying swap, discounted exogenously if possible."""
        swap = self.underlying_swap(fixing_date)
        handle = (
            self.discounting_term_structure
            if self.exogenous_discount()
            else self.ibor_index.forwarding_term_structure
        )
        return swap.fair_rate(handle.current_link())

    def clone(self, forwarding_term_structure: Handle) -> "SwapIndex":
        return SwapIndex(
            self.family_name, self.tenor, self.settlement_days, self.currency,
            self.fixing_calendar, self.fixed_leg_tenor, self.fixed_leg_convention,
            self.fixed_leg_day_counter, self.ibor_index.clone(forwarding_term_structure),
            self.discounting_term_structure,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"


def euribor_swap_isda_fix_a(
    tenor: Union[Period, str],
    forwarding_term_structure: Optional[Handle] = None,
    discounting_term_structure: Optional[Handle] = None,
) -> SwapIndex:
    """EUR swap rate fixed by ISDA at 11:00 CET: annual 30/360 against Euribor.

    One-year swaps float on 3M Euribor, longer ones on 6M Euribor.
    """
    tenor = Period.coerce(tenor)
    ibor_tenor = "3M" if tenor.unit in (TimeUnit.MONTHS, TimeUnit.YEARS) and tenor.months() <= 12 else "6M"
    return SwapIndex(
        "EuriborSwapIsdaFixA",
        tenor,
        2,
        "EUR",
        TARGET,
        Period(1, TimeUnit.YEARS),
        BusinessDayAdjustment.MODIFIED_FOLLOWING,
        THIRTY_360E,
        euribor(ibor_tenor, forwarding_term_structure),
        discounting_term_structure,
    )
