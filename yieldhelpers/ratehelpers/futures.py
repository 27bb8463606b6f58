"""
Interest-rate futures helper.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Union

from yieldhelpers.business_calendar.date_calculator import (
    is_asx_date,
    is_imm_date,
    next_asx_date,
    next_imm_date,
)
from yieldhelpers.conventions.calendars import Calendar
from yieldhelpers.conventions.daycount import DayCountConvention, resolve_day_count
from yieldhelpers.conventions.types import BusinessDayAdjustment, Period, TimeUnit
from yieldhelpers.indexes.ibor import IborIndex

from .base import (
    QuoteLike,
    RateHelper,
    make_quote_handle,
    quote_or_none,
    quote_value,
)
from .options import FuturesType, HelperKind


class FuturesRateHelper(RateHelper):
    """Futures price implied by the forward rate over the underlying deposit.

    The helper does not follow the evaluation date: its start date is the
    contract's IMM or ASX date.  When ``end_date`` is omitted the deposit runs
    to the third following IMM (or ASX) date.
    """

    kind = HelperKind.FUTURES

    def __init__(
        self,
        price: QuoteLike,
        start_date: date,
        end_date: Optional[date],
        day_counter: Union[str, DayCountConvention],
        convexity_adjustment: QuoteLike = 0.0,
        futures_type: FuturesType = FuturesType.IMM,
    ):
        super().__init__(price)
        self.futures_type = futures_type
        _check_start_date(start_date, futures_type)
        if end_date is None:
            end_date = _three_contracts_later(start_date, futures_type)
        elif end_date <= start_date:
            raise ValueError(
                f"end date {end_date} must be after start date {start_date}"
            )

        self.day_counter = resolve_day_count(day_counter)
        self.year_fraction = self.day_counter.year_fraction(start_date, end_date)
        self._convexity, _ = make_quote_handle(convexity_adjustment)
        self.register_with(self._convexity)

        self._earliest_date = start_date
        self._pillar_date = start_date
        self._maturity_date = end_date
        self._latest_relevant_date = end_date

    @classmethod
    def from_length_in_months(
        cls,
        price: QuoteLike,
        start_date: date,
        length_in_months: int,
        calendar: Calendar,
        convention: BusinessDayAdjustment,
        end_of_month: bool,
        day_counter: Union[str, DayCountConvention],
        convexity_adjustment: QuoteLike = 0.0,
        futures_type: FuturesType = FuturesType.IMM,
    ) -> "FuturesRateHelper":
        _check_start_date(start_date, futures_type)
        if length_in_months <= 0:
            raise ValueError(f"length in months must be positive: {length_in_months}")
        end_date = calendar.advance(
            start_date, Period(length_in_months, TimeUnit.MONTHS), convention, end_of_month
        )
        return cls(price, start_date, end_date, day_counter, convexity_adjustment, futures_type)

    @classmethod
    def from_ibor_index(
        cls,
        price: QuoteLike,
        start_date: date,
        ibor_index: IborIndex,
        convexity_adjustment: QuoteLike = 0.0,
        futures_type: FuturesType = FuturesType.IMM,
    ) -> "FuturesRateHelper":
        _check_start_date(start_date, futures_type)
        end_date = ibor_index.maturity_date(start_date)
        return cls(
            price, start_date, end_date, ibor_index.day_counter,
            convexity_adjustment, futures_type,
        )

    def convexity_adjustment(self) -> float:
        return quote_value(self._convexity, "convexity adjustment", default=0.0)

    def implied_quote(self) -> float:
        curve = self._trial_curve()
        forward = (
            curve.discount(self._earliest_date) / curve.discount(self._maturity_date) - 1.0
        ) / self.year_fraction
        return 100.0 * (1.0 - (forward - self.convexity_adjustment()))

    def _details(self) -> Dict[str, Any]:
        return {
            "futures_type": self.futures_type,
            "year_fraction": self.year_fraction,
            "convexity_adjustment": quote_or_none(self._convexity),
            "day_counter": self.day_counter,
        }


def _check_start_date(start_date: date, futures_type: FuturesType) -> None:
    if futures_type == FuturesType.IMM:
        if not is_imm_date(start_date):
            raise ValueError(f"{start_date} is not a valid IMM date")
    elif futures_type == FuturesType.ASX:
        if not is_asx_date(start_date):
            raise ValueError(f"{start_date} is not a valid ASX date")
    else:
        raise ValueError(f"Unknown futures type: {futures_type}")


def _three_contracts_later(start_date: date, futures_type: FuturesType) -> date:
    roll = next_imm_date if futures_type == FuturesType.IMM else next_asx_date
    end = start_date
    for _ in range(3):
        end = roll(end, main_cycle=False)
    return end
