"""
Forward rate agreement helper.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Union

from yieldhelpers.conventions.calendars import Calendar
from yieldhelpers.conventions.daycount import DayCountConvention
from yieldhelpers.conventions.types import BusinessDayAdjustment, Period, TimeUnit
from yieldhelpers.indexes.ibor import IborIndex
from yieldhelpers.market.context import EvaluationContext

from .base import QuoteLike, RelativeDateRateHelper
from .options import DEFAULT_OPTIONS, HelperKind, HelperOptions
from .pillar import choose_pillar


def _months(value: Union[int, Period, str]) -> Period:
    if isinstance(value, int):
        return Period(value, TimeUnit.MONTHS)
    return Period.coerce(value)


class FraRateHelper(RelativeDateRateHelper):
    """FRA starting ``period_to_start`` after spot on an IBOR-style deposit.

    Reads ``pillar`` and ``custom_pillar_date`` from the options.
    """

    kind = HelperKind.FRA

    def __init__(
        self,
        rate: QuoteLike,
        period_to_start: Union[int, Period, str],
        length: Union[int, Period, str],
        fixing_days: int,
        calendar: Calendar,
        convention: BusinessDayAdjustment,
        end_of_month: bool,
        day_counter: Union[str, DayCountConvention],
        *,
        context: EvaluationContext,
        options: HelperOptions = DEFAULT_OPTIONS,
    ):
        super().__init__(rate, context)
        self.period_to_start = _months(period_to_start)
        if self.period_to_start.length < 0:
            raise ValueError(f"negative period to start: {self.period_to_start}")
        length = _months(length)
        if length.length <= 0:
            raise ValueError(f"FRA length must be positive: {length}")
        self.ibor_index = IborIndex(
            "no-fix", length, fixing_days, "", calendar, convention, end_of_month,
            day_counter, self._term_structure,
        )
        self.options = options
        self.fixing_date: Optional[date] = None
        self.initialize_dates()

    @classmethod
    def from_months(
        cls,
        rate: QuoteLike,
        months_to_start: int,
        months_to_end: int,
        fixing_days: int,
        calendar: Calendar,
        convention: BusinessDayAdjustment,
        end_of_month: bool,
        day_counter: Union[str, DayCountConvention],
        *,
        context: EvaluationContext,
        options: HelperOptions = DEFAULT_OPTIONS,
    ) -> "FraRateHelper":
        """``months_to_start x months_to_end`` FRA, e.g. 3x6."""
        if months_to_end <= months_to_start:
            raise ValueError(
                f"months to end ({months_to_end}) must be greater than "
                f"months to start ({months_to_start})"
            )
        return cls(
            rate, months_to_start, months_to_end - months_to_start, fixing_days,
            calendar, convention, end_of_month, day_counter,
            context=context, options=options,
        )

    @classmethod
    def from_ibor_index(
        cls,
        rate: QuoteLike,
        period_to_start: Union[int, Period, str],
        ibor_index: IborIndex,
        *,
        context: EvaluationContext,
        options: HelperOptions = DEFAULT_OPTIONS,
    ) -> "FraRateHelper":
        """FRA on ``ibor_index``; an integer ``period_to_start`` counts months."""
        return cls(
            rate,
            period_to_start,
            ibor_index.tenor,
            ibor_index.fixing_days,
            ibor_index.fixing_calendar,
            ibor_index.business_day_convention,
            ibor_index.end_of_month,
            ibor_index.day_counter,
            context=context,
            options=options,
        )

    def initialize_dates(self) -> None:
        index = self.ibor_index
        calendar = index.fixing_calendar
        reference_date = calendar.adjust(self.evaluation_date)
        spot_date = calendar.advance(reference_date, Period(index.fixing_days, TimeUnit.DAYS))
        self._earliest_date = calendar.advance(
            spot_date, self.period_to_start, index.business_day_convention, index.end_of_month
        )
        self._maturity_date = index.maturity_date(self._earliest_date)
        self.fixing_date = index.fixing_date(self._earliest_date)
        self._latest_relevant_date = self._maturity_date
        self._pillar_date = choose_pillar(
            self.options.pillar,
            self._earliest_date,
            self._latest_relevant_date,
            self._maturity_date,
            self.options.custom_pillar_date,
        )

    def implied_quote(self) -> float:
        self._trial_curve()
        return self.ibor_index.forecast_fixing_for_period(
            self._earliest_date, self._maturity_date
        )

    def _details(self) -> Dict[str, Any]:
        return {
            "period_to_start": self.period_to_start,
            "length": self.ibor_index.tenor,
            "fixing_date": self.fixing_date,
            "pillar": self.options.pillar,
        }
