"""
Deposit rate helper.
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
from .options import HelperKind


class DepositRateHelper(RelativeDateRateHelper):
    """Cash deposit starting ``fixing_days`` after the evaluation date."""

    kind = HelperKind.DEPOSIT

    def __init__(
        self,
        rate: QuoteLike,
        tenor: Union[Period, str],
        fixing_days: int,
        calendar: Calendar,
        convention: BusinessDayAdjustment,
        end_of_month: bool,
        day_counter: Union[str, DayCountConvention],
        *,
        context: EvaluationContext,
    ):
        super().__init__(rate, context)
        self.ibor_index = IborIndex(
            "no-fix", tenor, fixing_days, "", calendar, convention, end_of_month,
            day_counter, self._term_structure,
        )
        self.fixing_date: Optional[date] = None
        self.initialize_dates()

    @classmethod
    def from_ibor_index(
        cls, rate: QuoteLike, ibor_index: IborIndex, *, context: EvaluationContext
    ) -> "DepositRateHelper":
        """Deposit with the conventions of ``ibor_index``, forecast off the trial curve."""
        return cls(
            rate,
            ibor_index.tenor,
            ibor_index.fixing_days,
            ibor_index.fixing_calendar,
            ibor_index.business_day_convention,
            ibor_index.end_of_month,
            ibor_index.day_counter,
            context=context,
        )

    def initialize_dates(self) -> None:
        index = self.ibor_index
        calendar = index.fixing_calendar
        reference_date = calendar.adjust(self.evaluation_date)
        self._earliest_date = calendar.advance(
            reference_date, Period(index.fixing_days, TimeUnit.DAYS)
        )
        self._maturity_date = index.maturity_date(self._earliest_date)
        self.fixing_date = index.fixing_date(self._earliest_date)
        self._latest_relevant_date = self._maturity_date
        self._pillar_date = self._maturity_date

    def implied_quote(self) -> float:
        self._trial_curve()
        return self.ibor_index.forecast_fixing_for_period(
            self._earliest_date, self._maturity_date
        )

    def _details(self) -> Dict[str, Any]:
        return {
            "tenor": self.ibor_index.tenor,
            "fixing_days": self.ibor_index.fixing_days,
            "fixing_date": self.fixing_date,
            "day_counter": self.ibor_index.day_counter,
        }
