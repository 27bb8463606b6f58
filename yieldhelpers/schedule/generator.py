"""
Main schedule generation logic.
"""

from datetime import date, datetime
from typing import List, Optional, Tuple, Union

from yieldhelpers.conventions.calendars import Calendar
from yieldhelpers.conventions.types import (
    BusinessDayAdjustment,
    DateGeneration,
    Period,
)

from .adjustments import add_period, adjust_date, is_end_of_month
from .core import Schedule, SchedulePeriod


class ScheduleGenerator:
    """Generates adjusted coupon schedules with stub handling."""

    def __init__(
        self,
        calendar: Calendar,
        convention: BusinessDayAdjustment = BusinessDayAdjustment.MODIFIED_FOLLOWING,
        termination_convention: Optional[BusinessDayAdjustment] = None,
        end_of_month: bool = False,
    ):
        self.calendar = calendar
        self.convention = convention
        self.termination_convention = (
            termination_convention if termination_convention is not None else convention
        )
        self.end_of_month = end_of_month

    def _adjust_date(self, dt: date, convention: BusinessDayAdjustment) -> date:
        """Adjust date on the generator's calendar."""
        return adjust_date(dt, convention, self.calendar)

    def generate_schedule(
        self,
        effective_date: Union[date, datetime],
        termination_date: Union[date, datetime],
        tenor: Union[Period, str],
        rule: DateGeneration = DateGeneration.BACKWARD,
    ) -> Schedule:
        """
        Generate a schedule.

        Args:
            effective_date: Start date of the leg (unadjusted)
            termination_date: End date of the leg (unadjusted)
            tenor: Coupon tenor
            rule: Roll backward from the termination date (short initial stub)
                or forward from the effective date (short final stub)

        Returns:
            Schedule with adjusted dates and the accrual periods between them
        """
        if isinstance(effective_date, datetime):
            effective_date = effective_date.date()
        if isinstance(termination_date, datetime):
            termination_date = termination_date.date()
        tenor = Period.coerce(tenor)

        if effective_date >= termination_date:
            raise ValueError(
                f"Effective date {effective_date} must be before "
                f"termination date {termination_date}"
            )
        if tenor.length <= 0:
            raise ValueError(f"Schedule tenor must be positive: {tenor}")

        if rule == DateGeneration.BACKWARD:
            unadjusted, stub_first = self._roll_backward(
                effective_date, termination_date, tenor
            )
            stub_last = False
        elif rule == DateGeneration.FORWARD:
            unadjusted, stub_last = self._roll_forward(
                effective_date, termination_date, tenor
            )
            stub_first = False
        else:
            raise ValueError(f"Unsupported date generation rule: {rule}")

        adjusted = self._adjust_all(unadjusted)

        periods = []
        for i in range(len(adjusted) - 1):
            start, end = adjusted[i], adjusted[i + 1]
            is_stub = (i == 0 and stub_first) or (i == len(adjusted) - 2 and stub_last)
            periods.append(
                SchedulePeriod(
                    accrual_start=start,
                    accrual_end=end,
                    payment_date=end,
                    is_stub=is_stub,
                )
            )

        return Schedule(dates=adjusted, tenor=tenor, periods=periods)

    def _eom_applies(self, seed: date) -> bool:
        return self.end_of_month and (
            is_end_of_month(seed) or self.calendar.is_end_of_month(seed)
        )

    def _roll_backward(
        self, effective_date: date, termination_date: date, tenor: Period
    ) -> Tuple[List[date], bool]:
        """Unadjusted dates rolled back from the termination date."""
        eom = self._eom_applies(termination_date)
        dates = [termination_date]
        periods = 1
        while True:
            candidate = add_period(termination_date, tenor * -periods, eom)
            if candidate <= effective_date:
                break
            dates.append(candidate)
            periods += 1

        stub = candidate != effective_date
        dates.append(effective_date)
        dates.reverse()
        return dates, stub

    def _roll_forward(
        self, effective_date: date, termination_date: date, tenor: Period
    ) -> Tuple[List[date], bool]:
        """Unadjusted dates rolled forward from the effective date."""
        eom = self._eom_applies(effective_date)
        dates = [effective_date]
        periods = 1
        while True:
            candidate = add_period(effective_date, tenor * periods, eom)
            if candidate >= termination_date:
                break
            dates.append(candidate)
            periods += 1

        stub = candidate != termination_date
        dates.append(termination_date)
        return dates, stub

    def _adjust_all(self, unadjusted: List[date]) -> List[date]:
        """Adjust every date; the last one with the termination convention."""
        adjusted: List[date] = []
        last = len(unadjusted) - 1
        for i, dt in enumerate(unadjusted):
            convention = self.termination_convention if i == last else self.convention
            value = self._adjust_date(dt, convention)
            # adjustment can collapse two neighbouring dates onto one
            if adjusted and value <= adjusted[-1]:
                if i == last:
                    adjusted[-1] = value
                continue
            adjusted.append(value)
        if len(adjusted) < 2:
            raise ValueError(f"Degenerate schedule generated from {unadjusted}")
        return adjusted


def make_schedule(
    effective_date: date,
    termination_date: date,
    tenor: Union[Period, str],
    calendar: Calendar,
    convention: BusinessDayAdjustment = BusinessDayAdjustment.MODIFIED_FOLLOWING,
    termination_convention: Optional[BusinessDayAdjustment] = None,
    rule: DateGeneration = DateGeneration.BACKWARD,
    end_of_month: bool = False,
) -> Schedule:
    """One-call schedule construction."""
    generator = ScheduleGenerator(
        calendar,
        convention=convention,
        termination_convention=termination_convention,
        end_of_month=end_of_month,
    )
    return generator.generate_schedule(effective_date, termination_date, tenor, rule)
