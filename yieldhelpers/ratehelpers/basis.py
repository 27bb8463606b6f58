"""
Tenor basis (float-float) swap helper.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Union

from yieldhelpers.conventions.calendars import Calendar
from yieldhelpers.conventions.daycount import DayCountConvention, resolve_day_count
from yieldhelpers.conventions.types import BusinessDayAdjustment, DateGeneration, Period
from yieldhelpers.indexes.ibor import IborIndex
from yieldhelpers.instruments.swap import FloatFloatSwap
from yieldhelpers.market.context import EvaluationContext
from yieldhelpers.market.handles import Handle
from yieldhelpers.schedule.generator import make_schedule

from .base import QuoteLike, RelativeDateRateHelper
from .errors import DegenerateSwapError
from .options import DEFAULT_OPTIONS, HelperKind, HelperOptions
from .pillar import choose_pillar


class FloatFloatSwapRateHelper(RelativeDateRateHelper):
    """Basis spread between two IBOR legs.

    ``index1`` forecasts off its own (exogenous) curve; the curve being
    bootstrapped is the one ``index2`` forecasts off.  ``basis_leg`` (1 or 2)
    names the leg that carries the quoted spread.  Day counts default to the
    indexes' own.  Reads ``pillar``, ``custom_pillar_date`` and
    ``end_of_month`` from the options.
    """

    kind = HelperKind.FLOAT_FLOAT_SWAP

    def __init__(
        self,
        basis_spread: QuoteLike,
        effective_date: date,
        tenor: Union[Period, str],
        calendar: Calendar,
        convention: BusinessDayAdjustment,
        termination_convention: BusinessDayAdjustment,
        index1: IborIndex,
        index2: IborIndex,
        basis_leg: int,
        discounting_curve: Optional[Handle] = None,
        day_count1: Union[str, DayCountConvention, None] = None,
        day_count2: Union[str, DayCountConvention, None] = None,
        *,
        context: EvaluationContext,
        options: HelperOptions = DEFAULT_OPTIONS,
    ):
        super().__init__(basis_spread, context)
        if basis_leg not in (1, 2):
            raise ValueError(f"basis leg must be 1 or 2, got {basis_leg}")
        if not index1.has_forwarding_curve():
            raise ValueError(f"{index1.name} needs its own forwarding curve")

        self.effective_date = effective_date
        self.tenor = Period.coerce(tenor)
        self.calendar = calendar
        self.convention = convention
        self.termination_convention = termination_convention
        self.basis_leg = basis_leg
        self.options = options
        self.end_of_month = bool(options.end_of_month)
        self.day_count1 = (
            resolve_day_count(day_count1) if day_count1 is not None else index1.day_counter
        )
        self.day_count2 = (
            resolve_day_count(day_count2) if day_count2 is not None else index2.day_counter
        )

        self.index1 = index1
        self.register_with(index1.forwarding_term_structure)
        self.index2 = index2.clone(self._term_structure)

        self._discount_handle = discounting_curve if discounting_curve is not None else Handle()
        self.register_with(self._discount_handle)

        self._basis_swap: Optional[FloatFloatSwap] = None
        self.initialize_dates()

    def initialize_dates(self) -> None:
        termination_date = self.calendar.advance(
            self.effective_date, self.tenor, BusinessDayAdjustment.NO_ADJUSTMENT,
            self.end_of_month,
        )
        schedules = [
            make_schedule(
                self.effective_date, termination_date, index.tenor, self.calendar,
                convention=self.convention,
                termination_convention=self.termination_convention,
                rule=DateGeneration.BACKWARD,
                end_of_month=self.end_of_month,
            )
            for index in (self.index1, self.index2)
        ]
        self._basis_swap = FloatFloatSwap(
            schedules[0], self.index1, schedules[1], self.index2,
            self.day_count1, self.day_count2,
        )

        self._earliest_date = self._basis_swap.start_date
        self._maturity_date = self._basis_swap.maturity_date
        self._latest_relevant_date = self._maturity_date
        self._pillar_date = choose_pillar(
            self.options.pillar,
            self._earliest_date,
            self._latest_relevant_date,
            self._maturity_date,
            self.options.custom_pillar_date,
        )

    def basis_swap(self) -> FloatFloatSwap:
        return self._basis_swap

    def implied_quote(self) -> float:
        trial = self._trial_curve()
        discount_curve = (
            trial if self._discount_handle.empty() else self._discount_handle.current_link()
        )
        pv1 = self._basis_swap.leg_npv(1, discount_curve)
        pv2 = self._basis_swap.leg_npv(2, discount_curve)
        annuity = self._basis_swap.leg_annuity(self.basis_leg, discount_curve)
        if annuity <= 0:
            raise DegenerateSwapError(f"{self!r}: basis leg annuity {annuity} <= 0")
        if self.basis_leg == 1:
            return (pv2 - pv1) / annuity
        return (pv1 - pv2) / annuity

    def _exogenous_curves(self) -> Dict[str, Handle]:
        return {
            "discounting": self._discount_handle,
            "index1 forwarding": self.index1.forwarding_term_structure,
        }

    def _details(self) -> Dict[str, Any]:
        return {
            "effective_date": self.effective_date,
            "tenor": self.tenor,
            "basis_leg": self.basis_leg,
            "index1": self.index1.name,
            "index2": self.index2.name,
            "exogenous_discounting": not self._discount_handle.empty(),
        }
