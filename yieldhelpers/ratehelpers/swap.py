"""
Vanilla interest rate swap helper.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Optional, Union

from yieldhelpers.conventions.calendars import Calendar
from yieldhelpers.conventions.daycount import DayCountConvention, resolve_day_count
from yieldhelpers.conventions.types import (
    BusinessDayAdjustment,
    DateGeneration,
    Frequency,
    Period,
    TimeUnit,
)
from yieldhelpers.indexes.ibor import IborIndex
from yieldhelpers.indexes.swap_index import SwapIndex
from yieldhelpers.instruments.swap import VanillaSwap
from yieldhelpers.market.context import EvaluationContext
from yieldhelpers.market.handles import Handle
from yieldhelpers.schedule.generator import make_schedule

from .base import (
    QuoteLike,
    RelativeDateRateHelper,
    make_quote_handle,
    quote_or_none,
    quote_value,
)
from .errors import DegenerateSwapError
from .options import DEFAULT_OPTIONS, HelperKind, HelperOptions
from .pillar import choose_pillar


class SwapRateHelper(RelativeDateRateHelper):
    """Par rate of a spot or forward starting fixed-for-IBOR swap.

    Without a ``discounting_curve`` the swap is discounted on the trial
    curve.  The IBOR leg forecasts off the index's own curve when it has one
    and off the trial curve otherwise.  Reads ``pillar``,
    ``custom_pillar_date``, ``settlement_days`` and ``forward_start`` from the
    options.
    """

    kind = HelperKind.SWAP

    def __init__(
        self,
        rate: QuoteLike,
        tenor: Union[Period, str],
        calendar: Calendar,
        fixed_frequency: Union[Frequency, Period, str],
        fixed_convention: BusinessDayAdjustment,
        fixed_day_counter: Union[str, DayCountConvention],
        ibor_index: IborIndex,
        spread: QuoteLike = None,
        discounting_curve: Optional[Handle] = None,
        *,
        context: EvaluationContext,
        options: HelperOptions = DEFAULT_OPTIONS,
    ):
        super().__init__(rate, context)
        self.tenor = Period.coerce(tenor)
        self.calendar = calendar
        self.fixed_tenor = (
            fixed_frequency.period()
            if isinstance(fixed_frequency, Frequency)
            else Period.coerce(fixed_frequency)
        )
        self.fixed_convention = fixed_convention
        self.fixed_day_counter = resolve_day_count(fixed_day_counter)
        self.options = options

        self._spread, _ = make_quote_handle(spread)
        self.register_with(self._spread)

        self._discount_handle = discounting_curve if discounting_curve is not None else Handle()
        self.register_with(self._discount_handle)

        if ibor_index.has_forwarding_curve():
            self.ibor_index = ibor_index
            self.register_with(ibor_index.forwarding_term_structure)
        else:
            self.ibor_index = ibor_index.clone(self._term_structure)

        self._swap: Optional[VanillaSwap] = None
        self.initialize_dates()

    @classmethod
    def from_swap_index(
        cls,
        rate: QuoteLike,
        swap_index: SwapIndex,
        spread: QuoteLike = None,
        discounting_curve: Optional[Handle] = None,
        *,
        context: EvaluationContext,
        options: HelperOptions = DEFAULT_OPTIONS,
    ) -> "SwapRateHelper":
        """Swap with the conventions of ``swap_index``; settles on its fixing days."""
        if options.settlement_days is None:
            options = dataclasses.replace(options, settlement_days=swap_index.settlement_days)
        return cls(
            rate,
            swap_index.tenor,
            swap_index.fixing_calendar,
            swap_index.fixed_leg_tenor,
            swap_index.fixed_leg_convention,
            swap_index.fixed_leg_day_counter,
            swap_index.ibor_index,
            spread,
            discounting_curve,
            context=context,
            options=options,
        )

    @property
    def settlement_days(self) -> int:
        if self.options.settlement_days is not None:
            return self.options.settlement_days
        return self.ibor_index.fixing_days

    def initialize_dates(self) -> None:
        calendar = self.calendar
        index = self.ibor_index
        reference_date = calendar.adjust(self.evaluation_date)
        spot_date = calendar.advance(reference_date, Period(self.settlement_days, TimeUnit.DAYS))
        start_date = calendar.advance(
            spot_date, self.options.forward_start, self.fixed_convention
        )
        end_date = calendar.advance(
            start_date, self.tenor, BusinessDayAdjustment.NO_ADJUSTMENT
        )

        fixed_schedule = make_schedule(
            start_date, end_date, self.fixed_tenor, calendar,
            convention=self.fixed_convention,
            termination_convention=self.fixed_convention,
            rule=DateGeneration.BACKWARD,
        )
        float_schedule = make_schedule(
            start_date, end_date, index.tenor, index.fixing_calendar,
            convention=index.business_day_convention,
            termination_convention=index.business_day_convention,
            rule=DateGeneration.BACKWARD,
            end_of_month=index.end_of_month,
        )
        self._swap = VanillaSwap(
            fixed_schedule, 0.0, self.fixed_day_counter, float_schedule, index
        )

        self._earliest_date = self._swap.start_date
        self._maturity_date = self._swap.maturity_date
        self._latest_relevant_date = self._swap.fixed_leg[-1].payment_date
        self._pillar_date = choose_pillar(
            self.options.pillar,
            self._earliest_date,
            self._latest_relevant_date,
            self._maturity_date,
            self.options.custom_pillar_date,
        )

    def spread(self) -> float:
        return quote_value(self._spread, "swap spread", default=0.0)

    def swap(self) -> VanillaSwap:
        return self._swap

    def forward_start(self) -> Period:
        return self.options.forward_start

    def discounting_curve(self) -> Handle:
        return self._discount_handle

    def implied_quote(self) -> float:
        trial = self._trial_curve()
        discount_curve = (
            trial if self._discount_handle.empty() else self._discount_handle.current_link()
        )
        fixed_annuity = self._swap.fixed_leg_annuity(discount_curve)
        if fixed_annuity <= 0:
            raise DegenerateSwapError(f"{self!r}: fixed leg annuity {fixed_annuity} <= 0")
        floating_npv = self._swap.floating_leg_npv(discount_curve)
        floating_annuity = self._swap.floating_leg_annuity(discount_curve)
        return (floating_npv - self.spread() * floating_annuity) / fixed_annuity

    def _exogenous_curves(self) -> Dict[str, Handle]:
        curves = {"discounting": self._discount_handle}
        if self.ibor_index.forwarding_term_structure is not self._term_structure:
            curves["forwarding"] = self.ibor_index.forwarding_term_structure
        return curves

    def _details(self) -> Dict[str, Any]:
        return {
            "tenor": self.tenor,
            "fixed_tenor": self.fixed_tenor,
            "settlement_days": self.settlement_days,
            "forward_start": self.options.forward_start,
            "spread": quote_or_none(self._spread),
            "ibor_index": self.ibor_index.name,
            "exogenous_discounting": not self._discount_handle.empty(),
        }
