"""
BMA (SIFMA) swap helper.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from yieldhelpers.business_calendar.date_calculator import next_wednesday
from yieldhelpers.conventions.calendars import Calendar
from yieldhelpers.conventions.daycount import DayCountConvention, resolve_day_count
from yieldhelpers.conventions.types import BusinessDayAdjustment, DateGeneration, Period, TimeUnit
from yieldhelpers.indexes.bma import BMAIndex
from yieldhelpers.indexes.ibor import IborIndex
from yieldhelpers.instruments.swap import BMASwap
from yieldhelpers.market.context import EvaluationContext
from yieldhelpers.market.handles import Handle
from yieldhelpers.schedule.adjustments import add_period
from yieldhelpers.schedule.generator import make_schedule

from .base import QuoteLike, RelativeDateRateHelper
from .options import HelperKind


class BMASwapRateHelper(RelativeDateRateHelper):
    """Fraction of IBOR that swaps flat against the BMA index.

    The BMA index is forecast off the trial curve.  The IBOR index must
    carry its own forwarding curve, which also discounts both legs.
    """

    kind = HelperKind.BMA_SWAP

    def __init__(
        self,
        libor_fraction: QuoteLike,
        tenor: Union[Period, str],
        settlement_days: int,
        calendar: Calendar,
        bma_period: Union[Period, str],
        bma_convention: BusinessDayAdjustment,
        bma_day_count: Union[str, DayCountConvention],
        bma_index: BMAIndex,
        ibor_index: IborIndex,
        *,
        context: EvaluationContext,
    ):
        super().__init__(libor_fraction, context)
        if not ibor_index.has_forwarding_curve():
            raise ValueError(f"{ibor_index.name} needs its own forwarding curve")
        self.tenor = Period.coerce(tenor)
        self.settlement_days = settlement_days
        self.calendar = calendar
        self.bma_period = Period.coerce(bma_period)
        self.bma_convention = bma_convention
        self.bma_day_count = resolve_day_count(bma_day_count)
        self.ibor_index = ibor_index
        self.register_with(ibor_index.forwarding_term_structure)
        self.bma_index = bma_index.clone(self._term_structure)

        self._swap: Optional[BMASwap] = None
        self.initialize_dates()

    def initialize_dates(self) -> None:
        joint = self.calendar.join(self.ibor_index.fixing_calendar)
        reference_date = joint.adjust(self.evaluation_date)
        self._earliest_date = self.calendar.advance(
            reference_date,
            Period(self.settlement_days, TimeUnit.DAYS),
            BusinessDayAdjustment.FOLLOWING,
        )
        maturity = add_period(self._earliest_date, self.tenor)

        bma_schedule = make_schedule(
            self._earliest_date, maturity, self.bma_period, self.bma_index.fixing_calendar,
            convention=self.bma_convention,
            termination_convention=self.bma_convention,
            rule=DateGeneration.BACKWARD,
        )
        libor_schedule = make_schedule(
            self._earliest_date, maturity, self.ibor_index.tenor, self.ibor_index.fixing_calendar,
            convention=self.ibor_index.business_day_convention,
            termination_convention=self.ibor_index.business_day_convention,
            rule=DateGeneration.BACKWARD,
            end_of_month=self.ibor_index.end_of_month,
        )
        self._swap = BMASwap(
            libor_schedule, 1.0, 0.0, self.ibor_index, self.ibor_index.day_counter,
            bma_schedule, self.bma_index, self.bma_day_count,
        )

        self._maturity_date = self._swap.maturity_date
        self._pillar_date = self._maturity_date
        # the last BMA fixing read is the one made on the Wednesday after maturity
        last_fixing = next_wednesday(self.calendar.adjust(self._maturity_date))
        self._latest_relevant_date = self.bma_index.value_date(
            self.bma_index.fixing_calendar.adjust(last_fixing)
        )

    def swap(self) -> BMASwap:
        return self._swap

    def implied_quote(self) -> float:
        self._trial_curve()
        discount_curve = self.ibor_index.forwarding_term_structure.current_link()
        return self._swap.fair_libor_fraction(discount_curve)

    def _exogenous_curves(self) -> Dict[str, Handle]:
        return {"IBOR forwarding": self.ibor_index.forwarding_term_structure}

    def _details(self) -> Dict[str, Any]:
        return {
            "tenor": self.tenor,
            "settlement_days": self.settlement_days,
            "bma_period": self.bma_period,
            "ibor_index": self.ibor_index.name,
        }
