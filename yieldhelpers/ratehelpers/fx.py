"""
FX swap helper.

The quote is the forward point of an FX swap; the curve being bootstrapped
is the discount curve of the non-collateral currency.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from yieldhelpers.conventions.calendars import Calendar
from yieldhelpers.conventions.types import BusinessDayAdjustment, Period, TimeUnit
from yieldhelpers.market.context import EvaluationContext
from yieldhelpers.market.handles import Handle

from .base import (
    QuoteLike,
    RelativeDateRateHelper,
    make_quote_handle,
    quote_or_none,
    quote_value,
)
from .errors import NotReadyError, UnrepresentableFxTenorError
from .options import HelperKind

ONE_DAY = Period(1, TimeUnit.DAYS)


class FxSwapRateHelper(RelativeDateRateHelper):
    """Forward points ``forward - spot`` of an FX swap.

    With a ``trading_calendar`` (usually the US calendar for pairs traded
    against USD) the near date is rolled onto a day that is good on both
    calendars and the far date is advanced on the joint calendar.
    """

    kind = HelperKind.FX_SWAP

    def __init__(
        self,
        fwd_point: QuoteLike,
        spot: QuoteLike,
        tenor: Union[Period, str],
        fixing_days: int,
        calendar: Calendar,
        convention: BusinessDayAdjustment,
        end_of_month: bool,
        is_fx_base_currency_collateral_currency: bool,
        collateral_curve,
        trading_calendar: Optional[Calendar] = None,
        *,
        context: EvaluationContext,
    ):
        super().__init__(fwd_point, context)
        if fixing_days < 0:
            raise ValueError(f"negative fixing days: {fixing_days}")
        self._spot, _ = make_quote_handle(spot)
        self.register_with(self._spot)
        self.tenor = Period.coerce(tenor)
        self.fixing_days = fixing_days
        self.calendar = calendar
        self.business_day_convention = convention
        self.end_of_month = end_of_month
        self.is_fx_base_currency_collateral_currency = is_fx_base_currency_collateral_currency
        self._collateral = (
            collateral_curve if isinstance(collateral_curve, Handle) else Handle(collateral_curve)
        )
        self.register_with(self._collateral)
        self.trading_calendar = trading_calendar
        self.joint_calendar = (
            calendar.join(trading_calendar) if trading_calendar is not None else calendar
        )
        self.initialize_dates()

    @property
    def adjustment_calendar(self) -> Calendar:
        """Calendar used to roll the far date."""
        return self.joint_calendar

    @property
    def collateral_curve(self) -> Handle:
        return self._collateral

    def spot(self) -> float:
        return quote_value(self._spot, "FX spot")

    def initialize_dates(self) -> None:
        reference_date = self.calendar.adjust(self.evaluation_date)
        earliest = self.calendar.advance(
            reference_date, Period(self.fixing_days, TimeUnit.DAYS)
        )

        if self.trading_calendar is not None:
            if self.tenor == ONE_DAY:
                if self.fixing_days == 0 and not self.trading_calendar.is_business_day(
                    reference_date
                ):
                    raise UnrepresentableFxTenorError(
                        f"overnight swap from {reference_date} is not a "
                        f"{self.trading_calendar} business day"
                    )
                if self.fixing_days == 1 and not self.trading_calendar.is_business_day(
                    earliest
                ):
                    raise UnrepresentableFxTenorError(
                        f"tomorrow-next swap from {earliest} is not a "
                        f"{self.trading_calendar} business day"
                    )
            earliest = self.joint_calendar.adjust(earliest)

        self._earliest_date = earliest
        self._maturity_date = self.joint_calendar.advance(
            earliest, self.tenor, self.business_day_convention, self.end_of_month
        )
        self._pillar_date = self._maturity_date
        self._latest_relevant_date = self._maturity_date

    def implied_quote(self) -> float:
        trial = self._trial_curve()
        if self._collateral.empty():
            raise NotReadyError(f"{self!r}: collateral curve not set")
        collateral = self._collateral.current_link()

        collateral_ratio = collateral.discount(self._earliest_date) / collateral.discount(
            self._maturity_date
        )
        ratio = trial.discount(self._earliest_date) / trial.discount(self._maturity_date)
        spot = self.spot()
        if self.is_fx_base_currency_collateral_currency:
            return (ratio / collateral_ratio - 1.0) * spot
        return (collateral_ratio / ratio - 1.0) * spot

    def _exogenous_curves(self) -> Dict[str, Handle]:
        return {"collateral": self._collateral}

    def _details(self) -> Dict[str, Any]:
        return {
            "spot": quote_or_none(self._spot),
            "tenor": self.tenor,
            "fixing_days": self.fixing_days,
            "base_is_collateral": self.is_fx_base_currency_collateral_currency,
            "trading_calendar": self.trading_calendar,
        }
