"""
Flat forward curve.
"""

from datetime import date
from typing import Union

from yieldhelpers.conventions.daycount import DayCountConvention
from yieldhelpers.conventions.types import Compounding, Frequency
from yieldhelpers.market.handles import Handle
from yieldhelpers.market.observable import Observer
from yieldhelpers.market.quotes import Quote, SimpleQuote

from .base import YieldTermStructure
from .helpers import rate_to_df


class FlatForward(YieldTermStructure, Observer):
    """Curve with a single rate for every maturity.

    The rate may be a number or a (handle to a) quote; in the latter case the
    curve follows the quote and notifies its own observers when it moves.
    """

    def __init__(
        self,
        reference_date: date,
        rate: Union[float, Quote, Handle],
        day_counter: Union[str, DayCountConvention] = "ACT/365F",
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL,
        name: str = "",
    ):
        super().__init__(reference_date, day_counter, name)
        if isinstance(rate, Handle):
            self._rate = rate
        elif isinstance(rate, Quote):
            self._rate = Handle(rate)
        else:
            self._rate = Handle(SimpleQuote(rate))
        self.register_with(self._rate)
        self.compounding = compounding
        self.frequency = frequency

    @property
    def rate(self) -> float:
        return self._rate.current_link().value()

    def _discount_impl(self, t: float) -> float:
        return rate_to_df(self.rate, t, self.compounding, self.frequency)

    def update(self) -> None:
        self.notify_observers()
