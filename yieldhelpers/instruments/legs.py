"""Coupon legs and their discounting.

Legs are plain lists of coupon dataclasses with unit nominal unless stated
otherwise.  Floating coupons forecast through their index, so the same leg
reprices automatically when the index's forwarding handle is relinked.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence, Union

from yieldhelpers.conventions.daycount import DayCountConvention
from yieldhelpers.conventions.types import BusinessDayAdjustment, Period, TimeUnit
from yieldhelpers.indexes.bma import BMAIndex
from yieldhelpers.indexes.ibor import IborIndex
from yieldhelpers.schedule.core import Schedule


@dataclass
class FixedRateCoupon:
    """Fixed coupon paying ``rate * accrual_fraction * nominal``."""

    accrual_start: date
    accrual_end: date
    payment_date: date
    accrual_fraction: float
    rate: float
    nominal: float = 1.0

    def amount(self) -> float:
        return self.nominal * self.rate * self.accrual_fraction


@dataclass
class IborCoupon:
    """Floating coupon forecasting its index over the accrual period."""

    accrual_start: date
    accrual_end: date
    payment_date: date
    accrual_fraction: float
    index: IborIndex
    fixing_date: date
    gearing: float = 1.0
    spread: float = 0.0
    nominal: float = 1.0

    def index_fixing(self) -> float:
        return self.index.forecast_fixing_for_period(self.accrual_start, self.accrual_end)

    def rate(self) -> float:
        return self.gearing * self.index_fixing() + self.spread

    def amount(self) -> float:
        return self.nominal * self.rate() * self.accrual_fraction


@dataclass
class AverageBMACoupon:
    """Coupon paying the day-weighted average of weekly BMA fixings."""

    accrual_start: date
    accrual_end: date
    payment_date: date
    accrual_fraction: float
    index: BMAIndex
    fixing_dates: List[date] = field(default_factory=list)
    gearing: float = 1.0
    spread: float = 0.0
    nominal: float = 1.0

    def __post_init__(self):
        if not self.fixing_dates:
            # the first fixing must have a value date on or before the accrual start
            fixing_start = self.index.fixing_calendar.advance(
                self.accrual_start,
                Period(-(self.index.fixing_days + 1), TimeUnit.DAYS),
                BusinessDayAdjustment.PRECEDING,
            )
            self.fixing_dates = self.index.fixing_schedule(fixing_start, self.accrual_end)

    def index_fixing(self) -> float:
        start, end = self.accrual_start, self.accrual_end
        d1 = start
        weighted = 0.0
        days = 0
        for current, following in zip(self.fixing_dates, self.fixing_dates[1:]):
            value_date = self.index.value_date(current)
            next_value_date = self.index.value_date(following)
            if current >= end or value_date >= end:
                break
            if following < start or next_value_date <= start:
                continue
            d2 = min(next_value_date, end)
            span = (d2 - d1).days
            weighted += self.index.forecast_fixing(current) * span
            days += span
            d1 = d2
            if d1 >= end:
                break
        if days == 0:
            raise ValueError(f"No BMA fixing covers {start} -> {end}")
        return weighted / (end - start).days

    def rate(self) -> float:
        return self.gearing * self.index_fixing() + self.spread

    def amount(self) -> float:
        return self.nominal * self.rate() * self.accrual_fraction


Coupon = Union[FixedRateCoupon, IborCoupon, AverageBMACoupon]


def fixed_leg(
    schedule: Schedule,
    rate: float,
    day_counter: DayCountConvention,
    nominal: float = 1.0,
) -> List[FixedRateCoupon]:
    return [
        FixedRateCoupon(
            accrual_start=p.accrual_start,
            accrual_end=p.accrual_end,
            payment_date=p.payment_date,
            accrual_fraction=day_counter.year_fraction(p.accrual_start, p.accrual_end),
            rate=rate,
            nominal=nominal,
        )
        for p in schedule
    ]


def ibor_leg(
    schedule: Schedule,
    index: IborIndex,
    day_counter: Optional[DayCountConvention] = None,
    gearing: float = 1.0,
    spread: float = 0.0,
    nominal: float = 1.0,
) -> List[IborCoupon]:
    """Floating leg fixing in advance; ``day_counter`` defaults to the index's."""
    dcc = day_counter or index.day_counter
    return [
        IborCoupon(
            accrual_start=p.accrual_start,
            accrual_end=p.accrual_end,
            payment_date=p.payment_date,
            accrual_fraction=dcc.year_fraction(p.accrual_start, p.accrual_end),
            index=index,
            fixing_date=index.fixing_date(p.accrual_start),
            gearing=gearing,
            spread=spread,
            nominal=nominal,
        )
        for p in schedule
    ]


def average_bma_leg(
    schedule: Schedule,
    index: BMAIndex,
    day_counter: DayCountConvention,
    gearing: float = 1.0,
    spread: float = 0.0,
    nominal: float = 1.0,
) -> List[AverageBMACoupon]:
    return [
        AverageBMACoupon(
            accrual_start=p.accrual_start,
            accrual_end=p.accrual_end,
            payment_date=p.payment_date,
            accrual_fraction=day_counter.year_fraction(p.accrual_start, p.accrual_end),
            index=index,
            gearing=gearing,
            spread=spread,
            nominal=nominal,
        )
        for p in schedule
    ]


def _alive(coupons: Sequence[Coupon], curve) -> List[Coupon]:
    """Coupons paying strictly after the curve reference date."""
    return [c for c in coupons if c.payment_date > curve.reference_date]


def leg_npv(coupons: Sequence[Coupon], discount_curve) -> float:
    """Present value of the coupon amounts."""
    return math.fsum(
        c.amount() * discount_curve.discount(c.payment_date)
        for c in _alive(coupons, discount_curve)
    )


def leg_annuity(coupons: Sequence[Coupon], discount_curve) -> float:
    """Sum of ``nominal * accrual_fraction * DF(payment)``."""
    return math.fsum(
        c.nominal * c.accrual_fraction * discount_curve.discount(c.payment_date)
        for c in _alive(coupons, discount_curve)
    )


def leg_start_date(coupons: Sequence[Coupon]) -> date:
    return min(c.accrual_start for c in coupons)


def leg_maturity_date(coupons: Sequence[Coupon]) -> date:
    return max(c.payment_date for c in coupons)
