"""
Swaps priced by discounting their legs on a single curve.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from yieldhelpers.conventions.daycount import DayCountConvention
from yieldhelpers.indexes.bma import BMAIndex
from yieldhelpers.indexes.ibor import IborIndex
from yieldhelpers.schedule.core import Schedule

from .legs import (
    AverageBMACoupon,
    FixedRateCoupon,
    IborCoupon,
    average_bma_leg,
    fixed_leg,
    ibor_leg,
    leg_annuity,
    leg_maturity_date,
    leg_npv,
    leg_start_date,
)


class VanillaSwap:
    """Fixed-for-IBOR swap, unit nominal by default."""

    def __init__(
        self,
        fixed_schedule: Schedule,
        fixed_rate: float,
        fixed_day_counter: DayCountConvention,
        float_schedule: Schedule,
        ibor_index: IborIndex,
        spread: float = 0.0,
        float_day_counter: Optional[DayCountConvention] = None,
        nominal: float = 1.0,
    ):
        self.fixed_schedule = fixed_schedule
        self.float_schedule = float_schedule
        self.fixed_rate = fixed_rate
        self.spread = spread
        self.ibor_index = ibor_index
        self.fixed_leg: List[FixedRateCoupon] = fixed_leg(
            fixed_schedule, fixed_rate, fixed_day_counter, nominal
        )
        self.floating_leg: List[IborCoupon] = ibor_leg(
            float_schedule, ibor_index, float_day_counter, spread=spread, nominal=nominal
        )

    @property
    def start_date(self) -> date:
        return min(leg_start_date(self.fixed_leg), leg_start_date(self.floating_leg))

    @property
    def maturity_date(self) -> date:
        return max(leg_maturity_date(self.fixed_leg), leg_maturity_date(self.floating_leg))

    def fixed_leg_npv(self, discount_curve) -> float:
        return leg_npv(self.fixed_leg, discount_curve)

    def floating_leg_npv(self, discount_curve) -> float:
        return leg_npv(self.floating_leg, discount_curve)

    def fixed_leg_annuity(self, discount_curve) -> float:
        return leg_annuity(self.fixed_leg, discount_curve)

    def floating_leg_annuity(self, discount_curve) -> float:
        return leg_annuity(self.floating_leg, discount_curve)

    def fair_rate(self, discount_curve) -> float:
        annuity = self.fixed_leg_annuity(discount_curve)
        if annuity <= 0:
            raise ZeroDivisionError("fixed leg annuity is not positive")
        return self.floating_leg_npv(discount_curve) / annuity


class FloatFloatSwap:
    """Two IBOR legs on different indexes (tenor basis swap)."""

    def __init__(
        self,
        schedule1: Schedule,
        index1: IborIndex,
        schedule2: Schedule,
        index2: IborIndex,
        day_counter1: Optional[DayCountConvention] = None,
        day_counter2: Optional[DayCountConvention] = None,
        spread1: float = 0.0,
        spread2: float = 0.0,
        nominal: float = 1.0,
    ):
        self.schedules = (schedule1, schedule2)
        self.indexes = (index1, index2)
        self.spreads = (spread1, spread2)
        self.legs = (
            ibor_leg(schedule1, index1, day_counter1, spread=spread1, nominal=nominal),
            ibor_leg(schedule2, index2, day_counter2, spread=spread2, nominal=nominal),
        )

    @property
    def start_date(self) -> date:
        return min(leg_start_date(leg) for leg in self.legs)

    @property
    def maturity_date(self) -> date:
        return max(leg_maturity_date(leg) for leg in self.legs)

    def leg_npv(self, leg: int, discount_curve) -> float:
        return leg_npv(self._leg(leg), discount_curve)

    def leg_annuity(self, leg: int, discount_curve) -> float:
        return leg_annuity(self._leg(leg), discount_curve)

    def _leg(self, leg: int) -> List[IborCoupon]:
        if leg not in (1, 2):
            raise ValueError(f"leg must be 1 or 2, got {leg}")
        return self.legs[leg - 1]


class BMASwap:
    """IBOR leg (scaled by ``libor_fraction``) against an averaged BMA leg."""

    def __init__(
        self,
        libor_schedule: Schedule,
        libor_fraction: float,
        libor_spread: float,
        libor_index: IborIndex,
        libor_day_counter: DayCountConvention,
        bma_schedule: Schedule,
        bma_index: BMAIndex,
        bma_day_counter: DayCountConvention,
        nominal: float = 1.0,
    ):
        self.libor_fraction = libor_fraction
        self.libor_spread = libor_spread
        self.libor_leg: List[IborCoupon] = ibor_leg(
            libor_schedule, libor_index, libor_day_counter,
            gearing=libor_fraction, spread=libor_spread, nominal=nominal,
        )
        self.bma_leg: List[AverageBMACoupon] = average_bma_leg(
            bma_schedule, bma_index, bma_day_counter, nominal=nominal
        )

    @property
    def start_date(self) -> date:
        return min(leg_start_date(self.libor_leg), leg_start_date(self.bma_leg))

    @property
    def maturity_date(self) -> date:
        return max(leg_maturity_date(self.libor_leg), leg_maturity_date(self.bma_leg))

    def libor_leg_npv(self, discount_curve) -> float:
        return leg_npv(self.libor_leg, discount_curve)

    def bma_leg_npv(self, discount_curve) -> float:
        return leg_npv(self.bma_leg, discount_curve)

    def fair_libor_fraction(self, discount_curve) -> float:
        """Fraction of the IBOR leg whose value equals the BMA leg."""
        spread_npv = self.libor_spread * leg_annuity(self.libor_leg, discount_curve)
        pure_libor_npv = self.libor_leg_npv(discount_curve) - spread_npv
        if pure_libor_npv == 0:
            raise ZeroDivisionError("IBOR leg has no value")
        return (
            self.libor_fraction
            * (self.bma_leg_npv(discount_curve) - spread_npv)
            / pure_libor_npv
        )
