"""Coupon legs and swaps used by the rate helpers."""

from .legs import (
    AverageBMACoupon,
    FixedRateCoupon,
    IborCoupon,
    average_bma_leg,
    fixed_leg,
    ibor_leg,
    leg_annuity,
    leg_npv,
)
from .swap import BMASwap, FloatFloatSwap, VanillaSwap

__all__ = [
    "FixedRateCoupon",
    "IborCoupon",
    "AverageBMACoupon",
    "fixed_leg",
    "ibor_leg",
    "average_bma_leg",
    "leg_npv",
    "leg_annuity",
    "VanillaSwap",
    "FloatFloatSwap",
    "BMASwap",
]
