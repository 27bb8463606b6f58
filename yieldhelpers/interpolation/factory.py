"""
Factory function for creating discount-factor interpolators.
"""
from typing import List

from .base import Interpolator
from .linear import LinearDiscountFactorInterpolator, LogLinearDiscountInterpolator
from .step_forward import StepForwardContinuousInterpolator

INTERPOLATORS = {
    "LINEAR_DF": LinearDiscountFactorInterpolator,
    "LOGLINEAR_DF": LogLinearDiscountInterpolator,
    "STEP_FORWARD": StepForwardContinuousInterpolator,
    "STEP_FORWARD_CONTINUOUS": StepForwardContinuousInterpolator,
}


def create_interpolator(method: str,
                        pillars: List[float],
                        discount_factors: List[float]) -> Interpolator:
    """
    Create an interpolator based on method name.

    Args:
        method: Interpolation method name
        pillars: Time points
        discount_factors: Discount factors at the time points

    Returns:
        Configured interpolator
    """
    method_upper = method.upper()
    if method_upper not in INTERPOLATORS:
        raise ValueError(f"Unknown interpolation method: {method}. "
                         f"Available: {sorted(INTERPOLATORS)}")
    return INTERPOLATORS[method_upper](pillars, discount_factors)
