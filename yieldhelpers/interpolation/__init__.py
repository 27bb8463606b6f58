"""
Interpolation methods for discount curves.

Interpolators work on discount factors against curve time; the bootstrapped
curve picks one by name through :func:`create_interpolator`.
"""

from .base import Interpolator
from .factory import INTERPOLATORS, create_interpolator
from .linear import LinearDiscountFactorInterpolator, LogLinearDiscountInterpolator
from .step_forward import StepForwardContinuousInterpolator

__all__ = [
    'Interpolator',
    'LinearDiscountFactorInterpolator',
    'LogLinearDiscountInterpolator',
    'StepForwardContinuousInterpolator',
    'INTERPOLATORS',
    'create_interpolator',
]
