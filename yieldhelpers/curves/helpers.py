"""
Helper functions for curve calculations and conversions.
"""

import math
from typing import List

from yieldhelpers.conventions.types import Compounding, Frequency


def df_to_zero_rate(df: float, time: float) -> float:
    """Convert discount factor to continuously compounded zero rate."""
    if df <= 0:
        raise ValueError("Discount factor must be positive")
    if time <= 0:
        raise ValueError("Time must be positive")

    return -math.log(df) / time


def zero_rate_to_df(rate: float, time: float) -> float:
    """Convert continuously compounded zero rate to discount factor."""
    return math.exp(-rate * time)


def rate_to_df(
    rate: float,
    time: float,
    compounding: Compounding = Compounding.CONTINUOUS,
    frequency: Frequency = Frequency.ANNUAL,
) -> float:
    """Discount factor implied by ``rate`` over ``time`` years."""
    if compounding == Compounding.CONTINUOUS:
        return math.exp(-rate * time)
    if compounding == Compounding.SIMPLE:
        return 1.0 / (1.0 + rate * time)
    if compounding == Compounding.COMPOUNDED:
        periods_per_year = 12 / frequency.months()
        return (1.0 + rate / periods_per_year) ** (-periods_per_year * time)
    raise ValueError(f"Unsupported compounding: {compounding}")


def df_to_rate(
    df: float,
    time: float,
    compounding: Compounding = Compounding.CONTINUOUS,
    frequency: Frequency = Frequency.ANNUAL,
) -> float:
    """Inverse of :func:`rate_to_df`."""
    if df <= 0:
        raise ValueError("Discount factor must be positive")
    if time <= 0:
        raise ValueError("Time must be positive")
    if compounding == Compounding.CONTINUOUS:
        return -math.log(df) / time
    if compounding == Compounding.SIMPLE:
        return (1.0 / df - 1.0) / time
    if compounding == Compounding.COMPOUNDED:
        periods_per_year = 12 / frequency.months()
        return periods_per_year * (df ** (-1.0 / (periods_per_year * time)) - 1.0)
    raise ValueError(f"Unsupported compounding: {compounding}")


def simple_to_continuous(rate: float, time: float) -> float:
    """Convert simple rate to continuously compounded rate."""
    if time <= 0:
        return rate
    return math.log(1 + rate * time) / time


def continuous_to_simple(rate: float, time: float) -> float:
    """Convert continuously compounded rate to simple rate."""
    if time <= 0:
        return rate
    return (math.exp(rate * time) - 1) / time


def create_flat_curve_dfs(times: List[float], flat_rate: float) -> List[float]:
    """Create discount factors for a flat continuously compounded curve."""
    return [zero_rate_to_df(flat_rate, t) for t in times]


def forward_rates_from_dfs(times: List[float], discount_factors: List[float]) -> List[float]:
    """Simple forward rates between adjacent nodes."""
    if len(times) != len(discount_factors):
        raise ValueError("Times and discount factors must have same length")

    forwards = []
    for i in range(1, len(times)):
        period_length = times[i] - times[i - 1]
        if period_length <= 0:
            raise ValueError(f"Node times must be increasing: {times[i - 1]}, {times[i]}")
        forwards.append(
            (discount_factors[i - 1] / discount_factors[i] - 1) / period_length
        )
    return forwards
