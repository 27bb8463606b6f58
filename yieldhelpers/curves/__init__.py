"""Yield term structures used as trial and exogenous curves."""

from .base import YieldTermStructure
from .discount import InterpolatedDiscountCurve
from .flat import FlatForward
from .helpers import (
    continuous_to_simple,
    create_flat_curve_dfs,
    df_to_rate,
    df_to_zero_rate,
    forward_rates_from_dfs,
    rate_to_df,
    simple_to_continuous,
    zero_rate_to_df,
)

__all__ = [
    "YieldTermStructure",
    "FlatForward",
    "InterpolatedDiscountCurve",
    "df_to_zero_rate",
    "zero_rate_to_df",
    "df_to_rate",
    "rate_to_df",
    "simple_to_continuous",
    "continuous_to_simple",
    "create_flat_curve_dfs",
    "forward_rates_from_dfs",
]
