"""
Day counts used by coupons, indexes and curve time axes.

Each convention wraps a QuantLib day counter.  Helpers only need
``year_fraction`` and ``day_count``, so one class covers every convention and
the module keeps a small set of shared instances keyed by their market names.
"""

from datetime import date, datetime
from typing import Dict, Tuple, Union

import QuantLib as ql

from .calendars import to_ql_date

DateLike = Union[date, datetime]


class DayCountConvention:
    """Named QuantLib day counter; equal when the names match."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(self, start: DateLike, end: DateLike) -> float:
        return self._ql_daycount.yearFraction(to_ql_date(start), to_ql_date(end))

    def day_count(self, start: DateLike, end: DateLike) -> int:
        return self._ql_daycount.dayCount(to_ql_date(start), to_ql_date(end))

    def to_ql(self) -> ql.DayCounter:
        return self._ql_daycount

    def __eq__(self, other) -> bool:
        return isinstance(other, DayCountConvention) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"DayCountConvention({self.name!r})"


# money market legs, IBOR and futures periods
ACT_360 = DayCountConvention("ACT/360", ql.Actual360())
# curve time axis, GBP money market
ACT_365F = DayCountConvention("ACT/365F", ql.Actual365Fixed())
# EUR fixed swap legs
THIRTY_360E = DayCountConvention("30E/360", ql.Thirty360(ql.Thirty360.European))
# USD fixed swap legs
THIRTY_360U = DayCountConvention("30U/360", ql.Thirty360(ql.Thirty360.BondBasis))
# BMA/SIFMA averaging coupons
ACT_ACT = DayCountConvention("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))

_ALIASES: Tuple[Tuple[DayCountConvention, Tuple[str, ...]], ...] = (
    (ACT_360, ("ACT/360", "ACTUAL/360", "A360")),
    (ACT_365F, ("ACT/365F", "ACT/365", "ACTUAL/365F", "A365F")),
    (THIRTY_360E, ("30E/360", "30/360E", "30/360 EUROPEAN")),
    (THIRTY_360U, ("30U/360", "30/360", "30/360 US")),
    (ACT_ACT, ("ACT/ACT", "ACTUAL/ACTUAL", "ACT/ACT ISDA")),
)

DAY_COUNT_CONVENTIONS: Dict[str, DayCountConvention] = {
    alias: convention for convention, aliases in _ALIASES for alias in aliases
}


def get_day_count_convention(name: str) -> DayCountConvention:
    """Look a convention up by any of its market spellings."""
    try:
        return DAY_COUNT_CONVENTIONS[name.strip().upper()]
    except KeyError:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {sorted(DAY_COUNT_CONVENTIONS)}"
        ) from None


def resolve_day_count(value: Union[str, DayCountConvention]) -> DayCountConvention:
    """Accept either a convention instance or a registry name."""
    if isinstance(value, DayCountConvention):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Cannot use {value!r} as a day count convention")
    return get_day_count_convention(value)
