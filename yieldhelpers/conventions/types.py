"""
Basic types and enums used across the rate-helper layer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

import QuantLib as ql


class TimeUnit(Enum):
    """Units a :class:`Period` can be expressed in."""

    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"

    def to_ql(self) -> int:
        return _QL_TIME_UNITS[self]


_QL_TIME_UNITS = {
    TimeUnit.DAYS: ql.Days,
    TimeUnit.WEEKS: ql.Weeks,
    TimeUnit.MONTHS: ql.Months,
    TimeUnit.YEARS: ql.Years,
}

_TENOR_PATTERN = re.compile(r"^\s*(-?\d+)\s*([DWMY])\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class Period:
    """Signed multiple of a day, week, month or year."""

    length: int
    unit: TimeUnit = TimeUnit.DAYS

    @classmethod
    def parse(cls, tenor: str) -> "Period":
        """Parse a tenor string such as ``"3M"``, ``"1D"`` or ``"10Y"``."""
        match = _TENOR_PATTERN.match(tenor)
        if match is None:
            raise ValueError(f"Unsupported tenor: {tenor}")
        return cls(int(match.group(1)), TimeUnit(match.group(2).upper()))

    @classmethod
    def coerce(cls, value) -> "Period":
        if isinstance(value, Period):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise TypeError(f"Cannot interpret {value!r} as a Period")

    def months(self) -> int:
        """Length in months; only defined for month and year periods."""
        if self.unit == TimeUnit.MONTHS:
            return self.length
        if self.unit == TimeUnit.YEARS:
            return self.length * 12
        raise ValueError(f"Period {self} cannot be expressed in months")

    def days(self) -> int:
        """Length in days; only defined for day and week periods."""
        if self.unit == TimeUnit.DAYS:
            return self.length
        if self.unit == TimeUnit.WEEKS:
            return self.length * 7
        raise ValueError(f"Period {self} cannot be expressed in days")

    def is_zero(self) -> bool:
        return self.length == 0

    def to_ql(self) -> ql.Period:
        return ql.Period(self.length, self.unit.to_ql())

    def __neg__(self) -> "Period":
        return Period(-self.length, self.unit)

    def __mul__(self, factor: int) -> "Period":
        return Period(self.length * factor, self.unit)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"{self.length}{self.unit.value}"


ZERO_PERIOD = Period(0, TimeUnit.DAYS)


class Frequency(Enum):
    """Payment frequencies, valued in months."""

    ANNUAL = 12
    SEMIANNUAL = 6
    QUARTERLY = 3
    MONTHLY = 1

    def months(self) -> int:
        return self.value

    def period(self) -> Period:
        return Period(self.value, TimeUnit.MONTHS)


class BusinessDayAdjustment(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"

    def to_ql(self) -> int:
        return _QL_CONVENTIONS[self]


_QL_CONVENTIONS = {
    BusinessDayAdjustment.NO_ADJUSTMENT: ql.Unadjusted,
    BusinessDayAdjustment.FOLLOWING: ql.Following,
    BusinessDayAdjustment.MODIFIED_FOLLOWING: ql.ModifiedFollowing,
    BusinessDayAdjustment.PRECEDING: ql.Preceding,
    BusinessDayAdjustment.MODIFIED_PRECEDING: ql.ModifiedPreceding,
}


class DateGeneration(Enum):
    """Direction in which schedule dates are rolled."""

    BACKWARD = "BACKWARD"
    FORWARD = "FORWARD"


class Compounding(Enum):
    """Compounding rule used to turn a quoted rate into discount factors."""

    SIMPLE = "SIMPLE"
    COMPOUNDED = "COMPOUNDED"
    CONTINUOUS = "CONTINUOUS"
