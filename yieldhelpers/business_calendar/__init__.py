"""Spot-date, tenor and futures-date utilities."""

from .date_calculator import (
    add_tenor,
    apply_spot_lag,
    get_spot_date,
    is_asx_date,
    is_imm_date,
    is_overnight_tenor,
    next_asx_date,
    next_imm_date,
    next_wednesday,
    previous_wednesday,
    tenor_to_days,
    tenor_to_months,
)

__all__ = [
    "add_tenor",
    "apply_spot_lag",
    "get_spot_date",
    "is_asx_date",
    "is_imm_date",
    "is_overnight_tenor",
    "next_asx_date",
    "next_imm_date",
    "next_wednesday",
    "previous_wednesday",
    "tenor_to_days",
    "tenor_to_months",
]
