"""Pillar-date selection."""

from datetime import date
from typing import Optional

from .errors import InvalidPillarError
from .options import Pillar


def choose_pillar(
    choice: Pillar,
    earliest: date,
    last_relevant: date,
    maturity: date,
    custom: Optional[date] = None,
) -> date:
    """Map a pillar choice onto the date a helper contributes to the curve."""
    if choice == Pillar.LAST_RELEVANT_DATE:
        return last_relevant
    if choice == Pillar.MATURITY_DATE:
        return maturity
    if choice == Pillar.CUSTOM_DATE:
        if custom is None:
            raise InvalidPillarError("custom pillar date not given")
        if not earliest <= custom <= maturity:
            raise InvalidPillarError(
                f"custom pillar date {custom} outside [{earliest}, {maturity}]"
            )
        return custom
    raise ValueError(f"Unknown pillar choice: {choice}")
