"""Result dataclasses for the bootstrap."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List

from yieldhelpers.curves.discount import InterpolatedDiscountCurve
from yieldhelpers.ratehelpers.options import HelperKind


@dataclass(frozen=True)
class PillarResult:
    """Single pillar solved during the bootstrap."""

    kind: HelperKind
    pillar_date: date
    node_date: date
    discount_factor: float
    zero_rate: float
    iterations: int


@dataclass(frozen=True)
class BootstrapResult:
    """Solved curve together with the per-pillar diagnostics."""

    curve: InterpolatedDiscountCurve
    pillars: List[PillarResult]

    def __iter__(self):
        yield self.curve
        yield self.pillars
