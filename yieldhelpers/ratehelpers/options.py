"""
Enums and option records shared by the rate helpers.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional

from yieldhelpers.conventions.daycount import DayCountConvention
from yieldhelpers.conventions.types import ZERO_PERIOD, BusinessDayAdjustment, Period


class Pillar(Enum):
    """Which date a helper contributes to the curve grid."""

    LAST_RELEVANT_DATE = "LastRelevantDate"
    MATURITY_DATE = "MaturityDate"
    CUSTOM_DATE = "CustomDate"


class FuturesType(Enum):
    IMM = "IMM"
    ASX = "ASX"


class QuoteMode(Enum):
    """Whether a helper observes a live quote or wraps a plain number."""

    QUOTE = "Quote"
    RAW = "Raw"


class HelperKind(Enum):
    FUTURES = "Futures"
    DEPOSIT = "Deposit"
    FRA = "FRA"
    SWAP = "Swap"
    FLOAT_FLOAT_SWAP = "FloatFloatSwap"
    BMA_SWAP = "BMASwap"
    FX_SWAP = "FxSwap"


@dataclass(frozen=True)
class HelperOptions:
    """Optional knobs common to several helpers.

    ``None`` means "inherit from the index or use the helper default".  Each
    helper reads only the fields that apply to it.
    """

    pillar: Pillar = Pillar.LAST_RELEVANT_DATE
    custom_pillar_date: Optional[date] = None
    settlement_days: Optional[int] = None
    end_of_month: Optional[bool] = None
    day_counter: Optional[DayCountConvention] = None
    convention: Optional[BusinessDayAdjustment] = None
    forward_start: Period = ZERO_PERIOD

    def __post_init__(self):
        if self.pillar == Pillar.CUSTOM_DATE and self.custom_pillar_date is None:
            raise ValueError("custom_pillar_date is required for Pillar.CUSTOM_DATE")
        if self.settlement_days is not None and self.settlement_days < 0:
            raise ValueError(f"Negative settlement days: {self.settlement_days}")


DEFAULT_OPTIONS = HelperOptions()


@dataclass(frozen=True)
class HelperDescription:
    """Snapshot of a helper's public inspectors, tagged by kind."""

    kind: HelperKind
    earliest_date: date
    pillar_date: date
    maturity_date: date
    latest_relevant_date: date
    quote: Optional[float]
    details: Dict[str, Any] = field(default_factory=dict)
