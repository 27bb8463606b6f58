"""Rate helpers: market quotes expressed as residuals on a trial curve."""

from .base import RateHelper, RelativeDateRateHelper, make_quote_handle
from .basis import FloatFloatSwapRateHelper
from .bma import BMASwapRateHelper
from .deposit import DepositRateHelper
from .errors import (
    DegenerateSwapError,
    EmptyQuoteError,
    InconsistentCurvesError,
    InvalidPillarError,
    NotReadyError,
    RateHelperError,
    UnrepresentableFxTenorError,
)
from .fra import FraRateHelper
from .futures import FuturesRateHelper
from .fx import FxSwapRateHelper
from .options import (
    DEFAULT_OPTIONS,
    FuturesType,
    HelperDescription,
    HelperKind,
    HelperOptions,
    Pillar,
    QuoteMode,
)
from .pillar import choose_pillar
from .swap import SwapRateHelper

__all__ = [
    "RateHelper",
    "RelativeDateRateHelper",
    "make_quote_handle",
    "FuturesRateHelper",
    "DepositRateHelper",
    "FraRateHelper",
    "SwapRateHelper",
    "FloatFloatSwapRateHelper",
    "BMASwapRateHelper",
    "FxSwapRateHelper",
    "Pillar",
    "FuturesType",
    "QuoteMode",
    "HelperKind",
    "HelperOptions",
    "HelperDescription",
    "DEFAULT_OPTIONS",
    "choose_pillar",
    "RateHelperError",
    "NotReadyError",
    "EmptyQuoteError",
    "InvalidPillarError",
    "DegenerateSwapError",
    "UnrepresentableFxTenorError",
    "InconsistentCurvesError",
]
