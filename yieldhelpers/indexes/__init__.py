"""Interest-rate indexes consumed by the rate helpers."""

from .bma import BMAIndex
from .ibor import IborIndex, euribor, usd_libor
from .swap_index import SwapIndex, euribor_swap_isda_fix_a

__all__ = [
    "IborIndex",
    "BMAIndex",
    "SwapIndex",
    "euribor",
    "usd_libor",
    "euribor_swap_isda_fix_a",
]
