"""Sequential pillar bootstrap driven by rate helpers."""

from .config import BootstrapConfig, BootstrapError
from .engine import IterativeBootstrapper
from .results import BootstrapResult, PillarResult

__all__ = [
    "BootstrapConfig",
    "BootstrapError",
    "IterativeBootstrapper",
    "BootstrapResult",
    "PillarResult",
]
