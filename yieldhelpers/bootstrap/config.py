"""Configuration for the iterative bootstrap."""

from dataclasses import dataclass


class BootstrapError(RuntimeError):
    """The bootstrapper could not bracket or converge on a pillar."""


@dataclass
class BootstrapConfig:
    """Configuration for bootstrap process."""

    interpolation_method: str = "LOGLINEAR_DF"
    day_count_convention: str = "ACT/365F"
    accuracy: float = 1e-12
    max_iterations: int = 200
    verbose: bool = False

    def __post_init__(self):
        if self.accuracy <= 0:
            raise ValueError(f"accuracy must be positive: {self.accuracy}")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive: {self.max_iterations}")
