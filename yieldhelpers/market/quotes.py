"""
Market quotes.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Optional

from .observable import Observable


class Quote(Observable, ABC):
    """Observable scalar market value."""

    @abstractmethod
    def value(self) -> float:
        """Current value; raises ``ValueError`` when the quote is empty."""

    @abstractmethod
    def is_valid(self) -> bool:
        """False when the quote carries no value."""


class SimpleQuote(Quote):
    """Quote holding a settable number."""

    def __init__(self, value: Optional[float] = None):
        super().__init__()
        self._value = None if value is None else float(value)

    def value(self) -> float:
        if self._value is None:
            raise ValueError("invalid SimpleQuote")
        return self._value

    def is_valid(self) -> bool:
        return self._value is not None

    def set_value(self, value: Optional[float]) -> float:
        """Set a new value, notifying observers if it changed.

        Returns the difference between the new and the old value (0.0 if
        either side is empty).
        """
        new = None if value is None else float(value)
        old = self._value
        if new == old or (
            new is not None and old is not None and math.isnan(new) and math.isnan(old)
        ):
            return 0.0
        self._value = new
        self.notify_observers()
        if new is None or old is None:
            return 0.0
        return new - old

    def reset(self) -> None:
        self.set_value(None)

    def __repr__(self) -> str:
        return f"SimpleQuote({self._value!r})"
