"""
Explicit evaluation-date context.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Union

from .observable import Observable

logger = logging.getLogger(__name__)


class EvaluationContext(Observable):
    """Holds the evaluation date seen by relative-date rate helpers.

    Helpers are handed a context at construction and observe it; moving the
    date notifies every helper once.
    """

    def __init__(self, evaluation_date: Union[date, datetime]):
        super().__init__()
        self._evaluation_date = _as_date(evaluation_date)

    @property
    def evaluation_date(self) -> date:
        return self._evaluation_date

    @evaluation_date.setter
    def evaluation_date(self, value: Union[date, datetime]) -> None:
        self.set_evaluation_date(value)

    def set_evaluation_date(self, value: Union[date, datetime]) -> None:
        value = _as_date(value)
        if value == self._evaluation_date:
            return
        logger.debug("Evaluation date moved from %s to %s", self._evaluation_date, value)
        self._evaluation_date = value
        self.notify_observers()

    def advance(self, days: int) -> date:
        """Move the evaluation date by calendar days and return the new date."""
        self.set_evaluation_date(self._evaluation_date + timedelta(days=days))
        return self._evaluation_date

    def __repr__(self) -> str:
        return f"EvaluationContext({self._evaluation_date.isoformat()})"


def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TypeError(f"evaluation date must be a date, got {value!r}")
    return value
