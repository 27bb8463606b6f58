"""Shared fixtures for the rate helper tests."""

from __future__ import annotations

from datetime import date

import pytest

from yieldhelpers.conventions import Compounding
from yieldhelpers.curves import FlatForward, InterpolatedDiscountCurve
from yieldhelpers.market import EvaluationContext, Observer

# Monday, a business day on TARGET, London and New York
EVALUATION_DATE = date(2024, 3, 4)


class RecordingObserver(Observer):
    """Counts the notifications it receives."""

    def __init__(self):
        super().__init__()
        self.count = 0

    def update(self) -> None:
        self.count += 1


@pytest.fixture
def evaluation_date() -> date:
    return EVALUATION_DATE


@pytest.fixture
def context() -> EvaluationContext:
    return EvaluationContext(EVALUATION_DATE)


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def flat_curve():
    """Factory for flat curves: ``flat_curve(reference_date, rate, ...)``."""

    def _make(reference_date, rate, day_counter="ACT/365F", compounding=Compounding.CONTINUOUS):
        return FlatForward(reference_date, rate, day_counter, compounding)

    return _make


@pytest.fixture
def simple_curve(flat_curve):
    """Simply compounded ACT/360 curve: the forward from its reference date equals ``rate``."""

    def _make(reference_date, rate):
        return flat_curve(reference_date, rate, "ACT/360", Compounding.SIMPLE)

    return _make


@pytest.fixture
def two_node_curve():
    """Log-linear curve through ``(reference_date, 1.0)`` and ``(node_date, df)``."""

    def _make(reference_date, node_date, df):
        return InterpolatedDiscountCurve([reference_date, node_date], [1.0, df])

    return _make
