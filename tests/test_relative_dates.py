"""Helpers following the evaluation date."""

from datetime import date

import pytest

from yieldhelpers.conventions import TARGET, BusinessDayAdjustment, Frequency
from yieldhelpers.indexes import euribor, usd_libor
from yieldhelpers.market import EvaluationContext, SimpleQuote
from yieldhelpers.ratehelpers import (
    DepositRateHelper,
    FraRateHelper,
    FuturesRateHelper,
    SwapRateHelper,
)

MF = BusinessDayAdjustment.MODIFIED_FOLLOWING


def test_dates_move_with_the_evaluation_date(context):
    deposit = DepositRateHelper.from_ibor_index(0.025, usd_libor("3M"), context=context)
    swap = SwapRateHelper(0.03, "2Y", TARGET, Frequency.ANNUAL, MF, "30/360E", euribor("6M"), context=context)

    context.advance(7)

    assert deposit.evaluation_date == date(2024, 3, 11)
    assert deposit.earliest_date == date(2024, 3, 13)
    assert deposit.maturity_date == date(2024, 6, 13)
    assert swap.earliest_date == date(2024, 3, 13)
    assert swap.maturity_date == date(2026, 3, 13)


def test_dates_follow_calendar_rounding():
    # Friday evaluation: T+2 skips the weekend
    context = EvaluationContext(date(2024, 3, 8))
    deposit = DepositRateHelper.from_ibor_index(0.025, euribor("3M"), context=context)
    assert deposit.earliest_date == date(2024, 3, 12)

    # a Saturday rolls to Monday before the spot lag is applied
    context.set_evaluation_date(date(2024, 3, 9))
    assert deposit.earliest_date == date(2024, 3, 13)


def test_one_notification_per_change(context, recorder):
    quote = SimpleQuote(0.03)
    fra = FraRateHelper.from_ibor_index(quote, 3, euribor("3M"), context=context)
    recorder.register_with(fra)

    context.advance(1)
    assert recorder.count == 1

    quote.set_value(0.031)
    assert recorder.count == 2

    context.advance(0)
    assert recorder.count == 2


def test_unchanged_date_keeps_dates(context, recorder):
    fra = FraRateHelper.from_ibor_index(0.03, 3, euribor("3M"), context=context)
    before = fra.describe()
    recorder.register_with(fra)

    # notification without a date change re-emits but keeps the dates
    context.notify_observers()

    assert recorder.count == 1
    assert fra.describe() == before


def test_futures_ignore_the_evaluation_date(context):
    future = FuturesRateHelper(98.5, date(2024, 3, 20), None, "ACT/360")

    context.advance(30)

    assert future.earliest_date == date(2024, 3, 20)
    assert context.observers == []


def test_context_is_required():
    with pytest.raises(TypeError):
        DepositRateHelper.from_ibor_index(0.025, euribor("3M"), context=date(2024, 3, 4))
