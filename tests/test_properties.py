"""Properties shared by every helper."""

from datetime import date

import pytest

from yieldhelpers.conventions import (
    TARGET,
    UNITED_STATES,
    BusinessDayAdjustment,
    Frequency,
)
from yieldhelpers.indexes import BMAIndex, euribor, usd_libor
from yieldhelpers.market import Handle, SimpleQuote
from yieldhelpers.ratehelpers import (
    BMASwapRateHelper,
    DepositRateHelper,
    FloatFloatSwapRateHelper,
    FraRateHelper,
    FuturesRateHelper,
    FxSwapRateHelper,
    HelperKind,
    SwapRateHelper,
)

MF = BusinessDayAdjustment.MODIFIED_FOLLOWING


@pytest.fixture
def exogenous_curve(evaluation_date, flat_curve):
    return flat_curve(evaluation_date, 0.025)


@pytest.fixture
def helpers(context, exogenous_curve):
    """One helper of each kind, each observing its own ``SimpleQuote``."""
    exogenous = Handle(exogenous_curve)
    return [
        FuturesRateHelper(SimpleQuote(97.0), date(2024, 6, 19), None, "ACT/360"),
        DepositRateHelper.from_ibor_index(SimpleQuote(0.03), euribor("6M"), context=context),
        FraRateHelper.from_ibor_index(SimpleQuote(0.03), 6, euribor("3M"), context=context),
        SwapRateHelper(
            SimpleQuote(0.03), "10Y", TARGET, Frequency.ANNUAL, MF, "30/360E", euribor("6M"),
            context=context,
        ),
        FloatFloatSwapRateHelper(
            SimpleQuote(0.001), date(2024, 3, 6), "3Y", TARGET, MF, MF,
            euribor("6M", exogenous), euribor("3M"), 2, context=context,
        ),
        BMASwapRateHelper(
            SimpleQuote(0.7), "2Y", 2, UNITED_STATES, "3M", BusinessDayAdjustment.FOLLOWING,
            "ACT/ACT", BMAIndex(), usd_libor("3M", exogenous), context=context,
        ),
        FxSwapRateHelper(
            SimpleQuote(0.002), 1.1, "6M", 2, TARGET, BusinessDayAdjustment.FOLLOWING, False,
            True, exogenous, context=context,
        ),
    ]


def test_every_kind_is_covered(helpers):
    assert {h.kind for h in helpers} == set(HelperKind)


def test_date_ordering(helpers):
    for helper in helpers:
        assert helper.earliest_date <= helper.pillar_date <= helper.maturity_date, helper
        assert helper.latest_date >= helper.pillar_date


def test_true_price_gives_zero_error(helpers, evaluation_date, flat_curve):
    trial = flat_curve(evaluation_date, 0.028)
    for helper in helpers:
        helper.set_term_structure(trial)
        helper.quote_handle.current_link().set_value(helper.implied_quote())

        assert abs(helper.quote_error()) < 1e-12, helper


def test_describe_carries_the_kind(helpers):
    for helper in helpers:
        description = helper.describe()
        assert description.kind == helper.kind
        assert description.pillar_date == helper.pillar_date
        assert description.quote == helper.quote()
