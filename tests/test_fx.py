"""FX swap helper."""

import logging
import math
from datetime import date

import pytest

from yieldhelpers.conventions import (
    TARGET,
    UNITED_KINGDOM,
    UNITED_STATES,
    BusinessDayAdjustment,
)
from yieldhelpers.curves import InterpolatedDiscountCurve
from yieldhelpers.market import EvaluationContext, Handle, SimpleQuote
from yieldhelpers.ratehelpers import (
    EmptyQuoteError,
    FxSwapRateHelper,
    InconsistentCurvesError,
    NotReadyError,
    UnrepresentableFxTenorError,
)

SPOT = 1.1
FWD_POINT = 0.005
EARLIEST = date(2024, 3, 6)
MATURITY = date(2024, 6, 6)
EUR_GBP = TARGET.join(UNITED_KINGDOM)


def three_month_fx(context, collateral, base_is_collateral=True):
    return FxSwapRateHelper(
        FWD_POINT, SPOT, "3M", 2, TARGET, BusinessDayAdjustment.FOLLOWING, False,
        base_is_collateral, collateral, context=context,
    )


def short_fx(evaluation_date, tenor, fixing_days, trading_calendar=UNITED_STATES):
    return FxSwapRateHelper(
        0.0001, 0.85, tenor, fixing_days, EUR_GBP, BusinessDayAdjustment.FOLLOWING, False,
        True, Handle(), trading_calendar, context=EvaluationContext(evaluation_date),
    )


@pytest.fixture
def collateral():
    return InterpolatedDiscountCurve([EARLIEST, MATURITY], [1.0, 0.995])


def test_fx_dates(context, collateral):
    helper = three_month_fx(context, collateral)

    assert helper.earliest_date == EARLIEST
    assert helper.maturity_date == MATURITY
    assert helper.pillar_date == MATURITY
    assert helper.adjustment_calendar == TARGET
    assert helper.spot() == SPOT


# Forward points use the collateral-ratio convention: with the base currency
# as collateral, points = (P(e)/P(T) / (Pc(e)/Pc(T)) - 1) * spot, where P is
# the curve being built and Pc the collateral curve.  The quote curve below is
# solved from that relation.
def test_fx_forward_points_base_is_collateral(context, collateral, two_node_curve):
    helper = three_month_fx(context, collateral)
    quote_df = 0.995 / (1.0 + FWD_POINT / SPOT)
    helper.set_term_structure(two_node_curve(EARLIEST, MATURITY, quote_df))

    assert helper.implied_quote() == pytest.approx(FWD_POINT, abs=1e-12)
    assert helper.quote_error() == pytest.approx(0.0, abs=1e-12)


def test_fx_forward_points_quote_is_collateral(context, collateral, two_node_curve):
    helper = three_month_fx(context, Handle(collateral), base_is_collateral=False)
    quote_df = 0.995 * (1.0 + FWD_POINT / SPOT)
    helper.set_term_structure(two_node_curve(EARLIEST, MATURITY, quote_df))

    assert helper.implied_quote() == pytest.approx(FWD_POINT, abs=1e-12)


def test_fx_curve_checks(context, collateral):
    helper = three_month_fx(context, collateral)

    with pytest.raises(NotReadyError):
        helper.implied_quote()
    with pytest.raises(InconsistentCurvesError):
        helper.set_term_structure(collateral)


def test_overnight_on_trading_calendar_holiday():
    with pytest.raises(UnrepresentableFxTenorError):
        short_fx(date(2024, 7, 4), "1D", 0)


def test_tomorrow_next_into_trading_calendar_holiday():
    with pytest.raises(UnrepresentableFxTenorError):
        short_fx(date(2024, 7, 3), "1D", 1)


def test_overnight_on_a_common_business_day():
    helper = short_fx(date(2024, 7, 2), "1D", 0)

    assert helper.earliest_date == date(2024, 7, 2)
    assert helper.maturity_date == date(2024, 7, 3)


def test_spot_rolled_onto_trading_calendar():
    with_trading = short_fx(date(2024, 7, 2), "1W", 2)
    without_trading = short_fx(date(2024, 7, 2), "1W", 2, trading_calendar=None)

    assert with_trading.earliest_date == date(2024, 7, 5)
    assert with_trading.maturity_date == date(2024, 7, 12)
    assert with_trading.adjustment_calendar.name == "TARGET+UK+USNY"
    assert without_trading.earliest_date == date(2024, 7, 4)


def test_date_move_onto_holiday_blocks_pricing(caplog, flat_curve):
    context = EvaluationContext(date(2024, 7, 3))
    helper = FxSwapRateHelper(
        0.0001, 0.85, "1D", 0, EUR_GBP, BusinessDayAdjustment.FOLLOWING, False,
        True, flat_curve(date(2024, 7, 3), 0.03), UNITED_STATES, context=context,
    )
    helper.set_term_structure(flat_curve(date(2024, 7, 3), 0.035))
    assert helper.earliest_date == date(2024, 7, 3)

    with caplog.at_level(logging.ERROR, logger="yieldhelpers.market.observable"):
        context.set_evaluation_date(date(2024, 7, 4))

    assert "UnrepresentableFxTenorError" in caplog.text
    assert helper.evaluation_date == date(2024, 7, 3)
    with pytest.raises(NotReadyError) as error:
        helper.quote_error()
    assert isinstance(error.value.__cause__, UnrepresentableFxTenorError)

    context.set_evaluation_date(date(2024, 7, 5))

    assert helper.evaluation_date == date(2024, 7, 5)
    assert helper.earliest_date == date(2024, 7, 5)
    assert helper.implied_quote() == pytest.approx(
        0.85 * (math.exp(0.005 * 3 / 365) - 1.0), rel=1e-9
    )


@pytest.mark.parametrize("spot", [SimpleQuote(), Handle()])
def test_unset_spot_quote(context, collateral, two_node_curve, spot):
    helper = FxSwapRateHelper(
        FWD_POINT, spot, "3M", 2, TARGET, BusinessDayAdjustment.FOLLOWING, False,
        True, collateral, context=context,
    )
    helper.set_term_structure(two_node_curve(EARLIEST, MATURITY, 0.99))

    with pytest.raises(EmptyQuoteError):
        helper.spot()
    with pytest.raises(EmptyQuoteError):
        helper.quote_error()
    assert helper.describe().details["spot"] is None
