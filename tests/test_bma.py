"""BMA swap helper and the BMA index."""

from datetime import date

import pytest

from yieldhelpers.conventions import UNITED_STATES, BusinessDayAdjustment
from yieldhelpers.indexes import BMAIndex, usd_libor
from yieldhelpers.market import Handle, SimpleQuote
from yieldhelpers.ratehelpers import (
    BMASwapRateHelper,
    HelperKind,
    InconsistentCurvesError,
    NotReadyError,
)


@pytest.fixture
def libor_curve(evaluation_date, flat_curve):
    return flat_curve(evaluation_date, 0.03)


def bma_helper(context, libor_curve, fraction=0.7):
    return BMASwapRateHelper(
        fraction, "5Y", 2, UNITED_STATES, "3M", BusinessDayAdjustment.FOLLOWING, "ACT/ACT",
        BMAIndex(), usd_libor("3M", Handle(libor_curve)), context=context,
    )


def test_bma_index_dates():
    index = BMAIndex()

    assert index.name == "BMA"
    assert index.is_valid_fixing_date(date(2024, 3, 6))
    assert not index.is_valid_fixing_date(date(2024, 3, 7))
    assert index.value_date(date(2024, 3, 6)) == date(2024, 3, 7)
    assert index.maturity_date(date(2024, 3, 7)) == date(2024, 3, 14)
    assert index.fixing_schedule(date(2024, 3, 8), date(2024, 3, 20)) == [
        date(2024, 3, 6),
        date(2024, 3, 13),
        date(2024, 3, 20),
        date(2024, 3, 27),
    ]


def test_bma_helper_dates(context, libor_curve):
    helper = bma_helper(context, libor_curve)

    assert helper.kind == HelperKind.BMA_SWAP
    assert helper.earliest_date == date(2024, 3, 6)
    assert helper.maturity_date == date(2029, 3, 6)
    assert helper.pillar_date == helper.maturity_date
    # value date of the fixing on the Wednesday after maturity
    assert helper.latest_relevant_date == date(2029, 3, 8)
    assert helper.latest_date == date(2029, 3, 8)


def test_bma_fraction_tracks_the_trial_curve(context, evaluation_date, flat_curve, libor_curve):
    helper = bma_helper(context, libor_curve)

    helper.set_term_structure(flat_curve(evaluation_date, 0.03))
    same_level = helper.implied_quote()
    helper.set_term_structure(flat_curve(evaluation_date, 0.015))
    half_level = helper.implied_quote()

    assert 0.95 < same_level < 1.02
    assert half_level == pytest.approx(0.5 * same_level, rel=0.02)


def test_bma_round_trip(context, evaluation_date, flat_curve, libor_curve):
    quote = SimpleQuote(0.7)
    helper = bma_helper(context, libor_curve, quote)
    helper.set_term_structure(flat_curve(evaluation_date, 0.02))

    quote.set_value(helper.implied_quote())

    assert abs(helper.quote_error()) < 1e-12


def test_bma_needs_ibor_forwarding(context):
    with pytest.raises(ValueError):
        BMASwapRateHelper(
            0.7, "5Y", 2, UNITED_STATES, "3M", BusinessDayAdjustment.FOLLOWING, "ACT/ACT",
            BMAIndex(), usd_libor("3M"), context=context,
        )


def test_bma_trial_curve_checks(context, libor_curve):
    helper = bma_helper(context, libor_curve)

    with pytest.raises(NotReadyError):
        helper.implied_quote()
    with pytest.raises(InconsistentCurvesError):
        helper.set_term_structure(libor_curve)
