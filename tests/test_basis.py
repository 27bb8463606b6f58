"""Tenor basis swap helper."""

from datetime import date

import pytest

from yieldhelpers.bootstrap import IterativeBootstrapper
from yieldhelpers.conventions import TARGET, BusinessDayAdjustment
from yieldhelpers.indexes import euribor
from yieldhelpers.market import Handle
from yieldhelpers.ratehelpers import (
    FloatFloatSwapRateHelper,
    InconsistentCurvesError,
    NotReadyError,
)

MF = BusinessDayAdjustment.MODIFIED_FOLLOWING
EFFECTIVE = date(2024, 3, 6)


@pytest.fixture
def six_month_curve(evaluation_date, flat_curve):
    return flat_curve(evaluation_date, 0.03)


def basis_helper(context, six_month_curve, spread=0.0008, basis_leg=1, **kwargs):
    return FloatFloatSwapRateHelper(
        spread, EFFECTIVE, "2Y", TARGET, MF, MF,
        euribor("6M", Handle(six_month_curve)), euribor("3M"), basis_leg,
        context=context, **kwargs,
    )


def test_basis_swap_dates(context, six_month_curve):
    helper = basis_helper(context, six_month_curve)

    assert helper.earliest_date == EFFECTIVE
    assert helper.maturity_date == date(2026, 3, 6)
    assert helper.pillar_date == helper.maturity_date
    legs = helper.basis_swap().legs
    assert (len(legs[0]), len(legs[1])) == (4, 8)


@pytest.mark.parametrize("basis_leg", [1, 2])
def test_no_basis_on_identical_curves(context, evaluation_date, flat_curve, six_month_curve, basis_leg):
    helper = basis_helper(context, six_month_curve, basis_leg=basis_leg)
    helper.set_term_structure(flat_curve(evaluation_date, 0.03))

    assert helper.implied_quote() == pytest.approx(0.0, abs=1e-12)


def test_basis_spread_sign_follows_the_basis_leg(context, evaluation_date, flat_curve, six_month_curve):
    trial = flat_curve(evaluation_date, 0.032)
    on_leg1 = basis_helper(context, six_month_curve, basis_leg=1)
    on_leg2 = basis_helper(context, six_month_curve, basis_leg=2)
    on_leg1.set_term_structure(trial)
    on_leg2.set_term_structure(trial)

    # 3M forwards above 6M forwards: leg 1 must pay a positive spread
    assert on_leg1.implied_quote() > 0
    assert on_leg2.implied_quote() < 0


def test_calibrated_curve_reprices_the_basis(context, evaluation_date, six_month_curve):
    helper = basis_helper(context, six_month_curve)

    result = IterativeBootstrapper([helper], evaluation_date).bootstrap()

    assert helper.term_structure is result.curve
    assert helper.implied_quote() == pytest.approx(0.0008, abs=1e-10)


def test_exogenous_discounting(context, evaluation_date, flat_curve, six_month_curve):
    discount = Handle(flat_curve(evaluation_date, 0.01))
    helper = basis_helper(context, six_month_curve, discounting_curve=discount)

    with pytest.raises(InconsistentCurvesError):
        helper.set_term_structure(discount.current_link())
    with pytest.raises(InconsistentCurvesError):
        helper.set_term_structure(six_month_curve)

    helper.set_term_structure(flat_curve(evaluation_date, 0.03))
    # same forwards; only coupon timing differs under the 1% discount curve
    assert helper.implied_quote() == pytest.approx(0.0, abs=5e-4)


def test_basis_argument_checks(context, six_month_curve):
    with pytest.raises(ValueError):
        basis_helper(context, six_month_curve, basis_leg=3)
    with pytest.raises(ValueError):
        FloatFloatSwapRateHelper(
            0.0008, EFFECTIVE, "2Y", TARGET, MF, MF, euribor("6M"), euribor("3M"), 1,
            context=context,
        )


def test_basis_needs_a_curve(context, six_month_curve):
    with pytest.raises(NotReadyError):
        basis_helper(context, six_month_curve).implied_quote()
