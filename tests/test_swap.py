"""Vanilla swap helper."""

import math
from datetime import date

import pytest

from yieldhelpers.conventions import (
    UNITED_STATES,
    BusinessDayAdjustment,
    Frequency,
    Period,
    TimeUnit,
)
from yieldhelpers.curves import FlatForward
from yieldhelpers.indexes import euribor_swap_isda_fix_a, usd_libor
from yieldhelpers.market import Handle, RelinkableHandle, SimpleQuote
from yieldhelpers.ratehelpers import (
    DegenerateSwapError,
    EmptyQuoteError,
    HelperOptions,
    InconsistentCurvesError,
    NotReadyError,
    Pillar,
    SwapRateHelper,
)

MF = BusinessDayAdjustment.MODIFIED_FOLLOWING


def five_year_swap(context, rate=0.02, index=None, **kwargs):
    return SwapRateHelper(
        rate, "5Y", UNITED_STATES, Frequency.SEMIANNUAL, MF, "30/360",
        index if index is not None else usd_libor("3M"),
        context=context, **kwargs,
    )


def test_swap_dates(context):
    helper = five_year_swap(context)

    assert helper.settlement_days == 2
    assert helper.earliest_date == date(2024, 3, 6)
    assert helper.maturity_date == date(2029, 3, 6)
    assert helper.latest_relevant_date == date(2029, 3, 6)
    assert helper.pillar_date == helper.latest_relevant_date
    assert len(helper.swap().fixed_leg) == 10
    assert len(helper.swap().floating_leg) == 20


def test_swap_reprices_its_own_par_rate(context, evaluation_date, flat_curve):
    quote = SimpleQuote(0.02)
    helper = five_year_swap(context, quote)
    helper.set_term_structure(flat_curve(evaluation_date, 0.02))

    implied = helper.implied_quote()
    assert implied == pytest.approx(0.02, abs=5e-4)

    quote.set_value(implied)
    assert abs(helper.quote_error()) < 1e-12


def test_implied_rate_rises_with_pillar_zero_rate(context, evaluation_date, two_node_curve):
    helper = five_year_swap(context)
    node = helper.latest_date
    t = (node - evaluation_date).days / 365.0

    implied = []
    for zero_rate in (0.01, 0.02, 0.03, 0.04):
        helper.set_term_structure(two_node_curve(evaluation_date, node, math.exp(-zero_rate * t)))
        implied.append(helper.implied_quote())

    assert implied == sorted(implied)
    assert len(set(implied)) == len(implied)


def test_exogenous_discounting(context, evaluation_date, flat_curve, recorder):
    discount = RelinkableHandle(flat_curve(evaluation_date, 0.01))
    helper = five_year_swap(context, discounting_curve=discount)
    endogenous = five_year_swap(context)
    recorder.register_with(helper)
    trial = flat_curve(evaluation_date, 0.02)
    helper.set_term_structure(trial)
    endogenous.set_term_structure(trial)

    assert helper.discounting_curve() is discount
    assert helper.implied_quote() == pytest.approx(endogenous.implied_quote(), abs=1e-4)
    assert helper.implied_quote() != endogenous.implied_quote()

    discount.link_to(flat_curve(evaluation_date, 0.015))
    assert recorder.count == 1


def test_discount_curve_cannot_be_the_trial_curve(context, evaluation_date, flat_curve):
    curve = flat_curve(evaluation_date, 0.02)
    helper = five_year_swap(context, discounting_curve=Handle(curve))

    with pytest.raises(InconsistentCurvesError):
        helper.set_term_structure(curve)


def test_forwarding_curve_cannot_be_the_trial_curve(context, evaluation_date, flat_curve):
    curve = flat_curve(evaluation_date, 0.02)
    index = usd_libor("3M", Handle(curve))
    helper = five_year_swap(context, index=index)

    assert helper.ibor_index is index
    with pytest.raises(InconsistentCurvesError):
        helper.set_term_structure(curve)
    helper.set_term_structure(flat_curve(evaluation_date, 0.02))


def test_swap_needs_a_curve(context):
    with pytest.raises(NotReadyError):
        five_year_swap(context).implied_quote()


def test_degenerate_annuity(context, evaluation_date, flat_curve):
    # every coupon pays before the discount curve's reference date
    expired = Handle(FlatForward(date(2035, 1, 2), 0.02))
    helper = five_year_swap(context, discounting_curve=expired)
    helper.set_term_structure(flat_curve(evaluation_date, 0.02))

    with pytest.raises(DegenerateSwapError):
        helper.implied_quote()


def test_spread_lowers_the_implied_rate(context, evaluation_date, flat_curve):
    curve = flat_curve(evaluation_date, 0.02)
    plain = five_year_swap(context)
    spread = five_year_swap(context, spread=0.001)
    plain.set_term_structure(curve)
    spread.set_term_structure(curve)

    swap = spread.swap()
    ratio = swap.floating_leg_annuity(curve) / swap.fixed_leg_annuity(curve)
    assert spread.spread() == 0.001
    assert spread.implied_quote() == pytest.approx(plain.implied_quote() - 0.001 * ratio, abs=1e-14)


def test_from_swap_index(context):
    helper = SwapRateHelper.from_swap_index(0.025, euribor_swap_isda_fix_a("5Y"), context=context)

    assert helper.settlement_days == 2
    assert helper.fixed_tenor == Period(1, TimeUnit.YEARS)
    assert helper.ibor_index.tenor == Period(6, TimeUnit.MONTHS)
    assert helper.earliest_date == date(2024, 3, 6)
    assert helper.maturity_date == date(2029, 3, 6)


def test_settlement_days_override(context):
    helper = five_year_swap(context, options=HelperOptions(settlement_days=0))

    assert helper.settlement_days == 0
    assert helper.earliest_date == date(2024, 3, 4)


def test_forward_start(context):
    helper = five_year_swap(context, options=HelperOptions(forward_start=Period(1, TimeUnit.YEARS)))

    assert helper.forward_start() == Period(1, TimeUnit.YEARS)
    assert helper.earliest_date == date(2025, 3, 6)
    assert helper.maturity_date == date(2030, 3, 6)


def test_maturity_pillar(context):
    helper = five_year_swap(context, options=HelperOptions(pillar=Pillar.MATURITY_DATE))

    assert helper.pillar_date == helper.maturity_date


def test_unset_spread_quote(context, evaluation_date, flat_curve):
    assert five_year_swap(context).spread() == 0.0

    helper = five_year_swap(context, spread=SimpleQuote())
    helper.set_term_structure(flat_curve(evaluation_date, 0.02))

    with pytest.raises(EmptyQuoteError):
        helper.spread()
    with pytest.raises(EmptyQuoteError):
        helper.implied_quote()
    assert helper.describe().details["spread"] is None
