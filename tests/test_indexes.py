"""Indexes and the swaps built on them."""

from datetime import date

import pytest

from yieldhelpers.conventions import BusinessDayAdjustment, Period, TimeUnit
from yieldhelpers.indexes import euribor, euribor_swap_isda_fix_a
from yieldhelpers.market import Handle
from yieldhelpers.ratehelpers import SwapRateHelper


def test_euribor_conventions():
    three_month = euribor("3M")
    one_week = euribor("1W")

    assert three_month.name.startswith("Euribor3M")
    assert three_month.business_day_convention == BusinessDayAdjustment.MODIFIED_FOLLOWING
    assert three_month.end_of_month
    assert one_week.business_day_convention == BusinessDayAdjustment.FOLLOWING
    assert not one_week.end_of_month
    assert three_month.maturity_date(date(2024, 1, 31)) == date(2024, 4, 30)
    assert three_month.value_date(date(2024, 3, 4)) == date(2024, 3, 6)
    assert three_month.fixing_date(date(2024, 3, 6)) == date(2024, 3, 4)


def test_clone_changes_only_the_curve(evaluation_date, flat_curve):
    curve = flat_curve(evaluation_date, 0.03)
    index = euribor("6M")
    clone = index.clone(Handle(curve))

    assert not index.has_forwarding_curve()
    assert clone.has_forwarding_curve()
    assert clone.name == index.name
    assert clone.maturity_date(date(2024, 3, 6)) == index.maturity_date(date(2024, 3, 6))


def test_forecast_fixing(simple_curve):
    index = euribor("3M", Handle(simple_curve(date(2024, 3, 6), 0.035)))

    assert index.forecast_fixing(date(2024, 3, 4)) == pytest.approx(0.035, abs=1e-14)


def test_swap_index_picks_its_ibor_tenor():
    assert euribor_swap_isda_fix_a("1Y").ibor_index.tenor == Period(3, TimeUnit.MONTHS)
    assert euribor_swap_isda_fix_a("10Y").ibor_index.tenor == Period(6, TimeUnit.MONTHS)
    assert euribor_swap_isda_fix_a("5Y").fixing_days == 2


def test_swap_index_fixing_matches_swap_helper(context, evaluation_date, flat_curve):
    forwarding = Handle(flat_curve(evaluation_date, 0.025))
    swap_index = euribor_swap_isda_fix_a("5Y", forwarding)
    helper = SwapRateHelper.from_swap_index(0.025, swap_index, context=context)
    helper.set_term_structure(flat_curve(evaluation_date, 0.025))

    assert swap_index.forecast_fixing(evaluation_date) == pytest.approx(
        helper.implied_quote(), abs=1e-14
    )


def test_underlying_swap_is_flat_at_its_fair_rate(evaluation_date, flat_curve):
    curve = flat_curve(evaluation_date, 0.025)
    swap_index = euribor_swap_isda_fix_a("5Y", Handle(curve))
    fair = swap_index.underlying_swap(evaluation_date).fair_rate(curve)

    swap = swap_index.underlying_swap(evaluation_date, fixed_rate=fair)

    assert swap.fixed_rate == fair
    assert swap.fixed_leg_npv(curve) == pytest.approx(swap.floating_leg_npv(curve), abs=1e-14)
