"""Calendars, periods, schedules and futures dates."""

from datetime import date

import pytest

from yieldhelpers.business_calendar import (
    is_asx_date,
    is_imm_date,
    next_asx_date,
    next_imm_date,
    next_wednesday,
    previous_wednesday,
)
from yieldhelpers.conventions import (
    ACT_360,
    TARGET,
    UNITED_KINGDOM,
    UNITED_STATES,
    BusinessDayAdjustment,
    DateGeneration,
    Frequency,
    Period,
    TimeUnit,
    get_calendar,
    get_day_count_convention,
)
from yieldhelpers.schedule.generator import make_schedule


def test_period_parsing():
    assert Period.parse("3M") == Period(3, TimeUnit.MONTHS)
    assert Period.parse("10y") == Period(10, TimeUnit.YEARS)
    assert str(Period(2, TimeUnit.WEEKS)) == "2W"
    assert -Period(1, TimeUnit.DAYS) == Period(-1, TimeUnit.DAYS)
    assert Frequency.SEMIANNUAL.period() == Period(6, TimeUnit.MONTHS)
    with pytest.raises(ValueError):
        Period.parse("3Q")


def test_target_easter_adjustment():
    # Good Friday and Easter Monday 2024 are TARGET holidays
    assert TARGET.adjust(date(2024, 3, 29)) == date(2024, 4, 2)
    assert TARGET.adjust(date(2024, 3, 29), BusinessDayAdjustment.PRECEDING) == date(2024, 3, 28)


def test_end_of_month_advance():
    result = TARGET.advance(
        date(2024, 1, 31), "1M", BusinessDayAdjustment.MODIFIED_FOLLOWING, end_of_month=True
    )
    assert result == date(2024, 2, 29)


def test_joint_calendar():
    joint = UNITED_STATES.join(UNITED_KINGDOM)

    assert joint.name == "USNY+UK"
    assert UNITED_KINGDOM.is_business_day(date(2024, 7, 4))
    assert not joint.is_business_day(date(2024, 7, 4))
    assert joint.advance(date(2024, 7, 3), "1D") == date(2024, 7, 5)


def test_registries():
    assert get_calendar("target") is TARGET
    assert get_calendar("GBLO") is UNITED_KINGDOM
    assert get_calendar("US") is UNITED_STATES
    assert get_day_count_convention("ACT/360") is ACT_360
    assert get_day_count_convention(" actual/360 ") is ACT_360
    with pytest.raises(ValueError):
        get_calendar("MARS")


def test_quarterly_schedule():
    schedule = make_schedule(date(2024, 3, 6), date(2025, 3, 6), "3M", TARGET)

    assert schedule.dates == [
        date(2024, 3, 6),
        date(2024, 6, 6),
        date(2024, 9, 6),
        date(2024, 12, 6),
        date(2025, 3, 6),
    ]
    assert [p.payment_date for p in schedule] == schedule.dates[1:]
    assert not any(p.is_stub for p in schedule)


def test_backward_schedule_has_short_front_stub():
    schedule = make_schedule(
        date(2024, 3, 6), date(2025, 1, 6), "6M", TARGET, rule=DateGeneration.BACKWARD
    )

    assert schedule.dates == [date(2024, 3, 6), date(2024, 7, 8), date(2025, 1, 6)]
    assert schedule.periods[0].is_stub


def test_imm_dates():
    assert is_imm_date(date(2020, 3, 18))
    assert not is_imm_date(date(2020, 3, 19))
    assert not is_imm_date(date(2020, 4, 15), main_cycle=True)
    assert next_imm_date(date(2020, 3, 18), main_cycle=False) == date(2020, 4, 15)
    assert next_imm_date(date(2020, 3, 18)) == date(2020, 6, 17)


def test_asx_dates():
    assert is_asx_date(date(2020, 3, 13))
    assert not is_asx_date(date(2020, 3, 20))
    assert next_asx_date(date(2020, 3, 13)) == date(2020, 6, 12)


def test_wednesdays():
    assert next_wednesday(date(2024, 3, 6)) == date(2024, 3, 13)
    assert next_wednesday(date(2024, 3, 4)) == date(2024, 3, 6)
    assert previous_wednesday(date(2024, 3, 6)) == date(2024, 3, 6)
    assert previous_wednesday(date(2024, 3, 5)) == date(2024, 2, 28)
