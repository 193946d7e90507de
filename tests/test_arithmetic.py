# tests/test_arithmetic.py

from datetime import date

import pytest

from lunarcal.birthdays.arithmetic import (
    age,
    days_until_next_occurrence,
    next_occurrence,
    occurrence_in,
    zodiac_sign,
)
from lunarcal.core.errors import InvalidYear
from lunarcal.core.types import MonthDay

TODAY = date(2026, 10, 19)

def test_solar_countdown_today_is_zero():
    assert days_until_next_occurrence(MonthDay(10, 19, False), TODAY) == 0

def test_solar_countdown_tomorrow_is_one():
    assert days_until_next_occurrence(MonthDay(10, 20, False), TODAY) == 1

def test_solar_countdown_yesterday_wraps_to_next_year():
    assert days_until_next_occurrence(MonthDay(10, 18, False), TODAY) == 364
    assert next_occurrence(MonthDay(10, 18, False), TODAY) == date(2027, 10, 18)

def test_solar_countdown_new_year_wrap():
    assert days_until_next_occurrence(MonthDay(1, 1, False), date(2026, 12, 31)) == 1

def test_feb_29_rolls_over_in_common_years():
    assert occurrence_in(2026, MonthDay(2, 29, False)) == date(2026, 3, 1)
    assert occurrence_in(2028, MonthDay(2, 29, False)) == date(2028, 2, 29)
    assert days_until_next_occurrence(MonthDay(2, 29, False), date(2026, 2, 1)) == 28

def test_lunar_countdown():
    spring = MonthDay(1, 1, True)
    assert days_until_next_occurrence(spring, date(2026, 2, 17)) == 0
    assert days_until_next_occurrence(spring, date(2026, 2, 16)) == 1
    # 2027 spring festival is 2027-02-06
    assert days_until_next_occurrence(spring, date(2026, 2, 18)) == 353

def test_lunar_countdown_this_year():
    # lunar 9/15 of 2026 is 2026-10-24
    assert days_until_next_occurrence(MonthDay(9, 15, True), TODAY) == 5

def test_lunar_missing_day_falls_back_to_month_end():
    # 2026 second month has 29 days: 2/29 is 2026-04-16
    md = MonthDay(2, 30, True)
    assert occurrence_in(2026, md) == date(2026, 4, 16)
    assert days_until_next_occurrence(md, date(2026, 3, 1)) == 46
    # 2023 second month has 30 days
    assert occurrence_in(2023, md) == date(2023, 3, 21)

def test_lunar_countdown_ignores_leap_month():
    # the record stores month 2 only, so 2023 resolves to the ordinary month
    assert next_occurrence(MonthDay(2, 1, True), date(2023, 3, 1)) == date(2024, 3, 10)

def test_countdown_out_of_table_range():
    with pytest.raises(InvalidYear):
        days_until_next_occurrence(MonthDay(1, 1, True), date(2101, 6, 1))

def test_countdown_defaults_to_today():
    today = date.today()
    d = days_until_next_occurrence(MonthDay(today.month, today.day, False))
    # 0, or 364/365 if the clock passed midnight after `today` was read
    assert d == 0 or date.today() != today

def test_age_boundaries():
    birth = date(1990, 5, 15)
    assert age(birth, date(2026, 5, 15)) == 36
    assert age(birth, date(2026, 5, 14)) == 35
    assert age(birth, date(2026, 12, 31)) == 36

def test_age_leap_day_birth():
    birth = date(2000, 2, 29)
    assert age(birth, date(2026, 2, 28)) == 25
    assert age(birth, date(2026, 3, 1)) == 26

@pytest.mark.parametrize("month, day, sign", [
    (1, 1, "摩羯座"),
    (1, 19, "摩羯座"),
    (1, 20, "水瓶座"),
    (2, 18, "水瓶座"),
    (2, 19, "双鱼座"),
    (3, 21, "白羊座"),
    (6, 22, "巨蟹座"),
    (8, 23, "处女座"),
    (10, 24, "天蝎座"),
    (12, 21, "射手座"),
    (12, 22, "摩羯座"),
    (12, 31, "摩羯座"),
])
def test_zodiac_sign(month, day, sign):
    assert zodiac_sign(month, day) == sign
