# tests/test_api.py

from datetime import date

import pytest

import lunarcal
from lunarcal.core.errors import InvalidLeapMonth, InvalidYear

def test_day_info_plain():
    info = lunarcal.day_info(date(2023, 3, 22))
    assert info.lunar.key() == (2023, 2, 1, True)
    assert info.attributes is None
    assert info.debug is None

def test_day_info_attributes():
    info = lunarcal.day_info(
        date(2023, 3, 22),
        attributes=("weekday", "sexagenary_year", "constellation", "chinese_text"),
    )
    attrs = info.attributes
    assert attrs["weekday"] == 2  # Wednesday
    assert attrs["ganzhi"] == "癸卯"
    assert attrs["animal"] == "兔"
    assert attrs["constellation"] == "白羊座"
    assert attrs["month_cn"] == "闰二月"
    assert attrs["day_cn"] == "初一"
    assert attrs["year_cn"] == "二〇二三"

def test_day_info_unknown_attribute():
    with pytest.raises(KeyError):
        lunarcal.day_info(date(2023, 3, 22), attributes=("nope",))

def test_day_info_debug():
    info = lunarcal.day_info(date(1900, 1, 31), debug=True)
    assert info.debug["offset"] == 0
    assert info.debug["lunar"] == (1900, 1, 1, False)

def test_to_gregorian():
    t = lunarcal.solar_to_lunar(2025, 8, 1)
    assert lunarcal.to_gregorian(t) == date(2025, 8, 1)
    assert lunarcal.to_gregorian(lunarcal.LunarDate(2023, 2, 1, True)) == date(2023, 3, 22)

def test_months_in_year():
    rows = lunarcal.months_in_year(2023)
    assert len(rows) == 13
    leap = rows[2]
    assert (leap["M"], leap["is_leap_month"], leap["name"]) == (2, True, "闰二月")
    assert (leap["first_date"], leap["last_date"]) == (date(2023, 3, 22), date(2023, 4, 19))
    assert [r["linear_month"] for r in rows] == list(range(13))
    assert len(lunarcal.months_in_year(2024)) == 12

def test_days_in_month():
    rows = lunarcal.days_in_month(2023, 2, is_leap_month=True)
    assert len(rows) == 29
    assert rows[0]["date"] == date(2023, 3, 22)
    assert rows[-1]["day_name"] == "廿九"
    assert rows[-1]["date"] == date(2023, 4, 19)

def test_month_navigation():
    assert lunarcal.next_month(2023, 2) == {"Y": 2023, "M": 2, "is_leap_month": True}
    assert lunarcal.next_month(2023, 2, is_leap_month=True) == {"Y": 2023, "M": 3, "is_leap_month": False}
    assert lunarcal.prev_month(2023, 3) == {"Y": 2023, "M": 2, "is_leap_month": True}
    assert lunarcal.prev_month(2023, 1) == {"Y": 2022, "M": 12, "is_leap_month": False}
    assert lunarcal.next_month(2022, 12) == {"Y": 2023, "M": 1, "is_leap_month": False}
    with pytest.raises(InvalidLeapMonth):
        lunarcal.next_month(2024, 2, is_leap_month=True)
    with pytest.raises(InvalidYear):
        lunarcal.next_month(2100, 12)
    with pytest.raises(InvalidYear):
        lunarcal.prev_month(1900, 1)

def test_month_days_helpers():
    assert lunarcal.new_year_day(2024) == date(2024, 2, 10)
    assert lunarcal.first_day_of_month(2026, 1) == date(2026, 2, 17)
    assert lunarcal.last_day_of_month(2026, 1) == date(2026, 3, 18)
    b = lunarcal.month_bounds(2023, 2, is_leap_month=True)
    assert (b["first_date"], b["last_date"]) == (date(2023, 3, 22), date(2023, 4, 19))

def test_public_surface():
    assert lunarcal.leap_month(2023) == 2
    assert lunarcal.zodiac_animal(2024) == "龙"
    assert lunarcal.days_until_next_occurrence(lunarcal.MonthDay(1, 1, True), date(2026, 2, 17)) == 0
    assert lunarcal.EPOCH == date(1900, 1, 31)
