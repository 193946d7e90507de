# tests/test_records.py

from datetime import date

import pytest

from lunarcal.birthdays.records import Birthday, parse_ymd
from lunarcal.birthdays import stats
from lunarcal.core.errors import RecordError

TODAY = date(2026, 10, 19)

@pytest.fixture
def records():
    raw = [
        {"id": 1, "name": "Alice", "birthday": "1990-10-19", "lunar": 0, "relation": "朋友"},
        {"id": 2, "name": "Bob", "birthday": "1985-10-22", "lunar": 0, "relation": "同事", "notes": "likes tea"},
        {"id": 3, "name": "Carol", "birthday": "2001-10-26", "lunar": 0, "relation": "朋友"},
        {"id": 4, "name": "Dan", "birthday": "1970-12-01", "lunar": 0, "relation": "家人"},
        {"id": 5, "name": "妈妈", "birthday": "1965-09-15", "lunar": 1, "relation": "家人"},
    ]
    return [Birthday.from_dict(r) for r in raw]

def test_parse_ymd():
    assert parse_ymd("1990-10-19") == (1990, 10, 19)
    assert parse_ymd("1965-02-30", lunar=True) == (1965, 2, 30)
    for bad in ("1990-2-3", "19901019", "", None):
        with pytest.raises(RecordError):
            parse_ymd(bad)
    with pytest.raises(RecordError):
        parse_ymd("1990-02-30")
    with pytest.raises(RecordError):
        parse_ymd("1990-13-01", lunar=True)

def test_from_dict_requires_name_and_birthday():
    with pytest.raises(RecordError):
        Birthday.from_dict({"birthday": "1990-01-01"})
    with pytest.raises(RecordError):
        Birthday.from_dict({"name": "x"})

def test_from_dict_lunar_flag():
    assert Birthday.from_dict({"name": "a", "birthday": "1990-01-01", "lunar": True}).lunar
    assert Birthday.from_dict({"name": "a", "birthday": "1990-01-01", "lunar": "1"}).lunar
    assert not Birthday.from_dict({"name": "a", "birthday": "1990-01-01"}).lunar
    with pytest.raises(RecordError):
        Birthday.from_dict({"name": "a", "birthday": "1990-01-01", "lunar": "yes"})

def test_to_dict_round_trip():
    raw = {"id": 7, "name": "妈妈", "birthday": "1965-02-30", "lunar": 1,
           "relation": "家人", "phone": "123", "notes": "", "avatar_emoji": "🌸"}
    b = Birthday.from_dict(raw)
    assert b.to_dict() == raw
    assert Birthday.from_dict({"name": "a", "birthday": "1990-01-01"}).avatar == "🎂"

def test_describe():
    assert Birthday.from_dict({"name": "a", "birthday": "1965-02-30", "lunar": 1}).describe() == "农历 一九六五年 二月 三十"
    assert Birthday.from_dict({"name": "a", "birthday": "1990-01-05"}).describe() == "1990年1月5日"

def test_lunar_birth_date_and_age():
    b = Birthday.from_dict({"name": "a", "birthday": "2000-01-01", "lunar": 1})
    assert b.solar_birth_date == date(2000, 2, 5)
    assert b.age(date(2026, 2, 4)) == 25
    assert b.age(date(2026, 2, 5)) == 26
    assert Birthday.from_dict({"name": "a", "birthday": "1965-02-30", "lunar": 1}).solar_birth_date == date(1965, 4, 1)

def test_zodiac_sign_uses_solar_birth_date():
    assert Birthday.from_dict({"name": "a", "birthday": "2000-01-01", "lunar": 1}).zodiac_sign() == "水瓶座"
    assert Birthday.from_dict({"name": "a", "birthday": "2000-01-01"}).zodiac_sign() == "摩羯座"

def test_missing_lunar_day_uses_month_end():
    # lunar 2023-01 has 29 days; day 29 is 2023-02-19
    b = Birthday.from_dict({"name": "a", "birthday": "2023-01-30", "lunar": 1})
    assert b.solar_birth_date == date(2023, 2, 19)
    assert b.age(TODAY) == 3
    assert b.zodiac_sign() == "双鱼座"

def test_lunar_year_outside_table_rejected():
    for bad in ("1850-01-01", "2101-01-01"):
        with pytest.raises(RecordError):
            parse_ymd(bad, lunar=True)
        with pytest.raises(RecordError):
            Birthday.from_dict({"name": "a", "birthday": bad, "lunar": 1})
    # solar records are not tied to the table
    assert Birthday.from_dict({"name": "a", "birthday": "1850-01-01"}).age(TODAY) == 176

def test_days_until(records):
    assert [b.days_until(TODAY) for b in records] == [0, 3, 7, 43, 5]

def test_countdown_label():
    assert stats.countdown_label(0) == stats.Countdown("今天生日！🎉", "today")
    assert stats.countdown_label(7).kind == "soon"
    assert stats.countdown_label(8) == stats.Countdown("8 天后", "normal")

def test_summary_counts(records):
    assert stats.this_month_count(records, TODAY) == 4
    assert stats.upcoming_count(records, TODAY) == 3
    assert stats.today_count(records, TODAY) == 1

def test_this_month_count_skips_missing_lunar_day():
    # 2026 second lunar month has 29 days
    b = Birthday.from_dict({"name": "a", "birthday": "1965-02-30", "lunar": 1})
    assert stats.this_month_count([b], date(2026, 4, 1)) == 0

def test_sort_by_countdown(records):
    assert [b.name for b in stats.sort_by_countdown(records, TODAY)] == ["Alice", "Bob", "妈妈", "Carol", "Dan"]

def test_filter_records(records):
    assert [b.id for b in stats.filter_records(records, relation="朋友")] == [1, 3]
    assert [b.id for b in stats.filter_records(records, query="TEA")] == [2]
    assert [b.id for b in stats.filter_records(records, relation="家人", query="妈")] == [5]
    assert len(stats.filter_records(records)) == 5

def test_relations(records):
    assert stats.relations(records) == ["朋友", "同事", "家人"]
