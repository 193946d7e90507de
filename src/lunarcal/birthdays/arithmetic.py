"""
lunarcal.birthdays.arithmetic
-----------------------------
Countdown, age and Western zodiac for recurring month/day dates.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from lunarcal.core.errors import InvalidDay
from lunarcal.core.types import MonthDay
from lunarcal.engines import table
from lunarcal.engines.converter import lunar_to_solar

logger = logging.getLogger(__name__)

# (name, last month, last day), in calendar order
_SIGNS = (
    ("摩羯座", 1, 19),
    ("水瓶座", 2, 18),
    ("双鱼座", 3, 20),
    ("白羊座", 4, 19),
    ("金牛座", 5, 20),
    ("双子座", 6, 21),
    ("巨蟹座", 7, 22),
    ("狮子座", 8, 22),
    ("处女座", 9, 22),
    ("天秤座", 10, 23),
    ("天蝎座", 11, 22),
    ("射手座", 12, 21),
    ("摩羯座", 12, 31),
)


def _solar_occurrence(year: int, md: MonthDay) -> date:
    # Days past the month's end roll into the next month (Feb 29 -> Mar 1).
    return date(year, md.month, 1) + timedelta(days=md.day - 1)


def _lunar_occurrence(year: int, md: MonthDay) -> date:
    try:
        return lunar_to_solar(year, md.month, md.day, False)
    except InvalidDay:
        last = table.month_days(year, md.month)
        logger.debug("lunar %d-%02d-%02d does not exist, using day %d", year, md.month, md.day, last)
        return lunar_to_solar(year, md.month, min(md.day, last), False)


def occurrence_in(year: int, md: MonthDay) -> date:
    """Gregorian date of `md` counted in `year` (lunar year for lunar dates)."""
    if md.lunar:
        return _lunar_occurrence(year, md)
    return _solar_occurrence(year, md)


def next_occurrence(md: MonthDay, today: Optional[date] = None) -> date:
    """First occurrence of `md` on or after `today`."""
    if today is None:
        today = date.today()
    d = occurrence_in(today.year, md)
    if d < today:
        d = occurrence_in(today.year + 1, md)
    return d


def days_until_next_occurrence(md: MonthDay, today: Optional[date] = None) -> int:
    """Whole days from `today` to the next occurrence; 0 means today."""
    if today is None:
        today = date.today()
    return (next_occurrence(md, today) - today).days


def age(birth: date, today: Optional[date] = None) -> int:
    if today is None:
        today = date.today()
    years = today.year - birth.year
    if (today.month, today.day) < (birth.month, birth.day):
        years -= 1
    return years


def zodiac_sign(month: int, day: int) -> str:
    """Western zodiac sign (Chinese name) for a Gregorian month/day."""
    for name, m, d in _SIGNS:
        if (month, day) <= (m, d):
            return name
    return _SIGNS[-1][0]
