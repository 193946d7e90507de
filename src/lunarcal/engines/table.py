"""
lunarcal.engines.table
----------------------
Static lunar calendar data for 1900..2100 and its low-level decoders.

Each year is packed into one integer:
  bits 0..3   leap month number (0: no leap month)
  bits 4..15  month 12..1 length flags (1: 30 days, 0: 29 days)
  bit 16      leap month length flag (1: 30 days, 0: 29 days)

Day offsets are counted from EPOCH (1900-01-31, lunar 1900-01-01).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from itertools import accumulate
from typing import Tuple

from lunarcal.core.errors import InvalidMonth, InvalidYear

MIN_YEAR = 1900
MAX_YEAR = 2100
EPOCH = date(1900, 1, 31)

LUNAR_INFO: Tuple[int, ...] = (
    0x04BD8, 0x04AE0, 0x0A570, 0x054D5, 0x0D260, 0x0D950, 0x16554, 0x056A0, 0x09AD0, 0x055D2,  # 1900-1909
    0x04AE0, 0x0A5B6, 0x0A4D0, 0x0D250, 0x1D255, 0x0B540, 0x0D6A0, 0x0ADA2, 0x095B0, 0x14977,  # 1910-1919
    0x04970, 0x0A4B0, 0x0B4B5, 0x06A50, 0x06D40, 0x1AB54, 0x02B60, 0x09570, 0x052F2, 0x04970,  # 1920-1929
    0x06566, 0x0D4A0, 0x0EA50, 0x06E95, 0x05AD0, 0x02B60, 0x186E3, 0x092E0, 0x1C8D7, 0x0C950,  # 1930-1939
    0x0D4A0, 0x1D8A6, 0x0B550, 0x056A0, 0x1A5B4, 0x025D0, 0x092D0, 0x0D2B2, 0x0A950, 0x0B557,  # 1940-1949
    0x06CA0, 0x0B550, 0x15355, 0x04DA0, 0x0A5B0, 0x14573, 0x052B0, 0x0A9A8, 0x0E950, 0x06AA0,  # 1950-1959
    0x0AEA6, 0x0AB50, 0x04B60, 0x0AAE4, 0x0A570, 0x05260, 0x0F263, 0x0D950, 0x05B57, 0x056A0,  # 1960-1969
    0x096D0, 0x04DD5, 0x04AD0, 0x0A4D0, 0x0D4D4, 0x0D250, 0x0D558, 0x0B540, 0x0B6A0, 0x195A6,  # 1970-1979
    0x095B0, 0x049B0, 0x0A974, 0x0A4B0, 0x0B27A, 0x06A50, 0x06D40, 0x0AF46, 0x0AB60, 0x09570,  # 1980-1989
    0x04AF5, 0x04970, 0x064B0, 0x074A3, 0x0EA50, 0x06B58, 0x05AC0, 0x0AB60, 0x096D5, 0x092E0,  # 1990-1999
    0x0C960, 0x0D954, 0x0D4A0, 0x0DA50, 0x07552, 0x056A0, 0x0ABB7, 0x025D0, 0x092D0, 0x0CAB5,  # 2000-2009
    0x0A950, 0x0B4A0, 0x0BAA4, 0x0AD50, 0x055D9, 0x04BA0, 0x0A5B0, 0x15176, 0x052B0, 0x0A930,  # 2010-2019
    0x07954, 0x06AA0, 0x0AD50, 0x05B52, 0x04B60, 0x0A6E6, 0x0A4E0, 0x0D260, 0x0EA65, 0x0D530,  # 2020-2029
    0x05AA0, 0x076A3, 0x096D0, 0x04AFB, 0x04AD0, 0x0A4D0, 0x1D0B6, 0x0D250, 0x0D520, 0x0DD45,  # 2030-2039
    0x0B5A0, 0x056D0, 0x055B2, 0x049B0, 0x0A577, 0x0A4B0, 0x0AA50, 0x1B255, 0x06D20, 0x0ADA0,  # 2040-2049
    0x14B63, 0x09370, 0x049F8, 0x04970, 0x064B0, 0x168A6, 0x0EA50, 0x06B20, 0x1A6C4, 0x0AAE0,  # 2050-2059
    0x092E0, 0x0D2E3, 0x0C960, 0x0D557, 0x0D4A0, 0x0DA50, 0x05D55, 0x056A0, 0x0A6D0, 0x055D4,  # 2060-2069
    0x052D0, 0x0A9B8, 0x0A950, 0x0B4A0, 0x0B6A6, 0x0AD50, 0x055A0, 0x0ABA4, 0x0A5B0, 0x052B0,  # 2070-2079
    0x0B273, 0x06930, 0x07337, 0x06AA0, 0x0AD50, 0x14B55, 0x04B60, 0x0A570, 0x054E4, 0x0D160,  # 2080-2089
    0x0E968, 0x0D520, 0x0DAA0, 0x16AA6, 0x056D0, 0x04AE0, 0x0A9D4, 0x0A4D0, 0x0D150, 0x0F252,  # 2090-2099
    0x0D520,  # 2100
)

_SOLAR_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class YearEncoding:
    """Unpacked form of one LUNAR_INFO entry."""
    leap_month: int
    leap_month_is_long: bool
    month_is_long: Tuple[bool, ...]  # index 0 is month 1

    def __post_init__(self) -> None:
        if not (0 <= self.leap_month <= 12):
            raise ValueError("leap_month must be in 0..12")
        if len(self.month_is_long) != 12:
            raise ValueError("month_is_long needs 12 flags")

    @classmethod
    def from_packed(cls, code: int) -> "YearEncoding":
        return cls(
            leap_month=code & 0xF,
            leap_month_is_long=bool(code & 0x10000),
            month_is_long=tuple(bool(code & (0x10000 >> m)) for m in range(1, 13)),
        )

    @property
    def leap_days(self) -> int:
        if self.leap_month == 0:
            return 0
        return 30 if self.leap_month_is_long else 29

    def month_days(self, month: int) -> int:
        return 30 if self.month_is_long[month - 1] else 29

    @property
    def days(self) -> int:
        return 348 + sum(self.month_is_long) + self.leap_days


_ENCODINGS: Tuple[YearEncoding, ...] = tuple(YearEncoding.from_packed(c) for c in LUNAR_INFO)

# _YEAR_START[i]: offset of lunar new year MIN_YEAR + i; the last entry closes 2100.
_YEAR_START: Tuple[int, ...] = tuple(accumulate((e.days for e in _ENCODINGS), initial=0))


def check_year(year: int) -> None:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidYear(f"lunar year {year} outside {MIN_YEAR}..{MAX_YEAR}")


def check_month(month: int) -> None:
    if not (1 <= month <= 12):
        raise InvalidMonth(f"month {month} outside 1..12")


def encoding(year: int) -> YearEncoding:
    check_year(year)
    return _ENCODINGS[year - MIN_YEAR]


def leap_month(year: int) -> int:
    """Leap month number of lunar `year`, 0 if there is none."""
    return encoding(year).leap_month


def leap_month_days(year: int) -> int:
    """Length of the leap month: 0, 29 or 30."""
    return encoding(year).leap_days


def month_days(year: int, month: int) -> int:
    """Length of ordinary lunar month `month` (29 or 30)."""
    enc = encoding(year)
    check_month(month)
    return enc.month_days(month)


def year_days(year: int) -> int:
    """Total days of lunar `year`, leap month included."""
    return encoding(year).days


def year_start_offset(year: int) -> int:
    """Day offset from EPOCH to the first day of lunar `year`."""
    check_year(year)
    return _YEAR_START[year - MIN_YEAR]


def last_offset() -> int:
    """Day offset of the last day of lunar MAX_YEAR."""
    return _YEAR_START[-1] - 1


def new_year_day(year: int) -> date:
    return EPOCH + timedelta(days=year_start_offset(year))


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def gregorian_month_days(year: int, month: int) -> int:
    check_month(month)
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _SOLAR_MONTH_DAYS[month - 1]
