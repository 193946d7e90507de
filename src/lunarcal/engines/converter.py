"""
lunarcal.engines.converter
--------------------------
Gregorian <-> Chinese lunar date conversion by walking day offsets from
the 1900-01-31 epoch through the year table.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, List, Tuple

from lunarcal.core.errors import DateBeforeEpoch, InvalidDay, InvalidLeapMonth, InvalidYear
from lunarcal.core.types import LunarDate, MonthInfo
from lunarcal.engines import table
from lunarcal.engines.table import EPOCH, MAX_YEAR, MIN_YEAR


def day_offset(d: date) -> int:
    """Days elapsed since EPOCH (negative before it)."""
    return (d - EPOCH).days


def _iter_months(year: int) -> Iterator[Tuple[int, bool, int]]:
    """Yield (month, is_leap, days) in chronological order for lunar `year`."""
    enc = table.encoding(year)
    for m in range(1, 13):
        yield m, False, enc.month_days(m)
        if m == enc.leap_month:
            yield m, True, enc.leap_days


def check_solar(year: int, month: int, day: int) -> date:
    if year < MIN_YEAR:
        raise InvalidYear(f"year {year} is before {MIN_YEAR}")
    n = table.gregorian_month_days(year, month)
    if not (1 <= day <= n):
        raise InvalidDay(f"day {day} outside 1..{n} for {year}-{month:02d}")
    return date(year, month, day)


# ---------------------------------------------------------
# Forward: Gregorian to lunar
# ---------------------------------------------------------

def solar_to_lunar(year: int, month: int, day: int) -> LunarDate:
    """
    Convert a Gregorian date to its lunar date.

    Raises DateBeforeEpoch before 1900-01-31 and InvalidYear past the last
    day of lunar year 2100.
    """
    d = check_solar(year, month, day)
    offset = day_offset(d)
    if offset < 0:
        raise DateBeforeEpoch(f"{d} is before the epoch {EPOCH}")
    if offset > table.last_offset():
        raise InvalidYear(f"{d} is past the end of lunar year {MAX_YEAR}")

    # 1. Whole lunar years
    lunar_year = MIN_YEAR
    while True:
        n = table.year_days(lunar_year)
        if offset < n:
            break
        offset -= n
        lunar_year += 1

    # 2. Whole months. An offset landing exactly on the end of ordinary
    #    month L belongs to leap month L, and one landing on the end of
    #    leap month L belongs to month L + 1.
    for lunar_month, is_leap, n in _iter_months(lunar_year):
        if offset < n:
            break
        offset -= n

    # 3. What is left is the 0-based day
    return LunarDate(
        year=lunar_year,
        month=lunar_month,
        day=offset + 1,
        is_leap_month=is_leap,
        solar=d,
    )


# ---------------------------------------------------------
# Inverse: lunar to Gregorian
# ---------------------------------------------------------

def lunar_offset(year: int, month: int, day: int, is_leap_month: bool = False) -> int:
    """Validated day offset of a lunar date from EPOCH."""
    table.check_year(year)
    table.check_month(month)
    leap = table.leap_month(year)
    if is_leap_month and leap != month:
        if leap:
            raise InvalidLeapMonth(f"lunar {year} has leap month {leap}, not {month}")
        raise InvalidLeapMonth(f"lunar {year} has no leap month")

    max_day = table.leap_month_days(year) if is_leap_month else table.month_days(year, month)
    if not (1 <= day <= max_day):
        raise InvalidDay(f"day {day} outside 1..{max_day} for lunar {year}-{month:02d}"
                         f"{' (leap)' if is_leap_month else ''}")

    offset = table.year_start_offset(year)
    for m in range(1, month):
        offset += table.month_days(year, m)
        if m == leap:
            offset += table.leap_month_days(year)
    if is_leap_month:
        # the leap month follows its ordinary namesake
        offset += table.month_days(year, month)
    return offset + day - 1


def lunar_to_solar(year: int, month: int, day: int, is_leap_month: bool = False) -> date:
    """Convert a lunar date to the Gregorian date it falls on."""
    return EPOCH + timedelta(days=lunar_offset(year, month, day, is_leap_month))


# ---------------------------------------------------------
# Month listings
# ---------------------------------------------------------

def months_of_year(year: int) -> List[MonthInfo]:
    """
    All months of lunar `year` in order, the leap month (if any) right
    after its ordinary month. Recomputed on every call.
    """
    from lunarcal.attributes.names import month_name

    return [
        MonthInfo(month=m, name=month_name(m, is_leap), is_leap=is_leap, days=n)
        for m, is_leap, n in _iter_months(year)
    ]


def month_bounds(year: int, month: int, is_leap_month: bool = False) -> Tuple[date, date]:
    """First and last Gregorian day of a lunar month."""
    first = lunar_to_solar(year, month, 1, is_leap_month)
    n = table.leap_month_days(year) if is_leap_month else table.month_days(year, month)
    return first, first + timedelta(days=n - 1)
