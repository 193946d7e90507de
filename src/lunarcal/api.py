from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Any, Dict, List, Sequence

from .attributes.registry import compute_attributes
from .core.types import DayInfo, LunarDate
from .engines import converter, table


def day_info(
    d: date,
    *,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    lunar = converter.solar_to_lunar(d.year, d.month, d.day)
    info = DayInfo(civil_date=d, lunar=lunar, debug=explain(d) if debug else None)
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

def to_gregorian(t: LunarDate) -> date:
    return converter.lunar_to_solar(t.year, t.month, t.day, t.is_leap_month)

def explain(d: date) -> Dict[str, Any]:
    """Intermediate values of the solar -> lunar walk for `d`."""
    t = converter.solar_to_lunar(d.year, d.month, d.day)
    offset = converter.day_offset(d)
    year_start = table.year_start_offset(t.year)
    return {
        "offset": offset,
        "year_start_offset": year_start,
        "offset_in_year": offset - year_start,
        "year_days": table.year_days(t.year),
        "leap_month": table.leap_month(t.year),
        "lunar": t.key(),
    }

# ============================================================
# Month-level API
# ============================================================

def months_in_year(Y: int) -> List[Dict[str, Any]]:
    out = []
    for i, mi in enumerate(converter.months_of_year(Y)):
        first, last = converter.month_bounds(Y, mi.month, mi.is_leap)
        out.append({
            "Y": Y, "M": mi.month, "is_leap_month": mi.is_leap, "linear_month": i,
            "name": mi.name, "days": mi.days, "first_date": first, "last_date": last,
        })
    return out

def days_in_month(Y: int, M: int, *, is_leap_month: bool = False) -> List[Dict[str, Any]]:
    first, last = converter.month_bounds(Y, M, is_leap_month)
    rows = []
    d = first
    while d <= last:
        day = (d - first).days + 1
        rows.append({"date": d, "day": day, "day_name": LunarDate(Y, M, day, is_leap_month).day_name})
        d += timedelta(days=1)
    return rows

def month_bounds(Y: int, M: int, *, is_leap_month: bool = False) -> dict:
    first, last = converter.month_bounds(Y, M, is_leap_month)
    return {"Y": Y, "M": M, "is_leap_month": is_leap_month, "first_date": first, "last_date": last}

def _neighbour(Y: int, M: int, is_leap_month: bool, step: int) -> dict:
    # Validates the label before looking at its neighbours
    converter.lunar_offset(Y, M, 1, is_leap_month)
    months = [(Y, mi.month, mi.is_leap) for mi in converter.months_of_year(Y)]
    i = months.index((Y, M, is_leap_month)) + step
    if i < 0:
        prev = converter.months_of_year(Y - 1)[-1]
        return {"Y": Y - 1, "M": prev.month, "is_leap_month": prev.is_leap}
    if i >= len(months):
        table.check_year(Y + 1)
        return {"Y": Y + 1, "M": 1, "is_leap_month": False}
    y2, m2, l2 = months[i]
    return {"Y": y2, "M": m2, "is_leap_month": l2}

def prev_month(Y: int, M: int, *, is_leap_month: bool = False) -> dict:
    return _neighbour(Y, M, is_leap_month, -1)

def next_month(Y: int, M: int, *, is_leap_month: bool = False) -> dict:
    return _neighbour(Y, M, is_leap_month, +1)

def new_year_day(Y: int) -> date:
    return table.new_year_day(Y)

def first_day_of_month(Y: int, M: int, *, is_leap_month: bool = False) -> date:
    return converter.month_bounds(Y, M, is_leap_month)[0]

def last_day_of_month(Y: int, M: int, *, is_leap_month: bool = False) -> date:
    return converter.month_bounds(Y, M, is_leap_month)[1]
