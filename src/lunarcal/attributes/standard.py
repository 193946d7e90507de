from __future__ import annotations
from typing import Any, Dict

from ..core.types import DayInfo
from .registry import attribute

@attribute("weekday")
def weekday(info: DayInfo) -> Dict[str, Any]:
    # 0=Mon..6=Sun
    return {"weekday": info.civil_date.weekday()}

@attribute("sexagenary_year")
def sexagenary_year(info: DayInfo) -> Dict[str, Any]:
    t = info.lunar
    return {
        "ganzhi": t.ganzhi,
        "animal": t.animal,
        "stem_index": (t.year - 4) % 10,
        "branch_index": (t.year - 4) % 12,
    }

@attribute("constellation")
def constellation(info: DayInfo) -> Dict[str, Any]:
    from ..birthdays.arithmetic import zodiac_sign
    d = info.civil_date
    return {"constellation": zodiac_sign(d.month, d.day)}

@attribute("chinese_text")
def chinese_text(info: DayInfo) -> Dict[str, Any]:
    t = info.lunar
    return {"year_cn": t.year_name, "month_cn": t.month_name, "day_cn": t.day_name}
