from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional

@dataclass(frozen=True)
class LunarDate:
    year: int
    month: int
    day: int
    is_leap_month: bool = False
    solar: Optional[date] = field(default=None, compare=False)  # Gregorian input, if converted from one

    @property
    def month_name(self) -> str:
        from lunarcal.attributes.names import month_name
        return month_name(self.month, self.is_leap_month)

    @property
    def day_name(self) -> str:
        from lunarcal.attributes.names import day_name
        return day_name(self.day)

    @property
    def year_name(self) -> str:
        from lunarcal.attributes.names import year_to_chinese
        return year_to_chinese(self.year)

    @property
    def animal(self) -> str:
        from lunarcal.attributes.names import zodiac_animal
        return zodiac_animal(self.year)

    @property
    def ganzhi(self) -> str:
        from lunarcal.attributes.names import ganzhi_year
        return ganzhi_year(self.year)

    def key(self) -> tuple:
        """Numeric identity, ignoring the Gregorian pass-through."""
        return (self.year, self.month, self.day, self.is_leap_month)

    def __str__(self) -> str:
        return f"{self.year_name}年{self.month_name}{self.day_name}"

@dataclass(frozen=True)
class MonthInfo:
    month: int
    name: str
    is_leap: bool
    days: int

@dataclass(frozen=True)
class MonthDay:
    """Recurring month/day with the calendar it is counted in."""
    month: int
    day: int
    lunar: bool

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    lunar: LunarDate
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
