"""
lunarcal.birthdays.records
--------------------------
Birthday records in their persisted shape.

A stored record keeps only (year, month, day, lunar flag). For a lunar
birthday that fell in a leap month the leap flag is not stored, so the
date reads back as the ordinary month of the same number.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Mapping, Optional, Tuple

from lunarcal.attributes.names import day_name, month_name, year_to_chinese
from lunarcal.core.errors import RecordError
from lunarcal.core.types import MonthDay
from lunarcal.engines import table
from lunarcal.engines.converter import lunar_to_solar
from . import arithmetic

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DEFAULT_AVATAR = "🎂"


def parse_ymd(s: str, *, lunar: bool = False) -> Tuple[int, int, int]:
    """
    Split a strict YYYY-MM-DD string. Solar dates must exist in the
    Gregorian calendar; lunar ones need a table year, month 1..12 and day 1..30.
    """
    if not isinstance(s, str) or not _DATE_RE.match(s):
        raise RecordError(f"birthday must be YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, s.split("-"))
    if lunar:
        if not (1 <= m <= 12 and 1 <= d <= 30):
            raise RecordError(f"invalid lunar birthday {s!r}")
        if not (table.MIN_YEAR <= y <= table.MAX_YEAR):
            raise RecordError(f"lunar birthday {s!r} outside {table.MIN_YEAR}..{table.MAX_YEAR}")
        return y, m, d
    try:
        date(y, m, d)
    except ValueError as e:
        raise RecordError(f"invalid birthday {s!r}: {e}") from e
    return y, m, d


def _lunar_flag(raw: Any) -> bool:
    if raw in (None, "", 0, "0", False):
        return False
    if raw in (1, "1", True):
        return True
    raise RecordError(f"lunar flag must be 0/1 or a bool, got {raw!r}")


@dataclass(frozen=True)
class Birthday:
    name: str
    birthday: Tuple[int, int, int]  # (year, month, day), lunar when `lunar` is set
    lunar: bool = False
    relation: str = ""
    phone: str = ""
    notes: str = ""
    avatar: str = DEFAULT_AVATAR
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Birthday":
        name = raw.get("name")
        if not name or not raw.get("birthday"):
            raise RecordError("name and birthday are required")
        lunar = _lunar_flag(raw.get("lunar"))
        rec = cls(
            name=str(name),
            birthday=parse_ymd(raw["birthday"], lunar=lunar),
            lunar=lunar,
            relation=raw.get("relation") or "",
            phone=raw.get("phone") or "",
            notes=raw.get("notes") or "",
            avatar=raw.get("avatar_emoji") or raw.get("avatar") or DEFAULT_AVATAR,
            id=raw.get("id"),
        )
        logger.debug("parsed birthday record %r", rec)
        return rec

    def to_dict(self) -> Dict[str, Any]:
        y, m, d = self.birthday
        out: Dict[str, Any] = {
            "name": self.name,
            "birthday": f"{y:04d}-{m:02d}-{d:02d}",
            "lunar": 1 if self.lunar else 0,
            "relation": self.relation,
            "phone": self.phone,
            "notes": self.notes,
            "avatar_emoji": self.avatar,
        }
        if self.id is not None:
            out["id"] = self.id
        return out

    @property
    def month_day(self) -> MonthDay:
        _, m, d = self.birthday
        return MonthDay(m, d, self.lunar)

    @property
    def solar_birth_date(self) -> date:
        """
        Gregorian birth date. Lunar birthdays are read as non-leap months,
        and a day 30 in a 29-day month falls back to day 29.
        """
        y, m, d = self.birthday
        if not self.lunar:
            return date(y, m, d)
        return lunar_to_solar(y, m, min(d, table.month_days(y, m)), False)

    def days_until(self, today: Optional[date] = None) -> int:
        return arithmetic.days_until_next_occurrence(self.month_day, today)

    def age(self, today: Optional[date] = None) -> int:
        return arithmetic.age(self.solar_birth_date, today)

    def zodiac_sign(self) -> str:
        d = self.solar_birth_date
        return arithmetic.zodiac_sign(d.month, d.day)

    def describe(self) -> str:
        y, m, d = self.birthday
        if self.lunar:
            return f"农历 {year_to_chinese(y)}年 {month_name(m)} {day_name(d)}"
        return f"{y}年{m}月{d}日"
