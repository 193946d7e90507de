"""Summary figures and list helpers over birthday records."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Literal, Optional

from lunarcal.core.errors import InvalidDate
from lunarcal.engines.converter import lunar_to_solar
from .records import Birthday

SOON_DAYS = 7


@dataclass(frozen=True)
class Countdown:
    text: str
    kind: Literal["today", "soon", "normal"]


def countdown_label(days: int) -> Countdown:
    if days == 0:
        return Countdown("今天生日！🎉", "today")
    if days <= SOON_DAYS:
        return Countdown(f"{days} 天后", "soon")
    return Countdown(f"{days} 天后", "normal")


def _today(today: Optional[date]) -> date:
    return date.today() if today is None else today


def this_month_count(records: Iterable[Birthday], today: Optional[date] = None) -> int:
    """Records whose birthday falls in the current Gregorian month."""
    today = _today(today)
    n = 0
    for b in records:
        _, m, d = b.birthday
        if b.lunar:
            try:
                m = lunar_to_solar(today.year, m, d, False).month
            except InvalidDate:
                # lunar day missing this year
                continue
        if m == today.month:
            n += 1
    return n


def upcoming_count(records: Iterable[Birthday], today: Optional[date] = None, *, window: int = SOON_DAYS) -> int:
    """Records due within `window` days, not counting today."""
    today = _today(today)
    return sum(1 for b in records if 0 < b.days_until(today) <= window)


def today_count(records: Iterable[Birthday], today: Optional[date] = None) -> int:
    today = _today(today)
    return sum(1 for b in records if b.days_until(today) == 0)


def sort_by_countdown(records: Iterable[Birthday], today: Optional[date] = None) -> List[Birthday]:
    today = _today(today)
    return sorted(records, key=lambda b: b.days_until(today))


def filter_records(
    records: Iterable[Birthday],
    *,
    relation: Optional[str] = None,
    query: str = "",
) -> List[Birthday]:
    """Keep records matching `relation` (None for all) whose name or notes contain `query`."""
    q = query.lower()
    out = []
    for b in records:
        if relation is not None and b.relation != relation:
            continue
        if q and q not in b.name.lower() and q not in b.notes.lower():
            continue
        out.append(b)
    return out


def relations(records: Iterable[Birthday]) -> List[str]:
    """Distinct non-empty relations in first-seen order."""
    seen: List[str] = []
    for b in records:
        if b.relation and b.relation not in seen:
            seen.append(b.relation)
    return seen
