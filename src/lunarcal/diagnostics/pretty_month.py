from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import lunarcal


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    # CJK glyphs are two columns wide
    def fit(s: str) -> str:
        cols = sum(2 if ord(ch) > 0x2E7F else 1 for ch in s)
        return s + " " * max(w - cols, 0)
    return (fit(top), fit(bot))


def print_grid(title: str, first: date, cells: list[tuple[str, str]]) -> None:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "")] * first.weekday()  # Monday=0
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        wk += [cell("", "")] * (7 - len(wk))
        weeks.append(wk)

    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for w in weeks:
        print(" ".join(c[0] for c in w))
        print(" ".join(c[1] for c in w))
    print()


def lunar_month_calendar(Y: int, M: int, is_leap: bool) -> None:
    b = lunarcal.month_bounds(Y, M, is_leap_month=is_leap)
    d0, d1 = b["first_date"], b["last_date"]

    cells = [cell(row["day_name"], f"{row['date']:%m-%d}")
             for row in lunarcal.days_in_month(Y, M, is_leap_month=is_leap)]
    name = lunarcal.month_name(M, is_leap)
    print_grid(f"lunar {Y} {name}  ({d0} .. {d1})", d0, cells)


def gregorian_month_calendar(gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    cells = []
    d = first
    while d <= last:
        t = lunarcal.solar_to_lunar(d.year, d.month, d.day)
        # first day of a lunar month shows the month name instead
        bot = t.month_name if t.day == 1 else t.day_name
        cells.append(cell(f"{d.day:2d}", bot))
        d += timedelta(days=1)

    print_grid(f"Gregorian month  {gy}-{gm:02d}", first, cells)

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2023 2)")
    p.add_argument("--leap", action="store_true",
                   help="Print the leap instance of the lunar month.")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 2)")
    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        # sensible default demo
        lunar_month_calendar(2026, 1, False)
        gregorian_month_calendar(2026, 2)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(Y, M, args.leap)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
