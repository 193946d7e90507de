from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import json
import logging
import re
import sys

from lunarcal.core.errors import LunarCalError
from lunarcal.engines.converter import check_solar

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    # raises InvalidDate (a ValueError) for days the calendar does not have
    y, m, d = map(int, s.split("-"))
    return check_solar(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import lunarcal
    from lunarcal.attributes.registry import attribute_names

    p = argparse.ArgumentParser(prog="lunarcal day", description="Gregorian -> lunar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[],
                   help=f"attribute name (repeatable): {', '.join(attribute_names())}")
    args = p.parse_args(argv)

    info = lunarcal.day_info(_parse_ymd(args.date), attributes=tuple(args.attr), debug=args.debug)
    t = info.lunar
    print(f"{info.civil_date}  农历{t}  {t.ganzhi}年 属{t.animal}")
    for k, v in (info.attributes or {}).items():
        print(f"  {k}: {v}")
    if info.debug:
        for k, v in info.debug.items():
            print(f"  [debug] {k}: {v}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    import lunarcal

    p = argparse.ArgumentParser(prog="lunarcal solar", description="Lunar date -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="the date is in the leap month")
    args = p.parse_args(argv)

    print(lunarcal.lunar_to_solar(args.year, args.month, args.day, args.leap).isoformat())
    return 0


def cmd_months(argv: list[str]) -> int:
    import lunarcal

    p = argparse.ArgumentParser(prog="lunarcal months", description="List the months of a lunar year")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    for rec in lunarcal.months_in_year(args.year):
        print(f"{rec['name']:<4}\t{rec['days']}\t{rec['first_date']} .. {rec['last_date']}")
    return 0


def cmd_upcoming(argv: list[str]) -> int:
    from lunarcal.birthdays.records import Birthday
    from lunarcal.birthdays.stats import countdown_label, sort_by_countdown, this_month_count, today_count, upcoming_count

    p = argparse.ArgumentParser(prog="lunarcal upcoming", description="Birthdays from a JSON export, soonest first")
    p.add_argument("file", help="JSON list of birthday records")
    p.add_argument("--today", type=_parse_ymd, default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--limit", type=int, default=None)
    args = p.parse_args(argv)

    with open(args.file, encoding="utf-8") as f:
        raw = json.load(f)
    if isinstance(raw, dict):
        # API responses wrap the list as {"success": ..., "data": [...]}
        raw = raw.get("data", [])
    records = [Birthday.from_dict(r) for r in raw]
    logger.info("loaded %d records from %s", len(records), args.file)

    today = args.today or date.today()
    for b in sort_by_countdown(records, today)[:args.limit]:
        cd = countdown_label(b.days_until(today))
        print(f"{b.avatar} {b.name}\t{b.describe()}\t{cd.text}")
    print(f"this month: {this_month_count(records, today)}  "
          f"within 7 days: {upcoming_count(records, today)}  today: {today_count(records, today)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `lunarcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        try:
            return cmd_day(argv)
        except LunarCalError as e:
            print(f"lunarcal: error: {e}", file=sys.stderr)
            return 2

    p = argparse.ArgumentParser(prog="lunarcal", description="Chinese lunar calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian -> lunar day label")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    sub.add_parser("solar", help="Lunar date -> Gregorian date")
    sub.add_parser("months", help="List the months of a lunar year")
    sub.add_parser("upcoming", help="Birthday countdown from a JSON export")

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "day":
            day_argv = [args.date]
            if args.debug:
                day_argv += ["--debug"]
            for a in args.attr:
                day_argv += ["--attr", a]
            day_argv += rest
            return cmd_day(day_argv)

        if args.cmd == "solar":
            return cmd_solar(rest)

        if args.cmd == "months":
            return cmd_months(rest)

        if args.cmd == "upcoming":
            return cmd_upcoming(rest)

        if args.cmd == "pretty-month":
            return _run_module_main("lunarcal.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "lunarcal.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except LunarCalError as e:
        print(f"lunarcal: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
