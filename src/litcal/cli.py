from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def format_day(r) -> str:
    line = f"{r.date.isoformat()}  {r.primary.name}  [{r.primary.rank.value}, {r.color.value}, {r.season.value}]"
    if r.note:
        line += f"  ({r.note})"
    return line


def cmd_day(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal day", description="Resolve the observance(s) of a Gregorian date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="tlh")
    p.add_argument("--debug", action="store_true", help="show the temporal day, fixed candidates and rule")
    p.add_argument("--attr", action="append", default=[], choices=litcal.list_attributes(),
                   help="attribute name (repeatable)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    r = litcal.resolve_date(d, calendar=args.calendar, attributes=tuple(args.attr))
    print(format_day(r))
    for c in r.commemorations:
        print(f"  commemorated: {c.name}  [{c.rank.value}, {c.source.value}]")
    if r.attributes:
        for k, v in r.attributes.items():
            print(f"  {k} = {v}")
    if args.debug:
        ex = litcal.explain(d, calendar=args.calendar)
        print(f"  temporal: {ex['temporal']}")
        print(f"  rule: {ex['rule']}")
    return 0


def cmd_range(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal range", description="Resolve every date in an inclusive range")
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("end", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="tlh")
    p.add_argument("--workers", type=int, default=None, help="resolve dates on a thread pool")
    args = p.parse_args(argv)

    for r in litcal.resolve_range(_parse_ymd(args.start), _parse_ymd(args.end),
                                  calendar=args.calendar, workers=args.workers):
        print(format_day(r))
    return 0


def cmd_upcoming(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal upcoming", description="List the next feasts (rank Feast or higher)")
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("--count", type=int, default=10)
    p.add_argument("--calendar", default="tlh")
    args = p.parse_args(argv)

    for r in litcal.upcoming_feasts(_parse_ymd(args.start), args.count, calendar=args.calendar):
        print(format_day(r))
    return 0


def cmd_easter(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal easter", description="Gregorian Easter Sunday for a year or range")
    p.add_argument("year", type=int)
    p.add_argument("end_year", type=int, nargs="?", default=None)
    args = p.parse_args(argv)

    end = args.year if args.end_year is None else args.end_year
    for y, d in litcal.easter_range(args.year, end).items():
        print(f"{y}  {d.isoformat()}")
    return 0


def cmd_holy_days(argv: list[str]) -> int:
    import litcal

    p = argparse.ArgumentParser(prog="litcal holy-days", description="Holy days of a civil year")
    p.add_argument("year", type=int)
    p.add_argument("--moveable", action="store_true", help="list the full moveable-feast table instead")
    args = p.parse_args(argv)

    table = litcal.all_moveable_feasts(args.year) if args.moveable else litcal.all_holy_days(args.year)
    w = max(len(n) for n in table)
    for name, d in table.items():
        print(f"{name.ljust(w)}  {d.isoformat()}  {d.strftime('%a')}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] in ("-v", "--verbose"):
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        argv = argv[1:]

    # Shorthand: `litcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="litcal", description="Western liturgical calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging (must come first)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Resolve one date", add_help=False)
    sub.add_parser("range", help="Resolve an inclusive date range", add_help=False)
    sub.add_parser("upcoming", help="List upcoming feasts", add_help=False)
    sub.add_parser("easter", help="Easter Sunday for a year or range of years", add_help=False)
    sub.add_parser("holy-days", help="Holy days of a civil year", add_help=False)

    # diagnostics
    sub.add_parser("pretty-month", help="Print a month grid with colours and ranks (diagnostics)")
    sub.add_parser("easter-table", help="Print a moveable-feast table over years (diagnostics)")
    sub.add_parser("easter-scatter", help="Scatter plot of Easter dates (needs numpy, matplotlib)")
    sub.add_parser("season-check", help="Check the season partition over years (diagnostics)")

    args, rest = p.parse_known_args(argv)

    commands = {
        "day": cmd_day,
        "range": cmd_range,
        "upcoming": cmd_upcoming,
        "easter": cmd_easter,
        "holy-days": cmd_holy_days,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    tool_map = {
        "pretty-month": "litcal.diagnostics.pretty_month",
        "easter-table": "litcal.diagnostics.easter_table",
        "easter-scatter": "litcal.diagnostics.easter_scatter",
        "season-check": "litcal.diagnostics.season_check",
    }
    if args.cmd in tool_map:
        return _run_module_main(tool_map[args.cmd], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
