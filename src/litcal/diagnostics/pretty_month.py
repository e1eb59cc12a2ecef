from __future__ import annotations

from datetime import date
import calendar as pycal
import argparse

import litcal


_COLOR_TAGS = {
    litcal.LiturgicalColor.WHITE: "W",
    litcal.LiturgicalColor.RED: "R",
    litcal.LiturgicalColor.VIOLET: "V",
    litcal.LiturgicalColor.BLACK: "B",
    litcal.LiturgicalColor.GREEN: "G",
}


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def day_mark(r: litcal.ResolvedDay) -> str:
    """Colour letter, then '*' for Feast or higher, '+' when something is commemorated."""
    mark = _COLOR_TAGS[r.color]
    if r.primary.rank >= litcal.Rank.FEAST:
        mark += "*"
    if r.commemorations:
        mark += "+"
    return mark


def gregorian_month_calendar(calendar: str, gy: int, gm: int, *, legend: bool = True) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])
    days = litcal.resolve_range(first, last, calendar=calendar)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.weekday()  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for r in days:
        wk.append(cell(f"{r.date.day:2d}", day_mark(r)))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    print_grid(f"{calendar} Gregorian month  {gy}-{gm:02d}", weeks)

    if legend:
        for r in days:
            if r.primary.rank >= litcal.Rank.FEAST or r.commemorations:
                line = f"{r.date.isoformat()}  {r.primary.name}  [{r.primary.rank.value}, {r.color.value}]"
                if r.note:
                    line += f"  ({r.note})"
                print(line)
        print()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian month grid with liturgical colour and rank marks."
    )
    p.add_argument("--calendar", default="tlh", help="tlh|temporal (default: tlh)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 3)")
    p.add_argument("--no-legend", action="store_true", help="Only print the grid.")
    args = p.parse_args(argv)

    if not args.greg:
        # sensible default demo: Lent into Holy Week
        gregorian_month_calendar(args.calendar, gy=2024, gm=3, legend=not args.no_legend)
        return 0

    gy, gm = args.greg
    gregorian_month_calendar(args.calendar, gy=gy, gm=gm, legend=not args.no_legend)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
