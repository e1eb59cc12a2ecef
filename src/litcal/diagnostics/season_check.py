from __future__ import annotations

import argparse
from datetime import date, timedelta
from typing import List, Tuple

import litcal
from litcal.core.types import Season


def season_runs(lit_year: int, *, calendar: str = "temporal") -> List[Tuple[Season, date, date]]:
    """Contiguous (season, first, last) runs over one liturgical year."""
    a = litcal.year_anchors(lit_year)
    runs: List[Tuple[Season, date, date]] = []
    d = a.advent1
    while d < a.next_advent1:
        s = litcal.temporal_day(d, calendar=calendar).season
        if runs and runs[-1][0] is s:
            runs[-1] = (s, runs[-1][1], d)
        else:
            runs.append((s, d, d))
        d += timedelta(days=1)
    return runs


def check_year(lit_year: int) -> List[str]:
    """Problems found in the season partition of `lit_year` (empty when sound)."""
    runs = season_runs(lit_year)
    problems = []
    seasons = [s for s, _, _ in runs]
    if seasons != list(Season):
        problems.append(f"{lit_year}: season order {[s.value for s in seasons]}")
    return problems


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Check that seasons partition each liturgical year.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2040)
    p.add_argument("--show", action="store_true", help="Print the season runs of each year.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    bad = 0
    for Y in range(args.from_year, args.to_year + 1):
        if args.show:
            print(f"Liturgical year {Y}")
            for s, d0, d1 in season_runs(Y):
                print(f"  {s.value:<13} {d0.isoformat()} .. {d1.isoformat()}  ({(d1 - d0).days + 1} days)")
        for msg in check_year(Y):
            print(msg)
            bad += 1

    print(f"checked {args.to_year - args.from_year + 1} years, {bad} problem(s)")
    return 1 if bad else 0


if __name__ == "__main__":
    raise SystemExit(main())
