from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import litcal


DEFAULT_COLUMNS: List[Tuple[str, str]] = [
    ("Septuag.", "Septuagesima Sunday"),
    ("Ash Wed", "Ash Wednesday"),
    ("Easter", "Easter Sunday"),
    ("Ascens.", "Ascension"),
    ("Pentec.", "Pentecost (Whitsunday)"),
    ("Trinity", "Trinity Sunday"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_columns(arg: str) -> List[Tuple[str, str]]:
    """
    Parse the feast column list from CLI.
    Example:
      --feasts "Easter=Easter Sunday,GF=Good Friday"
    A bare feast name is used as its own header:
      --feasts "Ash Wednesday,Ascension"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            head, name = it.split("=", 1)
            out.append((head.strip(), name.strip()))
        else:
            out.append((it, it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a table of moveable feasts per year, plus Advent 1 and Sunday counts."
    )
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2035)
    p.add_argument(
        "--feasts",
        type=str,
        default="",
        help='Comma list like "Easter=Easter Sunday,GF=Good Friday" (default: standard 6).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    columns = parse_columns(args.feasts) if args.feasts else DEFAULT_COLUMNS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [h for h, _ in columns] + ["Advent 1", "Epi", "Tri"]
    colw = [5] + [max(10 if args.dates == "iso" else 6, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        feasts = litcal.all_moveable_feasts(Y)
        cells = [str(Y)]
        for _, name in columns:
            if name not in feasts:
                raise SystemExit(f"Unknown moveable feast '{name}'. Available: {list(feasts)}")
            cells.append(fmt(feasts[name]))
        cells.append(fmt(litcal.advent1(Y)))
        cells.append(str(litcal.epiphany_sunday_count(Y)))
        cells.append(str(litcal.trinity_sunday_count(Y)))
        print("  ".join(c.ljust(w) for c, w in zip(cells, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
