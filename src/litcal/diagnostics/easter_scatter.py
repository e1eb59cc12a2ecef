#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Tuple, Optional, List

import argparse

import litcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "litcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "litcal[diagnostics]"') from e


def days_since_equinox(d: date) -> int:
    """Days since the computus equinox, with Mar 21 = 0."""
    return (d - date(d.year, 3, 21)).days


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 12.0


def build_series(np, feast: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(days_since_equinox(litcal.all_moveable_feasts(int(Y))[feast]))
    return years, y


def histogram(np, y) -> Dict[int, int]:
    """Occurrences per offset; Easter spans offsets 1..35 (Mar 22..Apr 25)."""
    values, counts = np.unique(y.astype(int), return_counts=True)
    return {int(v): int(c) for v, c in zip(values, counts)}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Easter-derived feast dates over the years.")
    p.add_argument("--start-year", type=int, default=1583)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    p.add_argument("--with-pentecost", action="store_true", help="Also plot Pentecost.")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "Easter Sunday": Style("Easter", "tab:blue", "o", size=10),
    }
    if args.with_pentecost:
        styles["Pentecost (Whitsunday)"] = Style("Pentecost", "tab:red", "_", size=16)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Days after March 21")
    ax.set_title("Moveable feast dates (Gregorian computus)")

    for feast, st in styles.items():
        x, y = build_series(np, feast, args.start_year, args.end_year)
        ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, alpha=0.45, label=st.label)
        if feast == "Easter Sunday":
            h = histogram(np, y)
            print(f"Easter offsets {min(h)}..{max(h)}; most frequent {max(h, key=h.get)}")

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
