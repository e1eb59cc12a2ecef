"""
litcal.engines.temporal
-----------------------
The moveable cycle (Temporale). Places any Gregorian date in its liturgical
year, season and named day, and derives the day's classification, colour,
rank and week-of-season.

Year resolution is two-step: civil year -> liturgical year -> anchors. A
liturgical year L runs from Advent 1 of civil year L up to (excluding)
Advent 1 of L + 1, so its Easter is easter(L + 1).
"""

from __future__ import annotations

import logging
import re
from datetime import date, timedelta
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

from litcal.core.types import DayType, LiturgicalColor, Rank, Season, TemporalDay, YearAnchors
from litcal.core.errors import RangeError
from litcal.core.time import SUNDAY, sunday_after, sunday_on_or_after
from litcal.engines import computus

log = logging.getLogger(__name__)

ADVENT_RULES = ("nov27", "christmas")
MAX_TRINITY_WEEK = 27

CHRISTMAS_DAY = "Christmas Day"
CIRCUMCISION = "Circumcision and Name of Jesus"
EPIPHANY_DAY = "Epiphany"
TRANSFIGURATION = "Transfiguration"

_FIXED_NAMES: Dict[Tuple[int, int], str] = {
    (12, 25): CHRISTMAS_DAY,
    (1, 1): CIRCUMCISION,
    (1, 6): EPIPHANY_DAY,
}

_PRINCIPAL_KEYWORDS = ("easter", "christmas", "epiphany", "ascension", "pentecost", "trinity sunday")
_SUNDAY_KEYWORDS = ("sunday", "advent", "lent", "transfiguration")
# ordinal Sunday names ("Epiphany 2", "Jubilate (Easter 3)") carry a numeral
_ORDINAL_RE = re.compile(r"\d")

_FEAST_RANK_DAYS = frozenset({
    "Invocabit (Lent 1)",
    "Reminiscere (Lent 2)",
    "Oculi (Lent 3)",
    "Laetare (Lent 4)",
    "Judica (Lent 5)",
    "Palmarum (Palm Sunday)",
    "Maundy Thursday",
    "Good Friday",
    "Holy Saturday",
})

_SEASON_COLORS = {
    Season.ADVENT: LiturgicalColor.VIOLET,
    Season.LENT: LiturgicalColor.VIOLET,
    Season.SEPTUAGESIMA: LiturgicalColor.VIOLET,
    Season.HOLY_WEEK: LiturgicalColor.VIOLET,
    Season.CHRISTMAS: LiturgicalColor.WHITE,
    Season.EASTER: LiturgicalColor.WHITE,
    Season.EPIPHANY: LiturgicalColor.GREEN,
    Season.TRINITY: LiturgicalColor.GREEN,
}


# ---------------------------------------------------------
# Liturgical year and its anchors
# ---------------------------------------------------------

def advent1(year: int, rule: str = "nov27") -> date:
    """
    First Sunday of Advent in civil year `year`.

    "nov27": the Sunday in Nov 27..Dec 3, searching forward from Nov 27.
    "christmas": four Sundays before the Sunday on/after Christmas Day.
    """
    if rule == "nov27":
        return sunday_on_or_after(date(year, 11, 27))
    if rule == "christmas":
        return sunday_on_or_after(date(year, 12, 25)) - timedelta(days=28)
    raise ValueError(f"Unknown advent rule '{rule}'. Available: {list(ADVENT_RULES)}")


def liturgical_year(d: date, rule: str = "nov27") -> int:
    """Civil year in which the liturgical year containing `d` began."""
    if d >= advent1(d.year, rule):
        return d.year
    return d.year - 1


@lru_cache(maxsize=512)
def year_anchors(lit_year: int, rule: str = "nov27") -> YearAnchors:
    """Season boundaries of liturgical year `lit_year`. Pure; cached by (year, rule)."""
    if lit_year >= computus.LAST_YEAR:
        raise RangeError(f"Liturgical year {lit_year} runs past {date.max}; its anchors cannot be represented")
    e = computus.easter(lit_year + 1)
    log.debug("anchors lit_year=%s rule=%s easter=%s", lit_year, rule, e)
    return YearAnchors(
        liturgical_year=lit_year,
        advent1=advent1(lit_year, rule),
        christmas=date(lit_year, 12, 25),
        epiphany=date(lit_year + 1, 1, 6),
        septuagesima=e + timedelta(days=computus.SEPTUAGESIMA),
        ash_wednesday=e + timedelta(days=computus.ASH_WEDNESDAY),
        palm_sunday=e + timedelta(days=computus.PALM_SUNDAY),
        easter=e,
        pentecost=e + timedelta(days=computus.PENTECOST),
        trinity_sunday=e + timedelta(days=computus.TRINITY_SUNDAY),
        next_advent1=advent1(lit_year + 1, rule),
    )


@lru_cache(maxsize=512)
def _moveable_names(lit_year: int) -> Dict[date, str]:
    return {d: name for name, d in computus.all_moveable_feasts(lit_year + 1).items()}


def clear_caches() -> None:
    year_anchors.cache_clear()
    _moveable_names.cache_clear()


def season_bounds(a: YearAnchors) -> Tuple[Tuple[Season, date, date], ...]:
    """(season, start, end) half-open intervals covering [advent1, next_advent1)."""
    starts = (
        (Season.ADVENT, a.advent1),
        (Season.CHRISTMAS, a.christmas),
        (Season.EPIPHANY, a.epiphany),
        (Season.SEPTUAGESIMA, a.septuagesima),
        (Season.LENT, a.ash_wednesday),
        (Season.HOLY_WEEK, a.palm_sunday),
        (Season.EASTER, a.easter),
        (Season.TRINITY, a.pentecost),
    )
    ends = [s for _, s in starts[1:]] + [a.next_advent1]
    return tuple((season, start, end) for (season, start), end in zip(starts, ends))


def season_of(d: date, a: YearAnchors) -> Season:
    if not a.advent1 <= d < a.next_advent1:
        raise ValueError(f"{d} lies outside liturgical year {a.liturgical_year}")
    for season, start, end in season_bounds(a):
        if start <= d < end:
            return season
    raise AssertionError("season partition is exhaustive")


# ---------------------------------------------------------
# Counting helpers (civil year, as a persistence layer sees them)
# ---------------------------------------------------------

def epiphany_sunday_count(year: int) -> int:
    """Number of Sundays after Jan 6 of `year` and before Septuagesima."""
    sept = computus.from_easter(year, computus.SEPTUAGESIMA)
    first = sunday_after(date(year, 1, 6))
    if first >= sept:
        return 0
    return (sept - first).days // 7


def trinity_sunday_count(year: int, rule: str = "nov27") -> int:
    """Number of Sundays after Trinity Sunday of `year` and before Advent 1."""
    days = (advent1(year, rule) - computus.trinity_sunday(year)).days
    return days // 7 - 1


def trinity_sunday_n(year: int, n: int) -> date:
    """Date of the n-th Sunday after Trinity (1 <= n <= 27)."""
    if not 1 <= n <= MAX_TRINITY_WEEK:
        raise ValueError(f"Trinity week must be between 1 and {MAX_TRINITY_WEEK}, got {n}")
    return computus.trinity_sunday(year) + timedelta(days=7 * n)


# ---------------------------------------------------------
# Per-day determination
# ---------------------------------------------------------

def _epiphany_weeks(d: date, a: YearAnchors) -> int:
    return (d - a.epiphany).days // 7


def day_name(d: date, a: YearAnchors, season: Season) -> Optional[str]:
    name = _moveable_names(a.liturgical_year).get(d)
    if name is not None:
        return name

    if d.weekday() == SUNDAY:
        if season is Season.ADVENT:
            return f"Advent {(d - a.advent1).days // 7 + 1}"
        if season is Season.CHRISTMAS:
            if d.month == 12 and d > a.christmas:
                return "Christmas 1"
            if d.month == 1 and 2 <= d.day <= 5:
                return "Christmas 2"
        elif season is Season.EPIPHANY and d > a.epiphany:
            if d + timedelta(days=7) >= a.septuagesima:
                return TRANSFIGURATION
            n = _epiphany_weeks(d, a)
            if n >= 1:
                return f"Epiphany {n}"
        elif season is Season.TRINITY and d > a.trinity_sunday:
            n = (d - a.trinity_sunday).days // 7
            if 1 <= n <= MAX_TRINITY_WEEK:
                return f"Trinity {n}"

    return _FIXED_NAMES.get((d.month, d.day))


def day_type(d: date, name: Optional[str]) -> DayType:
    is_sunday = d.weekday() == SUNDAY
    if name is None:
        return DayType.SUNDAY if is_sunday else DayType.WEEKDAY
    low = name.lower()
    if not _ORDINAL_RE.search(low) and any(k in low for k in _PRINCIPAL_KEYWORDS):
        return DayType.PRINCIPAL_FEAST
    if is_sunday or any(k in low for k in _SUNDAY_KEYWORDS):
        return DayType.SUNDAY
    return DayType.LESSER_FEAST


def day_color(d: date, a: YearAnchors, season: Season, name: Optional[str]) -> LiturgicalColor:
    if name is not None:
        low = name.lower()
        if "good friday" in low:
            return LiturgicalColor.BLACK
        if "pentecost" in low or "reformation" in low:
            return LiturgicalColor.RED
    if season is Season.EPIPHANY and d == a.epiphany:
        return LiturgicalColor.WHITE
    if season is Season.TRINITY and d == a.trinity_sunday:
        return LiturgicalColor.WHITE
    return _SEASON_COLORS[season]


def day_rank(name: Optional[str], kind: DayType, *, unnamed_sunday_rank: Rank = Rank.LESSER_FEAST) -> Rank:
    if name is None:
        return unnamed_sunday_rank if kind is DayType.SUNDAY else Rank.COMMEMORATION
    if kind is DayType.PRINCIPAL_FEAST:
        return Rank.PRINCIPAL_FEAST
    if kind is DayType.SUNDAY or name in _FEAST_RANK_DAYS:
        return Rank.FEAST
    return Rank.LESSER_FEAST


def week_of_season(d: date, a: YearAnchors, season: Season) -> Optional[int]:
    if d.weekday() != SUNDAY:
        return None
    if season is Season.ADVENT:
        return (d - a.advent1).days // 7 + 1
    if season is Season.EPIPHANY and d > a.epiphany:
        return _epiphany_weeks(d, a)
    if season is Season.TRINITY and d > a.trinity_sunday:
        return (d - a.trinity_sunday).days // 7
    return None


class TemporalEngine:
    """Resolves a date to its TemporalDay under one Advent rule."""

    def __init__(self, *, advent_rule: str = "nov27", unnamed_sunday_rank: Rank = Rank.LESSER_FEAST):
        if advent_rule not in ADVENT_RULES:
            raise ValueError(f"advent_rule must be one of {ADVENT_RULES}")
        self.advent_rule = advent_rule
        self.unnamed_sunday_rank = unnamed_sunday_rank

    def info(self) -> Dict[str, Any]:
        return {
            "advent_rule": self.advent_rule,
            "unnamed_sunday_rank": self.unnamed_sunday_rank.value,
        }

    def last_date(self) -> date:
        """Last date whose liturgical year fits before `date.max`."""
        return advent1(computus.LAST_YEAR, self.advent_rule) - timedelta(days=1)

    def anchors_for(self, d: date) -> YearAnchors:
        return year_anchors(liturgical_year(d, self.advent_rule), self.advent_rule)

    def resolve(self, d: date) -> TemporalDay:
        a = self.anchors_for(d)
        season = season_of(d, a)
        name = day_name(d, a, season)
        kind = day_type(d, name)
        return TemporalDay(
            date=d,
            liturgical_year=a.liturgical_year,
            season=season,
            day_type=kind,
            color=day_color(d, a, season, name),
            rank=day_rank(name, kind, unnamed_sunday_rank=self.unnamed_sunday_rank),
            day_name=name,
            week_of_season=week_of_season(d, a, season),
        )
