"""
litcal.engines.computus
-----------------------
Gregorian Easter (Meeus/Jones/Butcher) and every date of the moveable cycle
that hangs off it by a fixed day offset.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Tuple

from litcal.core.errors import RangeError

GREGORIAN_FIRST_YEAR = 1583
LAST_YEAR = date.max.year

# Table of moveable feasts: (name, days from Easter Sunday), chronological.
MOVEABLE_OFFSETS: Tuple[Tuple[str, int], ...] = (
    # Pre-Lent
    ("Septuagesima Sunday", -63),
    ("Sexagesima Sunday", -56),
    ("Quinquagesima Sunday", -49),
    # Lent
    ("Ash Wednesday", -46),
    ("Invocabit (Lent 1)", -42),
    ("Reminiscere (Lent 2)", -35),
    ("Oculi (Lent 3)", -28),
    ("Laetare (Lent 4)", -21),
    ("Judica (Lent 5)", -14),
    # Holy Week
    ("Palmarum (Palm Sunday)", -7),
    ("Maundy Thursday", -3),
    ("Good Friday", -2),
    ("Holy Saturday", -1),
    # Easter
    ("Easter Sunday", 0),
    ("Quasimodogeniti (Easter 1)", 7),
    ("Misericordias Domini (Easter 2)", 14),
    ("Jubilate (Easter 3)", 21),
    ("Cantate (Easter 4)", 28),
    ("Rogate (Easter 5)", 35),
    ("Ascension", 39),
    ("Exaudi (Easter 6)", 42),
    # Pentecost
    ("Pentecost (Whitsunday)", 49),
    ("Whit-Monday", 50),
    ("Whit-Tuesday", 51),
    ("Trinity Sunday", 56),
)
OFFSETS: Dict[str, int] = dict(MOVEABLE_OFFSETS)

SEPTUAGESIMA = OFFSETS["Septuagesima Sunday"]
ASH_WEDNESDAY = OFFSETS["Ash Wednesday"]
PALM_SUNDAY = OFFSETS["Palmarum (Palm Sunday)"]
GOOD_FRIDAY = OFFSETS["Good Friday"]
ASCENSION = OFFSETS["Ascension"]
PENTECOST = OFFSETS["Pentecost (Whitsunday)"]
TRINITY_SUNDAY = OFFSETS["Trinity Sunday"]

# Fixed-date holy days (month, day); not Easter-derived.
FIXED_HOLY_DAYS: Tuple[Tuple[str, int, int], ...] = (
    ("Annunciation of Mary", 3, 25),
    ("Christmas", 12, 25),
    ("Epiphany", 1, 6),
    ("Reformation Day", 10, 31),
    ("All Saints' Day", 11, 1),
)


def _check_year(year: int) -> None:
    if year < GREGORIAN_FIRST_YEAR:
        raise RangeError(f"Year must be {GREGORIAN_FIRST_YEAR} or later for the Gregorian computus, got {year}")
    if year > LAST_YEAR:
        raise RangeError(f"Year must be {LAST_YEAR} or earlier, got {year}")


def easter(year: int) -> date:
    """Easter Sunday of `year` (Meeus/Jones/Butcher, integer arithmetic only)."""
    _check_year(year)
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day0 = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day0 + 1)


def easter_range(start: int, end: int) -> Dict[int, date]:
    """Easter for each year in [start, end] inclusive."""
    if start > end:
        raise ValueError(f"start year {start} must be <= end year {end}")
    return {y: easter(y) for y in range(start, end + 1)}


def from_easter(year: int, offset: int) -> date:
    return easter(year) + timedelta(days=offset)


def ash_wednesday(year: int) -> date:
    return from_easter(year, ASH_WEDNESDAY)


def good_friday(year: int) -> date:
    return from_easter(year, GOOD_FRIDAY)


def ascension(year: int) -> date:
    return from_easter(year, ASCENSION)


def pentecost(year: int) -> date:
    return from_easter(year, PENTECOST)


def trinity_sunday(year: int) -> date:
    return from_easter(year, TRINITY_SUNDAY)


def moveable_feast(year: int, name: str) -> date:
    if name not in OFFSETS:
        raise KeyError(f"Unknown moveable feast '{name}'. Available: {[n for n, _ in MOVEABLE_OFFSETS]}")
    return from_easter(year, OFFSETS[name])


def all_moveable_feasts(year: int) -> Dict[str, date]:
    """Every named moveable feast of the civil year, in chronological order."""
    e = easter(year)
    return {name: e + timedelta(days=off) for name, off in MOVEABLE_OFFSETS}


def all_holy_days(year: int) -> Dict[str, date]:
    """The canonical holy days of the civil year (Easter-derived first, then fixed)."""
    e = easter(year)
    out = {
        "Easter Sunday": e,
        "Ash Wednesday": e + timedelta(days=ASH_WEDNESDAY),
        "Good Friday": e + timedelta(days=GOOD_FRIDAY),
        "Ascension Day": e + timedelta(days=ASCENSION),
        "Pentecost": e + timedelta(days=PENTECOST),
        "Trinity Sunday": e + timedelta(days=TRINITY_SUNDAY),
    }
    for name, month, day in FIXED_HOLY_DAYS:
        out[name] = date(year, month, day)
    return out


STATIC_HOLY_DAYS = frozenset(name for name, _, _ in FIXED_HOLY_DAYS)
