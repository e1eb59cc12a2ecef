from __future__ import annotations
import re
from datetime import date, timedelta
from typing import Iterator, Tuple

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

WEEKDAY_NAMES = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
_ORDINALS = {
    "first": 1, "1st": 1,
    "second": 2, "2nd": 2,
    "third": 3, "3rd": 3,
    "fourth": 4, "4th": 4,
    "fifth": 5, "5th": 5,
    "last": -1,
}

_RULE_RE = re.compile(r"^\s*(\w+)\s+(\w+)\s+of\s+(\w+)\s*$", re.IGNORECASE)


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def weekday_on_or_after(d: date, weekday: int) -> date:
    """First date >= d falling on `weekday` (0=Mon..6=Sun)."""
    return d + timedelta(days=(weekday - d.weekday()) % 7)


def sunday_on_or_after(d: date) -> date:
    return weekday_on_or_after(d, SUNDAY)


def sunday_after(d: date) -> date:
    """First Sunday strictly after d."""
    return sunday_on_or_after(d + timedelta(days=1))


def nth_weekday(year: int, month: int, weekday: int, n: int) -> date:
    """
    n-th `weekday` of a Gregorian month; n = -1 selects the last one.

    Raises ValueError when the month has no n-th such weekday (e.g. a fifth
    Monday in a four-Monday month).
    """
    if n == -1:
        nxt = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
        last = nxt - timedelta(days=1)
        return last - timedelta(days=(last.weekday() - weekday) % 7)
    if not 1 <= n <= 5:
        raise ValueError(f"ordinal must be 1..5 or -1, got {n}")
    first = weekday_on_or_after(date(year, month, 1), weekday)
    out = first + timedelta(days=7 * (n - 1))
    if out.month != month:
        raise ValueError(f"{year}-{month:02d} has no weekday #{n} of kind {WEEKDAY_NAMES[weekday]}")
    return out


def parse_weekday_rule(rule: str) -> Tuple[int, int, int]:
    """
    Parse "<ordinal> <weekday> of <month>", e.g. "fourth Thursday of November".

    Returns (n, weekday, month) with n in 1..5 or -1 for "last".
    """
    m = _RULE_RE.match(rule)
    if m is None:
        raise ValueError(f"Unparseable moveable rule '{rule}'")
    ordinal, wd, mon = (g.lower() for g in m.groups())
    if ordinal not in _ORDINALS:
        raise ValueError(f"Unknown ordinal '{ordinal}' in rule '{rule}'")
    if wd not in WEEKDAY_NAMES:
        raise ValueError(f"Unknown weekday '{wd}' in rule '{rule}'")
    if mon not in MONTH_NAMES:
        raise ValueError(f"Unknown month '{mon}' in rule '{rule}'")
    return _ORDINALS[ordinal], WEEKDAY_NAMES.index(wd), MONTH_NAMES.index(mon) + 1


def weekday_rule_date(rule: str, year: int) -> date:
    """Date on which a moveable-within-fixed rule falls in `year`."""
    n, wd, month = parse_weekday_rule(rule)
    return nth_weekday(year, month, wd, n)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Inclusive day iterator; empty when start > end."""
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)
