from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .core.engine import CalendarRegistry, LiturgicalCalendar, SanctoralLookup
from .core.types import CalendarSpec, ResolvedDay, TemporalDay, YearAnchors
from .attributes.registry import compute_attributes, list_attributes
from .attributes import standard as _standard  # noqa: F401  (registers attributes)
from .engines import computus, temporal
from .engines.factory import make_calendar
from .store import MemoryStore, snapshot_holy_days, snapshot_moveable_feasts

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def register_calendar(name: str, cal: LiturgicalCalendar, *, overwrite: bool = False) -> None:
    _reg().register(name, cal, overwrite=overwrite)

def get_calendar(name: str, *, sanctorale: Optional[SanctoralLookup] = None) -> LiturgicalCalendar:
    """Fresh engine for a built-in spec, optionally over a caller-provided fixed-cycle lookup."""
    from .engines.specs import ALL_SPECS
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown calendar spec '{name}'. Available: {sorted(ALL_SPECS)}")
    return make_calendar(ALL_SPECS[name], sanctorale=sanctorale)

def make_resolver(spec: CalendarSpec, *, sanctorale: Optional[SanctoralLookup] = None) -> LiturgicalCalendar:
    return make_calendar(spec, sanctorale=sanctorale)

# ============================================================
# Precedence-resolved days
# ============================================================

def resolve_date(
    d: date,
    *,
    calendar: str = "tlh",
    attributes: Sequence[str] = (),
) -> ResolvedDay:
    day = _reg().get(calendar).resolve_date(d)
    if attributes:
        day = replace(day, attributes=compute_attributes(day, attributes))
    return day

def resolve_range(start: date, end: date, *, calendar: str = "tlh", workers: Optional[int] = None) -> List[ResolvedDay]:
    return _reg().get(calendar).resolve_range(start, end, workers=workers)

def upcoming_feasts(start: date, count: int = 10, *, calendar: str = "tlh") -> List[ResolvedDay]:
    return _reg().get(calendar).upcoming_feasts(start, count)

def explain(d: date, *, calendar: str = "tlh") -> Dict[str, Any]:
    return _reg().get(calendar).explain(d)

def temporal_day(d: date, *, calendar: str = "tlh") -> TemporalDay:
    return _reg().get(calendar).temporal_day(d)

# ============================================================
# Moveable cycle (pure year -> date functions)
# ============================================================

def easter(year: int) -> date:
    return computus.easter(year)

def easter_range(start: int, end: int) -> Dict[int, date]:
    return computus.easter_range(start, end)

def all_holy_days(year: int) -> Dict[str, date]:
    return computus.all_holy_days(year)

def all_moveable_feasts(year: int) -> Dict[str, date]:
    return computus.all_moveable_feasts(year)

def advent1(year: int, *, rule: str = "nov27") -> date:
    return temporal.advent1(year, rule)

def liturgical_year(d: date, *, rule: str = "nov27") -> int:
    return temporal.liturgical_year(d, rule)

def year_anchors(lit_year: int, *, rule: str = "nov27") -> YearAnchors:
    return temporal.year_anchors(lit_year, rule)

def epiphany_sunday_count(year: int) -> int:
    return temporal.epiphany_sunday_count(year)

def trinity_sunday_count(year: int) -> int:
    return temporal.trinity_sunday_count(year)

def trinity_sunday_n(year: int, n: int) -> date:
    return temporal.trinity_sunday_n(year, n)
