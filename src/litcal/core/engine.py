from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence

from .types import HolyDayRecord, ResolvedDay, SanctoralDay, TemporalDay


class SanctoralLookup(Protocol):
    """Read-only fixed-cycle collaborator, queried once per resolved date."""
    def lookup_fixed_by_month_day(self, month: int, day: int) -> Sequence[SanctoralDay]: ...


class ResultSink(Protocol):
    """Persistence collaborator for computed holy-day snapshots."""
    def persist(self, records: Iterable[HolyDayRecord]) -> int: ...


class LiturgicalCalendar(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def temporal_day(self, d: date) -> TemporalDay: ...
    def resolve_date(self, d: date) -> ResolvedDay: ...
    def resolve_range(self, start: date, end: date, workers: Optional[int] = None) -> List[ResolvedDay]: ...
    def upcoming_feasts(self, start: date, count: int) -> List[ResolvedDay]: ...
    def explain(self, d: date) -> Dict[str, Any]: ...


@dataclass
class CalendarRegistry:
    _calendars: Dict[str, LiturgicalCalendar]

    def get(self, name: str) -> LiturgicalCalendar:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: LiturgicalCalendar, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
