"""
litcal.engines.precedence
-------------------------
Merges the Temporal answer for a date with the Sanctoral candidates of the
same date into one ResolvedDay.

Precedence is an ordered tuple of PrecedenceRule objects. The first rule
whose predicate holds decides the primary observance; every other candidate
is commemorated in the order the rule returns them.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from litcal.core.errors import RangeError
from litcal.core.engine import SanctoralLookup
from litcal.core.types import (
    CalendarId,
    DayType,
    Observance,
    Rank,
    ResolvedDay,
    SanctoralDay,
    Season,
    Source,
    TemporalDay,
)
from litcal.core.time import iter_days
from litcal.engines.sanctoral import filter_moveable
from litcal.engines.temporal import TemporalEngine

log = logging.getLogger(__name__)

DEFAULT_MAX_SCAN_DAYS = 365


@dataclass(frozen=True)
class Candidates:
    """Everything the rules see for one date."""
    temporal: TemporalDay
    moveable: Observance
    fixed: Tuple[Observance, ...]

    @property
    def fixed_principals(self) -> Tuple[Observance, ...]:
        return tuple(f for f in self.fixed if f.rank is Rank.PRINCIPAL_FEAST)

    def fixed_except(self, *taken: Observance) -> Tuple[Observance, ...]:
        ids = {id(t) for t in taken}
        return tuple(f for f in self.fixed if id(f) not in ids)


@dataclass(frozen=True)
class Outcome:
    primary: Observance
    commemorations: Tuple[Observance, ...] = ()


@dataclass(frozen=True)
class PrecedenceRule:
    name: str
    applies: Callable[[Candidates], bool]
    decide: Callable[[Candidates], Outcome]


# ---------------------------------------------------------
# The default TLH pipeline
# ---------------------------------------------------------

def _holy_week(c: Candidates) -> bool:
    return c.temporal.season is Season.HOLY_WEEK


def _temporal_alone(c: Candidates) -> Outcome:
    return Outcome(c.moveable)


def _moveable_principal(c: Candidates) -> bool:
    return c.moveable.rank is Rank.PRINCIPAL_FEAST


def _principal_over_principal(c: Candidates) -> bool:
    return _moveable_principal(c) and bool(c.fixed_principals)


def _temporal_over_principals(c: Candidates) -> Outcome:
    principals = c.fixed_principals
    return Outcome(c.moveable, principals + c.fixed_except(*principals))


def _temporal_over_fixed(c: Candidates) -> Outcome:
    return Outcome(c.moveable, c.fixed)


def _fixed_principal(c: Candidates) -> bool:
    return bool(c.fixed_principals)


def _first_fixed_principal(c: Candidates) -> Outcome:
    principals = c.fixed_principals
    return Outcome(principals[0], (c.moveable,) + principals[1:] + c.fixed_except(*principals))


def _sunday(c: Candidates) -> bool:
    return c.temporal.day_type is DayType.SUNDAY


def _weekday_with_fixed(c: Candidates) -> bool:
    return c.temporal.day_type is DayType.WEEKDAY and bool(c.fixed)


def _by_tier(obs: Sequence[Observance]) -> List[Observance]:
    # stable: equal tiers keep input order
    return sorted(obs, key=lambda o: o.rank.tier, reverse=True)


def _highest_fixed(c: Candidates) -> Outcome:
    high = _by_tier([f for f in c.fixed if f.rank >= Rank.APOSTLE])
    if high:
        return Outcome(high[0], (c.moveable,) + tuple(high[1:]) + c.fixed_except(*high))
    primary = _by_tier(c.fixed)[0]
    return Outcome(primary, (c.moveable,) + c.fixed_except(primary))


def _always(c: Candidates) -> bool:
    return True


DEFAULT_RULES: Tuple[PrecedenceRule, ...] = (
    PrecedenceRule("holy-week", _holy_week, _temporal_alone),
    PrecedenceRule("principal-over-principal", _principal_over_principal, _temporal_over_principals),
    PrecedenceRule("principal-temporal", _moveable_principal, _temporal_over_fixed),
    PrecedenceRule("principal-sanctoral", _fixed_principal, _first_fixed_principal),
    PrecedenceRule("sunday", _sunday, _temporal_over_fixed),
    PrecedenceRule("weekday", _weekday_with_fixed, _highest_fixed),
    PrecedenceRule("temporal", _always, _temporal_over_fixed),
)


def select_rule(c: Candidates, rules: Sequence[PrecedenceRule] = DEFAULT_RULES) -> PrecedenceRule:
    for rule in rules:
        if rule.applies(c):
            return rule
    raise LookupError("no precedence rule applies; the pipeline needs a catch-all rule")


def commemoration_note(commemorations: Sequence[Observance]) -> Optional[str]:
    if not commemorations:
        return None
    if len(commemorations) == 1:
        return f"{commemorations[0].name} is commemorated"
    return "Also commemorated: " + ", ".join(o.name for o in commemorations)


def temporal_observance(t: TemporalDay) -> Observance:
    return Observance(name=t.title, source=Source.TEMPORAL, rank=t.rank, color=t.color)


def sanctoral_observance(s: SanctoralDay) -> Observance:
    return Observance(
        name=s.name,
        source=Source.SANCTORAL,
        rank=s.rank,
        color=s.color,
        collect_id=s.proper_id,
        readings_id=s.proper_id,
    )


class PrecedenceEngine:
    """
    A named liturgical calendar: Temporal resolution, a Sanctoral lookup and
    a precedence pipeline. Holds no per-query state.
    """

    def __init__(
        self,
        id: CalendarId,
        temporal: TemporalEngine,
        sanctorale: SanctoralLookup,
        *,
        rules: Optional[Sequence[PrecedenceRule]] = None,
        max_scan_days: int = DEFAULT_MAX_SCAN_DAYS,
        meta: Optional[Dict[str, Any]] = None,
    ):
        if max_scan_days < 1:
            raise ValueError("max_scan_days must be positive")
        self.id = id
        self.temporal = temporal
        self.sanctorale = sanctorale
        self.rules: Tuple[PrecedenceRule, ...] = tuple(rules) if rules is not None else DEFAULT_RULES
        self.max_scan_days = max_scan_days
        self.meta = dict(meta or {})

    def info(self) -> Dict[str, Any]:
        return {
            "id": {"tradition": self.id.tradition, "name": self.id.name, "version": self.id.version},
            "temporal": self.temporal.info(),
            "rules": [r.name for r in self.rules],
            "max_scan_days": self.max_scan_days,
            "meta": dict(self.meta),
        }

    # ---------------------------------------------------------
    # Single date
    # ---------------------------------------------------------

    def temporal_day(self, d: date) -> TemporalDay:
        return self.temporal.resolve(d)

    def fixed_candidates(self, d: date) -> Tuple[SanctoralDay, ...]:
        # collaborator errors propagate unchanged
        found = self.sanctorale.lookup_fixed_by_month_day(d.month, d.day)
        return filter_moveable(found, d)

    def candidates(self, d: date) -> Candidates:
        t = self.temporal.resolve(d)
        fixed = tuple(sanctoral_observance(s) for s in self.fixed_candidates(d))
        return Candidates(temporal=t, moveable=temporal_observance(t), fixed=fixed)

    def _merge(self, d: date) -> Tuple[Candidates, PrecedenceRule, ResolvedDay]:
        c = self.candidates(d)
        rule = select_rule(c, self.rules)
        out = rule.decide(c)
        log.debug("resolve date=%s rule=%s primary=%r commemorated=%d",
                  d, rule.name, out.primary.name, len(out.commemorations))
        resolved = ResolvedDay(
            date=d,
            primary=out.primary,
            season=c.temporal.season,
            color=out.primary.color,
            commemorations=out.commemorations,
            note=commemoration_note(out.commemorations),
        )
        return c, rule, resolved

    def resolve_date(self, d: date) -> ResolvedDay:
        return self._merge(d)[2]

    def explain(self, d: date) -> Dict[str, Any]:
        c, rule, resolved = self._merge(d)
        return {
            "date": d,
            "temporal": c.temporal,
            "fixed": list(c.fixed),
            "rule": rule.name,
            "resolved": resolved,
        }

    # ---------------------------------------------------------
    # Scans
    # ---------------------------------------------------------

    def resolve_range(self, start: date, end: date, *, workers: Optional[int] = None) -> List[ResolvedDay]:
        """Inclusive, chronological. With `workers` > 1 dates resolve on a thread pool."""
        if start > end:
            raise ValueError(f"start {start} must be <= end {end}")
        days = list(iter_days(start, end))
        log.debug("range start=%s end=%s days=%d workers=%s", start, end, len(days), workers)
        if workers is not None and workers > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                # map yields in submission order
                return list(pool.map(self.resolve_date, days))
        return [self.resolve_date(d) for d in days]

    def upcoming_feasts(self, start: date, count: int) -> List[ResolvedDay]:
        """Next `count` days from `start` (inclusive) whose primary ranks Feast or higher."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        last = self.temporal.last_date()
        if start > last:
            raise RangeError(f"{start} is past the last resolvable date {last}")
        out: List[ResolvedDay] = []
        d = start
        for _ in range(self.max_scan_days):
            if len(out) >= count or d > last:
                break
            r = self.resolve_date(d)
            if r.primary.rank >= Rank.FEAST:
                out.append(r)
            d += timedelta(days=1)
        log.debug("upcoming start=%s wanted=%d found=%d", start, count, len(out))
        return out
