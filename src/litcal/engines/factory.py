"""
litcal.engines.factory
----------------------
Transforms pure data specifications into live calendar engines.
"""

from __future__ import annotations
from typing import Optional

from litcal.core.engine import SanctoralLookup
from litcal.core.types import CalendarSpec
from litcal.engines.precedence import PrecedenceEngine
from litcal.engines.sanctoral import MemorySanctorale
from litcal.engines.temporal import TemporalEngine


def make_calendar(spec: CalendarSpec, *, sanctorale: Optional[SanctoralLookup] = None) -> PrecedenceEngine:
    """
    Build a PrecedenceEngine from `spec`.

    `sanctorale` replaces the spec's own fixed days with an external lookup
    (e.g. a database-backed repository).
    """
    temporal = TemporalEngine(
        advent_rule=spec.advent_rule,
        unnamed_sunday_rank=spec.unnamed_sunday_rank,
    )
    lookup = sanctorale if sanctorale is not None else MemorySanctorale(spec.sanctorale)
    return PrecedenceEngine(
        id=spec.id,
        temporal=temporal,
        sanctorale=lookup,
        rules=spec.rules,
        max_scan_days=spec.max_scan_days,
        meta=spec.meta,
    )
