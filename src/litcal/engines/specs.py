from __future__ import annotations

from typing import Dict

from ..core.types import CalendarId, CalendarSpec, Rank
from .sanctoral import TLH_SANCTORALE


# ============================================================
# THE LUTHERAN HYMNAL (1941)
# ============================================================

TLH_SPEC = CalendarSpec(
    id=CalendarId("lutheran", "tlh", "1941"),
    sanctorale=TLH_SANCTORALE,
    advent_rule="nov27",
    unnamed_sunday_rank=Rank.LESSER_FEAST,
    meta={"description": "The Lutheran Hymnal: one-year temporale with the TLH sanctorale"},
)

# Temporale only; useful for checking the moveable cycle in isolation.
TEMPORAL_SPEC = TLH_SPEC.tweak(
    id=CalendarId("lutheran", "temporal", "1941"),
    sanctorale=(),
    meta={"description": "TLH temporale without any fixed commemorations"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "tlh": TLH_SPEC,
    "temporal": TEMPORAL_SPEC,
}
