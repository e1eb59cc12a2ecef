"""
litcal.store
------------
Snapshots of computed holy days handed to a persistence collaborator
(ResultSink), plus MemoryStore, an in-process sink keyed by (year, name).
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from .core.engine import ResultSink
from .core.types import HolyDayRecord
from .engines import computus

log = logging.getLogger(__name__)


def holy_day_records(year: int) -> List[HolyDayRecord]:
    return [
        HolyDayRecord(name, year, d, "static" if name in computus.STATIC_HOLY_DAYS else "moveable")
        for name, d in computus.all_holy_days(year).items()
    ]


def moveable_feast_records(year: int) -> List[HolyDayRecord]:
    return [HolyDayRecord(name, year, d, "moveable") for name, d in computus.all_moveable_feasts(year).items()]


def snapshot_holy_days(year: int, sink: ResultSink) -> List[HolyDayRecord]:
    """Compute the canonical holy days of `year` and persist them."""
    records = holy_day_records(year)
    n = sink.persist(records)
    log.debug("snapshot holy-days year=%s records=%d written=%d", year, len(records), n)
    return records


def snapshot_moveable_feasts(year: int, sink: ResultSink) -> List[HolyDayRecord]:
    records = moveable_feast_records(year)
    n = sink.persist(records)
    log.debug("snapshot moveable year=%s records=%d written=%d", year, len(records), n)
    return records


class MemoryStore:
    """ResultSink keeping one record per (year, name); later writes replace earlier ones."""

    def __init__(self) -> None:
        self._records: Dict[Tuple[int, str], HolyDayRecord] = {}

    def persist(self, records: Iterable[HolyDayRecord]) -> int:
        n = 0
        for r in records:
            self._records[(r.year, r.name)] = r
            n += 1
        return n

    def by_year(self, year: int) -> List[HolyDayRecord]:
        return sorted((r for r in self._records.values() if r.year == year), key=lambda r: (r.date, r.name))

    def exists(self, year: int) -> bool:
        return any(y == year for y, _ in self._records)

    def delete_year(self, year: int) -> int:
        keys = [k for k in self._records if k[0] == year]
        for k in keys:
            del self._records[k]
        return len(keys)

    def __len__(self) -> int:
        return len(self._records)
