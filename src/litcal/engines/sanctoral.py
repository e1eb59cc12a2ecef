"""
litcal.engines.sanctoral
------------------------
Fixed-cycle (Sanctorale) support: the moveable-within-fixed date filter the
core applies to every lookup, the default TLH sanctorale and a small
in-memory lookup implementing the SanctoralLookup protocol.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List, Sequence, Tuple

from litcal.core.types import LiturgicalColor as C, Rank as R, SanctoralDay
from litcal.core.time import parse_weekday_rule, weekday_rule_date

log = logging.getLogger(__name__)


def rule_matches(day: SanctoralDay, d: date) -> bool:
    """True when `day` is observed on `d` (always, for non-moveable entries)."""
    if day.moveable_rule is None:
        return True
    try:
        return weekday_rule_date(day.moveable_rule, d.year) == d
    except ValueError:
        # e.g. "fifth Monday of June" in a year that has only four
        return False


def filter_moveable(candidates: Iterable[SanctoralDay], d: date) -> Tuple[SanctoralDay, ...]:
    """Drop moveable-within-fixed candidates whose computed date is not `d`. Order is kept."""
    out = []
    for c in candidates:
        if rule_matches(c, d):
            out.append(c)
        else:
            log.debug("discard moveable date=%s name=%r rule=%r", d, c.name, c.moveable_rule)
    return tuple(out)


TLH_SANCTORALE: Tuple[SanctoralDay, ...] = (
    SanctoralDay("St. Andrew, Apostle", 11, 30, R.APOSTLE, C.RED),
    SanctoralDay("St. Thomas, Apostle", 12, 21, R.APOSTLE, C.RED),
    SanctoralDay("The Nativity of Our Lord", 12, 25, R.PRINCIPAL_FEAST, C.WHITE),
    SanctoralDay("St. Stephen, Martyr", 12, 26, R.LESSER_FEAST, C.RED),
    SanctoralDay("St. John, Apostle and Evangelist", 12, 27, R.APOSTLE, C.WHITE),
    SanctoralDay("The Holy Innocents", 12, 28, R.LESSER_FEAST, C.RED),
    SanctoralDay("Circumcision and Name of Jesus", 1, 1, R.FEAST, C.WHITE),
    SanctoralDay("The Epiphany of Our Lord", 1, 6, R.PRINCIPAL_FEAST, C.WHITE),
    SanctoralDay("The Confession of St. Peter", 1, 18, R.LESSER_FEAST, C.WHITE),
    SanctoralDay("The Conversion of St. Paul", 1, 25, R.APOSTLE, C.WHITE),
    SanctoralDay("The Purification of Mary (Candlemas)", 2, 2, R.FEAST, C.WHITE),
    SanctoralDay("St. Matthias, Apostle", 2, 24, R.APOSTLE, C.RED),
    SanctoralDay("The Annunciation", 3, 25, R.FEAST, C.WHITE),
    SanctoralDay("St. Mark, Evangelist", 4, 25, R.EVANGELIST, C.RED),
    SanctoralDay("St. Philip and St. James, Apostles", 5, 1, R.APOSTLE, C.RED),
    SanctoralDay("St. Barnabas, Apostle", 6, 11, R.APOSTLE, C.RED),
    SanctoralDay("The Nativity of St. John the Baptist", 6, 24, R.FEAST, C.WHITE),
    SanctoralDay("Presentation of the Augsburg Confession", 6, 25, R.FEAST, C.RED),
    SanctoralDay("St. Peter and St. Paul, Apostles", 6, 29, R.APOSTLE, C.RED),
    SanctoralDay("St. Mary Magdalene", 7, 22, R.LESSER_FEAST, C.WHITE),
    SanctoralDay("St. James the Elder, Apostle", 7, 25, R.APOSTLE, C.RED),
    SanctoralDay("St. Lawrence, Martyr", 8, 10, R.LESSER_FEAST, C.RED),
    SanctoralDay("St. Mary, Mother of Our Lord", 8, 15, R.LESSER_FEAST, C.WHITE),
    SanctoralDay("St. Bartholomew, Apostle", 8, 24, R.APOSTLE, C.RED),
    SanctoralDay("Holy Cross Day", 9, 14, R.LESSER_FEAST, C.RED),
    SanctoralDay("St. Matthew, Apostle and Evangelist", 9, 21, R.APOSTLE, C.RED),
    SanctoralDay("St. Michael and All Angels", 9, 29, R.FEAST, C.WHITE),
    SanctoralDay("St. Luke, Evangelist", 10, 18, R.EVANGELIST, C.RED),
    SanctoralDay("St. Simon and St. Jude, Apostles", 10, 28, R.APOSTLE, C.RED),
    SanctoralDay("Reformation Day", 10, 31, R.FEAST, C.RED),
    SanctoralDay("All Saints' Day", 11, 1, R.FEAST, C.WHITE),
    # month/day is the earliest possible date; the rule decides
    SanctoralDay("Thanksgiving Day (USA)", 11, 22, R.FEAST, C.WHITE,
                 moveable_rule="fourth Thursday of November"),
)


class MemorySanctorale:
    """
    In-process SanctoralLookup.

    Entries with a moveable rule are returned for every day of the rule's
    month; the core filter then keeps the one matching date.
    """

    def __init__(self, days: Iterable[SanctoralDay] = ()):
        self._days: List[SanctoralDay] = []
        self._by_md: Dict[Tuple[int, int], List[SanctoralDay]] = {}
        self._by_month: Dict[int, List[SanctoralDay]] = {}
        for d in days:
            self._index(d)

    def _index(self, day: SanctoralDay) -> None:
        self._days.append(day)
        if day.moveable_rule is None:
            self._by_md.setdefault((day.month, day.day), []).append(day)
        else:
            _, _, month = parse_weekday_rule(day.moveable_rule)
            self._by_month.setdefault(month, []).append(day)

    def lookup_fixed_by_month_day(self, month: int, day: int) -> Sequence[SanctoralDay]:
        return tuple(self._by_md.get((month, day), ())) + tuple(self._by_month.get(month, ()))

    def add(self, day: SanctoralDay) -> None:
        self._index(day)

    def list_all(self) -> List[SanctoralDay]:
        return sorted(self._days, key=lambda s: (s.month, s.day, s.name))

    def list_custom(self) -> List[SanctoralDay]:
        return [s for s in self.list_all() if s.is_custom]

    def __len__(self) -> int:
        return len(self._days)
