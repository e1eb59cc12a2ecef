from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple

from .time import parse_weekday_rule


class Rank(Enum):
    """Observance rank. Ordered by tier; Apostle and Evangelist share one."""
    COMMEMORATION = "Commemoration"
    LESSER_FEAST = "LesserFeast"
    APOSTLE = "Apostle"
    EVANGELIST = "Evangelist"
    FEAST = "Feast"
    PRINCIPAL_FEAST = "PrincipalFeast"

    @property
    def tier(self) -> int:
        return _RANK_TIERS[self]

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.tier < other.tier

    def __le__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.tier <= other.tier

    def __gt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.tier > other.tier

    def __ge__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.tier >= other.tier


_RANK_TIERS = {
    Rank.COMMEMORATION: 1,
    Rank.LESSER_FEAST: 2,
    Rank.APOSTLE: 3,
    Rank.EVANGELIST: 3,
    Rank.FEAST: 4,
    Rank.PRINCIPAL_FEAST: 5,
}


class LiturgicalColor(Enum):
    WHITE = "White"
    RED = "Red"
    VIOLET = "Violet"
    BLACK = "Black"
    GREEN = "Green"


class Season(Enum):
    # declaration order is chronological within a liturgical year
    ADVENT = "Advent"
    CHRISTMAS = "Christmas"
    EPIPHANY = "Epiphany"
    SEPTUAGESIMA = "Septuagesima"
    LENT = "Lent"
    HOLY_WEEK = "Holy Week"
    EASTER = "Easter"
    TRINITY = "Trinity"


class DayType(Enum):
    WEEKDAY = "Weekday"
    SUNDAY = "Sunday"
    PRINCIPAL_FEAST = "PrincipalFeast"
    LESSER_FEAST = "LesserFeast"


class Source(Enum):
    TEMPORAL = "Temporal"
    SANCTORAL = "Sanctoral"


@dataclass(frozen=True)
class CalendarId:
    tradition: str
    name: str
    version: str


@dataclass(frozen=True)
class YearAnchors:
    """Season boundaries of one liturgical year (named by the year Advent 1 falls in)."""
    liturgical_year: int
    advent1: date
    christmas: date
    epiphany: date
    septuagesima: date
    ash_wednesday: date
    palm_sunday: date
    easter: date
    pentecost: date
    trinity_sunday: date
    next_advent1: date


@dataclass(frozen=True)
class TemporalDay:
    """A date's place in the moveable cycle."""
    date: date
    liturgical_year: int
    season: Season
    day_type: DayType
    color: LiturgicalColor
    rank: Rank
    day_name: Optional[str] = None
    week_of_season: Optional[int] = None

    @property
    def title(self) -> str:
        if self.day_name is not None:
            return self.day_name
        return f"{self.season.value} - {self.date.strftime('%A')}"


@dataclass(frozen=True)
class SanctoralDay:
    """A fixed commemoration as stored by the sanctorale collaborator."""
    name: str
    month: int
    day: int
    rank: Rank
    color: LiturgicalColor
    proper_id: Optional[str] = None
    moveable_rule: Optional[str] = None
    is_custom: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")
        date(2000, self.month, self.day)  # raises ValueError for an impossible month/day
        if self.moveable_rule is not None:
            parse_weekday_rule(self.moveable_rule)

    @property
    def is_moveable(self) -> bool:
        return self.moveable_rule is not None


@dataclass(frozen=True)
class Observance:
    name: str
    source: Source
    rank: Rank
    color: LiturgicalColor
    collect_id: Optional[str] = None
    readings_id: Optional[str] = None


@dataclass(frozen=True)
class ResolvedDay:
    date: date
    primary: Observance
    season: Season
    color: LiturgicalColor
    commemorations: Tuple[Observance, ...] = ()
    note: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class HolyDayRecord:
    name: str
    year: int
    date: date
    kind: Literal["static", "moveable"]


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a precedence resolver."""
    id: CalendarId
    sanctorale: Tuple[SanctoralDay, ...] = ()
    advent_rule: Literal["nov27", "christmas"] = "nov27"
    unnamed_sunday_rank: Rank = Rank.LESSER_FEAST
    max_scan_days: int = 365
    rules: Optional[Tuple[Any, ...]] = None  # PrecedenceRule pipeline; None = default
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.advent_rule not in ("nov27", "christmas"):
            raise ValueError("advent_rule must be 'nov27' or 'christmas'")
        if self.max_scan_days < 1:
            raise ValueError("max_scan_days must be positive")

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)


