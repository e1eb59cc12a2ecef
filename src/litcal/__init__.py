"""litcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    resolve_date,
    resolve_range,
    upcoming_feasts,
    explain,
    temporal_day,
    list_calendars,
    calendar_info,
    register_calendar,
    get_calendar,
    make_resolver,
    list_attributes,
    snapshot_holy_days,
    snapshot_moveable_feasts,
    MemoryStore,
    easter,
    easter_range,
    all_holy_days,
    all_moveable_feasts,
    advent1,
    liturgical_year,
    year_anchors,
    epiphany_sunday_count,
    trinity_sunday_count,
    trinity_sunday_n,
)
from .core.errors import LitcalError, RangeError
from .core.types import (
    CalendarId,
    CalendarSpec,
    DayType,
    HolyDayRecord,
    LiturgicalColor,
    Observance,
    Rank,
    ResolvedDay,
    SanctoralDay,
    Season,
    Source,
    TemporalDay,
    YearAnchors,
)

__all__ = [
    "resolve_date",
    "resolve_range",
    "upcoming_feasts",
    "explain",
    "temporal_day",
    "list_calendars",
    "calendar_info",
    "register_calendar",
    "get_calendar",
    "make_resolver",
    "list_attributes",
    "snapshot_holy_days",
    "snapshot_moveable_feasts",
    "MemoryStore",
    "easter",
    "easter_range",
    "all_holy_days",
    "all_moveable_feasts",
    "advent1",
    "liturgical_year",
    "year_anchors",
    "epiphany_sunday_count",
    "trinity_sunday_count",
    "trinity_sunday_n",
    "LitcalError",
    "RangeError",
    "CalendarId",
    "CalendarSpec",
    "DayType",
    "HolyDayRecord",
    "LiturgicalColor",
    "Observance",
    "Rank",
    "ResolvedDay",
    "SanctoralDay",
    "Season",
    "Source",
    "TemporalDay",
    "YearAnchors",
]
