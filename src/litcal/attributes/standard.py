from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute, jdn
from ..engines.temporal import liturgical_year as _lit_year, year_anchors

def weekday(day) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun (ISO-like); JDN 0 was a Monday.
    return {"weekday": jdn(day) % 7}

def julian_day(day) -> Dict[str, Any]:
    return {"jdn": jdn(day)}

def liturgical_year(day) -> Dict[str, Any]:
    return {"liturgical_year": _lit_year(day.date)}

def days_from_easter(day) -> Dict[str, Any]:
    # Easter of the liturgical year the date belongs to
    a = year_anchors(_lit_year(day.date))
    return {"days_from_easter": (day.date - a.easter).days}

def propers(day) -> Dict[str, Any]:
    return {
        "collect_id": day.primary.collect_id,
        "readings_id": day.primary.readings_id,
    }

register_attribute("weekday", weekday)
register_attribute("jdn", julian_day)
register_attribute("liturgical_year", liturgical_year)
register_attribute("days_from_easter", days_from_easter)
register_attribute("propers", propers)
