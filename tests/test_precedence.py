# tests/test_precedence.py

import pytest
from datetime import date
from unittest.mock import Mock

from litcal.core.errors import RangeError
from litcal.core.types import (
    CalendarId,
    LiturgicalColor,
    Rank,
    SanctoralDay,
    Season,
    Source,
)
from litcal.engines import precedence
from litcal.engines.precedence import PrecedenceEngine, PrecedenceRule
from litcal.engines.sanctoral import MemorySanctorale, TLH_SANCTORALE
from litcal.engines.temporal import TemporalEngine

TEST_ID = CalendarId("lutheran", "test", "0")


def make(days=(), **kw):
    return PrecedenceEngine(TEST_ID, TemporalEngine(), MemorySanctorale(days), **kw)


@pytest.fixture
def tlh():
    return make(TLH_SANCTORALE)


def saint(name, month, day, rank, color=LiturgicalColor.RED, **kw):
    return SanctoralDay(name, month, day, rank, color, **kw)


# ---------------------------------------------------------
# Acceptance scenarios
# ---------------------------------------------------------

def test_good_friday_suppresses_fixed():
    eng = make([saint("Some Martyr", 3, 29, Rank.FEAST)])
    r = eng.resolve_date(date(2024, 3, 29))
    assert r.primary.name == "Good Friday"
    assert r.primary.source is Source.TEMPORAL
    assert r.color is LiturgicalColor.BLACK
    assert r.commemorations == ()
    assert r.note is None


def test_annunciation_in_holy_week_is_dropped(tlh):
    r = tlh.resolve_date(date(2024, 3, 25))
    assert r.season is Season.HOLY_WEEK
    assert r.primary.name == "Holy Week - Monday"
    assert r.commemorations == ()
    assert tlh.explain(date(2024, 3, 25))["rule"] == "holy-week"


def test_st_andrew_wins_on_weekday(tlh):
    r = tlh.resolve_date(date(2023, 11, 30))
    assert r.primary.name == "St. Andrew, Apostle"
    assert r.primary.rank is Rank.APOSTLE
    assert r.primary.source is Source.SANCTORAL
    assert r.color is LiturgicalColor.RED
    assert r.season is Season.TRINITY
    assert [c.name for c in r.commemorations] == ["Trinity - Thursday"]
    assert r.note == "Trinity - Thursday is commemorated"


def test_sunday_beats_reformation(tlh):
    r = tlh.resolve_date(date(2021, 10, 31))
    assert r.primary.source is Source.TEMPORAL
    assert r.primary.name == "Trinity 22"
    assert [c.name for c in r.commemorations] == ["Reformation Day"]
    assert r.note == "Reformation Day is commemorated"
    assert r.color is LiturgicalColor.GREEN


def test_sunday_beats_apostle(tlh):
    r = tlh.resolve_date(date(2025, 11, 30))
    assert r.primary.name == "Advent 1"
    assert r.commemorations[0].name == "St. Andrew, Apostle"


def test_resolve_range_holy_week(tlh):
    days = tlh.resolve_range(date(2024, 3, 24), date(2024, 3, 31))
    assert len(days) == 8
    assert [r.date.day for r in days] == list(range(24, 32))
    assert days[0].primary.name == "Palmarum (Palm Sunday)"
    assert days[-1].primary.name == "Easter Sunday"


def test_resolve_range_threaded_matches_sequential(tlh):
    start, end = date(2024, 11, 1), date(2025, 1, 31)
    assert tlh.resolve_range(start, end, workers=4) == tlh.resolve_range(start, end)


def test_resolve_range_rejects_reversed(tlh):
    with pytest.raises(ValueError):
        tlh.resolve_range(date(2024, 4, 1), date(2024, 3, 31))


def test_resolve_date_idempotent(tlh):
    d = date(2024, 12, 27)
    assert tlh.resolve_date(d) == tlh.resolve_date(d)


# ---------------------------------------------------------
# Individual rules
# ---------------------------------------------------------

def test_principal_over_principal(tlh):
    r = tlh.resolve_date(date(2024, 12, 25))
    assert r.primary.name == "Christmas Day"
    assert r.primary.source is Source.TEMPORAL
    assert [c.name for c in r.commemorations] == ["The Nativity of Our Lord"]
    assert tlh.explain(date(2024, 12, 25))["rule"] == "principal-over-principal"


def test_principal_over_principal_orders_principals_first():
    eng = make([
        saint("Lesser", 12, 25, Rank.LESSER_FEAST),
        saint("Principal", 12, 25, Rank.PRINCIPAL_FEAST),
    ])
    r = eng.resolve_date(date(2024, 12, 25))
    assert [c.name for c in r.commemorations] == ["Principal", "Lesser"]
    assert r.note == "Also commemorated: Principal, Lesser"


def test_principal_temporal():
    eng = make([saint("St. Someone", 5, 9, Rank.FEAST)])
    r = eng.resolve_date(date(2024, 5, 9))  # Ascension
    assert r.primary.name == "Ascension"
    assert [c.name for c in r.commemorations] == ["St. Someone"]


def test_principal_sanctoral_takes_first_principal():
    eng = make([
        saint("Minor", 8, 6, Rank.LESSER_FEAST),
        saint("First", 8, 6, Rank.PRINCIPAL_FEAST, LiturgicalColor.WHITE),
        saint("Second", 8, 6, Rank.PRINCIPAL_FEAST),
    ])
    r = eng.resolve_date(date(2024, 8, 6))  # a Tuesday in Trinity season
    assert r.primary.name == "First"
    assert r.color is LiturgicalColor.WHITE
    assert [c.name for c in r.commemorations] == ["Trinity - Tuesday", "Second", "Minor"]


def test_weekday_highest_rank_wins_ties_by_input_order():
    eng = make([
        saint("Lesser", 8, 6, Rank.LESSER_FEAST),
        saint("Apostle", 8, 6, Rank.APOSTLE),
        saint("Evangelist", 8, 6, Rank.EVANGELIST),
    ])
    r = eng.resolve_date(date(2024, 8, 6))
    assert r.primary.name == "Apostle"
    assert [c.name for c in r.commemorations] == ["Trinity - Tuesday", "Evangelist", "Lesser"]


def test_weekday_feast_beats_apostle():
    eng = make([
        saint("Apostle", 8, 6, Rank.APOSTLE),
        saint("Feast", 8, 6, Rank.FEAST),
    ])
    assert eng.resolve_date(date(2024, 8, 6)).primary.name == "Feast"


def test_weekday_lesser_fixed_beats_plain_weekday():
    eng = make([
        saint("Memorial", 8, 6, Rank.COMMEMORATION),
        saint("Lesser", 8, 6, Rank.LESSER_FEAST),
    ])
    r = eng.resolve_date(date(2024, 8, 6))
    assert r.primary.name == "Lesser"
    assert r.note == "Also commemorated: Trinity - Tuesday, Memorial"


def test_no_fixed_temporal_wins():
    r = make().resolve_date(date(2024, 8, 6))
    assert r.primary.source is Source.TEMPORAL
    assert r.primary.rank is Rank.COMMEMORATION
    assert r.commemorations == ()
    assert r.note is None


def test_named_weekday_keeps_temporal():
    eng = make([saint("St. Someone", 3, 5, Rank.FEAST)])
    r = eng.resolve_date(date(2025, 3, 5))  # Ash Wednesday
    assert r.primary.name == "Ash Wednesday"
    assert [c.name for c in r.commemorations] == ["St. Someone"]
    assert eng.explain(date(2025, 3, 5))["rule"] == "temporal"


def test_color_follows_primary(tlh):
    for r in tlh.resolve_range(date(2024, 1, 1), date(2024, 12, 31)):
        assert r.color is r.primary.color


def test_propers_flow_to_observance():
    eng = make([saint("St. Someone", 8, 6, Rank.FEAST, proper_id="prop-17")])
    r = eng.resolve_date(date(2024, 8, 6))
    assert r.primary.collect_id == "prop-17"
    assert r.primary.readings_id == "prop-17"


def test_custom_rule_pipeline():
    always_fixed = PrecedenceRule(
        "fixed-first",
        lambda c: bool(c.fixed),
        lambda c: precedence.Outcome(c.fixed[0], (c.moveable,)),
    )
    eng = make([saint("Reformation Day", 10, 31, Rank.FEAST)],
               rules=(always_fixed,) + precedence.DEFAULT_RULES)
    assert eng.resolve_date(date(2021, 10, 31)).primary.name == "Reformation Day"


def test_pipeline_without_catch_all():
    eng = make(rules=(precedence.DEFAULT_RULES[0],))
    with pytest.raises(LookupError):
        eng.resolve_date(date(2024, 8, 6))


def test_commemoration_note():
    obs = precedence.temporal_observance(TemporalEngine().resolve(date(2024, 8, 6)))
    assert precedence.commemoration_note(()) is None
    assert precedence.commemoration_note((obs,)) == "Trinity - Tuesday is commemorated"
    assert precedence.commemoration_note((obs, obs)) == "Also commemorated: Trinity - Tuesday, Trinity - Tuesday"


# ---------------------------------------------------------
# Collaborator and scans
# ---------------------------------------------------------

def test_lookup_called_with_month_day_and_errors_propagate():
    lookup = Mock()
    lookup.lookup_fixed_by_month_day.side_effect = OSError("database down")
    eng = PrecedenceEngine(TEST_ID, TemporalEngine(), lookup)
    with pytest.raises(OSError, match="database down"):
        eng.resolve_date(date(2024, 8, 6))
    lookup.lookup_fixed_by_month_day.assert_called_once_with(8, 6)


def test_thanksgiving_only_on_fourth_thursday(tlh):
    hits = [r.date for r in tlh.resolve_range(date(2024, 11, 1), date(2024, 11, 30))
            if r.primary.name == "Thanksgiving Day (USA)"]
    assert hits == [date(2024, 11, 28)]


def test_upcoming_feasts(tlh):
    out = tlh.upcoming_feasts(date(2024, 3, 24), 3)
    assert [r.date for r in out] == [date(2024, 3, 24), date(2024, 3, 28), date(2024, 3, 29)]
    assert all(r.primary.rank >= Rank.FEAST for r in out)


def test_upcoming_feasts_zero_and_negative(tlh):
    assert tlh.upcoming_feasts(date(2024, 3, 24), 0) == []
    with pytest.raises(ValueError):
        tlh.upcoming_feasts(date(2024, 3, 24), -1)


def test_upcoming_feasts_scan_cap():
    eng = make(max_scan_days=3)
    assert eng.upcoming_feasts(date(2024, 3, 25), 5) == []
    assert len(make().upcoming_feasts(date(2024, 1, 1), 10_000)) < 366


def test_upcoming_feasts_stops_at_last_resolvable_date(tlh):
    out = tlh.upcoming_feasts(date(9999, 11, 20), 10)
    assert 0 < len(out) < 10
    assert all(r.date <= date(9999, 11, 27) for r in out)
    with pytest.raises(RangeError):
        tlh.upcoming_feasts(date(9999, 12, 1), 1)


def test_max_scan_days_validated():
    with pytest.raises(ValueError):
        make(max_scan_days=0)
