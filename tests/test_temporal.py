# tests/test_temporal.py

import pytest
from datetime import date, timedelta

from litcal.core.errors import RangeError
from litcal.core.types import DayType, LiturgicalColor, Rank, Season
from litcal.engines import temporal
from litcal.engines.temporal import TemporalEngine


@pytest.fixture
def engine():
    return TemporalEngine()


def test_advent1_window():
    for y in range(1583, 2600):
        a = temporal.advent1(y)
        assert a.weekday() == 6
        assert date(y, 11, 27) <= a <= date(y, 12, 3)


def test_advent_rules_agree():
    for y in range(1583, 2600):
        assert temporal.advent1(y, "nov27") == temporal.advent1(y, "christmas")


def test_unknown_advent_rule():
    with pytest.raises(ValueError):
        temporal.advent1(2024, "st-andrew")
    with pytest.raises(ValueError):
        TemporalEngine(advent_rule="st-andrew")


@pytest.mark.parametrize("d, lit_year", [
    (date(2023, 12, 2), 2022),
    (date(2023, 12, 3), 2023),   # Advent 1
    (date(2024, 1, 5), 2023),
    (date(2024, 11, 30), 2023),
    (date(2024, 12, 1), 2024),
])
def test_liturgical_year(d, lit_year):
    assert temporal.liturgical_year(d) == lit_year


def test_year_anchors_2023():
    a = temporal.year_anchors(2023)
    assert a.advent1 == date(2023, 12, 3)
    assert a.christmas == date(2023, 12, 25)
    assert a.epiphany == date(2024, 1, 6)
    assert a.easter == date(2024, 3, 31)
    assert a.septuagesima == date(2024, 1, 28)
    assert a.next_advent1 == date(2024, 12, 1)


def test_every_season_once_and_contiguous(engine):
    for lit_year in (2000, 2008, 2023, 2038, 2285):
        a = temporal.year_anchors(lit_year)
        runs = []
        d = a.advent1
        while d < a.next_advent1:
            s = engine.resolve(d).season
            if not runs or runs[-1] is not s:
                runs.append(s)
            d += timedelta(days=1)
        assert runs == list(Season)


def test_season_of_outside_year():
    a = temporal.year_anchors(2023)
    with pytest.raises(ValueError):
        temporal.season_of(date(2024, 12, 1), a)


def test_good_friday(engine):
    t = engine.resolve(date(2024, 3, 29))
    assert t.day_name == "Good Friday"
    assert t.season is Season.HOLY_WEEK
    assert t.color is LiturgicalColor.BLACK
    assert t.rank is Rank.FEAST
    assert t.liturgical_year == 2023


def test_easter_sunday(engine):
    t = engine.resolve(date(2024, 3, 31))
    assert t.day_name == "Easter Sunday"
    assert t.season is Season.EASTER
    assert t.day_type is DayType.PRINCIPAL_FEAST
    assert t.rank is Rank.PRINCIPAL_FEAST
    assert t.color is LiturgicalColor.WHITE


def test_easter_season_ordinal_sunday_is_not_principal(engine):
    t = engine.resolve(date(2024, 4, 7))
    assert t.day_name == "Quasimodogeniti (Easter 1)"
    assert t.day_type is DayType.SUNDAY
    assert t.rank is Rank.FEAST


def test_pentecost_and_trinity(engine):
    p = engine.resolve(date(2024, 5, 19))
    assert p.day_name == "Pentecost (Whitsunday)"
    assert p.season is Season.TRINITY
    assert p.color is LiturgicalColor.RED
    assert p.rank is Rank.PRINCIPAL_FEAST

    t = engine.resolve(date(2024, 5, 26))
    assert t.day_name == "Trinity Sunday"
    assert t.color is LiturgicalColor.WHITE
    assert t.rank is Rank.PRINCIPAL_FEAST
    assert t.week_of_season is None

    t1 = engine.resolve(date(2024, 6, 2))
    assert t1.day_name == "Trinity 1"
    assert t1.week_of_season == 1
    assert t1.color is LiturgicalColor.GREEN
    assert t1.rank is Rank.FEAST


def test_whit_monday_is_lesser(engine):
    t = engine.resolve(date(2024, 5, 20))
    assert t.day_name == "Whit-Monday"
    assert t.day_type is DayType.LESSER_FEAST
    assert t.rank is Rank.LESSER_FEAST


def test_advent(engine):
    t = engine.resolve(date(2024, 12, 1))
    assert t.day_name == "Advent 1"
    assert t.season is Season.ADVENT
    assert t.day_type is DayType.SUNDAY
    assert t.rank is Rank.FEAST
    assert t.color is LiturgicalColor.VIOLET
    assert t.week_of_season == 1
    assert engine.resolve(date(2024, 12, 22)).day_name == "Advent 4"
    assert engine.resolve(date(2024, 12, 22)).week_of_season == 4


def test_christmas_cycle(engine):
    assert engine.resolve(date(2024, 12, 25)).day_name == "Christmas Day"
    assert engine.resolve(date(2024, 12, 25)).rank is Rank.PRINCIPAL_FEAST
    c1 = engine.resolve(date(2024, 12, 29))
    assert c1.day_name == "Christmas 1"
    assert c1.day_type is DayType.SUNDAY
    assert c1.color is LiturgicalColor.WHITE
    jan1 = engine.resolve(date(2025, 1, 1))
    assert jan1.day_name == "Circumcision and Name of Jesus"
    assert jan1.rank is Rank.LESSER_FEAST
    assert jan1.season is Season.CHRISTMAS
    assert engine.resolve(date(2025, 1, 5)).day_name == "Christmas 2"


def test_epiphany_cycle(engine):
    e = engine.resolve(date(2025, 1, 6))
    assert e.day_name == "Epiphany"
    assert e.season is Season.EPIPHANY
    assert e.color is LiturgicalColor.WHITE
    assert e.rank is Rank.PRINCIPAL_FEAST

    # Jan 6 2025 is a Monday: the first Sunday after it is under one week in
    first = engine.resolve(date(2025, 1, 12))
    assert first.day_name is None
    assert first.title == "Epiphany - Sunday"
    assert first.week_of_season == 0
    assert first.day_type is DayType.SUNDAY
    assert first.rank is Rank.LESSER_FEAST
    assert first.color is LiturgicalColor.GREEN

    e1 = engine.resolve(date(2025, 1, 19))
    assert e1.day_name == "Epiphany 1"
    assert e1.week_of_season == 1
    assert e1.rank is Rank.FEAST
    assert engine.resolve(date(2025, 2, 2)).day_name == "Epiphany 3"

    tr = engine.resolve(date(2025, 2, 9))
    assert tr.day_name == "Transfiguration"
    assert tr.week_of_season == 4
    assert tr.rank is Rank.FEAST

    assert engine.resolve(date(2025, 2, 16)).day_name == "Septuagesima Sunday"
    assert engine.resolve(date(2025, 2, 16)).color is LiturgicalColor.VIOLET


def test_unnamed_weekday(engine):
    t = engine.resolve(date(2024, 11, 30))
    assert t.day_name is None
    assert t.title == "Trinity - Saturday"
    assert t.day_type is DayType.WEEKDAY
    assert t.rank is Rank.COMMEMORATION
    assert t.week_of_season is None


def test_ash_wednesday(engine):
    t = engine.resolve(date(2025, 3, 5))
    assert t.day_name == "Ash Wednesday"
    assert t.season is Season.LENT
    assert t.color is LiturgicalColor.VIOLET
    assert t.day_type is DayType.LESSER_FEAST


def test_only_first_epiphany_sunday_goes_unnamed(engine):
    d = date(2023, 12, 3)
    while d < date(2030, 12, 1):
        t = engine.resolve(d)
        if t.day_name is None:
            assert t.season is Season.EPIPHANY, d
            assert t.week_of_season == 0, d
            assert 0 < (d - date(d.year, 1, 6)).days < 7, d
            assert t.rank is Rank.LESSER_FEAST, d
        else:
            assert t.rank >= Rank.FEAST, d
        d += timedelta(days=7)


def test_epiphany_sunday_on_jan_13_is_epiphany_1(engine):
    # Jan 6 2019 fell on a Sunday
    t = engine.resolve(date(2019, 1, 13))
    assert t.day_name == "Epiphany 1"
    assert t.week_of_season == 1


def test_unnamed_sunday_rank_is_configurable():
    t = TemporalEngine(unnamed_sunday_rank=Rank.FEAST).resolve(date(2025, 1, 12))
    assert t.day_name is None
    assert t.rank is Rank.FEAST


def test_unnamed_sunday_rank_helper():
    assert temporal.day_rank(None, DayType.SUNDAY) is Rank.LESSER_FEAST
    assert temporal.day_rank(None, DayType.SUNDAY, unnamed_sunday_rank=Rank.FEAST) is Rank.FEAST
    assert temporal.day_rank(None, DayType.WEEKDAY) is Rank.COMMEMORATION


def test_resolve_is_idempotent(engine):
    d = date(2025, 4, 18)
    assert engine.resolve(d) == engine.resolve(d)


def test_range_error_surfaces(engine):
    with pytest.raises(RangeError):
        engine.resolve(date(1500, 6, 1))
    # Liturgical year 1582 takes its Easter from 1583
    assert engine.resolve(date(1583, 4, 10)).day_name == "Easter Sunday"


def test_sunday_counts():
    assert temporal.epiphany_sunday_count(2025) == 5
    assert temporal.trinity_sunday_count(2024) == 26
    for y in range(1583, 2600):
        assert 22 <= temporal.trinity_sunday_count(y) <= 27
        assert 1 <= temporal.epiphany_sunday_count(y) <= 6


def test_trinity_sunday_n():
    assert temporal.trinity_sunday_n(2024, 1) == date(2024, 6, 2)
    assert temporal.trinity_sunday_n(2024, 27) == date(2024, 12, 1)
    for n in (0, 28, -1):
        with pytest.raises(ValueError):
            temporal.trinity_sunday_n(2024, n)


def test_range_error_past_last_liturgical_year(engine):
    # Advent 1 of 9999 is Nov 28; that liturgical year would end in 10000
    assert engine.last_date() == date(9999, 11, 27)
    assert engine.resolve(date(9999, 11, 27)).liturgical_year == 9998
    for d in (date(9999, 11, 28), date(9999, 12, 5), date.max):
        with pytest.raises(RangeError):
            engine.resolve(d)
    with pytest.raises(RangeError):
        temporal.year_anchors(9999)


def test_clear_caches_empties_anchor_cache():
    temporal.year_anchors(2024)
    assert temporal.year_anchors.cache_info().currsize > 0
    temporal.clear_caches()
    assert temporal.year_anchors.cache_info().currsize == 0
    assert temporal.year_anchors(2024).easter == date(2025, 4, 20)
