# tests/test_cli.py

import pytest

from litcal import cli


def test_day_shorthand(capsys):
    assert cli.main(["2024-03-29"]) == 0
    out = capsys.readouterr().out
    assert "Good Friday" in out
    assert "Black" in out


def test_day_with_debug_and_attrs(capsys):
    assert cli.main(["day", "2023-11-30", "--attr", "weekday", "--debug"]) == 0
    out = capsys.readouterr().out
    assert "St. Andrew, Apostle" in out
    assert "commemorated: Trinity - Thursday" in out
    assert "weekday = 3" in out
    assert "rule: weekday" in out


def test_range(capsys):
    assert cli.main(["range", "2024-03-24", "2024-03-31"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 8
    assert lines[0].startswith("2024-03-24")
    assert "Easter Sunday" in lines[-1]


def test_upcoming(capsys):
    assert cli.main(["upcoming", "2024-03-24", "--count", "2"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [l[:10] for l in lines] == ["2024-03-24", "2024-03-28"]


def test_easter(capsys):
    assert cli.main(["easter", "2024", "2026"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "2024  2024-03-31",
        "2025  2025-04-20",
        "2026  2026-04-05",
    ]


def test_holy_days(capsys):
    assert cli.main(["holy-days", "2024"]) == 0
    assert len(capsys.readouterr().out.strip().splitlines()) == 11
    assert cli.main(["holy-days", "2024", "--moveable"]) == 0
    assert len(capsys.readouterr().out.strip().splitlines()) == 25


def test_easter_table(capsys):
    assert cli.main(["easter-table", "--from-year", "2024", "--to-year", "2025"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Year")
    assert out[2].startswith("2024")
    assert "03-31" in out[2]


def test_season_check(capsys):
    assert cli.main(["season-check", "--from-year", "2020", "--to-year", "2022"]) == 0
    assert "0 problem(s)" in capsys.readouterr().out


def test_pretty_month(capsys):
    assert cli.main(["pretty-month", "--greg", "2024", "3"]) == 0
    out = capsys.readouterr().out
    assert "2024-03" in out
    assert "Good Friday" in out


def test_bad_range_raises():
    with pytest.raises(ValueError):
        cli.main(["range", "2024-03-31", "2024-03-24"])


def test_day_rejects_unknown_attribute():
    with pytest.raises(SystemExit):
        cli.main(["day", "2024-03-29", "--attr", "moon_phase"])
