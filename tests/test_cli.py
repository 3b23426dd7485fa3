# tests/test_cli.py

import pytest

from calsaka.cli import _protect_dates, cmd_day, main


def test_bare_date(capsys):
    assert main(["2020-03-21"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "1942-01-01  era=SE  year_of_era=1942  epoch_day=709300"

def test_day(capsys):
    assert main(["day", "1947-08-15"]) == 0
    assert capsys.readouterr().out.startswith("1869-05-24  era=SE")

def test_day_before_year_one(capsys):
    assert cmd_day(["0000-01-01"]) == 0
    assert capsys.readouterr().out.startswith("-0079-10-11  era=BEFORE_SE  year_of_era=80")

def test_negative_year_is_a_positional():
    assert _protect_dates(["-0079-10-11"]) == ["--", "-0079-10-11"]
    assert _protect_dates(["2020-01-01"]) == ["2020-01-01"]

def test_iso(capsys):
    assert main(["iso", "1942", "1", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2020-03-21"

def test_iso_invalid_date(capsys):
    assert main(["iso", "1941", "1", "31"]) == 2
    assert "calsaka iso: error:" in capsys.readouterr().err

def test_year_day(capsys):
    assert main(["year-day", "1941", "365"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("1941-12-30")
    assert "iso=2020-03-20" in out

def test_year_day_out_of_range(capsys):
    assert main(["year-day", "1941", "366"]) == 2
    assert "error" in capsys.readouterr().err

def test_epoch_day(capsys):
    assert main(["epoch-day", "0"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("0000-01-01  era=BEFORE_SE  year_of_era=1  epoch_day=0")
    assert "iso=0078-03-22" in out

def test_explain(capsys):
    assert main(["explain", "2021-01-01"]) == 0
    out = capsys.readouterr().out
    assert "indian" in out
    assert "1942-10-11" in out

def test_new_years(capsys):
    assert main(["new-years", "--from-year", "1941", "--to-year", "1942"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].split() == ["Saka", "ISO", "Leap", "Chaitra"]
    assert out[2].split() == ["1941", "03-22", "30"]
    assert out[3].split() == ["1942", "03-21", "L", "31"]

def test_bad_date_format():
    with pytest.raises(SystemExit):
        main(["day", "2020/03/21"])

def test_diag_round_trip_negative_start(capsys):
    assert main(["diag", "round-trip", "--N", "5", "--start=-2000-01-01"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
