# tests/test_indian_date.py

import pytest
import random
from datetime import date, datetime

from calsaka.core.errors import (
    CalendarTableError,
    DateConversionError,
    InvalidValueError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from calsaka.core.time import MAX_YEAR, IsoDate
from calsaka.core.types import Field, Unit, ValueRange
from calsaka.engines.era import IndianEra
from calsaka.engines.indian_date import IndianDate, month_length


def test_fields():
    t = IndianDate.from_iso(IsoDate(1947, 8, 15))
    assert (t.year, t.month, t.day) == (1869, 5, 24)
    assert t.get(Field.YEAR) == 1869
    assert t.get(Field.MONTH_OF_YEAR) == 5
    assert t.get(Field.DAY_OF_MONTH) == 24
    assert t.get(Field.YEAR_OF_ERA) == 1869
    assert t.get(Field.ERA) == 1
    assert t.era is IndianEra.SE

def test_before_se_year_of_era():
    assert IndianDate(0, 1, 1).year_of_era == 1
    assert IndianDate(0, 1, 1).era is IndianEra.BEFORE_SE
    assert IndianDate(-1, 6, 1).year_of_era == 2
    assert IndianDate(-1, 6, 1).get(Field.ERA) == 0
    assert IndianDate(1, 1, 1).era is IndianEra.SE

def test_epoch_day():
    assert IndianDate(0, 1, 1).epoch_day == 0
    assert IndianDate(0, 1, 1).to_iso_date() == IsoDate(78, 3, 22)
    assert IndianDate(1891, 10, 11).get(Field.EPOCH_DAY) == 690958
    assert IndianDate.of_epoch_day(709300) == IndianDate(1942, 1, 1)

def test_day_of_year_is_not_readable():
    t = IndianDate(1942, 1, 1)
    assert not t.is_supported(Field.DAY_OF_YEAR)
    assert t.range(Field.DAY_OF_YEAR) == ValueRange.of(1, 366)
    assert IndianDate(1941, 1, 1).range(Field.DAY_OF_YEAR) == ValueRange.of(1, 365)
    with pytest.raises(UnsupportedFieldError):
        t.get(Field.DAY_OF_YEAR)

@pytest.mark.parametrize("f", [Field.DAY_OF_WEEK, Field.HOUR_OF_DAY, Field.PROLEPTIC_MONTH])
def test_unsupported_fields(f):
    t = IndianDate(1942, 1, 1)
    assert not t.is_supported(f)
    with pytest.raises(UnsupportedFieldError):
        t.get(f)
    with pytest.raises(UnsupportedFieldError):
        t.range(f)

def test_ranges_follow_the_date():
    assert IndianDate(1942, 1, 1).range(Field.DAY_OF_MONTH) == ValueRange.of(1, 31)
    assert IndianDate(1941, 1, 1).range(Field.DAY_OF_MONTH) == ValueRange.of(1, 30)
    assert IndianDate(1941, 5, 1).range(Field.DAY_OF_MONTH) == ValueRange.of(1, 31)
    assert IndianDate(1941, 11, 1).range(Field.DAY_OF_MONTH) == ValueRange.of(1, 30)
    assert IndianDate(1942, 1, 1).range(Field.YEAR_OF_ERA) == ValueRange.of(1, MAX_YEAR)
    assert IndianDate(0, 1, 1).range(Field.YEAR_OF_ERA) == ValueRange.of(1, MAX_YEAR + 1)
    assert IndianDate(1942, 1, 1).range(Field.ERA) == ValueRange.of(0, 1)

def test_month_lengths():
    assert [month_length(1942, m) for m in range(1, 13)] == [31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30]
    assert month_length(1941, 1) == 30
    assert sum(month_length(1942, m) for m in range(1, 13)) == IndianDate(1942, 1, 1).length_of_year() == 366
    assert sum(month_length(1941, m) for m in range(1, 13)) == IndianDate(1941, 1, 1).length_of_year() == 365

@pytest.mark.parametrize("y,m,d", [
    (1941, 1, 31),   # Chaitra of a common year
    (1942, 7, 31),
    (1942, 10, 31),
    (1942, 12, 31),
    (1942, 0, 1),
    (1942, 13, 1),
    (1942, 1, 0),
    (1942, 1, 32),
])
def test_invalid_dates(y, m, d):
    with pytest.raises(InvalidValueError):
        IndianDate(y, m, d)

def test_chaitra_31_in_leap_year():
    assert IndianDate(1942, 1, 31).to_iso_date() == IsoDate(2020, 4, 20)

def test_equality_and_hash():
    a = IndianDate(1942, 1, 1)
    b = IndianDate.from_iso(IsoDate(2020, 3, 21))
    c = IndianDate.from_iso(date(2020, 3, 21))
    assert a == b == c
    assert hash(a) == hash(b)
    assert len({a, b, c}) == 1
    assert IndianDate(1941, 12, 30) < a

def test_from_datetime():
    assert IndianDate.from_iso(datetime(2020, 3, 21, 12, 30)) == IndianDate(1942, 1, 1)
    assert IndianDate(1942, 1, 1).to_date() == date(2020, 3, 21)

def test_str():
    assert str(IndianDate(1942, 1, 1)) == "1942-01-01"
    assert str(IndianDate(0, 1, 1)) == "0000-01-01"
    assert str(IndianDate(-79, 10, 11)) == "-0079-10-11"

def test_random_round_trips():
    random.seed(42)
    for _ in range(5000):
        e = random.randint(-2_000_000, 2_000_000)
        t = IndianDate.of_epoch_day(e)
        assert t.epoch_day == e
        assert IndianDate(t.year, t.month, t.day) == t
        assert IndianDate.from_iso(t.to_iso_date()) == t

def test_every_indian_day_round_trips():
    for y in (-80, -79, -78, 0, 1940, 1941, 1942, 1943):
        for m in range(1, 13):
            for d in range(1, month_length(y, m) + 1):
                t = IndianDate(y, m, d)
                assert IndianDate.from_iso(t.to_iso_date()) == t

def test_consecutive_days():
    t = IndianDate(1941, 1, 1)
    prev = t.to_iso_date()
    for e in range(t.epoch_day + 1, t.epoch_day + 800):
        iso = IndianDate.of_epoch_day(e).to_iso_date()
        assert iso.to_epoch_day() == prev.to_epoch_day() + 1
        prev = iso

def test_until_rejects_other_types():
    t = IndianDate(1942, 1, 1)
    with pytest.raises(DateConversionError):
        t.until(IsoDate(2020, 3, 21), Unit.DAYS)
    with pytest.raises(DateConversionError):
        t.period_until(date(2020, 3, 21))

@pytest.mark.parametrize("unit", [Unit.WEEKS, Unit.DECADES, Unit.HOURS, Unit.FOREVER])
def test_until_unsupported_units(unit):
    t = IndianDate(1942, 1, 1)
    assert not t.is_supported_unit(unit)
    with pytest.raises(UnsupportedUnitError):
        t.until(IndianDate(1942, 2, 1), unit)

def test_chronology_property():
    import calsaka
    assert IndianDate(1942, 1, 1).chronology is calsaka.INDIAN

def test_missing_iso_date_is_a_table_error():
    t = IndianDate(1942, 1, 1)
    object.__setattr__(t, "_iso", None)
    with pytest.raises(CalendarTableError):
        t.to_iso_date()
