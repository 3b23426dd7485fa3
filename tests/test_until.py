# tests/test_until.py
#
# Indian and ISO days start at the same instant, so every difference between
# two Indian dates must equal the one between their ISO dates.

import pytest
import random
from datetime import date

from calsaka import to_indian
from calsaka.core.time import IsoDate, Period
from calsaka.core.types import Unit
from calsaka.engines.indian_date import IndianDate

_TODAY = IsoDate.from_date(date.today())

PAIRS = [
    (_TODAY, _TODAY),
    (_TODAY, _TODAY.plus_days(-100)),
    (_TODAY, _TODAY.plus_days(100)),
    (IsoDate(1970, 1, 1), IsoDate(-1970, 1, 1)),
    (IsoDate(2020, 2, 1), IsoDate(2020, 4, 1)),   # Feb end and Chaitra 1, leap year
    (IsoDate(2019, 2, 1), IsoDate(2019, 4, 1)),   # same, common year
    (IsoDate(-100, 1, 1), IsoDate(-100, 8, 12)),
    (IsoDate(2020, 1, 31), IsoDate(2020, 3, 1)),   # one month and a day, not two months
    (IsoDate(-1, 12, 31), IsoDate(1, 2, 15)),
]


@pytest.mark.parametrize("d1,d2", PAIRS)
def test_until_matches_iso(d1, d2):
    t1, t2 = to_indian(d1), to_indian(d2)
    assert t1.period_until(t2) == d1.period_until(d2)
    assert t2.period_until(t1) == d2.period_until(d1)
    for unit in (Unit.YEARS, Unit.MONTHS, Unit.DAYS, Unit.ERAS):
        assert t1.until(t2, unit) == d1.until(d2, unit)

@pytest.mark.parametrize("d1,d2", PAIRS)
@pytest.mark.parametrize("unit", [Unit.DAYS, Unit.MONTHS, Unit.YEARS])
def test_until_is_antisymmetric(d1, d2, unit):
    t1, t2 = to_indian(d1), to_indian(d2)
    assert t1.until(t2, unit) == -t2.until(t1, unit)

def test_partial_months_truncate_toward_zero():
    t1 = to_indian(IsoDate(2020, 1, 31))
    t2 = to_indian(IsoDate(2020, 3, 1))
    assert t1.until(t2, Unit.MONTHS) == 1
    assert t2.until(t1, Unit.MONTHS) == -1
    t3 = to_indian(IsoDate(2021, 1, 30))
    assert t1.until(t3, Unit.YEARS) == 0
    assert t3.until(t1, Unit.YEARS) == 0

def test_random_pairs_are_antisymmetric():
    random.seed(11)
    for _ in range(2000):
        t1 = IndianDate.of_epoch_day(random.randint(-800_000, 800_000))
        t2 = IndianDate.of_epoch_day(random.randint(-800_000, 800_000))
        for unit in (Unit.DAYS, Unit.MONTHS, Unit.YEARS):
            assert t1.until(t2, unit) == -t2.until(t1, unit)

def test_same_day_is_zero():
    t = to_indian(_TODAY)
    assert t.period_until(t).is_zero()
    assert t.until(t, Unit.DAYS) == 0

def test_months_follow_iso_boundaries():
    # Chaitra 1 .. Vaishakha 1 of 1942 is one Indian month but ISO 03-21 .. 04-20
    t1 = to_indian(IsoDate(2020, 3, 21))
    t2 = to_indian(IsoDate(2020, 4, 20))
    assert (t1.month, t2.month) == (1, 1)
    assert t1.until(t2, Unit.MONTHS) == 0
    assert t1.until(t2, Unit.DAYS) == 30
    assert t1.period_until(t2) == Period(0, 0, 30)

def test_across_eras():
    t1 = to_indian(IsoDate(78, 3, 22))   # Indian 0000-01-01
    t2 = to_indian(IsoDate(79, 3, 22))   # Indian 0001-01-01
    assert t1.until(t2, Unit.ERAS) == 0   # both dates are in ISO CE
    assert t1.until(t2, Unit.YEARS) == 1
    assert t1.until(t2, Unit.DAYS) == 365
