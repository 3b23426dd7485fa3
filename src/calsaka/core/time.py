"""
calsaka.core.time
-----------------
Proleptic ISO (Gregorian) dates for any signed year.

``datetime.date`` only covers years 1..9999. The Gregorian leap pattern repeats
every 400 years (146097 days), so every year is folded into the first cycle,
handed to ``datetime.date`` and shifted back by whole cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .errors import DateConversionError, InvalidValueError, UnsupportedUnitError
from .types import Field, IsoConvertible, Unit, ValueRange

MIN_YEAR = -999_999_999
MAX_YEAR = 999_999_999

# Epoch day 0 is 1970-01-01
MIN_EPOCH_DAY = -365_243_219_162
MAX_EPOCH_DAY = 365_241_780_471

DAYS_PER_CYCLE = 146097
_UNIX_EPOCH_ORDINAL = 719163  # date(1970, 1, 1).toordinal()

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

YEAR_RANGE = ValueRange.of(MIN_YEAR, MAX_YEAR)
EPOCH_DAY_RANGE = ValueRange.of(MIN_EPOCH_DAY, MAX_EPOCH_DAY)


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year test (valid for year 0 and negative years)."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def format_year(year: int) -> str:
    """Zero-padded to four digits; years past 9999 carry a '+'."""
    if abs(year) < 1000:
        return f"{'-' if year < 0 else ''}{abs(year):04d}"
    if year > 9999:
        return f"+{year}"
    return str(year)


def _fold(year: int) -> Tuple[int, int]:
    """Split a proleptic year into (400-year cycles, year in 1..400)."""
    cycles, y = divmod(year - 1, 400)
    return cycles, y + 1


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (b > 0)."""
    q = abs(a) // b
    return q if a >= 0 else -q


@dataclass(frozen=True)
class Period:
    """A date-based amount of time: years, months and days."""
    years: int = 0
    months: int = 0
    days: int = 0

    def negated(self) -> "Period":
        return Period(-self.years, -self.months, -self.days)

    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    def to_total_months(self) -> int:
        return self.years * 12 + self.months

    def __str__(self) -> str:
        if self.is_zero():
            return "P0D"
        out = "P"
        if self.years:
            out += f"{self.years}Y"
        if self.months:
            out += f"{self.months}M"
        if self.days:
            out += f"{self.days}D"
        return out


@dataclass(frozen=True, order=True)
class IsoDate(IsoConvertible):
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        YEAR_RANGE.check_valid_value(self.year, Field.YEAR)
        if not (1 <= self.month <= 12):
            raise InvalidValueError(f"Invalid value for {Field.MONTH_OF_YEAR} (valid values 1 - 12): {self.month}")
        dim = days_in_month(self.year, self.month)
        if not (1 <= self.day <= dim):
            raise InvalidValueError(f"Invalid date {self.year}-{self.month:02d}-{self.day:02d}: day must be in 1..{dim}")

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> "IsoDate":
        YEAR_RANGE.check_valid_value(year, Field.YEAR)
        ValueRange.of(1, days_in_year(year)).check_valid_value(day_of_year, Field.DAY_OF_YEAR)
        return cls.of_epoch_day(cls(year, 1, 1).to_epoch_day() + day_of_year - 1)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> "IsoDate":
        EPOCH_DAY_RANGE.check_valid_value(epoch_day, Field.EPOCH_DAY)
        cycles, rem = divmod(epoch_day + _UNIX_EPOCH_ORDINAL - 1, DAYS_PER_CYCLE)
        d = date.fromordinal(rem + 1)
        return cls(d.year + 400 * cycles, d.month, d.day)

    @classmethod
    def from_date(cls, d: date) -> "IsoDate":
        """Accepts ``datetime.date`` and ``datetime.datetime`` (the time part is dropped)."""
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        if not (1 <= self.year <= 9999):
            raise DateConversionError(f"{self} is outside the range of datetime.date")
        return date(self.year, self.month, self.day)

    def to_iso_date(self) -> "IsoDate":
        return self

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def length_of_month(self) -> int:
        return days_in_month(self.year, self.month)

    def length_of_year(self) -> int:
        return days_in_year(self.year)

    @property
    def day_of_year(self) -> int:
        _, y = _fold(self.year)
        return (date(y, self.month, self.day) - date(y, 1, 1)).days + 1

    @property
    def proleptic_month(self) -> int:
        return self.year * 12 + self.month - 1

    @property
    def era(self) -> int:
        """ISO era code: 1 for CE (year >= 1), 0 for BCE."""
        return 1 if self.year >= 1 else 0

    def to_epoch_day(self) -> int:
        cycles, y = _fold(self.year)
        return date(y, self.month, self.day).toordinal() + cycles * DAYS_PER_CYCLE - _UNIX_EPOCH_ORDINAL

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def plus_days(self, days: int) -> "IsoDate":
        if days == 0:
            return self
        return IsoDate.of_epoch_day(self.to_epoch_day() + days)

    def plus_months(self, months: int) -> "IsoDate":
        """Adds months, clipping the day to the end of the resulting month."""
        if months == 0:
            return self
        year, m0 = divmod(self.proleptic_month + months, 12)
        month = m0 + 1
        return IsoDate(year, month, min(self.day, days_in_month(year, month)))

    def _months_until(self, end: "IsoDate") -> int:
        packed1 = self.proleptic_month * 32 + self.day
        packed2 = end.proleptic_month * 32 + end.day
        return _tdiv(packed2 - packed1, 32)

    def until(self, end: "IsoDate", unit: Unit) -> int:
        """Whole ``unit``s from this date up to ``end`` (exclusive); negative when ``end`` is earlier."""
        if not isinstance(end, IsoDate):
            raise DateConversionError(f"Expected IsoDate, got {type(end).__name__}")
        if unit is Unit.DAYS:
            return end.to_epoch_day() - self.to_epoch_day()
        if unit is Unit.WEEKS:
            return _tdiv(end.to_epoch_day() - self.to_epoch_day(), 7)
        if unit is Unit.MONTHS:
            return self._months_until(end)
        if unit is Unit.YEARS:
            return _tdiv(self._months_until(end), 12)
        if unit is Unit.DECADES:
            return _tdiv(self._months_until(end), 120)
        if unit is Unit.CENTURIES:
            return _tdiv(self._months_until(end), 1200)
        if unit is Unit.MILLENNIA:
            return _tdiv(self._months_until(end), 12000)
        if unit is Unit.ERAS:
            return end.era - self.era
        raise UnsupportedUnitError(f"Unsupported unit: {unit}")

    def period_until(self, end: "IsoDate") -> Period:
        """Years, months and days from this date up to ``end`` (exclusive)."""
        if not isinstance(end, IsoDate):
            raise DateConversionError(f"Expected IsoDate, got {type(end).__name__}")
        total_months = end.proleptic_month - self.proleptic_month
        days = end.day - self.day
        if total_months > 0 and days < 0:
            total_months -= 1
            days = end.to_epoch_day() - self.plus_months(total_months).to_epoch_day()
        elif total_months < 0 and days > 0:
            total_months += 1
            days -= end.length_of_month()
        years = _tdiv(total_months, 12)
        return Period(years, total_months - years * 12, days)

    def __str__(self) -> str:
        return f"{format_year(self.year)}-{self.month:02d}-{self.day:02d}"
