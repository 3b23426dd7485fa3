"""
calsaka.engines.indian_date
---------------------------
A date in the Indian National (Saka) calendar.

Dates are aligned such that Saka 1869-05-24 is ISO 1947-08-15. Every date
carries the ISO date it stands for; differences between dates are taken on the
ISO dates, since the two calendars start and end their days at the same
instant.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Optional, Union

from ..core.errors import CalendarTableError, DateConversionError, InvalidValueError, UnsupportedFieldError, UnsupportedUnitError
from ..core.time import EPOCH_DAY_RANGE, MAX_YEAR, YEAR_RANGE, IsoDate, Period, format_year
from ..core.types import Field, IsoConvertible, Unit, ValueRange
from .era import IndianEra
from .month_table import (
    EPOCH_DAY_WRT_ISO,
    indian_days_in_year,
    indian_to_iso,
    is_indian_leap_year,
    iso_to_indian,
    year_day_to_iso,
)

if TYPE_CHECKING:
    from .chronology import IndianChronology

MONTH_OF_YEAR_RANGE = ValueRange.of(1, 12)
DAY_OF_MONTH_RANGE = ValueRange.of(1, 30, 31)
DAY_OF_YEAR_RANGE = ValueRange.of(1, 365, 366)
ERA_RANGE = ValueRange.of(0, 1)

SUPPORTED_FIELDS = frozenset({
    Field.DAY_OF_MONTH,
    Field.MONTH_OF_YEAR,
    Field.YEAR,
    Field.YEAR_OF_ERA,
    Field.ERA,
    Field.EPOCH_DAY,
})

SUPPORTED_UNITS = frozenset({Unit.DAYS, Unit.MONTHS, Unit.YEARS, Unit.ERAS})


def month_length(year: int, month: int) -> int:
    if 2 <= month <= 6:
        return 31  # Vaishakha..Bhadra
    if 7 <= month <= 12:
        return 30  # Ashvin..Phalguna
    if month == 1:
        return 31 if is_indian_leap_year(year) else 30  # Chaitra
    raise InvalidValueError(f"Invalid Indian month: {month}")


@dataclass(frozen=True, order=True)
class IndianDate(IsoConvertible):
    """
    Immutable Indian date: proleptic year, month (1..12) and day-of-month.

    ``IndianDate(1942, 1, 1)`` validates the fields by converting to ISO and
    back; a day past the end of its month fails with ``InvalidValueError``.
    The era is derived from the year and never stored.
    """
    year: int
    month: int
    day: int
    _iso: Optional[IsoDate] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self._iso is not None:
            return
        MONTH_OF_YEAR_RANGE.check_valid_value(self.month, Field.MONTH_OF_YEAR)
        DAY_OF_MONTH_RANGE.check_valid_value(self.day, Field.DAY_OF_MONTH)
        iso = indian_to_iso(self.year, self.month, self.day)
        if iso_to_indian(iso) != (self.year, self.month, self.day):
            raise InvalidValueError(
                f"Invalid Indian date {format_year(self.year)}-{self.month:02d}-{self.day:02d}: "
                f"day must be in 1..{month_length(self.year, self.month)}"
            )
        object.__setattr__(self, "_iso", iso)

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "IndianDate":
        return cls(year, month, day)

    @classmethod
    def from_iso(cls, iso: Union[IsoDate, date]) -> "IndianDate":
        if not isinstance(iso, IsoDate):
            iso = IsoDate.from_date(iso)
        year, month, day = iso_to_indian(iso)
        return cls(year, month, day, _iso=iso)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> "IndianDate":
        # both construction paths end in the same ISO -> Indian routine
        return cls.from_iso(year_day_to_iso(year, day_of_year))

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> "IndianDate":
        return cls.from_iso(IsoDate.of_epoch_day(epoch_day + EPOCH_DAY_WRT_ISO))

    def to_iso_date(self) -> IsoDate:
        if self._iso is None:
            raise CalendarTableError(f"{self} has no ISO date")
        return self._iso

    def to_date(self) -> date:
        return self.to_iso_date().to_date()

    @property
    def chronology(self) -> "IndianChronology":
        from .chronology import INSTANCE
        return INSTANCE

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    @property
    def era(self) -> IndianEra:
        return IndianEra.for_proleptic_year(self.year)

    @property
    def year_of_era(self) -> int:
        return self.year if self.year >= 1 else 1 - self.year

    @property
    def epoch_day(self) -> int:
        return self.to_iso_date().to_epoch_day() - EPOCH_DAY_WRT_ISO

    def is_leap_year(self) -> bool:
        return is_indian_leap_year(self.year)

    def length_of_month(self) -> int:
        return month_length(self.year, self.month)

    def length_of_year(self) -> int:
        return indian_days_in_year(self.year)

    def is_supported(self, f: Field) -> bool:
        return f in SUPPORTED_FIELDS

    def is_supported_unit(self, unit: Unit) -> bool:
        return unit in SUPPORTED_UNITS

    def get(self, f: Field) -> int:
        """
        Value of a supported field.

        DAY_OF_YEAR is not readable here even though ``range(Field.DAY_OF_YEAR)``
        answers; it raises ``UnsupportedFieldError`` like any other unsupported field.
        """
        if f is Field.DAY_OF_MONTH:
            return self.day
        if f is Field.MONTH_OF_YEAR:
            return self.month
        if f is Field.YEAR:
            return self.year
        if f is Field.YEAR_OF_ERA:
            return self.year_of_era
        if f is Field.ERA:
            return self.era.code
        if f is Field.EPOCH_DAY:
            return self.epoch_day
        raise UnsupportedFieldError(f"Unsupported field: {f}")

    def range(self, f: Field) -> ValueRange:
        """Valid values of ``f`` for this particular date (e.g. the day-of-month range follows the month length)."""
        if f is Field.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if f is Field.MONTH_OF_YEAR:
            return MONTH_OF_YEAR_RANGE
        if f is Field.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if f is Field.YEAR_OF_ERA:
            return ValueRange.of(1, MAX_YEAR + 1) if self.year <= 0 else ValueRange.of(1, MAX_YEAR)
        if f is Field.YEAR:
            return YEAR_RANGE
        if f is Field.ERA:
            return ERA_RANGE
        if f is Field.EPOCH_DAY:
            return EPOCH_DAY_RANGE
        raise UnsupportedFieldError(f"Unsupported field: {f}")

    # ---------------------------------------------------------
    # Differences
    # ---------------------------------------------------------

    def _check_other(self, end: object) -> "IndianDate":
        if not isinstance(end, IndianDate):
            raise DateConversionError(
                f"until() is supported for dates of the Indian calendar only, got {type(end).__name__}"
            )
        return end

    def until(self, end: "IndianDate", unit: Unit) -> int:
        """
        Whole ``unit``s from this date up to ``end`` (exclusive).

        Days are calendar-agnostic. MONTHS and YEARS are counted on the ISO
        dates, so they follow ISO month boundaries rather than Indian ones.
        """
        end = self._check_other(end)
        if unit not in SUPPORTED_UNITS:
            raise UnsupportedUnitError(f"Unsupported unit: {unit}")
        return self.to_iso_date().until(end.to_iso_date(), unit)

    def period_until(self, end: "IndianDate") -> Period:
        end = self._check_other(end)
        return self.to_iso_date().period_until(end.to_iso_date())

    def __str__(self) -> str:
        return f"{format_year(self.year)}-{self.month:02d}-{self.day:02d}"
