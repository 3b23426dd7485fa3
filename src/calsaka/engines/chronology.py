"""
calsaka.engines.chronology
--------------------------
The Indian National calendar system.

Dates are aligned such that Saka 1869-05-24 is ISO 1947-08-15.

- era: the current Saka era (SE) and the previous era (BEFORE_SE).
- year-of-era: counts up from 1 in SE; counts up from 1 going back in BEFORE_SE.
- proleptic-year: ISO proleptic year minus 78; zero and negative in BEFORE_SE.
- month-of-year: months start in the middle of an ISO month and have 30 or 31 days.
- day-of-month: Chaitra has 31 days in a leap year, 30 otherwise; months 2-6
  have 31 days and months 7-12 have 30.
- day-of-year: day 1 is 22 March in a common year and 21 March in a leap year.
- leap-year: exactly the ISO leap year 78 years ahead, so the two calendars are
  never out of step.
"""

from __future__ import annotations

from datetime import date
from typing import List

from ..core.errors import DateConversionError, InvalidValueError, UnsupportedFieldError
from ..core.time import EPOCH_DAY_RANGE, MAX_YEAR, MIN_YEAR, IsoDate, is_leap_year
from ..core.types import Field, IsoConvertible, ValueRange
from .era import IndianEra
from .indian_date import DAY_OF_MONTH_RANGE, DAY_OF_YEAR_RANGE, ERA_RANGE, MONTH_OF_YEAR_RANGE, IndianDate
from .month_table import EPOCH_DAY_WRT_ISO, YEARS_BEHIND_ISO_YEAR

_RANGES = {
    Field.DAY_OF_MONTH: DAY_OF_MONTH_RANGE,
    Field.MONTH_OF_YEAR: MONTH_OF_YEAR_RANGE,
    Field.YEAR: ValueRange.of(MIN_YEAR, MAX_YEAR),
    Field.YEAR_OF_ERA: ValueRange.of(1, MAX_YEAR, MAX_YEAR + 1),
    Field.ERA: ERA_RANGE,
    Field.DAY_OF_YEAR: DAY_OF_YEAR_RANGE,
    Field.EPOCH_DAY: EPOCH_DAY_RANGE,
}


class IndianChronology:
    """
    Stateless calendar-system facade. Use the module-level ``INSTANCE``.
    """
    YEARS_BEHIND_ISO_YEAR = YEARS_BEHIND_ISO_YEAR
    EPOCH_DAY_WRT_ISO = EPOCH_DAY_WRT_ISO

    @property
    def id(self) -> str:
        """Registry id of this calendar."""
        return "Indian"

    @property
    def calendar_type(self) -> str:
        """Registry calendar type of this calendar."""
        return "indian"

    # ---------------------------------------------------------
    # Date construction
    # ---------------------------------------------------------

    def date(self, year: int, month: int, day: int) -> IndianDate:
        return IndianDate(year, month, day)

    def date_era(self, era: IndianEra, year_of_era: int, month: int, day: int) -> IndianDate:
        return self.date(self.proleptic_year(era, year_of_era), month, day)

    def date_year_day(self, year: int, day_of_year: int) -> IndianDate:
        return IndianDate.of_year_day(year, day_of_year)

    def date_year_day_era(self, era: IndianEra, year_of_era: int, day_of_year: int) -> IndianDate:
        return self.date_year_day(self.proleptic_year(era, year_of_era), day_of_year)

    def date_epoch_day(self, epoch_day: int) -> IndianDate:
        # negative epoch days are allowed
        return IndianDate.of_epoch_day(epoch_day)

    def date_now(self) -> IndianDate:
        return IndianDate.from_iso(date.today())

    def date_from(self, temporal: object) -> IndianDate:
        """
        Indian date for any value that can produce an ISO date: an ``IndianDate``
        (returned as is), any ``IsoConvertible``, or a ``datetime.date`` /
        ``datetime.datetime``. Anything else raises ``DateConversionError``.
        """
        if isinstance(temporal, IndianDate):
            return temporal
        if isinstance(temporal, IsoConvertible):
            return IndianDate.from_iso(temporal.to_iso_date())
        if isinstance(temporal, date):
            return IndianDate.from_iso(IsoDate.from_date(temporal))
        raise DateConversionError(
            f"Unable to obtain IndianDate from temporal: {temporal!r} of type {type(temporal).__name__}"
        )

    # ---------------------------------------------------------
    # Years and eras
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year + YEARS_BEHIND_ISO_YEAR)

    def proleptic_year(self, era: IndianEra, year_of_era: int) -> int:
        if era is IndianEra.SE:
            return year_of_era
        if era is IndianEra.BEFORE_SE:
            return 1 - year_of_era
        raise InvalidValueError(f"Invalid era {era!r} for IndianChronology")

    def era_of(self, code: int) -> IndianEra:
        return IndianEra.of(code)

    def eras(self) -> List[IndianEra]:
        return [IndianEra.BEFORE_SE, IndianEra.SE]

    def range(self, f: Field) -> ValueRange:
        """Range of ``f`` over all Indian dates."""
        if f not in _RANGES:
            raise UnsupportedFieldError(f"Unsupported field: {f}")
        return _RANGES[f]

    def __repr__(self) -> str:
        return f"IndianChronology(id={self.id!r})"


INSTANCE = IndianChronology()
