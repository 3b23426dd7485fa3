from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from .errors import InvalidValueError

if TYPE_CHECKING:
    from .time import IsoDate


class Field(Enum):
    """Calendar and clock fields a date may be queried for."""
    NANO_OF_SECOND = "NanoOfSecond"
    NANO_OF_DAY = "NanoOfDay"
    MICRO_OF_SECOND = "MicroOfSecond"
    MICRO_OF_DAY = "MicroOfDay"
    MILLI_OF_SECOND = "MilliOfSecond"
    MILLI_OF_DAY = "MilliOfDay"
    SECOND_OF_MINUTE = "SecondOfMinute"
    SECOND_OF_DAY = "SecondOfDay"
    MINUTE_OF_HOUR = "MinuteOfHour"
    MINUTE_OF_DAY = "MinuteOfDay"
    HOUR_OF_AMPM = "HourOfAmPm"
    CLOCK_HOUR_OF_AMPM = "ClockHourOfAmPm"
    HOUR_OF_DAY = "HourOfDay"
    CLOCK_HOUR_OF_DAY = "ClockHourOfDay"
    AMPM_OF_DAY = "AmPmOfDay"
    DAY_OF_WEEK = "DayOfWeek"
    ALIGNED_DAY_OF_WEEK_IN_MONTH = "AlignedDayOfWeekInMonth"
    ALIGNED_DAY_OF_WEEK_IN_YEAR = "AlignedDayOfWeekInYear"
    DAY_OF_MONTH = "DayOfMonth"
    DAY_OF_YEAR = "DayOfYear"
    EPOCH_DAY = "EpochDay"
    ALIGNED_WEEK_OF_MONTH = "AlignedWeekOfMonth"
    ALIGNED_WEEK_OF_YEAR = "AlignedWeekOfYear"
    MONTH_OF_YEAR = "MonthOfYear"
    PROLEPTIC_MONTH = "ProlepticMonth"
    YEAR_OF_ERA = "YearOfEra"
    YEAR = "Year"
    ERA = "Era"
    INSTANT_SECONDS = "InstantSeconds"
    OFFSET_SECONDS = "OffsetSeconds"

    def __str__(self) -> str:
        return self.value


class Unit(Enum):
    """Units used to measure the amount of time between two dates."""
    NANOS = "Nanos"
    MICROS = "Micros"
    MILLIS = "Millis"
    SECONDS = "Seconds"
    MINUTES = "Minutes"
    HOURS = "Hours"
    HALF_DAYS = "HalfDays"
    DAYS = "Days"
    WEEKS = "Weeks"
    MONTHS = "Months"
    YEARS = "Years"
    DECADES = "Decades"
    CENTURIES = "Centuries"
    MILLENNIA = "Millennia"
    ERAS = "Eras"
    FOREVER = "Forever"

    @property
    def is_date_based(self) -> bool:
        return self in _DATE_UNITS

    def __str__(self) -> str:
        return self.value


_DATE_UNITS = frozenset({
    Unit.DAYS, Unit.WEEKS, Unit.MONTHS, Unit.YEARS,
    Unit.DECADES, Unit.CENTURIES, Unit.MILLENNIA, Unit.ERAS,
})


@dataclass(frozen=True)
class ValueRange:
    """
    Inclusive range of valid values for a field.

    The maximum may vary (e.g. day-of-month is 30 or 31), so both the smallest
    and the largest maximum are kept.
    """
    minimum: int
    smallest_maximum: int
    largest_maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.smallest_maximum:
            raise ValueError("minimum must not exceed smallest_maximum")
        if self.smallest_maximum > self.largest_maximum:
            raise ValueError("smallest_maximum must not exceed largest_maximum")

    @classmethod
    def of(cls, minimum: int, maximum: int, largest_maximum: int | None = None) -> "ValueRange":
        if largest_maximum is None:
            return cls(minimum, maximum, maximum)
        return cls(minimum, maximum, largest_maximum)

    @property
    def maximum(self) -> int:
        return self.largest_maximum

    @property
    def is_fixed(self) -> bool:
        return self.smallest_maximum == self.largest_maximum

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.largest_maximum

    def check_valid_value(self, value: int, field: Field) -> int:
        if not self.is_valid_value(value):
            raise InvalidValueError(f"Invalid value for {field} (valid values {self}): {value}")
        return value

    def __str__(self) -> str:
        if self.is_fixed:
            return f"{self.minimum} - {self.largest_maximum}"
        return f"{self.minimum} - {self.smallest_maximum}/{self.largest_maximum}"


class IsoConvertible(ABC):
    """Capability of a date-like value to produce the ISO date it stands for."""

    @abstractmethod
    def to_iso_date(self) -> "IsoDate":
        ...
