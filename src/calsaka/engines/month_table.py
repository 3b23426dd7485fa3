"""
calsaka.engines.month_table
---------------------------
Static ISO day-of-year -> Indian month tables and the conversion routines
built on them.

Each table has 13 segments. Pausha (month 10) starts on 22 December and is
split at the ISO year boundary: days 1-10 close the ISO year, days 11-30 open
the next one, so its second segment restarts at ISO day-of-year 1.

Segments with ``year_delta == -1`` lie in the ISO year after the one the
Indian year started in.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

from ..core.errors import CalendarTableError
from ..core.log import get_logger
from ..core.time import IsoDate, days_in_year, is_leap_year
from ..core.types import Field, ValueRange

log = get_logger(__name__)

# Indian proleptic year = ISO proleptic year - 78 (for Chaitra..Pausha day 10)
YEARS_BEHIND_ISO_YEAR = 78

# Indian epoch day 0 (Indian 0000-01-01) is ISO epoch day -690958 (ISO 0078-03-22)
EPOCH_DAY_WRT_ISO = -690958

# Chaitra 1 is ISO day-of-year 81 (21 March in a leap year, 22 March otherwise)
NEW_YEAR_ISO_DAY_OF_YEAR = 81

# Days of Pausha that fall before 1 January
PAUSHA_DAYS_BEFORE_ISO_NEW_YEAR = 10

DAYS_IN_LEAP_YEAR = 366
DAYS_IN_NON_LEAP_YEAR = 365


class IndianMonth(NamedTuple):
    """A contiguous run of ISO days-of-year that all fall in one Indian month."""
    month: int
    iso_min: int
    iso_max: int
    year_delta: int

    def contains(self, iso_day_of_year: int) -> bool:
        return self.iso_min <= iso_day_of_year <= self.iso_max

    def day_of_month(self, iso_day_of_year: int) -> int:
        if not self.contains(iso_day_of_year):
            raise CalendarTableError(f"ISO day-of-year {iso_day_of_year} is outside {self}")
        day = iso_day_of_year - self.iso_min + 1
        if self.iso_min == 1:
            day += PAUSHA_DAYS_BEFORE_ISO_NEW_YEAR
        return day


LEAP_MONTHS: Tuple[IndianMonth, ...] = (
    IndianMonth(1, 81, 111, 0),
    IndianMonth(2, 112, 142, 0),
    IndianMonth(3, 143, 173, 0),
    IndianMonth(4, 174, 204, 0),
    IndianMonth(5, 205, 235, 0),
    IndianMonth(6, 236, 266, 0),
    IndianMonth(7, 267, 296, 0),
    IndianMonth(8, 297, 326, 0),
    IndianMonth(9, 327, 356, 0),
    IndianMonth(10, 357, 366, 0),
    IndianMonth(10, 1, 20, -1),
    IndianMonth(11, 21, 50, -1),
    IndianMonth(12, 51, 80, -1),
)

MONTHS: Tuple[IndianMonth, ...] = (
    IndianMonth(1, 81, 110, 0),
    IndianMonth(2, 111, 141, 0),
    IndianMonth(3, 142, 172, 0),
    IndianMonth(4, 173, 203, 0),
    IndianMonth(5, 204, 234, 0),
    IndianMonth(6, 235, 265, 0),
    IndianMonth(7, 266, 295, 0),
    IndianMonth(8, 296, 325, 0),
    IndianMonth(9, 326, 355, 0),
    IndianMonth(10, 356, 365, 0),
    IndianMonth(10, 1, 20, -1),
    IndianMonth(11, 21, 50, -1),
    IndianMonth(12, 51, 80, -1),
)


def month_table(iso_leap: bool) -> Tuple[IndianMonth, ...]:
    return LEAP_MONTHS if iso_leap else MONTHS


def is_indian_leap_year(year: int) -> bool:
    """Indian leap years track the ISO leap year 78 years ahead, so the calendars never drift."""
    return is_leap_year(year + YEARS_BEHIND_ISO_YEAR)


def indian_days_in_year(year: int) -> int:
    return DAYS_IN_LEAP_YEAR if is_indian_leap_year(year) else DAYS_IN_NON_LEAP_YEAR


def is_next_iso_year(month: int, day: int) -> bool:
    """True when the Indian (month, day) falls in the ISO year after the one its Indian year began in."""
    if month < 10:
        return False  # Chaitra..Agrahayana
    if month > 10:
        return True   # Magha, Phalguna
    return day > PAUSHA_DAYS_BEFORE_ISO_NEW_YEAR


# ---------------------------------------------------------
# ISO -> Indian
# ---------------------------------------------------------

def find_segment(iso: IsoDate) -> IndianMonth:
    """The month-table segment an ISO date falls in."""
    doy = iso.day_of_year
    for seg in month_table(iso.is_leap_year()):
        if seg.contains(doy):
            return seg
    log.error("month_table.no_segment", iso=str(iso), day_of_year=doy)
    raise CalendarTableError(f"Can't convert {iso} to Indian date.")


def iso_to_indian(iso: IsoDate) -> Tuple[int, int, int]:
    """(proleptic year, month, day-of-month) of the Indian date for an ISO date."""
    seg = find_segment(iso)
    year = iso.year + seg.year_delta - YEARS_BEHIND_ISO_YEAR
    return year, seg.month, seg.day_of_month(iso.day_of_year)


# ---------------------------------------------------------
# Indian -> ISO
# ---------------------------------------------------------

def indian_to_iso(year: int, month: int, day: int) -> IsoDate:
    """
    ISO date for an Indian (year, month, day).

    The day is not checked against the length of the month; callers that need
    a strict check compare the round trip (see ``IndianDate``).
    """
    iso_year = year + YEARS_BEHIND_ISO_YEAR + (1 if is_next_iso_year(month, day) else 0)
    iso_leap = is_leap_year(iso_year)

    seg = next((m for m in month_table(iso_leap) if m.month == month), None)
    if seg is None:
        log.error("month_table.no_month", year=year, month=month, day=day, iso_leap=iso_leap)
        raise CalendarTableError(f"No month-table segment for Indian month {month}")

    doy = seg.iso_min + day - 1
    # first Pausha segment runs past 31 December
    length = days_in_year(iso_year)
    if doy > length:
        doy -= length
    return IsoDate.of_year_day(iso_year, doy)


def year_day_to_iso(year: int, day_of_year: int) -> IsoDate:
    """ISO date for an Indian (year, day-of-year); the day-of-year is validated."""
    length = indian_days_in_year(year)
    ValueRange.of(1, length).check_valid_value(day_of_year, Field.DAY_OF_YEAR)
    shifted = day_of_year + NEW_YEAR_ISO_DAY_OF_YEAR - 1
    iso_year = year + YEARS_BEHIND_ISO_YEAR + (1 if shifted > length else 0)
    iso_doy = shifted - length if shifted > length else shifted
    return IsoDate.of_year_day(iso_year, iso_doy)


def check_tables() -> None:
    """Verify both tables cover every ISO day-of-year exactly once."""
    for iso_leap, table in ((True, LEAP_MONTHS), (False, MONTHS)):
        length = DAYS_IN_LEAP_YEAR if iso_leap else DAYS_IN_NON_LEAP_YEAR
        seen = [0] * (length + 1)
        for seg in table:
            for doy in range(seg.iso_min, seg.iso_max + 1):
                seen[doy] += 1
        if any(c != 1 for c in seen[1:]):
            raise CalendarTableError(f"{'Leap' if iso_leap else 'Non-leap'} month table is not an exact cover of 1..{length}")
