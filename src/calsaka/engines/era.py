"""
calsaka.engines.era
-------------------
The two eras of the Indian calendar.

The current era, for proleptic years 1 onwards, is the Saka era (SE). All
previous years, zero or earlier in the proleptic count, belong to the
Before Saka era (BEFORE_SE), whose year-of-era counts up from 1 going back in
time:

    year-of-era  era        proleptic-year  ISO proleptic-year
    2            SE         2               80
    1            SE         1               79
    1            BEFORE_SE  0               78
    2            BEFORE_SE  -1              77

The numeric code of an era is its enum value, which is fixed. Never use the
position of a member in the enum as its code.
"""

from __future__ import annotations

from enum import Enum

from ..core.errors import InvalidValueError


class IndianEra(Enum):
    BEFORE_SE = 0
    SE = 1

    @classmethod
    def of(cls, code: int) -> "IndianEra":
        """Era for a numeric code (0 or 1)."""
        if code == 0:
            return cls.BEFORE_SE
        if code == 1:
            return cls.SE
        raise InvalidValueError(f"Invalid Indian era: {code}")

    @classmethod
    def for_proleptic_year(cls, year: int) -> "IndianEra":
        return cls.SE if year >= 1 else cls.BEFORE_SE

    @property
    def code(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.name
