"""calsaka public API.

Indian National (Saka) calendar <-> proleptic ISO calendar.
Keep this surface small: users should mostly interact with names re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    chronology_of,
    register_chronology,
    to_indian,
    to_iso,
    from_year_day,
    from_epoch_day,
    explain,
)
from .core.errors import (
    CalsakaError,
    DateTimeError,
    InvalidValueError,
    DateConversionError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    CalendarTableError,
)
from .core.time import IsoDate, Period
from .core.types import Field, Unit, ValueRange, IsoConvertible
from .engines.era import IndianEra
from .engines.indian_date import IndianDate
from .engines.chronology import IndianChronology, INSTANCE as INDIAN

__all__ = [
    "list_calendars",
    "chronology_of",
    "register_chronology",
    "to_indian",
    "to_iso",
    "from_year_day",
    "from_epoch_day",
    "explain",
    "CalsakaError",
    "DateTimeError",
    "InvalidValueError",
    "DateConversionError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "CalendarTableError",
    "IsoDate",
    "Period",
    "Field",
    "Unit",
    "ValueRange",
    "IsoConvertible",
    "IndianEra",
    "IndianDate",
    "IndianChronology",
    "INDIAN",
]
