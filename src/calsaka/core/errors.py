class CalsakaError(Exception):
    """Base error."""

class DateTimeError(CalsakaError, ValueError):
    """Raised when a date cannot be built, read or converted."""

class InvalidValueError(DateTimeError):
    """Raised when a field value is outside its valid range (era code, day-of-year, month, day)."""

class DateConversionError(DateTimeError):
    """Raised when a temporal value cannot yield an ISO date."""

class UnsupportedFieldError(DateTimeError):
    """Raised when a calendar field is not supported by a date or chronology."""

class UnsupportedUnitError(DateTimeError):
    """Raised when a temporal unit is not supported by a date."""

class CalendarTableError(CalsakaError, RuntimeError):
    """Raised when the month tables cannot resolve a valid input (a table bug, never a user error)."""
