from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Union

from .core.engine import Chronology, ChronologyRegistry
from .core.time import IsoDate
from .engines.indian_date import IndianDate
from .engines.month_table import find_segment, indian_to_iso

_registry: Optional[ChronologyRegistry] = None

def set_registry(reg: ChronologyRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ChronologyRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def chronology_of(name: str) -> Chronology:
    """Chronology by id (``"Indian"``) or calendar type (``"indian"``)."""
    return _reg().get(name)

def register_chronology(chronology: Chronology, *, overwrite: bool = False) -> None:
    _reg().register(chronology, overwrite=overwrite)

def _as_iso(d: Union[IsoDate, date]) -> IsoDate:
    return d if isinstance(d, IsoDate) else IsoDate.from_date(d)

# ============================================================
# Conversions
# ============================================================

def to_indian(d: Union[IsoDate, date]) -> IndianDate:
    """Indian date for an ISO date (``IsoDate``, ``datetime.date`` or ``datetime.datetime``)."""
    return IndianDate.from_iso(_as_iso(d))

def to_iso(year: int, month: int, day: int) -> IsoDate:
    """ISO date for a valid Indian (year, month, day)."""
    return IndianDate(year, month, day).to_iso_date()

def from_year_day(year: int, day_of_year: int) -> IndianDate:
    return IndianDate.of_year_day(year, day_of_year)

def from_epoch_day(epoch_day: int) -> IndianDate:
    """Indian date for an Indian epoch day (day 0 is Indian 0000-01-01, ISO 0078-03-22)."""
    return IndianDate.of_epoch_day(epoch_day)

# ============================================================
# Debug API
# ============================================================

def explain(d: Union[IsoDate, date]) -> Dict[str, Any]:
    """Step-by-step view of an ISO -> Indian conversion and its way back."""
    iso = _as_iso(d)
    seg = find_segment(iso)
    ind = IndianDate.from_iso(iso)
    return {
        "iso": str(iso),
        "iso_leap_year": iso.is_leap_year(),
        "iso_day_of_year": iso.day_of_year,
        "iso_epoch_day": iso.to_epoch_day(),
        "segment": seg._asdict(),
        "indian": str(ind),
        "year": ind.year,
        "month": ind.month,
        "day": ind.day,
        "era": ind.era.name,
        "year_of_era": ind.year_of_era,
        "indian_leap_year": ind.is_leap_year(),
        "length_of_month": ind.length_of_month(),
        "epoch_day": ind.epoch_day,
        "back_to_iso": str(indian_to_iso(ind.year, ind.month, ind.day)),
    }
