from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol

from .log import get_logger
from .types import Field, ValueRange

log = get_logger(__name__)

class Chronology(Protocol):
    @property
    def id(self) -> str: ...
    @property
    def calendar_type(self) -> str: ...
    def date(self, year: int, month: int, day: int) -> Any: ...
    def date_year_day(self, year: int, day_of_year: int) -> Any: ...
    def date_epoch_day(self, epoch_day: int) -> Any: ...
    def date_from(self, temporal: object) -> Any: ...
    def is_leap_year(self, year: int) -> bool: ...
    def range(self, f: Field) -> ValueRange: ...

@dataclass
class ChronologyRegistry:
    """Chronologies by id and by calendar type; both names lead to the same instance."""
    _chronologies: Dict[str, Chronology] = field(default_factory=dict)

    def get(self, name: str) -> Chronology:
        if name not in self._chronologies:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._chronologies)}")
        return self._chronologies[name]

    def list(self) -> List[str]:
        return sorted(self._chronologies.keys())

    def register(self, chronology: Chronology, *, overwrite: bool = False) -> None:
        names = (chronology.id, chronology.calendar_type)
        if not overwrite:
            taken = [n for n in names if n in self._chronologies]
            if taken:
                raise KeyError(f"Calendar '{taken[0]}' already exists. Use overwrite=True to replace.")
        for name in names:
            self._chronologies[name] = chronology
        log.debug("registry.registered", id=chronology.id, calendar_type=chronology.calendar_type)
