from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Dict, Optional

@dataclass(frozen=True)
class EngineId:
    name: str
    version: str

@dataclass(frozen=True)
class LunarDate:
    year: int
    month: int
    day: int
    is_leap_month: bool = False
    engine: Optional[EngineId] = None

    def as_tuple(self) -> tuple:
        """Core layout: (day, month, year, leap)."""
        return (self.day, self.month, self.year, int(self.is_leap_month))

@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    jdn: int
    engine: EngineId
    lunar: LunarDate
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a lunisolar calendar engine."""
    id: EngineId
    time_zone: int  # hours east of UTC
    meta: Dict[str, Any] = field(default_factory=dict)

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)
