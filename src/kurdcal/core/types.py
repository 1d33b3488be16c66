from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple


@dataclass(frozen=True)
class EngineId:
    family: Literal["astronomical", "simplified", "custom"]
    name: str
    version: str


@dataclass(frozen=True)
class YMD:
    """Plain (year, month, day) label in the Kurdish calendar."""
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    engine: EngineId
    kurdish: YMD
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class AstronomicalParams:
    """Year starts on the civil day containing the equinox at `longitude` (deg E)."""
    longitude: float = 44.0


@dataclass(frozen=True)
class FixedParams:
    """Year starts on a fixed Gregorian month/day; leap years follow a 33-year cycle."""
    month: int = 3
    day: int = 21
    cycle: int = 33
    leap_positions: Tuple[int, ...] = (1, 5, 9, 13, 17, 22, 26, 30)


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar engine."""
    id: EngineId
    year_start: Any  # AstronomicalParams | FixedParams
    month_lengths: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
    meta: Optional[Dict[str, Any]] = None


@dataclass(frozen=True)
class EngineSpec:
    """A named calendar: kind tag plus the CalendarSpec payload."""
    kind: Literal["astronomical", "fixed"]
    id: EngineId
    payload: CalendarSpec

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))
