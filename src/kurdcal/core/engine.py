from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol

from .types import DayInfo, YMD

log = logging.getLogger(__name__)


class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def to_gregorian(self, year: int, month: int, day: int) -> date: ...
    def from_gregorian(self, d: date) -> YMD: ...
    def year_start(self, year: int) -> date: ...
    def is_leap_year(self, year: int) -> bool: ...
    def days_in_month(self, month: int, year: int) -> int: ...
    def days_in_year(self, year: int) -> int: ...
    def day_of_year(self, year: int, month: int, day: int) -> int: ...
    def validate(self, year: int, month: int, day: int) -> None: ...
    def day_info(self, d: date, *, debug: bool = False) -> DayInfo: ...


@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        log.debug("registering engine %r", name)
        self._engines[name] = engine
