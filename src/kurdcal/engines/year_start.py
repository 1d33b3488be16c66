from __future__ import annotations
from datetime import date
from typing import Any, Dict, Optional

from kurdcal.core.errors import CalendarInvariantError
from kurdcal.core.time import check_representable, kurdish_to_gregorian_year
from kurdcal.core.types import AstronomicalParams, FixedParams
from .astro.cache import EquinoxCache, default_cache
from .astro.longitude import year_start_date


class AstronomicalYearStart:
    """
    Nowruz is the civil day containing the spring equinox at a longitude.
    A year is leap when the next Nowruz is 366 days later.
    """
    def __init__(self, params: AstronomicalParams, cache: Optional[EquinoxCache] = None):
        self.p = params
        self.cache = cache if cache is not None else default_cache()

    @property
    def longitude(self) -> float:
        return self.p.longitude

    def year_start(self, year: int) -> date:
        check_representable(year)
        return year_start_date(kurdish_to_gregorian_year(year), self.p.longitude, cache=self.cache)

    def year_length(self, year: int) -> int:
        span = (self.year_start(year + 1) - self.year_start(year)).days
        if span not in (365, 366):
            raise CalendarInvariantError(
                f"Kurdish year {year} spans {span} days at longitude {self.p.longitude}; expected 365 or 366"
            )
        return span

    def is_leap_year(self, year: int) -> bool:
        return self.year_length(year) == 366

    def info(self) -> Dict[str, Any]:
        return {"kind": "astronomical", "longitude": self.p.longitude}


class FixedYearStart:
    """Nowruz fixed on a Gregorian month/day; leap years from a fixed cycle."""
    def __init__(self, params: FixedParams):
        self.p = params

    def year_start(self, year: int) -> date:
        check_representable(year)
        return date(kurdish_to_gregorian_year(year), self.p.month, self.p.day)

    def cycle_position(self, year: int) -> int:
        """1..cycle"""
        return ((year - 1) % self.p.cycle) + 1

    def is_leap_year(self, year: int) -> bool:
        return self.cycle_position(year) in self.p.leap_positions

    def info(self) -> Dict[str, Any]:
        return {"kind": "fixed", "month": self.p.month, "day": self.p.day, "cycle": self.p.cycle}
