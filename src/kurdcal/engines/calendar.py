"""
kurdcal.engines.calendar
------------------------
The Orchestrator. Binds a year-start provider to the fixed month-length table
and counts days between Gregorian dates and Kurdish (year, month, day) labels.

Both the astronomical and the simplified calendars run through this class;
they differ only in which Gregorian day counts as 1/1.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, Tuple

from kurdcal.core.errors import CalendarInvariantError, CalendarRangeError
from kurdcal.core.time import gregorian_to_kurdish_year
from kurdcal.core.types import DayInfo, EngineId, YMD
from kurdcal.engines.interfaces import YearStartProvider

log = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


class CalendarEngine:
    """
    Day-counting arithmetic over a 12-month year whose last month is
    one day longer in leap years.
    """
    def __init__(
        self,
        id: EngineId,
        provider: YearStartProvider,
        month_lengths: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29),
    ):
        if len(month_lengths) != MONTHS_PER_YEAR:
            raise ValueError(f"month_lengths must have {MONTHS_PER_YEAR} entries")
        self.id = id
        self.provider = provider
        self.month_lengths = tuple(month_lengths)
        log.debug("built calendar engine %s (%s)", id.name, provider.info())

    # ---------------------------------------------------------
    # Year structure
    # ---------------------------------------------------------

    def year_start(self, year: int) -> date:
        return self.provider.year_start(year)

    def is_leap_year(self, year: int) -> bool:
        return self.provider.is_leap_year(year)

    def days_in_month(self, month: int, year: int) -> int:
        if not (1 <= month <= MONTHS_PER_YEAR):
            raise CalendarRangeError("month", month, 1, MONTHS_PER_YEAR)
        n = self.month_lengths[month - 1]
        if month == MONTHS_PER_YEAR and self.is_leap_year(year):
            n += 1
        return n

    def days_in_year(self, year: int) -> int:
        return sum(self.month_lengths) + (1 if self.is_leap_year(year) else 0)

    def _days_before_month(self, month: int) -> int:
        # months before `month` never include the variable last month
        return sum(self.month_lengths[: month - 1])

    def day_of_year(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return self._days_before_month(month) + day

    def validate(self, year: int, month: int, day: int) -> None:
        if year < 1:
            raise CalendarRangeError("year", year, lower=1)
        if not (1 <= month <= MONTHS_PER_YEAR):
            raise CalendarRangeError("month", month, 1, MONTHS_PER_YEAR)
        max_day = self.days_in_month(month, year)
        if not (1 <= day <= max_day):
            raise CalendarRangeError("day", day, 1, max_day, context=f" for month {month} in year {year}")

    # ---------------------------------------------------------
    # Forward: Kurdish label to Gregorian date
    # ---------------------------------------------------------

    def to_gregorian(self, year: int, month: int, day: int) -> date:
        self.validate(year, month, day)
        offset = self._days_before_month(month) + (day - 1)
        return self.year_start(year) + timedelta(days=offset)

    # ---------------------------------------------------------
    # Inverse: Gregorian date to Kurdish label
    # ---------------------------------------------------------

    def from_gregorian(self, d: date) -> YMD:
        if isinstance(d, datetime):
            d = d.date()
        year = gregorian_to_kurdish_year(d.year)
        start = self.year_start(year)
        if d < start:
            year -= 1
            start = self.year_start(year)

        day = (d - start).days + 1
        leap = self.is_leap_year(year)
        for i, n in enumerate(self.month_lengths):
            if i == MONTHS_PER_YEAR - 1 and leap:
                n += 1
            if day <= n:
                return YMD(year, i + 1, day)
            day -= n

        raise CalendarInvariantError(
            f"{d.isoformat()} lies {day} day(s) past the end of Kurdish year {year} "
            f"({'leap' if leap else 'common'}) but before the start of year {year + 1}"
        )

    # ---------------------------------------------------------
    # Introspection
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "year_start": self.provider.info()}

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        ymd = self.from_gregorian(d)
        dbg = None
        if debug:
            dbg = {
                "year_start": self.year_start(ymd.year),
                "is_leap_year": self.is_leap_year(ymd.year),
                "day_of_year": self._days_before_month(ymd.month) + ymd.day,
                "provider": self.provider.info(),
            }
        return DayInfo(civil_date=d, engine=self.id, kurdish=ymd, debug=dbg)

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
