"""
kurdcal.dates
-------------
Immutable Kurdish date values on top of the calendar engines.

KurdishDate uses the simplified calendar (Nowruz on 21 March);
KurdishAstronomicalDate carries the meridian its Nowruz is observed from.
Month/year arithmetic clamps the day to the end of the target month.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from functools import total_ordering

from . import api
from .core.engine import CalendarEngine
from .engines.specs import DEFAULT_LONGITUDE, ERBIL, SULAYMANIYAH, TEHRAN, UTC


def _shift_month(year: int, month: int, months: int) -> tuple[int, int]:
    idx = (month - 1) + months
    return year + idx // 12, idx % 12 + 1


@total_ordering
class _KurdishDateMixin(ABC):
    year: int
    month: int
    day: int

    @abstractmethod
    def _engine(self) -> CalendarEngine:
        """Engine that labels this date."""

    @abstractmethod
    def _with(self, year: int, month: int, day: int):
        """Same kind of date with another label."""

    @abstractmethod
    def _from_civil(self, d: date):
        """Same kind of date for Gregorian day `d`."""

    def __post_init__(self) -> None:
        self._engine().validate(self.year, self.month, self.day)

    def to_gregorian(self) -> date:
        return self._engine().to_gregorian(self.year, self.month, self.day)

    @property
    def weekday(self) -> int:
        """0=Mon..6=Sun"""
        return self.to_gregorian().weekday()

    @property
    def day_of_year(self) -> int:
        return self._engine().day_of_year(self.year, self.month, self.day)

    @property
    def is_leap_year(self) -> bool:
        return self._engine().is_leap_year(self.year)

    def add_days(self, days: int):
        return self._from_civil(self.to_gregorian() + timedelta(days=days))

    def add_months(self, months: int):
        year, month = _shift_month(self.year, self.month, months)
        last = self._engine().days_in_month(month, year)
        return self._with(year, month, min(self.day, last))

    def add_years(self, years: int):
        year = self.year + years
        last = self._engine().days_in_month(self.month, year)
        return self._with(year, self.month, min(self.day, last))

    def days_between(self, other: "_KurdishDateMixin") -> int:
        """self - other, in days."""
        return (self.to_gregorian() - other.to_gregorian()).days

    def __lt__(self, other):
        if not isinstance(other, _KurdishDateMixin):
            return NotImplemented
        return self.to_gregorian() < other.to_gregorian()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, eq=True)
class KurdishDate(_KurdishDateMixin):
    """
    A date of the simplified calendar.

    The 33-year cycle can call a year common while the Gregorian span between
    two 21 March dates is 366 days. The 20 March closing such a year has no
    label, so from_gregorian(), today() and add_days() raise
    CalendarInvariantError on it (e.g. 2028-03-20).
    """
    year: int
    month: int
    day: int

    def _engine(self) -> CalendarEngine:
        return api.get_engine("simplified")

    def _with(self, year: int, month: int, day: int) -> "KurdishDate":
        return KurdishDate(year, month, day)

    def _from_civil(self, d: date) -> "KurdishDate":
        return KurdishDate.from_gregorian(d)

    @classmethod
    def from_gregorian(cls, d: date) -> "KurdishDate":
        ymd = api.from_gregorian(d, engine="simplified")
        return cls(ymd.year, ymd.month, ymd.day)

    @classmethod
    def today(cls) -> "KurdishDate":
        return cls.from_gregorian(datetime.now(timezone.utc).date())

    def to_astronomical(self, longitude: float = DEFAULT_LONGITUDE) -> "KurdishAstronomicalDate":
        """Same year/month/day label, read astronomically (the Gregorian day may move)."""
        return KurdishAstronomicalDate(self.year, self.month, self.day, longitude)

    def to_astronomical_recalculated(self, longitude: float = DEFAULT_LONGITUDE) -> "KurdishAstronomicalDate":
        """Same Gregorian day, relabelled astronomically."""
        return KurdishAstronomicalDate.from_gregorian(self.to_gregorian(), longitude)


@dataclass(frozen=True, eq=True)
class KurdishAstronomicalDate(_KurdishDateMixin):
    """A date of the astronomical calendar observed from `longitude` (degrees east)."""
    year: int
    month: int
    day: int
    longitude: float = DEFAULT_LONGITUDE

    def _engine(self) -> CalendarEngine:
        return api.get_engine("astronomical", self.longitude)

    def _with(self, year: int, month: int, day: int) -> "KurdishAstronomicalDate":
        return KurdishAstronomicalDate(year, month, day, self.longitude)

    def _from_civil(self, d: date) -> "KurdishAstronomicalDate":
        return KurdishAstronomicalDate.from_gregorian(d, self.longitude)

    @classmethod
    def from_gregorian(cls, d: date, longitude: float = DEFAULT_LONGITUDE) -> "KurdishAstronomicalDate":
        ymd = api.from_gregorian(d, engine="astronomical", longitude=longitude)
        return cls(ymd.year, ymd.month, ymd.day, longitude)

    @classmethod
    def today(cls, longitude: float = DEFAULT_LONGITUDE) -> "KurdishAstronomicalDate":
        return cls.from_gregorian(datetime.now(timezone.utc).date(), longitude)

    @classmethod
    def from_longitude(cls, year: int, month: int, day: int, longitude: float) -> "KurdishAstronomicalDate":
        return cls(year, month, day, longitude)

    @classmethod
    def from_erbil(cls, year: int, month: int, day: int) -> "KurdishAstronomicalDate":
        return cls(year, month, day, ERBIL)

    @classmethod
    def from_sulaymaniyah(cls, year: int, month: int, day: int) -> "KurdishAstronomicalDate":
        return cls(year, month, day, SULAYMANIYAH)

    @classmethod
    def from_tehran(cls, year: int, month: int, day: int) -> "KurdishAstronomicalDate":
        return cls(year, month, day, TEHRAN)

    @classmethod
    def from_utc(cls, year: int, month: int, day: int) -> "KurdishAstronomicalDate":
        return cls(year, month, day, UTC)

    def equinox_moment(self) -> datetime:
        """Local Mean Time of the equinox that opened this date's year."""
        return api.equinox_moment(self.year, self.longitude)

    def to_simplified(self) -> KurdishDate:
        return KurdishDate(self.year, self.month, self.day)

    def to_simplified_recalculated(self) -> KurdishDate:
        return KurdishDate.from_gregorian(self.to_gregorian())

    def with_longitude(self, longitude: float) -> "KurdishAstronomicalDate":
        """Same Gregorian day seen from another meridian."""
        return KurdishAstronomicalDate.from_gregorian(self.to_gregorian(), longitude)
