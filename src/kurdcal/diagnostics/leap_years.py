from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Sequence

import kurdcal
from kurdcal.engines.specs import ERBIL, SULAYMANIYAH, TEHRAN, UTC

DEFAULT_LONGITUDES: Dict[str, float] = {
    "UTC": UTC,
    "Erbil": ERBIL,
    "Sulaymaniyah": SULAYMANIYAH,
    "Tehran": TEHRAN,
}


@dataclass(frozen=True)
class YearGap:
    year: int
    longitude: float
    nowruz: date
    next_nowruz: date

    @property
    def days(self) -> int:
        return (self.next_nowruz - self.nowruz).days

    @property
    def is_leap(self) -> bool:
        return self.days == 366


def year_gap(year: int, longitude: float) -> YearGap:
    return YearGap(
        year=year,
        longitude=longitude,
        nowruz=kurdish_nowruz(year, longitude),
        next_nowruz=kurdish_nowruz(year + 1, longitude),
    )


def kurdish_nowruz(year: int, longitude: float) -> date:
    return kurdcal.nowruz_date(year, engine="astronomical", longitude=longitude)


def leap_years(from_year: int, to_year: int, longitude: float = ERBIL) -> List[int]:
    return [y for y in range(from_year, to_year + 1) if year_gap(y, longitude).is_leap]


def leap_intervals(years: Sequence[int]) -> List[int]:
    return [b - a for a, b in zip(years, years[1:])]


def leap_year_report(
    from_year: int,
    to_year: int,
    longitudes: Dict[str, float] = DEFAULT_LONGITUDES,
) -> List[Dict[str, object]]:
    """
    One row per Kurdish year: the Nowruz-to-Nowruz span at each meridian,
    and whether all meridians agree on the leap status.
    """
    if to_year < from_year:
        raise ValueError("to_year must be >= from_year")

    rows: List[Dict[str, object]] = []
    for y in range(from_year, to_year + 1):
        gaps = {name: year_gap(y, lon) for name, lon in longitudes.items()}
        status = {g.is_leap for g in gaps.values()}
        rows.append({
            "year": y,
            "days": {name: g.days for name, g in gaps.items()},
            "leap": {name: g.is_leap for name, g in gaps.items()},
            "agree": len(status) == 1,
        })
    return rows
