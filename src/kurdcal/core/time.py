from __future__ import annotations
import math
from datetime import date, datetime, timezone

from .errors import CalendarRangeError

# Kurdish year = Gregorian year containing its Nowruz + 700 (Median era, ~700 BCE)
KURDISH_EPOCH_OFFSET = 700

# First JD (integer part) on the Gregorian side of the 1582 reform.
_GREGORIAN_REFORM_Z = 2299161


def kurdish_to_gregorian_year(kurdish_year: int) -> int:
    return kurdish_year - KURDISH_EPOCH_OFFSET


def gregorian_to_kurdish_year(gregorian_year: int) -> int:
    return gregorian_year + KURDISH_EPOCH_OFFSET


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jd_to_civil(jd: float) -> tuple[int, int, int, int, int, int, int]:
    """
    Meeus (ch. 7) JD -> (year, month, day, hour, minute, second, millisecond).

    The fractional day is expanded by flooring at each stage before the
    next multiplication (hours, then minutes, then seconds, then ms).

    Before JD 2299161 (1582-10-15) the result is a Julian calendar date. It is
    still stored in proleptic Gregorian `date` objects by callers, so pre-1583
    equinoxes read several days early (ten by 1582) and counts across a Julian-only
    century leap day come out one day short.
    """
    Z = math.floor(jd + 0.5)
    F = (jd + 0.5) - Z

    if Z < _GREGORIAN_REFORM_Z:
        A = Z
    else:
        alpha = math.floor((Z - 1867216.25) / 36524.25)
        A = Z + 1 + alpha - math.floor(alpha / 4)

    B = A + 1524
    C = math.floor((B - 122.1) / 365.25)
    D = math.floor(365.25 * C)
    E = math.floor((B - D) / 30.6001)

    day = B - D - math.floor(30.6001 * E) + F
    month = int(E - 1 if E < 14 else E - 13)
    year = int(C - 4716 if month > 2 else C - 4715)

    day_int = math.floor(day)
    frac = day - day_int

    hours = math.floor(frac * 24)
    minutes_dec = (frac * 24 - hours) * 60
    minutes = math.floor(minutes_dec)
    seconds_dec = (minutes_dec - minutes) * 60
    seconds = math.floor(seconds_dec)
    millis = math.floor((seconds_dec - seconds) * 1000)

    return year, month, int(day_int), int(hours), int(minutes), int(seconds), int(millis)


def jd_to_datetime_utc(jd: float) -> datetime:
    """JD -> timezone-aware UTC datetime (Meeus civil conversion)."""
    y, m, d, hh, mm, ss, ms = jd_to_civil(jd)
    if not (1 <= y <= 9999):
        raise CalendarRangeError("year", y, 1, 9999, context=" to be representable as a datetime")
    return datetime(y, m, d, hh, mm, ss, ms * 1000, tzinfo=timezone.utc)



# Kurdish years whose Nowruz falls inside datetime's 1..9999 range.
MIN_KURDISH_YEAR = gregorian_to_kurdish_year(1)
MAX_KURDISH_YEAR = gregorian_to_kurdish_year(9999)


def check_representable(kurdish_year: int) -> None:
    if not (MIN_KURDISH_YEAR <= kurdish_year <= MAX_KURDISH_YEAR):
        raise CalendarRangeError(
            "year", kurdish_year, MIN_KURDISH_YEAR, MAX_KURDISH_YEAR,
            context=" for conversion to a Gregorian date",
        )
