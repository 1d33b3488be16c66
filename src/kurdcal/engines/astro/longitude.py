"""
kurdcal.engines.astro.longitude
-------------------------------
Projects the UTC equinox onto an observer meridian.

The "local" instant here is Local Mean Time: UTC shifted by longitude/15 hours.
It is deliberately returned as a naive datetime; it is not a civil time zone
and has no daylight-saving behaviour.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from kurdcal.core.time import kurdish_to_gregorian_year
from .cache import EquinoxCache, default_cache


def lmt_offset_hours(longitude_deg_east: float) -> float:
    """
    Offset (hours) between UTC and Local Mean Time at given longitude.
    Positive east longitudes mean LMT ahead of UTC.
      360° -> 24h  =>  1° -> 4 minutes.
    """
    return longitude_deg_east / 15.0


def wrap_longitude(longitude_deg_east: float) -> float:
    """Map longitude to (-180, 180]."""
    x = (longitude_deg_east + 180.0) % 360.0 - 180.0
    return 180.0 if x == -180.0 else x


def local_instant(equinox_utc: datetime, longitude_deg_east: float) -> datetime:
    """UTC instant -> naive Local Mean Time at longitude (degrees east)."""
    if equinox_utc.tzinfo is None:
        raise ValueError("equinox_utc must be timezone-aware UTC")
    shifted = equinox_utc.astimezone(timezone.utc) + timedelta(hours=lmt_offset_hours(longitude_deg_east))
    return shifted.replace(tzinfo=None)


def year_start_date(gregorian_year: int, longitude_deg_east: float, *, cache: Optional[EquinoxCache] = None) -> date:
    """Gregorian day containing the spring equinox as observed at the longitude (Nowruz).

    Longitudes are taken modulo 360, so L and L + 360 give the same day.
    """
    if cache is None:
        cache = default_cache()
    return local_instant(cache.get_or_compute(gregorian_year), wrap_longitude(longitude_deg_east)).date()


def equinox_moment(kurdish_year: int, longitude_deg_east: float, *, cache: Optional[EquinoxCache] = None) -> datetime:
    """Local Mean Time of the equinox that opens `kurdish_year`."""
    if cache is None:
        cache = default_cache()
    return local_instant(cache.get_or_compute(kurdish_to_gregorian_year(kurdish_year)), longitude_deg_east)


def equinox_moment_utc(kurdish_year: int, *, cache: Optional[EquinoxCache] = None) -> datetime:
    if cache is None:
        cache = default_cache()
    return cache.get_or_compute(kurdish_to_gregorian_year(kurdish_year))
