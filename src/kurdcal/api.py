from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import DayInfo, EngineSpec, YMD
from .attributes.registry import compute_attributes
from .engines.astro import longitude as _lon
from .engines.astro.cache import clear_cache, compute_spring_equinox  # noqa: F401  (re-exported)
from .engines.astro.equinox import spring_equinox_jde  # noqa: F401  (re-exported)
from .engines.factory import make_engine as _make_engine
from .engines.specs import DEFAULT_LONGITUDE

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_calendar(name: str, *, longitude: Optional[float] = None) -> CalendarEngine:
    """Build a fresh engine from a built-in spec, optionally re-bound to a meridian."""
    from .engines.specs import ALL_SPECS, astronomical_at
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown engine spec '{name}'")
    spec = ALL_SPECS[name]

    if longitude is not None:
        if spec.kind == "astronomical":
            spec = astronomical_at(longitude, name=f"{name}@{longitude:g}")
        else:
            raise ValueError(f"Calendar '{name}' does not support longitude overrides.")

    return _make_engine(spec)

@lru_cache(maxsize=64)
def _bound(name: str, longitude: float) -> CalendarEngine:
    return get_calendar(name, longitude=longitude)

def get_engine(engine: str = "astronomical", longitude: Optional[float] = None) -> CalendarEngine:
    """Registered engine by name, or the same calendar re-bound to `longitude`."""
    if longitude is None:
        return _reg().get(engine)
    return _bound(engine, float(longitude))

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def to_gregorian(year: int, month: int, day: int, *, engine: str = "astronomical", longitude: Optional[float] = None) -> date:
    return get_engine(engine, longitude).to_gregorian(year, month, day)

def from_gregorian(d: date, *, engine: str = "astronomical", longitude: Optional[float] = None) -> YMD:
    return get_engine(engine, longitude).from_gregorian(d)

def is_leap_year(year: int, *, engine: str = "astronomical", longitude: Optional[float] = None) -> bool:
    return get_engine(engine, longitude).is_leap_year(year)

def days_in_month(month: int, year: int, *, engine: str = "astronomical", longitude: Optional[float] = None) -> int:
    return get_engine(engine, longitude).days_in_month(month, year)

def days_in_year(year: int, *, engine: str = "astronomical", longitude: Optional[float] = None) -> int:
    return get_engine(engine, longitude).days_in_year(year)

def day_of_year(year: int, month: int, day: int, *, engine: str = "astronomical", longitude: Optional[float] = None) -> int:
    return get_engine(engine, longitude).day_of_year(year, month, day)

def validate(year: int, month: int, day: int, *, engine: str = "astronomical", longitude: Optional[float] = None) -> None:
    """Raise CalendarRangeError if (year, month, day) is not a valid Kurdish date."""
    get_engine(engine, longitude).validate(year, month, day)

def nowruz_date(year: int, *, engine: str = "astronomical", longitude: Optional[float] = None) -> date:
    """Gregorian date of 1/1 of Kurdish `year`."""
    return get_engine(engine, longitude).year_start(year)

def day_info(
    d: date,
    *,
    engine: str = "astronomical",
    longitude: Optional[float] = None,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    eng = get_engine(engine, longitude)
    info = eng.day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, eng, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(d: date, *, engine: str = "astronomical", longitude: Optional[float] = None) -> Dict[str, Any]:
    return get_engine(engine, longitude).explain(d)

# ============================================================
# Equinox
# ============================================================

def equinox_moment(kurdish_year: int, longitude: float = DEFAULT_LONGITUDE) -> datetime:
    """Local Mean Time (naive) of the equinox opening `kurdish_year` at `longitude`."""
    return _lon.equinox_moment(kurdish_year, longitude)

def equinox_moment_utc(kurdish_year: int) -> datetime:
    return _lon.equinox_moment_utc(kurdish_year)

