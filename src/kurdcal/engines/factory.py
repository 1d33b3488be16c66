"""
kurdcal.engines.factory
-----------------------
Turns frozen calendar specs into CalendarEngine instances bound to a year-start provider.
"""

from __future__ import annotations
from typing import Optional

from kurdcal.core.types import AstronomicalParams, CalendarSpec, EngineSpec, FixedParams
from kurdcal.engines.astro.cache import EquinoxCache
from kurdcal.engines.calendar import CalendarEngine
from kurdcal.engines.year_start import AstronomicalYearStart, FixedYearStart


def build_calendar_engine(spec: CalendarSpec, *, cache: Optional[EquinoxCache] = None) -> CalendarEngine:
    """Pick the year-start provider from the params type and wrap it in a CalendarEngine."""
    params = spec.year_start
    if isinstance(params, AstronomicalParams):
        provider = AstronomicalYearStart(params, cache=cache)
    elif isinstance(params, FixedParams):
        provider = FixedYearStart(params)
    else:
        raise TypeError(f"Unknown year-start params type: {type(params)}")

    return CalendarEngine(id=spec.id, provider=provider, month_lengths=spec.month_lengths)


def make_engine(spec: EngineSpec, *, cache: Optional[EquinoxCache] = None) -> CalendarEngine:
    """Build an engine from an EngineSpec."""
    return build_calendar_engine(spec.payload, cache=cache)
