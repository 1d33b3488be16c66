"""
kurdcal.engines.specs
---------------------
Pure data definitions of the built-in calendars.

Longitudes are degrees east of Greenwich and select the meridian whose
Local Mean Time decides which civil day contains the equinox.
"""

from __future__ import annotations

from typing import Dict

from kurdcal.core.types import AstronomicalParams, CalendarSpec, EngineId, EngineSpec, FixedParams

# Reference meridians
ERBIL = 44.0
SULAYMANIYAH = 45.0
TEHRAN = 52.5
UTC = 0.0

DEFAULT_LONGITUDE = ERBIL

ASTRONOMICAL = EngineSpec(
    kind="astronomical",
    id=EngineId(family="astronomical", name="astronomical", version="1"),
    payload=CalendarSpec(
        id=EngineId(family="astronomical", name="astronomical", version="1"),
        year_start=AstronomicalParams(longitude=DEFAULT_LONGITUDE),
        meta={"equinox": "Meeus ch. 27, 24 periodic terms", "meridian": "Erbil"},
    ),
)

SIMPLIFIED = EngineSpec(
    kind="fixed",
    id=EngineId(family="simplified", name="simplified", version="1"),
    payload=CalendarSpec(
        id=EngineId(family="simplified", name="simplified", version="1"),
        year_start=FixedParams(month=3, day=21),
        meta={"nowruz": "21 March", "leap_rule": "33-year cycle"},
    ),
)

ALL_SPECS: Dict[str, EngineSpec] = {
    "astronomical": ASTRONOMICAL,
    "simplified": SIMPLIFIED,
}


def astronomical_at(longitude: float, *, name: str = "astronomical") -> EngineSpec:
    """The astronomical spec re-bound to another meridian."""
    eid = EngineId(family="astronomical", name=name, version=ASTRONOMICAL.id.version)
    spec = ASTRONOMICAL.tweak(year_start=AstronomicalParams(longitude=longitude), id=eid)
    return EngineSpec(kind=spec.kind, id=eid, payload=spec.payload)
