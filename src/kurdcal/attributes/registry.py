from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.engine import CalendarEngine
from ..core.types import DayInfo
from ..core.time import to_jdn

# An attribute sees the converted day and the engine that produced it,
# so year-level facts (leap status, Nowruz) come from the same meridian.
AttrFunc = Callable[[DayInfo, CalendarEngine], Dict[str, Any]]
_ATTRIBUTES: Dict[str, AttrFunc] = {}


def register_attribute(name: str, fn: AttrFunc, *, overwrite: bool = False) -> None:
    if name in _ATTRIBUTES and not overwrite:
        raise KeyError(f"Attribute '{name}' already registered. Use overwrite=True to replace.")
    _ATTRIBUTES[name] = fn


def available_attributes() -> List[str]:
    return sorted(_ATTRIBUTES)


def compute_attributes(info: DayInfo, engine: CalendarEngine, names: Sequence[str]) -> Dict[str, Any]:
    """Merge the dicts returned by each named attribute, in order."""
    merged: Dict[str, Any] = {}
    for name in names:
        fn = _ATTRIBUTES.get(name)
        if fn is None:
            raise KeyError(f"Unknown attribute '{name}'. Available: {available_attributes()}")
        merged.update(fn(info, engine))
    return merged


def jdn(info: DayInfo) -> int:
    """Julian Day Number of the civil day."""
    return to_jdn(info.civil_date)
