"""kurdcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    compute_spring_equinox,
    spring_equinox_jde,
    clear_cache,
    equinox_moment,
    equinox_moment_utc,
    to_gregorian,
    from_gregorian,
    is_leap_year,
    days_in_month,
    days_in_year,
    day_of_year,
    validate,
    nowruz_date,
    day_info,
    explain,
    list_engines,
    engine_info,
    get_calendar,
    get_engine,
    make_engine,
    register_engine,
)
from .core.errors import CalendarInvariantError, CalendarRangeError, KurdcalError
from .core.time import KURDISH_EPOCH_OFFSET
from .core.types import DayInfo, YMD
from .dates import KurdishAstronomicalDate, KurdishDate
from .engines.specs import ERBIL, SULAYMANIYAH, TEHRAN, UTC

__all__ = [
    "compute_spring_equinox",
    "spring_equinox_jde",
    "clear_cache",
    "equinox_moment",
    "equinox_moment_utc",
    "to_gregorian",
    "from_gregorian",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "day_of_year",
    "validate",
    "nowruz_date",
    "day_info",
    "explain",
    "list_engines",
    "engine_info",
    "get_calendar",
    "get_engine",
    "make_engine",
    "register_engine",
    "CalendarInvariantError",
    "CalendarRangeError",
    "KurdcalError",
    "KURDISH_EPOCH_OFFSET",
    "DayInfo",
    "YMD",
    "KurdishDate",
    "KurdishAstronomicalDate",
    "ERBIL",
    "SULAYMANIYAH",
    "TEHRAN",
    "UTC",
]
