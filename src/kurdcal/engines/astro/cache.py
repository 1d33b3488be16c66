from __future__ import annotations
import logging
import threading
from datetime import datetime
from typing import Callable, Dict, Optional

from .equinox import calculate_spring_equinox

log = logging.getLogger(__name__)


class EquinoxCache:
    """
    Memo table: Gregorian year -> equinox instant (UTC).

    The computation is deterministic, so clearing only affects latency.
    Lookup, computation and store run under a single lock.
    """
    def __init__(self, compute: Callable[[int], datetime] = calculate_spring_equinox):
        self._compute = compute
        self._entries: Dict[int, datetime] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, year: int) -> datetime:
        with self._lock:
            hit = self._entries.get(year)
            if hit is not None:
                return hit
            log.debug("equinox cache miss for %d", year)
            value = self._compute(year)
            self._entries[year] = value
            return value

    def clear_all(self) -> None:
        with self._lock:
            self._entries.clear()
        log.debug("equinox cache cleared")

    def clear_year(self, year: int) -> None:
        with self._lock:
            self._entries.pop(year, None)

    def __contains__(self, year: object) -> bool:
        with self._lock:
            return year in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_default_cache = EquinoxCache()


def default_cache() -> EquinoxCache:
    return _default_cache


def compute_spring_equinox(year: int) -> datetime:
    """Spring equinox (UTC) for a Gregorian year, memoized in the process-wide cache."""
    return _default_cache.get_or_compute(year)


def clear_cache(year: Optional[int] = None) -> None:
    """Clear the whole equinox cache, or only `year` when given."""
    if year is None:
        _default_cache.clear_all()
    else:
        _default_cache.clear_year(year)
