"""
kurdcal.engines.interfaces
--------------------------
Boundary between the year-start policy (when does year Y begin?) and the
calendar arithmetic that counts days from it.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Protocol


class YearStartProvider(Protocol):
    """
    Supplies the first Gregorian day of each Kurdish year and the leap rule
    that sizes month 12.
    """
    def year_start(self, year: int) -> date:
        """Gregorian date of 1/1 of Kurdish `year`."""
        ...

    def is_leap_year(self, year: int) -> bool:
        """True when month 12 of `year` has 30 days."""
        ...

    def info(self) -> Dict[str, Any]:
        ...
