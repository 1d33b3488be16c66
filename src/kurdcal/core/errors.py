from __future__ import annotations
from typing import Optional


class KurdcalError(Exception):
    """Base error."""


class CalendarRangeError(KurdcalError, ValueError):
    """A date component lies outside its valid range."""

    def __init__(self, field: str, value: int, lower: Optional[int] = None, upper: Optional[int] = None, context: str = ""):
        self.field = field
        self.value = value
        self.lower = lower
        self.upper = upper
        if lower is not None and upper is not None:
            bound = f"between {lower} and {upper}"
        elif lower is not None:
            bound = f"{lower} or greater"
        else:
            bound = f"{upper} or less"
        msg = f"{field} must be {bound}{context} (got {value})"
        super().__init__(msg)


class CalendarInvariantError(KurdcalError, AssertionError):
    """Raised when consecutive year starts are not 365 or 366 days apart."""
