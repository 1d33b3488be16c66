"""Diagnostics package.

- leap_years: always available, gap between consecutive Nowruz dates per meridian
- equinox_residuals: needs numpy (diagnostics extra)
"""

__all__ = ["leap_years", "equinox_residuals"]
