"""
kurdcal.engines.astro.equinox
-----------------------------
March (spring) equinox from Meeus, "Astronomical Algorithms", ch. 27.

The mean equinox JDE0 is a polynomial in millennia (Table 27.A), measured
from year 2000 for 1000..3000 and from year 0 otherwise;
the 24 periodic terms of Table 27.B are applied with the dL normalisation.
All 24 terms are needed to stay within about a minute over 1800-2200.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from kurdcal.core.time import jd_to_datetime_utc

JD_J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0


@dataclass(frozen=True)
class MeanEquinoxPoly:
    """JDE0(Y) = c0 + c1*Y + c2*Y^2 + c3*Y^3 + c4*Y^4, Y in millennia."""
    coeffs: Tuple[float, ...]

    def __call__(self, Y: float) -> float:
        c0, c1, c2, c3, c4 = self.coeffs
        return c0 + c1 * Y + c2 * Y * Y + c3 * Y * Y * Y + c4 * Y * Y * Y * Y


@dataclass(frozen=True)
class CosTerm:
    """amp * cos(phase + rate*T), angles in degrees, T in Julian centuries."""
    amp: float
    phase_deg: float
    rate_deg: float


# Table 27.A, March equinox, years +1000..+3000. Y = (year - 2000)/1000.
POLY_1000_3000 = MeanEquinoxPoly((2451623.80984, 365242.37404, 0.05169, -0.00411, -0.00057))
# Table 27.A, years -1000..+1000. Y = year/1000.
# Also used, extrapolated, for every year outside [1000, 3000).
POLY_OUTSIDE = MeanEquinoxPoly((1721139.29189, 365242.13740, 0.06134, 0.00111, -0.00071))

# Table 27.B
PERIODIC_TERMS: Tuple[CosTerm, ...] = (
    CosTerm(485, 324.96, 1934.136),
    CosTerm(203, 337.23, 32964.467),
    CosTerm(199, 342.08, 20.186),
    CosTerm(182, 27.85, 445267.112),
    CosTerm(156, 73.14, 45036.886),
    CosTerm(136, 171.52, 22518.443),
    CosTerm(77, 222.54, 65928.934),
    CosTerm(74, 296.72, 3034.906),
    CosTerm(70, 243.58, 9037.513),
    CosTerm(58, 119.81, 33718.147),
    CosTerm(52, 297.17, 150.678),
    CosTerm(50, 21.02, 2281.226),
    CosTerm(45, 247.54, 29929.562),
    CosTerm(44, 325.15, 31555.956),
    CosTerm(29, 60.93, 4443.417),
    CosTerm(18, 155.12, 67555.328),
    CosTerm(17, 288.79, 4562.452),
    CosTerm(16, 198.04, 62894.029),
    CosTerm(14, 199.76, 31436.921),
    CosTerm(12, 95.39, 14577.848),
    CosTerm(12, 287.11, 31931.756),
    CosTerm(12, 320.81, 34777.259),
    CosTerm(9, 227.73, 1222.114),
    CosTerm(8, 15.45, 16859.074),
)


def cos_deg(x: float) -> float:
    return math.cos(math.radians(x))


def mean_equinox_jde(year: int) -> float:
    """Mean equinox JDE0; each row of Table 27.A has its own origin for Y."""
    if 1000 <= year < 3000:
        return POLY_1000_3000((year - 2000.0) / 1000.0)
    return POLY_OUTSIDE(year / 1000.0)


def periodic_sum(T: float) -> float:
    return sum(t.amp * cos_deg(t.phase_deg + t.rate_deg * T) for t in PERIODIC_TERMS)


def spring_equinox_jde(year: int) -> float:
    """Julian Ephemeris Day of the March equinox. Defined for every integer year."""
    jde0 = mean_equinox_jde(year)
    T = (jde0 - JD_J2000) / DAYS_PER_CENTURY
    W = 35999.373 * T - 2.47
    d_lambda = 1 + 0.0334 * cos_deg(W) + 0.0007 * cos_deg(2 * W)
    S = periodic_sum(T)
    return jde0 + (0.00001 * S) / d_lambda


def calculate_spring_equinox(year: int) -> datetime:
    """
    Uncached March equinox as a UTC datetime (millisecond resolution).

    Raises CalendarRangeError if the result falls outside datetime's years 1..9999.
    """
    return jd_to_datetime_utc(spring_equinox_jde(year))
