# tests/test_equinox.py

import math
from datetime import datetime, timezone

import pytest

import kurdcal
from kurdcal.core.errors import CalendarRangeError
from kurdcal.core.time import jd_to_civil, jd_to_datetime_utc
from kurdcal.engines.astro import equinox as eq

# Espenak (astropixels.com) March equinox, UTC, minute resolution.
ESPENAK = {
    2000: (3, 20, 7, 35), 2001: (3, 20, 13, 31), 2002: (3, 20, 19, 16),
    2003: (3, 21, 1, 0), 2004: (3, 20, 6, 49), 2005: (3, 20, 12, 34),
    2006: (3, 20, 18, 25), 2007: (3, 21, 0, 7), 2008: (3, 20, 5, 49),
    2009: (3, 20, 11, 44), 2010: (3, 20, 17, 32), 2011: (3, 20, 23, 21),
    2012: (3, 20, 5, 15), 2013: (3, 20, 11, 2), 2014: (3, 20, 16, 57),
    2015: (3, 20, 22, 45), 2016: (3, 20, 4, 31), 2017: (3, 20, 10, 29),
    2018: (3, 20, 16, 15), 2019: (3, 20, 21, 58), 2020: (3, 20, 3, 50),
    2021: (3, 20, 9, 37), 2022: (3, 20, 15, 33), 2023: (3, 20, 21, 24),
    2024: (3, 20, 3, 7), 2025: (3, 20, 9, 2), 2026: (3, 20, 14, 46),
    2027: (3, 20, 20, 25), 2028: (3, 20, 2, 17), 2029: (3, 20, 8, 2),
    2030: (3, 20, 13, 52),
}

TOLERANCE_MINUTES = 2.0


def reference(year: int) -> datetime:
    m, d, hh, mm = ESPENAK[year]
    return datetime(year, m, d, hh, mm, tzinfo=timezone.utc)


@pytest.mark.parametrize("year", sorted(ESPENAK))
def test_matches_espenak_within_tolerance(year):
    computed = kurdcal.compute_spring_equinox(year)
    minutes = abs((computed - reference(year)).total_seconds()) / 60.0
    assert minutes <= TOLERANCE_MINUTES


def test_result_is_utc_aware():
    e = kurdcal.compute_spring_equinox(2025)
    assert e.tzinfo is not None
    assert e.utcoffset().total_seconds() == 0


@pytest.mark.parametrize("year", [1900, 2000, 2100, 2200, 1800])
def test_falls_in_late_march(year):
    e = kurdcal.compute_spring_equinox(year)
    assert e.month == 3
    assert 19 <= e.day <= 21


def test_all_24_periodic_terms_present():
    assert len(eq.PERIODIC_TERMS) == 24
    assert eq.PERIODIC_TERMS[0] == eq.CosTerm(485, 324.96, 1934.136)
    assert eq.PERIODIC_TERMS[-1] == eq.CosTerm(8, 15.45, 16859.074)


def test_polynomial_selection_boundaries():
    # [1000, 3000) uses the modern row; everything else the other one
    assert eq.mean_equinox_jde(1000) == eq.POLY_1000_3000((1000 - 2000) / 1000.0)
    assert eq.mean_equinox_jde(2999) == eq.POLY_1000_3000((2999 - 2000) / 1000.0)
    assert eq.mean_equinox_jde(999) == eq.POLY_OUTSIDE(999 / 1000.0)
    assert eq.mean_equinox_jde(3000) == eq.POLY_OUTSIDE(3000 / 1000.0)


@pytest.mark.parametrize("year", [1000, 3000])
def test_polynomials_meet_at_range_edges(year):
    # both rows describe the same equinox near their shared boundary
    step = eq.mean_equinox_jde(year) - eq.mean_equinox_jde(year - 1)
    assert step == pytest.approx(365.2422, abs=0.01)


def test_jde_total_for_any_year():
    for year in (-4000, -1, 0, 1, 500, 5000, 20000):
        assert math.isfinite(kurdcal.spring_equinox_jde(year))


def test_jde_increases_by_a_tropical_year():
    span = kurdcal.spring_equinox_jde(2001) - kurdcal.spring_equinox_jde(2000)
    assert span == pytest.approx(365.2422, abs=0.02)


def test_out_of_datetime_range_is_reported():
    with pytest.raises(CalendarRangeError) as ei:
        kurdcal.compute_spring_equinox(0)
    assert ei.value.field == "year"


def test_outside_accuracy_window_still_computed():
    # degraded accuracy is not an error
    e = kurdcal.compute_spring_equinox(3500)
    assert e.year == 3500
    e = kurdcal.compute_spring_equinox(500)
    assert e.year == 500
    for year in (1, 999, 3000, 5000, 9999):
        e = kurdcal.compute_spring_equinox(year)
        assert e.year == year
        assert e.month == 3


def test_jd_to_civil_j2000():
    assert jd_to_civil(2451545.0) == (2000, 1, 1, 12, 0, 0, 0)
    assert jd_to_datetime_utc(2451545.0) == datetime(2000, 1, 1, 12, tzinfo=timezone.utc)


def test_jd_to_civil_meeus_examples():
    # Meeus example 7.c: JD 2436116.31 -> 1957 October 4.81
    y, m, d, hh, mm, _, _ = jd_to_civil(2436116.31)
    assert (y, m, d, hh, mm) == (1957, 10, 4, 19, 26)
    # Before the Gregorian reform the Julian calendar branch is used:
    # JD 1842713.0 -> 333 January 27.5
    assert jd_to_civil(1842713.0)[:4] == (333, 1, 27, 12)


def test_fraction_floors_at_each_stage():
    # 0.999999 of a day must never round up into the next day
    y, m, d, hh, mm, ss, ms = jd_to_civil(2451545.0 - 0.5 + 0.9999999)
    assert (y, m, d) == (2000, 1, 1)
    assert (hh, mm, ss) == (23, 59, 59)
    assert 0 <= ms <= 999
