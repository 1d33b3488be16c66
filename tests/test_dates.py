# tests/test_dates.py

from datetime import date, timedelta

import pytest

import kurdcal
from kurdcal import CalendarRangeError, KurdishAstronomicalDate, KurdishDate


def test_astronomical_date_basics():
    d = KurdishAstronomicalDate(2724, 1, 1)
    assert d.longitude == kurdcal.ERBIL
    assert d.to_gregorian() == date(2024, 3, 20)
    assert d.weekday == 2  # Wednesday
    assert d.day_of_year == 1
    assert not d.is_leap_year
    assert str(d) == "2724-01-01"


def test_from_gregorian_and_named_meridians():
    assert KurdishAstronomicalDate.from_gregorian(date(2024, 9, 22)) == KurdishAstronomicalDate(2724, 7, 1)
    assert KurdishAstronomicalDate.from_erbil(2724, 1, 1).longitude == 44.0
    assert KurdishAstronomicalDate.from_sulaymaniyah(2724, 1, 1).longitude == 45.0
    assert KurdishAstronomicalDate.from_tehran(2724, 1, 1).longitude == 52.5
    assert KurdishAstronomicalDate.from_utc(2724, 1, 1).longitude == 0.0
    assert KurdishAstronomicalDate.from_longitude(2724, 1, 1, -75.0).longitude == -75.0


def test_invalid_construction():
    with pytest.raises(CalendarRangeError):
        KurdishAstronomicalDate(2724, 12, 30)
    with pytest.raises(CalendarRangeError):
        KurdishDate(2724, 13, 1)
    KurdishAstronomicalDate(2722, 12, 30)


def test_add_days_crosses_nowruz():
    d = KurdishAstronomicalDate(2724, 12, 29)
    assert d.add_days(1) == KurdishAstronomicalDate(2725, 1, 1)
    assert d.add_days(1).add_days(-1) == d
    assert KurdishDate(2724, 12, 29).add_days(1) == KurdishDate(2725, 1, 1)


def test_add_months_clamps():
    d = KurdishAstronomicalDate(2724, 6, 31)
    assert d.add_months(1) == KurdishAstronomicalDate(2724, 7, 30)
    assert d.add_months(-7) == KurdishAstronomicalDate(2723, 11, 30)
    assert d.add_months(6) == KurdishAstronomicalDate(2724, 12, 29)
    assert d.add_months(12) == KurdishAstronomicalDate(2725, 6, 31)


def test_add_years_clamps_leap_day():
    assert KurdishAstronomicalDate(2722, 12, 30).add_years(1) == KurdishAstronomicalDate(2723, 12, 29)
    assert KurdishDate(2723, 12, 30).add_years(5) == KurdishDate(2728, 12, 30)
    assert KurdishDate(2723, 12, 30).add_years(1) == KurdishDate(2724, 12, 29)


def test_days_between_and_ordering():
    a = KurdishAstronomicalDate(2724, 1, 1)
    b = KurdishAstronomicalDate(2725, 1, 1)
    assert b.days_between(a) == 365
    assert a.days_between(b) == -365
    assert a < b
    assert b >= a
    assert sorted([b, a]) == [a, b]
    assert KurdishDate(2725, 1, 1) > KurdishDate(2724, 12, 29)


def test_dates_are_hashable_values():
    s = {KurdishDate(2724, 1, 1), KurdishDate(2724, 1, 1)}
    assert len(s) == 1
    assert KurdishAstronomicalDate(2724, 1, 1) == KurdishAstronomicalDate(2724, 1, 1, 44.0)
    assert KurdishAstronomicalDate(2724, 1, 1) != KurdishAstronomicalDate(2724, 1, 1, 52.5)


def test_simplified_to_astronomical():
    s = KurdishDate(2725, 1, 1)
    assert s.to_gregorian() == date(2025, 3, 21)
    # same label, astronomical Nowruz a day earlier
    assert s.to_astronomical().to_gregorian() == date(2025, 3, 20)
    # same day, relabelled
    assert s.to_astronomical_recalculated() == KurdishAstronomicalDate(2725, 1, 2)


def test_astronomical_to_simplified():
    a = KurdishAstronomicalDate(2725, 1, 1)
    assert a.to_simplified() == KurdishDate(2725, 1, 1)
    assert a.to_simplified_recalculated() == KurdishDate(2724, 12, 29)


def test_with_longitude_keeps_gregorian_day():
    a = KurdishAstronomicalDate(2724, 7, 1)
    b = a.with_longitude(52.5)
    assert b.longitude == 52.5
    assert b.to_gregorian() == a.to_gregorian()


def test_equinox_moment():
    a = KurdishAstronomicalDate(2725, 3, 10)
    utc = kurdcal.compute_spring_equinox(2025)
    assert a.equinox_moment() == utc.replace(tzinfo=None) + timedelta(hours=44.0 / 15.0)
    assert a.equinox_moment().date() == a.add_days(-(a.day_of_year - 1)).to_gregorian()


def test_today_is_consistent():
    t = KurdishAstronomicalDate.today()
    assert KurdishAstronomicalDate.from_gregorian(t.to_gregorian()) == t
    s = KurdishDate.today()
    assert abs(s.to_gregorian() - t.to_gregorian()) <= timedelta(days=1)


def test_simplified_unlabelled_day_raises():
    # 2727 is common in the 33-year cycle but 2027-03-21 .. 2028-03-21 is 366 days
    with pytest.raises(kurdcal.CalendarInvariantError):
        KurdishDate.from_gregorian(date(2028, 3, 20))
    with pytest.raises(kurdcal.CalendarInvariantError):
        KurdishDate(2727, 12, 29).add_days(1)
    assert KurdishDate(2727, 12, 29).add_days(2) == KurdishDate(2728, 1, 1)


def test_date_base_is_abstract():
    from kurdcal.dates import _KurdishDateMixin

    with pytest.raises(TypeError):
        _KurdishDateMixin()
