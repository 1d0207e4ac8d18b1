# tests/test_lunisolar.py

import random
from datetime import date, timedelta

import pytest

from amlich.core.time import date_to_jdn, jdn_to_date
from amlich.engines.lunisolar import (
    INVALID_DATE,
    leap_month,
    leap_month_offset,
    lunar_month_11,
    lunar_to_solar,
    solar_to_lunar,
)

def test_golden_new_year_2000():
    assert solar_to_lunar(1, 1, 2000) == (25, 11, 1999, 0)
    assert lunar_to_solar(25, 11, 1999, 0) == (1, 1, 2000)

@pytest.mark.parametrize(
    "year,tet",
    [
        (2000, (5, 2, 2000)),
        (2001, (24, 1, 2001)),
        (2017, (28, 1, 2017)),
        (2020, (25, 1, 2020)),
        (2021, (12, 2, 2021)),
        (2022, (1, 2, 2022)),
        (2023, (22, 1, 2023)),
        (2024, (10, 2, 2024)),
        (2025, (29, 1, 2025)),
        (2026, (17, 2, 2026)),
    ],
)
def test_tet_dates(year, tet):
    assert lunar_to_solar(1, 1, year, 0) == tet
    assert solar_to_lunar(*tet) == (1, 1, year, 0)

@pytest.mark.parametrize(
    "year,month",
    [(2001, 4), (2004, 2), (2006, 7), (2009, 5), (2012, 4), (2014, 9),
     (2017, 6), (2020, 4), (2023, 2), (2025, 6), (2028, 5)],
)
def test_known_leap_months(year, month):
    assert leap_month(year) == month

@pytest.mark.parametrize("year", [2000, 2002, 2003, 2005, 2016, 2018, 2019, 2021, 2022, 2024, 2026])
def test_years_without_leap_month(year):
    assert leap_month(year) is None

@pytest.mark.parametrize(
    "year,month,main_start,leap_start",
    [
        (2017, 6, (24, 6, 2017), (23, 7, 2017)),
        (2020, 4, (23, 4, 2020), (23, 5, 2020)),
        (2025, 6, (25, 6, 2025), (25, 7, 2025)),
    ],
)
def test_leap_month_starts(year, month, main_start, leap_start):
    assert lunar_to_solar(1, month, year, 0) == main_start
    assert lunar_to_solar(1, month, year, 1) == leap_start
    assert solar_to_lunar(*main_start) == (1, month, year, 0)
    assert solar_to_lunar(*leap_start) == (1, month, year, 1)

def test_time_zone_changes_new_year():
    # New Moon 2007-02-17 16:14 UT: evening in Hanoi, after midnight in Beijing
    assert lunar_to_solar(1, 1, 2007, 0, 7) == (17, 2, 2007)
    assert lunar_to_solar(1, 1, 2007, 0, 8) == (18, 2, 2007)

def test_time_zone_changes_month_11():
    # Solstice 1984-12-21 16:23 UT falls before local midnight at UTC+7 but
    # after it at UTC+8, shifting month 11 and hence Tết 1985 by a lunation.
    assert lunar_to_solar(1, 1, 1985, 0, 7) == (21, 1, 1985)
    assert lunar_to_solar(1, 1, 1985, 0, 8) == (20, 2, 1985)

def test_month_11_contains_december_solstice():
    for year in range(1950, 2050):
        a11 = lunar_month_11(year)
        solstice_window = date_to_jdn(22, 12, year)
        assert solstice_window - 31 < a11 <= solstice_window

def test_leap_month_offset_within_year():
    for year in range(1990, 2030):
        a11 = lunar_month_11(year)
        b11 = lunar_month_11(year + 1)
        if b11 - a11 > 365:
            assert 1 <= leap_month_offset(a11) <= 12

def test_roundtrip_random_dates():
    random.seed(123)
    start = date(1900, 1, 1)
    span = (date(2100, 12, 31) - start).days
    for _ in range(3000):
        d = start + timedelta(days=random.randint(0, span))
        ld, lm, ly, leap = solar_to_lunar(d.day, d.month, d.year)
        assert 1 <= ld <= 30
        assert 1 <= lm <= 12
        assert leap in (0, 1)
        assert lunar_to_solar(ld, lm, ly, leap) == (d.day, d.month, d.year)

def test_last_day_when_mean_lunation_runs_ahead():
    # the New Moon of the following month falls one day after these dates
    assert solar_to_lunar(7, 5, 2054) == (30, 3, 2054, 0)
    assert lunar_to_solar(30, 3, 2054, 0) == (7, 5, 2054)
    assert solar_to_lunar(9, 4, 2062)[:3] == (30, 2, 2062)
    assert solar_to_lunar(8, 5, 2054)[:2] == (1, 4)

def test_every_day_belongs_to_a_month_1900_2100():
    prev = None
    for jdn in range(date_to_jdn(1, 1, 1900), date_to_jdn(1, 1, 2101)):
        ld, lm, ly, leap = solar_to_lunar(*jdn_to_date(jdn))
        assert 1 <= ld <= 30, jdn_to_date(jdn)
        if prev is not None:
            if ld == 1:
                assert prev[0] in (29, 30), jdn_to_date(jdn)
            else:
                assert (ld, lm, ly, leap) == (prev[0] + 1,) + prev[1:], jdn_to_date(jdn)
        prev = (ld, lm, ly, leap)

@pytest.mark.parametrize("year", [1984, 2020, 2023, 2025, 2033])
def test_roundtrip_whole_year(year):
    for jdn in range(date_to_jdn(1, 1, year), date_to_jdn(1, 1, year + 1)):
        d, m, y = jdn_to_date(jdn)
        assert lunar_to_solar(*solar_to_lunar(d, m, y)) == (d, m, y)

def test_leap_month_consistency():
    for year in range(2000, 2030):
        m = leap_month(year)
        if m is None:
            continue
        leap_day = lunar_to_solar(15, m, year, 1)
        main_day = lunar_to_solar(15, m, year, 0)
        assert leap_day != main_day
        assert INVALID_DATE not in (leap_day, main_day)
        assert solar_to_lunar(*leap_day) == (15, m, year, 1)
        assert solar_to_lunar(*main_day) == (15, m, year, 0)
        # the leap month directly follows its regular month
        assert date_to_jdn(*leap_day) - date_to_jdn(*main_day) in (29, 30)

@pytest.mark.parametrize("day", [1, 15, 30])
def test_sentinel_without_leap_month(day):
    for month in range(1, 13):
        assert lunar_to_solar(day, month, 2024, 1) == INVALID_DATE

def test_sentinel_wrong_leap_month():
    for month in range(1, 13):
        if month == 6:
            assert lunar_to_solar(1, month, 2025, 1) == (25, 7, 2025)
        else:
            assert lunar_to_solar(1, month, 2025, 1) == INVALID_DATE

def test_no_validation_of_day():
    # day 31 of a lunar month simply runs into the next month
    assert lunar_to_solar(31, 1, 2025, 0) == jdn_to_date(date_to_jdn(29, 1, 2025) + 30)

@pytest.mark.parametrize("year", range(2019, 2027))
def test_lunar_year_month_count(year):
    start = date_to_jdn(*lunar_to_solar(1, 1, year, 0))
    end = date_to_jdn(*lunar_to_solar(1, 1, year + 1, 0))

    labels = []
    prev_day = 0
    for jdn in range(start, end):
        ld, lm, ly, leap = solar_to_lunar(*jdn_to_date(jdn))
        assert ly == year
        if ld == 1:
            assert prev_day in (0, 29, 30)
            labels.append((lm, leap))
        else:
            assert ld == prev_day + 1
        prev_day = ld

    months = [m for m, _ in labels]
    leaps = [m for m, leap in labels if leap]
    if len(labels) == 12:
        assert months == list(range(1, 13))
        assert leaps == []
    else:
        assert len(labels) == 13
        assert len(leaps) == 1
        assert sorted(set(months)) == list(range(1, 13))
        i = labels.index((leaps[0], 1))
        assert labels[i - 1] == (leaps[0], 0)
