"""
amlich.engines.lunisolar
------------------------
Assembles New Moon days and solar-longitude sectors into lunar dates.

Months are anchored on month 11, the lunation containing the winter
solstice. A lunar year (month 11 to the next month 11) of 13 lunations
carries one leap month: the first lunation whose New Moon day lies in the
same solar sector as the one after it, i.e. a month without a principal
solar term.

Core functions return plain int tuples. The only failure mode is the
`INVALID_DATE` sentinel from `lunar_to_solar`.
"""

from __future__ import annotations

import math
from typing import Tuple

from amlich.core.time import date_to_jdn, jdn_to_date
from amlich.reference.lunar import (
    NEW_MOON_EPOCH_JD,
    SYNODIC_MONTH_DAYS,
    lunation_index,
    new_moon_day,
)
from amlich.reference.solar import sun_longitude_sector

VIETNAM_TIME_ZONE = 7

# Leap search never needs more than 13 lunations; the cap only guarantees termination.
MAX_LEAP_SEARCH = 14

INVALID_DATE: Tuple[int, int, int] = (0, 0, 0)


def lunar_month_11(year: int, time_zone: int = VIETNAM_TIME_ZONE) -> int:
    """JDN of the first day of lunar month 11 in Gregorian `year`."""
    off = date_to_jdn(31, 12, year) - 2415021
    k = math.floor(off / SYNODIC_MONTH_DAYS)
    nm = new_moon_day(k, time_zone)
    # New Moon already past the winter solstice sector: month 11 began one lunation earlier
    if sun_longitude_sector(nm, time_zone) >= 9:
        nm = new_moon_day(k - 1, time_zone)
    return nm


def leap_month_offset(a11: int, time_zone: int = VIETNAM_TIME_ZONE) -> int:
    """
    Offset (in lunations, counted from month 11 starting at `a11`) of the
    leap month of a 13-month lunar year.
    """
    k = math.floor((a11 - NEW_MOON_EPOCH_JD) / SYNODIC_MONTH_DAYS + 0.5)
    i = 1
    arc = sun_longitude_sector(new_moon_day(k + i, time_zone), time_zone)
    while True:
        last = arc
        i += 1
        arc = sun_longitude_sector(new_moon_day(k + i, time_zone), time_zone)
        if arc == last or i >= MAX_LEAP_SEARCH:
            break
    return i - 1


def _leap_month_number(leap_off: int) -> int:
    month = leap_off - 2
    if month <= 0:
        month += 12
    return month


def solar_to_lunar(
    day: int, month: int, year: int, time_zone: int = VIETNAM_TIME_ZONE
) -> Tuple[int, int, int, int]:
    """
    Gregorian (day, month, year) -> (lunar_day, lunar_month, lunar_year, leap).
    `leap` is 1 for the intercalary occurrence of `lunar_month`, else 0.
    """
    day_number = date_to_jdn(day, month, year)
    # The mean lunation index can run a day or more ahead of the true New Moon
    k = lunation_index(day_number) + 1
    month_start = new_moon_day(k, time_zone)
    while month_start > day_number:
        k -= 1
        month_start = new_moon_day(k, time_zone)

    a11 = lunar_month_11(year, time_zone)
    b11 = a11
    if a11 >= month_start:
        lunar_year = year
        a11 = lunar_month_11(year - 1, time_zone)
    else:
        lunar_year = year + 1
        b11 = lunar_month_11(year + 1, time_zone)

    lunar_day = day_number - month_start + 1
    diff = (month_start - a11) // 29
    lunar_leap = 0
    lunar_month = diff + 11

    if b11 - a11 > 365:
        leap_month_diff = leap_month_offset(a11, time_zone)
        if diff >= leap_month_diff:
            lunar_month = diff + 10
            if diff == leap_month_diff:
                lunar_leap = 1

    if lunar_month > 12:
        lunar_month -= 12
    # months 11 and 12 seen from the following Gregorian year
    if lunar_month >= 11 and diff < 4:
        lunar_year -= 1

    return lunar_day, lunar_month, lunar_year, lunar_leap


def lunar_to_solar(
    lunar_day: int,
    lunar_month: int,
    lunar_year: int,
    lunar_leap: int,
    time_zone: int = VIETNAM_TIME_ZONE,
) -> Tuple[int, int, int]:
    """
    (lunar_day, lunar_month, lunar_year, leap) -> Gregorian (day, month, year).

    Returns INVALID_DATE when `lunar_leap` is set but `lunar_month` is not the
    leap month of that lunar year (including years without one).
    """
    if lunar_month < 11:
        a11 = lunar_month_11(lunar_year - 1, time_zone)
        b11 = lunar_month_11(lunar_year, time_zone)
    else:
        a11 = lunar_month_11(lunar_year, time_zone)
        b11 = lunar_month_11(lunar_year + 1, time_zone)

    k = math.floor(0.5 + (a11 - NEW_MOON_EPOCH_JD) / SYNODIC_MONTH_DAYS)
    off = lunar_month - 11
    if off < 0:
        off += 12

    if b11 - a11 > 365:
        leap_off = leap_month_offset(a11, time_zone)
        leap_month = _leap_month_number(leap_off)
        if lunar_leap and lunar_month != leap_month:
            return INVALID_DATE
        if lunar_leap or off >= leap_off:
            off += 1
    elif lunar_leap:
        return INVALID_DATE

    month_start = new_moon_day(k + off, time_zone)
    return jdn_to_date(month_start + lunar_day - 1)


def leap_month(lunar_year: int, time_zone: int = VIETNAM_TIME_ZONE) -> int | None:
    """Leap month number of `lunar_year`, or None for a 12-month year."""
    # Leap months 1..10 sit in the span ending at this year's month 11,
    # leap months 11 and 12 in the span starting there.
    a11 = lunar_month_11(lunar_year - 1, time_zone)
    b11 = lunar_month_11(lunar_year, time_zone)
    if b11 - a11 > 365:
        leap_off = leap_month_offset(a11, time_zone)
        if leap_off >= 3:
            return _leap_month_number(leap_off)

    a11, b11 = b11, lunar_month_11(lunar_year + 1, time_zone)
    if b11 - a11 > 365:
        leap_off = leap_month_offset(a11, time_zone)
        if leap_off <= 2:
            return _leap_month_number(leap_off)
    return None
