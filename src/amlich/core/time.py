from __future__ import annotations
from datetime import date
from typing import Tuple

# First JDN of the Gregorian calendar (1582-10-15).
GREGORIAN_CUTOVER_JDN = 2299161


def date_to_jdn(day: int, month: int, year: int) -> int:
    """
    Calendar date -> Julian Day Number (Fliegel-Van Flandern).

    Dates before 1582-10-15 are read as Julian calendar dates. Out-of-range
    day/month values are not rejected; they flow through the arithmetic.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    if jdn < GREGORIAN_CUTOVER_JDN:
        jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083
    return jdn


def jdn_to_date(jdn: int) -> Tuple[int, int, int]:
    """Inverse of date_to_jdn. Returns (day, month, year)."""
    if jdn > GREGORIAN_CUTOVER_JDN - 1:
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
    else:
        b = 0
        c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return day, month, year


def to_jdn(d: date) -> int:
    """Convert a date object to its Julian Day Number."""
    return date_to_jdn(d.day, d.month, d.year)


def from_jdn(jdn: int) -> date:
    """
    JDN -> date object. Before the cutover the fields carry the Julian
    calendar label, since `datetime.date` has no notion of the switch.
    """
    day, month, year = jdn_to_date(jdn)
    return date(year, month, day)
