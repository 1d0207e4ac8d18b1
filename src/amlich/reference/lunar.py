# reference/lunar.py

from __future__ import annotations

import math

# Lunation 0 of this series is the New Moon of 1900-01-01 (JD ~2415021.077).
NEW_MOON_EPOCH_JD = 2415021.076998695
SYNODIC_MONTH_DAYS = 29.530588853

# Lunations per Julian century.
LUNATIONS_PER_CENTURY = 1236.85

DR = math.pi / 180.0


def delta_t_days(T: float) -> float:
    """
    ΔT (TT - UT) in days for T in Julian centuries counted from 1900.
    Quintic fit before ~800 AD (T < -11), quadratic afterwards.
    """
    T2 = T * T
    T3 = T2 * T
    if T < -11:
        return 0.001 + 0.000839 * T + 0.0002261 * T2 - 0.00000845 * T3 - 0.000000081 * T * T3
    return -0.000278 + 0.000265 * T + 0.000262 * T2


def new_moon(k: float) -> float:
    """
    Julian Date (UT) of the k-th New Moon after the 1900 epoch.

    Truncated Meeus series: mean phase, one periodic planetary term, and
    the 13 leading solar/lunar anomaly and latitude corrections.
    """
    T = k / LUNATIONS_PER_CENTURY
    T2 = T * T
    T3 = T2 * T

    jd1 = 2415020.75933 + 29.53058868 * k + 0.0001178 * T2 - 0.000000155 * T3
    jd1 = jd1 + 0.00033 * math.sin((166.56 + 132.87 * T - 0.009173 * T2) * DR)

    # Sun's mean anomaly, Moon's mean anomaly, Moon's argument of latitude (deg)
    M = 359.2242 + 29.10535608 * k - 0.0000333 * T2 - 0.00000347 * T3
    Mpr = 306.0253 + 385.81691806 * k + 0.0107306 * T2 + 0.00001236 * T3
    F = 21.2964 + 390.67050646 * k - 0.0016528 * T2 - 0.00000239 * T3

    C1 = (
        (0.1734 - 0.000393 * T) * math.sin(M * DR)
        + 0.0021 * math.sin(2 * DR * M)
        - 0.4068 * math.sin(Mpr * DR)
        + 0.0161 * math.sin(DR * 2 * Mpr)
        - 0.0004 * math.sin(DR * 3 * Mpr)
        + 0.0104 * math.sin(DR * 2 * F)
        - 0.0051 * math.sin(DR * (M + Mpr))
        - 0.0074 * math.sin(DR * (M - Mpr))
        + 0.0004 * math.sin(DR * (2 * F + M))
        - 0.0004 * math.sin(DR * (2 * F - M))
        - 0.0006 * math.sin(DR * (2 * F + Mpr))
        + 0.0010 * math.sin(DR * (2 * F - Mpr))
        + 0.0005 * math.sin(DR * (2 * Mpr + M))
    )

    return jd1 + C1 - delta_t_days(T)


def new_moon_day(k: int, time_zone: int) -> int:
    """Local civil JDN on which the k-th New Moon falls."""
    return math.floor(new_moon(k) + 0.5 + time_zone / 24.0)


def lunation_index(jd: float) -> int:
    """Index of the last mean lunation starting at or before `jd`."""
    return math.floor((jd - NEW_MOON_EPOCH_JD) / SYNODIC_MONTH_DAYS)
