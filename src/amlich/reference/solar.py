# reference/solar.py

from __future__ import annotations

import math

J2000 = 2451545.0
TWO_PI = 2.0 * math.pi

DR = math.pi / 180.0


def sun_longitude(jdn: float) -> float:
    """
    True ecliptic longitude of the Sun (radians, [0, 2pi)) at Julian Date `jdn`.

    Mean longitude plus a 3-term equation of center; no aberration or
    nutation (accurate to ~0.01 deg).
    """
    T = (jdn - J2000) / 36525.0
    T2 = T * T

    M = 357.52910 + 35999.05030 * T - 0.0001559 * T2 - 0.00000048 * T * T2
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T2

    DL = (
        (1.914600 - 0.004817 * T - 0.000014 * T2) * math.sin(DR * M)
        + (0.019993 - 0.000101 * T) * math.sin(DR * 2 * M)
        + 0.000290 * math.sin(DR * 3 * M)
    )

    L = (L0 + DL) * DR
    # floor keeps the result non-negative for dates before J2000
    return L - TWO_PI * math.floor(L / TWO_PI)


def sun_longitude_sector(day_number: int, time_zone: int) -> int:
    """
    30-degree sector (0..11) holding the Sun at local midnight starting
    civil day `day_number`.
    """
    return math.floor(sun_longitude(day_number - 0.5 - time_zone / 24.0) / math.pi * 6)
