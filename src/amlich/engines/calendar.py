"""
amlich.engines.calendar
-----------------------
The Orchestrator. Binds the lunisolar pipeline to one time zone and
translates between human lunar labels and local Julian Day Numbers.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from amlich.core.errors import InvalidLunarDateError
from amlich.core.time import date_to_jdn, jdn_to_date, to_jdn, from_jdn
from amlich.core.types import DayInfo, EngineId, LunarDate
from amlich.engines import lunisolar as ls


class CalendarEngine:
    """
    Lunisolar calendar evaluated at a fixed time zone (hours east of UTC).
    Every method is a pure function of its arguments and `time_zone`.
    """
    def __init__(self, id: EngineId, time_zone: int, meta: Optional[Dict[str, Any]] = None):
        self.id = id
        self.time_zone = time_zone
        self.meta = dict(meta or {})

    # ---------------------------------------------------------
    # Forward: Lunar label to JDN
    # ---------------------------------------------------------

    def to_jdn(self, year: int, month: int, is_leap: bool, day: int) -> int:
        """
        Translates a full lunar date into a local Julian Day Number.
        """
        res = ls.lunar_to_solar(day, month, year, int(is_leap), self.time_zone)
        if res == ls.INVALID_DATE:
            raise InvalidLunarDateError(f"Month {month} in year {year} is not a leap month.")
        return date_to_jdn(*res)

    # ---------------------------------------------------------
    # Inverse: JDN to Lunar label
    # ---------------------------------------------------------

    def from_jdn(self, jdn: int) -> Dict[str, Any]:
        """
        Translates a local Julian Day Number into a lunar date dictionary.
        """
        day, month, year = jdn_to_date(jdn)
        ld, lm, ly, leap = ls.solar_to_lunar(day, month, year, self.time_zone)
        return {"year": ly, "month": lm, "is_leap": bool(leap), "day": ld}

    # ---------------------------------------------------------
    # Month / year structure
    # ---------------------------------------------------------

    def leap_month(self, year: int) -> Optional[int]:
        return ls.leap_month(year, self.time_zone)

    def month_bounds(self, year: int, month: int, is_leap: bool = False) -> Tuple[int, int]:
        """(first_jdn, last_jdn) of a lunar month."""
        first = self.to_jdn(year, month, is_leap, 1)
        # Day 30 either exists or is already day 1 of the next month
        days = 30 if self.from_jdn(first + 29)["day"] == 30 else 29
        return first, first + days - 1

    def months_in_year(self, year: int) -> List[Tuple[int, bool]]:
        """Ordered (month, is_leap) labels of lunar year `year`."""
        leap = self.leap_month(year)
        out: List[Tuple[int, bool]] = []
        for m in range(1, 13):
            out.append((m, False))
            if m == leap:
                out.append((m, True))
        return out

    def new_year_jdn(self, year: int) -> int:
        return self.to_jdn(year, 1, False, 1)

    def neighbour_month(self, year: int, month: int, is_leap: bool, step: int) -> Dict[str, Any]:
        """Label of the month `step` (+1 or -1) lunations away."""
        first, last = self.month_bounds(year, month, is_leap)
        res = self.from_jdn(last + 1 if step > 0 else first - 1)
        return {"year": res["year"], "month": res["month"], "is_leap": res["is_leap"]}

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------
    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "time_zone": self.time_zone, "meta": self.meta}

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        jdn = to_jdn(d)
        res = self.from_jdn(jdn)

        lunar = LunarDate(
            year=res["year"],
            month=res["month"],
            day=res["day"],
            is_leap_month=res["is_leap"],
            engine=self.id,
        )

        dbg = None
        if debug:
            first, last = self.month_bounds(lunar.year, lunar.month, lunar.is_leap_month)
            dbg = {
                "jdn": jdn,
                "time_zone": self.time_zone,
                "month_first_jdn": first,
                "month_last_jdn": last,
                "leap_month": self.leap_month(lunar.year),
            }

        return DayInfo(civil_date=d, jdn=jdn, engine=self.id, lunar=lunar, debug=dbg)

    def to_gregorian(self, t: LunarDate) -> date:
        jdn = self.to_jdn(t.year, t.month, t.is_leap_month, t.day)
        return from_jdn(jdn)

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
