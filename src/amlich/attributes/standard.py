from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute

# Indices only: stem 0..9 (Giáp..Quý), branch 0..11 (Tý..Hợi).

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun, same as date.weekday().
    return {"weekday": info.jdn % 7}

def sexagenary_year(info) -> Dict[str, Any]:
    y = info.lunar.year
    return {
        "year_stem": (y + 6) % 10,
        "year_branch": (y + 8) % 12,
    }

def sexagenary_month(info) -> Dict[str, Any]:
    # Leap months share the stem/branch of the month they repeat.
    y, m = info.lunar.year, info.lunar.month
    return {
        "month_stem": (y * 12 + m + 3) % 10,
        "month_branch": (m + 1) % 12,
    }

def sexagenary_day(info) -> Dict[str, Any]:
    return {
        "day_stem": (info.jdn + 9) % 10,
        "day_branch": (info.jdn + 1) % 12,
    }

register_attribute("weekday", weekday)
register_attribute("sexagenary_year", sexagenary_year)
register_attribute("sexagenary_month", sexagenary_month)
register_attribute("sexagenary_day", sexagenary_day)
