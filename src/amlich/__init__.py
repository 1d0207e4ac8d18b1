"""amlich public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    convert_solar_to_lunar,
    convert_lunar_to_solar,
    day_info,
    to_gregorian,
    explain,
    list_engines,
    engine_info,
    get_calendar,
    get_engine,
    make_engine,
    register_engine,
    leap_month,
    months_in_year,
    days_in_month,
    month_bounds,
    new_year_day,
    first_day_of_month,
    last_day_of_month,
    prev_month,
    next_month,
)
from .core.errors import AmlichError, InvalidLunarDateError
from .core.types import CalendarSpec, DayInfo, EngineId, LunarDate

__all__ = [
    "convert_solar_to_lunar",
    "convert_lunar_to_solar",
    "day_info",
    "to_gregorian",
    "explain",
    "list_engines",
    "engine_info",
    "get_calendar",
    "get_engine",
    "make_engine",
    "register_engine",
    "leap_month",
    "months_in_year",
    "days_in_month",
    "month_bounds",
    "new_year_day",
    "first_day_of_month",
    "last_day_of_month",
    "prev_month",
    "next_month",
    "AmlichError",
    "InvalidLunarDateError",
    "CalendarSpec",
    "DayInfo",
    "EngineId",
    "LunarDate",
]
