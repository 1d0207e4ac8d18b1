from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import CalendarSpec, DayInfo, LunarDate
from .core.time import from_jdn, jdn_to_date
from .attributes import standard as _standard  # noqa: F401  (registers built-ins)
from .attributes.registry import compute_attributes
from .engines import lunisolar as _ls
from .engines.factory import make_engine as _make_engine

DEFAULT_ENGINE = "vietnamese"
_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

# ============================================================
# Core conversions (plain integers, UTC+7 by default)
# ============================================================

def convert_solar_to_lunar(day: int, month: int, year: int, time_zone: int = _ls.VIETNAM_TIME_ZONE) -> List[int]:
    """Gregorian date -> [lunar_day, lunar_month, lunar_year, leap]."""
    return list(_ls.solar_to_lunar(day, month, year, time_zone))

def convert_lunar_to_solar(
    lunar_day: int,
    lunar_month: int,
    lunar_year: int,
    lunar_leap: int,
    time_zone: int = _ls.VIETNAM_TIME_ZONE,
) -> List[int]:
    """Lunar date -> [day, month, year]; [0, 0, 0] if the leap month does not exist."""
    return list(_ls.lunar_to_solar(lunar_day, lunar_month, lunar_year, lunar_leap, time_zone))

# ============================================================
# Engine registry
# ============================================================

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(name: str) -> CalendarEngine:
    return _reg().get(name)

def get_calendar(name: str, *, time_zone: Optional[int] = None) -> CalendarEngine:
    from .engines.specs import ALL_SPECS
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown engine spec '{name}'")
    spec = ALL_SPECS[name]
    if time_zone is not None:
        spec = spec.tweak(time_zone=time_zone)
    return _make_engine(spec)

def make_engine(spec: CalendarSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Day-level API
# ============================================================

def day_info(
    d: date,
    *,
    engine: str = DEFAULT_ENGINE,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    info = _reg().get(engine).day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def to_gregorian(t: LunarDate, *, engine: Optional[str] = None) -> date:
    """Raises InvalidLunarDateError for a leap month the year does not have."""
    if engine is None:
        engine = t.engine.name if t.engine is not None else DEFAULT_ENGINE
    return _reg().get(engine).to_gregorian(t)

def explain(d: date, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).explain(d)

# ============================================================
# Month-level API
# ============================================================

def leap_month(Y: int, *, engine: str = DEFAULT_ENGINE) -> Optional[int]:
    return _reg().get(engine).leap_month(Y)

CivilDate = Union[date, Tuple[int, int, int]]

def _civil_date(jdn: int) -> CivilDate:
    # Julian-only leap days (e.g. 1500-02-29) have no `date`; keep the (d, m, y) label
    try:
        return from_jdn(jdn)
    except ValueError:
        return jdn_to_date(jdn)

def month_bounds(Y: int, M: int, *, is_leap_month: bool = False, engine: str = DEFAULT_ENGINE, as_date: bool = True) -> dict:
    """
    First/last JDN and length of a lunar month. With `as_date`, also
    `first_date`/`last_date`: a `date`, or a (day, month, year) tuple for a
    Julian calendar day that `date` cannot hold.
    """
    first_jdn, last_jdn = _reg().get(engine).month_bounds(Y, M, is_leap_month)
    out = {
        "Y": Y, "M": M, "is_leap_month": is_leap_month,
        "first_jdn": first_jdn, "last_jdn": last_jdn, "days": last_jdn - first_jdn + 1,
    }
    if as_date:
        out["first_date"] = _civil_date(first_jdn)
        out["last_date"] = _civil_date(last_jdn)
    return out

def days_in_month(Y: int, M: int, *, is_leap_month: bool = False, engine: str = DEFAULT_ENGINE) -> int:
    return month_bounds(Y, M, is_leap_month=is_leap_month, engine=engine, as_date=False)["days"]

def months_in_year(Y: int, *, engine: str = DEFAULT_ENGINE) -> List[dict]:
    eng = _reg().get(engine)
    return [
        month_bounds(Y, M, is_leap_month=is_leap, engine=engine)
        for M, is_leap in eng.months_in_year(Y)
    ]

def new_year_day(Y: int, *, engine: str = DEFAULT_ENGINE) -> CivilDate:
    """Gregorian date of Tết (day 1 of month 1) of lunar year Y."""
    return _civil_date(_reg().get(engine).new_year_jdn(Y))

def first_day_of_month(Y: int, M: int, *, is_leap_month: bool = False, engine: str = DEFAULT_ENGINE) -> CivilDate:
    return month_bounds(Y, M, is_leap_month=is_leap_month, engine=engine)["first_date"]

def last_day_of_month(Y: int, M: int, *, is_leap_month: bool = False, engine: str = DEFAULT_ENGINE) -> CivilDate:
    return month_bounds(Y, M, is_leap_month=is_leap_month, engine=engine)["last_date"]

def prev_month(Y: int, M: int, *, is_leap_month: bool = False, engine: str = DEFAULT_ENGINE) -> dict:
    res = _reg().get(engine).neighbour_month(Y, M, is_leap_month, -1)
    return {"Y": res["year"], "M": res["month"], "is_leap_month": res["is_leap"]}

def next_month(Y: int, M: int, *, is_leap_month: bool = False, engine: str = DEFAULT_ENGINE) -> dict:
    res = _reg().get(engine).neighbour_month(Y, M, is_leap_month, +1)
    return {"Y": res["year"], "M": res["month"], "is_leap_month": res["is_leap"]}
