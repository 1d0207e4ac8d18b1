from __future__ import annotations

from ..core.types import CalendarSpec, EngineId
from .lunisolar import VIETNAM_TIME_ZONE


# ============================================================
# VIETNAMESE CALENDAR (UTC+7)
# ============================================================

# Official since 1968 (North) and 1975 (unified). Regional variants are
# built by substitution, e.g. VIETNAMESE.tweak(time_zone=8).
VIETNAMESE = CalendarSpec(
    id=EngineId("vietnamese", "1.0"),
    time_zone=VIETNAM_TIME_ZONE,
    meta={"description": "Vietnamese lunar calendar, truncated Meeus series, UTC+7"},
)

ALL_SPECS = {
    "vietnamese": VIETNAMESE,
}
