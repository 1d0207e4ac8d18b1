"""
amlich.engines.factory
----------------------
Transforms pure-data CalendarSpec records into live, executable Engine objects.
"""

from __future__ import annotations
from amlich.core.types import CalendarSpec
from amlich.engines.calendar import CalendarEngine


def make_engine(spec: CalendarSpec) -> CalendarEngine:
    """The universal entry point."""
    if not isinstance(spec, CalendarSpec):
        raise TypeError(f"Unknown spec type: {type(spec)}")
    return CalendarEngine(id=spec.id, time_zone=spec.time_zone, meta=spec.meta)
