"""
Prazos Models

Plain dataclasses and enums shared by the calendar layer and the engines.
"""
from __future__ import annotations

from .calendar import (
    DEFAULT_RECESS_PERIODS,
    CalendarSnapshot,
    DayException,
    RecessPeriod,
    RecessRule,
    SuspensionEvent,
)
from .enums import (
    PROVABLE_KINDS,
    DayExceptionKind,
    KindFilter,
    MatterType,
    RecalcState,
    Timeliness,
)
from .outcome import CalculationOutcome, DeadlineResult, TraceStep

__all__ = [
    # Enums
    "DayExceptionKind",
    "PROVABLE_KINDS",
    "KindFilter",
    "MatterType",
    "RecalcState",
    "Timeliness",
    # Calendar
    "DayException",
    "SuspensionEvent",
    "RecessPeriod",
    "RecessRule",
    "DEFAULT_RECESS_PERIODS",
    "CalendarSnapshot",
    # Outcome
    "DeadlineResult",
    "TraceStep",
    "CalculationOutcome",
]
