"""
Prazos - Judicial Deadline Calculator

Computes the publication date, deadline start and final date of a court
notice under two scenarios: one ignoring unproven suspensions and one
honoring the suspensions the user attests. Civil matters count business
days; criminal matters count calendar days.

Quick Start:
    from prazos import CalendarLoader, DeadlineCalculator, build_snapshot

    config = CalendarLoader().load("calendars/tjpr.yaml")
    calculator = DeadlineCalculator(build_snapshot(config))

    outcome = calculator.calculate("2025-11-20", 15, "civil")
    for suspension in outcome.provable_suspensions:
        print(suspension.iso, suspension.reason)

    calculator.toggle_proof(outcome, "2025-11-21")
    print(outcome.proven_scenario.final_date_prorogated)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .calendars import (
    CalendarLoader,
    CalendarLookup,
    build_snapshot,
    snapshot_from_maps,
    toggle_proof,
)
from .config import Settings
from .engine import (
    DeadlineCalculator,
    classify_filing,
    compute_civil_deadline,
    compute_criminal_deadline,
)
from .exceptions import (
    BeforeCutoffError,
    CalendarLoadError,
    CalendarValidationError,
    CalendarVersionMismatch,
    InvalidInputError,
    MissingCalendarDataError,
    PrazosError,
)
from .formatting import document_placeholders, fill_placeholders, format_br
from .models import (
    CalculationOutcome,
    CalendarSnapshot,
    DayException,
    DayExceptionKind,
    DeadlineResult,
    MatterType,
    SuspensionEvent,
    Timeliness,
)

__all__ = [
    "__version__",
    # Calendars
    "CalendarLoader",
    "CalendarLookup",
    "build_snapshot",
    "snapshot_from_maps",
    "toggle_proof",
    # Engine
    "DeadlineCalculator",
    "compute_civil_deadline",
    "compute_criminal_deadline",
    "classify_filing",
    # Models
    "CalculationOutcome",
    "CalendarSnapshot",
    "DayException",
    "DayExceptionKind",
    "DeadlineResult",
    "MatterType",
    "SuspensionEvent",
    "Timeliness",
    # Formatting
    "document_placeholders",
    "fill_placeholders",
    "format_br",
    # Config
    "Settings",
    # Exceptions
    "PrazosError",
    "InvalidInputError",
    "BeforeCutoffError",
    "MissingCalendarDataError",
    "CalendarLoadError",
    "CalendarValidationError",
    "CalendarVersionMismatch",
]
