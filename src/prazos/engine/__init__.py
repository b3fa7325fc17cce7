"""
Prazos Engine

Pure, framework-free deadline computation.

Components (leaves first):
- DayAdvancer: next business day and the publication cascade
- compute_civil_deadline: business-day counting
- compute_criminal_deadline: calendar-day counting
- SuspensionCollector: provable suspensions for the proof checklist
- IncrementalRecalculator: proven scenario after proof toggles
- classify_filing: timeliness of a filing date
- DeadlineCalculator: validates input and ties everything together
"""
from __future__ import annotations

from .advancer import Advance, DayAdvancer, PublicationCascade
from .calculator import (
    FIXED_FINAL_DATES,
    SUSPENDED_AVAILABILITY_DATES,
    DeadlineCalculator,
    fixed_final_date,
)
from .civil import compute_civil_deadline, counting_exception, rollover_exception
from .criminal import closed_day_exception, compute_criminal_deadline
from .recalculator import IncrementalRecalculator
from .scenarios import compute_scenario
from .suspensions import SuspensionCollector
from .timeliness import assess_outcome, classify_filing, to_utc_day
from .trace import build_trace

__all__ = [
    # Advancing
    "Advance",
    "DayAdvancer",
    "PublicationCascade",
    # Engines
    "compute_civil_deadline",
    "counting_exception",
    "rollover_exception",
    "compute_criminal_deadline",
    "closed_day_exception",
    "compute_scenario",
    # Suspensions and recalculation
    "SuspensionCollector",
    "IncrementalRecalculator",
    "build_trace",
    # Timeliness
    "classify_filing",
    "assess_outcome",
    "to_utc_day",
    # Calculator
    "DeadlineCalculator",
    "fixed_final_date",
    "FIXED_FINAL_DATES",
    "SUSPENDED_AVAILABILITY_DATES",
]
