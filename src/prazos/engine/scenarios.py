"""
Scenario dispatch: runs the civil or criminal engine for a matter.
"""
from __future__ import annotations

from datetime import date
from typing import AbstractSet

from ..calendars.lookup import CalendarLookup
from ..models import DeadlineResult, MatterType
from .civil import compute_civil_deadline
from .criminal import compute_criminal_deadline


def compute_scenario(
    lookup: CalendarLookup,
    matter: MatterType,
    start: date,
    length: int,
    proven: AbstractSet[str] = frozenset(),
    ignore_recess: bool = False,
    civil_instability_mid_period: bool = True,
) -> DeadlineResult:
    """Run the engine for `matter`. An empty `proven` yields the unproven scenario."""
    if matter is MatterType.CIVIL:
        return compute_civil_deadline(
            lookup,
            start,
            length,
            proven,
            honor_decrees_mid_period=True,
            honor_instability_mid_period=civil_instability_mid_period,
            honor_decrees_at_rollover=True,
        )
    return compute_criminal_deadline(
        lookup,
        start,
        length,
        proven,
        ignore_recess=ignore_recess,
        honor_decrees_at_rollover=True,
    )
