"""
Prazos Outcome Models

Results produced by the deadline engines and the calculator.

Key components:
- DeadlineResult: one scenario (unproven or proven) of a deadline
- TraceStep: one named step of the human-readable audit trail
- CalculationOutcome: everything a single calculate call produces
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from .calendar import SuspensionEvent
from .enums import MatterType


def _events(events: tuple[SuspensionEvent, ...]) -> list[dict[str, Any]]:
    return [e.to_dict() for e in events]


# =============================================================================
# Deadline Result
# =============================================================================

@dataclass(frozen=True)
class DeadlineResult:
    """
    One scenario of a computed deadline.

    Attributes:
        final_date: Date on which the count ends, before rollover
        final_date_prorogated: Final date after rolling over closed days
        non_business_days: Suspensions met while counting
        prorogated_days: Days skipped while rolling the final date forward
        start_date: Effective start of the count (after any adjustment)
        start_non_business_days: Days skipped while adjusting the start
        potentially_provable_days: Provable exceptions inside the window
    """
    final_date: date
    final_date_prorogated: date
    non_business_days: tuple[SuspensionEvent, ...] = ()
    prorogated_days: tuple[SuspensionEvent, ...] = ()
    start_date: Optional[date] = None
    start_non_business_days: tuple[SuspensionEvent, ...] = ()
    potentially_provable_days: tuple[SuspensionEvent, ...] = ()

    @classmethod
    def fixed(cls, final: date) -> DeadlineResult:
        """A result pinned to a date with no suspensions."""
        return cls(final_date=final, final_date_prorogated=final)

    @property
    def was_prorogated(self) -> bool:
        return self.final_date_prorogated != self.final_date

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "final_date": self.final_date.isoformat(),
            "final_date_prorogated": self.final_date_prorogated.isoformat(),
            "non_business_days": _events(self.non_business_days),
            "prorogated_days": _events(self.prorogated_days),
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "start_non_business_days": _events(self.start_non_business_days),
            "potentially_provable_days": _events(self.potentially_provable_days),
        }


# =============================================================================
# Trace
# =============================================================================

@dataclass(frozen=True)
class TraceStep:
    """A named step of the cascade, with an optional date or event list."""
    name: str
    date: Optional[date] = None
    events: tuple[SuspensionEvent, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.date is not None:
            result["date"] = self.date.isoformat()
        if self.events:
            result["events"] = _events(self.events)
        return result


# =============================================================================
# Calculation Outcome
# =============================================================================

@dataclass
class CalculationOutcome:
    """
    Everything produced by one calculation.

    The unproven scenario and the baseline cascade dates never change
    after creation. Toggling proofs replaces the proven scenario, the
    current cascade dates and the trace, and may grow the provable list.
    """
    matter_type: MatterType
    deadline_length_days: int
    availability_date: date

    # Current cascade (follows the proven set)
    publication_date: date
    deadline_start_date: date

    # Baseline cascade (no proofs)
    baseline_publication_date: date
    baseline_deadline_start_date: date

    unproven_scenario: DeadlineResult
    proven_scenario: DeadlineResult
    provable_suspensions: list[SuspensionEvent] = field(default_factory=list)

    proven: frozenset[str] = field(default_factory=frozenset)
    ignore_recess: bool = False
    process_number: Optional[str] = None
    fixed_final_date: Optional[date] = None
    trace: list[TraceStep] = field(default_factory=list)

    @property
    def is_fixed(self) -> bool:
        """True when a special rule pinned the final date."""
        return self.fixed_final_date is not None

    @property
    def provable_dates(self) -> list[str]:
        return [s.iso for s in self.provable_suspensions]

    @property
    def unproven_final(self) -> date:
        return self.unproven_scenario.final_date_prorogated

    @property
    def proven_final(self) -> date:
        return self.proven_scenario.final_date_prorogated

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "matter_type": self.matter_type.value,
            "deadline_length_days": self.deadline_length_days,
            "availability_date": self.availability_date.isoformat(),
            "publication_date": self.publication_date.isoformat(),
            "deadline_start_date": self.deadline_start_date.isoformat(),
            "baseline_publication_date": self.baseline_publication_date.isoformat(),
            "baseline_deadline_start_date": self.baseline_deadline_start_date.isoformat(),
            "unproven_scenario": self.unproven_scenario.to_dict(),
            "proven_scenario": self.proven_scenario.to_dict(),
            "provable_suspensions": [s.to_dict() for s in self.provable_suspensions],
            "proven": sorted(self.proven),
            "ignore_recess": self.ignore_recess,
            "process_number": self.process_number,
            "fixed_final_date": (
                self.fixed_final_date.isoformat() if self.fixed_final_date else None
            ),
            "trace": [step.to_dict() for step in self.trace],
        }
