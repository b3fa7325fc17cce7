"""
Prazos Deadline Calculator

Entry point of the engine: validates input, runs the publication cascade,
computes the unproven scenario, collects provable suspensions and builds
the trace. Proof toggles and timeliness checks go through the same
object so they share one calendar snapshot.

Usage:
    calculator = DeadlineCalculator(snapshot)
    outcome = calculator.calculate("2025-11-20", 15, MatterType.CIVIL)
    calculator.toggle_proof(outcome, "2025-11-21")
    calculator.assess_timeliness(outcome, "2025-12-15")
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional, Union

from ..calendars.lookup import CalendarLookup
from ..config import Settings
from ..exceptions import BeforeCutoffError, InvalidInputError
from ..formatting import parse_date
from ..models import (
    CalculationOutcome,
    CalendarSnapshot,
    DeadlineResult,
    MatterType,
    Timeliness,
)
from ..usage import NOT_INFORMED, UsageEvent, UsageSink, record_usage
from .advancer import DayAdvancer
from .recalculator import IncrementalRecalculator
from .scenarios import compute_scenario
from .suspensions import SuspensionCollector
from .timeliness import DateLike, assess_outcome, to_utc_day
from .trace import build_trace

logger = logging.getLogger(__name__)


# =============================================================================
# Special Deadlines
# =============================================================================

# Suspension of 28-29 May 2025 (SEI 0072049-32.2025.8.16.6000): notices
# made available on these days have a fixed final date.
SUSPENDED_AVAILABILITY_DATES = frozenset({date(2025, 5, 28), date(2025, 5, 29)})

FIXED_FINAL_DATES = {
    MatterType.CIVIL: date(2025, 6, 23),
    MatterType.CRIMINAL: date(2025, 6, 25),
}


def fixed_final_date(availability: date, matter: MatterType) -> Optional[date]:
    """Final date forced by a special suspension, if any."""
    if availability in SUSPENDED_AVAILABILITY_DATES:
        return FIXED_FINAL_DATES[matter]
    return None


# =============================================================================
# Input Coercion
# =============================================================================

def _coerce_date(value: Union[DateLike, None], name: str) -> date:
    if value is None or value == "":
        raise InvalidInputError(
            message=f"Missing {name}",
            details={"field": name},
        )
    if isinstance(value, str):
        return parse_date(value)
    if isinstance(value, (date, datetime)):
        return to_utc_day(value)
    raise InvalidInputError(
        message=f"Invalid {name}: {value!r}",
        details={"field": name},
    )


def _coerce_length(value: object) -> int:
    if isinstance(value, bool):
        raise InvalidInputError(message="Invalid deadline length", details={"length": value})
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise InvalidInputError(message="Invalid deadline length", details={"length": value})
        value = int(value)
    if not isinstance(value, int) or value < 1:
        raise InvalidInputError(
            message="Deadline length must be a positive number of days",
            details={"length": value},
        )
    return value


def _coerce_matter(value: Union[MatterType, str]) -> MatterType:
    try:
        return MatterType(value.lower() if isinstance(value, str) else value)
    except ValueError:
        raise InvalidInputError(
            message=f"Unknown matter type: {value!r}",
            details={"matter_type": str(value), "allowed": [m.value for m in MatterType]},
        )


# =============================================================================
# Calculator
# =============================================================================

@dataclass
class DeadlineCalculator:
    """
    Computes deadlines against one calendar snapshot.

    The snapshot is never modified; build a new calculator (or snapshot)
    when the calendar changes.
    """

    snapshot: CalendarSnapshot
    settings: Settings = field(default_factory=Settings)
    usage_sink: Optional[UsageSink] = None

    def __post_init__(self) -> None:
        self.lookup = CalendarLookup(self.snapshot)
        self.advancer = DayAdvancer(self.lookup)
        self.collector = SuspensionCollector(
            self.lookup, self.settings.civil_instability_mid_period
        )
        self.recalculator = IncrementalRecalculator(
            self.lookup, self.settings.civil_instability_mid_period
        )

    def calculate(
        self,
        availability: DateLike,
        length: Optional[int] = None,
        matter: Union[MatterType, str, None] = None,
        *,
        ignore_recess: bool = False,
        process_number: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> CalculationOutcome:
        """
        Run a full calculation.

        Args:
            availability: Date the notice was made available
            length: Deadline length in days (defaults to settings)
            matter: civil or criminal (defaults to settings)
            ignore_recess: Criminal only: disregard the recess
            process_number: Opaque process number, for display and logging
            user_id: Caller identity, for usage logging

        Raises:
            InvalidInputError: Malformed date, length or matter
            BeforeCutoffError: Availability before the cutoff date
            MissingCalendarDataError: Calendar does not cover the dates
        """
        availability_date = _coerce_date(availability, "availability_date")
        length_days = _coerce_length(self.settings.default_length if length is None else length)
        matter_type = _coerce_matter(self.settings.default_matter if matter is None else matter)

        if availability_date < self.settings.cutoff_date:
            raise BeforeCutoffError(
                message=(
                    f"Availability dates before {self.settings.cutoff_date.strftime('%d/%m/%Y')} "
                    "must be counted directly in the court system"
                ),
                details={
                    "availability_date": availability_date.isoformat(),
                    "cutoff_date": self.settings.cutoff_date.isoformat(),
                },
                process_number=process_number,
            )

        if ignore_recess and matter_type is not MatterType.CRIMINAL:
            raise InvalidInputError(
                message="ignore_recess is only available for criminal matters",
                details={"matter_type": matter_type.value},
                process_number=process_number,
            )

        self.lookup.ensure_covered(availability_date)
        logger.info(
            "Calculating %s deadline: availability=%s length=%d process=%s",
            matter_type.value,
            availability_date.isoformat(),
            length_days,
            process_number or NOT_INFORMED,
        )

        baseline = self.advancer.publication_cascade(
            availability_date, honor_decrees=False, proven=frozenset()
        )

        fixed = fixed_final_date(availability_date, matter_type)
        if fixed is not None:
            unproven = DeadlineResult.fixed(fixed)
        else:
            unproven = compute_scenario(
                self.lookup,
                matter_type,
                baseline.deadline_start_date,
                length_days,
                frozenset(),
                ignore_recess=ignore_recess,
                civil_instability_mid_period=self.settings.civil_instability_mid_period,
            )

        outcome = CalculationOutcome(
            matter_type=matter_type,
            deadline_length_days=length_days,
            availability_date=availability_date,
            publication_date=baseline.publication_date,
            deadline_start_date=baseline.deadline_start_date,
            baseline_publication_date=baseline.publication_date,
            baseline_deadline_start_date=baseline.deadline_start_date,
            unproven_scenario=unproven,
            proven_scenario=unproven,
            ignore_recess=ignore_recess,
            process_number=process_number,
            fixed_final_date=fixed,
        )
        if fixed is None:
            outcome.provable_suspensions = self.collector.collect(outcome)
        outcome.trace = build_trace(outcome, baseline)

        record_usage(
            self.usage_sink,
            UsageEvent(
                matter_type=matter_type,
                deadline_length_days=length_days,
                process_number=process_number or NOT_INFORMED,
                user_id=user_id,
            ),
        )
        return outcome

    def toggle_proof(self, outcome: CalculationOutcome, iso: str) -> CalculationOutcome:
        """Toggle proof of a suspension date and recalculate the proven scenario."""
        return self.recalculator.toggle(outcome, _coerce_date(iso, "proof_date").isoformat())

    def prove(self, outcome: CalculationOutcome, dates: Iterable[str]) -> CalculationOutcome:
        """Replace the proven set with `dates` and recalculate."""
        isos = [_coerce_date(d, "proof_date").isoformat() for d in dates]
        return self.recalculator.prove(outcome, isos)

    def assess_timeliness(self, outcome: CalculationOutcome, filing: DateLike) -> Timeliness:
        """Classify a filing date against the outcome's scenarios."""
        return assess_outcome(outcome, _coerce_date(filing, "filing_date"))
