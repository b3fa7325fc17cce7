"""
Prazos Incremental Recalculator

Re-derives the proven scenario when the user toggles proof of a
suspension, leaving the unproven baseline untouched.

State machine: IDLE -> TOGGLING -> RECALCULATED.

Invariants:
- An empty proven set restores the baseline exactly (proven scenario is
  the unproven scenario, cascade dates are the baseline dates).
- Provable suspensions only grow within one outcome.
- Toggling the same date twice restores the previous proven set.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Iterable

from ..calendars.cnj import toggle_proof
from ..calendars.lookup import CalendarLookup
from ..models import CalculationOutcome, RecalcState
from .advancer import DayAdvancer
from .scenarios import compute_scenario
from .suspensions import SuspensionCollector
from .trace import build_trace

logger = logging.getLogger(__name__)


@dataclass
class IncrementalRecalculator:
    """
    Applies proof changes to a CalculationOutcome in place.

    Usage:
        recalculator = IncrementalRecalculator(lookup)
        recalculator.toggle(outcome, "2025-11-21")
        print(outcome.proven_scenario.final_date_prorogated)
    """

    lookup: CalendarLookup
    civil_instability_mid_period: bool = True
    state: RecalcState = field(default=RecalcState.IDLE)

    @property
    def advancer(self) -> DayAdvancer:
        return DayAdvancer(self.lookup)

    @property
    def collector(self) -> SuspensionCollector:
        return SuspensionCollector(self.lookup, self.civil_instability_mid_period)

    def toggle(self, outcome: CalculationOutcome, iso: str) -> CalculationOutcome:
        """Toggle proof of one date (its whole proof group, if it has one)."""
        proven = toggle_proof(outcome.proven, iso, self.lookup.snapshot.proof_groups)
        return self.apply(outcome, proven)

    def prove(self, outcome: CalculationOutcome, dates: Iterable[str]) -> CalculationOutcome:
        """Set the proven set to `dates`, expanded to full proof groups."""
        proven: set[str] = set()
        for iso in dates:
            group = self.lookup.snapshot.proof_group_for(iso)
            proven |= set(group) if group else {iso}
        return self.apply(outcome, frozenset(proven))

    def apply(self, outcome: CalculationOutcome, proven: AbstractSet[str]) -> CalculationOutcome:
        """Recompute the proven side of `outcome` for a new proven set."""
        self.state = RecalcState.TOGGLING
        try:
            self._recalculate(outcome, frozenset(proven))
        except Exception:
            self.state = RecalcState.IDLE
            raise
        self.state = RecalcState.RECALCULATED
        return outcome

    def _recalculate(self, outcome: CalculationOutcome, proven: frozenset[str]) -> None:
        outcome.proven = proven

        if not proven or outcome.is_fixed:
            outcome.proven_scenario = outcome.unproven_scenario
            outcome.publication_date = outcome.baseline_publication_date
            outcome.deadline_start_date = outcome.baseline_deadline_start_date
            cascade = self.advancer.publication_cascade(
                outcome.availability_date, honor_decrees=False, proven=frozenset()
            )
            outcome.trace = build_trace(outcome, cascade)
            return

        cascade = self.advancer.publication_cascade(
            outcome.availability_date, honor_decrees=True, proven=proven
        )
        outcome.publication_date = cascade.publication_date
        outcome.deadline_start_date = cascade.deadline_start_date
        outcome.proven_scenario = compute_scenario(
            self.lookup,
            outcome.matter_type,
            cascade.deadline_start_date,
            outcome.deadline_length_days,
            proven,
            ignore_recess=outcome.ignore_recess,
            civil_instability_mid_period=self.civil_instability_mid_period,
        )
        self.collector.discover_new(outcome)
        outcome.trace = build_trace(outcome, cascade)

        logger.info(
            "Recalculated %s deadline with %d proof(s): final %s",
            outcome.matter_type.value,
            len(proven),
            outcome.proven_final.isoformat(),
        )
