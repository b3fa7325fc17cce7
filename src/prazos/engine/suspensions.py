"""
Prazos Suspension Collector

Finds the calendar exceptions the user could prove to move a deadline:
decrees, CNJ holidays and instability days found around the publication
cascade, the deadline start, inside the count and at the final date.

The list feeds the proof checklist. Within one calculation it only
grows: `discover_new` appends exceptions that a recalculation ran into
and never removes earlier entries.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional

from ..calendars.lookup import CalendarLookup
from ..models import (
    CalculationOutcome,
    DayExceptionKind,
    DeadlineResult,
    KindFilter,
    MatterType,
    SuspensionEvent,
)
from .advancer import DayAdvancer
from .criminal import compute_criminal_deadline

logger = logging.getLogger(__name__)


def _merge(found: dict[str, SuspensionEvent], events: Iterable[Optional[SuspensionEvent]]) -> None:
    for event in events:
        if event is not None and event.kind.is_provable:
            found.setdefault(event.iso, event)


def _sorted(found: dict[str, SuspensionEvent]) -> list[SuspensionEvent]:
    return sorted(found.values(), key=lambda e: e.date)


@dataclass(frozen=True)
class SuspensionCollector:
    """
    Collects provable suspensions for civil and criminal outcomes.

    Every lookup here assumes all decrees are proven, so that any
    exception which could matter shows up as a candidate.
    """

    lookup: CalendarLookup
    civil_instability_mid_period: bool = True

    @property
    def advancer(self) -> DayAdvancer:
        return DayAdvancer(self.lookup)

    def provable_at(self, d: date) -> Optional[SuspensionEvent]:
        """The provable exception on `d`, if any."""
        exc = self.lookup.classify(d, honor_decrees=True)
        if exc is not None and exc.kind.is_provable:
            return exc.at(d)
        return None

    def scan_window(
        self,
        start: date,
        end: date,
        include_instability: bool = True,
    ) -> list[SuspensionEvent]:
        """Decrees (and optionally instability) in [start, end]."""
        events = []
        day = start
        while day <= end:
            exc = self.lookup.classify(day, True, KindFilter.DECREE)
            if exc is None and (include_instability or day in (start, end)):
                exc = self.lookup.classify(day, True, KindFilter.INSTABILITY)
            if exc is not None:
                events.append(exc.at(day))
            day += timedelta(days=1)
        return events

    # =========================================================================
    # Initial collection
    # =========================================================================

    def collect(self, outcome: CalculationOutcome) -> list[SuspensionEvent]:
        """Collect provable suspensions for a freshly computed outcome."""
        if outcome.matter_type is MatterType.CIVIL:
            return self.collect_civil(
                outcome.availability_date,
                outcome.baseline_deadline_start_date,
                outcome.unproven_scenario,
            )
        return self.collect_criminal(
            outcome.availability_date,
            outcome.baseline_publication_date,
            outcome.baseline_deadline_start_date,
            outcome.unproven_scenario,
            outcome.deadline_length_days,
            outcome.ignore_recess,
        )

    def collect_civil(
        self,
        availability: date,
        deadline_start: date,
        unproven: DeadlineResult,
    ) -> list[SuspensionEvent]:
        found: dict[str, SuspensionEvent] = {}

        cascade = self.advancer.publication_cascade(availability, honor_decrees=True)
        _merge(found, cascade.suspensions)
        _merge(found, [self.provable_at(deadline_start)])
        _merge(found, self.scan_window(
            deadline_start,
            unproven.final_date_prorogated,
            include_instability=self.civil_instability_mid_period,
        ))
        _merge(found, [
            self.provable_at(unproven.final_date),
            self.provable_at(unproven.final_date_prorogated),
        ])
        _merge(found, unproven.prorogated_days)

        return _sorted(found)

    def collect_criminal(
        self,
        availability: date,
        baseline_publication: date,
        deadline_start: date,
        unproven: DeadlineResult,
        length: int,
        ignore_recess: bool = False,
    ) -> list[SuspensionEvent]:
        found: dict[str, SuspensionEvent] = {}

        cascade = self.advancer.publication_cascade(availability, honor_decrees=True)
        _merge(found, cascade.suspensions)
        from_publication = self.advancer.next_business_day(baseline_publication, honor_decrees=True)
        _merge(found, from_publication.suspensions_passed_over)
        _merge(found, [
            self.provable_at(deadline_start),
            self.provable_at(unproven.final_date_prorogated),
        ])

        snapshot = self.lookup.snapshot
        every_suspension = frozenset(snapshot.decrees) | frozenset(snapshot.instability)
        assumed = compute_criminal_deadline(
            self.lookup,
            deadline_start,
            length,
            every_suspension,
            ignore_recess=ignore_recess,
        )
        _merge(found, assumed.start_non_business_days)
        _merge(found, assumed.prorogated_days)

        edges = {deadline_start, unproven.final_date_prorogated}
        return _sorted(self._instability_at_edges(found, edges))

    @staticmethod
    def _instability_at_edges(
        found: dict[str, SuspensionEvent],
        edges: set[date],
    ) -> dict[str, SuspensionEvent]:
        """Criminal matters accept instability proof only at the deadline edges."""
        return {
            iso: event
            for iso, event in found.items()
            if event.kind is not DayExceptionKind.INSTABILITY or event.date in edges
        }

    # =========================================================================
    # Incremental discovery
    # =========================================================================

    def discover_new(self, outcome: CalculationOutcome) -> list[SuspensionEvent]:
        """
        Append suspensions a recalculation ran into.

        Returns the newly discovered events; existing entries are kept.
        """
        proven = outcome.proven_scenario
        found: dict[str, SuspensionEvent] = {}

        _merge(found, [
            self.provable_at(outcome.deadline_start_date),
            self.provable_at(proven.final_date),
            self.provable_at(proven.final_date_prorogated),
        ])
        _merge(found, proven.prorogated_days)

        if outcome.matter_type is MatterType.CIVIL:
            _merge(found, self.scan_window(
                outcome.deadline_start_date,
                proven.final_date_prorogated,
                include_instability=self.civil_instability_mid_period,
            ))
        else:
            _merge(found, proven.start_non_business_days)
            edges = {
                outcome.baseline_deadline_start_date,
                outcome.deadline_start_date,
                outcome.unproven_final,
                proven.final_date_prorogated,
            }
            if proven.start_date is not None:
                edges.add(proven.start_date)
            found = self._instability_at_edges(found, edges)

        known = {event.iso for event in outcome.provable_suspensions}
        new = [event for iso, event in found.items() if iso not in known]
        if new:
            outcome.provable_suspensions = sorted(
                outcome.provable_suspensions + new, key=lambda e: e.date
            )
            logger.info(
                "Discovered %d new provable suspension(s): %s",
                len(new),
                ", ".join(event.iso for event in new),
            )
        return new
