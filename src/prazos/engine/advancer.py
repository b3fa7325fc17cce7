"""
Prazos Day Advancer

Finds the next business day after a date, collecting the closed days
passed over on the way.

The publication cascade applies the step twice: availability ->
publication (the first business day after availability) -> deadline
start (the first business day after publication).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import AbstractSet, Optional

from ..calendars.lookup import CalendarLookup, is_weekend
from ..models import DayExceptionKind, SuspensionEvent


@dataclass(frozen=True)
class Advance:
    """Result of a single advance."""
    date: date
    suspensions_passed_over: tuple[SuspensionEvent, ...] = ()


@dataclass(frozen=True)
class PublicationCascade:
    """Availability -> publication -> deadline start."""
    availability_date: date
    publication_date: date
    deadline_start_date: date
    availability_suspensions: tuple[SuspensionEvent, ...] = ()
    interval_suspensions: tuple[SuspensionEvent, ...] = ()

    @property
    def suspensions(self) -> tuple[SuspensionEvent, ...]:
        return self.availability_suspensions + self.interval_suspensions


@dataclass(frozen=True)
class DayAdvancer:
    """
    Steps forward over non-business days.

    `honor_decrees` activates the decree and instability maps. When
    `proven` is given only attested decrees block; None means every
    decree is assumed proven.
    """

    lookup: CalendarLookup

    def next_business_day(
        self,
        start: date,
        honor_decrees: bool = False,
        proven: Optional[AbstractSet[str]] = None,
    ) -> Advance:
        """
        Return the first business day strictly after `start`.

        Instability days are never collected and never block. Every other
        exception met on the way is reported; plain weekends are skipped
        silently.
        """
        passed: list[SuspensionEvent] = []
        current = start
        while True:
            current += timedelta(days=1)
            exc = self.lookup.classify(
                current,
                honor_decrees,
                proven=proven,
                proof_required=proven is not None,
            )
            blocking = exc is not None and exc.kind is not DayExceptionKind.INSTABILITY
            if blocking:
                passed.append(exc.at(current))
            if not is_weekend(current) and not blocking:
                return Advance(date=current, suspensions_passed_over=tuple(passed))

    def next_business_day_for_publication(
        self,
        start: date,
        honor_decrees: bool = False,
        proven: Optional[AbstractSet[str]] = None,
    ) -> Advance:
        """Push an availability or publication date to the next business day."""
        return self.next_business_day(start, honor_decrees, proven)

    def publication_cascade(
        self,
        availability: date,
        honor_decrees: bool = False,
        proven: Optional[AbstractSet[str]] = None,
    ) -> PublicationCascade:
        """Run availability -> publication -> deadline start."""
        publication = self.next_business_day_for_publication(availability, honor_decrees, proven)
        start = self.next_business_day_for_publication(publication.date, honor_decrees, proven)
        return PublicationCascade(
            availability_date=availability,
            publication_date=publication.date,
            deadline_start_date=start.date,
            availability_suspensions=publication.suspensions_passed_over,
            interval_suspensions=start.suspensions_passed_over,
        )
