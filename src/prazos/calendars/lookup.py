"""
Prazos Calendar Lookup

Answers "is this date a non-business day, and why?" against an immutable
CalendarSnapshot.

Lookup precedence is holiday > decree > instability > recess. Weekends are
not classified here; callers check them with `is_weekend`.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import AbstractSet, Optional

from ..exceptions import MissingCalendarDataError
from ..models import (
    CalendarSnapshot,
    DayException,
    DayExceptionKind,
    KindFilter,
)


# Weekend days (0=Monday, 6=Sunday)
WEEKEND_DAYS = frozenset({5, 6})


def is_weekend(d: date) -> bool:
    """Check if a date is a Saturday or Sunday."""
    return d.weekday() in WEEKEND_DAYS


@dataclass(frozen=True)
class CalendarLookup:
    """
    Pure classification of dates against a calendar snapshot.

    Usage:
        lookup = CalendarLookup(snapshot)
        exc = lookup.classify(date(2025, 11, 20), honor_decrees=False)
        if exc is not None:
            print(exc.reason, exc.kind)
    """

    snapshot: CalendarSnapshot

    def __post_init__(self) -> None:
        if self.snapshot is None or self.snapshot.is_empty:
            raise MissingCalendarDataError(
                message="Calendar snapshot has no data",
                details={"years": []},
            )

    def ensure_covered(self, d: date) -> None:
        """Fail fast instead of treating an unknown year as all business days."""
        if not self.snapshot.covers(d):
            raise MissingCalendarDataError(
                message=f"No calendar data for year {d.year}",
                details={
                    "date": d.isoformat(),
                    "years": sorted(self.snapshot.years),
                },
            )

    def classify(
        self,
        d: date,
        honor_decrees: bool = False,
        kind: KindFilter = KindFilter.ALL,
        proven: Optional[AbstractSet[str]] = None,
        *,
        proof_required: bool = False,
        ignore_recess: bool = False,
    ) -> Optional[DayException]:
        """
        Classify a date.

        Args:
            d: Date to classify
            honor_decrees: Whether decree and instability maps apply
            kind: Restrict the lookup to one map
            proven: ISO dates the user attests; None means every
                suspension is assumed proven
            proof_required: Only return plain decrees/instability that
                are attested (unattested ones fall through)
            ignore_recess: Disregard the recess rule

        Returns:
            The applicable DayException, or None for an ordinary day

        Raises:
            MissingCalendarDataError: If the snapshot does not cover d's year
        """
        self.ensure_covered(d)
        iso = d.isoformat()
        attested = proven is None or iso in proven

        if kind.admits(KindFilter.HOLIDAY):
            holiday = self.snapshot.holidays.get(iso)
            if holiday is not None:
                return holiday

        if kind.admits(KindFilter.DECREE):
            decree = self.snapshot.decrees.get(iso)
            if decree is not None:
                if decree.kind is DayExceptionKind.CNJ_HOLIDAY:
                    if attested:
                        return decree
                elif honor_decrees and (attested or not proof_required):
                    return decree

        if kind.admits(KindFilter.INSTABILITY) and honor_decrees:
            outage = self.snapshot.instability.get(iso)
            if outage is not None and (attested or not proof_required):
                return outage

        if kind.admits(KindFilter.RECESS) and not ignore_recess:
            if self.snapshot.recess.contains(d):
                return DayException(
                    reason=self.snapshot.recess.reason,
                    kind=DayExceptionKind.RECESS,
                )

        return None

    def is_business_day(
        self,
        d: date,
        honor_decrees: bool = False,
        proven: Optional[AbstractSet[str]] = None,
    ) -> bool:
        """A weekday with no blocking exception (instability never blocks)."""
        if is_weekend(d):
            return False
        exc = self.classify(d, honor_decrees, proven=proven, proof_required=proven is not None)
        return exc is None or exc.kind is DayExceptionKind.INSTABILITY
