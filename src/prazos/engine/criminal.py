"""
Prazos Criminal Deadline Engine

Criminal deadlines run in uninterrupted calendar days. Only the edges are
shielded: the start moves off a closed day, and the final date rolls
forward off a closed day.

Decrees and instability days block the edges only when proven. Proven
days skipped while adjusting the start are granted back at the end.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import AbstractSet, Optional

from ..calendars.lookup import CalendarLookup, is_weekend
from ..exceptions import InvalidInputError
from ..models import DayException, DeadlineResult, KindFilter, SuspensionEvent


def closed_day_exception(
    lookup: CalendarLookup,
    d: date,
    proven: AbstractSet[str],
    ignore_recess: bool = False,
    honor_proven_suspensions: bool = True,
) -> Optional[DayException]:
    """The exception that closes `d` for a criminal deadline edge, if any."""
    holiday = lookup.classify(d, kind=KindFilter.HOLIDAY)
    if holiday is not None:
        return holiday
    if honor_proven_suspensions:
        suspension = lookup.classify(
            d, True, KindFilter.DECREE, proven, proof_required=True
        ) or lookup.classify(
            d, True, KindFilter.INSTABILITY, proven, proof_required=True
        )
        if suspension is not None:
            return suspension
    return lookup.classify(d, kind=KindFilter.RECESS, ignore_recess=ignore_recess)


def compute_criminal_deadline(
    lookup: CalendarLookup,
    start: date,
    length: int,
    proven: AbstractSet[str] = frozenset(),
    ignore_recess: bool = False,
    honor_decrees_at_rollover: bool = True,
) -> DeadlineResult:
    """
    Count `length` calendar days from `start`.

    Args:
        lookup: Calendar lookup
        start: Deadline start from the publication cascade
        length: Deadline length in calendar days
        proven: ISO dates the user attests
        ignore_recess: Disregard the recess (defendant in custody, protective measures)
        honor_decrees_at_rollover: Proven decrees/instability push the final date

    Returns:
        DeadlineResult; `start_date` is the adjusted start
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidInputError(
            message="Deadline length must be a positive number of days",
            details={"length": length},
        )

    # Start adjustment checks the start date itself at least once
    skipped: list[SuspensionEvent] = []
    regranted = 0
    current = start
    while True:
        exc = closed_day_exception(lookup, current, proven, ignore_recess)
        if exc is None and not is_weekend(current):
            break
        if exc is not None:
            skipped.append(exc.at(current))
            if exc.kind.is_provable:
                regranted += 1
        current += timedelta(days=1)
    adjusted_start = current

    raw_final = adjusted_start + timedelta(days=length - 1 + regranted)

    inside: list[SuspensionEvent] = []
    day = adjusted_start
    while day <= raw_final:
        exc = lookup.classify(day, honor_decrees=True, ignore_recess=ignore_recess)
        if exc is not None:
            inside.append(exc.at(day))
        day += timedelta(days=1)

    prorogated: list[SuspensionEvent] = []
    current = raw_final
    while True:
        exc = closed_day_exception(
            lookup,
            current,
            proven,
            ignore_recess,
            honor_proven_suspensions=honor_decrees_at_rollover,
        )
        if exc is None and not is_weekend(current):
            break
        if exc is not None:
            prorogated.append(exc.at(current))
        current += timedelta(days=1)

    provable: dict[str, SuspensionEvent] = {}
    for event in inside + prorogated:
        if event.kind.is_provable:
            provable.setdefault(event.iso, event)

    return DeadlineResult(
        final_date=raw_final,
        final_date_prorogated=current,
        non_business_days=tuple(inside),
        prorogated_days=tuple(prorogated),
        start_date=adjusted_start,
        start_non_business_days=tuple(skipped),
        potentially_provable_days=tuple(provable.values()),
    )
