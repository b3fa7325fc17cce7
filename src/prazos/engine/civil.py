"""
Prazos Civil Deadline Engine

Civil deadlines count business days. Weekends, holidays and recess never
count. Decrees and instability days are business days for counting
unless the user proved them, because an ad-hoc suspension only reduces
the available days once it is documented.

After the count, the final date is rolled forward over weekends,
holidays, recess, CNJ holidays (proven or not) and, when enabled, proven
decrees and instability days.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import AbstractSet, Optional

from ..calendars.lookup import CalendarLookup, is_weekend
from ..exceptions import InvalidInputError
from ..models import DayException, DeadlineResult, KindFilter, SuspensionEvent


def counting_exception(
    lookup: CalendarLookup,
    d: date,
    proven: AbstractSet[str],
    honor_decrees_mid_period: bool = True,
    honor_instability_mid_period: bool = True,
) -> Optional[DayException]:
    """The exception that keeps `d` from counting as a business day, if any."""
    holiday = lookup.classify(d, kind=KindFilter.HOLIDAY)
    if holiday is not None:
        return holiday
    if honor_decrees_mid_period:
        decree = lookup.classify(
            d, True, KindFilter.DECREE, proven, proof_required=True
        )
        if decree is not None:
            return decree
    if honor_instability_mid_period:
        outage = lookup.classify(
            d, True, KindFilter.INSTABILITY, proven, proof_required=True
        )
        if outage is not None:
            return outage
    return lookup.classify(d, kind=KindFilter.RECESS)


def rollover_exception(
    lookup: CalendarLookup,
    d: date,
    proven: AbstractSet[str],
    honor_decrees_at_rollover: bool = True,
) -> Optional[DayException]:
    """The exception that pushes a civil final date past `d`, if any."""
    holiday = lookup.classify(d, kind=KindFilter.HOLIDAY)
    if holiday is not None:
        return holiday
    # CNJ holidays block the final date without proof
    cnj = lookup.classify(d, kind=KindFilter.DECREE)
    if cnj is not None:
        return cnj
    if honor_decrees_at_rollover:
        suspension = lookup.classify(
            d, True, KindFilter.DECREE, proven, proof_required=True
        ) or lookup.classify(
            d, True, KindFilter.INSTABILITY, proven, proof_required=True
        )
        if suspension is not None:
            return suspension
    return lookup.classify(d, kind=KindFilter.RECESS)


def compute_civil_deadline(
    lookup: CalendarLookup,
    start: date,
    length: int,
    proven: AbstractSet[str] = frozenset(),
    honor_decrees_mid_period: bool = True,
    honor_instability_mid_period: bool = True,
    honor_decrees_at_rollover: bool = True,
) -> DeadlineResult:
    """
    Count `length` business days from `start` (inclusive).

    Args:
        lookup: Calendar lookup
        start: First day of the count
        length: Deadline length in business days
        proven: ISO dates the user attests
        honor_decrees_mid_period: Proven decrees suspend the count
        honor_instability_mid_period: Proven instability suspends the count;
            when off, only a proven instability on `start` does
        honor_decrees_at_rollover: Proven decrees/instability push the final date

    Returns:
        DeadlineResult with the counted and rolled final dates
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidInputError(
            message="Deadline length must be a positive number of days",
            details={"length": length},
        )

    consumed: list[SuspensionEvent] = []
    counted = 0
    current = start - timedelta(days=1)
    while counted < length:
        current += timedelta(days=1)
        exc = counting_exception(
            lookup,
            current,
            proven,
            honor_decrees_mid_period,
            honor_instability_mid_period or current == start,
        )
        if exc is not None:
            consumed.append(exc.at(current))
            continue
        if not is_weekend(current):
            counted += 1

    final = current
    prorogated: list[SuspensionEvent] = []
    while True:
        exc = rollover_exception(lookup, current, proven, honor_decrees_at_rollover)
        if exc is None and not is_weekend(current):
            break
        if exc is not None:
            prorogated.append(exc.at(current))
        current += timedelta(days=1)

    return DeadlineResult(
        final_date=final,
        final_date_prorogated=current,
        non_business_days=tuple(consumed),
        prorogated_days=tuple(prorogated),
        start_date=start,
    )
