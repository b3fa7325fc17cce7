"""
Prazos Timeliness Analyzer

Classifies a filing date against the unproven and proven final dates.

All values are reduced to a UTC calendar day before comparison, so a
timezone-aware timestamp late in the evening cannot drift into the next
or previous day.
"""
from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Union

from ..exceptions import InvalidInputError
from ..models import CalculationOutcome, Timeliness

DateLike = Union[date, datetime, str]


def to_utc_day(value: DateLike) -> date:
    """Normalize a date, datetime or ISO string to a UTC calendar day."""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            raise InvalidInputError(
                message=f"Invalid date: {value!r} (expected YYYY-MM-DD)",
                details={"value": value},
            )
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidInputError(
        message=f"Invalid date value of type {type(value).__name__}",
        details={"value": repr(value)},
    )


def classify_filing(
    filing: DateLike,
    unproven_final: DateLike,
    proven_final: DateLike,
) -> Timeliness:
    """
    Classify a filing date.

    - timely: filed on or before the proven final date
    - untimely_pending_decree_proof: exactly one day after the unproven
      final date, a gap a single proven decree could close
    - untimely: anything later
    """
    filed = to_utc_day(filing)
    unproven = to_utc_day(unproven_final)
    proven = to_utc_day(proven_final)

    if filed <= proven:
        return Timeliness.TIMELY

    diff_days = math.ceil((filed - unproven).total_seconds() / 86400)
    if diff_days >= 2:
        return Timeliness.UNTIMELY
    if diff_days == 1:
        return Timeliness.UNTIMELY_PENDING_DECREE_PROOF
    return Timeliness.UNTIMELY


def assess_outcome(outcome: CalculationOutcome, filing: DateLike) -> Timeliness:
    """Classify a filing date against an outcome's current scenarios."""
    return classify_filing(filing, outcome.unproven_final, outcome.proven_final)
