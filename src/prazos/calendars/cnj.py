"""
CNJ Special Rules

Corpus Christi and the following day are suspended by national rule
rather than by the state holiday calendar, so the suspension must be
evidenced like a decree. The rule moves both dates out of the holiday
map into the decree map, tagged `cnj_holiday`, and ties their proofs
together in a single group.

Everything here returns new objects; caller maps are never mutated.

`calculate_easter` is the Easter helper from the claimpilot holiday
calendars (canada_ontario), reused unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import AbstractSet, Iterable, Mapping, Sequence

from ..models import DayException, DayExceptionKind


CORPUS_CHRISTI_REASON = "Corpus Christi"
POST_CORPUS_CHRISTI_REASON = "Suspensão de expediente (pós Corpus Christi)"

# Years in which the CNJ rule applies unless the calendar file says otherwise
DEFAULT_CNJ_YEARS = (2025,)


def calculate_easter(year: int) -> date:
    """
    Calculate Easter Sunday using the Anonymous Gregorian algorithm.

    This is the standard algorithm for calculating Easter in Western Christianity.
    """
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def corpus_christi(year: int) -> date:
    """Corpus Christi falls on the Thursday 60 days after Easter Sunday."""
    return calculate_easter(year) + timedelta(days=60)


@dataclass(frozen=True)
class CnjRuleResult:
    """Transformed maps plus the proof groups the rule created."""
    holidays: dict[str, DayException]
    decrees: dict[str, DayException]
    proof_groups: tuple[frozenset[str], ...]


def apply_corpus_christi_rule(
    holidays: Mapping[str, DayException],
    decrees: Mapping[str, DayException],
    years: Iterable[int] = DEFAULT_CNJ_YEARS,
) -> CnjRuleResult:
    """
    Re-tag Corpus Christi and the following day as provable CNJ holidays.

    Args:
        holidays: ISO date -> holiday exception (not modified)
        decrees: ISO date -> decree exception (not modified)
        years: Years the rule applies to

    Returns:
        CnjRuleResult with new maps and one proof group per year
    """
    new_holidays = dict(holidays)
    new_decrees = dict(decrees)
    groups: list[frozenset[str]] = []

    for year in sorted(set(years)):
        feast = corpus_christi(year)
        day_after = feast + timedelta(days=1)
        feast_iso = feast.isoformat()
        after_iso = day_after.isoformat()

        new_holidays.pop(feast_iso, None)
        new_holidays.pop(after_iso, None)
        new_decrees[feast_iso] = DayException(
            reason=CORPUS_CHRISTI_REASON,
            kind=DayExceptionKind.CNJ_HOLIDAY,
        )
        new_decrees[after_iso] = DayException(
            reason=POST_CORPUS_CHRISTI_REASON,
            kind=DayExceptionKind.CNJ_HOLIDAY,
        )
        groups.append(frozenset({feast_iso, after_iso}))

    return CnjRuleResult(
        holidays=new_holidays,
        decrees=new_decrees,
        proof_groups=tuple(groups),
    )


def toggle_proof(
    proven: AbstractSet[str],
    iso: str,
    groups: Sequence[AbstractSet[str]] = (),
) -> frozenset[str]:
    """
    Toggle a date in a proven set, honoring proof groups.

    When the date belongs to a group, the whole group flips: if any member
    is proven all members are removed, otherwise all are added.
    """
    result = set(proven)
    members: AbstractSet[str] = frozenset({iso})
    for group in groups:
        if iso in group:
            members = group
            break

    if result & set(members):
        result -= set(members)
    else:
        result |= set(members)
    return frozenset(result)
