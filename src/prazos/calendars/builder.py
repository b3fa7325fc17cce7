"""
Prazos Calendar Snapshot Builder

Turns a validated calendar configuration into the immutable
CalendarSnapshot the engines run against.

Covered years are the configured years plus the current and next year,
so a session started in December can still compute January deadlines.
A recurring 29/02 holiday only exists in leap years.
"""
from __future__ import annotations

import logging
from calendar import isleap
from datetime import date
from typing import Iterable, Mapping, Optional

from ..models import (
    CalendarSnapshot,
    DayException,
    DayExceptionKind,
    RecessPeriod,
    RecessRule,
)
from .cnj import DEFAULT_CNJ_YEARS, apply_corpus_christi_rule
from .schema import CalendarConfigSchema

logger = logging.getLogger(__name__)


def covered_years(configured: Iterable[int], today: Optional[date] = None) -> frozenset[int]:
    """Configured years plus the current and next calendar year."""
    today = today or date.today()
    return frozenset(configured) | {today.year, today.year + 1}


def snapshot_from_maps(
    holidays: Mapping[str, DayException],
    decrees: Mapping[str, DayException],
    instability: Mapping[str, DayException],
    years: Iterable[int],
    recess: Optional[RecessRule] = None,
    cnj_years: Iterable[int] = DEFAULT_CNJ_YEARS,
    jurisdiction: str = "TJPR",
) -> CalendarSnapshot:
    """
    Build a snapshot from plain exception maps.

    The CNJ rule is applied here, once, on copies of the given maps.
    """
    years = frozenset(years)
    rule = apply_corpus_christi_rule(
        holidays,
        decrees,
        years=[y for y in cnj_years if y in years],
    )
    return CalendarSnapshot(
        holidays=rule.holidays,
        decrees=rule.decrees,
        instability=dict(instability),
        recess=recess or RecessRule(),
        years=years,
        proof_groups=rule.proof_groups,
        jurisdiction=jurisdiction,
    )


def build_snapshot(
    config: CalendarConfigSchema,
    today: Optional[date] = None,
) -> CalendarSnapshot:
    """
    Expand a calendar configuration into a snapshot.

    Args:
        config: Validated calendar configuration
        today: Reference date for the current/next year (defaults to today)

    Returns:
        CalendarSnapshot covering configured years, current year and next year
    """
    years = covered_years(config.annual_exceptions.keys(), today)

    holidays: dict[str, DayException] = {}
    decrees: dict[str, DayException] = {}
    instability: dict[str, DayException] = {}

    for year in sorted(years):
        for recurring in config.recurring_holidays:
            if (recurring.month, recurring.day) == (2, 29) and not isleap(year):
                continue
            iso = date(year, recurring.month, recurring.day).isoformat()
            holidays[iso] = DayException(reason=recurring.reason, kind=DayExceptionKind.HOLIDAY)

    for year in sorted(config.annual_exceptions):
        for entry in config.annual_exceptions[year]:
            kind = DayExceptionKind(entry.kind)
            exc = DayException(reason=entry.reason, kind=kind, link=entry.link)
            iso = entry.date.isoformat()
            if kind is DayExceptionKind.HOLIDAY:
                holidays[iso] = exc
            elif kind is DayExceptionKind.INSTABILITY:
                instability[iso] = exc
            else:
                decrees[iso] = exc

    recess = RecessRule(
        periods=tuple(
            RecessPeriod(month=p.month, start_day=p.start_day, end_day=p.end_day)
            for p in config.recess
        )
    )

    snapshot = snapshot_from_maps(
        holidays,
        decrees,
        instability,
        years=years,
        recess=recess,
        cnj_years=config.cnj_rules.corpus_christi_years,
        jurisdiction=config.jurisdiction,
    )
    logger.debug("Built calendar snapshot: %s", snapshot.summary())
    return snapshot
