"""
Prazos Calendars

Calendar configuration, snapshot building and day classification.

Provides:
- CalendarLoader for YAML/JSON calendar files
- build_snapshot / snapshot_from_maps to produce an immutable CalendarSnapshot
- CalendarLookup for date classification
- The CNJ Corpus Christi rule and grouped proof toggling

Usage:
    from prazos.calendars import CalendarLoader, CalendarLookup, build_snapshot

    config = CalendarLoader().load("calendars/tjpr.yaml")
    lookup = CalendarLookup(build_snapshot(config))
    lookup.classify(date(2025, 11, 20))
"""
from __future__ import annotations

from .builder import build_snapshot, covered_years, snapshot_from_maps
from .cnj import (
    CORPUS_CHRISTI_REASON,
    DEFAULT_CNJ_YEARS,
    POST_CORPUS_CHRISTI_REASON,
    CnjRuleResult,
    apply_corpus_christi_rule,
    calculate_easter,
    corpus_christi,
    toggle_proof,
)
from .loader import CalendarLoader
from .lookup import WEEKEND_DAYS, CalendarLookup, is_weekend
from .schema import SCHEMA_VERSION, CalendarConfigSchema

__all__ = [
    # Lookup
    "CalendarLookup",
    "WEEKEND_DAYS",
    "is_weekend",
    # CNJ rule
    "apply_corpus_christi_rule",
    "CnjRuleResult",
    "calculate_easter",
    "corpus_christi",
    "toggle_proof",
    "DEFAULT_CNJ_YEARS",
    "CORPUS_CHRISTI_REASON",
    "POST_CORPUS_CHRISTI_REASON",
    # Configuration
    "CalendarLoader",
    "CalendarConfigSchema",
    "SCHEMA_VERSION",
    "build_snapshot",
    "covered_years",
    "snapshot_from_maps",
]
