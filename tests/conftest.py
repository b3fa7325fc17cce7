"""
Pytest configuration and fixtures for Prazos tests.

Provides calendar factories shared by the engine, calculator and API tests.

The default snapshot mirrors the parts of the TJPR 2025 calendar the
scenarios rely on:
- 2025-11-20 (Thu) holiday, 2025-11-21 (Fri) decree
- 2025-06-19 Corpus Christi, re-tagged with 2025-06-20 as a CNJ holiday pair
- 2025-12-25 and 2026-01-01 holidays, recess Jan 1-20 and Dec 20-31
"""
import pytest
from pathlib import Path
from typing import Optional

from prazos.calendars import CalendarLookup, snapshot_from_maps
from prazos.config import Settings
from prazos.engine import DayAdvancer, DeadlineCalculator
from prazos.models import CalendarSnapshot, DayException, DayExceptionKind


CALENDARS_DIR = Path(__file__).parent.parent / "calendars"
TJPR_CALENDAR = CALENDARS_DIR / "tjpr.yaml"

BASE_HOLIDAYS = {
    "2025-06-19": "Corpus Christi",
    "2025-11-20": "Consciência Negra",
    "2025-12-25": "Natal",
    "2026-01-01": "Confraternização Universal",
}

BASE_DECREES = {
    "2025-11-21": "Decreto Judiciário",
}


# =============================================================================
# Factory Helpers
# =============================================================================

def make_exception(
    reason: str = "Decreto Judiciário",
    kind: DayExceptionKind = DayExceptionKind.DECREE,
    link: Optional[str] = None,
) -> DayException:
    """Create a DayException."""
    return DayException(reason=reason, kind=kind, link=link)


def make_snapshot(
    holidays: Optional[dict[str, str]] = None,
    decrees: Optional[dict[str, str]] = None,
    instability: Optional[dict[str, str]] = None,
    years=(2025, 2026),
    cnj_years=(2025,),
) -> CalendarSnapshot:
    """
    Create a snapshot from ISO date -> reason maps.

    The base holidays and decrees are always included; the given maps are
    added on top.
    """
    holiday_map = {
        iso: make_exception(reason, DayExceptionKind.HOLIDAY)
        for iso, reason in {**BASE_HOLIDAYS, **(holidays or {})}.items()
    }
    decree_map = {
        iso: make_exception(reason, DayExceptionKind.DECREE)
        for iso, reason in {**BASE_DECREES, **(decrees or {})}.items()
    }
    instability_map = {
        iso: make_exception(reason, DayExceptionKind.INSTABILITY)
        for iso, reason in (instability or {}).items()
    }
    return snapshot_from_maps(
        holiday_map,
        decree_map,
        instability_map,
        years=years,
        cnj_years=cnj_years,
    )


def make_lookup(**kwargs) -> CalendarLookup:
    """Create a CalendarLookup over make_snapshot(**kwargs)."""
    return CalendarLookup(make_snapshot(**kwargs))


def make_calculator(settings: Optional[Settings] = None, usage_sink=None, **kwargs) -> DeadlineCalculator:
    """Create a DeadlineCalculator over make_snapshot(**kwargs)."""
    return DeadlineCalculator(
        make_snapshot(**kwargs),
        settings=settings or Settings(),
        usage_sink=usage_sink,
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def snapshot() -> CalendarSnapshot:
    """Default test snapshot."""
    return make_snapshot()


@pytest.fixture
def lookup(snapshot) -> CalendarLookup:
    """Lookup over the default snapshot."""
    return CalendarLookup(snapshot)


@pytest.fixture
def advancer(lookup) -> DayAdvancer:
    """Advancer over the default snapshot."""
    return DayAdvancer(lookup)


@pytest.fixture
def calculator(snapshot) -> DeadlineCalculator:
    """Calculator over the default snapshot with default settings."""
    return DeadlineCalculator(snapshot, settings=Settings())
