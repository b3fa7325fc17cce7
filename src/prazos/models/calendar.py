"""
Prazos Calendar Models

Models describing the jurisdiction calendar a calculation runs against.

Key components:
- DayException: why a single date is not (or may not be) a business day
- SuspensionEvent: a DayException pinned to its date, reported to callers
- RecessRule: annual month/day ranges of the recesso forense
- CalendarSnapshot: immutable exception maps for one calculation session

Maps are keyed by ISO date strings (YYYY-MM-DD), the canonical key also
used for proven-set membership.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .enums import DayExceptionKind


# =============================================================================
# Day Exceptions
# =============================================================================

@dataclass(frozen=True)
class DayException:
    """
    A reason a date is not a business day.

    Attributes:
        reason: Human-readable reason (e.g., "Zumbi dos Palmares")
        kind: Exception category
        link: Optional URL to the act that created the exception
    """
    reason: str
    kind: DayExceptionKind
    link: Optional[str] = None

    def at(self, d: date) -> SuspensionEvent:
        """Pin this exception to a date."""
        return SuspensionEvent(date=d, reason=self.reason, kind=self.kind, link=self.link)


@dataclass(frozen=True)
class SuspensionEvent:
    """A dated calendar exception encountered during a calculation."""
    date: date
    reason: str
    kind: DayExceptionKind
    link: Optional[str] = None

    @property
    def iso(self) -> str:
        return self.date.isoformat()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        result: dict[str, Any] = {
            "date": self.iso,
            "reason": self.reason,
            "kind": self.kind.value,
        }
        if self.link:
            result["link"] = self.link
        return result


# =============================================================================
# Recess
# =============================================================================

@dataclass(frozen=True)
class RecessPeriod:
    """An inclusive day range inside a single month."""
    month: int
    start_day: int
    end_day: int

    def contains(self, d: date) -> bool:
        return d.month == self.month and self.start_day <= d.day <= self.end_day


DEFAULT_RECESS_PERIODS = (
    RecessPeriod(month=1, start_day=1, end_day=20),
    RecessPeriod(month=12, start_day=20, end_day=31),
)


@dataclass(frozen=True)
class RecessRule:
    """Recesso forense, applied identically every year."""
    periods: tuple[RecessPeriod, ...] = DEFAULT_RECESS_PERIODS
    reason: str = "Recesso Forense"

    def contains(self, d: date) -> bool:
        return any(p.contains(d) for p in self.periods)


# =============================================================================
# Calendar Snapshot
# =============================================================================

def _freeze(mapping: Mapping[str, DayException]) -> Mapping[str, DayException]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class CalendarSnapshot:
    """
    Immutable exception maps for one calculation session.

    Built once by the calendar builder and passed explicitly into every
    calculation. Callers refresh it across calendar years by building a
    new snapshot; nothing here is mutated after construction.

    Attributes:
        holidays: ISO date -> holiday exception
        decrees: ISO date -> decree (or CNJ holiday) exception
        instability: ISO date -> system outage exception
        recess: Annual recess rule
        years: Calendar years this snapshot has data for
        proof_groups: Sets of ISO dates whose proofs toggle together
    """
    holidays: Mapping[str, DayException] = field(default_factory=dict)
    decrees: Mapping[str, DayException] = field(default_factory=dict)
    instability: Mapping[str, DayException] = field(default_factory=dict)
    recess: RecessRule = field(default_factory=RecessRule)
    years: frozenset[int] = field(default_factory=frozenset)
    proof_groups: tuple[frozenset[str], ...] = ()
    jurisdiction: str = "TJPR"

    def __post_init__(self) -> None:
        object.__setattr__(self, "holidays", _freeze(self.holidays))
        object.__setattr__(self, "decrees", _freeze(self.decrees))
        object.__setattr__(self, "instability", _freeze(self.instability))
        object.__setattr__(self, "years", frozenset(self.years))
        object.__setattr__(
            self, "proof_groups", tuple(frozenset(g) for g in self.proof_groups)
        )

    @property
    def is_empty(self) -> bool:
        """True when the snapshot covers no year at all."""
        return not self.years

    def covers(self, d: date) -> bool:
        return d.year in self.years

    def proof_group_for(self, iso: str) -> Optional[frozenset[str]]:
        """Return the proof group containing a date, if any."""
        for group in self.proof_groups:
            if iso in group:
                return group
        return None

    def summary(self) -> dict[str, Any]:
        """Counts per map, for display and health checks."""
        return {
            "jurisdiction": self.jurisdiction,
            "years": sorted(self.years),
            "holidays": len(self.holidays),
            "decrees": len(self.decrees),
            "instability": len(self.instability),
            "recess": [
                {"month": p.month, "start_day": p.start_day, "end_day": p.end_day}
                for p in self.recess.periods
            ],
            "proof_groups": [sorted(g) for g in self.proof_groups],
        }
