"""
Prazos Enumerations

All enumeration types used throughout the deadline calculator.

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Calendar Exceptions
# =============================================================================

class DayExceptionKind(str, Enum):
    """Why a calendar day is (potentially) not a business day."""
    HOLIDAY = "holiday"                # Statutory, always automatic
    DECREE = "decree"                  # Ad-hoc suspension, requires proof
    INSTABILITY = "instability"        # System outage, requires proof
    RECESS = "recess"                  # Recesso forense, computed from ranges
    CNJ_HOLIDAY = "cnj_holiday"        # National holiday treated as provable

    @property
    def is_provable(self) -> bool:
        """Whether the user may attest this kind of suspension."""
        return self in PROVABLE_KINDS


PROVABLE_KINDS = frozenset({
    DayExceptionKind.DECREE,
    DayExceptionKind.CNJ_HOLIDAY,
    DayExceptionKind.INSTABILITY,
})


class KindFilter(str, Enum):
    """Restricts a calendar lookup to a single exception map."""
    ALL = "all"
    HOLIDAY = "holiday"
    DECREE = "decree"
    INSTABILITY = "instability"
    RECESS = "recess"

    def admits(self, category: "KindFilter") -> bool:
        return self is KindFilter.ALL or self is category


# =============================================================================
# Calculation
# =============================================================================

class MatterType(str, Enum):
    """Procedural matter, which decides the counting rule."""
    CIVIL = "civil"          # Business days
    CRIMINAL = "criminal"    # Calendar days


class Timeliness(str, Enum):
    """Classification of a filing date against the computed deadline."""
    TIMELY = "timely"
    UNTIMELY = "untimely"
    UNTIMELY_PENDING_DECREE_PROOF = "untimely_pending_decree_proof"


class RecalcState(str, Enum):
    """State of the proof-toggle recalculation."""
    IDLE = "idle"
    TOGGLING = "toggling"
    RECALCULATED = "recalculated"
