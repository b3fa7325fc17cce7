"""
Prazos Exception Hierarchy

Domain-specific exceptions for judicial deadline calculation.
All exceptions include error codes for tracking and logging.

Exception codes follow the pattern: PZ_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class PrazosError(Exception):
    """
    Base exception for all Prazos errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (PZ_*)
        details: Additional context about the error
        process_number: Associated process number if applicable
    """
    message: str
    code: str = "PZ_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    process_number: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.process_number:
            parts.append(f"(processo: {self.process_number})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.process_number:
            result["process_number"] = self.process_number
        return result


# =============================================================================
# Calculation Input Errors
# =============================================================================

@dataclass
class InvalidInputError(PrazosError):
    """Availability date or deadline length is missing or malformed."""
    code: str = "PZ_INVALID_INPUT"


@dataclass
class BeforeCutoffError(PrazosError):
    """Availability date precedes the legal cutoff accepted by the calculator."""
    code: str = "PZ_BEFORE_CUTOFF"


# =============================================================================
# Calendar Errors
# =============================================================================

@dataclass
class MissingCalendarDataError(PrazosError):
    """Calendar snapshot has no data for the requested date."""
    code: str = "PZ_MISSING_CALENDAR_DATA"


@dataclass
class CalendarLoadError(PrazosError):
    """Failed to load a calendar configuration file."""
    code: str = "PZ_CALENDAR_LOAD_ERROR"


@dataclass
class CalendarValidationError(PrazosError):
    """Calendar configuration failed schema validation."""
    code: str = "PZ_CALENDAR_VALIDATION_ERROR"


@dataclass
class CalendarVersionMismatch(PrazosError):
    """Calendar schema version doesn't match expected version."""
    code: str = "PZ_CALENDAR_VERSION_MISMATCH"
