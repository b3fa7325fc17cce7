"""
Prazos Calendar Schemas

Pydantic models for validating calendar configuration YAML/JSON files.

A calendar file lists recurring holidays (month/day, expanded for every
covered year), per-year exceptions (holidays, decrees, instability days),
the recess ranges and the years the CNJ Corpus Christi rule applies to.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders should check version compatibility
"""
from __future__ import annotations

import datetime
from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Kinds as Literals (for YAML validation)
# =============================================================================

ExceptionKindValue = Literal["holiday", "decree", "instability", "cnj_holiday"]

# Portuguese names used by the court's calendar administration screens
KIND_ALIASES = {
    "feriado": "holiday",
    "decreto": "decree",
    "instabilidade": "instability",
    "feriado_cnj": "cnj_holiday",
}


def _valid_month_day(month: int, day: int) -> bool:
    try:
        date(2024, month, day)  # leap year accepts 29/02
    except ValueError:
        return False
    return True


# =============================================================================
# Entry Schemas
# =============================================================================

class RecurringHolidaySchema(BaseModel):
    """A holiday repeated on the same month/day every year."""
    month: int = Field(..., ge=1, le=12, description="Month (1-12)")
    day: int = Field(..., ge=1, le=31, description="Day of month")
    reason: str = Field(..., min_length=1, description="Holiday name")

    @model_validator(mode="after")
    def validate_day(self) -> "RecurringHolidaySchema":
        if not _valid_month_day(self.month, self.day):
            raise ValueError(f"Invalid month/day: {self.month:02d}/{self.day:02d}")
        return self

    model_config = {"extra": "forbid"}


class AnnualExceptionSchema(BaseModel):
    """A dated exception for one specific year."""
    date: datetime.date = Field(..., description="Exception date (YYYY-MM-DD)")
    reason: str = Field(..., min_length=1, description="Why the day is closed")
    kind: ExceptionKindValue = Field("holiday", description="Exception kind")
    link: Optional[str] = Field(None, description="URL of the act")

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v: Any) -> Any:
        """Accept the Portuguese kind names."""
        if isinstance(v, str):
            key = v.strip().lower()
            return KIND_ALIASES.get(key, key)
        return v

    model_config = {"extra": "forbid"}


class RecessPeriodSchema(BaseModel):
    """An inclusive day range of the recess inside one month."""
    month: int = Field(..., ge=1, le=12)
    start_day: int = Field(..., ge=1, le=31)
    end_day: int = Field(..., ge=1, le=31)

    @model_validator(mode="after")
    def validate_range(self) -> "RecessPeriodSchema":
        if self.start_day > self.end_day:
            raise ValueError("Recess start_day must not be after end_day")
        if not _valid_month_day(self.month, self.end_day):
            raise ValueError(f"Invalid recess end: {self.month:02d}/{self.end_day:02d}")
        return self

    model_config = {"extra": "forbid"}


class CnjRulesSchema(BaseModel):
    """Years the Corpus Christi CNJ rule applies to."""
    corpus_christi_years: list[int] = Field(
        default_factory=lambda: [2025],
        description="Years whose Corpus Christi pair becomes a provable CNJ holiday",
    )

    model_config = {"extra": "forbid"}


# =============================================================================
# Top-Level Schema
# =============================================================================

class CalendarConfigSchema(BaseModel):
    """
    Top-level schema for a calendar configuration file.
    """
    schema_version: str = Field(SCHEMA_VERSION, description="Schema version for compatibility")
    jurisdiction: str = Field("TJPR", description="Court the calendar belongs to")
    name: Optional[str] = None

    recurring_holidays: list[RecurringHolidaySchema] = Field(default_factory=list)
    annual_exceptions: dict[int, list[AnnualExceptionSchema]] = Field(default_factory=dict)
    recess: list[RecessPeriodSchema] = Field(
        default_factory=lambda: [
            RecessPeriodSchema(month=1, start_day=1, end_day=20),
            RecessPeriodSchema(month=12, start_day=20, end_day=31),
        ],
        description="Recess ranges (default: Jan 1-20 and Dec 20-31)",
    )
    cnj_rules: CnjRulesSchema = Field(default_factory=CnjRulesSchema)

    @model_validator(mode="after")
    def validate_years(self) -> "CalendarConfigSchema":
        """Every annual exception must belong to the year it is filed under."""
        errors = []
        for year, entries in self.annual_exceptions.items():
            seen: set[tuple[str, str]] = set()
            for entry in entries:
                if entry.date.year != year:
                    errors.append(f"{entry.date.isoformat()} listed under year {year}")
                key = (entry.date.isoformat(), entry.kind)
                if key in seen:
                    errors.append(f"Duplicate {entry.kind} on {entry.date.isoformat()}")
                seen.add(key)
        if errors:
            raise ValueError("; ".join(errors))
        return self

    model_config = {"extra": "forbid"}


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_calendar_config(data: dict[str, Any]) -> CalendarConfigSchema:
    """
    Validate a calendar dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return CalendarConfigSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check if a calendar file's major schema version is compatible."""
    file_version = str(data.get("schema_version", SCHEMA_VERSION))
    return file_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
