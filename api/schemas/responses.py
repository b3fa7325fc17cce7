"""Response schemas for the API."""

from pydantic import BaseModel
from typing import Optional


class Suspension(BaseModel):
    """A dated suspension (holiday, decree, instability, recess)."""
    date: str
    reason: str
    kind: str  # holiday|decree|instability|recess|cnj_holiday
    link: Optional[str] = None


class Scenario(BaseModel):
    """One scenario of the deadline."""
    final_date: str
    final_date_prorogated: str
    non_business_days: list[Suspension]
    prorogated_days: list[Suspension]
    start_date: Optional[str] = None
    start_non_business_days: list[Suspension]
    potentially_provable_days: list[Suspension]


class TraceStep(BaseModel):
    """A step of the calculation trace."""
    name: str
    date: Optional[str] = None
    events: list[Suspension] = []


class CalculateResponse(BaseModel):
    """Response from a deadline calculation."""
    # Inputs
    matter_type: str  # civil|criminal
    deadline_length_days: int
    process_number: Optional[str] = None
    ignore_recess: bool

    # Cascade
    availability_date: str
    publication_date: str
    deadline_start_date: str
    baseline_publication_date: str
    baseline_deadline_start_date: str

    # Scenarios
    unproven_scenario: Scenario
    proven_scenario: Scenario
    fixed_final_date: Optional[str] = None

    # Proof checklist
    provable_suspensions: list[Suspension]
    proven: list[str]

    trace: list[TraceStep]

    # Timeliness
    timeliness: Optional[str] = None  # timely|untimely|untimely_pending_decree_proof

    # Document template values
    placeholders: dict[str, str]


class CalendarSummary(BaseModel):
    """Summary of the loaded calendar snapshot."""
    jurisdiction: str
    years: list[int]
    holidays: int
    decrees: int
    instability: int
    recess: list[dict[str, int]]
    proof_groups: list[list[str]]


class ErrorDetail(BaseModel):
    """Error body returned for domain errors."""
    code: str
    message: str
    details: Optional[dict] = None
    process_number: Optional[str] = None
