"""Request schemas for the API."""

from pydantic import BaseModel, Field
from typing import Optional


class CalculateRequest(BaseModel):
    """Request to calculate a deadline."""
    availability_date: str = Field(..., description="Availability date (YYYY-MM-DD or DD/MM/YYYY)")
    deadline_length_days: Optional[int] = Field(
        default=None, ge=1, description="Deadline length in days (server default when omitted)"
    )
    matter_type: Optional[str] = Field(default=None, description="civil|criminal")
    ignore_recess: bool = Field(default=False, description="Criminal only: disregard the recess")
    process_number: Optional[str] = Field(default=None, description="Process number (display only)")
    proven_dates: list[str] = Field(default=[], description="Suspension dates the user has proven")
    filing_date: Optional[str] = Field(default=None, description="Filing date to check timeliness")
    user_id: Optional[str] = Field(default=None, description="Caller identity for usage logging")

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "examples": [
                {
                    "availability_date": "2025-11-20",
                    "deadline_length_days": 15,
                    "matter_type": "civil",
                    "process_number": "0001234-56.2025.8.16.0001",
                    "proven_dates": ["2025-11-21"],
                    "filing_date": "2025-12-15",
                }
            ]
        }
    }
