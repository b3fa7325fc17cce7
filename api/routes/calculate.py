"""Deadline calculation endpoint."""

import logging
import time

from fastapi import APIRouter, HTTPException, Request

from api.schemas.requests import CalculateRequest
from api.schemas.responses import CalculateResponse
from prazos.engine import DeadlineCalculator
from prazos.exceptions import (
    BeforeCutoffError,
    InvalidInputError,
    MissingCalendarDataError,
    PrazosError,
)
from prazos.formatting import document_placeholders, parse_date

logger = logging.getLogger("prazos.api")

router = APIRouter(prefix="/calculate", tags=["Calculation"])

# Shared calculator instance (set by main.py)
calculator: DeadlineCalculator = None


def set_calculator(c: DeadlineCalculator):
    global calculator
    calculator = c


def status_for(error: PrazosError) -> int:
    """HTTP status for a domain error."""
    if isinstance(error, MissingCalendarDataError):
        return 503
    if isinstance(error, BeforeCutoffError):
        return 422
    if isinstance(error, InvalidInputError):
        return 400
    return 500


@router.post("", response_model=CalculateResponse)
async def calculate_deadline(body: CalculateRequest, request: Request):
    """
    Calculate a deadline.

    Returns the publication cascade, the unproven and proven scenarios,
    the provable suspensions checklist and the trace. When
    `proven_dates` is given the proven scenario reflects those proofs;
    when `filing_date` is given the filing is classified as timely,
    untimely, or untimely pending decree proof.
    """
    if calculator is None:
        raise HTTPException(status_code=503, detail="Calendar not loaded")

    request_id = getattr(request.state, "request_id", "unknown")
    start = time.time()

    try:
        outcome = calculator.calculate(
            body.availability_date,
            body.deadline_length_days,
            body.matter_type,
            ignore_recess=body.ignore_recess,
            process_number=body.process_number,
            user_id=body.user_id,
        )
        if body.proven_dates:
            calculator.prove(outcome, body.proven_dates)
        filing = parse_date(body.filing_date) if body.filing_date else None
        timeliness = calculator.assess_timeliness(outcome, filing) if filing else None
    except PrazosError as e:
        logger.warning(
            "Calculation rejected: %s",
            e.code,
            extra={"request_id": request_id, "process_number": e.process_number},
        )
        raise HTTPException(status_code=status_for(e), detail=e.to_dict())

    logger.info(
        "Calculation complete",
        extra={
            "request_id": request_id,
            "process_number": outcome.process_number,
            "duration_ms": int((time.time() - start) * 1000),
        },
    )

    data = outcome.to_dict()
    data["timeliness"] = timeliness.value if timeliness else None
    data["placeholders"] = document_placeholders(outcome, filing)
    return CalculateResponse(**data)
