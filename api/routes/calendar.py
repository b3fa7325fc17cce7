"""Calendar endpoints."""

from fastapi import APIRouter, HTTPException

from api.schemas.responses import CalendarSummary
from prazos.models import CalendarSnapshot

router = APIRouter(prefix="/calendar", tags=["Calendar"])

# Shared snapshot (set by main.py)
snapshot: CalendarSnapshot = None


def set_snapshot(s: CalendarSnapshot):
    global snapshot
    snapshot = s


@router.get("", response_model=CalendarSummary)
async def get_calendar():
    """Summary of the loaded calendar: covered years, counts, recess and proof groups."""
    if snapshot is None:
        raise HTTPException(status_code=503, detail="Calendar not loaded")
    return CalendarSummary(**snapshot.summary())
