"""
Prazos API

Judicial deadline calculator over HTTP.
"""

import json
import logging
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

import prazos
from prazos.calendars import CalendarLoader, build_snapshot
from prazos.config import Settings
from prazos.engine import DeadlineCalculator
from prazos.exceptions import CalendarLoadError, CalendarValidationError, CalendarVersionMismatch
from prazos.usage import LoggingUsageSink

from api.routes import calculate, calendar


# =============================================================================
# Configuration
# =============================================================================

settings = Settings.from_env()


# =============================================================================
# Logging
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    EXTRA_FIELDS = ("request_id", "process_number", "duration_ms", "usage")

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in self.EXTRA_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)
        if record.exc_info:
            log_entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


logger = logging.getLogger("prazos")
logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)


# =============================================================================
# Startup
# =============================================================================

CALENDAR_LOADED = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the calendar on startup."""
    global CALENDAR_LOADED

    loader = CalendarLoader()
    try:
        snapshot = build_snapshot(loader.load(settings.calendar_path))
    except (CalendarLoadError, CalendarValidationError, CalendarVersionMismatch) as e:
        logger.error("Failed to load calendar: %s", e, extra={"request_id": "startup"})
        CALENDAR_LOADED = False
    else:
        calculate.set_calculator(
            DeadlineCalculator(snapshot, settings=settings, usage_sink=LoggingUsageSink())
        )
        calendar.set_snapshot(snapshot)
        CALENDAR_LOADED = True
        logger.info(
            "Calendar loaded: %s, years %s",
            snapshot.jurisdiction,
            sorted(snapshot.years),
            extra={"request_id": "startup"},
        )

    yield

    logger.info("Shutting down", extra={"request_id": "shutdown"})


# =============================================================================
# App
# =============================================================================

app = FastAPI(
    title="Prazos API",
    description="""
**Judicial deadline calculator.**

Computes the publication date, deadline start and final date of a court
notice, with and without the suspensions the user can prove.

## Quick Start

1. `GET /calendar` - See the loaded calendar
2. `POST /calculate` - Calculate a deadline
    """,
    version=prazos.__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Include routers
app.include_router(calculate.router)
app.include_router(calendar.router)


# =============================================================================
# Middleware
# =============================================================================

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id
    request.state.start_time = time.time()

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# =============================================================================
# Health
# =============================================================================

@app.get("/health", tags=["Health"])
async def health_check():
    """Service status and whether the calendar is loaded."""
    return {
        "service": "Prazos API",
        "version": prazos.__version__,
        "status": "healthy" if CALENDAR_LOADED else "degraded",
        "calendar_loaded": CALENDAR_LOADED,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
