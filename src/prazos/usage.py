"""
Prazos Usage Logging

Fire-and-forget usage records for each calculation. A failing sink is
logged and ignored; it never aborts or rolls back a calculation.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, Protocol, runtime_checkable

from .models import MatterType

logger = logging.getLogger(__name__)

NOT_INFORMED = "Não informado"


@dataclass(frozen=True)
class UsageEvent:
    """One calculator use."""
    matter_type: MatterType
    deadline_length_days: int
    process_number: str = NOT_INFORMED
    user_id: Optional[str] = None
    kind: str = "calculadora"
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "materia": self.matter_type.value,
            "type": self.kind,
            "prazo": self.deadline_length_days,
            "numero_processo": self.process_number,
            "timestamp": self.timestamp.isoformat(),
        }


@runtime_checkable
class UsageSink(Protocol):
    """Destination for usage events (database, queue, log)."""

    def record(self, event: UsageEvent) -> None:
        ...


class LoggingUsageSink:
    """Writes usage events to the `prazos.usage` logger."""

    def __init__(self, name: str = "prazos.usage"):
        self._logger = logging.getLogger(name)

    def record(self, event: UsageEvent) -> None:
        self._logger.info("usage", extra={"usage": event.to_dict()})


class MemoryUsageSink:
    """Keeps usage events in memory."""

    def __init__(self) -> None:
        self.events: list[UsageEvent] = []

    def record(self, event: UsageEvent) -> None:
        self.events.append(event)


def record_usage(sink: Optional[UsageSink], event: UsageEvent) -> None:
    """Send an event to `sink`, swallowing any sink failure."""
    if sink is None:
        return
    try:
        sink.record(event)
    except Exception as e:
        logger.warning("Failed to record usage: %s", e, exc_info=True)
