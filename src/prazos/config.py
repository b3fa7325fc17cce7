"""
Prazos Configuration

Runtime settings read from PRAZOS_* environment variables.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Mapping, Optional

from .exceptions import InvalidInputError
from .models import MatterType


# Bundled sample calendar (repository root / calendars)
DEFAULT_CALENDAR_PATH = Path(__file__).resolve().parent.parent.parent / "calendars" / "tjpr.yaml"

# Earlier notices must be counted directly in the court system
DEFAULT_CUTOFF_DATE = date(2025, 5, 16)

DEFAULT_LENGTH_DAYS = 15


def _env_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Calculator settings.

    Attributes:
        log_level: Level for the prazos logger
        calendar_path: Calendar configuration file
        cutoff_date: Earliest availability date accepted
        default_matter: Matter used when a request omits it
        default_length: Deadline length used when a request omits it
        civil_instability_mid_period: Whether proven instability days
            suspend a civil count mid-period (edges always count)
        docs_enabled: Expose the OpenAPI docs in the HTTP service
    """
    log_level: str = "INFO"
    calendar_path: Path = DEFAULT_CALENDAR_PATH
    cutoff_date: date = DEFAULT_CUTOFF_DATE
    default_matter: MatterType = MatterType.CIVIL
    default_length: int = DEFAULT_LENGTH_DAYS
    civil_instability_mid_period: bool = True
    docs_enabled: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from the environment (or an explicit mapping)."""
        env = os.environ if environ is None else environ
        try:
            cutoff = date.fromisoformat(env.get("PRAZOS_CUTOFF_DATE", DEFAULT_CUTOFF_DATE.isoformat()))
            default_length = int(env.get("PRAZOS_DEFAULT_LENGTH", str(DEFAULT_LENGTH_DAYS)))
            default_matter = MatterType(env.get("PRAZOS_DEFAULT_MATTER", MatterType.CIVIL.value).lower())
        except ValueError as e:
            raise InvalidInputError(
                message=f"Invalid PRAZOS_* configuration: {e}",
                details={"error": str(e)},
            )

        return cls(
            log_level=env.get("PRAZOS_LOG_LEVEL", "INFO").upper(),
            calendar_path=Path(env.get("PRAZOS_CALENDAR_PATH", str(DEFAULT_CALENDAR_PATH))),
            cutoff_date=cutoff,
            default_matter=default_matter,
            default_length=default_length,
            civil_instability_mid_period=_env_bool(
                env.get("PRAZOS_CIVIL_INSTABILITY_MID_PERIOD"), True
            ),
            docs_enabled=_env_bool(env.get("PRAZOS_DOCS_ENABLED"), True),
        )
