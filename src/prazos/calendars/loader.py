"""
Prazos Calendar Loader

Loads and validates calendar configuration files (YAML or JSON).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import CalendarLoadError, CalendarValidationError, CalendarVersionMismatch
from .schema import (
    SCHEMA_VERSION,
    CalendarConfigSchema,
    check_schema_version,
    validate_calendar_config,
)

logger = logging.getLogger(__name__)


class CalendarLoader:
    """
    Loads calendar configuration files.

    Usage:
        loader = CalendarLoader()
        config = loader.load("calendars/tjpr.yaml")
        snapshot = build_snapshot(config)
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject files with incompatible schema versions
        """
        self.strict_version = strict_version
        self._configs: dict[str, CalendarConfigSchema] = {}

    def load(self, path: Union[str, Path]) -> CalendarConfigSchema:
        """
        Load a calendar configuration from a file.

        Raises:
            CalendarLoadError: If the file cannot be read or parsed
            CalendarValidationError: If validation fails
            CalendarVersionMismatch: If schema version incompatible
        """
        path = Path(path)

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise CalendarLoadError(
                message=f"Failed to load calendar: {e}",
                details={"path": str(path), "error": str(e)},
            )

        config = self.load_dict(data, source=str(path))
        self._configs[str(path)] = config
        logger.info(
            "Loaded calendar %s from %s (%d recurring, %d years)",
            config.jurisdiction,
            path,
            len(config.recurring_holidays),
            len(config.annual_exceptions),
        )
        return config

    def load_dict(self, data: Any, source: str = "<dict>") -> CalendarConfigSchema:
        """Validate an already-parsed calendar document."""
        if not isinstance(data, dict):
            raise CalendarLoadError(
                message="Calendar document must be a mapping",
                details={"path": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            file_version = data.get("schema_version", "unknown")
            raise CalendarVersionMismatch(
                message=f"Schema version mismatch: calendar has {file_version}, expected {SCHEMA_VERSION}",
                details={
                    "file_version": file_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            return validate_calendar_config(data)
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False, include_input=False)
            raise CalendarValidationError(
                message=f"Calendar validation failed: {e.error_count()} errors",
                details={"errors": errors, "path": source},
            )

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in {".yaml", ".yml"}:
                return yaml.safe_load(f)
            elif path.suffix.lower() == ".json":
                return json.load(f)
            else:
                # YAML is a superset of JSON
                return yaml.safe_load(f.read())

    def get_config(self, path: Union[str, Path]) -> Optional[CalendarConfigSchema]:
        """Get a previously loaded configuration by path."""
        return self._configs.get(str(Path(path)))
