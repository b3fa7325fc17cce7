"""
Tests for Settings loaded from PRAZOS_* environment variables.
"""
import pytest
from datetime import date
from pathlib import Path

from prazos.config import DEFAULT_CALENDAR_PATH, Settings
from prazos.exceptions import InvalidInputError
from prazos.models import MatterType


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.log_level == "INFO"
        assert settings.calendar_path == DEFAULT_CALENDAR_PATH
        assert settings.cutoff_date == date(2025, 5, 16)
        assert settings.default_matter == MatterType.CIVIL
        assert settings.default_length == 15
        assert settings.civil_instability_mid_period is True
        assert settings.docs_enabled is True

    def test_default_calendar_is_bundled(self):
        assert DEFAULT_CALENDAR_PATH.name == "tjpr.yaml"
        assert DEFAULT_CALENDAR_PATH.parent.name == "calendars"

    def test_overrides(self):
        settings = Settings.from_env({
            "PRAZOS_LOG_LEVEL": "debug",
            "PRAZOS_CALENDAR_PATH": "/etc/prazos/tjsp.yaml",
            "PRAZOS_CUTOFF_DATE": "2025-06-01",
            "PRAZOS_DEFAULT_MATTER": "CRIMINAL",
            "PRAZOS_DEFAULT_LENGTH": "5",
            "PRAZOS_CIVIL_INSTABILITY_MID_PERIOD": "false",
            "PRAZOS_DOCS_ENABLED": "0",
        })
        assert settings.log_level == "DEBUG"
        assert settings.calendar_path == Path("/etc/prazos/tjsp.yaml")
        assert settings.cutoff_date == date(2025, 6, 1)
        assert settings.default_matter == MatterType.CRIMINAL
        assert settings.default_length == 5
        assert settings.civil_instability_mid_period is False
        assert settings.docs_enabled is False

    @pytest.mark.parametrize("env", [
        {"PRAZOS_CUTOFF_DATE": "16/05/2025"},
        {"PRAZOS_DEFAULT_LENGTH": "quinze"},
        {"PRAZOS_DEFAULT_MATTER": "trabalhista"},
    ])
    def test_invalid_values(self, env):
        with pytest.raises(InvalidInputError):
            Settings.from_env(env)

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("PRAZOS_DEFAULT_LENGTH", "10")
        assert Settings.from_env().default_length == 10
