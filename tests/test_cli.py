"""
Tests for the prazos command-line interface.

Exit codes are part of the scripting contract and are asserted exactly.
"""
import json
import pytest
import yaml

from prazos.cli import ExitCode, main

from tests.conftest import TJPR_CALENDAR


def run(*args):
    return main(list(args))


def calcular(*args):
    return run("calcular", "--calendario", str(TJPR_CALENDAR), *args)


# =============================================================================
# calcular
# =============================================================================

class TestCalcular:
    """Tests for `prazos calcular`."""

    def test_text_output(self, capsys):
        code = calcular("-d", "2025-11-20", "-p", "15", "--materia", "civil", "--processo", "0001234-56.2025.8.16.0001")
        out = capsys.readouterr().out
        assert code == ExitCode.OK
        assert "12/12/2025" in out
        assert "21/11/2025" in out
        assert "0001234-56.2025.8.16.0001" in out

    def test_json_output(self, capsys):
        code = calcular("-d", "2025-11-20", "-p", "15", "--comprovar", "2025-11-21", "--json")
        data = json.loads(capsys.readouterr().out)
        assert code == ExitCode.OK
        assert data["proven"] == ["2025-11-21"]
        assert data["proven_scenario"]["final_date_prorogated"] == "2025-12-15"
        assert data["placeholders"]["prazoFinal"] == "15/12/2025"
        assert data["timeliness"] is None

    def test_timely_filing(self):
        code = calcular("-d", "2025-11-20", "-p", "15", "--comprovar", "2025-11-21", "--interposicao", "2025-12-15")
        assert code == ExitCode.OK

    def test_pending_proof_filing(self):
        code = calcular("-d", "2025-11-20", "-p", "15", "--interposicao", "13/12/2025")
        assert code == ExitCode.PENDING_PROOF

    def test_untimely_filing(self):
        code = calcular("-d", "2025-11-20", "-p", "15", "--interposicao", "2025-12-16")
        assert code == ExitCode.UNTIMELY

    def test_criminal_ignore_recess(self, capsys):
        code = calcular("-d", "2025-12-11", "-p", "10", "--materia", "criminal", "--ignorar-recesso", "--json")
        data = json.loads(capsys.readouterr().out)
        assert code == ExitCode.OK
        assert data["unproven_scenario"]["final_date_prorogated"] == "2025-12-24"

    @pytest.mark.parametrize("args", [
        ("-d", "2025-13-40"),
        ("-d", "2025-01-10"),
        ("-d", "2025-11-20", "-p", "0"),
        ("-d", "2025-12-10", "--materia", "civil", "--ignorar-recesso"),
        ("-d", "2025-11-20", "--interposicao", "amanhã"),
    ])
    def test_invalid_input(self, args):
        assert calcular(*args) == ExitCode.INPUT_INVALID

    def test_missing_calendar(self, tmp_path):
        code = run("calcular", "-d", "2025-11-20", "--calendario", str(tmp_path / "missing.yaml"))
        assert code == ExitCode.CALENDAR_ERROR

    def test_availability_is_required(self):
        with pytest.raises(SystemExit):
            run("calcular")


# =============================================================================
# calendario
# =============================================================================

class TestCalendario:
    """Tests for `prazos calendario`."""

    def test_valid_calendar(self, capsys):
        code = run("calendario", "--calendario", str(TJPR_CALENDAR))
        out = capsys.readouterr().out
        assert code == ExitCode.OK
        assert "Calendar is valid!" in out
        assert "2025-06-19 + 2025-06-20" in out

    def test_invalid_calendar(self, tmp_path, capsys):
        path = tmp_path / "invalid.yaml"
        path.write_text(yaml.safe_dump({"recurring_holidays": [{"month": 13, "day": 1, "reason": "x"}]}))
        code = run("calendario", "--calendario", str(path))
        assert code == ExitCode.CALENDAR_ERROR
        assert "recurring_holidays" in capsys.readouterr().out

    def test_version_mismatch(self, tmp_path):
        path = tmp_path / "future.yaml"
        path.write_text(yaml.safe_dump({"schema_version": "2.0.0"}))
        assert run("calendario", "--calendario", str(path)) == ExitCode.CALENDAR_ERROR

    def test_missing_file(self, tmp_path):
        code = run("calendario", "--calendario", str(tmp_path / "missing.yaml"))
        assert code == ExitCode.INPUT_INVALID


def test_no_command_prints_help(capsys):
    assert run() == 1
    assert "calcular" in capsys.readouterr().out
