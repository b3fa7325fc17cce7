"""
Tests for SuspensionCollector: which suspensions land on the proof checklist.
"""
from datetime import date

from prazos.config import Settings
from prazos.engine import SuspensionCollector
from prazos.models import DayExceptionKind

from tests.conftest import make_calculator, make_lookup


EDGE_INSTABILITY = {
    "2025-11-24": "Instabilidade Projudi",
    "2025-11-26": "Instabilidade Projudi",
}


class TestScanWindow:
    """Tests for SuspensionCollector.scan_window."""

    def test_scan_finds_decrees_and_instability(self):
        collector = SuspensionCollector(make_lookup(instability=EDGE_INSTABILITY))
        events = collector.scan_window(date(2025, 11, 21), date(2025, 11, 28))
        assert [e.iso for e in events] == ["2025-11-21", "2025-11-24", "2025-11-26"]

    def test_scan_without_instability_keeps_edges(self):
        collector = SuspensionCollector(make_lookup(instability=EDGE_INSTABILITY))
        events = collector.scan_window(date(2025, 11, 24), date(2025, 11, 28), include_instability=False)
        assert [e.iso for e in events] == ["2025-11-24"]

    def test_provable_at_ignores_holidays(self, lookup):
        collector = SuspensionCollector(lookup)
        assert collector.provable_at(date(2025, 11, 20)) is None
        assert collector.provable_at(date(2025, 11, 21)).kind == DayExceptionKind.DECREE


class TestCivilCollection:
    """Provable suspensions for civil outcomes."""

    def test_decree_at_publication(self, calculator):
        outcome = calculator.calculate("2025-11-20", 15, "civil")
        assert outcome.provable_dates == ["2025-11-21"]

    def test_mid_period_instability_collected(self):
        calculator = make_calculator(instability=EDGE_INSTABILITY)
        outcome = calculator.calculate("2025-11-20", 15, "civil")
        assert outcome.provable_dates == ["2025-11-21", "2025-11-24", "2025-11-26"]

    def test_mid_period_instability_excluded_by_policy(self):
        calculator = make_calculator(
            settings=Settings(civil_instability_mid_period=False),
            instability=EDGE_INSTABILITY,
        )
        outcome = calculator.calculate("2025-11-20", 15, "civil")
        assert outcome.provable_dates == ["2025-11-21", "2025-11-24"]

    def test_start_instability_proof_moves_final_when_mid_period_disabled(self):
        calculator = make_calculator(
            settings=Settings(civil_instability_mid_period=False),
            instability={"2025-10-08": "Instabilidade Projudi"},
        )
        # Availability 6 Oct (Mon): publication 7 Oct, start 8 Oct
        outcome = calculator.calculate("2025-10-06", 5, "civil")
        assert outcome.provable_dates == ["2025-10-08"]
        assert outcome.unproven_final == date(2025, 10, 14)

        calculator.toggle_proof(outcome, "2025-10-08")
        assert outcome.proven_final == date(2025, 10, 15)

    def test_cnj_holidays_collected_at_rollover(self, calculator):
        # Availability 30 May (Fri): publication 2 June, start 3 June
        outcome = calculator.calculate("2025-05-30", 14, "civil")
        assert outcome.deadline_start_date == date(2025, 6, 3)
        assert "2025-06-19" in outcome.provable_dates
        assert "2025-06-20" in outcome.provable_dates


class TestCriminalCollection:
    """Provable suspensions for criminal outcomes."""

    def test_instability_only_at_edges(self):
        calculator = make_calculator(instability=EDGE_INSTABILITY)
        outcome = calculator.calculate("2025-11-20", 5, "criminal")
        assert outcome.deadline_start_date == date(2025, 11, 24)
        assert outcome.unproven_final == date(2025, 11, 28)
        # 24 Nov is the deadline start; 26 Nov falls mid-period
        assert outcome.provable_dates == ["2025-11-21", "2025-11-24"]

    def test_decree_before_start(self, calculator):
        outcome = calculator.calculate("2025-11-18", 5, "criminal")
        assert outcome.deadline_start_date == date(2025, 11, 21)
        assert outcome.provable_dates == ["2025-11-21"]
