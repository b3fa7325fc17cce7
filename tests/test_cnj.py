"""
Tests for the CNJ Corpus Christi rule and grouped proof toggling.
"""
from datetime import date

from prazos.calendars import (
    CORPUS_CHRISTI_REASON,
    apply_corpus_christi_rule,
    calculate_easter,
    corpus_christi,
    snapshot_from_maps,
    toggle_proof,
)
from prazos.models import DayExceptionKind

from tests.conftest import make_exception, make_snapshot


CNJ_GROUP = frozenset({"2025-06-19", "2025-06-20"})


class TestEaster:
    """Movable feasts."""

    def test_easter_dates(self):
        assert calculate_easter(2024) == date(2024, 3, 31)
        assert calculate_easter(2025) == date(2025, 4, 20)
        assert calculate_easter(2026) == date(2026, 4, 5)

    def test_corpus_christi_is_sixty_days_after_easter(self):
        assert corpus_christi(2025) == date(2025, 6, 19)
        assert corpus_christi(2026) == date(2026, 6, 4)


class TestCorpusChristiRule:
    """Re-tagging Corpus Christi as a provable CNJ holiday pair."""

    def test_rule_moves_feast_to_decrees(self):
        holidays = {"2025-06-19": make_exception("Corpus Christi", DayExceptionKind.HOLIDAY)}
        result = apply_corpus_christi_rule(holidays, {}, years=[2025])

        assert "2025-06-19" not in result.holidays
        assert result.decrees["2025-06-19"].kind == DayExceptionKind.CNJ_HOLIDAY
        assert result.decrees["2025-06-19"].reason == CORPUS_CHRISTI_REASON
        assert result.decrees["2025-06-20"].kind == DayExceptionKind.CNJ_HOLIDAY
        assert result.proof_groups == (CNJ_GROUP,)

    def test_rule_does_not_mutate_inputs(self):
        holidays = {"2025-06-19": make_exception("Corpus Christi", DayExceptionKind.HOLIDAY)}
        decrees = {}
        apply_corpus_christi_rule(holidays, decrees, years=[2025])
        assert "2025-06-19" in holidays
        assert decrees == {}

    def test_rule_only_for_covered_years(self):
        snapshot = snapshot_from_maps({}, {}, {}, years=[2026], cnj_years=[2025])
        assert snapshot.proof_groups == ()
        assert "2025-06-19" not in snapshot.decrees

    def test_rule_disabled_keeps_holiday(self):
        snapshot = make_snapshot(cnj_years=())
        assert snapshot.holidays["2025-06-19"].kind == DayExceptionKind.HOLIDAY
        assert snapshot.proof_groups == ()


class TestToggleProof:
    """Grouped symmetric toggle."""

    def test_toggle_ungrouped_date(self):
        proven = toggle_proof(frozenset(), "2025-11-21")
        assert proven == frozenset({"2025-11-21"})
        assert toggle_proof(proven, "2025-11-21") == frozenset()

    def test_toggle_group_member_adds_whole_group(self):
        proven = toggle_proof(frozenset(), "2025-06-19", [CNJ_GROUP])
        assert proven == CNJ_GROUP

    def test_toggle_other_member_removes_whole_group(self):
        proven = toggle_proof(CNJ_GROUP, "2025-06-20", [CNJ_GROUP])
        assert proven == frozenset()

    def test_partially_proven_group_is_removed(self):
        proven = toggle_proof(frozenset({"2025-06-20", "2025-11-21"}), "2025-06-19", [CNJ_GROUP])
        assert proven == frozenset({"2025-11-21"})

    def test_double_toggle_restores(self):
        start = frozenset({"2025-11-21"})
        once = toggle_proof(start, "2025-06-19", [CNJ_GROUP])
        assert toggle_proof(once, "2025-06-19", [CNJ_GROUP]) == start
