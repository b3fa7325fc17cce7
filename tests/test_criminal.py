"""
Tests for the criminal (calendar-day) deadline engine.
"""
import pytest
from datetime import date

from prazos.engine import compute_criminal_deadline
from prazos.exceptions import InvalidInputError
from prazos.models import DayExceptionKind


PROVEN_DECREE = frozenset({"2025-11-21"})


class TestCriminalCounting:
    """Calendar-day counting."""

    def test_plain_count(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 10, 6), 5)
        assert result.final_date == date(2025, 10, 10)
        assert result.final_date_prorogated == date(2025, 10, 10)
        assert result.start_date == date(2025, 10, 6)

    def test_weekend_final_rolls_to_monday(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 10, 6), 6)
        assert result.final_date == date(2025, 10, 11)
        assert result.final_date_prorogated == date(2025, 10, 13)
        assert result.prorogated_days == ()

    def test_holiday_inside_period_still_counts(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 11, 17), 6)
        assert result.final_date == date(2025, 11, 22)
        assert [e.iso for e in result.non_business_days] == ["2025-11-20", "2025-11-21"]

    def test_holiday_final_rolls_over(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 11, 17), 4)
        assert result.final_date == date(2025, 11, 20)
        assert result.final_date_prorogated == date(2025, 11, 21)
        assert [e.iso for e in result.prorogated_days] == ["2025-11-20"]
        assert result.potentially_provable_days == ()

    def test_proven_decree_extends_rollover(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 11, 17), 4, proven=PROVEN_DECREE)
        assert result.final_date_prorogated == date(2025, 11, 24)
        assert [e.iso for e in result.prorogated_days] == ["2025-11-20", "2025-11-21"]
        assert [e.iso for e in result.potentially_provable_days] == ["2025-11-21"]


class TestCriminalStartAdjustment:
    """The start moves off closed days; proven skips are granted back."""

    def test_unproven_decree_start_is_kept(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 11, 21), 5)
        assert result.start_date == date(2025, 11, 21)
        assert result.final_date_prorogated == date(2025, 11, 25)
        assert [e.iso for e in result.potentially_provable_days] == ["2025-11-21"]

    def test_proven_decree_start_is_regranted(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 11, 21), 5, proven=PROVEN_DECREE)
        assert result.start_date == date(2025, 11, 24)
        assert [e.iso for e in result.start_non_business_days] == ["2025-11-21"]
        # 24 Nov + (5 - 1 + 1) days
        assert result.final_date == date(2025, 11, 29)
        assert result.final_date_prorogated == date(2025, 12, 1)

    def test_weekend_start_moves_without_regrant(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 10, 4), 5)
        assert result.start_date == date(2025, 10, 6)
        assert result.start_non_business_days == ()
        assert result.final_date == date(2025, 10, 10)

    def test_holiday_start_is_not_regranted(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 11, 20), 5)
        assert result.start_date == date(2025, 11, 21)
        assert result.start_non_business_days[0].kind == DayExceptionKind.HOLIDAY
        assert result.final_date == date(2025, 11, 25)


class TestCriminalRecess:
    """Recess closes the edges unless ignored."""

    def test_final_in_recess_rolls_past_it(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 12, 15), 10)
        assert result.final_date == date(2025, 12, 24)
        assert result.final_date_prorogated == date(2026, 1, 21)

    def test_ignore_recess(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 12, 15), 10, ignore_recess=True)
        assert result.final_date_prorogated == date(2025, 12, 24)

    def test_ignore_recess_still_honors_holidays(self, lookup):
        result = compute_criminal_deadline(lookup, date(2025, 12, 15), 11, ignore_recess=True)
        assert result.final_date == date(2025, 12, 25)
        assert result.final_date_prorogated == date(2025, 12, 26)


class TestCriminalValidation:
    """Invalid lengths are rejected."""

    @pytest.mark.parametrize("length", [0, -1, False])
    def test_invalid_length(self, lookup, length):
        with pytest.raises(InvalidInputError):
            compute_criminal_deadline(lookup, date(2025, 10, 6), length)
