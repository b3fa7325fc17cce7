"""
Tests for DayAdvancer and the publication cascade.
"""
from datetime import date

from prazos.engine import DayAdvancer
from prazos.models import DayExceptionKind

from tests.conftest import make_lookup


class TestNextBusinessDay:
    """Tests for DayAdvancer.next_business_day."""

    def test_plain_weekend_skipped_silently(self, advancer):
        result = advancer.next_business_day(date(2025, 10, 3))
        assert result.date == date(2025, 10, 6)
        assert result.suspensions_passed_over == ()

    def test_holiday_collected(self, advancer):
        result = advancer.next_business_day(date(2025, 11, 19))
        assert result.date == date(2025, 11, 21)
        assert [e.iso for e in result.suspensions_passed_over] == ["2025-11-20"]

    def test_decree_blocks_when_all_assumed(self, advancer):
        result = advancer.next_business_day(date(2025, 11, 19), honor_decrees=True)
        assert result.date == date(2025, 11, 24)
        assert [e.iso for e in result.suspensions_passed_over] == ["2025-11-20", "2025-11-21"]

    def test_unproven_decree_does_not_block(self, advancer):
        result = advancer.next_business_day(date(2025, 11, 20), honor_decrees=True, proven=frozenset())
        assert result.date == date(2025, 11, 21)

    def test_proven_decree_blocks(self, advancer):
        result = advancer.next_business_day(
            date(2025, 11, 20), honor_decrees=True, proven=frozenset({"2025-11-21"})
        )
        assert result.date == date(2025, 11, 24)
        assert result.suspensions_passed_over[0].kind == DayExceptionKind.DECREE

    def test_instability_never_blocks_or_collected(self):
        advancer = DayAdvancer(make_lookup(instability={"2025-10-23": "Instabilidade Projudi"}))
        result = advancer.next_business_day(date(2025, 10, 22), honor_decrees=True)
        assert result.date == date(2025, 10, 23)
        assert result.suspensions_passed_over == ()


class TestPublicationCascade:
    """Availability -> publication -> deadline start."""

    def test_baseline_cascade_ignores_decrees(self, advancer):
        cascade = advancer.publication_cascade(date(2025, 11, 20), honor_decrees=False, proven=frozenset())
        assert cascade.publication_date == date(2025, 11, 21)
        assert cascade.deadline_start_date == date(2025, 11, 24)
        assert cascade.suspensions == ()

    def test_proven_decree_shifts_cascade(self, advancer):
        cascade = advancer.publication_cascade(
            date(2025, 11, 20), honor_decrees=True, proven=frozenset({"2025-11-21"})
        )
        assert cascade.publication_date == date(2025, 11, 24)
        assert cascade.deadline_start_date == date(2025, 11, 25)
        assert [e.iso for e in cascade.availability_suspensions] == ["2025-11-21"]
        assert cascade.interval_suspensions == ()

    def test_holiday_between_availability_and_publication(self, advancer):
        cascade = advancer.publication_cascade(date(2025, 11, 19))
        assert cascade.publication_date == date(2025, 11, 21)
        assert [e.iso for e in cascade.availability_suspensions] == ["2025-11-20"]

    def test_holiday_between_publication_and_start(self, advancer):
        cascade = advancer.publication_cascade(date(2025, 11, 18))
        assert cascade.publication_date == date(2025, 11, 19)
        assert cascade.deadline_start_date == date(2025, 11, 21)
        assert [e.iso for e in cascade.interval_suspensions] == ["2025-11-20"]
