"""
Unit Tests for Aggregation
==========================

Test Coverage
-------------
- Monday-based week start, including the Sunday edge
- Calendar-month keys and labels
- Pure weekly / monthly totals
- AggregationEngine memo invalidation on ledger mutation
"""

from datetime import date, datetime

import pytest

from src.domain.models import DailyEntry
from src.modules.steps.aggregation import (
    AggregationEngine,
    month_key,
    month_label,
    monthly_total,
    week_start_of,
    weekly_total,
)


@pytest.mark.unit
class TestWeekStart:
    """Week windows run Monday through Sunday."""

    def test_monday_is_its_own_week_start(self):
        assert week_start_of(date(2024, 3, 4)) == date(2024, 3, 4)

    def test_sunday_belongs_to_previous_monday(self):
        assert week_start_of(date(2024, 3, 10)) == date(2024, 3, 4)

    @pytest.mark.parametrize("day", range(4, 11))
    def test_whole_week_shares_start(self, day):
        assert week_start_of(date(2024, 3, day)) == date(2024, 3, 4)

    def test_week_spanning_month_boundary(self):
        assert week_start_of(date(2024, 3, 2)) == date(2024, 2, 26)

    def test_accepts_datetime(self):
        assert week_start_of(datetime(2024, 3, 10, 23, 0)) == date(2024, 3, 4)


@pytest.mark.unit
class TestMonthWindow:
    def test_month_key_is_year_and_month(self):
        assert month_key(date(2024, 3, 31)) == (2024, 3)

    def test_month_label_is_locale_independent(self):
        assert month_label(date(2024, 3, 5)) == "March 2024"
        assert month_label(date(2023, 12, 1)) == "December 2023"


@pytest.mark.unit
class TestPureTotals:
    """Totals derived from a plain list of entries."""

    @pytest.fixture
    def entries(self):
        return [
            DailyEntry(member_id="ann", date=date(2024, 2, 29), steps=500),
            DailyEntry(member_id="ann", date=date(2024, 3, 4), steps=8000),
            DailyEntry(member_id="ann", date=date(2024, 3, 5), steps=9000),
            DailyEntry(member_id="ann", date=date(2024, 3, 11), steps=1000),
        ]

    def test_weekly_total_only_counts_reference_week(self, entries):
        assert weekly_total(entries, date(2024, 3, 6)) == 17000

    def test_week_crossing_month_counts_both_months(self, entries):
        assert weekly_total(entries, date(2024, 3, 1)) == 500

    def test_monthly_total_only_counts_reference_month(self, entries):
        assert monthly_total(entries, date(2024, 3, 20)) == 18000
        assert monthly_total(entries, date(2024, 2, 1)) == 500

    def test_empty_entries_total_zero(self):
        assert weekly_total([], date(2024, 3, 4)) == 0
        assert monthly_total([], date(2024, 3, 4)) == 0


@pytest.mark.unit
class TestAggregationEngine:
    """Memoised totals always match a fresh recompute."""

    @pytest.fixture
    def engine(self, ledger, registry):
        registry.register("ann", "Ann")
        return AggregationEngine(ledger)

    def test_weekly_aggregate_fields(self, engine, ledger):
        ledger.log_steps("ann", date(2024, 3, 4), 8000)

        aggregate = engine.weekly_aggregate("ann", date(2024, 3, 7))

        assert aggregate.member_id == "ann"
        assert aggregate.week_start == date(2024, 3, 4)
        assert aggregate.steps == 8000

    def test_monthly_aggregate_fields(self, engine, ledger):
        ledger.log_steps("ann", date(2024, 3, 4), 8000)

        aggregate = engine.monthly_aggregate("ann", date(2024, 3, 30))

        assert aggregate.month_key == (2024, 3)
        assert aggregate.label == "March 2024"
        assert aggregate.steps == 8000

    def test_cached_totals_follow_overwrites(self, engine, ledger):
        ledger.log_steps("ann", date(2024, 3, 4), 8000)
        assert engine.weekly_total("ann", date(2024, 3, 4)) == 8000

        ledger.log_steps("ann", date(2024, 3, 4), 3000)

        assert engine.weekly_total("ann", date(2024, 3, 4)) == 3000
        assert engine.monthly_total("ann", date(2024, 3, 4)) == 3000

    def test_cached_totals_follow_reset(self, engine, ledger):
        ledger.log_steps("ann", date(2024, 3, 4), 8000)
        assert engine.monthly_total("ann", date(2024, 3, 4)) == 8000

        ledger.reset("ann")

        assert engine.monthly_total("ann", date(2024, 3, 4)) == 0
        assert engine.weekly_total("ann", date(2024, 3, 4)) == 0
