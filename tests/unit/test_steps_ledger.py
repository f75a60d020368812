"""
Unit Tests for StepsLedger
==========================

Test Coverage
-------------
- Upsert semantics (one entry per member per day)
- Registration and step count checks before any write
- Reset and version counter
- Calendar-day keys for datetimes
"""

from datetime import date, datetime

import pytest

from src.modules.shared.exceptions import InvalidStepCountError, NotRegisteredError
from src.modules.steps.ledger import day_key

MONDAY = date(2024, 3, 4)
TUESDAY = date(2024, 3, 5)


@pytest.fixture
def ann(registry):
    return registry.register("ann", "Ann")


@pytest.mark.unit
class TestLedgerWrites:
    """Test writes to the ledger."""

    def test_first_write_creates_entry(self, ledger, ann):
        created = ledger.log_steps("ann", MONDAY, 8000)

        assert created is True
        assert ledger.daily_entry("ann", MONDAY).steps == 8000

    def test_second_write_same_day_overwrites(self, ledger, ann):
        # Arrange
        ledger.log_steps("ann", MONDAY, 8000)

        # Act
        created = ledger.log_steps("ann", MONDAY, 9500)

        # Assert
        assert created is False
        entries = ledger.all_entries("ann")
        assert len(entries) == 1
        assert entries[0].steps == 9500

    def test_overwrite_keeps_entry_position(self, ledger, ann):
        ledger.log_steps("ann", MONDAY, 8000)
        ledger.log_steps("ann", TUESDAY, 9000)

        ledger.log_steps("ann", MONDAY, 100)

        assert [e.date for e in ledger.all_entries("ann")] == [MONDAY, TUESDAY]

    def test_datetimes_on_same_day_share_entry(self, ledger, ann):
        ledger.log_steps("ann", datetime(2024, 3, 4, 7, 30), 1000)

        created = ledger.log_steps("ann", datetime(2024, 3, 4, 22, 15), 2000)

        assert created is False
        assert ledger.daily_entry("ann", MONDAY).steps == 2000

    def test_unregistered_member_rejected(self, ledger):
        with pytest.raises(NotRegisteredError) as exc_info:
            ledger.log_steps("ghost", MONDAY, 100)

        assert exc_info.value.member_id == "ghost"
        assert ledger.all_entries("ghost") == []

    def test_negative_steps_leave_ledger_untouched(self, ledger, ann):
        ledger.log_steps("ann", MONDAY, 8000)
        version = ledger.version

        with pytest.raises(InvalidStepCountError):
            ledger.log_steps("ann", MONDAY, -5)

        assert ledger.daily_entry("ann", MONDAY).steps == 8000
        assert ledger.version == version


@pytest.mark.unit
class TestLedgerReads:
    """Test derived reads and reset."""

    def test_total_equals_sum_of_entries(self, ledger, ann):
        ledger.log_steps("ann", MONDAY, 8000)
        ledger.log_steps("ann", TUESDAY, 9000)

        assert ledger.total_steps("ann") == sum(e.steps for e in ledger.all_entries("ann"))
        assert ledger.total_steps("ann") == 17000
        assert ledger.active_days("ann") == 2

    def test_member_without_entries(self, ledger, ann):
        assert ledger.total_steps("ann") == 0
        assert ledger.active_days("ann") == 0
        assert ledger.daily_entry("ann", MONDAY) is None

    def test_all_entries_is_a_snapshot(self, ledger, ann):
        ledger.log_steps("ann", MONDAY, 8000)

        snapshot = ledger.all_entries("ann")
        snapshot.clear()

        assert ledger.active_days("ann") == 1

    def test_reset_clears_entries_and_is_idempotent(self, ledger, ann):
        ledger.log_steps("ann", MONDAY, 8000)

        ledger.reset("ann")
        ledger.reset("ann")

        assert ledger.all_entries("ann") == []
        assert ledger.total_steps("ann") == 0

    def test_version_moves_on_every_mutation(self, ledger, ann):
        start = ledger.version

        ledger.log_steps("ann", MONDAY, 1)
        ledger.log_steps("ann", MONDAY, 2)
        ledger.reset("ann")

        assert ledger.version == start + 3


@pytest.mark.unit
class TestDayKey:
    def test_datetime_maps_to_date(self):
        assert day_key(datetime(2024, 3, 4, 23, 59)) == MONDAY

    def test_date_is_unchanged(self):
        assert day_key(MONDAY) is MONDAY

    def test_other_types_rejected(self):
        with pytest.raises(TypeError):
            day_key("2024-03-04")
