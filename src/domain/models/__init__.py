"""
Domain models package for Stepline.

Plain frozen dataclasses describing members, daily step entries, derived
aggregates and leaderboard rows. They hold no behaviour beyond validating
their own invariants; the ledger and services own all state transitions.
"""

from .base import (
    DomainValidationError,
    validate_non_negative,
    validate_not_empty,
)
from .steps import (
    DailyEntry,
    LeaderboardEntry,
    Member,
    MonthKey,
    MonthlyAggregate,
    StepsLogResult,
    UserStats,
    WeeklyAggregate,
)

__all__ = [
    "DomainValidationError",
    "validate_non_negative",
    "validate_not_empty",
    "Member",
    "DailyEntry",
    "WeeklyAggregate",
    "MonthlyAggregate",
    "MonthKey",
    "LeaderboardEntry",
    "StepsLogResult",
    "UserStats",
]
