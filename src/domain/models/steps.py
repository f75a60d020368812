"""
Steps Domain Models for Stepline.

Purpose
-------
Value objects shared by the registry, the ledger, the aggregation functions
and the leaderboard ranker.

- ``Member``: a registered participant. ``total_steps`` is deliberately not a
  field; it is always derived from the ledger.
- ``DailyEntry``: one member's step count for one calendar day.
- ``WeeklyAggregate`` / ``MonthlyAggregate``: derived sums, never stored.
- ``LeaderboardEntry``: one ranked row.
- ``StepsLogResult`` / ``UserStats``: plain results returned by StepsService.

All models are frozen; the ledger "updates" an entry by swapping in a new
instance at the same position.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Tuple

from src.domain.models.base import validate_non_negative, validate_not_empty


MonthKey = Tuple[int, int]


@dataclass(frozen=True)
class Member:
    """
    Registered participant.

    Attributes
    ----------
    id : str
        Opaque, stable sender identity supplied by the transport
    display_name : str
        Name shown on leaderboards, fixed at registration time
    join_date : datetime
        When the member (last) registered
    """

    id: str
    display_name: str
    join_date: datetime

    def __post_init__(self) -> None:
        validate_not_empty(self.id, "id")
        validate_not_empty(self.display_name, "display_name")


@dataclass(frozen=True)
class DailyEntry:
    """
    One member's step count for one calendar day.

    Attributes
    ----------
    member_id : str
        Owning member
    date : date
        Canonical day key
    steps : int
        Non-negative step count
    """

    member_id: str
    date: date
    steps: int

    def __post_init__(self) -> None:
        validate_non_negative(self.steps, "steps")


@dataclass(frozen=True)
class WeeklyAggregate:
    member_id: str
    week_start: date
    steps: int


@dataclass(frozen=True)
class MonthlyAggregate:
    member_id: str
    month_key: MonthKey
    label: str
    steps: int


@dataclass(frozen=True)
class LeaderboardEntry:
    """A ranked leaderboard row; ``rank`` is 1-based and contiguous."""

    rank: int
    name: str
    steps: int


@dataclass(frozen=True)
class StepsLogResult:
    """``created`` is False when an existing entry for the day was overwritten."""

    steps: int
    created: bool


@dataclass(frozen=True)
class UserStats:
    today: int
    this_week: int
    this_month: int
    total: int
    daily_average: int
    active_days: int
