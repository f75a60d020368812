"""
Aggregation Engine
==================

Derives weekly and monthly totals from ledger entries. The module-level
functions are pure: given the same entries and reference day they always
return the same numbers, and they keep no state of their own.

``AggregationEngine`` binds those functions to a ``StepsLedger`` and memoises
results per (member, window). The memo is dropped whenever the ledger's
mutation counter moves, so a cached read is always identical to a full
recompute over the current ledger.

Windows
-------
- Week: Monday through Sunday, keyed by ``week_start_of(day)``.
- Month: calendar month, keyed by ``(year, month)``. The "March 2024" label
  is for display only and never used for comparison.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Hashable, Iterable, Tuple

from src.domain.models import DailyEntry, MonthKey, MonthlyAggregate, WeeklyAggregate
from src.modules.steps.ledger import DayLike, StepsLedger, day_key

MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


# ============================================================================
# Pure window functions
# ============================================================================


def week_start_of(day: DayLike) -> date:
    """
    Monday on or before ``day``.

    With Sunday = 0 ... Saturday = 6, the offset is -6 for Sunday and
    ``1 - dow`` otherwise, so Sunday belongs to the week that started six
    days earlier.
    """
    key = day_key(day)
    dow = key.isoweekday() % 7
    offset = -6 if dow == 0 else 1 - dow
    return key + timedelta(days=offset)


def month_key(day: DayLike) -> MonthKey:
    key = day_key(day)
    return (key.year, key.month)


def month_label(day: DayLike) -> str:
    """Locale-independent "Month Year" label, e.g. "March 2024"."""
    year, month = month_key(day)
    return f"{MONTH_NAMES[month - 1]} {year}"


def weekly_total(entries: Iterable[DailyEntry], reference: DayLike) -> int:
    week = week_start_of(reference)
    return sum(entry.steps for entry in entries if week_start_of(entry.date) == week)


def monthly_total(entries: Iterable[DailyEntry], reference: DayLike) -> int:
    month = month_key(reference)
    return sum(entry.steps for entry in entries if month_key(entry.date) == month)


# ============================================================================
# Ledger-bound engine
# ============================================================================


class AggregationEngine:
    """Weekly / monthly rollups over a ledger, memoised per ledger version."""

    def __init__(self, ledger: StepsLedger) -> None:
        self._ledger = ledger
        self._cache: Dict[Tuple[str, str, Hashable], int] = {}
        self._cache_version = ledger.version

    def _cached(self, key: Tuple[str, str, Hashable], compute) -> int:
        if self._cache_version != self._ledger.version:
            self._cache.clear()
            self._cache_version = self._ledger.version

        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    def weekly_aggregate(self, member_id: str, reference: DayLike) -> WeeklyAggregate:
        week = week_start_of(reference)
        steps = self._cached(
            (member_id, "week", week),
            lambda: weekly_total(self._ledger.all_entries(member_id), week),
        )
        return WeeklyAggregate(member_id=member_id, week_start=week, steps=steps)

    def monthly_aggregate(self, member_id: str, reference: DayLike) -> MonthlyAggregate:
        month = month_key(reference)
        steps = self._cached(
            (member_id, "month", month),
            lambda: monthly_total(self._ledger.all_entries(member_id), reference),
        )
        return MonthlyAggregate(
            member_id=member_id,
            month_key=month,
            label=month_label(reference),
            steps=steps,
        )

    def weekly_total(self, member_id: str, reference: DayLike) -> int:
        return self.weekly_aggregate(member_id, reference).steps

    def monthly_total(self, member_id: str, reference: DayLike) -> int:
        return self.monthly_aggregate(member_id, reference).steps
