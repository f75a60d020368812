"""
Steps Ledger
============

Source of truth for step counts: at most one ``DailyEntry`` per
(member, calendar day). Every weekly, monthly and all-time figure is derived
from the entries stored here.

Rules
-----
- A member must be registered before an entry can be written for them.
- Step counts are non-negative integers; a rejected write leaves the ledger
  untouched.
- Writing a day that already has an entry replaces its value in place
  (the entry keeps its position in the member's insertion order).
- ``reset`` drops every entry of a member and is idempotent.

Mutations and snapshot reads hold a re-entrant lock, so a reader driven from
another thread never sees a member's entry list half-written. The
``version`` counter increases on every mutation and can be used to key caches
of derived values.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from datetime import date, datetime
from typing import Dict, List, Optional, Union

from src.core.logging.logger import get_logger
from src.domain.models import DailyEntry
from src.modules.member.registry import MemberRegistry
from src.modules.shared.exceptions import NotRegisteredError
from src.modules.shared.validators import validate_step_count

logger = get_logger(__name__)

DayLike = Union[date, datetime]


def day_key(value: DayLike) -> date:
    """
    Canonical calendar-day key.

    Two timestamps on the same local calendar day map to the same key
    regardless of time of day.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


class StepsLedger:
    """In-memory ledger of daily step entries."""

    def __init__(self, registry: MemberRegistry) -> None:
        self._registry = registry
        self._entries: Dict[str, List[DailyEntry]] = {}
        self._positions: Dict[str, Dict[date, int]] = {}
        self._lock = threading.RLock()
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    # ========================================================================
    # Writes
    # ========================================================================

    def log_steps(self, member_id: str, day: DayLike, steps: int) -> bool:
        """
        Upsert the step count for ``(member_id, day)``.

        Returns:
            True if a new entry was created, False if an existing one was replaced

        Raises:
            NotRegisteredError: member_id is not in the registry
            InvalidStepCountError: steps is not a non-negative integer
        """
        if not self._registry.is_registered(member_id):
            raise NotRegisteredError(member_id)
        validate_step_count(steps)
        key = day_key(day)

        with self._lock:
            entries = self._entries.setdefault(member_id, [])
            positions = self._positions.setdefault(member_id, {})

            index = positions.get(key)
            if index is None:
                positions[key] = len(entries)
                entries.append(DailyEntry(member_id=member_id, date=key, steps=steps))
                created = True
            else:
                entries[index] = replace(entries[index], steps=steps)
                created = False

            self._version += 1

        logger.debug(
            "Ledger entry %s",
            "created" if created else "replaced",
            extra={"member_id": member_id, "day": key.isoformat(), "steps": steps},
        )
        return created

    def reset(self, member_id: str) -> None:
        """Discard every entry of the member. Idempotent."""
        with self._lock:
            removed = len(self._entries.pop(member_id, []))
            self._positions.pop(member_id, None)
            self._version += 1

        logger.info(
            "Ledger reset for member",
            extra={"member_id": member_id, "entries_removed": removed},
        )

    # ========================================================================
    # Reads
    # ========================================================================

    def daily_entry(self, member_id: str, day: DayLike) -> Optional[DailyEntry]:
        key = day_key(day)
        with self._lock:
            index = self._positions.get(member_id, {}).get(key)
            if index is None:
                return None
            return self._entries[member_id][index]

    def all_entries(self, member_id: str) -> List[DailyEntry]:
        """Snapshot of the member's entries in insertion order."""
        with self._lock:
            return list(self._entries.get(member_id, ()))

    def total_steps(self, member_id: str) -> int:
        """Sum of every entry of the member; 0 when there are none."""
        return sum(entry.steps for entry in self.all_entries(member_id))

    def active_days(self, member_id: str) -> int:
        with self._lock:
            return len(self._entries.get(member_id, ()))
