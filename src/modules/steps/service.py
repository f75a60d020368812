"""
Steps Service
=============

Purpose
-------
Facade over the member registry, the steps ledger, the aggregation engine
and the leaderboard ranker. Each public method is one use-case invoked by
the command dispatcher; each returns plain domain values and raises domain
exceptions for member mistakes.

Domain
------
- Register members
- Log (upsert) today's step count
- Daily / weekly / monthly leaderboards
- Personal statistics
- Reset a member's step history

Design Notes
------------
- All state is owned by the instance: one StepsService per group, nothing
  global, so tests and groups never share data.
- Every method is synchronous and finishes before the next command is
  handled; there is no await point in the middle of a mutation.
- "Today" comes from the injected clock, so reference dates are testable.
- Leaderboards need no registration from the caller; every user-scoped
  use-case except ``register`` raises ``NotRegisteredError``.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from src.core.logging.logger import get_logger
from src.domain.models import LeaderboardEntry, Member, StepsLogResult, UserStats
from src.modules.leaderboard.ranker import rank
from src.modules.member.registry import MemberRegistry
from src.modules.shared.base_service import BaseService
from src.modules.shared.exceptions import MissingIdentityError, NotRegisteredError
from src.modules.shared.validators import parse_step_count
from src.modules.steps.aggregation import AggregationEngine
from src.modules.steps.ledger import DayLike, StepsLedger, day_key

if TYPE_CHECKING:
    from datetime import date
    from logging import Logger

DEFAULT_DISPLAY_NAME = "Unknown"


def _round_half_up(numerator: int, denominator: int) -> int:
    """Integer division rounded half up (2.5 -> 3) for non-negative operands."""
    return (2 * numerator + denominator) // (2 * denominator)


class StepsService(BaseService):
    """
    Use-cases of the steps challenge.

    Public Methods
    --------------
    - register() -> Enrol (or re-enrol) a member
    - log_steps() -> Record today's steps
    - daily_leaderboard() / weekly_leaderboard() / monthly_leaderboard()
    - user_stats() -> Personal statistics
    - reset_user() -> Clear a member's step history
    """

    def __init__(
        self,
        registry: Optional[MemberRegistry] = None,
        ledger: Optional[StepsLedger] = None,
        clock: Optional[Callable[[], datetime]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        super().__init__(logger or get_logger(__name__))
        self._clock = clock or datetime.now
        self.registry = registry or MemberRegistry(clock=self._clock)
        self.ledger = ledger or StepsLedger(self.registry)
        self.aggregation = AggregationEngine(self.ledger)

    # ========================================================================
    # Helpers
    # ========================================================================

    def today(self) -> date:
        return self._clock().date()

    def _reference(self, reference: Optional[DayLike]) -> date:
        return self.today() if reference is None else day_key(reference)

    def _require_member(self, user_id: str) -> Member:
        member = self.registry.get(user_id)
        if member is None:
            raise NotRegisteredError(user_id)
        return member

    # ========================================================================
    # PUBLIC API - Writes
    # ========================================================================

    def register(self, user_id: str, name: Optional[str]) -> Member:
        """
        Enrol the sender; re-registering only refreshes the name.

        Any non-blank id is accepted and a blank name becomes
        DEFAULT_DISPLAY_NAME. A blank id means the event carried no sender
        and is rejected before the registry is touched.

        Raises:
            MissingIdentityError: user_id is empty or whitespace
        """
        if not (user_id or "").strip():
            raise MissingIdentityError()
        display_name = (name or "").strip() or DEFAULT_DISPLAY_NAME
        member = self.registry.register(user_id, display_name)
        self.log_operation("register", member_id=user_id, display_name=display_name)
        return member

    def log_steps(
        self,
        user_id: str,
        name: Optional[str],
        raw_argument: Any,
        day: Optional[DayLike] = None,
    ) -> StepsLogResult:
        """
        Record the step count for ``day`` (today by default).

        Args:
            user_id: Sender identity
            name: Sender display name (logging context only)
            raw_argument: Step count as typed, str or int

        Raises:
            NotRegisteredError: sender is not registered
            InvalidStepCountError: argument missing, not an integer, or negative
        """
        self._require_member(user_id)
        steps = parse_step_count(raw_argument)
        target = self._reference(day)

        created = self.ledger.log_steps(user_id, target, steps)

        self.log_operation(
            "log_steps",
            member_id=user_id,
            display_name=name,
            day=target.isoformat(),
            steps=steps,
            entry_created=created,
        )
        return StepsLogResult(steps=steps, created=created)

    def reset_user(self, user_id: str) -> None:
        """Clear all of the member's entries; derived totals drop to zero."""
        self._require_member(user_id)
        self.ledger.reset(user_id)
        self.log_operation("reset_user", member_id=user_id)

    # ========================================================================
    # PUBLIC API - Leaderboards
    # ========================================================================

    def daily_leaderboard(self, reference: Optional[DayLike] = None) -> List[LeaderboardEntry]:
        """
        Members with an entry for the reference day, ranked by that entry.

        A logged 0 still counts as an entry and is listed.
        """
        day = self._reference(reference)
        pairs = []
        for member in self.registry.members():
            entry = self.ledger.daily_entry(member.id, day)
            if entry is not None:
                pairs.append((member.display_name, entry.steps))
        return rank(pairs, drop_zero=False)

    def weekly_leaderboard(self, reference: Optional[DayLike] = None) -> List[LeaderboardEntry]:
        day = self._reference(reference)
        return rank(
            (member.display_name, self.aggregation.weekly_total(member.id, day))
            for member in self.registry.members()
        )

    def monthly_leaderboard(self, reference: Optional[DayLike] = None) -> List[LeaderboardEntry]:
        day = self._reference(reference)
        return rank(
            (member.display_name, self.aggregation.monthly_total(member.id, day))
            for member in self.registry.members()
        )

    # ========================================================================
    # PUBLIC API - Stats
    # ========================================================================

    def user_stats(self, user_id: str, reference: Optional[DayLike] = None) -> UserStats:
        """
        Personal statistics as of the reference day.

        ``daily_average`` is the all-time total divided by the number of days
        with an entry, rounded half up; 0 when there are no entries.
        """
        self._require_member(user_id)
        day = self._reference(reference)

        today_entry = self.ledger.daily_entry(user_id, day)
        total = self.ledger.total_steps(user_id)
        active_days = self.ledger.active_days(user_id)
        daily_average = _round_half_up(total, active_days) if active_days else 0

        return UserStats(
            today=today_entry.steps if today_entry else 0,
            this_week=self.aggregation.weekly_total(user_id, day),
            this_month=self.aggregation.monthly_total(user_id, day),
            total=total,
            daily_average=daily_average,
            active_days=active_days,
        )
