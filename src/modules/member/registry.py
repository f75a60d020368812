"""
Member Registry
===============

Tracks which users are enrolled in the steps challenge, with their display
name and join date. Iteration order is first-registration order; leaderboard
tie-breaks depend on it.

Registration never fails: registering again overwrites the display name and
join date but keeps the member's original position and never touches the
ledger.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict, Iterator, List, Optional

from src.core.logging.logger import get_logger
from src.domain.models import Member

logger = get_logger(__name__)


class MemberRegistry:
    """In-memory registry of members keyed by opaque member id."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or datetime.now
        self._members: Dict[str, Member] = {}

    def register(self, member_id: str, display_name: str) -> Member:
        """Create or overwrite the member record; join date is the current time."""
        existing = member_id in self._members
        member = Member(id=member_id, display_name=display_name, join_date=self._clock())
        # dict assignment on an existing key keeps its insertion position
        self._members[member_id] = member

        logger.info(
            "Member re-registered" if existing else "Member registered",
            extra={"member_id": member_id, "display_name": display_name},
        )
        return member

    def is_registered(self, member_id: str) -> bool:
        return member_id in self._members

    def get(self, member_id: str) -> Optional[Member]:
        return self._members.get(member_id)

    def members(self) -> List[Member]:
        """All members in first-registration order."""
        return list(self._members.values())

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._members

    def __iter__(self) -> Iterator[Member]:
        return iter(self.members())

    def __len__(self) -> int:
        return len(self._members)
