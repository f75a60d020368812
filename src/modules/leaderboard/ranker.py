"""
Leaderboard Ranker
==================

Turns ``(name, steps)`` pairs into a ranked leaderboard.

Rules:
- Highest steps first.
- Equal steps keep their input order (stable sort). Callers feed members in
  registration order, so the earlier registrant wins a tie.
- Pairs with missing steps are left out. Zero-step pairs are left out too
  unless ``drop_zero`` is False (the daily board keeps a logged 0).
- Ranks are the 1-based position in the sorted result: 1, 2, 3 even on ties.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from src.domain.models import LeaderboardEntry


def rank(
    entries: Iterable[Tuple[str, Optional[int]]],
    drop_zero: bool = True,
) -> List[LeaderboardEntry]:
    """
    Rank ``(name, steps)`` pairs.

    Example:
        >>> [(e.rank, e.name, e.steps) for e in rank([("A", 100), ("B", 150), ("C", 100)])]
        [(1, 'B', 150), (2, 'A', 100), (3, 'C', 100)]
    """
    scored = [
        (name, steps)
        for name, steps in entries
        if steps is not None and (steps or not drop_zero)
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)

    return [
        LeaderboardEntry(rank=position, name=name, steps=steps)
        for position, (name, steps) in enumerate(scored, start=1)
    ]
