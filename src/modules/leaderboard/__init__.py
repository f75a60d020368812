"""
Leaderboard Module
==================

Domain: ranking members by steps for a time window.

- rank(): stable, descending, zero-excluding ranking of (name, steps) pairs
"""

from .ranker import rank

__all__ = [
    "rank",
]
