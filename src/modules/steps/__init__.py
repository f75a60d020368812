"""
Steps Module
============

Domain: the steps ledger and everything derived from it.

- StepsLedger: one step count per member per calendar day
- AggregationEngine: weekly / monthly rollups recomputed from the ledger
- StepsService: use-case facade invoked by the command dispatcher
"""

from .aggregation import AggregationEngine, month_label, week_start_of
from .ledger import StepsLedger, day_key
from .service import StepsService

__all__ = [
    "AggregationEngine",
    "StepsLedger",
    "StepsService",
    "day_key",
    "month_label",
    "week_start_of",
]
