"""
Commands Module
===============

Domain: turning chat text into steps use-cases.

- parse_command(): text -> closed set of command variants
- CommandDispatcher: variant -> StepsService call -> reply text
"""

from .dispatcher import CommandDispatcher
from .parser import (
    COMMAND_VARIANTS,
    Command,
    DailyBoard,
    Help,
    LogSteps,
    MonthlyBoard,
    Register,
    Reset,
    Stats,
    Unknown,
    WeeklyBoard,
    parse_command,
)

__all__ = [
    "COMMAND_VARIANTS",
    "Command",
    "CommandDispatcher",
    "DailyBoard",
    "Help",
    "LogSteps",
    "MonthlyBoard",
    "Register",
    "Reset",
    "Stats",
    "Unknown",
    "WeeklyBoard",
    "parse_command",
]
