"""
Chat command parser.

Turns raw message text into one of a closed set of command variants. The
parser never raises: anything it does not recognise becomes ``Unknown``,
which the dispatcher answers with silence.

Matching rules
--------------
- Text is trimmed and lower-cased first.
- Text that does not start with "/" is ``Unknown``.
- "/register" and "/steps" match as a prefix of the verb token, so
  "/registerme" still registers.
- Every other verb must match its token exactly.
- The "/steps" argument is the second whitespace token, kept raw; parsing
  it into a number is the service's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple, Type


@dataclass(frozen=True)
class Command:
    """Base class of every command variant."""

    name: ClassVar[str] = "command"


@dataclass(frozen=True)
class Register(Command):
    name: ClassVar[str] = "register"


@dataclass(frozen=True)
class LogSteps(Command):
    name: ClassVar[str] = "steps"

    raw: Optional[str] = None


@dataclass(frozen=True)
class DailyBoard(Command):
    name: ClassVar[str] = "daily"


@dataclass(frozen=True)
class WeeklyBoard(Command):
    name: ClassVar[str] = "weekly"


@dataclass(frozen=True)
class MonthlyBoard(Command):
    name: ClassVar[str] = "monthly"


@dataclass(frozen=True)
class Stats(Command):
    name: ClassVar[str] = "mystats"


@dataclass(frozen=True)
class Reset(Command):
    name: ClassVar[str] = "reset"


@dataclass(frozen=True)
class Help(Command):
    name: ClassVar[str] = "help"


@dataclass(frozen=True)
class Unknown(Command):
    name: ClassVar[str] = "unknown"

    text: str = ""


COMMAND_VARIANTS: Tuple[Type[Command], ...] = (
    Register,
    LogSteps,
    DailyBoard,
    WeeklyBoard,
    MonthlyBoard,
    Stats,
    Reset,
    Help,
    Unknown,
)

COMMAND_PREFIX = "/"

_EXACT_VERBS: Dict[str, Type[Command]] = {
    "/daily": DailyBoard,
    "/leaderboard": DailyBoard,
    "/weekly": WeeklyBoard,
    "/monthly": MonthlyBoard,
    "/mystats": Stats,
    "/reset": Reset,
    "/help": Help,
}


def parse_command(text: Optional[str]) -> Command:
    """
    Parse message text into a command variant.

    Examples:
        >>> parse_command("/steps 8500")
        LogSteps(raw='8500')
        >>> parse_command("/LEADERBOARD")
        DailyBoard()
        >>> parse_command("hello")
        Unknown(text='hello')
    """
    normalized = (text or "").strip().lower()
    if not normalized.startswith(COMMAND_PREFIX):
        return Unknown(text=normalized)

    tokens = normalized.split()
    verb = tokens[0]

    if verb.startswith("/register"):
        return Register()
    if verb.startswith("/steps"):
        return LogSteps(raw=tokens[1] if len(tokens) > 1 else None)

    variant = _EXACT_VERBS.get(verb)
    if variant is None:
        return Unknown(text=normalized)
    return variant()
