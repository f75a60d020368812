"""
Command dispatcher.

Maps each command variant to exactly one StepsService use-case and renders
the result as reply text. The handler table is checked at construction so a
variant without a handler is a startup error, not a silent no-op.

Error boundary
--------------
- Domain exceptions (not registered, bad step count) become reply text via
  the exception template registry.
- Anything else is logged with its traceback and answered with a generic
  apology. Nothing propagates to the transport.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, Optional, Type

from src.core.logging.logger import get_logger
from src.domain.exceptions.registry import render_exception
from src.modules.commands.parser import (
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
)
from src.modules.shared.base_service import BaseService
from src.modules.shared.exceptions import StepsDomainException, get_error_severity
from src.modules.steps.aggregation import month_label, week_start_of
from src.ui.formatters import StepsFormatters

if TYPE_CHECKING:
    from logging import Logger

    from src.modules.steps.service import StepsService

Handler = Callable[[Command, str, str], Optional[str]]


class CommandDispatcher(BaseService):
    """Route parsed commands to the steps service."""

    def __init__(self, service: StepsService, logger: Optional[Logger] = None) -> None:
        super().__init__(logger or get_logger(__name__))
        self.service = service
        self._handlers: Dict[Type[Command], Handler] = {
            Register: self._register,
            LogSteps: self._log_steps,
            DailyBoard: self._daily_board,
            WeeklyBoard: self._weekly_board,
            MonthlyBoard: self._monthly_board,
            Stats: self._stats,
            Reset: self._reset,
            Help: self._help,
            Unknown: self._unknown,
        }

        missing = [variant.__name__ for variant in COMMAND_VARIANTS if variant not in self._handlers]
        if missing:
            raise TypeError(f"No handler for command variants: {', '.join(missing)}")

    def dispatch(self, command: Command, user_id: str, display_name: str) -> Optional[str]:
        """
        Run one command and return the reply text, or None for no reply.

        Args:
            command: Parsed command variant
            user_id: Opaque sender identity
            display_name: Sender's display name at message time
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command variant: {type(command).__name__}")

        try:
            return handler(command, user_id, display_name)

        except StepsDomainException as exc:
            self.log.info(
                f"Command {command.name} rejected: {exc.error_code}",
                extra={
                    "operation": command.name,
                    "error_code": exc.error_code,
                    "severity": get_error_severity(exc).value,
                },
            )
            return render_exception(exc, command.name) or StepsFormatters.unexpected_error()

        except Exception as exc:
            self.log_error(command.name, exc, exc_info=True, user_id=user_id)
            return StepsFormatters.unexpected_error()

    # ========================================================================
    # Handlers
    # ========================================================================

    def _register(self, command: Command, user_id: str, display_name: str) -> str:
        member = self.service.register(user_id, display_name)
        return StepsFormatters.registered(member.display_name)

    def _log_steps(self, command: LogSteps, user_id: str, display_name: str) -> str:
        result = self.service.log_steps(user_id, display_name, command.raw)
        return StepsFormatters.steps_logged(result)

    def _daily_board(self, command: Command, user_id: str, display_name: str) -> str:
        today = self.service.today()
        return StepsFormatters.daily_leaderboard(self.service.daily_leaderboard(today), today)

    def _weekly_board(self, command: Command, user_id: str, display_name: str) -> str:
        today = self.service.today()
        return StepsFormatters.weekly_leaderboard(
            self.service.weekly_leaderboard(today), week_start_of(today)
        )

    def _monthly_board(self, command: Command, user_id: str, display_name: str) -> str:
        today = self.service.today()
        return StepsFormatters.monthly_leaderboard(
            self.service.monthly_leaderboard(today), month_label(today)
        )

    def _stats(self, command: Command, user_id: str, display_name: str) -> str:
        stats = self.service.user_stats(user_id)
        member = self.service.registry.get(user_id)
        name = member.display_name if member else display_name
        return StepsFormatters.user_stats(name, stats)

    def _reset(self, command: Command, user_id: str, display_name: str) -> str:
        self.service.reset_user(user_id)
        return StepsFormatters.reset_done()

    def _help(self, command: Command, user_id: str, display_name: str) -> str:
        return StepsFormatters.help_text()

    def _unknown(self, command: Command, user_id: str, display_name: str) -> None:
        return None
