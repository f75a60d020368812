"""
Base Service Foundation

Purpose
-------
Foundational class for domain services in Stepline. Services implement pure
business logic over in-memory state, enforce business rules and raise domain
exceptions; they never talk to Discord.

This base class provides:
- Structured logging with operation context
- A shared error-logging shape for unexpected failures

Usage
-----
    class StepsService(BaseService):
        def __init__(self, registry, ledger, logger=None):
            super().__init__(logger or get_logger(__name__))
            ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logging import Logger


class BaseService:
    """
    Base class for all domain services.

    Args:
        logger: Structured logger instance
    """

    def __init__(self, logger: Logger) -> None:
        self.log = logger

    def log_operation(self, operation: str, **context: Any) -> None:
        """
        Log a service operation with structured context.

        Args:
            operation: Name of the operation being performed
            **context: Additional context data
        """
        self.log.info(
            f"Service operation: {operation}",
            extra={"operation": operation, **context},
        )

    def log_error(
        self,
        operation: str,
        error: Exception,
        exc_info: bool = False,
        **context: Any,
    ) -> None:
        """
        Log a service error with full context.

        Args:
            operation: Name of the operation that failed
            error: The exception that occurred
            exc_info: Attach the active traceback
            **context: Additional context data
        """
        self.log.error(
            f"Service error during {operation}: {error}",
            exc_info=exc_info,
            extra={
                "operation": operation,
                "error_type": type(error).__name__,
                "error_message": str(error),
                **context,
            },
        )
