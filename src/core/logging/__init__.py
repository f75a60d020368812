"""
Stepline Logging Infrastructure

Exports the structured logging subsystem and the log context helpers.
"""

from src.core.logging.logger import (
    LogContext,
    LoggerConfig,
    get_log_context,
    get_logger,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "setup_logging",
    "shutdown_logging",
    "get_logger",
    "LogContext",
    "get_log_context",
    "LoggerConfig",
]
