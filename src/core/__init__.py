"""
Core infrastructure layer for Stepline.

Purpose
-------
Single import surface for the infrastructure subsystems:

- Configuration (Config, Environment)
- Logging (structured logging, logger factory, log context)

The Discord bot and cog live in ``src.core.bot`` and are imported from there
directly, so importing ``src.core`` never pulls in discord.py.

Non-Responsibilities
--------------------
- Business logic or Discord-facing behavior
- Any side effects beyond simple re-exports
"""

from __future__ import annotations

from src.core.config import Config, Environment
from src.core.logging import LogContext, get_logger, setup_logging, shutdown_logging

__all__ = [
    # Configuration
    "Config",
    "Environment",
    # Logging
    "setup_logging",
    "shutdown_logging",
    "get_logger",
    "LogContext",
]
