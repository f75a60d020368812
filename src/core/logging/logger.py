"""
Stepline Logging Subsystem

Every record goes through one in-process queue. A listener thread writes it
to the console (JSON in production, plain or colored text elsewhere) and to a
JSON file under ``Config.LOGS_DIR`` that rotates at midnight, so the Discord
event loop never blocks on I/O.

Records emitted inside a ``LogContext`` block carry the member id, group id,
command verb and a short correlation id. Extra fields passed through
``logger.info("msg", extra={...})`` appear under ``"extra"`` in the JSON
output.
"""

from __future__ import annotations

import copy
import json
import logging
import queue
import sys
import uuid
from contextvars import ContextVar, Token
from dataclasses import dataclass
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import QueueHandler, QueueListener, TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from src.core.config.config import Config


_command_context: ContextVar[Dict[str, Any]] = ContextVar("command_context", default={})

_log_queue: Optional["queue.Queue[logging.LogRecord]"] = None
_queue_listener: Optional[QueueListener] = None


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    """Formats and file names, plus the Config-derived switches."""

    CONSOLE_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)-28s | %(message)s"
    DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    DAILY_BASENAME: str = "stepline_daily.json.log"
    DAILY_BACKUP_COUNT: int = 1

    @property
    def logs_dir(self) -> Path:
        return Path(Config.LOGS_DIR).resolve()

    @property
    def log_level(self) -> int:
        return getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO)

    @property
    def use_json(self) -> bool:
        if Config.LOG_JSON is None:
            return Config.is_production()
        return Config.LOG_JSON

    @property
    def use_colors(self) -> bool:
        if self.use_json:
            return False
        return Config.LOG_COLORS and sys.stdout.isatty()


LOGGER_CONFIG = LoggerConfig()


# ============================================================================
# Filters & Formatters
# ============================================================================


class ContextFilter(logging.Filter):
    """Stamp every record with the active command context."""

    FIELDS = ("user_id", "group_id", "command", "correlation_id", "component", "operation")

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        context: Dict[str, Any] = _command_context.get({})
        for attr in self.FIELDS:
            # Values passed via extra= win over the ambient context
            if getattr(record, attr, None) not in (None, "N/A"):
                continue
            value = context.get(attr) or "N/A"
            if attr == "component" and value == "N/A":
                value = record.name.split(".", 1)[0]
            setattr(record, attr, value)
        return True


class ColoredFormatter(logging.Formatter):
    COLORS: Dict[str, str] = {
        "DEBUG": "\033[90m",
        "INFO": "\033[94m",
        "WARNING": "\033[93m",
        "ERROR": "\033[91m",
        "CRITICAL": "\033[91m\033[1m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        original = record.levelname
        color = self.COLORS.get(original)
        if color:
            record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


class JSONFormatter(logging.Formatter):
    """One JSON object per line; unknown record attributes go under "extra"."""

    # Attributes every LogRecord carries
    RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
        "message",
        "asctime",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        for attr in ContextFilter.FIELDS:
            value = getattr(record, attr, None)
            if value not in (None, "N/A"):
                payload[attr] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.RECORD_ATTRS
            and key not in ContextFilter.FIELDS
            and not key.startswith("_")
        }
        if extra:
            payload["extra"] = extra

        return json.dumps(payload, ensure_ascii=False, default=str)


# ============================================================================
# Queue plumbing
# ============================================================================


class StepsQueueHandler(QueueHandler):
    def prepare(self, record: logging.LogRecord) -> logging.LogRecord:  # type: ignore[override]
        # Listener runs in-process: keep exc_info and args for its formatters
        prepared = copy.copy(record)
        prepared.message = record.getMessage()
        return prepared

    def enqueue(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        try:
            self.queue.put_nowait(record)
        except queue.Full:
            sys.stderr.write("Stepline logging queue full; dropping log record.\n")


def _build_console_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if LOGGER_CONFIG.use_json:
        handler.setFormatter(JSONFormatter())
    else:
        formatter_cls = ColoredFormatter if LOGGER_CONFIG.use_colors else logging.Formatter
        handler.setFormatter(
            formatter_cls(fmt=LOGGER_CONFIG.CONSOLE_FORMAT, datefmt=LOGGER_CONFIG.DATE_FORMAT)
        )
    return handler


def _build_daily_file_handler() -> logging.Handler:
    LOGGER_CONFIG.logs_dir.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(
        filename=str(LOGGER_CONFIG.logs_dir / LOGGER_CONFIG.DAILY_BASENAME),
        when="midnight",
        backupCount=LOGGER_CONFIG.DAILY_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(JSONFormatter())
    return handler


def setup_logging() -> None:
    """Configure the root logger once; later calls are no-ops."""
    global _queue_listener, _log_queue

    root = logging.getLogger()
    if getattr(root, "_stepline_logging_initialized", False):
        return

    level = LOGGER_CONFIG.log_level
    root.setLevel(level)

    _log_queue = queue.Queue(Config.LOG_QUEUE_SIZE)
    _queue_listener = QueueListener(
        _log_queue,
        _build_console_handler(),
        _build_daily_file_handler(),
    )
    _queue_listener.start()

    queue_handler = StepsQueueHandler(_log_queue)
    queue_handler.setLevel(level)
    # Records are stamped here, before they cross the queue
    queue_handler.addFilter(ContextFilter())
    root.addHandler(queue_handler)

    for noisy in ("discord", "discord.http", "discord.gateway", "discord.client", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    setattr(root, "_stepline_logging_initialized", True)

    logging.getLogger(__name__).info(
        "Logging initialized",
        extra={
            "environment": Config.ENVIRONMENT,
            "log_level": logging.getLevelName(level),
            "json": LOGGER_CONFIG.use_json,
            "logs_dir": str(LOGGER_CONFIG.logs_dir),
        },
    )


def shutdown_logging() -> None:
    """Drain the queue, close the handlers and detach from the root logger."""
    global _queue_listener, _log_queue

    root = logging.getLogger()
    if not getattr(root, "_stepline_logging_initialized", False):
        return

    logging.getLogger(__name__).info("Shutting down logging subsystem.")

    if _queue_listener is not None:
        _queue_listener.stop()
        for handler in _queue_listener.handlers:
            handler.close()
        _queue_listener = None

    for handler in list(root.handlers):
        if isinstance(handler, StepsQueueHandler):
            root.removeHandler(handler)

    setattr(root, "_stepline_logging_initialized", False)
    _log_queue = None


# ============================================================================
# Public API
# ============================================================================


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)


class LogContext:
    """
    Bind command context to every log record emitted inside the block.

    Example:
        >>> with LogContext(user_id="1234", command="steps"):
        ...     logger.info("Logging steps")
    """

    def __init__(
        self,
        user_id: Optional[str] = None,
        group_id: Optional[str] = None,
        command: Optional[str] = None,
        component: Optional[str] = None,
        operation: Optional[str] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        self.context: Dict[str, Any] = {
            "user_id": str(user_id) if user_id is not None else "N/A",
            "group_id": str(group_id) if group_id is not None else "N/A",
            "command": command or "N/A",
            "component": component,
            "operation": operation,
            "correlation_id": correlation_id or uuid.uuid4().hex[:8],
        }
        self._token: Optional[Token[Dict[str, Any]]] = None

    def __enter__(self) -> "LogContext":
        self._token = _command_context.set(self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _command_context.reset(self._token)
            self._token = None

    async def __aenter__(self) -> "LogContext":
        return self.__enter__()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.__exit__(exc_type, exc_val, exc_tb)


def get_log_context() -> Dict[str, Any]:
    """Copy of the context bound by the innermost active LogContext."""
    return dict(_command_context.get({}))


setup_logging()
