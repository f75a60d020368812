"""
Domain exceptions for the Stepline steps engine.

Purpose
-------
Structured, domain-specific exceptions raised by the registry, the ledger and
StepsService. They describe recoverable, member-facing conditions; the command
dispatcher turns them into reply text and never lets them crash the bot.

Design Notes
------------
- All domain exceptions inherit from `StepsDomainException`.
- Each exception carries:
  - `message`: human-readable description
  - `details`: additional structured context (dict-like)
  - `severity`: `ErrorSeverity` value for logging/alerting
  - `is_retryable`: whether the operation can be retried
  - `error_code`: short, stable identifier for programmatic use
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels for logging and alerting."""

    DEBUG = "debug"
    INFO = "info"  # Expected member mistakes (bad input, not registered)
    WARNING = "warning"
    ERROR = "error"  # Unexpected errors requiring attention
    CRITICAL = "critical"


class StepsDomainException(Exception):
    """
    Base exception for all Stepline domain-level errors.

    Args:
        message: Human-readable error message
        details: Additional structured data about the error (dict-like)
        severity: Error severity level for logging handlers
        is_retryable: Whether the operation can be retried
        error_code: Optional code for programmatic handling
    """

    DEFAULT_SEVERITY: ErrorSeverity = ErrorSeverity.ERROR
    DEFAULT_RETRYABLE: bool = False

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        severity: Optional[ErrorSeverity] = None,
        is_retryable: Optional[bool] = None,
        error_code: Optional[str] = None,
    ) -> None:
        self.message: str = message
        self.details: Dict[str, Any] = details or {}
        self.severity: ErrorSeverity = severity or self.DEFAULT_SEVERITY
        self.is_retryable: bool = (
            is_retryable if is_retryable is not None else self.DEFAULT_RETRYABLE
        )
        self.error_code: str = error_code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
        }

    def __str__(self) -> str:
        details_str = f" | Details: {self.details}" if self.details else ""
        return f"[{self.error_code}] {self.message}{details_str}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"severity={self.severity.value!r}, "
            f"is_retryable={self.is_retryable!r}"
            ")"
        )


class NotRegisteredError(StepsDomainException):
    """
    Raised when a use-case needs a member the registry does not contain.

    Args:
        member_id: Opaque sender identity that was looked up
    """

    DEFAULT_SEVERITY = ErrorSeverity.INFO
    DEFAULT_RETRYABLE = False

    def __init__(self, member_id: str) -> None:
        self.member_id = member_id
        super().__init__(
            f"Member is not registered: {member_id}",
            details={"member_id": member_id},
            error_code="NOT_REGISTERED",
        )


class InvalidStepCountError(StepsDomainException):
    """
    Raised when a step count is missing, not an integer, or negative.

    The ledger is guaranteed untouched when this is raised.

    Args:
        raw_value: The value as received from the caller
        reason: Why it was rejected
    """

    DEFAULT_SEVERITY = ErrorSeverity.INFO
    DEFAULT_RETRYABLE = False

    def __init__(self, raw_value: Any, reason: str) -> None:
        self.raw_value = raw_value
        self.reason = reason
        super().__init__(
            f"Invalid step count {raw_value!r}: {reason}",
            details={"raw_value": raw_value, "reason": reason},
            error_code="INVALID_STEP_COUNT",
        )


class MissingIdentityError(StepsDomainException):
    """
    Raised when a command arrives without a sender id.

    Discord always supplies an author id, so this only fires on a
    malformed event. Nothing is written when it is raised.
    """

    DEFAULT_SEVERITY = ErrorSeverity.WARNING
    DEFAULT_RETRYABLE = False

    def __init__(self) -> None:
        super().__init__("Command has no sender id", error_code="MISSING_IDENTITY")


def get_error_severity(exc: Exception) -> ErrorSeverity:
    """
    Get the severity level of an exception for logging.

    Unknown (non-domain) exceptions are always ERROR.
    """
    if isinstance(exc, StepsDomainException):
        return exc.severity
    return ErrorSeverity.ERROR


def should_alert(exc: Exception) -> bool:
    """True if severity is ERROR or CRITICAL."""
    return get_error_severity(exc) in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
