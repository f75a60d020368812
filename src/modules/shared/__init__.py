"""
Shared building blocks for the feature modules.

Exports
-------
- BaseService: logging helpers for services
- Domain exceptions and severity helpers
- Step count validators
"""

from .base_service import BaseService
from .exceptions import (
    ErrorSeverity,
    InvalidStepCountError,
    MissingIdentityError,
    NotRegisteredError,
    StepsDomainException,
    get_error_severity,
    should_alert,
)
from .validators import parse_step_count, validate_step_count

__all__ = [
    "BaseService",
    "ErrorSeverity",
    "StepsDomainException",
    "NotRegisteredError",
    "InvalidStepCountError",
    "MissingIdentityError",
    "get_error_severity",
    "should_alert",
    "parse_step_count",
    "validate_step_count",
]
