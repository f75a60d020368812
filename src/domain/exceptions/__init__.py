"""
Domain exceptions package for Stepline.

Purpose
-------
Centralized domain exception definitions and reply templates for every
member-facing error.

Exports
-------
- Domain exception classes (defined in modules.shared.exceptions)
- EXCEPTION_TEMPLATES: Registry mapping exception types to reply templates
- render_exception: Turn an exception into reply text
"""

from src.modules.shared.exceptions import (
    ErrorSeverity,
    InvalidStepCountError,
    MissingIdentityError,
    NotRegisteredError,
    StepsDomainException,
    get_error_severity,
    should_alert,
)

from .registry import (
    EXCEPTION_TEMPLATES,
    ExceptionTemplate,
    get_exception_template,
    render_exception,
)

__all__ = [
    # Exception classes
    "StepsDomainException",
    "NotRegisteredError",
    "InvalidStepCountError",
    "MissingIdentityError",
    "ErrorSeverity",
    # Utilities
    "get_error_severity",
    "should_alert",
    # Registry
    "EXCEPTION_TEMPLATES",
    "ExceptionTemplate",
    "get_exception_template",
    "render_exception",
]
