"""
Exception message template registry for Stepline.

Purpose
-------
Single source of truth for exception-to-reply mappings. Converts domain
exceptions into the short chat replies a member sees, so no reply text for
an error is hardcoded in the dispatcher or the transport.

Design Notes
------------
Each template contains:
- title: Short error title (used in logs and structured output)
- template: Reply template with {placeholder} interpolation from details
- help_text: Optional guidance appended on its own line
- severity: ErrorSeverity level
- command_overrides: Replacement templates for specific commands, keyed by
  command name (e.g. "reset")
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from src.modules.shared.exceptions import (
    ErrorSeverity,
    InvalidStepCountError,
    MissingIdentityError,
    NotRegisteredError,
    StepsDomainException,
)
from src.ui.emojis import Emojis


class ExceptionTemplate:
    """Template for formatting exception messages."""

    def __init__(
        self,
        title: str,
        template: str,
        help_text: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        command_overrides: Optional[Dict[str, str]] = None,
    ):
        self.title = title
        self.template = template
        self.help_text = help_text
        self.severity = severity
        self.command_overrides = command_overrides or {}

    def format(self, exception: Exception, command: Optional[str] = None) -> Dict[str, Any]:
        """
        Format exception using template.

        Args:
            exception: Exception instance to format
            command: Name of the command that failed, for per-command wording

        Returns:
            Dict with 'title', 'description', 'help_text', 'severity'
        """
        details: Dict[str, Any] = {}
        if isinstance(exception, StepsDomainException):
            details = exception.details.copy()

        template = self.command_overrides.get(command or "", self.template)
        try:
            description = template.format(**details)
        except KeyError:
            description = str(exception)

        return {
            "title": self.title,
            "description": description,
            "help_text": self.help_text,
            "severity": self.severity,
        }


# ============================================================================
# EXCEPTION TEMPLATE REGISTRY
# ============================================================================

EXCEPTION_TEMPLATES: Dict[type, ExceptionTemplate] = {
    NotRegisteredError: ExceptionTemplate(
        title="Not Registered",
        template=f"{Emojis.ERROR} Please register first using /register",
        help_text=None,
        severity=ErrorSeverity.INFO,
        command_overrides={
            "reset": f"{Emojis.ERROR} You are not registered.",
        },
    ),
    InvalidStepCountError: ExceptionTemplate(
        title="Invalid Step Count",
        template=f"{Emojis.ERROR} Please enter a valid number of steps.",
        help_text="Example: /steps 8500",
        severity=ErrorSeverity.INFO,
    ),
    MissingIdentityError: ExceptionTemplate(
        title="Unknown Sender",
        template=f"{Emojis.ERROR} Could not tell who sent that command. Please try again.",
        help_text=None,
        severity=ErrorSeverity.WARNING,
    ),
    StepsDomainException: ExceptionTemplate(
        title="Request Failed",
        template=f"{Emojis.ERROR} That request could not be completed.",
        help_text=None,
        severity=ErrorSeverity.WARNING,
    ),
}


def get_exception_template(exception: Exception) -> Optional[ExceptionTemplate]:
    """
    Get the template for an exception, walking its class hierarchy.

    Args:
        exception: Exception instance

    Returns:
        ExceptionTemplate if found, None otherwise
    """
    for exception_type in type(exception).__mro__:
        template = EXCEPTION_TEMPLATES.get(exception_type)
        if template is not None:
            return template
    return None


def render_exception(exception: Exception, command: Optional[str] = None) -> Optional[str]:
    """
    Render an exception as reply text.

    Returns None when no template covers the exception type.
    """
    template = get_exception_template(exception)
    if template is None:
        return None

    formatted = template.format(exception, command)
    if formatted["help_text"]:
        return f"{formatted['description']}\n{formatted['help_text']}"
    return formatted["description"]
