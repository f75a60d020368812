"""
Base validation helpers for Stepline domain models.

Domain models are plain (mostly frozen) dataclasses that validate their own
invariants in ``__post_init__`` and raise ``DomainValidationError`` when a
programming error would otherwise create an impossible value. Member-facing
input problems are reported with the domain exceptions in
``src.modules.shared.exceptions`` instead.
"""

from __future__ import annotations

from typing import Optional


class DomainValidationError(Exception):
    """
    Exception raised when domain model validation fails.

    Parameters
    ----------
    message : str
        Human-readable error message
    field : Optional[str]
        Field name that failed validation (if applicable)
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


def validate_non_negative(value: int, field_name: str) -> None:
    """
    Validate that a value is non-negative.

    Raises
    ------
    DomainValidationError
        If value is negative
    """
    if value < 0:
        raise DomainValidationError(
            f"{field_name} must be non-negative, got {value}",
            field=field_name,
        )


def validate_not_empty(value: str, field_name: str) -> None:
    """
    Validate that a string is not empty.

    Raises
    ------
    DomainValidationError
        If value is empty or whitespace-only
    """
    if not value or not value.strip():
        raise DomainValidationError(
            f"{field_name} cannot be empty",
            field=field_name,
        )
