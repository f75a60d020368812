"""
Stepline Domain Validators

Validators raise structured domain exceptions when validation fails and
return the validated value on success, so the ledger and the service share a
single definition of "a valid step count".

Usage
-----
    from src.modules.shared.validators import parse_step_count

    parse_step_count("8500")   # 8500
    parse_step_count("-5")     # raises InvalidStepCountError
"""

from __future__ import annotations

import re
from typing import Any

from .exceptions import InvalidStepCountError

# Plain digits, or 1-3 leading digits followed by comma-separated groups of three
_STEP_COUNT_PATTERN = re.compile(r"[0-9]{1,3}(?:,[0-9]{3})+|[0-9]+")


def validate_step_count(steps: Any) -> int:
    """
    Validate an already-typed step count.

    Args:
        steps: Value to check

    Returns:
        The step count, unchanged

    Raises:
        InvalidStepCountError: If steps is not an int (bools excluded) or is negative
    """
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise InvalidStepCountError(steps, "step count must be an integer")
    if steps < 0:
        raise InvalidStepCountError(steps, "step count cannot be negative")
    return steps


def parse_step_count(raw: Any) -> int:
    """
    Parse a step count as received from a chat command.

    Accepts an int or a string of ASCII digits, optionally grouped in
    thousands with commas ("8500", "8,500", "1,234,567"). Surrounding
    whitespace is ignored. Malformed groups ("5,0"), signs and non-ASCII
    digits are rejected.

    Raises:
        InvalidStepCountError: If raw is missing, non-numeric or negative
    """
    if raw is None:
        raise InvalidStepCountError(raw, "step count is missing")

    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            raise InvalidStepCountError(raw, "step count is missing")
        if text.startswith("-") and _STEP_COUNT_PATTERN.fullmatch(text[1:]):
            raise InvalidStepCountError(raw, "step count cannot be negative")
        if not _STEP_COUNT_PATTERN.fullmatch(text):
            raise InvalidStepCountError(raw, "step count must be a whole number")
        return int(text.replace(",", ""))

    return validate_step_count(raw)
