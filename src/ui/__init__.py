"""
UI Subsystem - reply text for Stepline.

Organization:
    - emojis: Emoji constants (Emojis class)
    - formatters: Pure functions turning domain values into reply text

Usage Examples:
    >>> from src.ui import Emojis, StepsFormatters
    >>> print(f"{Emojis.SHOE} {StepsFormatters.format_steps(8500)} steps")
    👟 8,500 steps
"""

from src.ui.emojis import Emojis
from src.ui.formatters import StepsFormatters

__all__ = [
    "Emojis",
    "StepsFormatters",
]
