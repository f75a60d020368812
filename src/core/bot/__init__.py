"""
Bot infrastructure and Discord.py integration.

Contains the main bot class, the base cog utilities and the steps cog.
"""

from src.core.bot.base_cog import BaseCog
from src.core.bot.steps_bot import StepsBot
from src.core.bot.steps_cog import StepsCog

__all__ = [
    "BaseCog",
    "StepsBot",
    "StepsCog",
]
