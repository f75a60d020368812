"""
Base Discord Cog for Stepline

Purpose
-------
Foundation for the bot's cogs. Keeps Discord concerns (who sent what, where
to reply) apart from the steps use-cases, and gives every cog the same
reply and logging helpers.

Responsibilities
----------------
- Extract a stable identity from a Discord message
- Reply safely, logging instead of raising when Discord rejects a send
- Log command usage with Discord context

Non-Responsibilities
--------------------
- Business logic (delegated to StepsService)
- Parsing and error rendering (delegated to the command layer)
- Bot lifecycle management (handled by StepsBot)
"""

from typing import Optional, Tuple

import discord
from discord.ext import commands

from src.core.logging.logger import get_logger


class BaseCog(commands.Cog):
    """
    Base class for Stepline cogs.

    Provides identity extraction, safe replies and command logging.
    """

    def __init__(self, bot: commands.Bot, cog_name: str):
        """
        Initialize BaseCog.

        Args:
            bot: Discord bot instance
            cog_name: Name of the cog (e.g., "StepsCog")
        """
        self.bot = bot
        self.cog_name = cog_name
        self.logger = get_logger(cog_name)

    # ========================================================================
    # IDENTITY
    # ========================================================================

    @staticmethod
    def identity_of(message: discord.Message) -> Tuple[str, str]:
        """Return (user_id, display_name) for the message author."""
        author = message.author
        display_name = getattr(author, "display_name", None) or getattr(author, "name", None) or ""
        return str(author.id), display_name

    @staticmethod
    def group_of(message: discord.Message) -> Optional[str]:
        """Guild id, or the channel id for direct messages."""
        if message.guild is not None:
            return str(message.guild.id)
        channel = getattr(message, "channel", None)
        return str(channel.id) if channel is not None else None

    # ========================================================================
    # USER FEEDBACK
    # ========================================================================

    async def safe_reply(self, message: discord.Message, text: str) -> bool:
        """
        Reply to the message, logging failures instead of raising.

        Returns:
            True if Discord accepted the reply.
        """
        try:
            await message.reply(text, mention_author=False)
            return True
        except discord.HTTPException as e:
            self.logger.error(
                f"Failed to send reply in {self.cog_name}: {e}",
                extra={"error_type": type(e).__name__},
            )
            return False

    # ========================================================================
    # LOGGING
    # ========================================================================

    def log_command_use(self, command_name: str, user_id: str, group_id: Optional[str] = None, **kwargs):
        """Log command usage with Discord context."""
        self.logger.info(
            f"{self.cog_name}.{command_name} invoked",
            extra={
                "command": command_name,
                "user_id": user_id,
                "group_id": group_id,
                **kwargs,
            },
        )
