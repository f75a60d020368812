"""
Stepline Discord Bot - Main Bot Class

Architecture:
- Discord integration lives here and in StepsCog
- All step state is owned by one StepsService per bot instance
- Slash-prefixed text is routed by StepsCog; discord.py's own prefix command
  processing is never used
"""

import time
from typing import Optional

import discord
from discord.ext import commands

from src.core.bot.steps_cog import StepsCog
from src.core.config.config import Config
from src.core.logging.logger import get_logger
from src.modules.commands.parser import COMMAND_PREFIX
from src.modules.steps.service import StepsService

logger = get_logger(__name__)


class StepsBot(commands.Bot):
    """
    Stepline Discord Bot.

    Owns the StepsService instance and registers the cog that routes chat
    commands to it.
    """

    def __init__(self, service: Optional[StepsService] = None):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.guilds = True

        super().__init__(
            command_prefix=COMMAND_PREFIX,
            intents=intents,
            help_command=None,
            description=Config.BOT_DESCRIPTION,
        )

        self.service = service or StepsService()
        self.started_at: Optional[float] = None

    # --------------------------------------------------------------- #
    # Startup
    # --------------------------------------------------------------- #
    async def setup_hook(self):
        """Register the steps cog before connecting to the gateway."""
        startup_start = time.perf_counter()
        logger.info("=" * 60)
        logger.info(f"{Config.BOT_NAME} v{Config.BOT_VERSION} STARTUP")
        logger.info("=" * 60)

        try:
            await self.add_cog(StepsCog(self, self.service))
        except Exception as e:
            logger.critical(f"FATAL: Setup failed: {e}", exc_info=True)
            raise

        self.started_at = time.time()
        setup_ms = (time.perf_counter() - startup_start) * 1000
        logger.info(f"StepsCog loaded in {setup_ms:.1f}ms")

    # --------------------------------------------------------------- #
    # Events
    # --------------------------------------------------------------- #
    async def on_ready(self):
        """Bot is connected and ready to receive events."""
        logger.info("=" * 60)
        logger.info(f"{self.user} is ONLINE")
        logger.info(f"{len(self.guilds)} guilds")
        logger.info("=" * 60)

        await self.change_presence(
            activity=discord.Activity(
                type=discord.ActivityType.watching,
                name="/help | /steps <number>",
            )
        )

    async def on_message(self, message: discord.Message):
        """StepsCog handles every command; skip discord.py prefix commands."""
        return None

    # --------------------------------------------------------------- #
    # Shutdown
    # --------------------------------------------------------------- #
    async def close(self):
        """Log final counts and close the Discord connection."""
        logger.info("=" * 60)
        logger.info(f"{Config.BOT_NAME} SHUTDOWN")
        logger.info("=" * 60)

        logger.info(
            "Final Stats:",
            extra={
                "members": len(self.service.registry),
                "ledger_version": self.service.ledger.version,
            },
        )

        await super().close()
        logger.info(f"{Config.BOT_NAME} shutdown complete")
