"""
Steps Cog
=========

Chat transport for the steps challenge. Listens to every message, hands
slash-prefixed text to the command layer and posts the reply in the same
channel. The cog knows nothing about steps; it only moves text in and out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import discord
from discord.ext import commands

from src.core.bot.base_cog import BaseCog
from src.core.logging.logger import LogContext
from src.modules.commands import CommandDispatcher, Unknown, parse_command
from src.modules.commands.parser import COMMAND_PREFIX

if TYPE_CHECKING:
    from src.modules.steps.service import StepsService


class StepsCog(BaseCog):
    """Route chat messages to the steps command dispatcher."""

    def __init__(self, bot: commands.Bot, service: StepsService):
        super().__init__(bot, "StepsCog")
        self.service = service
        self.dispatcher = CommandDispatcher(service)

    @commands.Cog.listener("on_message")
    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return

        content = (message.content or "").strip()
        if not content.startswith(COMMAND_PREFIX):
            return

        await self.handle_text(message, content)

    async def handle_text(self, message: discord.Message, content: str) -> Optional[str]:
        """Parse, dispatch and reply. Returns the reply text, if any."""
        command = parse_command(content)
        if isinstance(command, Unknown):
            return None

        user_id, display_name = self.identity_of(message)
        group_id = self.group_of(message)

        async with LogContext(
            user_id=user_id,
            group_id=group_id,
            command=command.name,
            component=self.cog_name,
        ):
            self.log_command_use(command.name, user_id, group_id)
            reply = self.dispatcher.dispatch(command, user_id, display_name)
            if reply is not None:
                await self.safe_reply(message, reply)
            return reply
