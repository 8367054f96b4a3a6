"""Listens for prefixed chat commands and plays the matching sound."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from discord_soundboard.domain.shared.messages import ErrorMessages
from discord_soundboard.domain.soundboard.value_objects import IncomingMessage

if TYPE_CHECKING:
    from ....application.services.playback_orchestrator import PlaybackResult
    from ....config.container import Container

logger = logging.getLogger(__name__)


class SoundboardCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @staticmethod
    def to_incoming(message: discord.Message) -> IncomingMessage:
        return IncomingMessage(
            author_id=str(message.author.id),
            channel_id=str(message.channel.id),
            text=message.content or "",
        )

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message) -> None:
        # discord.py runs each listener call in its own task, so a long sound
        # here does not hold up events for other guilds.
        await self.handle_message(message)

    async def handle_message(self, message: discord.Message) -> PlaybackResult | None:
        bot_user = self.bot.user
        if bot_user is None:
            return None

        request = self.container.command_resolver.resolve(
            self.to_incoming(message), str(bot_user.id)
        )
        if request is None:
            return None

        return await self.container.playback_orchestrator.play(request)


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(SoundboardCog(bot, container))
