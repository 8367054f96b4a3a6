"""Gateway and voice-state listeners that keep the bot's voice slots clean."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from discord_soundboard.domain.shared.messages import ErrorMessages, LogTemplates
from discord_soundboard.infrastructure.discord.adapters.voice_connector import (
    discard_voice_client,
)

if TYPE_CHECKING:
    from ....config.container import Container

logger = logging.getLogger(__name__)


class EventCog(commands.Cog):
    def __init__(self, bot: commands.Bot, container: Container) -> None:
        self.bot = bot
        self.container = container

    @commands.Cog.listener()
    async def on_disconnect(self) -> None:
        in_flight = self.container.playback_orchestrator.in_flight
        logger.warning(LogTemplates.GATEWAY_DISCONNECTED, in_flight)

    @commands.Cog.listener()
    async def on_resumed(self) -> None:
        logger.info(LogTemplates.GATEWAY_RESUMED)

    @commands.Cog.listener()
    async def on_voice_state_update(
        self,
        member: discord.Member,
        before: discord.VoiceState,
        after: discord.VoiceState,
    ) -> None:
        """Track the bot's own voice moves; drop a client left dead by a kick."""
        if self.bot.user is None or member.id != self.bot.user.id:
            return
        if before.channel == after.channel:
            return

        guild_id = str(member.guild.id)
        if after.channel is not None:
            if before.channel is not None:
                logger.info(
                    LogTemplates.VOICE_STATE_MOVED, before.channel.id, after.channel.id, guild_id
                )
            return

        logger.info(LogTemplates.VOICE_STATE_LEFT, getattr(before.channel, "id", None), guild_id)
        voice_client = member.guild.voice_client
        if voice_client is not None and not voice_client.is_connected():
            logger.warning(LogTemplates.VOICE_STALE_CLEANUP, guild_id)
            await discard_voice_client(voice_client, guild_id)

    @commands.Cog.listener()
    async def on_guild_join(self, guild: discord.Guild) -> None:
        logger.info(LogTemplates.GUILD_JOINED, guild.name, guild.id)

    @commands.Cog.listener()
    async def on_guild_remove(self, guild: discord.Guild) -> None:
        logger.info(LogTemplates.GUILD_REMOVED, guild.name, guild.id)
        if guild.voice_client is not None:
            await discard_voice_client(guild.voice_client, str(guild.id))


async def setup(bot: commands.Bot) -> None:
    container = getattr(bot, "container", None)
    if container is None:
        raise RuntimeError(ErrorMessages.CONTAINER_NOT_FOUND)

    await bot.add_cog(EventCog(bot, container))
