"""Channel and voice-presence lookups backed by the discord.py client cache."""

from __future__ import annotations

import discord

from discord_soundboard.domain.shared.validators import parse_snowflake
from discord_soundboard.domain.soundboard.state import ChannelResolver, VoicePresenceLookup
from discord_soundboard.domain.soundboard.value_objects import VoicePresence


class DiscordGuildState(ChannelResolver, VoicePresenceLookup):
    """Reads the gateway state cache; never performs HTTP requests."""

    def __init__(self, bot: discord.Client) -> None:
        self._bot = bot

    def guild_for_channel(self, channel_id: str) -> str | None:
        snowflake = parse_snowflake(channel_id)
        if snowflake is None:
            return None

        channel = self._bot.get_channel(snowflake)
        guild = getattr(channel, "guild", None)
        if guild is None:
            return None
        return str(guild.id)

    def voice_presences(self, guild_id: str) -> list[VoicePresence]:
        snowflake = parse_snowflake(guild_id)
        guild = self._bot.get_guild(snowflake) if snowflake is not None else None
        if guild is None:
            return []

        presences: list[VoicePresence] = []
        for channel in (*guild.voice_channels, *guild.stage_channels):
            for user_id in channel.voice_states:
                presences.append(VoicePresence(user_id=str(user_id), channel_id=str(channel.id)))
        return presences
