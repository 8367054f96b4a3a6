"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Persistence (commands file loader)
- Discord (bot, cogs, voice and guild-state adapters)
- Audio (FFmpeg sources for local sound files)
"""

from discord_soundboard.infrastructure.discord.adapters.guild_state import DiscordGuildState
from discord_soundboard.infrastructure.discord.adapters.voice_connector import (
    DiscordVoiceConnector,
)
from discord_soundboard.infrastructure.discord.bot import create_bot
from discord_soundboard.infrastructure.persistence.command_file import load_command_table

__all__ = [
    "create_bot",
    "DiscordGuildState",
    "DiscordVoiceConnector",
    "load_command_table",
]
