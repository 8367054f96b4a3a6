"""Discord cogs - event listeners."""

from discord_soundboard.infrastructure.discord.cogs.event_cog import EventCog
from discord_soundboard.infrastructure.discord.cogs.soundboard_cog import SoundboardCog

__all__ = [
    "SoundboardCog",
    "EventCog",
]
