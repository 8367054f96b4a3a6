"""
Soundboard State Lookup Interfaces

Abstract views onto the chat transport's cached state. The resolver only
reads through these, so it can be exercised without a live gateway session.
Implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from discord_soundboard.domain.soundboard.value_objects import VoicePresence


class ChannelResolver(ABC):
    """Maps a text channel to the guild that owns it."""

    @abstractmethod
    def guild_for_channel(self, channel_id: str) -> str | None:
        """Return the owning guild ID, or None if the channel is unknown."""
        ...


class VoicePresenceLookup(ABC):
    """Lists who is sitting in which voice channel of a guild."""

    @abstractmethod
    def voice_presences(self, guild_id: str) -> Iterable[VoicePresence]:
        """Return the guild's current voice presences, in cache order.

        Args:
            guild_id: The guild to inspect.

        Returns:
            Zero or more presences; an unknown guild yields none.
        """
        ...
