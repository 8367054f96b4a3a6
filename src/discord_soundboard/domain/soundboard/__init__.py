"""
Soundboard Bounded Context

Command table, message/voice value objects and the command resolver.
"""

from discord_soundboard.domain.soundboard.entities import CommandEntry, CommandTable
from discord_soundboard.domain.soundboard.services import CommandResolver
from discord_soundboard.domain.soundboard.state import ChannelResolver, VoicePresenceLookup
from discord_soundboard.domain.soundboard.value_objects import (
    IncomingMessage,
    PlaybackRequest,
    VoicePresence,
    VoiceTarget,
)

__all__ = [
    # Entities
    "CommandEntry",
    "CommandTable",
    # Value Objects
    "IncomingMessage",
    "VoicePresence",
    "VoiceTarget",
    "PlaybackRequest",
    # State lookups
    "ChannelResolver",
    "VoicePresenceLookup",
    # Services
    "CommandResolver",
]
