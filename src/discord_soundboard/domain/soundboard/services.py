"""
Soundboard Domain Services

Decides, per chat message, whether a sound should play and where.
"""

from __future__ import annotations

import logging

from discord_soundboard.domain.shared.messages import LogTemplates
from discord_soundboard.domain.soundboard.entities import CommandTable
from discord_soundboard.domain.soundboard.state import ChannelResolver, VoicePresenceLookup
from discord_soundboard.domain.soundboard.value_objects import (
    IncomingMessage,
    PlaybackRequest,
    VoiceTarget,
)

logger = logging.getLogger(__name__)

SOUND_EXTENSION = ".mp3"


class CommandResolver:
    """Turns an incoming chat message into a playback request.

    Every rejected message is ordinary chat noise: :meth:`resolve` returns None
    and logs the reason at DEBUG, it never raises.
    """

    def __init__(
        self,
        table: CommandTable,
        *,
        prefix: str,
        sounds_folder: str,
        channel_resolver: ChannelResolver,
        presence_lookup: VoicePresenceLookup,
    ) -> None:
        self._table = table
        self._prefix = prefix
        self._sounds_folder = sounds_folder
        self._channel_resolver = channel_resolver
        self._presence_lookup = presence_lookup

    @property
    def table(self) -> CommandTable:
        return self._table

    @property
    def prefix(self) -> str:
        return self._prefix

    def sound_path(self, sound_id: str) -> str:
        return f"{self._sounds_folder}/{sound_id}{SOUND_EXTENSION}"

    def resolve(self, message: IncomingMessage, self_id: str) -> PlaybackRequest | None:
        """Resolve *message* to a playback request.

        Checks run in order and stop at the first failure: own message, missing
        prefix, unknown command, unknown channel, author not in voice.

        Args:
            message: The chat message snapshot.
            self_id: The bot's own user ID.

        Returns:
            The request to execute, or None when the message is not a command
            this bot can act on.
        """
        if message.author_id == self_id:
            logger.debug(LogTemplates.RESOLVE_SELF_MESSAGE, message.channel_id)
            return None

        if not message.text.startswith(self._prefix):
            logger.debug(LogTemplates.RESOLVE_NO_PREFIX, message.channel_id)
            return None

        token = message.text[len(self._prefix) :]
        sound_id = self._table.lookup(token)
        if sound_id is None:
            logger.debug(LogTemplates.RESOLVE_UNKNOWN_COMMAND, token, message.author_id)
            return None

        guild_id = self._channel_resolver.guild_for_channel(message.channel_id)
        if guild_id is None:
            logger.debug(LogTemplates.RESOLVE_UNKNOWN_CHANNEL, message.channel_id)
            return None

        # Last match wins if the cache ever reports the user in two channels.
        voice_channel_id: str | None = None
        for presence in self._presence_lookup.voice_presences(guild_id):
            if presence.user_id == message.author_id:
                voice_channel_id = presence.channel_id

        if voice_channel_id is None:
            logger.debug(LogTemplates.RESOLVE_NOT_IN_VOICE, token, message.author_id, guild_id)
            return None

        request = PlaybackRequest(
            target=VoiceTarget(guild_id=guild_id, channel_id=voice_channel_id),
            file_path=self.sound_path(sound_id),
        )
        logger.debug(
            LogTemplates.RESOLVE_MATCHED,
            token,
            message.author_id,
            request.file_path,
            guild_id,
            voice_channel_id,
        )
        return request
