"""Discord voice connector implementing VoiceConnector for join, play and leave."""

from __future__ import annotations

import asyncio
import logging
import os

import discord

from discord_soundboard.application.interfaces.voice_connector import (
    VoiceConnection,
    VoiceConnector,
)
from discord_soundboard.config.settings import PlaybackSettings
from discord_soundboard.domain.shared.exceptions import DisconnectError, JoinError, PlaybackError
from discord_soundboard.domain.shared.messages import ErrorMessages, LogTemplates
from discord_soundboard.domain.shared.validators import parse_snowflake
from discord_soundboard.infrastructure.audio.ffmpeg_source import FFmpegConfig, create_source

logger = logging.getLogger(__name__)


class DiscordVoiceConnection(VoiceConnection):
    def __init__(
        self,
        voice_client: discord.VoiceClient,
        guild_id: str,
        ffmpeg_config: FFmpegConfig | None = None,
    ) -> None:
        self._voice_client = voice_client
        self._guild_id = guild_id
        self._ffmpeg_config = ffmpeg_config or FFmpegConfig()

    @property
    def guild_id(self) -> str:
        return self._guild_id

    @property
    def voice_client(self) -> discord.VoiceClient:
        return self._voice_client

    async def play_file(self, path: str) -> None:
        """Play *path* and wait for the player thread to report completion."""
        if not os.path.isfile(path):
            raise PlaybackError(ErrorMessages.SOUND_FILE_NOT_FOUND.format(path=path), self._guild_id)

        loop = asyncio.get_running_loop()
        finished: asyncio.Future[Exception | None] = loop.create_future()

        def after_callback(error: Exception | None = None) -> None:
            # Runs on discord.py's audio player thread.
            loop.call_soon_threadsafe(_resolve, finished, error)

        source = None
        try:
            source = create_source(path, self._ffmpeg_config)
            self._voice_client.play(source, after=after_callback)
        except Exception as e:
            # FFmpeg is already running once the source exists.
            if source is not None:
                source.cleanup()
            raise PlaybackError(
                ErrorMessages.PLAYBACK_FAILED.format(path=path, error=e), self._guild_id
            ) from e

        logger.info(LogTemplates.PLAYBACK_STARTED, path, self._guild_id)

        try:
            error = await finished
        except asyncio.CancelledError:
            self._voice_client.stop()
            raise

        if error is not None:
            logger.warning(LogTemplates.PLAYBACK_SOURCE_ERROR, self._guild_id, error)
            raise PlaybackError(
                ErrorMessages.PLAYBACK_FAILED.format(path=path, error=error), self._guild_id
            ) from error

    async def disconnect(self) -> None:
        try:
            await self._voice_client.disconnect(force=True)
        except Exception as e:
            self._voice_client.cleanup()
            raise DisconnectError(
                ErrorMessages.DISCONNECT_FAILED.format(guild_id=self._guild_id, error=e),
                self._guild_id,
            ) from e
        logger.info(LogTemplates.VOICE_DISCONNECTED, self._guild_id)


def _resolve(future: asyncio.Future[Exception | None], error: Exception | None) -> None:
    if not future.done():
        future.set_result(error)


async def discard_voice_client(voice_client: discord.VoiceProtocol, guild_id: str) -> None:
    """Force-disconnect *voice_client* so the guild's voice slot is free again."""
    try:
        await voice_client.disconnect(force=True)
    except Exception as e:
        logger.warning(LogTemplates.VOICE_CLEANUP_FAILED, guild_id, e)
        voice_client.cleanup()


class DiscordVoiceConnector(VoiceConnector):
    """Acquires voice connections, reclaiming whatever a guild already holds.

    discord.py keeps one voice client per guild and refuses a second
    ``connect``. A client left behind by a cancelled join or a failed leave
    would otherwise block the guild, so :meth:`join` reuses a live client
    (moving it if needed) and discards a dead one before connecting.
    """

    def __init__(self, bot: discord.Client, settings: PlaybackSettings | None = None) -> None:
        self._bot = bot
        self._settings = settings or PlaybackSettings()
        self._ffmpeg_config = FFmpegConfig(volume=self._settings.volume)
        self._cleanup_tasks: set[asyncio.Task[None]] = set()

    async def join(self, guild_id: str, channel_id: str) -> DiscordVoiceConnection:
        guild_snowflake = parse_snowflake(guild_id)
        guild = self._bot.get_guild(guild_snowflake) if guild_snowflake is not None else None
        if guild is None:
            raise JoinError(ErrorMessages.GUILD_NOT_FOUND.format(guild_id=guild_id), guild_id)

        channel_snowflake = parse_snowflake(channel_id)
        channel = guild.get_channel(channel_snowflake) if channel_snowflake is not None else None
        if not isinstance(channel, discord.VoiceChannel | discord.StageChannel):
            raise JoinError(ErrorMessages.CHANNEL_NOT_VOICE.format(channel_id=channel_id), guild_id)

        existing = guild.voice_client
        if existing is not None:
            reclaimed = await self._reclaim(existing, channel, guild_id)
            if reclaimed is not None:
                return DiscordVoiceConnection(reclaimed, guild_id, self._ffmpeg_config)

        timeout = self._settings.join_timeout_s
        try:
            voice_client = await channel.connect(timeout=timeout, self_deaf=True)
        except asyncio.CancelledError:
            # connect() registers the client before the handshake and only
            # removes it on its own timeout.
            logger.warning(LogTemplates.VOICE_JOIN_CANCELLED, guild_id)
            self._discard_in_background(guild, guild_id)
            raise
        except TimeoutError as e:
            raise JoinError(
                ErrorMessages.JOIN_TIMEOUT.format(timeout=timeout, channel_id=channel_id), guild_id
            ) from e
        except discord.Forbidden as e:
            raise JoinError(ErrorMessages.JOIN_FORBIDDEN.format(channel_id=channel_id), guild_id) from e
        except discord.ClientException as e:
            raise JoinError(
                ErrorMessages.JOIN_CLIENT_ERROR.format(channel_id=channel_id, error=e), guild_id
            ) from e

        logger.info(LogTemplates.VOICE_CONNECTED, channel.name, guild.name)
        return DiscordVoiceConnection(voice_client, guild_id, self._ffmpeg_config)

    async def _reclaim(
        self,
        voice_client: discord.VoiceClient,
        channel: discord.VoiceChannel | discord.StageChannel,
        guild_id: str,
    ) -> discord.VoiceClient | None:
        """Return a usable client in *channel*, or None once the old one is discarded."""
        if not voice_client.is_connected():
            logger.warning(LogTemplates.VOICE_STALE_CLEANUP, guild_id)
            await discard_voice_client(voice_client, guild_id)
            return None

        current = voice_client.channel
        if current is not None and current.id == channel.id:
            logger.info(LogTemplates.VOICE_REUSED, channel.name, guild_id)
            return voice_client

        try:
            await voice_client.move_to(channel)
        except Exception as e:
            logger.warning(LogTemplates.VOICE_MOVE_FAILED, guild_id, e)
            await discard_voice_client(voice_client, guild_id)
            return None

        logger.info(LogTemplates.VOICE_MOVED, channel.name, guild_id)
        return voice_client

    def _discard_in_background(self, guild: discord.Guild, guild_id: str) -> None:
        half_open = guild.voice_client
        if half_open is None:
            return
        task = asyncio.create_task(discard_voice_client(half_open, guild_id))
        self._cleanup_tasks.add(task)
        task.add_done_callback(self._cleanup_tasks.discard)
