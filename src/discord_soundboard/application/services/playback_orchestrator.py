"""Join → play → leave orchestration for a single sound request."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from discord_soundboard.config.settings import PlaybackSettings
from discord_soundboard.domain.shared.exceptions import (
    DisconnectError,
    JoinError,
    PlaybackError,
    PlaybackLifecycleError,
)
from discord_soundboard.domain.shared.messages import ErrorMessages, LogTemplates
from discord_soundboard.domain.soundboard.value_objects import PlaybackRequest, VoiceTarget

if TYPE_CHECKING:
    from ..interfaces.voice_connector import VoiceConnection, VoiceConnector

logger = logging.getLogger(__name__)


class PlaybackStatus(Enum):
    """Status codes for playback results."""

    SUCCESS = "success"
    JOIN_FAILED = "join_failed"
    PLAYBACK_FAILED = "playback_failed"
    DISCONNECT_FAILED = "disconnect_failed"
    REJECTED = "rejected"


class PlaybackResult(BaseModel):
    """Outcome of one orchestrated request. Operator-visible only."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: PlaybackStatus
    request: PlaybackRequest
    error: PlaybackLifecycleError | None = None
    disconnect_error: DisconnectError | None = None

    @property
    def is_success(self) -> bool:
        return self.status == PlaybackStatus.SUCCESS


class PlaybackOrchestrator:
    """Runs join, play and leave for each request against the voice connector.

    Requests are not queued: two requests for the same guild race on the same
    voice slot. Each step is bounded by a deadline from :class:`PlaybackSettings`,
    and leave always runs once join has succeeded. Failures are logged and
    returned as a :class:`PlaybackResult`, never raised.
    """

    def __init__(
        self,
        voice_connector: VoiceConnector,
        settings: PlaybackSettings | None = None,
    ) -> None:
        self._connector = voice_connector
        self._settings = settings or PlaybackSettings()
        self._accepting = True
        self._in_flight = 0
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def accepting(self) -> bool:
        return self._accepting

    @property
    def in_flight(self) -> int:
        return self._in_flight

    async def play(self, request: PlaybackRequest) -> PlaybackResult:
        if not self._accepting:
            logger.info(LogTemplates.REQUEST_REJECTED, request.file_path, request.guild_id)
            return PlaybackResult(status=PlaybackStatus.REJECTED, request=request)

        self._in_flight += 1
        self._idle.clear()
        try:
            return await self._run(request)
        finally:
            self._in_flight -= 1
            if self._in_flight == 0:
                self._idle.set()

    def shutdown(self) -> None:
        """Stop accepting new requests; in-flight sounds are allowed to finish."""
        if self._accepting:
            self._accepting = False
            logger.info(LogTemplates.ORCHESTRATOR_SHUTDOWN, self._in_flight)

    async def drain(self, timeout: float | None = None) -> bool:
        """Wait for in-flight requests. Returns False if *timeout* expired first."""
        if self._in_flight == 0:
            return True
        try:
            async with asyncio.timeout(timeout):
                await self._idle.wait()
        except TimeoutError:
            logger.warning(LogTemplates.ORCHESTRATOR_DRAIN_TIMEOUT, timeout, self._in_flight)
            return False
        logger.info(LogTemplates.ORCHESTRATOR_DRAINED)
        return True

    async def _run(self, request: PlaybackRequest) -> PlaybackResult:
        target = request.target

        try:
            connection = await self._join(target)
        except JoinError as e:
            logger.error(LogTemplates.JOIN_FAILED, target.channel_id, target.guild_id, e)
            return PlaybackResult(status=PlaybackStatus.JOIN_FAILED, request=request, error=e)

        play_error: PlaybackError | None = None
        disconnect_error: DisconnectError | None = None
        try:
            await self._play(connection, request)
        except PlaybackError as e:
            play_error = e
            logger.error(LogTemplates.SOUND_FAILED, request.file_path, target.guild_id, e)
        finally:
            disconnect_error = await self._leave(connection, target)

        if play_error is not None:
            return PlaybackResult(
                status=PlaybackStatus.PLAYBACK_FAILED,
                request=request,
                error=play_error,
                disconnect_error=disconnect_error,
            )
        if disconnect_error is not None:
            return PlaybackResult(
                status=PlaybackStatus.DISCONNECT_FAILED,
                request=request,
                error=disconnect_error,
                disconnect_error=disconnect_error,
            )

        logger.info(LogTemplates.SOUND_PLAYED, request.file_path, target.guild_id)
        return PlaybackResult(status=PlaybackStatus.SUCCESS, request=request)

    async def _join(self, target: VoiceTarget) -> VoiceConnection:
        timeout = self._settings.join_timeout_s
        try:
            async with asyncio.timeout(timeout):
                return await self._connector.join(target.guild_id, target.channel_id)
        except JoinError:
            raise
        except TimeoutError as e:
            raise JoinError(
                ErrorMessages.JOIN_TIMEOUT.format(timeout=timeout, channel_id=target.channel_id),
                guild_id=target.guild_id,
            ) from e
        except Exception as e:
            raise JoinError(
                ErrorMessages.JOIN_CLIENT_ERROR.format(channel_id=target.channel_id, error=e),
                guild_id=target.guild_id,
            ) from e

    async def _play(self, connection: VoiceConnection, request: PlaybackRequest) -> None:
        timeout = self._settings.playback_timeout_s
        try:
            async with asyncio.timeout(timeout):
                await connection.play_file(request.file_path)
        except PlaybackError:
            raise
        except TimeoutError as e:
            raise PlaybackError(
                ErrorMessages.PLAYBACK_TIMEOUT.format(path=request.file_path, timeout=timeout),
                guild_id=request.guild_id,
            ) from e
        except Exception as e:
            raise PlaybackError(
                ErrorMessages.PLAYBACK_FAILED.format(path=request.file_path, error=e),
                guild_id=request.guild_id,
            ) from e

    async def _leave(self, connection: VoiceConnection, target: VoiceTarget) -> DisconnectError | None:
        timeout = self._settings.disconnect_timeout_s
        try:
            async with asyncio.timeout(timeout):
                await connection.disconnect()
            return None
        except DisconnectError as e:
            error = e
        except TimeoutError:
            error = DisconnectError(
                ErrorMessages.DISCONNECT_TIMEOUT.format(timeout=timeout, guild_id=target.guild_id),
                guild_id=target.guild_id,
            )
        except Exception as e:
            error = DisconnectError(
                ErrorMessages.DISCONNECT_FAILED.format(guild_id=target.guild_id, error=e),
                guild_id=target.guild_id,
            )
        logger.error(LogTemplates.DISCONNECT_FAILED, target.guild_id, error)
        return error
