"""Port interface for joining voice channels and playing sound files."""

from __future__ import annotations

from abc import ABC, abstractmethod


class VoiceConnection(ABC):
    """Handle to an acquired voice connection in one guild."""

    @property
    @abstractmethod
    def guild_id(self) -> str:
        ...

    @abstractmethod
    async def play_file(self, path: str) -> None:
        """Stream a local audio file, returning once playback has finished.

        Raises:
            PlaybackError: If the file is missing or cannot be decoded/streamed.
        """
        ...

    @abstractmethod
    async def disconnect(self) -> None:
        """Leave the voice channel and release the connection.

        Raises:
            DisconnectError: If the transport refuses to release the connection.
        """
        ...


class VoiceConnector(ABC):
    """Interface for acquiring voice connections."""

    @abstractmethod
    async def join(self, guild_id: str, channel_id: str) -> VoiceConnection:
        """Join a voice channel.

        Raises:
            JoinError: If the guild or channel is unknown or the join fails.
        """
        ...
