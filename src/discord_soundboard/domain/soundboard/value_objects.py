"""Immutable value objects for the soundboard bounded context.

None of these outlive the handling of a single chat event.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from discord_soundboard.domain.shared.types import (
    ChannelIdStr,
    GuildIdStr,
    NonEmptyStr,
    UserIdStr,
)


class IncomingMessage(BaseModel):
    """Read-only snapshot of a chat message as delivered by the transport."""

    model_config = ConfigDict(frozen=True, strict=True)

    author_id: UserIdStr
    channel_id: ChannelIdStr
    text: str


class VoicePresence(BaseModel):
    """A user currently sitting in a voice channel."""

    model_config = ConfigDict(frozen=True, strict=True)

    user_id: UserIdStr
    channel_id: ChannelIdStr


class VoiceTarget(BaseModel):
    """Voice channel a sound should be played into."""

    model_config = ConfigDict(frozen=True, strict=True)

    guild_id: GuildIdStr
    channel_id: ChannelIdStr


class PlaybackRequest(BaseModel):
    """Resolved request handed from the resolver to the playback orchestrator."""

    model_config = ConfigDict(frozen=True, strict=True)

    target: VoiceTarget
    file_path: NonEmptyStr

    @property
    def guild_id(self) -> str:
        return self.target.guild_id
