"""Reusable Pydantic Annotated types for domain-wide validation.

Discord identifiers are carried as opaque strings inside the domain; the
discord.py adapters convert to and from integer snowflakes at the edge::

    from discord_soundboard.domain.shared.types import GuildIdStr, NonEmptyStr

    class MyModel(BaseModel):
        guild_id: GuildIdStr
        name: NonEmptyStr
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

SoundIdStr = Annotated[str, Field(min_length=1, max_length=255)]
"""Sound file stem, resolved as ``<sounds_folder>/<sound_id>.mp3``."""

CommandPrefixStr = Annotated[str, Field(min_length=1)]
"""Bot command prefix: any non-empty string."""


# ── Identifier aliases ──────────────────────────────────────────────

SnowflakeStr = NonEmptyStr
"""Opaque chat-service identifier (user, channel or guild)."""

UserIdStr = SnowflakeStr
ChannelIdStr = SnowflakeStr
GuildIdStr = SnowflakeStr


# ── Settings-specific constraints ──────────────────────────────────

TimeoutSeconds = Annotated[float, Field(gt=0.0, le=3600.0)]
"""Deadline for a single voice operation: (0, 3600] seconds."""

VolumeFloat = Annotated[float, Field(ge=0.0, le=2.0)]
"""Audio volume multiplier in [0.0, 2.0]."""
