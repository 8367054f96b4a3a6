"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import CommandPrefixStr, NonEmptyStr, TimeoutSeconds, VolumeFloat


class DiscordSettings(BaseModel):
    """Discord bot configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    token: SecretStr = Field(
        default=SecretStr(""), validation_alias=AliasChoices("token", "bot_token", "discord_token")
    )
    command_prefix: CommandPrefixStr = Field(
        default="~",
        validation_alias=AliasChoices("command_prefix", "prefix"),
    )


class SoundboardSettings(BaseModel):
    """Where the command table and the sound clips live."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    sounds_folder: NonEmptyStr = Field(
        default="sounds", validation_alias=AliasChoices("sounds_folder", "sounds_dir", "sounds")
    )
    commands_file: NonEmptyStr = Field(
        default="commands.json",
        validation_alias=AliasChoices("commands_file", "commands_path", "commands"),
    )

    @field_validator("sounds_folder")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        """Sound paths are built as ``<folder>/<id>.mp3``; avoid a doubled slash."""
        return v.rstrip("/") or "/"


class PlaybackSettings(BaseModel):
    """Deadlines and volume for the join/play/leave sequence."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    join_timeout_s: TimeoutSeconds = Field(
        default=10.0, validation_alias=AliasChoices("join_timeout_s", "join_timeout")
    )
    playback_timeout_s: TimeoutSeconds = Field(
        default=300.0, validation_alias=AliasChoices("playback_timeout_s", "playback_timeout")
    )
    disconnect_timeout_s: TimeoutSeconds = Field(
        default=10.0, validation_alias=AliasChoices("disconnect_timeout_s", "disconnect_timeout")
    )
    shutdown_timeout_s: TimeoutSeconds = Field(
        default=30.0, validation_alias=AliasChoices("shutdown_timeout_s", "shutdown_timeout")
    )
    volume: VolumeFloat = 1.0


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - DISCORD__TOKEN, DISCORD__COMMAND_PREFIX (nested with ``__``)
    - SOUNDBOARD__SOUNDS_FOLDER, SOUNDBOARD__COMMANDS_FILE
    - PLAYBACK__JOIN_TIMEOUT_S, PLAYBACK__PLAYBACK_TIMEOUT_S, ...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    discord: DiscordSettings = Field(default_factory=DiscordSettings)
    soundboard: SoundboardSettings = Field(default_factory=SoundboardSettings)
    playback: PlaybackSettings = Field(default_factory=PlaybackSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels))
        return v_upper

    def with_overrides(
        self,
        *,
        token: str | None = None,
        command_prefix: str | None = None,
        sounds_folder: str | None = None,
        commands_file: str | None = None,
        log_level: str | None = None,
    ) -> Settings:
        """Return a validated copy with command-line values layered on top."""
        data = self.model_dump()
        data["discord"]["token"] = self.discord.token
        if token is not None:
            data["discord"]["token"] = SecretStr(token)
        if command_prefix is not None:
            data["discord"]["command_prefix"] = command_prefix
        if sounds_folder is not None:
            data["soundboard"]["sounds_folder"] = sounds_folder
        if commands_file is not None:
            data["soundboard"]["commands_file"] = commands_file
        if log_level is not None:
            data["log_level"] = log_level
        return type(self).model_validate(data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
