"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ConfigError(DomainError):
    """Raised when the command table cannot be loaded or trusted.

    Startup-fatal: the bot must not connect with a table it cannot route.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason, code="CONFIG_ERROR")
        self.reason = reason


class PlaybackLifecycleError(DomainError):
    """Base for per-event join/play/leave failures. Never fatal to the process."""

    def __init__(self, message: str, guild_id: str | None = None, code: str | None = None) -> None:
        super().__init__(message, code=code)
        self.guild_id = guild_id


class JoinError(PlaybackLifecycleError):
    """Raised when a voice connection cannot be acquired."""

    def __init__(self, message: str, guild_id: str | None = None) -> None:
        super().__init__(message, guild_id=guild_id, code="JOIN_ERROR")


class PlaybackError(PlaybackLifecycleError):
    """Raised when a sound file cannot be streamed to completion."""

    def __init__(self, message: str, guild_id: str | None = None) -> None:
        super().__init__(message, guild_id=guild_id, code="PLAYBACK_ERROR")


class DisconnectError(PlaybackLifecycleError):
    """Raised when releasing a voice connection fails."""

    def __init__(self, message: str, guild_id: str | None = None) -> None:
        super().__init__(message, guild_id=guild_id, code="DISCONNECT_ERROR")
