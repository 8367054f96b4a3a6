"""Shared Kernel

Cross-cutting exceptions, message templates and constrained types used by
every layer.
"""

from discord_soundboard.domain.shared.exceptions import (
    ConfigError,
    DisconnectError,
    DomainError,
    JoinError,
    PlaybackError,
    PlaybackLifecycleError,
)

__all__ = [
    "DomainError",
    "ConfigError",
    "PlaybackLifecycleError",
    "JoinError",
    "PlaybackError",
    "DisconnectError",
]
