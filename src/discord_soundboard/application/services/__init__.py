"""Application services."""

from discord_soundboard.application.services.playback_orchestrator import (
    PlaybackOrchestrator,
    PlaybackResult,
    PlaybackStatus,
)

__all__ = [
    "PlaybackOrchestrator",
    "PlaybackResult",
    "PlaybackStatus",
]
