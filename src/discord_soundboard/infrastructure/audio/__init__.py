"""Audio source construction for local sound clips."""

from discord_soundboard.infrastructure.audio.ffmpeg_source import FFmpegConfig, create_source

__all__ = [
    "FFmpegConfig",
    "create_source",
]
