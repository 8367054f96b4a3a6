"""
FFmpeg Audio Source

Builds discord.py audio sources for sound clips stored on local disk.
"""

from __future__ import annotations

from dataclasses import dataclass

import discord


@dataclass(frozen=True)
class FFmpegConfig:
    """Configuration for FFmpeg audio processing."""

    # Audio processing
    disable_video: bool = True
    volume: float = 1.0

    # Optional ffmpeg binary override (discord.py defaults to "ffmpeg" on PATH)
    executable: str = "ffmpeg"

    def get_before_options(self) -> str:
        """Get FFmpeg before_options string."""
        # Local files need no reconnect/stream flags.
        return "-nostdin"

    def get_options(self) -> str:
        """Get FFmpeg options string."""
        opts = []
        if self.disable_video:
            opts.append("-vn")
        return " ".join(opts)


def create_source(path: str, config: FFmpegConfig | None = None) -> discord.PCMVolumeTransformer:
    """Create an audio source for a local file.

    Args:
        path: Path to the sound file.
        config: FFmpeg-specific configuration.

    Returns:
        A PCMVolumeTransformer wrapping an FFmpegPCMAudio source.
    """
    config = config or FFmpegConfig()
    source = discord.FFmpegPCMAudio(
        path,
        executable=config.executable,
        before_options=config.get_before_options(),
        options=config.get_options(),
    )
    return discord.PCMVolumeTransformer(source, volume=max(0.0, min(2.0, config.volume)))
