"""
Application Interfaces (Ports)

Abstract interfaces that define contracts between the application
layer and infrastructure adapters. These are the "ports" in
hexagonal architecture.
"""

from discord_soundboard.application.interfaces.voice_connector import (
    VoiceConnection,
    VoiceConnector,
)

__all__ = [
    "VoiceConnector",
    "VoiceConnection",
]
