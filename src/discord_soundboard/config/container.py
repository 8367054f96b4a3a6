"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for the command table, transport adapters and
services. Components are created on-demand and cached for reuse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.shared.messages import ErrorMessages

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from discord.ext.commands import Bot

    from ..application.interfaces.voice_connector import VoiceConnector
    from ..application.services.playback_orchestrator import PlaybackOrchestrator
    from ..domain.soundboard.entities import CommandTable
    from ..domain.soundboard.services import CommandResolver
    from ..infrastructure.discord.adapters.guild_state import DiscordGuildState
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    This container manages all application dependencies and their lifecycle.
    Components are lazily initialized when first accessed.
    """

    settings: Settings
    _bot: Bot | None = None

    # Configuration
    _command_table: CommandTable | None = None

    # Infrastructure adapters
    _guild_state: DiscordGuildState | None = None
    _voice_connector: VoiceConnector | None = None

    # Services
    _command_resolver: CommandResolver | None = None
    _playback_orchestrator: PlaybackOrchestrator | None = None

    def set_bot(self, bot: Bot) -> None:
        """Set the Discord bot instance."""
        self._bot = bot

    @property
    def bot(self) -> Bot:
        """Get the Discord bot instance."""
        if self._bot is None:
            raise RuntimeError(ErrorMessages.BOT_NOT_INITIALIZED)
        return self._bot

    # === Configuration ===

    @property
    def command_table(self) -> CommandTable:
        """Get the command table, loading it from the commands file on first access.

        Raises:
            ConfigError: If the commands file cannot be loaded.
        """
        if self._command_table is None:
            from ..infrastructure.persistence.command_file import load_command_table

            self._command_table = load_command_table(self.settings.soundboard.commands_file)
        return self._command_table

    # === Infrastructure Adapters ===

    @property
    def guild_state(self) -> DiscordGuildState:
        """Get the channel/voice-presence lookup over the client cache."""
        if self._guild_state is None:
            from ..infrastructure.discord.adapters.guild_state import DiscordGuildState

            self._guild_state = DiscordGuildState(self.bot)
        return self._guild_state

    @property
    def voice_connector(self) -> VoiceConnector:
        """Get the voice connector."""
        if self._voice_connector is None:
            from ..infrastructure.discord.adapters.voice_connector import DiscordVoiceConnector

            self._voice_connector = DiscordVoiceConnector(self.bot, self.settings.playback)
        return self._voice_connector

    # === Services ===

    @property
    def command_resolver(self) -> CommandResolver:
        """Get the command resolver."""
        if self._command_resolver is None:
            from ..domain.soundboard.services import CommandResolver

            self._command_resolver = CommandResolver(
                self.command_table,
                prefix=self.settings.discord.command_prefix,
                sounds_folder=self.settings.soundboard.sounds_folder,
                channel_resolver=self.guild_state,
                presence_lookup=self.guild_state,
            )
        return self._command_resolver

    @property
    def playback_orchestrator(self) -> PlaybackOrchestrator:
        """Get the playback orchestrator."""
        if self._playback_orchestrator is None:
            from ..application.services.playback_orchestrator import PlaybackOrchestrator

            self._playback_orchestrator = PlaybackOrchestrator(
                self.voice_connector, self.settings.playback
            )
        return self._playback_orchestrator

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Load the command table so a bad file fails before any event is handled."""
        _ = self.command_table

    async def shutdown(self) -> None:
        """Stop accepting sound requests and wait for in-flight ones to finish."""
        if self._playback_orchestrator is None:
            return

        self._playback_orchestrator.shutdown()
        await self._playback_orchestrator.drain(self.settings.playback.shutdown_timeout_s)


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
