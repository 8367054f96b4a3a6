"""Main Discord bot class integrating the DI container, cog lifecycle and graceful shutdown."""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from discord_soundboard.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...config.container import Container
    from ...config.settings import Settings

logger = logging.getLogger(__name__)

COGS = (
    "discord_soundboard.infrastructure.discord.cogs.soundboard_cog",
    "discord_soundboard.infrastructure.discord.cogs.event_cog",
)


class SoundboardBot(commands.Bot):
    def __init__(
        self,
        container: Container,
        settings: Settings,
        **kwargs,
    ) -> None:
        intents = discord.Intents.default()
        intents.message_content = True
        intents.voice_states = True
        intents.guilds = True

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            help_command=None,
            **kwargs,
        )

        self.container = container
        self.settings = settings
        self._shutdown_event = asyncio.Event()
        self._shutdown_task: asyncio.Task[None] | None = None
        container.set_bot(self)

    async def setup_hook(self) -> None:
        logger.info(LogTemplates.BOT_SETUP)

        try:
            await self.container.initialize()
            logger.info(LogTemplates.BOT_CONTAINER_INITIALIZED)
        except Exception as e:
            logger.exception(LogTemplates.BOT_CONTAINER_INIT_FAILED, e)
            raise

        await self._load_cogs()
        logger.info(LogTemplates.BOT_SETUP_COMPLETE)

    async def _load_cogs(self) -> None:
        loaded = 0
        failed = 0

        for cog in COGS:
            try:
                await self.load_extension(cog)
                logger.info(LogTemplates.BOT_COG_LOADED, cog)
                loaded += 1
            except Exception as e:
                logger.exception(LogTemplates.BOT_COG_LOAD_FAILED, cog, e)
                failed += 1

        logger.info(LogTemplates.BOT_COGS_LOADED_SUMMARY, loaded, failed)

    async def on_message(self, message: discord.Message) -> None:
        """Sound commands are matched by SoundboardCog, not the commands framework."""
        return None

    async def on_ready(self) -> None:
        logger.info(
            LogTemplates.BOT_READY,
            self.user,  # type: ignore
            self.user.id,  # type: ignore
        )
        logger.info(LogTemplates.BOT_CONNECTED_GUILDS, len(self.guilds))

        activity = discord.Activity(
            type=discord.ActivityType.listening,
            name=f"{self.settings.discord.command_prefix}<sound>",
        )
        await self.change_presence(activity=activity)

    async def close(self) -> None:
        logger.info(LogTemplates.BOT_SHUTTING_DOWN)

        try:
            await self.container.shutdown()
            logger.info(LogTemplates.BOT_CONTAINER_SHUTDOWN)
        except Exception as e:
            logger.warning(LogTemplates.BOT_CONTAINER_SHUTDOWN_ERROR, e)

        for vc in self.voice_clients:
            try:
                await vc.disconnect(force=True)
            except Exception as e:
                logger.warning(LogTemplates.BOT_VOICE_CLEANUP_ERROR, e)

        await super().close()
        self._shutdown_event.set()
        logger.info(LogTemplates.BOT_SHUTDOWN_COMPLETE)

    def request_shutdown(self, shutdown_timeout: float) -> asyncio.Task[None]:
        """Schedule a bounded close. Repeated signals reuse the pending task."""
        if self._shutdown_task is None:
            self._shutdown_task = asyncio.create_task(self._graceful_close(shutdown_timeout))
        return self._shutdown_task

    async def _graceful_close(self, shutdown_timeout: float) -> None:
        try:
            await asyncio.wait_for(self.close(), timeout=shutdown_timeout)
        except TimeoutError:
            logger.warning(LogTemplates.BOT_SHUTDOWN_TIMEOUT, shutdown_timeout)

    def run_with_graceful_shutdown(self, token: str, *, shutdown_timeout: float | None = None) -> None:
        if shutdown_timeout is None:
            # Leave headroom beyond the drain deadline for voice and gateway teardown.
            shutdown_timeout = self.settings.playback.shutdown_timeout_s + 10.0

        async def runner():
            async with self:
                loop = asyncio.get_running_loop()
                for sig in (signal.SIGINT, signal.SIGTERM):
                    loop.add_signal_handler(sig, self.request_shutdown, shutdown_timeout)
                await self.start(token)

        asyncio.run(runner())


def create_bot(container: Container, settings: Settings) -> SoundboardBot:
    return SoundboardBot(container=container, settings=settings)
