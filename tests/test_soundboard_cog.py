"""Tests for SoundboardCog message handling and cog setup."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from discord_soundboard.application.services.playback_orchestrator import PlaybackStatus
from discord_soundboard.domain.soundboard.value_objects import IncomingMessage, VoicePresence
from discord_soundboard.infrastructure.discord.cogs.soundboard_cog import SoundboardCog, setup


def _discord_message(content="~airhorn", author_id=1, channel_id=10):
    message = MagicMock()
    message.content = content
    message.author.id = author_id
    message.channel.id = channel_id
    return message


@pytest.fixture
def mock_bot():
    bot = MagicMock()
    bot.user.id = 999
    return bot


@pytest.fixture
def mock_container():
    container = MagicMock()
    container.command_resolver.resolve.return_value = None
    container.playback_orchestrator.play = AsyncMock()
    return container


class TestToIncoming:
    def test_converts_snowflakes_to_strings(self):
        incoming = SoundboardCog.to_incoming(_discord_message())

        assert incoming == IncomingMessage(author_id="1", channel_id="10", text="~airhorn")

    def test_empty_content_becomes_empty_text(self):
        incoming = SoundboardCog.to_incoming(_discord_message(content=None))

        assert incoming.text == ""


class TestHandleMessage:
    async def test_resolved_request_is_played(
        self, mock_bot, mock_container, playback_request
    ):
        mock_container.command_resolver.resolve.return_value = playback_request
        cog = SoundboardCog(mock_bot, mock_container)

        await cog.on_message(_discord_message())

        incoming, self_id = mock_container.command_resolver.resolve.call_args.args
        assert incoming.text == "~airhorn"
        assert self_id == "999"
        mock_container.playback_orchestrator.play.assert_awaited_once_with(playback_request)

    async def test_unresolved_message_plays_nothing(self, mock_bot, mock_container):
        cog = SoundboardCog(mock_bot, mock_container)

        result = await cog.handle_message(_discord_message("hello"))

        assert result is None
        mock_container.playback_orchestrator.play.assert_not_awaited()

    async def test_ignored_before_login(self, mock_bot, mock_container):
        mock_bot.user = None
        cog = SoundboardCog(mock_bot, mock_container)

        assert await cog.handle_message(_discord_message()) is None
        mock_container.command_resolver.resolve.assert_not_called()

    async def test_end_to_end_with_real_services(
        self, mock_bot, resolver, orchestrator, voice_connector
    ):
        container = MagicMock()
        container.command_resolver = resolver
        container.playback_orchestrator = orchestrator
        resolver._channel_resolver.channels["10"] = "G1"
        resolver._presence_lookup.presences["G1"].append(
            VoicePresence(user_id="1", channel_id="V7")
        )
        cog = SoundboardCog(mock_bot, container)

        result = await cog.handle_message(_discord_message("~horn"))

        assert result.status == PlaybackStatus.SUCCESS
        assert voice_connector.calls == [
            ("join", "G1", "V7"),
            ("play", "G1", "sounds/airhorn.mp3"),
            ("leave", "G1"),
        ]


class TestSetup:
    async def test_setup_adds_cog(self, mock_container):
        bot = MagicMock()
        bot.container = mock_container
        bot.add_cog = AsyncMock()

        await setup(bot)

        cog = bot.add_cog.call_args.args[0]
        assert isinstance(cog, SoundboardCog)
        assert cog.container is mock_container

    async def test_setup_without_container_fails(self):
        bot = MagicMock(spec=["add_cog"])

        with pytest.raises(RuntimeError, match="Container not found"):
            await setup(bot)
