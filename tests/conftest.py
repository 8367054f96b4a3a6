import asyncio

import pytest

from discord_soundboard.application.interfaces.voice_connector import (
    VoiceConnection,
    VoiceConnector,
)
from discord_soundboard.config.settings import PlaybackSettings
from discord_soundboard.domain.shared.exceptions import JoinError
from discord_soundboard.domain.soundboard.entities import CommandTable
from discord_soundboard.domain.soundboard.services import CommandResolver
from discord_soundboard.domain.soundboard.state import ChannelResolver, VoicePresenceLookup
from discord_soundboard.domain.soundboard.value_objects import (
    PlaybackRequest,
    VoicePresence,
    VoiceTarget,
)

# ============================================================================
# Fakes
# ============================================================================


class FakeGuildState(ChannelResolver, VoicePresenceLookup):
    """In-memory channel→guild map and per-guild voice presences."""

    def __init__(self, channels=None, presences=None):
        self.channels = dict(channels or {})
        self.presences = {g: list(p) for g, p in (presences or {}).items()}

    def guild_for_channel(self, channel_id):
        return self.channels.get(channel_id)

    def voice_presences(self, guild_id):
        return list(self.presences.get(guild_id, []))


class FakeConnection(VoiceConnection):
    def __init__(self, connector, guild_id, channel_id):
        self._connector = connector
        self._guild_id = guild_id
        self.channel_id = channel_id

    @property
    def guild_id(self):
        return self._guild_id

    async def play_file(self, path):
        self._connector.calls.append(("play", self._guild_id, path))
        gate = self._connector.play_gates.get(self._guild_id)
        if gate is not None:
            await gate.wait()
        if self._connector.play_delay:
            await asyncio.sleep(self._connector.play_delay)
        if self._connector.play_error is not None:
            raise self._connector.play_error

    async def disconnect(self):
        self._connector.calls.append(("leave", self._guild_id))
        if self._connector.disconnect_error is not None:
            raise self._connector.disconnect_error


class FakeVoiceConnector(VoiceConnector):
    """Records join/play/leave calls in order; failures are injected per attribute."""

    def __init__(self):
        self.calls = []
        self.join_error = None
        self.join_delay = 0.0
        self.play_error = None
        self.play_delay = 0.0
        self.disconnect_error = None
        self.play_gates = {}

    async def join(self, guild_id, channel_id):
        self.calls.append(("join", guild_id, channel_id))
        if self.join_delay:
            await asyncio.sleep(self.join_delay)
        if self.join_error is not None:
            raise self.join_error
        return FakeConnection(self, guild_id, channel_id)

    def calls_for(self, guild_id):
        return [call for call in self.calls if call[1] == guild_id]


# ============================================================================
# Domain Fixtures
# ============================================================================


@pytest.fixture
def command_records():
    return [
        {"commands": ["airhorn", "horn"], "fileName": "airhorn"},
        {"commands": ["bruh"], "fileName": "bruh"},
    ]


@pytest.fixture
def command_table(command_records):
    return CommandTable.load(command_records)


@pytest.fixture
def guild_state():
    return FakeGuildState(
        channels={"C1": "G1", "C2": "G2"},
        presences={
            "G1": [VoicePresence(user_id="U1", channel_id="V1")],
            "G2": [VoicePresence(user_id="U2", channel_id="V2")],
        },
    )


@pytest.fixture
def resolver(command_table, guild_state):
    return CommandResolver(
        command_table,
        prefix="~",
        sounds_folder="sounds",
        channel_resolver=guild_state,
        presence_lookup=guild_state,
    )


@pytest.fixture
def playback_request():
    return PlaybackRequest(
        target=VoiceTarget(guild_id="G1", channel_id="V1"),
        file_path="sounds/airhorn.mp3",
    )


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def fast_playback_settings():
    return PlaybackSettings(
        join_timeout_s=0.5,
        playback_timeout_s=0.5,
        disconnect_timeout_s=0.5,
        shutdown_timeout_s=0.5,
    )


@pytest.fixture
def voice_connector():
    return FakeVoiceConnector()


@pytest.fixture
def orchestrator(voice_connector, fast_playback_settings):
    from discord_soundboard.application.services.playback_orchestrator import (
        PlaybackOrchestrator,
    )

    return PlaybackOrchestrator(voice_connector, fast_playback_settings)


@pytest.fixture
def join_error():
    return JoinError("gateway refused", guild_id="G1")


@pytest.fixture
def make_resolver(command_table):
    """Build a resolver over custom channel/presence state."""

    def _make(channels=None, presences=None, prefix="~", sounds_folder="sounds", table=None):
        state = FakeGuildState(channels=channels, presences=presences)
        return CommandResolver(
            table if table is not None else command_table,
            prefix=prefix,
            sounds_folder=sounds_folder,
            channel_resolver=state,
            presence_lookup=state,
        )

    return _make
