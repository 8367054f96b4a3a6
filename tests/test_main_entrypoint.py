"""
Tests for main.py - Main Entry Point

Covers logging configuration, command-line flags layered over settings,
startup failures (missing token, bad command table) and the run loop exit codes.
"""

import json
import logging
from unittest.mock import MagicMock, PropertyMock, mock_open, patch

import pytest
from pydantic import SecretStr

from discord_soundboard.domain.shared.exceptions import ConfigError
from discord_soundboard.main import build_parser, main, setup_logging


class TestLoggingSetup:
    def _make_valid_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {},
            "loggers": {"discord": {"level": "WARNING"}},
            "root": {"level": "INFO", "handlers": []},
        }

    def test_dictconfig_called_when_json_exists(self):
        config = self._make_valid_config()
        m = mock_open(read_data=json.dumps(config))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig") as mock_dc,
        ):
            setup_logging()

            mock_dc.assert_called_once_with(config)

    def test_fallback_to_basicconfig_when_json_missing(self):
        with (
            patch("builtins.open", side_effect=FileNotFoundError),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging("WARNING")

            mock_bc.assert_called_once()
            assert mock_bc.call_args[1]["level"] == logging.WARNING

    def test_fallback_to_basicconfig_when_json_malformed(self):
        m = mock_open(read_data="{invalid json")
        with (
            patch("builtins.open", m),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()

    def test_root_logger_level_overridden(self):
        m = mock_open(read_data=json.dumps(self._make_valid_config()))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig"),
            patch("logging.getLogger") as mock_get_logger,
        ):
            mock_root = MagicMock()
            mock_get_logger.return_value = mock_root

            setup_logging("DEBUG")

            mock_root.setLevel.assert_called_once_with(logging.DEBUG)


class TestArgumentParser:
    def test_all_flags_default_to_none(self):
        args = build_parser().parse_args([])

        assert args.token is None
        assert args.prefix is None
        assert args.sounds is None
        assert args.commands is None
        assert args.log_level is None

    def test_short_flags(self):
        args = build_parser().parse_args(
            ["-t", "tok", "-p", "!", "-s", "clips", "-c", "cmds.json"]
        )

        assert args.token == "tok"
        assert args.prefix == "!"
        assert args.sounds == "clips"
        assert args.commands == "cmds.json"

    def test_long_flags(self):
        args = build_parser().parse_args(
            ["--token", "tok", "--prefix", "$", "--sounds", "s", "--commands", "c.json", "--log-level", "DEBUG"]
        )

        assert (args.token, args.prefix, args.sounds, args.commands, args.log_level) == (
            "tok",
            "$",
            "s",
            "c.json",
            "DEBUG",
        )


def _mock_settings(token="test_token_123"):
    settings = MagicMock()
    settings.discord.token = SecretStr(token)
    settings.log_level = "INFO"
    settings.environment = "test"
    return settings


@pytest.fixture
def mock_settings():
    return _mock_settings()


@pytest.fixture
def patched_get_settings(mock_settings):
    with patch("discord_soundboard.config.settings.get_settings") as mock_get:
        mock_get.return_value.with_overrides.return_value = mock_settings
        yield mock_get


class TestMainFunction:
    def test_main_returns_error_without_token(self, patched_get_settings):
        patched_get_settings.return_value.with_overrides.return_value = _mock_settings(token="")

        with patch("discord_soundboard.main.setup_logging"):
            exit_code = main([])

        assert exit_code == 1

    def test_main_passes_flags_as_overrides(self, patched_get_settings):
        mock_bot = MagicMock()
        with (
            patch("discord_soundboard.main.setup_logging"),
            patch("discord_soundboard.config.container.create_container"),
            patch(
                "discord_soundboard.infrastructure.discord.bot.create_bot", return_value=mock_bot
            ),
        ):
            main(["-t", "cli-token", "-p", "!", "-s", "clips", "-c", "cmds.json"])

        patched_get_settings.return_value.with_overrides.assert_called_once_with(
            token="cli-token",
            command_prefix="!",
            sounds_folder="clips",
            commands_file="cmds.json",
            log_level=None,
        )

    def test_main_rejects_invalid_flag_values(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["-p", ""])

        assert exc_info.value.code == 2

    def test_main_returns_error_on_bad_command_table(self, patched_get_settings, caplog):
        container = MagicMock()
        type(container).command_table = PropertyMock(
            side_effect=ConfigError("Duplicate alias 'horn'")
        )
        with (
            patch("discord_soundboard.main.setup_logging"),
            patch("discord_soundboard.config.container.create_container", return_value=container),
            patch("discord_soundboard.infrastructure.discord.bot.create_bot") as mock_create_bot,
        ):
            exit_code = main([])

        assert exit_code == 1
        mock_create_bot.assert_not_called()
        assert "Duplicate alias 'horn'" in caplog.text

    def test_main_successful_run(self, patched_get_settings, mock_settings):
        mock_container = MagicMock()
        mock_bot = MagicMock()

        with (
            patch("discord_soundboard.main.setup_logging"),
            patch(
                "discord_soundboard.config.container.create_container",
                return_value=mock_container,
            ) as mock_create_container,
            patch(
                "discord_soundboard.infrastructure.discord.bot.create_bot", return_value=mock_bot
            ) as mock_create_bot,
        ):
            exit_code = main([])

        assert exit_code == 0
        mock_create_container.assert_called_once_with(mock_settings)
        mock_create_bot.assert_called_once_with(mock_container, mock_settings)
        mock_bot.run_with_graceful_shutdown.assert_called_once_with("test_token_123")

    def test_main_handles_keyboard_interrupt(self, patched_get_settings):
        mock_bot = MagicMock()
        mock_bot.run_with_graceful_shutdown.side_effect = KeyboardInterrupt()

        with (
            patch("discord_soundboard.main.setup_logging"),
            patch("discord_soundboard.config.container.create_container"),
            patch(
                "discord_soundboard.infrastructure.discord.bot.create_bot", return_value=mock_bot
            ),
        ):
            exit_code = main([])

        assert exit_code == 0

    def test_main_handles_exception(self, patched_get_settings):
        mock_bot = MagicMock()
        mock_bot.run_with_graceful_shutdown.side_effect = RuntimeError("Bot crashed!")

        with (
            patch("discord_soundboard.main.setup_logging"),
            patch("discord_soundboard.config.container.create_container"),
            patch(
                "discord_soundboard.infrastructure.discord.bot.create_bot", return_value=mock_bot
            ),
        ):
            exit_code = main([])

        assert exit_code == 1
