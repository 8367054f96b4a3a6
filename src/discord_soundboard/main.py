#!/usr/bin/env python3
"""Main entry point for the Discord soundboard bot."""

from __future__ import annotations

import argparse
import json
import logging
import logging.config
import sys
from pathlib import Path

from pydantic import ValidationError

from discord_soundboard.domain.shared.exceptions import ConfigError
from discord_soundboard.domain.shared.messages import ErrorMessages, LogTemplates

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning(
            "Could not load %s, falling back to basic config", _LOGGING_CONFIG_PATH
        )
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. Flags override environment settings.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        description="Play sound clips in voice channels on prefixed chat commands.",
    )
    parser.add_argument("-t", "--token", default=None, help="bot token")
    parser.add_argument("-p", "--prefix", default=None, help="prefix for commands (default: ~)")
    parser.add_argument(
        "-s", "--sounds", default=None, help="folder where .mp3 sounds reside (default: sounds)"
    )
    parser.add_argument(
        "-c",
        "--commands",
        default=None,
        help="file containing all commands in JSON format (default: commands.json)",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    return parser


def main(argv: list[str] | None = None) -> int:
    from discord_soundboard.config.settings import get_settings

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings().with_overrides(
            token=args.token,
            command_prefix=args.prefix,
            sounds_folder=args.sounds,
            commands_file=args.commands,
            log_level=args.log_level,
        )
    except ValidationError as e:
        parser.error(str(e))

    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)

    token_value = settings.discord.token.get_secret_value()
    if not token_value:
        logger.error(ErrorMessages.DISCORD_TOKEN_REQUIRED)
        return 1

    logger.info(LogTemplates.BOT_STARTING, settings.environment)

    from discord_soundboard.config.container import create_container
    from discord_soundboard.infrastructure.discord.bot import create_bot

    container = create_container(settings)
    try:
        _ = container.command_table
    except ConfigError as e:
        logger.error(LogTemplates.COMMANDS_LOAD_FAILED, e.reason)
        return 1

    bot = create_bot(container, settings)

    try:
        logger.info(LogTemplates.BOT_STARTING_RUN)
        bot.run_with_graceful_shutdown(token_value)
        logger.info(LogTemplates.BOT_STOPPED)
        return 0
    except KeyboardInterrupt:
        logger.info(LogTemplates.BOT_KEYBOARD_INTERRUPT)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.BOT_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
