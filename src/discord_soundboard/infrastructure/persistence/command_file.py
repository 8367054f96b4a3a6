"""Load the command table from its JSON file.

File format::

    [
        {"commands": ["airhorn", "horn"], "fileName": "airhorn"},
        {"commands": ["bruh"], "fileName": "bruh"}
    ]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from discord_soundboard.domain.shared.exceptions import ConfigError
from discord_soundboard.domain.shared.messages import ErrorMessages, LogTemplates
from discord_soundboard.domain.soundboard.entities import CommandTable

logger = logging.getLogger(__name__)


def load_command_table(path: str | Path) -> CommandTable:
    """Read and validate the commands file at *path*.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, is not a
            list of entries, or violates the table's alias rules.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(ErrorMessages.COMMANDS_FILE_UNREADABLE.format(path=path, error=e)) from e

    try:
        records = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(ErrorMessages.COMMANDS_FILE_INVALID_JSON.format(path=path, error=e)) from e

    if not isinstance(records, list):
        raise ConfigError(ErrorMessages.COMMANDS_FILE_NOT_A_LIST.format(path=path))

    table = CommandTable.load(records)
    logger.info(LogTemplates.COMMANDS_LOADED, len(table), len(table.sound_ids), path)
    return table
