"""Console logging formatter that colours the level name."""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Any


class ColoredFormatter(logging.Formatter):
    """Wraps ``levelname`` in ANSI colour codes when writing to a terminal.

    Plain output is produced when ``NO_COLOR`` is set or the target stream is
    not a TTY, so log files and CI output stay free of escape codes.
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(self, *args: Any, stream: IO[str] | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.stream = stream

    def use_color(self) -> bool:
        if "NO_COLOR" in os.environ:
            return False
        isatty = getattr(self.stream or sys.stdout, "isatty", None)
        return bool(isatty and isatty())

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno)
        if color is None or not self.use_color():
            return super().format(record)
        # Format a copy so other handlers still see the plain level name.
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)
