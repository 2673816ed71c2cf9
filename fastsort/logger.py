# Copyright Krafter SAS <developer@krafter.io>
# MIT License (see LICENSE file).

import logging
import os

from enum import Enum

from rich.logging import RichHandler


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogOutput(str, Enum):
    CONSOLE = "console"
    FILE = "file"
    BOTH = "both"


class LogFormat(str, Enum):
    TEXT = "text"
    TEXT_LIGHT = "text_light"


LOG_FORMATS = {
    LogFormat.TEXT: "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    LogFormat.TEXT_LIGHT: "%(name)s: %(message)s",
}


HANDLER_NAME_PREFIX = "fastsort."


def setup_logging(
    level: LogLevel | str = LogLevel.INFO,
    output: LogOutput = LogOutput.CONSOLE,
    format: LogFormat | str = LogFormat.TEXT_LIGHT,
    log_file: str | None = None,
    logger_name: str | None = None,
) -> logging.Logger:
    """
    Configure the root logger, or the named logger when given.

    Loggers live under several roots (`fastsort.sort`, `cli.command`), so the
    root logger is configured by default. Only the handlers installed by a
    previous call are replaced. Console output is rendered with rich.
    A custom format string can be given instead of a LogFormat.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(LogLevel(level).value)

    for handler in list(logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_NAME_PREFIX):
            logger.removeHandler(handler)
            handler.close()

    fmt = LOG_FORMATS.get(format, format)

    if output in (LogOutput.CONSOLE, LogOutput.BOTH):
        console_handler = RichHandler(show_path=False, rich_tracebacks=True)
        console_handler.set_name(f"{HANDLER_NAME_PREFIX}console")
        console_handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(console_handler)

    if output in (LogOutput.FILE, LogOutput.BOTH):
        if not log_file:
            raise ValueError("A log file is required when logging to a file")

        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.set_name(f"{HANDLER_NAME_PREFIX}file")
        file_handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(file_handler)

    return logger


__all__ = [
    "LogLevel",
    "LogOutput",
    "LogFormat",
    "LOG_FORMATS",
    "HANDLER_NAME_PREFIX",
    "setup_logging",
]
