# topmark:header:start
#
#   project      : StatusKit
#   file         : logging.py
#   file_relpath : src/statuskit/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Internal StatusKit logging with a TRACE level.

This module extends the standard logging module with a custom TRACE level, a
specialized logger class and colored output formatting.

Internal logging is strictly separate from user-facing status output: status
backends write notices for the end user, while this module serves developers
who need to see what StatusKit itself is doing.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from statuskit.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class StatuskitLogger(logging.Logger):
    """Logger class with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(StatuskitLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

#: Accepted level names (upper case) for env and CLI resolution.
LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Thresholds are checked from the most to the least severe.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors log records with `yachalk` based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        message = super().format(record)
        for threshold, colorize in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return colorize(message)
        # Below TRACE
        return chalk.dim.red(message)


def level_from_name(value: str | None) -> int | None:
    """Translate a level token (``"TRACE"``, ``"debug"``, ``"10"``) into a level number.

    Args:
        value (str | None): Level name or numeric string. Surrounding whitespace is ignored.

    Returns:
        int | None: The numeric logging level, or ``None`` when the token is empty or unknown.
    """
    if not value:
        return None
    token = value.strip().upper()
    if token.isdigit():
        return int(token)
    return LEVEL_NAMES.get(token)


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors ``STATUSKIT_LOG_LEVEL`` (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    return level_from_name(os.environ.get(ENV_LOG_LEVEL))


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Configure the root logger with a log level and colored output.

    If ``level`` is None, the environment is consulted via `resolve_env_log_level`.
    The default is CRITICAL so StatusKit stays silent unless asked otherwise.

    Records are written to ``stream`` (stderr by default) so that internal
    diagnostics never interleave with notes written to stdout.

    Args:
        level (int | None): Logging level for the root logger.
        stream (TextIO | None): Destination stream for the log handler.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> StatuskitLogger:
    """Retrieve a StatuskitLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        StatuskitLogger: A StatuskitLogger instance.
    """
    return cast("StatuskitLogger", logging.getLogger(name))
