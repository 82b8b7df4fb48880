# topmark:header:start
#
#   project      : StatusKit
#   file         : errors.py
#   file_relpath : src/statuskit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Exceptions raised by StatusKit outside the CLI.

Status reporting itself never raises; these errors come from the setup
path (reading configuration, selecting a backend). The CLI translates them
into Click exceptions with dedicated exit codes.
"""

from __future__ import annotations


class StatuskitError(Exception):
    """Base class for all StatusKit errors."""


class ConfigError(StatuskitError):
    """Configuration is unreadable, malformed, or holds an invalid value.

    Attributes:
        source (str | None): The file or environment variable the problem came from.
    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source
