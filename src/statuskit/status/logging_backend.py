# topmark:header:start
#
#   project      : StatusKit
#   file         : logging_backend.py
#   file_relpath : src/statuskit/status/logging_backend.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Status backend that forwards reports to a `logging.Logger`.

Useful when status messages should end up in a log file next to other
records. The message is passed to the logger as a ``%s`` argument, so it is
only rendered if a handler actually emits the record.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from statuskit.config.logging import get_logger
from statuskit.constants import STATUS_LOGGER_NAME
from statuskit.status.model import ChatterLevel, MessageKind

if TYPE_CHECKING:
    from statuskit.status.model import LazyMessage

#: Logging level per message kind; every kind must be present.
KIND_LOG_LEVELS: Final[dict[MessageKind, int]] = {
    MessageKind.NOTE: logging.INFO,
    MessageKind.WARNING: logging.WARNING,
    MessageKind.ERROR: logging.ERROR,
}


class LoggingStatusBackend:
    """Forward status reports to a logger.

    Args:
        logger (logging.Logger | None): Destination logger. Defaults to the
            ``statuskit.status`` logger.
        chatter (ChatterLevel): Notes are dropped at ``MINIMAL``.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        chatter: ChatterLevel = ChatterLevel.NORMAL,
    ) -> None:
        self.logger = logger or get_logger(STATUS_LOGGER_NAME)
        self.chatter = chatter

    def report(
        self,
        kind: MessageKind,
        message: LazyMessage,
        err: BaseException | None = None,
    ) -> None:
        """Log the message at the level mapped from ``kind``."""
        if kind is MessageKind.NOTE and self.chatter < ChatterLevel.NORMAL:
            return
        level = KIND_LOG_LEVELS[kind]
        if not self.logger.isEnabledFor(level):
            return
        # Handler failures are routed to Handler.handleError() by logging itself.
        self.logger.log(level, "%s", message, exc_info=err)

    def __repr__(self) -> str:
        return f"LoggingStatusBackend(logger={self.logger.name!r}, chatter={self.chatter.name})"
