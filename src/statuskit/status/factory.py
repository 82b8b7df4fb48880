# topmark:header:start
#
#   project      : StatusKit
#   file         : factory.py
#   file_relpath : src/statuskit/status/factory.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Build a concrete status backend from a `StatusConfig`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from statuskit.cli_shared.color import resolve_color_mode
from statuskit.cli_shared.console import ClickConsole
from statuskit.config.logging import get_logger
from statuskit.config.types import BackendKind
from statuskit.status.backend import NoopStatusBackend
from statuskit.status.logging_backend import LoggingStatusBackend
from statuskit.status.termcolor import TermcolorStatusBackend

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from statuskit.cli_shared.console_api import ConsoleLike
    from statuskit.config.logging import StatuskitLogger
    from statuskit.config.model import StatusConfig
    from statuskit.status.backend import StatusBackend

logger: StatuskitLogger = get_logger(__name__)


def create_backend(
    config: StatusConfig,
    *,
    console: ConsoleLike | None = None,
    log: logging.Logger | None = None,
) -> StatusBackend:
    """Return the status backend selected by ``config``.

    Args:
        config (StatusConfig): Resolved configuration.
        console (ConsoleLike | None): Console for the terminal backend. When omitted, a
            `ClickConsole` is created with color resolved from ``config.color_mode``.
        log (logging.Logger | None): Logger for the logging backend.

    Returns:
        StatusBackend: A new backend instance.
    """

    def _terminal() -> StatusBackend:
        term_console: ConsoleLike = console or ClickConsole(
            enable_color=resolve_color_mode(color_mode=config.color_mode)
        )
        return TermcolorStatusBackend(config.chatter, console=term_console)

    builders: dict[BackendKind, Callable[[], StatusBackend]] = {
        BackendKind.NOOP: NoopStatusBackend,
        BackendKind.TERMINAL: _terminal,
        BackendKind.LOG: lambda: LoggingStatusBackend(log, chatter=config.chatter),
    }
    backend: StatusBackend = builders[config.backend]()
    logger.debug("Created status backend %r", backend)
    return backend
