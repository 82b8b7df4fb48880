# topmark:header:start
#
#   project      : StatusKit
#   file         : termcolor.py
#   file_relpath : src/statuskit/status/termcolor.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Terminal status backend with per-kind styling.

`TermcolorStatusBackend` renders each report as ``"<kind>: <text>"`` with a
styled prefix, followed by one indented line per exception in the attached
error chain. Notes go to the console's standard output; warnings and errors
go to its error output.

At `ChatterLevel.MINIMAL`, notes are dropped before their text is rendered.
Warnings and errors are always shown.

Write failures (closed stream, broken pipe) are logged and swallowed; after
the first one the backend stops writing altogether.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from statuskit.cli_shared.console import ClickConsole
from statuskit.config.logging import get_logger
from statuskit.status.error_chain import describe_error, iter_error_chain
from statuskit.status.model import ChatterLevel, MessageKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from statuskit.cli_shared.console import StyleKwargs
    from statuskit.cli_shared.console_api import ConsoleLike
    from statuskit.config.logging import StatuskitLogger
    from statuskit.status.model import LazyMessage

logger: StatuskitLogger = get_logger(__name__)

#: Prefix style per message kind; every kind must be present.
KIND_STYLES: Final[dict[MessageKind, StyleKwargs]] = {
    MessageKind.NOTE: {"fg": "green", "bold": True},
    MessageKind.WARNING: {"fg": "yellow", "bold": True},
    MessageKind.ERROR: {"fg": "bright_red", "bold": True},
}

CAUSED_BY: Final[str] = "caused by: "
INDENT: Final[str] = "  "


class TermcolorStatusBackend:
    """Status backend that writes styled messages to a console.

    Args:
        chatter (ChatterLevel): Display threshold. Notes are suppressed at
            ``MINIMAL``.
        console (ConsoleLike | None): Console to write to. Defaults to a
            `ClickConsole` on ``sys.stdout`` / ``sys.stderr``.

    Attributes:
        chatter (ChatterLevel): Display threshold.
        console (ConsoleLike): Destination console.
        broken (bool): True once a write to the console has failed.
    """

    def __init__(
        self,
        chatter: ChatterLevel = ChatterLevel.NORMAL,
        *,
        console: ConsoleLike | None = None,
    ) -> None:
        self.chatter = chatter
        self.console = console or ClickConsole()
        self.broken = False

    def should_display(self, kind: MessageKind) -> bool:
        """Return True if a message of ``kind`` is shown at the current chatter level."""
        if kind is MessageKind.NOTE:
            return self.chatter > ChatterLevel.MINIMAL
        return True

    def _channel(self, kind: MessageKind) -> Callable[[str], None]:
        return {
            MessageKind.NOTE: self.console.print,
            MessageKind.WARNING: self.console.warn,
            MessageKind.ERROR: self.console.error,
        }[kind]

    def _prefix(self, kind: MessageKind) -> str:
        return self.console.styled(f"{kind.label}:", **KIND_STYLES[kind])

    def _write_lines(self, kind: MessageKind, lines: list[str]) -> None:
        if self.broken:
            return
        write = self._channel(kind)
        try:
            for line in lines:
                write(line)
        except (OSError, ValueError) as exc:
            # ValueError: write to a closed file
            self.broken = True
            logger.debug("Status output failed, further messages are dropped: %s", exc)

    def format_error_lines(self, err: BaseException) -> list[str]:
        """Return the indented lines describing ``err`` and its causes."""
        lines: list[str] = []
        for i, exc in enumerate(iter_error_chain(err)):
            lead = INDENT if i == 0 else INDENT + CAUSED_BY
            lines.append(lead + describe_error(exc))
        return lines

    def report(
        self,
        kind: MessageKind,
        message: LazyMessage,
        err: BaseException | None = None,
    ) -> None:
        """Display the message (and error chain) unless the chatter level hides it."""
        if self.broken:
            logger.trace("Output is broken, dropped [%s] message", kind.value)
            return
        if not self.should_display(kind):
            logger.trace("Suppressed [%s] message at chatter %s", kind.value, self.chatter.name)
            return
        lines = [f"{self._prefix(kind)} {message.render()}"]
        if err is not None:
            lines.extend(self.format_error_lines(err))
        self._write_lines(kind, lines)

    def note_highlighted(self, before: str, highlighted: str, after: str) -> None:
        """Emit a note whose middle part is emphasized.

        Args:
            before (str): Plain text preceding the highlighted part.
            highlighted (str): Text shown in bold.
            after (str): Plain text following the highlighted part.
        """
        kind = MessageKind.NOTE
        if self.broken or not self.should_display(kind):
            return
        text = before + self.console.styled(highlighted, bold=True) + after
        self._write_lines(kind, [f"{self._prefix(kind)} {text}"])

    def __repr__(self) -> str:
        return f"TermcolorStatusBackend(chatter={self.chatter.name})"
