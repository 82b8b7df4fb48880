# topmark:header:start
#
#   project      : StatusKit
#   file         : capture.py
#   file_relpath : src/statuskit/status/capture.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""In-memory backend that records reports, for tests and tooling.

`CapturingStatusBackend` keeps one `CapturedReport` per ``report`` call, in
call order. A ``render`` policy controls which reports get their text
materialized; skipped reports are recorded with ``text=None`` and their
arguments are never formatted.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from statuskit.config.logging import get_logger

if TYPE_CHECKING:
    from statuskit.config.logging import StatuskitLogger
    from statuskit.status.model import LazyMessage, MessageKind

logger: StatuskitLogger = get_logger(__name__)


@dataclass(frozen=True)
class CapturedReport:
    """One recorded report.

    Attributes:
        kind (MessageKind): Classification of the message.
        text (str | None): Rendered text, or ``None`` when rendering was skipped.
        error (BaseException | None): The attached error, if any.
    """

    kind: MessageKind
    text: str | None
    error: BaseException | None = None

    @property
    def has_error(self) -> bool:
        """Return True if an error was attached to the report."""
        return self.error is not None


@dataclass
class CapturingStatusBackend:
    """Backend that appends every report to `reports`.

    Attributes:
        render (bool | Callable[[MessageKind], bool]): Whether to render the
            message text, either for all kinds or decided per kind.
        reports (list[CapturedReport]): Recorded reports in call order.
    """

    render: bool | Callable[[MessageKind], bool] = True
    reports: list[CapturedReport] = field(default_factory=lambda: [])

    def _should_render(self, kind: MessageKind) -> bool:
        if callable(self.render):
            return self.render(kind)
        return self.render

    def report(
        self,
        kind: MessageKind,
        message: LazyMessage,
        err: BaseException | None = None,
    ) -> None:
        """Record the report, rendering its text if the policy allows it."""
        text: str | None = message.render() if self._should_render(kind) else None
        self.reports.append(CapturedReport(kind=kind, text=text, error=err))
        logger.trace("Captured [%s]: %r", kind.value, text)

    def kinds(self) -> list[MessageKind]:
        """Return the kinds of all recorded reports, in call order."""
        return [r.kind for r in self.reports]

    def texts(self) -> list[str | None]:
        """Return the rendered texts of all recorded reports, in call order."""
        return [r.text for r in self.reports]

    def clear(self) -> None:
        """Forget all recorded reports."""
        self.reports.clear()

    def __iter__(self) -> Iterator[CapturedReport]:
        return iter(self.reports)

    def __len__(self) -> int:
        return len(self.reports)
