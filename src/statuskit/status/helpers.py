# topmark:header:start
#
#   project      : StatusKit
#   file         : helpers.py
#   file_relpath : src/statuskit/status/helpers.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Call-site helpers for reporting notes, warnings and errors.

Each helper packages the template and its arguments into a `LazyMessage`
and performs exactly one ``dest.report(...)`` call. Nothing is formatted,
buffered or deduplicated here; the backend decides whether the text is ever
rendered.

Example:
    ```python
    from statuskit.status import error, note, warning

    note(status, "starting pass {0}", 1)
    warning(status, "retry {0} of {1}", 2, 5)
    error(status, "build failed", err=exc)
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from statuskit.status.model import LazyMessage, MessageKind

if TYPE_CHECKING:
    from statuskit.status.backend import StatusBackend


def report_message(
    dest: StatusBackend,
    kind: MessageKind,
    template: str,
    *args: object,
    err: BaseException | None = None,
) -> None:
    """Report a message of the given kind to ``dest``.

    Args:
        dest (StatusBackend): Backend receiving the report.
        kind (MessageKind): Classification of the message.
        template (str): ``str.format`` template of the message.
        *args (object): Positional arguments for the template.
        err (BaseException | None): Optional error to show along with the message.
    """
    dest.report(kind, LazyMessage(template, args), err)


def note(
    dest: StatusBackend,
    template: str,
    *args: object,
    err: BaseException | None = None,
) -> None:
    """Report an informational message.

    An error may be attached, although `warning` or `error` are the usual
    choice when one is available.
    """
    report_message(dest, MessageKind.NOTE, template, *args, err=err)


def warning(
    dest: StatusBackend,
    template: str,
    *args: object,
    err: BaseException | None = None,
) -> None:
    """Report a recoverable problem, optionally with the error behind it."""
    report_message(dest, MessageKind.WARNING, template, *args, err=err)


def error(
    dest: StatusBackend,
    template: str,
    *args: object,
    err: BaseException | None = None,
) -> None:
    """Report a failure, optionally with the error behind it."""
    report_message(dest, MessageKind.ERROR, template, *args, err=err)
