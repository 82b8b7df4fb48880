# topmark:header:start
#
#   project      : StatusKit
#   file         : emit.py
#   file_relpath : src/statuskit/cli/commands/emit.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""StatusKit `emit` command.

Reports one message through the status backend configured on the group, so
shell scripts get the same note/warning/error rendering as Python callers.

Examples:
    ```bash
    statuskit emit note "processed {} files" 12
    statuskit emit error "cannot open {}" data.csv --caused-by "permission denied"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from statuskit.cli.options import KIND_PARAM
from statuskit.cli_shared.exit_codes import ExitCode
from statuskit.config.logging import get_logger
from statuskit.core.errors import StatuskitError
from statuskit.status.helpers import report_message
from statuskit.status.model import MessageKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from statuskit.config.logging import StatuskitLogger
    from statuskit.status.backend import StatusBackend

logger: StatuskitLogger = get_logger(__name__)


def build_error_chain(descriptions: Sequence[str]) -> BaseException | None:
    """Build a chained exception from outermost to innermost description.

    ``["a", "b"]`` yields an error ``a`` whose ``__cause__`` is an error ``b``.

    Args:
        descriptions (Sequence[str]): Error descriptions, outermost first.

    Returns:
        BaseException | None: The outermost error, or ``None`` if ``descriptions`` is empty.
    """
    cause: BaseException | None = None
    for text in reversed(descriptions):
        exc = StatuskitError(text)
        exc.__cause__ = cause
        cause = exc
    return cause


@click.command(
    name="emit",
    help="Report a note, warning or error. TEMPLATE uses '{}' placeholders filled from ARGS.",
)
@click.argument("kind", type=KIND_PARAM)
@click.argument("template")
@click.argument("args", nargs=-1)
@click.option(
    "--caused-by",
    "caused_by",
    multiple=True,
    metavar="TEXT",
    help="Attach an error with this description; repeat to chain causes (outermost first).",
)
@click.option(
    "--exit-code/--no-exit-code",
    "exit_code",
    default=False,
    help="Exit with status 1 after reporting an error.",
)
def emit_command(
    *,
    kind: MessageKind,
    template: str,
    args: tuple[str, ...],
    caused_by: tuple[str, ...],
    exit_code: bool,
) -> None:
    """Report one message through the configured status backend.

    Args:
        kind (MessageKind): Message kind (``note``, ``warning`` or ``error``).
        template (str): Message template.
        args (tuple[str, ...]): Positional arguments for the template.
        caused_by (tuple[str, ...]): Error chain descriptions, outermost first.
        exit_code (bool): Whether an error report makes the command fail.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    status: StatusBackend = ctx.obj["status"]

    err: BaseException | None = build_error_chain(caused_by)
    logger.debug("emit %s %r args=%r error=%r", kind.label, template, args, err)
    report_message(status, kind, template, *args, err=err)

    if exit_code and kind is MessageKind.ERROR:
        ctx.exit(ExitCode.FAILURE)
