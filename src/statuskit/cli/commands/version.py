# topmark:header:start
#
#   project      : StatusKit
#   file         : version.py
#   file_relpath : src/statuskit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""StatusKit `version` command.

Prints the current StatusKit version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from statuskit.constants import STATUSKIT_VERSION

if TYPE_CHECKING:
    from statuskit.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of StatusKit.",
)
def version_command() -> None:
    """Show the current version of StatusKit."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(console.styled(STATUSKIT_VERSION, bold=True))
