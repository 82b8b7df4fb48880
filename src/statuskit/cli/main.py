# topmark:header:start
#
#   project      : StatusKit
#   file         : main.py
#   file_relpath : src/statuskit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Click entry point for the ``statuskit`` command.

Group-level options are resolved once into ``ctx.obj``:

- ``console``: the `ConsoleLike` used for direct program output;
- ``config``: the frozen `StatusConfig`;
- ``status``: the `StatusBackend` built from that configuration.

Subcommands report through ``ctx.obj["status"]`` and never pick a backend
themselves.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from statuskit.cli.commands.emit import emit_command
from statuskit.cli.commands.version import version_command
from statuskit.cli.errors import StatuskitConfigError
from statuskit.cli.options import (
    common_color_options,
    common_config_options,
    common_status_options,
    common_verbose_options,
    effective_color_mode,
    resolve_log_level,
)
from statuskit.cli_shared.color import resolve_color_mode
from statuskit.cli_shared.console import ClickConsole
from statuskit.config.logging import get_logger, setup_logging
from statuskit.config.model import MutableStatusConfig
from statuskit.core.errors import ConfigError
from statuskit.status.factory import create_backend

if TYPE_CHECKING:
    from statuskit.cli_shared.color import ColorMode
    from statuskit.config.model import StatusConfig
    from statuskit.config.types import BackendKind
    from statuskit.status.model import ChatterLevel

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    chatter: ChatterLevel | None,
    backend: BackendKind | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Initialize logging, configuration, console and status backend on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Color mode from ``--color``/``--no-color``, if given.
        chatter (ChatterLevel | None): Chatter level from ``--chatter``, if given.
        backend (BackendKind | None): Backend from ``--backend``, if given.
        config_paths (tuple[str, ...]): Extra config files from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.

    Raises:
        StatuskitConfigError: If a configuration source is unreadable or invalid.
    """
    ctx.ensure_object(dict)

    setup_logging(level=resolve_log_level(verbose, quiet))

    try:
        draft: MutableStatusConfig = MutableStatusConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigError as exc:
        raise StatuskitConfigError(str(exc)) from exc

    config: StatusConfig = draft.apply_cli_args(
        {"chatter": chatter, "color_mode": color_mode, "backend": backend}
    ).freeze()
    logger.debug("Resolved status config: %s", config)

    enable_color: bool = resolve_color_mode(color_mode=config.color_mode)
    ctx.color = enable_color
    console = ClickConsole(enable_color=enable_color)

    ctx.obj["console"] = console
    ctx.obj["config"] = config
    ctx.obj["status"] = create_backend(config, console=console)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="StatusKit CLI: report notes, warnings and errors through a configurable backend.",
)
@common_verbose_options
@common_color_options
@common_status_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    chatter: ChatterLevel | None,
    backend: BackendKind | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the StatusKit CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=effective_color_mode(color_mode, no_color),
        chatter=chatter,
        backend=backend,
        config_paths=config_paths,
        no_config=no_config,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'statuskit emit KIND TEMPLATE [ARGS]...' to report a message.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(emit_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
