# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/statuskit/cli/options.py
#   project      : StatusKit
#   license      : MIT
#   copyright    : (c) 2025 StatusKit contributors
#
# topmark:header:end

"""Common CLI option utilities for the StatusKit command line.

This module centralizes reusable options (verbosity, color, status backend,
configuration) and their resolution logic, so the group and its commands
can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from statuskit.cli.cli_types import TokenChoiceParam
from statuskit.cli.errors import StatuskitUsageError
from statuskit.cli_shared.color import ColorMode
from statuskit.config.logging import TRACE_LEVEL, resolve_env_log_level
from statuskit.config.types import BackendKind, parse_chatter_level
from statuskit.status.model import ChatterLevel, MessageKind

P = ParamSpec("P")
R = TypeVar("R")

CHATTER_PARAM: TokenChoiceParam[ChatterLevel] = TokenChoiceParam(
    "chatter", parse_chatter_level, [m.name.lower() for m in ChatterLevel]
)
BACKEND_PARAM: TokenChoiceParam[BackendKind] = TokenChoiceParam(
    "backend", BackendKind.parse, [m.value for m in BackendKind]
)
KIND_PARAM: TokenChoiceParam[MessageKind] = TokenChoiceParam(
    "kind", MessageKind.parse, [m.value for m in MessageKind]
)


def resolve_log_level(verbose_count: int, quiet_count: int) -> int:
    """Resolve the internal logging level from the verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The logging level.

    Raises:
        StatuskitUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set CRITICAL level.
        Otherwise ``STATUSKIT_LOG_LEVEL`` applies, defaulting to WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise StatuskitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.CRITICAL
    return resolve_env_log_level() or logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` options (internal logging level).

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase internal log verbosity. Repeat up to three times.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Silence internal logging.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_status_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--chatter`` and ``--backend`` options.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with status options added.
    """
    f = click.option(
        "--chatter",
        "chatter",
        type=CHATTER_PARAM,
        default=None,
        help="How much to report: 'minimal' hides notes, 'normal' (default) shows everything.",
    )(f)
    f = click.option(
        "--backend",
        "backend",
        type=BACKEND_PARAM,
        default=None,
        help="Where messages go: terminal (default), log, or noop.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and ``--config`` options.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore statuskit.toml / pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def effective_color_mode(color_mode: str | None, no_color: bool) -> ColorMode | None:
    """Combine ``--color`` and ``--no-color``; ``None`` means not given on the command line."""
    if no_color:
        return ColorMode.NEVER
    return ColorMode(color_mode) if color_mode else None
